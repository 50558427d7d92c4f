"""
Pipeline schema for drone-riot-conv.

This module defines the Drone pipeline record the converter understands and
the YAML codec around it. Only ``kind``, ``name``, ``parallelism`` and
``type`` are inspected; every other top-level key is captured in ``extra``
so that re-encoded copies keep it, in its original position relative to the
other unknown keys.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, StrictInt, StrictStr, ValidationError, field_validator

from .common.base import BaseSchema

# Top-level keys mapped onto named fields; everything else lands in `extra`.
KNOWN_KEYS = ("kind", "name", "parallelism", "type")

MERGE_TAG = "tag:yaml.org,2002:merge"


class PipelineDecodeError(ValueError):
    """Raised when a YAML document cannot be decoded into a Pipeline."""


class PipelineEncodeError(RuntimeError):
    """Raised when a Pipeline cannot be serialized back to YAML."""


# YAML 1.2 core schema scalars, plus merge keys. Unlike PyYAML's YAML 1.1
# defaults, `yes`, `off`, `12:30`, `0755` and dates stay strings.
CORE_SCHEMA_RESOLVERS = [
    ("tag:yaml.org,2002:bool",
     re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
     list("tTfF")),
    ("tag:yaml.org,2002:int",
     re.compile(r"^(?:[-+]?(?:0|[1-9][0-9]*)|0o[0-7]+|0x[0-9a-fA-F]+)$"),
     list("-+0123456789")),
    ("tag:yaml.org,2002:float",
     re.compile(r"""^(?:[-+]?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?
                    |[-+]?[0-9]+[eE][-+]?[0-9]+
                    |[-+]?\.(?:inf|Inf|INF)
                    |\.(?:nan|NaN|NAN))$""", re.X),
     list("-+0123456789.")),
    ("tag:yaml.org,2002:null",
     re.compile(r"^(?:~|null|Null|NULL|)$"),
     ["~", "n", "N", ""]),
    (MERGE_TAG, re.compile(r"^(?:<<)$"), ["<"]),
]


def _use_core_schema(cls: type) -> type:
    cls.yaml_implicit_resolvers = {}
    for tag, regexp, first in CORE_SCHEMA_RESOLVERS:
        cls.add_implicit_resolver(tag, regexp, first)
    return cls


@_use_core_schema
class PipelineLoader(yaml.SafeLoader):
    """Safe loader using YAML 1.2 core scalars that rejects duplicate keys."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> Dict[Any, Any]:
        seen = set()
        for key_node, _ in node.value:
            if not isinstance(key_node, yaml.ScalarNode) or key_node.tag == MERGE_TAG:
                continue
            key = self.construct_object(key_node)
            if key in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping", node.start_mark,
                    f"found duplicate key {key!r}", key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


@_use_core_schema
class PipelineDumper(yaml.SafeDumper):
    """Safe dumper that indents block sequences under their parent key.

    Shares the loader's scalar resolution, so strings such as ``yes`` are
    written plain while ``'true'`` stays quoted.
    """

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


class Pipeline(BaseSchema):
    """A single Drone pipeline document.

    Attributes:
        kind: Document kind; its absence marks a pre-0.8 or foreign document
        name: Pipeline name, suffixed with the instance number on fan-out
        parallelism: Number of copies to emit; None means leave as is
        type_: Pipeline runner type, serialized under the key ``type``
        extra: All other top-level keys, in source order
    """

    kind: StrictStr = Field(..., description="Document kind")
    name: StrictStr = Field(..., description="Pipeline name")
    parallelism: Optional[StrictInt] = Field(default=None, description="Requested number of copies")
    type_: StrictStr = Field(..., alias="type", description="Pipeline runner type")
    extra: Dict[str, Any] = Field(default_factory=dict, description="Unrecognized top-level keys")

    @field_validator("parallelism")
    @classmethod
    def validate_parallelism(cls, v: Optional[int]) -> Optional[int]:
        """Validate parallelism is non-negative."""
        if v is not None and v < 0:
            raise ValueError(f"parallelism must be non-negative, got {v}")
        return v

    @classmethod
    def from_document(cls, document: Any) -> "Pipeline":
        """
        Build a Pipeline from a parsed YAML document.

        Args:
            document: Result of loading one YAML document

        Returns:
            The validated Pipeline

        Raises:
            PipelineDecodeError: If the document is not a string-keyed mapping
                or lacks a required field
        """
        if not isinstance(document, dict):
            raise PipelineDecodeError(
                f"expected a mapping at document top level, got {type(document).__name__}"
            )

        fields: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in document.items():
            if not isinstance(key, str):
                raise PipelineDecodeError(f"top-level key {key!r} is not a string")
            if key in KNOWN_KEYS:
                fields[key] = value
            else:
                extra[key] = value
        fields["extra"] = extra

        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            raise PipelineDecodeError(str(e)) from e

    def to_document(self) -> Dict[str, Any]:
        """Merge the named fields and ``extra`` back into one mapping."""
        document: Dict[str, Any] = {"kind": self.kind, "name": self.name}
        if self.parallelism is not None:
            document["parallelism"] = self.parallelism
        document["type"] = self.type_
        for key, value in self.extra.items():
            document[key] = value
        return document

    def instance(self, number: int) -> "Pipeline":
        """Return copy ``number`` of this pipeline, renamed and without parallelism."""
        return self.model_copy(
            deep=True,
            update={"name": f"{self.name}-{number}", "parallelism": None},
        )


def decode_pipeline(text: str) -> Pipeline:
    """
    Decode a single YAML document into a Pipeline.

    Args:
        text: Source text of one YAML document

    Returns:
        The decoded Pipeline

    Raises:
        PipelineDecodeError: If the text is not valid YAML, repeats a mapping
            key or does not describe a pipeline
    """
    try:
        document = yaml.load(text, Loader=PipelineLoader)
    except yaml.YAMLError as e:
        raise PipelineDecodeError(f"invalid yaml: {e}") from e
    return Pipeline.from_document(document)


def encode_pipeline(pipeline: Pipeline) -> str:
    """
    Encode a Pipeline as a YAML document.

    The output starts with an explicit ``---`` marker and keeps key order.

    Raises:
        PipelineEncodeError: If a value cannot be represented in YAML
    """
    try:
        return yaml.dump(
            pipeline.to_document(),
            Dumper=PipelineDumper,
            sort_keys=False,
            explicit_start=True,
            default_flow_style=False,
            allow_unicode=True,
            width=float("inf"),
        )
    except yaml.YAMLError as e:
        raise PipelineEncodeError(f"error encoding yaml: {e}") from e

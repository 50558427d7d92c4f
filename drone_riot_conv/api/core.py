"""
Core implementation of the drone-riot-conv conversion.

This module provides the expansion logic behind the ``/convert`` endpoint:
a multi-document YAML blob is split into documents, and every pipeline that
requests ``parallelism: N`` is replaced by N numbered copies. Documents that
do not decode as pipelines, or that do not request parallelism, are passed
through as they were received.
"""

import logging
from typing import List

from ..schemas.pipeline import (
    Pipeline,
    PipelineDecodeError,
    PipelineEncodeError,
    decode_pipeline,
    encode_pipeline,
)

logger = logging.getLogger(__name__)

# Upper bound for the number of copies emitted per document
PARALLELISM_MAX = 64

DOCUMENT_SEPARATOR = "\n---\n"

__all__ = [
    "DOCUMENT_SEPARATOR",
    "PARALLELISM_MAX",
    "PipelineEncodeError",
    "PipelineExpander",
    "expand",
    "split_documents",
]


def split_documents(raw: str) -> List[str]:
    """
    Split a multi-document blob into its documents.

    This is a plain textual split on ``"\\n---\\n"``. A scalar that contains
    the separator verbatim ends up split in two.

    Args:
        raw: Configuration text as received from Drone

    Returns:
        Documents in their original order; empty for empty input
    """
    if not raw:
        return []
    return raw.split(DOCUMENT_SEPARATOR)


class PipelineExpander:
    """
    Expands pipelines carrying a ``parallelism`` field.

    The expander holds no per-request state, so a single instance can serve
    any number of concurrent requests.
    """

    def __init__(self, max_parallelism: int = PARALLELISM_MAX):
        """
        Initialize the expander.

        Args:
            max_parallelism: Largest number of copies emitted for one document
        """
        self.max_parallelism = max_parallelism

    def expand(self, raw: str) -> str:
        """
        Expand every parallel pipeline in a configuration blob.

        Args:
            raw: Multi-document YAML text

        Returns:
            The converted configuration text

        Raises:
            PipelineEncodeError: If an expanded copy cannot be written back to YAML
        """
        documents = split_documents(raw)
        logger.info(f"Handling request with {len(documents)} document(s)")

        result = ""
        for index, document in enumerate(documents, start=1):
            try:
                pipeline = decode_pipeline(document)
            except PipelineDecodeError as e:
                logger.warning(
                    f"Error parsing yaml document {index}/{len(documents)}: {e}. Passing through."
                )
                result += document
                continue

            if pipeline.parallelism is None:
                result += document
                continue

            result += self._fan_out(pipeline)

        return result

    def _fan_out(self, pipeline: Pipeline) -> str:
        """Render the numbered copies of a single pipeline."""
        count = pipeline.parallelism or 0
        if count > self.max_parallelism:
            logger.info(
                f"Limiting parallelism of pipeline '{pipeline.name}' from {count} to {self.max_parallelism}"
            )
            count = self.max_parallelism

        rendered = ""
        for number in range(1, count + 1):
            rendered += encode_pipeline(pipeline.instance(number))
            rendered += "\n"
        return rendered


_default_expander = PipelineExpander()


def expand(raw: str) -> str:
    """Expand ``raw`` with the default expander. See :meth:`PipelineExpander.expand`."""
    return _default_expander.expand(raw)

"""
Schemas package for drone-riot-conv.

This package contains the Pydantic v2 models for the YAML documents the
service inspects:
- common: shared base classes
- pipeline: the Drone pipeline record and its YAML codec
"""

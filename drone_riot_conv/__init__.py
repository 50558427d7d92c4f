"""drone-riot-conv

Drone CI conversion extension that expands pipelines carrying a
``parallelism`` field into numbered copies.
"""

__version__ = "0.1.0"

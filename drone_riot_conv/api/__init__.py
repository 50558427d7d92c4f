"""
HTTP API for drone-riot-conv.

Drone calls ``POST /convert`` with the repository's pipeline configuration
and uses the returned configuration in its place.
"""

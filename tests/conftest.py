"""
Configure pytest environment.

This file is automatically loaded by pytest and used to set up the test environment.
"""
import sys
from pathlib import Path

import pytest

# Add the project root directory to the Python path
# This allows tests to import drone_riot_conv without installing it
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tests.unit.common_fixtures import BUILD_PIPELINE, DEPLOY_PIPELINE, GARBAGE_DOCUMENT


@pytest.fixture
def multi_document_config() -> str:
    """Three documents: a parallel pipeline, garbage, and a plain pipeline."""
    return "\n---\n".join([BUILD_PIPELINE, GARBAGE_DOCUMENT, DEPLOY_PIPELINE])

"""Test basic package functionality."""

import openapi_fetch_core


def test_version():
    """Test that package version is defined."""
    assert hasattr(openapi_fetch_core, "__version__")
    assert openapi_fetch_core.__version__ == "0.1.0"

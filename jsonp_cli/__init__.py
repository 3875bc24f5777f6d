"""
JSONP-CLI: turn free-form requests into structured JSON prompt templates.
"""

__version__ = "2.0.0"

APP_NAME = "JSONP-CLI"

__all__ = ["APP_NAME", "__version__"]

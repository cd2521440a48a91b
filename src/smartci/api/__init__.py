"""HTTP API package for SmartCI (optional).

Install with `pip install 'smartci[api]'` to use the FastAPI server.
"""

from smartci.api.app import create_app

__all__ = ["create_app"]

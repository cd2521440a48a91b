"""SmartCI - go-to-definition and hover for CodeIgniter 3 model calls."""

from smartci.client import SmartCIClient

__version__ = "0.1.0"

__all__ = ["SmartCIClient", "__version__"]

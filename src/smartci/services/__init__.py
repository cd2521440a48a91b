"""Business services for SmartCI."""

from smartci.services.navigation_service import NavigationService
from smartci.services.resolution_service import ResolutionService, match_model_call

__all__ = [
    "NavigationService",
    "ResolutionService",
    "match_model_call",
]

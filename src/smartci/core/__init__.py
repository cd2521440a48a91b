"""Core module containing configuration, value types and the document abstraction."""

from smartci.core.config import SmartCIConfig, get_config, reload_config
from smartci.core.document import DocumentLoadError, SourceDocument, TextDocument
from smartci.core.models import (
    AppRootDiscovery,
    DefinitionLocation,
    HoverContent,
    MethodInfo,
    ModelLoadReference,
    Position,
    ResolutionResult,
)

__all__ = [
    "AppRootDiscovery",
    "DefinitionLocation",
    "DocumentLoadError",
    "HoverContent",
    "MethodInfo",
    "ModelLoadReference",
    "Position",
    "ResolutionResult",
    "SmartCIConfig",
    "SourceDocument",
    "TextDocument",
    "get_config",
    "reload_config",
]

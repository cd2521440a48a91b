"""Public client interface for SmartCI.

The adapters and services can be used directly; this module bundles them with
a configuration and a set of workspace folders behind one entrypoint.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from smartci.adapters.codeigniter import find_app_roots, find_model_file, parse_model_loads
from smartci.core.config import SmartCIConfig, get_config
from smartci.core.document import SourceDocument, TextDocument
from smartci.core.models import (
    AppRootDiscovery,
    DefinitionLocation,
    HoverContent,
    ModelLoadReference,
    Position,
    ResolutionResult,
)
from smartci.services import NavigationService, ResolutionService


class SmartCIClient:
    """High-level client bound to a list of workspace folders."""

    def __init__(
        self,
        workspace_folders: Sequence[Path | str] = (),
        *,
        config: SmartCIConfig | None = None,
    ) -> None:
        """Create a SmartCI client.

        Args:
            workspace_folders: Open workspace roots; the first one drives resolution.
            config: Optional configuration (defaults to the cached global config).
        """
        self._workspace_folders = [Path(folder) for folder in workspace_folders]
        self._config = config or get_config()
        self._resolver = ResolutionService(self._config)
        self._navigation = NavigationService(self._config, self._resolver)

    @property
    def config(self) -> SmartCIConfig:
        return self._config

    @property
    def workspace_folders(self) -> list[Path]:
        return list(self._workspace_folders)

    @property
    def workspace_root(self) -> Path | None:
        return self._workspace_folders[0] if self._workspace_folders else None

    def open_document(self, path: Path | str) -> SourceDocument:
        """Load a document from disk (raises DocumentLoadError)."""
        return SourceDocument.from_path(Path(path))

    def resolve(self, document: TextDocument, position: Position) -> ResolutionResult | None:
        return self._resolver.resolve(document, position, self._workspace_folders)

    def definition(self, document: TextDocument, position: Position) -> DefinitionLocation | None:
        return self._navigation.provide_definition(document, position, self._workspace_folders)

    def hover(self, document: TextDocument, position: Position) -> HoverContent | None:
        return self._navigation.provide_hover(document, position, self._workspace_folders)

    def parse_loads(self, document: TextDocument) -> list[ModelLoadReference]:
        return parse_model_loads(document.get_text())

    def discover_roots(self) -> AppRootDiscovery | None:
        if self.workspace_root is None:
            return None
        return find_app_roots(self.workspace_root, self._config)

    def find_model_file(self, model_path: str) -> Path | None:
        if self.workspace_root is None:
            return None
        return find_model_file(self.workspace_root, model_path, self._config)

"""Editor-facing lookups built on top of the ResolutionService."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from smartci.core.config import SmartCIConfig, get_config
from smartci.core.document import TextDocument
from smartci.core.models import DefinitionLocation, HoverContent, Position
from smartci.services.resolution_service import ResolutionService


class NavigationService:
    """Go-to-definition and hover providers for model method calls."""

    def __init__(
        self,
        config: SmartCIConfig | None = None,
        resolver: ResolutionService | None = None,
    ) -> None:
        self._config = config or get_config()
        self._resolver = resolver or ResolutionService(self._config)

    def provide_definition(
        self,
        document: TextDocument,
        position: Position,
        workspace_folders: Sequence[Path],
    ) -> DefinitionLocation | None:
        result = self._resolver.resolve(document, position, workspace_folders)
        if result is None:
            return None
        return DefinitionLocation(
            path=result.model_file_path,
            line=result.method_info.line,
            character=result.method_info.character,
        )

    def provide_hover(
        self,
        document: TextDocument,
        position: Position,
        workspace_folders: Sequence[Path],
    ) -> HoverContent | None:
        result = self._resolver.resolve(document, position, workspace_folders)
        if result is None:
            return None
        return HoverContent(
            header=self._config.hover_header,
            declaration=result.method_info.declaration,
            comment=result.method_info.comment,
        )

"""Resolution of `$foo_model->bar()` calls to method definitions.

This module provides the ResolutionService, which ties together load-statement
parsing, model file resolution and method lookup for a single cursor position.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from smartci.adapters.codeigniter import (
    find_method_in_file,
    find_model_file,
    find_model_load,
    parse_model_loads,
)
from smartci.core.config import SmartCIConfig, get_config
from smartci.core.document import TextDocument
from smartci.core.models import Position, ResolutionResult

logger = logging.getLogger(__name__)

_MODEL_CALL_RE = re.compile(r"(?P<variable>\w+_(?:model|vo))->(?P<method>\w+)")


def match_model_call(line: str) -> tuple[str, str] | None:
    """Return (variable, method) for the first model call on `line`."""
    match = _MODEL_CALL_RE.search(line)
    if match is None:
        return None
    return match.group("variable"), match.group("method")


class ResolutionService:
    """Resolve the model method referenced at a cursor position.

    Every call re-reads the document and the model files; nothing is cached
    between requests. Any missing piece yields None.
    """

    def __init__(self, config: SmartCIConfig | None = None) -> None:
        self._config = config or get_config()

    def resolve(
        self,
        document: TextDocument,
        position: Position,
        workspace_folders: Sequence[Path],
    ) -> ResolutionResult | None:
        """Resolve the `$name_model->method` call on the cursor line.

        Args:
            document: Document holding the cursor.
            position: Zero-based cursor position.
            workspace_folders: Open workspace roots; only the first one is used.

        Returns:
            ResolutionResult, or None when any step finds nothing.
        """
        if document.word_range_at(position) is None:
            return None
        if not workspace_folders:
            logger.debug("No workspace folder open")
            return None

        call = match_model_call(document.line_at(position.line))
        if call is None:
            return None
        variable, method_name = call

        load = find_model_load(parse_model_loads(document.get_text()), variable)
        if load is None:
            logger.debug(f"No load->model statement for ${variable}")
            return None

        model_file = find_model_file(
            Path(workspace_folders[0]), load.convention_path, self._config
        )
        if model_file is None:
            logger.debug(f"No model file found for {load.raw_path}")
            return None

        method_info = find_method_in_file(model_file, method_name, self._config)
        if method_info is None or method_info.is_empty:
            return None

        return ResolutionResult(
            model_file_path=model_file,
            method_info=method_info,
            method_name=method_name,
        )

"""Extraction of `$this->load->model(...)` statements from PHP source text."""

from __future__ import annotations

import re

from smartci.adapters.codeigniter.naming import capitalize_first
from smartci.core.models import ModelLoadReference

_LOAD_MODEL_RE = re.compile(r"load->model\s*\(\s*['\"](?P<path>[^'\"]+)['\"]\s*\)")


def parse_model_loads(text: str) -> list[ModelLoadReference]:
    """Return every model load in `text`, in order of appearance.

    Duplicates are kept; lookups by model name take the first one.
    """
    loads: list[ModelLoadReference] = []
    for match in _LOAD_MODEL_RE.finditer(text):
        raw_path = match.group("path")
        *directories, model_name = raw_path.split("/")
        convention_path = "/".join([*directories, capitalize_first(model_name)])
        loads.append(
            ModelLoadReference(
                raw_path=raw_path,
                convention_path=convention_path,
                model_name=model_name,
            )
        )
    return loads


def find_model_load(
    loads: list[ModelLoadReference], model_name: str
) -> ModelLoadReference | None:
    return next((load for load in loads if load.model_name == model_name), None)

"""Mapping of logical model paths to model files on disk."""

from __future__ import annotations

from pathlib import Path

from smartci.adapters.codeigniter.naming import convention_file_name
from smartci.adapters.codeigniter.roots import find_app_roots, path_exists
from smartci.core.config import SmartCIConfig, get_config


def split_model_path(model_path: str) -> tuple[str, str]:
    """Split a logical path into (directory, model name); directory may be ''."""
    directory, _, model_name = model_path.rpartition("/")
    return directory, model_name


def candidate_paths(
    project_root: Path,
    app_dirs: list[str],
    model_path: str,
    config: SmartCIConfig | None = None,
) -> list[Path]:
    """Build the ordered list of files that may hold the model.

    For each application directory, in order:

    1. ``models/{model_path}.php`` as written,
    2. ``models/{directory}/{Convention_name}.php`` when a directory is given,
    3. ``models/{Convention_name}.php`` even when a directory is given.
    """
    config = config or get_config()
    directory, model_name = split_model_path(model_path)
    file_name = convention_file_name(model_name, config.file_extension)

    candidates: list[Path] = []
    for app_dir in app_dirs:
        models_root = project_root / app_dir / config.models_dir
        candidates.append(models_root / f"{model_path}{config.file_extension}")
        if directory:
            candidates.append(models_root / directory / file_name)
        candidates.append(models_root / file_name)
    return candidates


def find_model_file(
    workspace_root: Path, model_path: str, config: SmartCIConfig | None = None
) -> Path | None:
    """Return the first existing candidate file for `model_path`, or None."""
    config = config or get_config()
    discovery = find_app_roots(workspace_root, config)
    for candidate in candidate_paths(
        discovery.project_root, discovery.app_dirs, model_path, config
    ):
        if path_exists(candidate):
            return candidate
    return None

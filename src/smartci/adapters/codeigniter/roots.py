"""Discovery of the project root and its application directories.

A CodeIgniter workspace is either the project itself or contains it in a
subproject directory (``CI3`` by default). Application directories are the
immediate children whose name starts with the application prefix; each is
expected to hold a ``models`` directory.
"""

from __future__ import annotations

import locale
import logging
from pathlib import Path

from smartci.core.config import SmartCIConfig, get_config
from smartci.core.models import AppRootDiscovery

logger = logging.getLogger(__name__)


def path_exists(path: Path) -> bool:
    """Existence check that logs and reports False when the path cannot be checked."""
    try:
        return path.exists()
    except OSError as exc:
        logger.warning(f"Failed to check {path}: {exc}")
        return False


def resolve_project_root(workspace_root: Path, config: SmartCIConfig | None = None) -> Path:
    config = config or get_config()
    subproject = workspace_root / config.subproject_dir
    return subproject if path_exists(subproject) else workspace_root


def sort_app_dirs(names: list[str], common_app_dir: str = "app_common") -> list[str]:
    """Order application directories: the common one first, then locale order.

    The raw name breaks ties between names that collate equally, so the order
    is total.
    """
    return sorted(names, key=lambda name: (name != common_app_dir, locale.strxfrm(name), name))


def list_app_dirs(project_root: Path, config: SmartCIConfig | None = None) -> list[str]:
    """List application directory names under `project_root`, unsorted.

    Raises:
        OSError: If the directory cannot be listed.
    """
    config = config or get_config()
    return [
        entry.name
        for entry in project_root.iterdir()
        if entry.is_dir() and entry.name.startswith(config.app_prefix)
    ]


def find_app_roots(workspace_root: Path, config: SmartCIConfig | None = None) -> AppRootDiscovery:
    """Discover the project root and its ordered application directories.

    Never fails: when nothing is found or the directory cannot be read the
    configured default directories are returned instead.
    """
    config = config or get_config()
    project_root = resolve_project_root(workspace_root, config)

    try:
        names = list_app_dirs(project_root, config)
    except OSError as exc:
        logger.warning(f"Failed to read application directories in {project_root}: {exc}")
        names = []

    if not names:
        logger.debug(f"No application directories under {project_root}, using defaults")
        return AppRootDiscovery(
            project_root=project_root,
            app_dirs=list(config.default_app_dirs),
            used_defaults=True,
        )

    return AppRootDiscovery(
        project_root=project_root,
        app_dirs=sort_app_dirs(names, config.common_app_dir),
    )

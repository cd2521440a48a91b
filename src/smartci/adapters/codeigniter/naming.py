"""CodeIgniter 3 file naming helpers."""

from __future__ import annotations


def capitalize_first(value: str) -> str:
    """Uppercase the first character only; the rest keeps its casing."""
    return value[:1].upper() + value[1:]


def convention_file_name(identifier: str, extension: str = ".php") -> str:
    """Build the CodeIgniter 3 file name for a model identifier.

    Every underscore-delimited segment gets its first letter capitalized:
    ``layer_banner_model`` -> ``Layer_Banner_Model.php``.
    """
    return "_".join(capitalize_first(part) for part in identifier.split("_")) + extension

"""Method lookup inside a model file.

Scanning is line based: the first line matching ``function <name>(`` wins, the
documentation block directly above it is collected and the declaration header
is rebuilt from the following lines up to the opening brace.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from smartci.core.config import SmartCIConfig, get_config
from smartci.core.models import MethodInfo

logger = logging.getLogger(__name__)

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_BLOCK_OPEN_RE = re.compile(r"^/\*\*?")
_BLOCK_CLOSE_RE = re.compile(r"\*/$")
_BLOCK_DECORATION_RE = re.compile(r"^\s*\*")

_LINE_COMMENT_PREFIXES = ("//", "#")


def method_pattern(method_name: str) -> re.Pattern[str]:
    return re.compile(rf"function\s+{re.escape(method_name)}\s*\(", re.IGNORECASE)


def is_block_comment_end(line: str) -> bool:
    return line.endswith("*/")


def is_block_comment_start(line: str) -> bool:
    return line.startswith("/*")


def clean_block_comment_line(line: str) -> str:
    line = _BLOCK_OPEN_RE.sub("", line)
    line = _BLOCK_CLOSE_RE.sub("", line)
    line = _BLOCK_DECORATION_RE.sub("", line)
    return line.strip()


def _block_comment(lines: list[str], end: int) -> list[str]:
    start = end
    while start > 0 and not is_block_comment_start(lines[start].strip()):
        start -= 1

    cleaned = (clean_block_comment_line(line.strip()) for line in lines[start : end + 1])
    return [line for line in cleaned if line]


def _line_comments(lines: list[str], end: int, prefix: str) -> list[str]:
    start = end
    while start > 0 and lines[start - 1].strip().startswith(prefix):
        start -= 1
    return [line.strip()[len(prefix) :].strip() for line in lines[start : end + 1]]


def extract_comment(lines: list[str], method_line: int) -> str:
    """Return the documentation comment directly above `method_line`.

    Blank lines between the comment and the definition are skipped. Supports
    ``/* ... */`` blocks and runs of ``//`` or ``#`` line comments; anything
    else above the definition means there is no comment.
    """
    index = method_line - 1
    while index >= 0 and not lines[index].strip():
        index -= 1
    if index < 0:
        return ""

    nearest = lines[index].strip()
    if is_block_comment_end(nearest):
        return "\n".join(_block_comment(lines, index))

    for prefix in _LINE_COMMENT_PREFIXES:
        if nearest.startswith(prefix):
            return "\n".join(_line_comments(lines, index, prefix))

    return ""


def _brace_on_next_line(lines: list[str], index: int) -> bool:
    return index + 1 < len(lines) and lines[index + 1].strip().startswith("{")


def extract_declaration(lines: list[str], start: int, max_extra_lines: int = 10) -> str:
    """Join the trimmed lines of a declaration header up to its opening brace.

    A brace sitting alone on the line after the closing parenthesis is
    appended as ``{``. At most `max_extra_lines` lines after `start` are read;
    whatever has been gathered by then is returned.
    """
    stop = min(len(lines), start + max_extra_lines + 1)
    parts: list[str] = []
    for index in range(start, stop):
        line = lines[index].strip()
        parts.append(line)
        if ")" not in line:
            continue
        if "{" in line:
            break
        if _brace_on_next_line(lines, index):
            parts.append("{")
            break
    return " ".join(parts)


def find_method_in_lines(
    lines: list[str], method_name: str, max_extra_lines: int = 10
) -> MethodInfo | None:
    pattern = method_pattern(method_name)
    for index, line in enumerate(lines):
        if not pattern.search(line):
            continue
        return MethodInfo(
            line=index,
            character=max(line.find(method_name), 0),
            comment=extract_comment(lines, index),
            declaration=extract_declaration(lines, index, max_extra_lines),
        )
    return None


def find_method_in_file(
    file_path: Path, method_name: str, config: SmartCIConfig | None = None
) -> MethodInfo | None:
    """Locate `method_name` in `file_path`.

    Returns None when the method is not defined in the file. An unreadable
    file is logged and reported as `MethodInfo.empty()`.
    """
    config = config or get_config()
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed to read model file {file_path}: {exc}")
        return MethodInfo.empty()

    return find_method_in_lines(
        _LINE_SPLIT_RE.split(content), method_name, config.declaration_line_limit
    )

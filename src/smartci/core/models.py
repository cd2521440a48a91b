"""Value types shared by the SmartCI resolution pipeline.

Every model is frozen: results are point-in-time snapshots of the files they
describe and are rebuilt from scratch on every lookup.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class Position(BaseModel):
    """Zero-based cursor position inside a document."""

    line: int = Field(..., ge=0, description="Zero-based line index")
    character: int = Field(..., ge=0, description="Zero-based column index")

    model_config = {"frozen": True}


class ModelLoadReference(BaseModel):
    """A single `$this->load->model('...')` occurrence found in a document."""

    raw_path: str = Field(..., description="Logical path exactly as written in the call")
    convention_path: str = Field(
        ..., description="Logical path with the final segment's first letter capitalized"
    )
    model_name: str = Field(
        ..., description="Final path segment, used as the variable correlation key"
    )

    model_config = {"frozen": True}


class MethodInfo(BaseModel):
    """Location and documentation of a method definition inside a model file."""

    line: int = Field(0, ge=0, description="Zero-based line of the definition")
    character: int = Field(0, ge=0, description="Zero-based column of the method name")
    comment: str = Field("", description="Documentation comment text, delimiters stripped")
    declaration: str = Field("", description="Declaration header up to its opening brace")

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> MethodInfo:
        """Degenerate value reported when the model file could not be read."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return (
            self.line == 0
            and self.character == 0
            and not self.comment
            and not self.declaration
        )


class ResolutionResult(BaseModel):
    """Terminal success value of a resolution request."""

    model_file_path: Path
    method_info: MethodInfo
    method_name: str

    model_config = {"frozen": True}


class AppRootDiscovery(BaseModel):
    """Project root plus the ordered application directories searched beneath it."""

    project_root: Path
    app_dirs: list[str] = Field(default_factory=list)
    used_defaults: bool = Field(
        False, description="True when the fallback directory list was returned"
    )

    model_config = {"frozen": True}


class DefinitionLocation(BaseModel):
    """Jump target produced for a go-to-definition request."""

    path: Path
    line: int = Field(..., ge=0)
    character: int = Field(..., ge=0)

    model_config = {"frozen": True}


class HoverContent(BaseModel):
    """Hover payload: a header, the declaration and its documentation comment."""

    header: str
    declaration: str = ""
    comment: str = ""

    model_config = {"frozen": True}

    def to_markdown(self) -> str:
        """Render the payload as markdown.

        The declaration goes into a ``php`` fenced block prefixed with ``<?php``
        so highlighters recognise it; comment lines are joined with hard breaks.
        """
        parts = [f"**{self.header}**\n\n"]

        if self.declaration:
            parts.append(f"```php\n<?php\n{self.declaration}\n```\n")
            parts.append("\n")

        if self.comment:
            lines = [line.strip() for line in self.comment.split("\n")]
            formatted = "  \n".join(line for line in lines if line)
            parts.append(f"{formatted}\n")

        return "".join(parts)

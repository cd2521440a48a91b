"""SmartCI HTTP API (FastAPI).

This module is optional and requires the `api` extra.
"""

from __future__ import annotations

from pathlib import Path

try:
    from fastapi import FastAPI, HTTPException
    from fastapi.responses import JSONResponse
except ImportError as e:  # pragma: no cover
    raise ImportError(
        "SmartCI HTTP API requires FastAPI. Install with: pip install 'smartci[api]'"
    ) from e

from pydantic import BaseModel, Field

from smartci import __version__
from smartci.client import SmartCIClient
from smartci.core.document import DocumentLoadError, SourceDocument
from smartci.core.models import Position


class LookupRequest(BaseModel):
    text: str | None = Field(default=None, description="Full text of the active document")
    path: str | None = Field(
        default=None, description="Path of the active document (read when text is omitted)"
    )
    line: int = Field(..., ge=0, description="Zero-based cursor line")
    character: int = Field(..., ge=0, description="Zero-based cursor column")
    workspace_folders: list[str] | None = Field(
        default=None, description="Override the server's workspace folders"
    )


def create_app(workspace_folders: list[str] | None = None) -> FastAPI:
    default_folders = workspace_folders if workspace_folders is not None else [str(Path.cwd())]

    app = FastAPI(
        title="SmartCI API",
        version=__version__,
    )

    def _client(req: LookupRequest) -> SmartCIClient:
        folders = req.workspace_folders if req.workspace_folders is not None else default_folders
        return SmartCIClient(folders)

    def _document(client: SmartCIClient, req: LookupRequest) -> SourceDocument:
        if req.text is not None:
            return SourceDocument(req.text, path=Path(req.path) if req.path else None)
        if req.path is None:
            raise HTTPException(status_code=400, detail="Provide text or path")
        try:
            return client.open_document(req.path)
        except DocumentLoadError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/definition")
    def definition(req: LookupRequest) -> JSONResponse:
        client = _client(req)
        document = _document(client, req)
        location = client.definition(document, Position(line=req.line, character=req.character))
        if location is None:
            raise HTTPException(status_code=404, detail="No model method found")
        return JSONResponse(content=location.model_dump(mode="json"))

    @app.post("/hover")
    def hover(req: LookupRequest) -> JSONResponse:
        client = _client(req)
        document = _document(client, req)
        content = client.hover(document, Position(line=req.line, character=req.character))
        if content is None:
            raise HTTPException(status_code=404, detail="No model method found")
        return JSONResponse(
            content={
                "markdown": content.to_markdown(),
                "hover": content.model_dump(mode="json"),
            }
        )

    return app

"""FastAPI application exposing one in-process notebook to a web front end."""

import secrets
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Security
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, Field

from .. import __version__
from ..core.convert import value_from_dict


class SpanIn(BaseModel):
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    bold: bool | None = None
    italic: bool | None = None
    font_size: float | None = Field(default=None, gt=0)


class TextIn(BaseModel):
    text: str
    selection: list[int] = Field(min_length=2, max_length=2)
    spans: list[SpanIn] = []


class FontSizeIn(BaseModel):
    size: float = Field(gt=0)


def create_app(runtime: Any, token: str | None = None, enable_cors: bool = False) -> FastAPI:
    """
    Create FastAPI application with runtime injected.

    Args:
        runtime: Runtime instance holding the notebook
        token: Bearer token for authentication (None to disable auth)
        enable_cors: Enable CORS middleware

    Returns:
        FastAPI application instance
    """
    notebook = runtime.notebook
    font_sizes = list(runtime.config.editor.font_sizes)

    app = FastAPI(
        title="Richnote API",
        description="Local JSON API for a richnote notebook",
        version=__version__,
        docs_url="/docs" if token is None else None,
        redoc_url="/redoc" if token is None else None,
    )

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if token:
        security_scheme = HTTPBearer(auto_error=False)

        async def verify_token(
            credentials: HTTPAuthorizationCredentials | None = Security(security_scheme),  # noqa: B008
        ) -> None:
            """Verify bearer token."""
            if credentials is None or credentials.credentials != token:
                raise HTTPException(status_code=401, detail="Invalid or missing token")
    else:

        async def verify_token() -> None:
            """No-op when auth is disabled."""
            return None

    @app.get("/health")
    async def health(auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    @app.get("/state")
    async def state(auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Full snapshot: tabs, flags and the current note."""
        snap = notebook.snapshot()
        snap["font_sizes"] = font_sizes
        return snap

    @app.get("/notes")
    async def list_notes(auth: None = Depends(verify_token)) -> list[dict[str, Any]]:
        return [
            {"index": i, "id": nid, "label": label, "selected": i == notebook.selected_index}
            for i, nid, label in notebook.tabs()
        ]

    @app.post("/notes", status_code=201)
    async def add_note(auth: None = Depends(verify_token)) -> dict[str, Any]:
        note = notebook.add_note()
        return {"id": note.id, "index": notebook.selected_index}

    @app.post("/tabs/{index}")
    async def select_tab(index: int, auth: None = Depends(verify_token)) -> dict[str, Any]:
        if not 0 <= index < len(notebook.notes):
            raise HTTPException(status_code=404, detail=f"No tab at index {index}")
        notebook.select_tab(index)
        return notebook.snapshot()

    @app.put("/text")
    async def update_text(body: TextIn, auth: None = Depends(verify_token)) -> dict[str, Any]:
        for span in body.spans:
            if span.start >= span.end or span.end > len(body.text):
                raise HTTPException(
                    status_code=422,
                    detail=f"Span [{span.start}, {span.end}) outside text of length {len(body.text)}",
                )
        notebook.update_text(value_from_dict(body.model_dump()))
        return notebook.snapshot()

    @app.post("/bold")
    async def toggle_bold(auth: None = Depends(verify_token)) -> dict[str, Any]:
        notebook.toggle_bold()
        return notebook.snapshot()

    @app.post("/italic")
    async def toggle_italic(auth: None = Depends(verify_token)) -> dict[str, Any]:
        notebook.toggle_italic()
        return notebook.snapshot()

    @app.post("/font-size")
    async def font_size(body: FontSizeIn, auth: None = Depends(verify_token)) -> dict[str, Any]:
        notebook.apply_font_size(body.size)
        return notebook.snapshot()

    return app


def generate_token() -> str:
    """Generate a random bearer token."""
    return secrets.token_urlsafe(32)

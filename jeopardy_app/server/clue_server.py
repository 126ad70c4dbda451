"""FastAPI server that mirrors the Jeopardy category service for offline play."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import Thread

from fastapi import FastAPI, HTTPException, Query
from pydantic import TypeAdapter
import uvicorn

from jeopardy_app.constants.network_constants import (
    LOCAL_MAX_POOL,
    LOCAL_SERVER_HOST,
    LOCAL_SERVER_PORT,
)
from jeopardy_app.core.api_schemas import CategoryPayload, CategorySummaryPayload

logger = logging.getLogger(__name__)

_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "offline_clues.json"
_CATEGORY_LIST = TypeAdapter(list[CategoryPayload])


def load_offline_categories(path: Path = _DATA_PATH) -> list[CategoryPayload]:
    """Load the bundled clue set; ``clues_count`` is filled in from the clues."""
    data = json.loads(path.read_text(encoding="utf-8"))
    categories = _CATEGORY_LIST.validate_python(data)
    for category in categories:
        category.clues_count = len(category.clues)
    return categories


def create_clue_app(categories: list[CategoryPayload] | None = None) -> FastAPI:
    """Create a FastAPI application serving the given categories."""
    if categories is None:
        categories = load_offline_categories()
    by_id = {category.id: category for category in categories}
    app = FastAPI(title="JeopardyQt Clue Server", version="0.1.0")

    @app.get("/health")
    def health() -> dict[str, object]:
        return {"status": "ok", "categories": len(by_id)}

    @app.get("/api/categories", response_model=list[CategorySummaryPayload])
    def list_categories(
        count: int = Query(default=LOCAL_MAX_POOL, ge=1, le=LOCAL_MAX_POOL),
    ) -> list[CategorySummaryPayload]:
        return [
            CategorySummaryPayload(
                id=category.id,
                title=category.title,
                clues_count=len(category.clues),
            )
            for category in categories[:count]
        ]

    @app.get("/api/category", response_model=CategoryPayload)
    def get_category(category_id: int = Query(alias="id")) -> CategoryPayload:
        category = by_id.get(category_id)
        if category is None:
            raise HTTPException(status_code=404, detail=f"Unknown category id {category_id}")
        return category

    return app


def start_clue_server(
    host: str = LOCAL_SERVER_HOST,
    port: int = LOCAL_SERVER_PORT,
    categories: list[CategoryPayload] | None = None,
) -> Thread:
    """Start the clue server in a background daemon thread."""
    app = create_clue_app(categories)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="ClueServer", daemon=True)
    thread.start()
    logger.info("Offline clue server starting on http://%s:%d/api", host, port)
    return thread

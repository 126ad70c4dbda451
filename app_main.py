"""Application entry point for JeopardyQt."""

from __future__ import annotations

import argparse
import random
import sys

from PySide6.QtWidgets import QApplication

from jeopardy_app.constants.network_constants import (
    CATEGORY_POOL_SIZE,
    DEFAULT_API_BASE_URL,
    FETCH_MAX_RETRIES,
    FETCH_TIMEOUT_SECONDS,
    LOCAL_SERVER_HOST,
    LOCAL_SERVER_PORT,
)
from jeopardy_app.core.random_sampler import RandomSampler
from jeopardy_app.core.services.category_client import JeopardyApiClient
from jeopardy_app.core.services.game_session import GameSessionController
from jeopardy_app.server.clue_server import start_clue_server
from jeopardy_app.ui.board_window import BoardWindow
from jeopardy_app.utils.logging_config import configure_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a Jeopardy-style trivia board.")
    parser.add_argument(
        "--api-url",
        default=DEFAULT_API_BASE_URL,
        help="Base URL of the category service (default: %(default)s)",
    )
    parser.add_argument(
        "--pool-size",
        type=int,
        default=CATEGORY_POOL_SIZE,
        help="Number of categories to draw the board from (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Fixed random seed")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Serve the bundled clue set locally instead of using the remote service",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=LOCAL_SERVER_PORT,
        help="Port of the local clue server in offline mode (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Initialize logging, wire the session, and launch the Qt UI."""
    args = _parse_args(argv)
    logger = configure_logging()
    logger.info("Starting JeopardyQt…")

    api_url = args.api_url
    if args.offline:
        start_clue_server(host=LOCAL_SERVER_HOST, port=args.port)
        api_url = f"http://{LOCAL_SERVER_HOST}:{args.port}/api"
    logger.info("Using category service at %s", api_url)

    client = JeopardyApiClient(
        api_url,
        timeout=FETCH_TIMEOUT_SECONDS,
        max_retries=FETCH_MAX_RETRIES,
    )
    controller = GameSessionController(
        client,
        category_pool_size=args.pool_size,
        fetch_timeout=client.deadline,
        sampler=RandomSampler(random.Random(args.seed)),
    )

    app = QApplication(sys.argv[:1])
    window = BoardWindow(controller, seed=args.seed)
    window.show()
    window.start_game()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

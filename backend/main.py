"""
Server entry point for the review gateway.
"""

import logging

import uvicorn

from backend.api import app, get_settings


def run() -> None:
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.info(f"Server running on http://{settings.HOST}:{settings.PORT}")

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()

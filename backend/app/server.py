from __future__ import annotations

import uvicorn

from backend.app.core.settings import settings


def run() -> None:
    """Serve the API with uvicorn on HOST:PORT (default port 5000)."""
    uvicorn.run("backend.app.main:app", host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()

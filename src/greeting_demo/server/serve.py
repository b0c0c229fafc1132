"""Helper to launch the greeting proxy with uvicorn."""
from __future__ import annotations

import uvicorn

from greeting_demo.common.config import get_settings

def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "greeting_demo.server.fastapi_app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )

if __name__ == "__main__":
    main()

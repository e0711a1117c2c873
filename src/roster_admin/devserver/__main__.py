"""
roster_admin.devserver.__main__

Entrypoint for running the dev backend via `python -m roster_admin.devserver`.
"""

from __future__ import annotations

import uvicorn

from roster_admin.devserver.app import create_devserver
from roster_admin.settings import get_settings


def main() -> None:
    settings = get_settings()
    app = create_devserver(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()

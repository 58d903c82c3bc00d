# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""ASGI entry point.

    uvicorn baila_admin.main:app
"""

import uvicorn

from baila_admin.api import create_app
from baila_admin.core.config import get_settings

app = create_app()


def run() -> None:
    """Serve the API with the configured host, port and workers."""
    settings = get_settings()
    uvicorn.run(
        "baila_admin.main:app",
        host=settings.api.host,
        port=settings.api.port,
        workers=settings.api.workers,
        reload=settings.api.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

#!/usr/bin/env python3
"""Start the Metal Building Configurator API server."""

import uvicorn

from configurator.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "configurator.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        reload_dirs=["configurator"],
    )

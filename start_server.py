#!/usr/bin/env python3
"""Server startup script."""

import os

import uvicorn


def main():
    """Start the FastAPI server."""
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 8000))

    uvicorn.run(
        "route_health.main:create_app",
        factory=True,
        host=host,
        port=port,
        log_level="info",
        access_log=False,
    )


if __name__ == "__main__":
    main()

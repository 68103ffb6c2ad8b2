#!/usr/bin/env python3
"""
Script to run the book catalogue API server.
"""

import uvicorn

from bookapp.config import settings


def main():
    """Run the API server."""
    uvicorn.run(
        "bookapp.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
        log_level=settings.log_level.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()

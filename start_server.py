#!/usr/bin/env python3
"""
Startup script for the Team Task Hub API
This script starts the FastAPI server with settings read from the environment
"""

import uvicorn

from taskhub.config import Settings


def main():
    settings = Settings.from_env()

    print("Starting Team Task Hub API Server...")
    print(f"Host: {settings.server_host}")
    print(f"Port: {settings.server_port}")
    print(f"Reload: {settings.reload}")
    print("=" * 50)

    # Start the server
    uvicorn.run(
        "main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

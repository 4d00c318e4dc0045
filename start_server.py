#!/usr/bin/env python3
"""
Startup script for the Work Log Backend
This script starts the FastAPI server with settings taken from the environment
"""

import logging

import uvicorn

from worklog.config.settings import settings

logger = logging.getLogger("start_server")

def main():
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))

    logger.info("Starting Work Log Backend Server...")
    logger.info(f"Host: {settings.SERVER_HOST}")
    logger.info(f"Port: {settings.SERVER_PORT}")
    logger.info(f"Reload: {settings.RELOAD}")

    # Start the server
    uvicorn.run(
        "main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )

if __name__ == "__main__":
    main()

"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chatcore.fastapi_app:app --host 0.0.0.0 --port 5001 --reload
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from chatcore.config.logging_config import setup_logging
from chatcore.config.settings import Config

# Under the "chatcore" logger so LOG_LEVEL applies
logger = logging.getLogger("chatcore.run_fastapi")

if __name__ == "__main__":
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
    env = os.getenv("APP_ENV", "development")

    logger.info(f"Starting chat service in {env} mode...")
    logger.info(f"Server running on http://{Config.HOST}:{Config.PORT}")
    logger.info(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "chatcore.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level="info" if Config.DEBUG else "warning",
    )

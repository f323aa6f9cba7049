"""
Main entry point for the FastAPI application.
Run this file to start the FastAPI server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn message_service.fastapi_app:create_fastapi_app --factory --port 5001 --reload
"""

import uvicorn

from message_service.config.settings import Config


def main():
    debug = Config.APP_ENV == "development"

    print(f"Starting FastAPI application in {Config.APP_ENV} mode...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "message_service.fastapi_app:create_fastapi_app",
        factory=True,
        host=Config.HOST,
        port=Config.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )


if __name__ == "__main__":
    main()

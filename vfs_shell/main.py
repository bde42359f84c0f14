"""
FastAPI application exposing the shell commands over HTTP.
"""

import logging

from fastapi import FastAPI

from vfs_shell.api.routers import router as api_router
from vfs_shell.config.settings import settings

# Create FastAPI app
app = FastAPI(title="Virtual File System Shell API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# Get logger for this module
logger = logging.getLogger(__name__)
logger.info(f"Using {settings.backend} file system backend")

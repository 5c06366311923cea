"""
life span events
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.app.core.config import settings
from src.app.db.init_db import seed_db
from src.app.db.session import AsyncSessionLocal, engine, init_models

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the schema and seed it once before serving requests."""
    try:
        await init_models()
        logger.info("Database schema ready")
        if settings.SEED_ON_STARTUP:
            async with AsyncSessionLocal() as db:
                try:
                    await seed_db(db)
                except Exception as e:
                    logger.error(f"Seeding failed: {e}")
                    await db.rollback()
                    raise
            logger.info("Seed data created")
        yield
    finally:
        await engine.dispose()
        logger.info("lifespan shutdown")

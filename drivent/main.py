"""
Drivent API

Run with: uvicorn drivent.main:app --reload
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from drivent.platform.app_factory import create_app
from drivent.platform.config.di import cleanup, container, setup
from drivent.platform.config.wire_modules import WIRE_MODULES
from drivent.platform.database import models  # noqa: F401  registers tables
from drivent.platform.database.orm_db_setting import create_db_and_tables, dispose_engine
from drivent.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Drivent] Starting up...')

    setup()
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Drivent] Dependency injection wired')

    await create_db_and_tables()
    Logger.base.info('🗄️  [Drivent] Database tables ready')

    try:
        yield
    finally:
        await dispose_engine()
        cleanup()
        Logger.base.info('🛑 [Drivent] Shut down')


app = create_app(lifespan=lifespan)

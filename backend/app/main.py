# backend/app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from regexp_table.config.logger import configure_logging
from regexp_table.config.settings import TABLES_DIR, TABLE_SUFFIX
from backend.app.api.lookup import router as lookup_router
from backend.app.registry import table_registry


@asynccontextmanager
async def lifespan(_app: FastAPI):
    configure_logging()
    table_registry.reload(TABLES_DIR, TABLE_SUFFIX)
    yield


app = FastAPI(title="regexp-table API", lifespan=lifespan)
app.include_router(lookup_router, prefix="/api")

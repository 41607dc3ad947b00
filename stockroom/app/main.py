from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from stockroom.app.api.v1.router import router as v1_router
from stockroom.app.db.base import Base
from stockroom.app.db.models import models_v1  # noqa: F401  (enregistre les tables)
from stockroom.app.db.session import engine

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# origines séparées par des virgules ; "*" par défaut (toutes)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # tables créées si absentes (les migrations alembic restent la référence)
    Base.metadata.create_all(bind=engine)
    logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
    yield
    engine.dispose()
    logger.info("Connection pool closed")


app = FastAPI(title="Stockroom", version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(v1_router, prefix="/v1")


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Backend is working"

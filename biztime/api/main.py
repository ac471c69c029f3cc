from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime.api.core.config import get_settings
from biztime.api.core.db import run_migrations
from biztime.api.core.error_handlers import register_error_handlers
from biztime.api.core.observability import setup_logging

# Routers
from biztime.api.routes import companies, invoices

logger = logging.getLogger(__name__)

settings = get_settings()


# ==========================
# Startup / Shutdown
# ==========================
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    run_migrations()
    logger.info("Database initialized")
    logger.info("BizTime API is running")
    yield
    logger.info("BizTime API shutting down")


app = FastAPI(
    title="BizTime API",
    version="1.0.0",
    lifespan=lifespan,
)

# ==========================
# CORS
# ==========================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==========================
# Error handlers
# ==========================
register_error_handlers(app)

# ==========================
# Routers
# ==========================
app.include_router(companies.router, prefix="/companies", tags=["companies"])
app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])


# ==========================
# Root Endpoint
# ==========================
@app.get("/")
def root():
    return {
        "service": "biztime-api",
        "status": "running",
        "endpoints": {
            "companies": "/companies",
            "invoices": "/invoices",
        },
    }

"""
Main FastAPI application entry point.
Wires logging, table creation, the accounts router and health probes.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from accounts_service.api import accounts
from accounts_service.core.config import settings
from accounts_service.core.logging import setup_logging
from accounts_service.database import Base, engine, get_db

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info(
        "Accounts service started, customer registry at %s",
        settings.CUSTOMER_SERVICE_URL,
    )
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    lifespan=lifespan,
)

# CORS middleware (allows frontend to call API)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    """
    Service banner with the account endpoints.
    """
    prefix = f"{settings.API_V1_PREFIX}/accounts"
    return {
        "message": "Accounts Service",
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "accounts": prefix,
            "deposit": f"{prefix}/{{account_id}}/deposit",
            "withdrawal": f"{prefix}/{{account_id}}/withdrawal",
            "customer_accounts": f"{prefix}/customer/{{customer_id}}/accounts",
        }
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint for monitoring.
    Runs a trivial query; answers 503 when the database cannot be reached.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "database": "unavailable",
                "customer_registry": settings.CUSTOMER_SERVICE_URL,
            },
        )

    return {
        "status": "healthy",
        "database": "connected",
        "customer_registry": settings.CUSTOMER_SERVICE_URL,
    }


# Include API routers
app.include_router(accounts.router, prefix=settings.API_V1_PREFIX)

"""Tuiter FastAPI application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tuiter.config import settings
from tuiter.container import init_container
from tuiter.utils import logging_client
from tuiter.utils.init_dynamodb import initialize_all_tables

# Initialize logger (module loggers under tuiter.* propagate here)
logger = logging_client.setup_logger('tuiter')

init_container()

app = FastAPI(
    title="Tuiter",
    version=settings.SERVICE_VERSION,
    description="Users and tuits with session-based authentication"
)

# CORS: the session cookie needs credentialed requests from listed origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Create DynamoDB tables when that backing is selected."""
    logger.info(f"Starting {settings.SERVICE_NAME} v{settings.SERVICE_VERSION} "
                f"(storage: {settings.STORAGE_BACKEND})")

    if settings.STORAGE_BACKEND == "dynamodb":
        try:
            tables_created = await initialize_all_tables()
            if tables_created:
                logger.info(f"Created tables: {', '.join(tables_created)}")
            else:
                logger.info("All tables already exist")
        except Exception as e:
            logger.error(f"Failed to initialize DynamoDB tables: {e}")
            raise


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION
    }


# Register API routers (auth first: its fixed paths share the /api/users prefix)
from tuiter.api import auth, users, tuits  # noqa: E402
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(tuits.router)

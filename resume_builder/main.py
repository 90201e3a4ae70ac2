# File: resume_builder/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import inspect
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from resume_builder.core.config import settings
from resume_builder.api.api import api_router
from resume_builder.db.database import engine
from resume_builder.db import models

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize database more safely
def init_db(bind=engine):
    try:
        logger.info("Creating database tables if they don't exist...")
        inspector = inspect(bind)
        for table in models.Base.metadata.sorted_tables:
            try:
                if not inspector.has_table(table.name):
                    logger.info(f"Creating table: {table.name}")
                    table.create(bind, checkfirst=True)
                else:
                    logger.info(f"Table {table.name} already exists.")
            except Exception as e:
                logger.error(f"Error creating table {table.name}: {e}")

        logger.info("Database initialization completed.")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"{settings.PROJECT_NAME} running on port {settings.PORT}")
    logger.info(f"Health check available at http://localhost:{settings.PORT}/api/health")
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
)

# Configure CORS with settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies share the 400 shape of store validation failures
    fields = [".".join(str(part) for part in err["loc"] if part != "body") for err in exc.errors()]
    logger.error(f"Invalid request body for {request.url.path}: {fields}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Invalid request body",
            "error": "; ".join(f"{f}: {err['msg']}" for f, err in zip(fields, exc.errors())),
            "fields": fields,
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "API endpoint not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Something went wrong!",
            "error": str(exc) if settings.is_development else "Internal server error",
        },
    )


# Include API router
app.include_router(api_router)

@app.get("/")
def read_root():
    return {"status": "Resume Builder API is running"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1.api import api_router
from app.core.config import get_settings
from app.core.errors import CustomerNotFoundError
from app.core.metrics import instrument_app
from app.core.logging import get_logger
from app.db.session import init_db
from app.utils.decorators import log_request

logger = get_logger(__name__)

settings = get_settings()
app = FastAPI(title=settings.APP_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.ENABLE_METRICS:
    instrument_app(app)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(CustomerNotFoundError)
async def customer_not_found_handler(request: Request, exc: CustomerNotFoundError):
    """Missing customers are answered with a plain-text 400."""
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Store failures are not recovered from: log them and answer a bare 500."""
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
@log_request
async def read_root():
    return {"message": f"Welcome to the {settings.APP_TITLE}"}

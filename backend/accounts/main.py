import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from accounts.api.accounts import router as accounts_router
from accounts.config import settings
from accounts.database import check_connection, create_db_engine, init_db
from accounts.errors import (
    ROUTE_NOT_FOUND_MESSAGE,
    AccountError,
    InvalidInput,
    StorageError,
)
from accounts.services.credentials import CredentialService
from accounts.store import AccountStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = create_db_engine(settings.sqlalchemy_url)
    try:
        check_connection(engine)
    except SQLAlchemyError as exc:
        logger.error(f"Database connection failed: {exc}")
        engine.dispose()
        raise
    logger.info(f"Connected to database {engine.url.database}")

    init_db(engine)
    if settings.admin_username and settings.admin_password:
        with Session(engine) as session:
            CredentialService(AccountStore(session), settings).ensure_admin(
                settings.admin_username, settings.admin_password
            )

    app.state.engine = engine
    yield
    engine.dispose()


app = FastAPI(title="Accounts", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(accounts_router, prefix="/api")


@app.exception_handler(AccountError)
async def account_error_handler(request: Request, exc: AccountError):
    # 500s keep the "error" key the browser client reads
    key = "error" if exc.status_code >= 500 else "message"
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, key: exc.message},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}", exc_info=exc
    )
    return await account_error_handler(request, StorageError())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return await account_error_handler(request, InvalidInput())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={"success": False, "message": ROUTE_NOT_FOUND_MESSAGE},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.get("/health")
async def health():
    return {"status": "ok"}

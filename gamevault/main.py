# gamevault/main.py

import logging
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from gamevault.api import auth, games, users
from gamevault.config import Settings, load_settings
from gamevault.core.catalog import CatalogClient
from gamevault.core.security import create_password_context
from gamevault.database import create_db_engine, create_session_factory, init_db
from gamevault.errors import AppError, UnexpectedError


logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# -------------------------------
# Exception handlers
# -------------------------------

async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # "input" is dropped so submitted values such as passwords never reach the log
    errors = [{key: error.get(key) for key in ("loc", "type", "msg")} for error in exc.errors()]
    logger.info("Malformed request on %s: %s", request.url.path, errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Invalid request"})


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = UnexpectedError()
    return JSONResponse(status_code=error.status_code, content={"message": error.message})


# -------------------------------
# Application factory
# -------------------------------

def create_app(settings: Settings | None = None, catalog: CatalogClient | None = None) -> FastAPI:
    settings = settings or load_settings()

    engine = create_db_engine(settings.database_url)
    init_db(engine)
    catalog = catalog or CatalogClient.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        catalog.close()
        engine.dispose()

    app = FastAPI(title="gamevault", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.pwd_context = create_password_context(settings.bcrypt_rounds)
    app.state.catalog = catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(games.router)
    return app


def run():
    settings = load_settings()
    configure_logging(settings.log_level)
    if not settings.rawg_api_key:
        logger.warning("RAWG_KEY is not set; game routes will fail upstream")

    # uvicorn exits the process when the port cannot be bound
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()

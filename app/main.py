from contextlib import asynccontextmanager
from typing import cast

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import UJSONResponse
from sqlalchemy import Engine

from app.api.routes.users import users_router
from app.config.database import build_engine, build_session_factory, check_connection
from app.config.logger import get_logger
from app.config.settings import settings
from app.schemas.exceptions import UsersAPIError
from app.schemas.user import RootResponse

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await run_in_threadpool(check_connection, app.state.engine)
    yield
    app.state.engine.dispose()


async def users_api_error_handler(request: Request, exc: UsersAPIError) -> UJSONResponse:
    return UJSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> UJSONResponse:
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return UJSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app(engine: Engine | None = None) -> FastAPI:
    """Build the application around one engine; its pool lives as long as the app."""
    engine = engine or build_engine()

    app = FastAPI(
        debug=cast(bool, settings.fastapi_kwargs["debug"]),
        docs_url=cast(str | None, settings.fastapi_kwargs["docs_url"]),
        root_path=cast(str, settings.fastapi_kwargs["root_path"]),
        openapi_url=cast(str | None, settings.fastapi_kwargs["openapi_url"]),
        redoc_url=cast(str | None, settings.fastapi_kwargs["redoc_url"]),
        title=cast(str, settings.fastapi_kwargs["title"]),
        version=cast(str, settings.fastapi_kwargs["version"]),
        default_response_class=UJSONResponse,
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(UsersAPIError, users_api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]

    app.include_router(users_router, prefix="/api", tags=["users"])

    @app.get("/", response_model=RootResponse)
    async def root():
        return {"message": "The Gaadi Backend API is running!"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

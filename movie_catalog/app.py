from http import HTTPStatus

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from movie_catalog.applications.interfaces.dtos.message import Message
from movie_catalog.infrastructure.config.settings import CatalogSettings
from movie_catalog.infrastructure.logging.logger import Logger, setup_logging
from movie_catalog.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, set_engine
from movie_catalog.presentation.errors import INTERNAL_ERROR_DETAIL
from movie_catalog.presentation.routers import auth, movies, users

setup_logging()
logger = Logger.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    if CatalogSettings().create_tables:
        await create_tables(engine)
    logger.info("Movie catalog API started")
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Movie catalog API stopped")


app = FastAPI(title="Movie Catalog API", lifespan=lifespan)

app.include_router(users.router)
app.include_router(auth.router)
app.include_router(movies.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"detail": INTERNAL_ERROR_DETAIL})


@app.get("/", status_code=HTTPStatus.OK, response_model=Message)
def read_root():
    return {"message": "Movie catalog is up"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from cities import router as cities_router
from continents import router as continents_router
from core import errors, settings
from core.db import Database
from core.logging_config import setup_logging
from countries import router as countries_router
from enrichment import router as enrichment_router
from enrichment import workflow

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "db" / "schema.sql"

setup_logging(settings.log_level())


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to routes through core.db.get_db.
    db = Database.from_env()
    await db.init_pool()
    if settings.db_apply_schema():
        await db.apply_schema(SCHEMA_PATH)
    app.state.db = db
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Orbis API", lifespan=lifespan)

# Only the configured browser origin may call this API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origin()],
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    allow_headers=["*"],
    expose_headers=[workflow.PHOTO_HEADER],
)

errors.register_exception_handlers(app)

app.include_router(continents_router.router, tags=["continentes"])
app.include_router(countries_router.router, tags=["paises"])
app.include_router(cities_router.router, tags=["cidades"])
app.include_router(auth_router.router, tags=["auth"])
app.include_router(enrichment_router.router, tags=["enrichment"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "Servidor funcionando!"}

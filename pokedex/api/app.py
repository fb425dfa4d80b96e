"""FastAPI app, CORS, error mapping, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokedex.config import CORS_ORIGINS, IMAGES_DIR, LOG_LEVEL, ensure_data_dir

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from pokedex.api.state import AppState, get_state
from pokedex.core.errors import InvalidArgument, PokedexError

# Import routes after state to avoid circular imports
from pokedex.api.routes import index, pokemons

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    state = get_state()
    logger.info(
        "Serving %d pokemons from %s", len(state.store.load()), state.store.path
    )
    yield


app = FastAPI(
    title="Pokedex API",
    description="Pokemon catalog: list, search, filter by type, detail, create",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PokedexError)
async def pokedex_error_handler(request: Request, exc: PokedexError):
    body = {"message": exc.message}
    if isinstance(exc, InvalidArgument):
        body["data"] = []
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Badly typed input gets the same 400 envelope as the catalog's own checks."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = tuple(first.get("loc") or ())
    field = ".".join(str(p) for p in loc[1:]) or (str(loc[0]) if loc else "request")
    body = {"message": f"Invalid {field}: {first.get('msg', 'invalid value')}"}
    if not loc or loc[0] != "body":
        body["data"] = []
    return JSONResponse(status_code=400, content=body)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return PlainTextResponse("Path not found", status_code=404)
    return await http_exception_handler(request, exc)


app.include_router(pokemons.router, prefix="/pokemons", tags=["pokemons"])
app.include_router(index.router, tags=["index"])

if IMAGES_DIR.is_dir():
    app.mount("/images", StaticFiles(directory=IMAGES_DIR), name="images")
else:
    logger.info("Images directory %s not found; /images is not served", IMAGES_DIR)

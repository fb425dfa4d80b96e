"""Configuration: env, data paths, API and client settings."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of pokedex package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so POKEDEX_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = BASE_DIR / "data"
POKEMON_DATA_PATH = Path(os.getenv("POKEDEX_DATA_PATH", str(DATA_DIR / "pokemon.json")))
IMAGES_DIR = Path(os.getenv("POKEDEX_IMAGES_DIR", str(BASE_DIR / "public" / "images")))

# API
API_HOST = os.getenv("POKEDEX_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("POKEDEX_API_PORT", "8000"))
DEFAULT_PAGE_SIZE = int(os.getenv("POKEDEX_PAGE_SIZE", "10"))
# Comma-separated; "*" allows any origin (the web client runs on its own dev server)
CORS_ORIGINS = [o.strip() for o in os.getenv("POKEDEX_CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("POKEDEX_LOG_LEVEL", "INFO").upper()

# Client
API_BASE_URL = os.getenv("POKEDEX_API_URL", f"http://localhost:{API_PORT}")
POKEMONS_PER_PAGE = int(os.getenv("POKEDEX_POKEMONS_PER_PAGE", "10"))
# Pause after each response so the loading indicator stays visible
CLIENT_LOADING_DELAY_SEC = float(os.getenv("POKEDEX_CLIENT_DELAY_SEC", "0.5"))
CLIENT_TIMEOUT_SEC = float(os.getenv("POKEDEX_CLIENT_TIMEOUT_SEC", "10"))


def ensure_data_dir() -> None:
    POKEMON_DATA_PATH.parent.mkdir(parents=True, exist_ok=True)

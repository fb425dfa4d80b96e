"""Persist and load the pokemon collection (one JSON file)."""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Optional

from pokedex.config import POKEMON_DATA_PATH
from pokedex.core.errors import StoreUnavailable
from pokedex.models.pokemon import Pokemon

logger = logging.getLogger(__name__)


def _parse_entry(item) -> Pokemon:
    if not isinstance(item["types"], list):
        raise TypeError("types must be a list")
    return Pokemon(
        id=int(item["id"]),
        name=str(item["name"]),
        types=list(item["types"]),
        url=item.get("url") or "",
    )


def load_pokemons(path: Path = POKEMON_DATA_PATH, strict: bool = False) -> List[Pokemon]:
    """Load the whole collection from disk in stored order.

    By default any read or parse failure yields an empty collection and
    malformed entries are skipped; the error is logged, not raised.

    With strict=True (the write path) a missing file is still an empty
    collection, but an unreadable file, a non-list document or a malformed
    entry raises StoreUnavailable, so nothing gets saved over it.
    """
    if not path.exists():
        logger.warning("Pokemon data file %s does not exist", path)
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        logger.warning("Error loading pokemon data from %s: %s", path, e)
        if strict:
            raise StoreUnavailable(f"Pokemon data could not be read: {e}") from e
        return []
    if not isinstance(data, list):
        logger.warning("Pokemon data in %s is not a list", path)
        if strict:
            raise StoreUnavailable("Pokemon data is not a list")
        return []
    out = []
    for item in data:
        try:
            out.append(_parse_entry(item))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed pokemon entry: %r", item)
            if strict:
                raise StoreUnavailable(f"Malformed pokemon entry: {item!r}") from e
            continue
    return out


def save_pokemons(pokemons: List[Pokemon], path: Path = POKEMON_DATA_PATH) -> None:
    """Rewrite the whole collection. Readers never see a partially written file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [
        {
            "id": p.id,
            "name": p.name,
            "types": p.types,
            "url": p.url,
        }
        for p in pokemons
    ]
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.remove(tmp)
        except FileNotFoundError:
            pass
        raise


class PokemonStore:
    """Handle on one data file. Creates hold write_lock across load-check-append-save."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else POKEMON_DATA_PATH
        self.write_lock = threading.Lock()

    def load(self, strict: bool = False) -> List[Pokemon]:
        return load_pokemons(self.path, strict=strict)

    def save(self, pokemons: List[Pokemon]) -> None:
        save_pokemons(pokemons, self.path)

"""Shared application state (injected into routes)."""
from pathlib import Path
from typing import Optional

from pokedex.core.pokemon_store import PokemonStore


class AppState:
    def __init__(self, data_path: Optional[Path] = None) -> None:
        self.store = PokemonStore(data_path)


_state = AppState()


def get_state() -> AppState:
    return _state

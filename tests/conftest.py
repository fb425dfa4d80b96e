# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from pokedex.api.app import app
from pokedex.api.state import AppState, get_state
from pokedex.core.pokemon_store import PokemonStore
from pokedex.models.pokemon import Pokemon


SEED = [
    {"id": 1, "name": "bulbasaur", "types": ["grass", "poison"], "url": "/images/bulbasaur.png"},
    {"id": 2, "name": "ivysaur", "types": ["grass", "poison"], "url": "/images/ivysaur.png"},
    {"id": 4, "name": "charmander", "types": ["fire"], "url": "/images/charmander.png"},
    {"id": 25, "name": "pikachu", "types": ["electric"], "url": "/images/pikachu.png"},
    {"id": 81, "name": "magnemite", "types": ["electric", "steel"], "url": "/images/magnemite.png"},
]


def make_pokemons(*names: str) -> list[Pokemon]:
    """Pokemon with ids 1..n in the given order, single 'normal' type."""
    return [Pokemon(id=i, name=n, types=["normal"], url=f"/images/{n}.png") for i, n in enumerate(names, 1)]


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    p = tmp_path / "pokemon.json"
    p.write_text(json.dumps(SEED), encoding="utf-8")
    return p


@pytest.fixture()
def store(data_file: Path) -> PokemonStore:
    return PokemonStore(data_file)


@pytest.fixture()
def client(data_file: Path):
    # Point the app at a throwaway data file for this test only
    state = AppState(data_path=data_file)
    app.dependency_overrides[get_state] = lambda: state
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_state, None)

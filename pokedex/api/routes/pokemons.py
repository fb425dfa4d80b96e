"""Pokemon catalog: paginated list, name search, type filter, detail with neighbors, create."""
from typing import Any, Optional, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from pokedex.api.state import AppState, get_state
from pokedex.config import DEFAULT_PAGE_SIZE
from pokedex.core.errors import InvalidArgument
from pokedex.core.formatter import format_pokemon
from pokedex.core.queries import (
    filter_by_type,
    get_by_id_with_neighbors,
    list_page,
    search_by_name,
)
from pokedex.core.validator import create_pokemon

router = APIRouter()


class CreatePokemonBody(BaseModel):
    """Fields are loose on purpose; create_pokemon reports what is wrong with them."""
    name: Optional[str] = None
    id: Optional[Union[int, str]] = None
    types: Optional[Any] = None
    url: Optional[str] = None


@router.get("")
def list_pokemons(
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    state: AppState = Depends(get_state),
):
    """List pokemons in stored order, one page at a time."""
    pokemons = state.store.load()
    return {"data": [format_pokemon(p) for p in list_page(pokemons, page, limit)]}


@router.get("/search")
def search_pokemons(
    name: Optional[str] = None,
    search: Optional[str] = None,
    state: AppState = Depends(get_state),
):
    """Search pokemons by name (?name= or ?search=)."""
    term = name or search
    if not (term or "").strip():
        raise InvalidArgument("Search term is required")
    pokemons = state.store.load()
    return {"data": [format_pokemon(p) for p in search_by_name(pokemons, term)]}


@router.get("/type")
def filter_without_type(state: AppState = Depends(get_state)):
    raise InvalidArgument("Type is required")


@router.get("/type/{pokemon_type}")
def filter_pokemons_by_type(pokemon_type: str, state: AppState = Depends(get_state)):
    """Pokemons having the given type."""
    if not pokemon_type.strip():
        raise InvalidArgument("Type is required")
    pokemons = state.store.load()
    return {"data": [format_pokemon(p) for p in filter_by_type(pokemons, pokemon_type)]}


@router.get("/{pokemon_id}")
def get_pokemon(pokemon_id: str, state: AppState = Depends(get_state)):
    """Single pokemon with next/previous (wrapping)."""
    pokemons = state.store.load()
    return {"data": get_by_id_with_neighbors(pokemons, pokemon_id)}


@router.post("", status_code=201)
def post_pokemon(body: CreatePokemonBody, state: AppState = Depends(get_state)):
    """Create a pokemon; returns it in display form."""
    return create_pokemon(state.store, body.model_dump())

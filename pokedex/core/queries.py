"""Read queries over the pokemon collection: page, name search, type filter, by id."""
from typing import List, Optional

from pokedex.core.errors import InvalidArgument, PokemonNotFound
from pokedex.core.formatter import format_pokemon
from pokedex.models.pokemon import Pokemon


def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()


def list_page(pokemons: List[Pokemon], page: int, page_size: int) -> List[Pokemon]:
    """Return the 1-indexed page of the collection in stored order.

    Pages past the end are empty. page < 1 and page_size < 1 are rejected
    rather than clamped.
    """
    if page < 1:
        raise InvalidArgument("page must be 1 or greater")
    if page_size < 1:
        raise InvalidArgument("limit must be 1 or greater")
    start = (page - 1) * page_size
    return pokemons[start:start + page_size]


def search_by_name(pokemons: List[Pokemon], term: Optional[str]) -> List[Pokemon]:
    """Case-insensitive substring match on name."""
    needle = _norm(term)
    if not needle:
        raise InvalidArgument("Search term is required")
    return [p for p in pokemons if needle in p.name.lower()]


def filter_by_type(pokemons: List[Pokemon], type_: Optional[str]) -> List[Pokemon]:
    """Pokemon having type_ (case-insensitive, exact) among their types."""
    wanted = _norm(type_)
    if not wanted:
        raise InvalidArgument("Type is required")
    return [p for p in pokemons if any(t.lower() == wanted for t in p.types)]


def get_by_id_with_neighbors(pokemons: List[Pokemon], pokemon_id) -> dict:
    """Return the pokemon with pokemon_id and its next/previous, wrapping at both ends.

    The result is already formatted for display:
    {"pokemon": ..., "nextPokemon": ..., "previousPokemon": ...}.
    """
    try:
        wanted = int(pokemon_id)
    except (TypeError, ValueError):
        raise PokemonNotFound(pokemon_id)

    index = next((i for i, p in enumerate(pokemons) if p.id == wanted), None)
    if index is None:
        raise PokemonNotFound(pokemon_id)

    last = len(pokemons) - 1
    next_index = index + 1 if index < last else 0
    previous_index = index - 1 if index > 0 else last
    return {
        "pokemon": format_pokemon(pokemons[index]),
        "nextPokemon": format_pokemon(pokemons[next_index]),
        "previousPokemon": format_pokemon(pokemons[previous_index]),
    }

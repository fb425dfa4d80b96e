"""Validate and persist a new pokemon."""
import logging
from typing import Any, Mapping

from pokedex.core.errors import (
    DuplicatePokemon,
    InvalidArgument,
    InvalidTypeCount,
    InvalidTypeValue,
    MissingFields,
)
from pokedex.core.formatter import format_pokemon
from pokedex.core.pokemon_store import PokemonStore
from pokedex.models.pokemon import Pokemon

logger = logging.getLogger(__name__)

POKEMON_TYPES = frozenset({
    "bug", "dragon", "fairy", "fire", "ghost",
    "ground", "normal", "psychic", "steel", "dark",
    "electric", "fighting", "flying", "grass", "ice",
    "poison", "rock", "water",
})

REQUIRED_FIELDS = ("name", "id", "types", "url")


def validate_candidate(pokemons, candidate: Mapping[str, Any]) -> Pokemon:
    """Run every check against the current collection and return the normalized Pokemon.

    Raises MissingFields, InvalidTypeCount, InvalidTypeValue, InvalidArgument
    (id is not an integer) or DuplicatePokemon, in that order.
    """
    if any(not candidate.get(f) for f in REQUIRED_FIELDS):
        raise MissingFields()

    types = candidate["types"]
    if not isinstance(types, (list, tuple)) or not 1 <= len(types) <= 2:
        raise InvalidTypeCount()
    if any(not isinstance(t, str) or t.lower() not in POKEMON_TYPES for t in types):
        raise InvalidTypeValue()

    try:
        pokemon_id = int(candidate["id"])
    except (TypeError, ValueError):
        raise InvalidArgument("Pokémon id must be an integer.")
    name = str(candidate["name"]).lower()
    if any(p.id == pokemon_id or p.name.lower() == name for p in pokemons):
        raise DuplicatePokemon()

    return Pokemon(
        id=pokemon_id,
        name=name,
        types=[t.lower() for t in types],
        url=str(candidate["url"]),
    )


def create_pokemon(store: PokemonStore, candidate: Mapping[str, Any]) -> dict:
    """Append a validated pokemon, rewrite the data file, return its display form."""
    with store.write_lock:
        pokemons = store.load(strict=True)
        pokemon = validate_candidate(pokemons, candidate)
        pokemons.append(pokemon)
        store.save(pokemons)
    logger.info("Created pokemon %s (id %s)", pokemon.name, pokemon.id)
    return format_pokemon(pokemon)

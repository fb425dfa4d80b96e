"""Core catalog logic: store, queries, validation, formatting."""
from pokedex.core.pokemon_store import PokemonStore
from pokedex.core.errors import PokedexError

__all__ = ["PokemonStore", "PokedexError"]

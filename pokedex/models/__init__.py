"""Data models for stored pokemon and client state."""
from pokedex.models.pokemon import Pokemon
from pokedex.models.client_state import DetailState, ListState, QueryMode

__all__ = [
    "Pokemon",
    "ListState",
    "DetailState",
    "QueryMode",
]

"""Client-facing shape of a stored pokemon."""
from typing import Optional

from pokedex.models.pokemon import Pokemon


def display_name(name: str) -> str:
    """Upper-case the first letter only ("mr. mime" -> "Mr. mime")."""
    return name[:1].upper() + name[1:]


def image_url(name: str) -> str:
    return f"/images/{name.lower()}.png"


def format_pokemon(pokemon: Optional[Pokemon]) -> Optional[dict]:
    """Map a Pokemon to {id, name, types, url}; None stays None."""
    if pokemon is None:
        return None
    return {
        "id": pokemon.id,
        "name": display_name(pokemon.name),
        "types": list(pokemon.types),
        "url": image_url(pokemon.name),
    }

"""Client-side list and detail state."""
from dataclasses import dataclass, field
from typing import List, Literal, Optional

QueryMode = Literal["page", "search", "type"]


@dataclass
class ListState:
    """Incrementally loaded list of display records plus the query that produced it."""
    items: List[dict] = field(default_factory=list)
    page: int = 1
    search: str = ""
    type: str = ""
    mode: QueryMode = "page"
    loading: bool = False
    error_message: str = ""


@dataclass
class DetailState:
    """Single pokemon with its circular neighbors."""
    pokemon: Optional[dict] = None
    next_pokemon: Optional[dict] = None
    previous_pokemon: Optional[dict] = None

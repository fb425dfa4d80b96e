"""Stored pokemon record."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Pokemon:
    """Persisted entry: id, lowercase name, 1-2 lowercase element types, image reference."""
    id: int
    name: str
    types: List[str] = field(default_factory=list)
    url: str = ""

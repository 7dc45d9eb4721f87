"""
Recipe Records

Plain recipe data handed to the scaling and search services, independent
of how the recipe was stored.
"""

from dataclasses import dataclass, field, asdict
from typing import List, Optional


@dataclass
class RecipeRecord:
    """Recipe as consumed by the services: ingredient lines plus timing and servings."""
    title: str
    ingredients: List[str] = field(default_factory=list)
    servings: Optional[int] = None
    prep_time: Optional[str] = None
    cook_time: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data):
        """Build a record from a JSON-style dict, ignoring unknown keys."""
        return cls(
            title=data.get('title', ''),
            ingredients=list(data.get('ingredients') or []),
            servings=data.get('servings'),
            prep_time=data.get('prep_time'),
            cook_time=data.get('cook_time'),
            slug=data.get('slug'),
            description=data.get('description'),
            category=data.get('category'),
            difficulty=data.get('difficulty'),
            tags=list(data.get('tags') or []),
            instructions=list(data.get('instructions') or []),
            id=data.get('id'),
        )

    def to_dict(self):
        return asdict(self)

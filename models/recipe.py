"""
Recipe Models

Contains the Recipe and RecipeIngredient models for storing recipes
and their ingredient lines as written.
"""

from datetime import datetime

from services.records import RecipeRecord
from .base import db


class Recipe(db.Model):
    """Recipe with metadata and ordered ingredient lines."""
    id = db.Column(db.Integer, primary_key=True)
    slug = db.Column(db.String(200), unique=True, nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(50), nullable=True, index=True)
    difficulty = db.Column(db.String(20), nullable=True)
    servings = db.Column(db.Integer, nullable=True)  # None means "not specified"
    prep_time = db.Column(db.String(50), nullable=True)
    cook_time = db.Column(db.String(50), nullable=True)
    tags = db.Column(db.JSON, default=list)
    instructions = db.Column(db.JSON, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    ingredients = db.relationship('RecipeIngredient', backref='recipe', lazy=True,
                                  cascade='all, delete-orphan',
                                  order_by='RecipeIngredient.position')

    def to_record(self):
        """Convert to the plain record consumed by the scaling and search services."""
        return RecipeRecord(
            id=self.id,
            slug=self.slug,
            title=self.title,
            description=self.description,
            category=self.category,
            difficulty=self.difficulty,
            servings=self.servings,
            prep_time=self.prep_time,
            cook_time=self.cook_time,
            tags=list(self.tags or []),
            instructions=list(self.instructions or []),
            ingredients=[ri.text for ri in self.ingredients],
        )


class RecipeIngredient(db.Model):
    """One ingredient line of a recipe, stored exactly as written."""
    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(db.Integer, db.ForeignKey('recipe.id'), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    text = db.Column(db.String(500), nullable=False)

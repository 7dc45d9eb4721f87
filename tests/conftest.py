"""
Shared pytest fixtures.

The app reads its configuration at import time, so the testing
environment has to be selected before app is imported anywhere.
"""

import os

os.environ['FLASK_ENV'] = 'testing'

import pytest

from services import RecipeRecord


@pytest.fixture
def client():
    from app import app, db

    with app.app_context():
        db.create_all()
    with app.test_client() as client:
        yield client
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def pancakes():
    return RecipeRecord(
        slug='fluffy-pancakes',
        title='Fluffy Pancakes',
        description='Light breakfast pancakes',
        category='Breakfast',
        difficulty='Easy',
        servings=4,
        prep_time='10 minutes',
        cook_time='20 minutes',
        ingredients=['1½ cups flour', '1/2 cup milk', '2 eggs', 'Salt to taste'],
        tags=['breakfast'],
    )


@pytest.fixture
def chili():
    return RecipeRecord(
        slug='beef-chili',
        title='Beef Chili',
        description='Hearty chili with beans',
        category='Dinner',
        difficulty='Medium',
        servings=6,
        cook_time='1-2 hours',
        ingredients=['1 lb ground beef', '2 cans kidney beans', '1 tbsp chili powder'],
        tags=['dinner', 'spicy'],
    )

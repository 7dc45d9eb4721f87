import pytest

from services import (
    RecipeRecord, ScaledRecipe, scale_ingredient, scale_recipe,
    adjust_cooking_time, get_serving_size_options, validate_scaling_factor,
)


@pytest.mark.parametrize('line,factor,expected', [
    ('1 1/2 cups flour', 2, '3 cups flour'),
    ('4 large eggs', 0.5, '2 large eggs'),
    ('1 cup sugar', 0.5, '1/2 cup sugar'),
    ('1 cup milk', 1.5, '1 1/2 cup milk'),
    ('1 cup sugar', 1 / 3, '1/3 cup sugar'),
    ('3 cups broth', 0.7, '2 1/10 cups broth'),
    ('1 tsp vanilla', 0.37, '0.37 tsp vanilla'),
    ('2 eggs', 2, '4 eggs'),
])
def test_scale_ingredient(line, factor, expected):
    assert scale_ingredient(line, factor) == expected


def test_scale_ingredient_without_quantity():
    assert scale_ingredient('Salt to taste', 3) == 'Salt to taste (adjust to taste)'


def test_scale_recipe(pancakes):
    scaled = scale_recipe(pancakes, 8)

    assert isinstance(scaled, ScaledRecipe)
    assert scaled.original_servings == 4
    assert scaled.scaled_servings == 8
    assert scaled.servings == 8
    assert scaled.scaling_factor == 2.0
    assert scaled.prep_time == '13 minutes'
    assert scaled.cook_time == '26 minutes'
    assert scaled.ingredients == [
        '3 cups flour',
        '1 cup milk',
        '4 eggs',
        'Salt to taste (adjust to taste)',
    ]
    assert scaled.title == pancakes.title
    assert scaled.tags == pancakes.tags


def test_scale_recipe_does_not_modify_input(pancakes):
    scale_recipe(pancakes, 2)
    assert pancakes.servings == 4
    assert pancakes.ingredients[0] == '1½ cups flour'


def test_scale_recipe_defaults_servings():
    recipe = RecipeRecord(title='Toast', ingredients=['2 slices bread'])
    scaled = scale_recipe(recipe, 2)
    assert scaled.original_servings == 4
    assert scaled.scaling_factor == 0.5
    assert scaled.ingredients == ['1 slices bread']
    assert scaled.prep_time is None


def test_scaled_recipe_to_dict(chili):
    data = scale_recipe(chili, 12).to_dict()
    assert data['scaling_factor'] == 2.0
    assert data['original_servings'] == 6
    assert data['cook_time'] == '1-3 hours'
    assert data['ingredients'][0] == '2 lb ground beef'


@pytest.mark.parametrize('time,factor,expected', [
    ('30 minutes', 2, '39 minutes'),
    ('30 mins', 1, '30 minutes'),
    ('1 hour', 2, '1 hour'),
    ('2 hours', 2, '3 hours'),
    ('1-2 hours', 3, '2-3 hours'),
    ('40 minutes', 0.5, '34 minutes'),
    ('20-25 minutes', 0.5, '17-21 minutes'),
    ('1 hr', 0.5, '1 hour'),
    ('Bake 50 MIN', 2, '65 minutes'),
])
def test_adjust_cooking_time(time, factor, expected):
    assert adjust_cooking_time(time, factor) == expected


def test_adjust_cooking_time_unrecognized():
    assert adjust_cooking_time('Overnight', 2) == 'Overnight'
    assert adjust_cooking_time(None, 2) is None
    assert adjust_cooking_time('', 2) is None


@pytest.mark.parametrize('servings,expected', [
    (4, [1, 2, 4, 6, 8, 12, 16, 24]),
    (5, [1, 2, 3, 4, 5, 6, 8, 10, 12, 15, 16, 24]),
    (40, [1, 2, 4, 6, 8, 12, 16, 20, 24, 40]),
])
def test_get_serving_size_options(servings, expected):
    assert get_serving_size_options(servings) == expected


@pytest.mark.parametrize('factor', [0, -1])
def test_validate_scaling_factor_rejects(factor):
    validation = validate_scaling_factor(factor)
    assert not validation.is_valid
    assert validation.warning == 'Scaling factor must be positive'


def test_validate_scaling_factor_warnings():
    small = validate_scaling_factor(0.1)
    assert small.is_valid
    assert small.warning == 'Very small portions may be difficult to measure accurately'

    large = validate_scaling_factor(11)
    assert large.is_valid
    assert large.warning == 'Large batches may require cooking time and equipment adjustments'


@pytest.mark.parametrize('factor', [1, 0.25, 10])
def test_validate_scaling_factor_comfortable(factor):
    validation = validate_scaling_factor(factor)
    assert validation.is_valid
    assert validation.warning is None


def test_no_break_space_quantities():
    assert scale_ingredient('1\xa01/2 cups flour', 2) == '3 cups flour'
    assert adjust_cooking_time('30\xa0minutes', 2) == '39 minutes'
    assert adjust_cooking_time('1-2\xa0hours', 3) == '2-3 hours'


def test_scale_ingredient_huge_quantity():
    assert scale_ingredient('1' * 400 + ' g sugar', 2) == 'Infinity g sugar'


def test_adjust_cooking_time_huge_value():
    assert adjust_cooking_time('9' * 400 + ' minutes', 2) == 'Infinity minutes'


@pytest.mark.parametrize('factor', [float('nan'), float('inf')])
def test_validate_scaling_factor_rejects_non_finite(factor):
    validation = validate_scaling_factor(factor)
    assert not validation.is_valid
    assert validation.warning == 'Scaling factor must be a finite number'

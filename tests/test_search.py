from services import RecipeRecord, search_recipes, get_ingredient_suggestions


def test_search_without_query_returns_all(pancakes, chili):
    results = search_recipes([pancakes, chili], '')
    assert [r.recipe for r in results] == [pancakes, chili]
    assert all(r.score is None for r in results)


def test_search_by_title(pancakes, chili):
    results = search_recipes([chili, pancakes], 'pancakes')
    assert results[0].recipe is pancakes
    assert 'title' in results[0].matches
    assert results[0].score > 0


def test_search_normalizes_query_fractions(pancakes, chili):
    results = search_recipes([chili, pancakes], '½ cup milk')
    assert results[0].recipe is pancakes
    assert 'ingredients' in results[0].matches


def test_search_filters(pancakes, chili):
    by_category = search_recipes([pancakes, chili], '', category='dinner')
    assert [r.recipe for r in by_category] == [chili]

    by_tag = search_recipes([pancakes, chili], '', tags=['spicy'])
    assert [r.recipe for r in by_tag] == [chili]

    by_difficulty = search_recipes([pancakes, chili], '', difficulty='Easy')
    assert [r.recipe for r in by_difficulty] == [pancakes]


def test_search_filters_apply_before_matching(pancakes, chili):
    assert search_recipes([pancakes, chili], 'pancakes', category='Dinner') == []


def test_search_short_query_matches_nothing(pancakes, chili):
    assert search_recipes([pancakes, chili], 'a') == []


def test_ingredient_suggestions_match_fraction_forms(pancakes, chili):
    ascii_form = get_ingredient_suggestions([pancakes, chili], '1/2 cup')
    assert [s.ingredient for s in ascii_form] == ['1/2 cup milk']

    unicode_form = get_ingredient_suggestions([pancakes, chili], '½ cup')
    assert '1/2 cup milk' in [s.ingredient for s in unicode_form]


def test_ingredient_suggestions_grouped_by_main_ingredient(pancakes, chili):
    tacos = RecipeRecord(title='Tacos', ingredients=['1 lb ground beef, browned', '8 tortillas'])
    suggestions = get_ingredient_suggestions([pancakes, chili, tacos], 'beef')

    assert suggestions[0].ingredient == '1 lb ground beef'
    assert suggestions[0].count == 2
    assert suggestions[0].recipes == [chili, tacos]


def test_ingredient_suggestions_limit(pancakes, chili):
    assert get_ingredient_suggestions([pancakes, chili], '') == []
    assert len(get_ingredient_suggestions([pancakes, chili], 'c', limit=2)) == 2

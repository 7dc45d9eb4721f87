from utils import sanitize_text, sanitize_recipe_title, sanitize_ingredient_text, slugify, clean_query


def test_sanitize_text_keeps_markup_characters():
    assert sanitize_text('  Salt & <b>pepper</b>\x00 ') == 'Salt & <b>pepper</b>'
    assert sanitize_text(None) == ''
    assert sanitize_text('x' * 20, max_length=10) == 'xxxxxxx...'


def test_sanitize_recipe_title():
    assert sanitize_recipe_title("  Mom's   Pancakes  ") == "Mom's Pancakes"
    assert sanitize_recipe_title('') == 'Untitled Recipe'


def test_sanitize_ingredient_text():
    assert sanitize_ingredient_text(' 1\xa01/2 cups flour\x07 ') == '1\xa01/2 cups flour'
    assert sanitize_ingredient_text('Salt & pepper') == 'Salt & pepper'
    assert sanitize_ingredient_text(None) == ''


def test_slugify():
    assert slugify("Mom's Pancakes!") == 'mom-s-pancakes'
    assert slugify('!!!') == 'recipe'


def test_clean_query():
    assert clean_query(' 1/2\ncup ') == '1/2 cup'
    assert clean_query(None) == ''

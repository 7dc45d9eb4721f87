"""
Smoke tests for the recipe scaling service.
Run with: python tests/test_smoke.py  (or pytest)
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
os.environ.setdefault('FLASK_ENV', 'testing')

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app, db
    assert app is not None
    assert db is not None
    print("OK: App imports successfully")

def test_models_import():
    """Verify models can be imported."""
    from models import Recipe, RecipeIngredient
    assert Recipe is not None
    assert RecipeIngredient is not None
    print("OK: Models import successfully")

def test_services_import():
    """Verify every service operation is exported."""
    import services
    for name in services.__all__:
        assert hasattr(services, name), name
    assert callable(services.normalize_fractions)
    assert callable(services.scale_recipe)
    print("OK: Services import successfully")

def test_constants_unchanged():
    """Verify lexicon constants have expected values."""
    from constants import UNICODE_FRACTIONS, FRACTION_STRINGS, EPSILON

    # These values must not change
    assert EPSILON == 0.001
    assert UNICODE_FRACTIONS['½'] == 0.5
    assert UNICODE_FRACTIONS['⅓'] == 0.333
    assert UNICODE_FRACTIONS['⅙'] == 0.167
    assert UNICODE_FRACTIONS['⅐'] == 0.143
    assert FRACTION_STRINGS['2/3'] == 0.667
    assert FRACTION_STRINGS['3/10'] == 0.3
    assert len(FRACTION_STRINGS) == 19
    print("OK: Lexicon constants unchanged")

def test_lexicons_read_only():
    """Verify lexicons cannot be modified at runtime."""
    from constants import UNICODE_FRACTIONS, FRACTION_STRINGS
    for table in (UNICODE_FRACTIONS, FRACTION_STRINGS):
        try:
            table['1/7'] = 0.143
        except TypeError:
            continue
        raise AssertionError("lexicon accepted a new entry")
    print("OK: Lexicons are read-only")

def test_app_runs():
    """Verify app can create test client."""
    from app import app, db
    with app.app_context():
        db.create_all()
    with app.test_client() as client:
        response = client.get('/api/recipes')
        assert response.status_code == 200
        print("OK: App serves recipe list")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_services_import,
        test_constants_unchanged,
        test_lexicons_read_only,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)

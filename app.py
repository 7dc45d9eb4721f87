import logging

from flask import Flask, jsonify, request
from flask_migrate import Migrate
from sqlalchemy.orm import joinedload
from werkzeug.exceptions import BadRequest, HTTPException

from config import get_config
from models import db, Recipe, RecipeIngredient
from services import (
    normalize_fractions, extract_fractions, contains_fractions,
    scale_recipe, get_serving_size_options, validate_scaling_factor,
    search_recipes, get_ingredient_suggestions, validate_recipe, RecipeRecord,
)
from utils.sanitizer import (
    sanitize_text, sanitize_recipe_title, sanitize_ingredient_text,
    slugify, clean_query
)
from constants import DEFAULT_SERVINGS, MAX_LENGTHS

app = Flask(__name__)
app.config.from_object(get_config())

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

db.init_app(app)
migrate = Migrate(app, db)


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def issues_to_json(issues):
    return [{'field': i.field, 'message': i.message} for i in issues]


def fraction_to_json(fraction):
    return {'value': fraction.value, 'original': fraction.original, 'normalized': fraction.normalized}


def load_recipe(id):
    return Recipe.query.options(joinedload(Recipe.ingredients)).get_or_404(
        id, description=f'Recipe {id} not found')


def all_recipe_records():
    recipes = Recipe.query.options(joinedload(Recipe.ingredients)).order_by(Recipe.title).all()
    return [r.to_record() for r in recipes]


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(HTTPException)
def handle_http_error(e):
    message = 'Method not allowed' if e.code == 405 else e.description
    return jsonify({'message': message}), e.code


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    app.logger.exception('Unhandled error on %s %s', request.method, request.path)
    db.session.rollback()
    return jsonify({'message': 'Internal server error'}), 500


# ============================================
# ROUTES - RECIPES
# ============================================

@app.route('/api/recipes', methods=['GET'])
def recipes_list():
    return jsonify([r.to_dict() for r in all_recipe_records()])


@app.route('/api/recipes', methods=['POST'])
def recipe_add():
    data = request.get_json(silent=True)
    validation = validate_recipe(data)
    if not validation.is_valid:
        return jsonify({
            'message': 'Invalid recipe',
            'errors': issues_to_json(validation.errors),
        }), 400

    record = RecipeRecord.from_dict(data)
    title = sanitize_recipe_title(record.title)
    slug = slugify(record.slug or record.title)
    if Recipe.query.filter_by(slug=slug).first():
        return jsonify({'message': f'Recipe with slug "{slug}" already exists'}), 409

    recipe = Recipe(
        slug=slug,
        title=title,
        description=sanitize_text(record.description, MAX_LENGTHS['description']) or None,
        category=sanitize_text(record.category, MAX_LENGTHS['category']) or None,
        difficulty=record.difficulty,
        servings=record.servings,
        prep_time=sanitize_text(record.prep_time, MAX_LENGTHS['time']) or None,
        cook_time=sanitize_text(record.cook_time, MAX_LENGTHS['time']) or None,
        tags=[sanitize_text(t, MAX_LENGTHS['tag']) for t in record.tags],
        instructions=[sanitize_text(s, MAX_LENGTHS['instruction']) for s in record.instructions],
    )
    for position, line in enumerate(record.ingredients):
        recipe.ingredients.append(RecipeIngredient(position=position, text=sanitize_ingredient_text(line)))

    db.session.add(recipe)
    db.session.commit()
    app.logger.info('Recipe "%s" created with %d ingredients', recipe.title, len(recipe.ingredients))

    return jsonify({
        'recipe': recipe.to_record().to_dict(),
        'warnings': issues_to_json(validation.warnings),
    }), 201


@app.route('/api/recipes/<int:id>')
def recipe_view(id):
    return jsonify(load_recipe(id).to_record().to_dict())


@app.route('/api/recipes/<int:id>/scale')
def recipe_scale(id):
    record = load_recipe(id).to_record()
    original_servings = record.servings or DEFAULT_SERVINGS

    if 'servings' not in request.args:
        raise BadRequest('servings is required')
    servings = request.args.get('servings', type=int)
    if servings is None:
        raise BadRequest('servings must be a whole number')
    servings = min(servings, app.config['MAX_SERVINGS'])

    scaling_factor = servings / original_servings
    validation = validate_scaling_factor(scaling_factor)
    if not validation.is_valid:
        app.logger.warning('Rejected scaling recipe %s to %s servings: %s', id, servings, validation.warning)
        return jsonify({'message': validation.warning}), 400

    scaled = scale_recipe(record, servings)
    return jsonify({
        'recipe': scaled.to_dict(),
        'warning': validation.warning,
        'serving_options': get_serving_size_options(original_servings),
    })


# ============================================
# ROUTES - SEARCH
# ============================================

@app.route('/api/search')
def recipes_search():
    query = clean_query(request.args.get('q', ''))
    threshold = safe_int(request.args.get('threshold'), default=app.config['SEARCH_THRESHOLD'],
                         min_val=0, max_val=100)
    results = search_recipes(
        all_recipe_records(),
        query,
        category=request.args.get('category'),
        difficulty=request.args.get('difficulty'),
        tags=request.args.getlist('tag'),
        threshold=threshold,
    )
    return jsonify({
        'query': query,
        'normalized_query': normalize_fractions(query),
        'results': [
            {'recipe': r.recipe.to_dict(), 'score': r.score, 'matches': r.matches}
            for r in results
        ],
    })


@app.route('/api/ingredients/suggestions')
def ingredient_suggestions():
    term = clean_query(request.args.get('q', ''))
    limit = safe_int(request.args.get('limit'), default=app.config['SUGGESTION_LIMIT'],
                     min_val=1, max_val=50)
    suggestions = get_ingredient_suggestions(all_recipe_records(), term, limit=limit)
    return jsonify([
        {'ingredient': s.ingredient, 'count': s.count, 'recipes': [r.slug for r in s.recipes]}
        for s in suggestions
    ])


# ============================================
# ROUTES - FRACTIONS
# ============================================

@app.route('/api/fractions', methods=['POST'])
def fractions_normalize():
    data = request.get_json(silent=True) or {}
    text = data.get('text')
    if not isinstance(text, str):
        raise BadRequest('text must be a string')

    text = clean_query(text, max_length=MAX_LENGTHS['instruction'])
    return jsonify({
        'text': text,
        'normalized': normalize_fractions(text),
        'fractions': [fraction_to_json(f) for f in extract_fractions(text)],
        'contains_fractions': contains_fractions(text),
    })


def init_db():
    """Create tables that don't exist yet."""
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    init_db()
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)

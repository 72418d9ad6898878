"""
Catalog Operations

Insert helpers for users, ingredients, taxonomy and recipes. Each helper
validates its input, adds the row to the session and flushes so that
generated ids and constraint violations surface immediately. Committing
is left to the caller.
"""

from constants import MAX_LENGTHS
from models import (
    User, Ingredient, Seasonality, Category, Tag,
    Recipe, RecipeIngredient, Instruction,
)
from utils.sanitizer import sanitize_text, sanitize_name, normalize_email, sanitize_unit
from utils.validators import (
    validate_username, validate_email, validate_password, validate_required,
    validate_month, validate_quantity, validate_minutes, validate_servings,
    validate_step_number,
)


def _flush(session, obj):
    session.add(obj)
    session.flush()
    return obj


def create_user(session, username, email, password):
    """Create a user; the password is hashed before it reaches the session."""
    user = User(
        username=validate_username(sanitize_name(username, MAX_LENGTHS['username'])),
        email=validate_email(normalize_email(email)),
    )
    user.set_password(validate_password(password))
    return _flush(session, user)


def create_ingredient(session, name):
    name = validate_required('name', sanitize_name(name, MAX_LENGTHS['ingredient_name']))
    return _flush(session, Ingredient(name=name))


def set_seasonality(session, ingredient, season_start, season_end):
    """
    Attach or replace an ingredient's season.

    season_end may be earlier than season_start for seasons that wrap
    the year end (e.g., 11 -> 2).
    """
    season_start = validate_month('season_start', season_start)
    season_end = validate_month('season_end', season_end)

    seasonality = ingredient.seasonality
    if seasonality is None:
        seasonality = Seasonality(ingredient=ingredient)
    seasonality.season_start = season_start
    seasonality.season_end = season_end
    return _flush(session, seasonality)


def create_category(session, name):
    name = validate_required('name', sanitize_name(name, MAX_LENGTHS['category_name']))
    return _flush(session, Category(name=name))


def create_tag(session, name):
    name = validate_required('name', sanitize_name(name, MAX_LENGTHS['tag_name']))
    return _flush(session, Tag(name=name))


def create_recipe(session, user_id, title, description=None,
                  prep_time=0, cook_time=0, servings=0,
                  categories=(), tags=()):
    recipe = Recipe(
        user_id=user_id,
        title=validate_required('title', sanitize_name(title, MAX_LENGTHS['recipe_title'])),
        description=sanitize_text(description),
        prep_time=validate_minutes('prep_time', prep_time),
        cook_time=validate_minutes('cook_time', cook_time),
        servings=validate_servings(servings),
    )
    recipe.categories.extend(categories)
    recipe.tags.extend(tags)
    return _flush(session, recipe)


def add_recipe_ingredient(session, recipe_id, ingredient_id, quantity, unit):
    link = RecipeIngredient(
        recipe_id=recipe_id,
        ingredient_id=ingredient_id,
        quantity=validate_quantity(quantity),
        unit=validate_required('unit', sanitize_unit(unit)),
    )
    return _flush(session, link)


def add_instruction(session, recipe_id, step_number, description):
    instruction = Instruction(
        recipe_id=recipe_id,
        step_number=validate_step_number(step_number),
        description=validate_required('description', sanitize_text(description)),
    )
    return _flush(session, instruction)


def delete_user(session, user):
    """Delete a user; their recipes go with them, shared rows stay."""
    session.delete(user)
    session.flush()

"""
Recipe Read-Back

Fetches stored recipes and renders them as indented JSON for inspection.
"""

import json

from models import Recipe


def first_recipe(session):
    """Return the recipe with the lowest id, or None when there are none."""
    return session.query(Recipe).order_by(Recipe.id).first()


def recipe_to_dict(recipe, include_related=False):
    """
    Convert a recipe into plain Python types.

    Args:
        recipe: Recipe instance
        include_related: Also include instructions, ingredients, categories and tags

    Returns:
        dict ready for json.dumps
    """
    data = {
        'id': recipe.id,
        'title': recipe.title,
        'description': recipe.description,
        'prep_time': recipe.prep_time,
        'cook_time': recipe.cook_time,
        'servings': recipe.servings,
        'user_id': recipe.user_id,
        'created_at': recipe.created_at.isoformat() if recipe.created_at else None,
        'updated_at': recipe.updated_at.isoformat() if recipe.updated_at else None,
    }
    if not include_related:
        return data

    data['instructions'] = [
        {'step_number': step.step_number, 'description': step.description}
        for step in recipe.instructions
    ]
    data['ingredients'] = [
        {
            'ingredient_id': link.ingredient_id,
            'name': link.ingredient.name,
            'quantity': link.quantity,
            'unit': link.unit,
        }
        for link in sorted(recipe.ingredients, key=lambda ri: ri.ingredient_id)
    ]
    data['categories'] = sorted(c.name for c in recipe.categories)
    data['tags'] = sorted(t.name for t in recipe.tags)
    return data


def format_recipe(recipe, include_related=False):
    """Render a recipe as indented JSON text."""
    return json.dumps(recipe_to_dict(recipe, include_related), indent=2, ensure_ascii=False)

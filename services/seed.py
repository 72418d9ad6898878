"""
Example Data Seeding

Inserts the example user, ingredients and recipe in a single transaction.
Any failed insert rolls back everything written so far and raises SeedError.
"""

from sqlalchemy.exc import SQLAlchemyError

from constants import EXAMPLE_RECIPE
from utils.errors import CatalogError, SeedError, ValidationError
from utils.validators import check_step_sequence
from .catalog import (
    create_user, create_ingredient, create_recipe,
    add_recipe_ingredient, add_instruction,
)


def _attempt(session, logger, step, func, *args, **kwargs):
    """Run one insert; on failure roll back the transaction and raise SeedError."""
    try:
        return func(session, *args, **kwargs)
    except (SQLAlchemyError, CatalogError) as e:
        session.rollback()
        logger.error(f"Failed to create {step}", extra={'error': str(e)})
        raise SeedError(step, e) from e


def seed_example_recipe(session, logger, data=None):
    """
    Insert the example recipe and everything it references.

    Args:
        session: SQLAlchemy session (db.session inside an app context)
        logger: Application logger
        data: Seed definition shaped like constants.EXAMPLE_RECIPE

    Returns:
        The committed Recipe

    Raises:
        SeedError: If any insert fails; nothing from this call is persisted
    """
    data = data or EXAMPLE_RECIPE

    user_data = data['user']
    user = _attempt(session, logger, 'user', create_user,
                    user_data['username'], user_data['email'], user_data['password'])

    ingredients = {}
    for name in data['ingredients']:
        ingredients[name] = _attempt(session, logger, 'ingredient', create_ingredient, name)

    recipe_data = data['recipe']
    recipe = _attempt(session, logger, 'recipe', create_recipe,
                      user.id, recipe_data['title'],
                      description=recipe_data.get('description'),
                      prep_time=recipe_data.get('prep_time', 0),
                      cook_time=recipe_data.get('cook_time', 0),
                      servings=recipe_data.get('servings', 0))

    for name, quantity, unit in data['quantities']:
        ingredient = ingredients.get(name)
        if ingredient is None:
            session.rollback()
            logger.error("Failed to create recipe ingredient",
                         extra={'error': f"unknown ingredient {name!r}"})
            raise SeedError('recipe ingredient', f"unknown ingredient {name!r}")
        _attempt(session, logger, 'recipe ingredient', add_recipe_ingredient,
                 recipe.id, ingredient.id, quantity, unit)

    steps = []
    for step_number, description in enumerate(data['instructions'], start=1):
        instruction = _attempt(session, logger, 'instruction', add_instruction,
                               recipe.id, step_number, description)
        steps.append(instruction.step_number)

    try:
        check_step_sequence(steps)
    except ValidationError as e:
        session.rollback()
        logger.error("Failed to create instruction sequence", extra={'error': str(e)})
        raise SeedError('instruction sequence', e) from e

    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to commit seed transaction", extra={'error': str(e)})
        raise SeedError('seed transaction', e) from e

    logger.info("Recipe created successfully", extra={'recipe_id': recipe.id})
    return recipe

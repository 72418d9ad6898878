"""
Services Package

Schema, catalog, seed and read-back logic for the recipe catalog.
"""

from .schema import MigrationReport, migrate_schema

from .catalog import (
    create_user,
    create_ingredient,
    set_seasonality,
    create_category,
    create_tag,
    create_recipe,
    add_recipe_ingredient,
    add_instruction,
    delete_user,
)

from .seed import seed_example_recipe

from .serializer import (
    first_recipe,
    recipe_to_dict,
    format_recipe,
)

__all__ = [
    # Schema
    'MigrationReport',
    'migrate_schema',
    # Catalog
    'create_user',
    'create_ingredient',
    'set_seasonality',
    'create_category',
    'create_tag',
    'create_recipe',
    'add_recipe_ingredient',
    'add_instruction',
    'delete_user',
    # Seed
    'seed_example_recipe',
    # Read-back
    'first_recipe',
    'recipe_to_dict',
    'format_recipe',
]

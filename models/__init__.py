"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .user import User
from .ingredient import Ingredient, Seasonality
from .taxonomy import Category, Tag, recipe_categories, recipe_tags
from .recipe import Recipe, RecipeIngredient, Instruction

__all__ = [
    'db',
    'User',
    'Ingredient',
    'Seasonality',
    'Category',
    'Tag',
    'recipe_categories',
    'recipe_tags',
    'Recipe',
    'RecipeIngredient',
    'Instruction',
]

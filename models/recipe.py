"""
Recipe Models

Contains the Recipe, RecipeIngredient and Instruction models for managing
recipes, their ingredient associations and their ordered steps.
"""

from .base import db, TimestampMixin
from .taxonomy import recipe_categories, recipe_tags


class Recipe(TimestampMixin, db.Model):
    """Recipe owned by a user, with ingredients, steps, categories and tags."""
    __tablename__ = 'recipes'
    __table_args__ = (
        db.CheckConstraint('prep_time >= 0', name='prep_time_non_negative'),
        db.CheckConstraint('cook_time >= 0', name='cook_time_non_negative'),
        db.CheckConstraint('servings >= 0', name='servings_non_negative'),
    )

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    prep_time = db.Column(db.Integer, nullable=False, default=0, server_default='0')  # minutes
    cook_time = db.Column(db.Integer, nullable=False, default=0, server_default='0')  # minutes
    servings = db.Column(db.Integer, nullable=False, default=0, server_default='0')
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'),
        nullable=False, index=True,
    )
    user = db.relationship('User', back_populates='recipes')
    instructions = db.relationship(
        'Instruction', back_populates='recipe', order_by='Instruction.step_number',
        cascade='all, delete-orphan', passive_deletes=True,
    )
    ingredients = db.relationship(
        'RecipeIngredient', back_populates='recipe',
        cascade='all, delete-orphan', passive_deletes=True,
    )
    categories = db.relationship('Category', secondary=recipe_categories, back_populates='recipes')
    tags = db.relationship('Tag', secondary=recipe_tags, back_populates='recipes')

    def __repr__(self):
        return f"<Recipe(id={self.id}, title={self.title})>"


class RecipeIngredient(db.Model):
    """Join table linking recipes to ingredients with quantity and unit."""
    __tablename__ = 'recipe_ingredients'
    __table_args__ = (
        db.CheckConstraint('quantity > 0', name='quantity_positive'),
    )

    recipe_id = db.Column(
        db.Integer, db.ForeignKey('recipes.id', ondelete='CASCADE'), primary_key=True,
    )
    # An ingredient still used by a recipe cannot be deleted
    ingredient_id = db.Column(
        db.Integer, db.ForeignKey('ingredients.id', ondelete='RESTRICT'),
        primary_key=True, index=True,
    )
    quantity = db.Column(db.Float, nullable=False)
    unit = db.Column(db.String(50), nullable=False)  # free text: 'grams', 'ml', 'pinch'
    recipe = db.relationship('Recipe', back_populates='ingredients')
    ingredient = db.relationship('Ingredient', back_populates='recipe_links')


class Instruction(db.Model):
    """Single numbered step of a recipe. Step numbers are unique per recipe."""
    __tablename__ = 'instructions'
    __table_args__ = (
        db.UniqueConstraint('recipe_id', 'step_number', name='uq_instructions_recipe_step'),
        db.CheckConstraint('step_number >= 1', name='step_number_positive'),
    )

    id = db.Column(db.Integer, primary_key=True)
    recipe_id = db.Column(
        db.Integer, db.ForeignKey('recipes.id', ondelete='CASCADE'), nullable=False,
    )
    step_number = db.Column(db.Integer, nullable=False)
    description = db.Column(db.Text, nullable=False)
    recipe = db.relationship('Recipe', back_populates='instructions')

"""
Taxonomy Models

Categories and tags, both linked to recipes many-to-many through the
recipe_categories and recipe_tags association tables.
"""

from .base import db, TimestampMixin


# Deleting either side removes only the link row
recipe_categories = db.Table(
    'recipe_categories',
    db.Column('recipe_id', db.Integer, db.ForeignKey('recipes.id', ondelete='CASCADE'), primary_key=True),
    db.Column('category_id', db.Integer, db.ForeignKey('categories.id', ondelete='CASCADE'), primary_key=True),
)

recipe_tags = db.Table(
    'recipe_tags',
    db.Column('recipe_id', db.Integer, db.ForeignKey('recipes.id', ondelete='CASCADE'), primary_key=True),
    db.Column('tag_id', db.Integer, db.ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True),
)


class Category(TimestampMixin, db.Model):
    """Recipe category (e.g., 'Salad', 'Dessert')."""
    __tablename__ = 'categories'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    recipes = db.relationship('Recipe', secondary=recipe_categories, back_populates='categories')


class Tag(db.Model):
    """Free-form recipe label (e.g., 'vegetarian')."""
    __tablename__ = 'tags'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    recipes = db.relationship('Recipe', secondary=recipe_tags, back_populates='tags')

"""
Ingredient Models

Contains the Ingredient and Seasonality models. An ingredient has at
most one seasonality record describing the months it is in season.
"""

from .base import db, TimestampMixin


class Ingredient(TimestampMixin, db.Model):
    """Named ingredient shared by any number of recipes."""
    __tablename__ = 'ingredients'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    seasonality = db.relationship(
        'Seasonality', back_populates='ingredient', uselist=False,
        cascade='all, delete-orphan', passive_deletes=True,
    )
    recipe_links = db.relationship('RecipeIngredient', back_populates='ingredient')

    def in_season(self, month):
        """Ingredients without a seasonality record are available all year."""
        if self.seasonality is None:
            return True
        return self.seasonality.contains(month)

    def __repr__(self):
        return f"<Ingredient(id={self.id}, name={self.name})>"


class Seasonality(TimestampMixin, db.Model):
    """
    Months an ingredient is in season (1 = January, 12 = December).

    Both bounds are inclusive. A season_end earlier than season_start
    wraps the year end: 11 -> 2 covers November through February.
    """
    __tablename__ = 'seasonalities'
    __table_args__ = (
        db.CheckConstraint('season_start BETWEEN 1 AND 12', name='season_start_month'),
        db.CheckConstraint('season_end BETWEEN 1 AND 12', name='season_end_month'),
    )

    id = db.Column(db.Integer, primary_key=True)
    ingredient_id = db.Column(
        db.Integer, db.ForeignKey('ingredients.id', ondelete='CASCADE'),
        unique=True, nullable=False,
    )
    season_start = db.Column(db.Integer, nullable=False)
    season_end = db.Column(db.Integer, nullable=False)
    ingredient = db.relationship('Ingredient', back_populates='seasonality')

    @property
    def wraps_year(self):
        return self.season_end < self.season_start

    def months(self):
        """Return the in-season months in calendar order of the season."""
        if self.wraps_year:
            return list(range(self.season_start, 13)) + list(range(1, self.season_end + 1))
        return list(range(self.season_start, self.season_end + 1))

    def contains(self, month):
        if self.wraps_year:
            return month >= self.season_start or month <= self.season_end
        return self.season_start <= month <= self.season_end

    def __repr__(self):
        return f"<Seasonality(ingredient_id={self.ingredient_id}, {self.season_start}-{self.season_end})>"

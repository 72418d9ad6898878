"""
User Model

Catalog accounts. Each user owns zero or more recipes; deleting a user
deletes their recipes.
"""

from werkzeug.security import generate_password_hash, check_password_hash

from .base import db, TimestampMixin


class User(TimestampMixin, db.Model):
    """Account that owns recipes. Passwords are stored only as salted hashes."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    email = db.Column(db.String(100), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    recipes = db.relationship(
        'Recipe', back_populates='user',
        cascade='all, delete-orphan', passive_deletes=True,
    )

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"

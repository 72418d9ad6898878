"""
Validation Constants

Column limits and accepted value ranges shared by the models and the
input validators.
"""

# Maximum field lengths (match the column sizes in models/)
MAX_LENGTHS = {
    'username': 100,
    'email': 100,
    'password_hash': 255,
    'recipe_title': 255,
    'ingredient_name': 100,
    'category_name': 100,
    'tag_name': 100,
    'unit': 50,
    'description': 50000,
}

# Minimum length for a plain-text password before hashing
MIN_PASSWORD_LENGTH = 8

# Usernames: letters, digits, dot, dash, underscore
USERNAME_PATTERN = r'^[A-Za-z0-9._-]{3,100}$'

# Deliberately loose; the unique index is the real authority
EMAIL_PATTERN = r'^[^@\s]+@[^@\s]+\.[^@\s]+$'

# Calendar months (1 = January, 12 = December)
MIN_MONTH = 1
MAX_MONTH = 12

# Upper bound for prep/cook minutes and servings
MAX_MINUTES = 7 * 24 * 60
MAX_SERVINGS = 1000

# Shared constants for the recipe catalog
from .validation import (
    MAX_LENGTHS, MIN_PASSWORD_LENGTH, USERNAME_PATTERN, EMAIL_PATTERN,
    MIN_MONTH, MAX_MONTH, MAX_MINUTES, MAX_SERVINGS,
)
from .seed_data import EXAMPLE_RECIPE

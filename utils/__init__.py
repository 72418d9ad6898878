# Utility modules for the recipe catalog
from .errors import (
    CatalogError, DatabaseUnavailable, MigrationError, SeedError, ValidationError
)
from .sanitizer import sanitize_text, sanitize_name, normalize_email, sanitize_unit
from .validators import (
    validate_username, validate_email, validate_password, validate_required,
    validate_month, validate_quantity, validate_minutes, validate_servings,
    validate_step_number, check_step_sequence,
)

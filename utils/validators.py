"""
Validation Helpers

Checks applied to catalog input before it is inserted. Each function
returns the accepted value or raises ValidationError.
"""

import re

from constants import (
    MAX_LENGTHS, MIN_PASSWORD_LENGTH, USERNAME_PATTERN, EMAIL_PATTERN,
    MIN_MONTH, MAX_MONTH, MAX_MINUTES, MAX_SERVINGS,
)
from .errors import ValidationError


def validate_username(username):
    if not username or not re.match(USERNAME_PATTERN, username):
        raise ValidationError('username', f"invalid username {username!r}")
    return username


def validate_email(email):
    if not email or len(email) > MAX_LENGTHS['email'] or not re.match(EMAIL_PATTERN, email):
        raise ValidationError('email', f"invalid email address {email!r}")
    return email


def validate_password(password):
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            'password', f"must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return password


def validate_required(field, value):
    """Reject empty names after sanitization."""
    if not value:
        raise ValidationError(field, "must not be empty")
    return value


def validate_month(field, month):
    """Accept an integer month in 1..12."""
    if isinstance(month, bool) or not isinstance(month, int):
        raise ValidationError(field, f"month must be an integer, got {month!r}")
    if not MIN_MONTH <= month <= MAX_MONTH:
        raise ValidationError(field, f"month must be between {MIN_MONTH} and {MAX_MONTH}, got {month}")
    return month


def validate_quantity(quantity):
    """Quantities are positive real numbers."""
    try:
        value = float(quantity)
    except (TypeError, ValueError):
        raise ValidationError('quantity', f"not a number: {quantity!r}")
    if not value > 0:
        raise ValidationError('quantity', f"must be positive, got {quantity!r}")
    return value


def validate_count(field, value, max_value):
    """Non-negative integer with an upper bound (minutes, servings)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, f"must be an integer, got {value!r}")
    if value < 0 or value > max_value:
        raise ValidationError(field, f"must be between 0 and {max_value}, got {value}")
    return value


def validate_minutes(field, value):
    return validate_count(field, value, MAX_MINUTES)


def validate_servings(value):
    return validate_count('servings', value, MAX_SERVINGS)


def validate_step_number(step_number):
    if isinstance(step_number, bool) or not isinstance(step_number, int) or step_number < 1:
        raise ValidationError('step_number', f"must be a positive integer, got {step_number!r}")
    return step_number


def check_step_sequence(step_numbers):
    """
    Verify that step numbers form the contiguous sequence 1..n.

    Args:
        step_numbers: Iterable of step numbers in any order

    Returns:
        The sorted step numbers

    Raises:
        ValidationError: On duplicates, gaps or a sequence not starting at 1
    """
    steps = sorted(step_numbers)
    expected = list(range(1, len(steps) + 1))
    if steps != expected:
        raise ValidationError(
            'step_number', f"steps must run 1..{len(steps)} without gaps, got {steps}"
        )
    return steps

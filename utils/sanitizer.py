"""
Input Sanitization Module

Normalizes free text before it is written to the catalog: strips
control characters, trims whitespace and enforces column lengths.
"""

import re

from constants import MAX_LENGTHS

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')
_NAME_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=MAX_LENGTHS['description']):
    """
    Sanitize a free-text field such as a description.

    Preserves newlines and tabs but drops other control characters.

    Args:
        text: The text to sanitize (None is passed through)
        max_length: Maximum allowed length

    Returns:
        Sanitized string, truncated if necessary
    """
    if text is None:
        return None

    if not isinstance(text, str):
        text = str(text)

    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_name(name, max_length=100):
    """
    Sanitize a single-line name (ingredient, category, tag, title).

    Args:
        name: The name to sanitize
        max_length: Maximum allowed length (default 100)

    Returns:
        Cleaned name, or '' when nothing is left
    """
    if not name:
        return ''

    if not isinstance(name, str):
        name = str(name)

    # Collapse whitespace runs (tabs, newlines) to single spaces
    name = re.sub(r'\s+', ' ', name)

    # Remove remaining control characters and null bytes
    name = _NAME_CONTROL_CHARS.sub('', name).strip()

    if len(name) > max_length:
        name = name[:max_length].rstrip()

    return name


def normalize_email(email):
    """Trim and lowercase an email address."""
    if not email:
        return ''
    return str(email).strip().lower()


def sanitize_unit(unit):
    """Units are free text; only whitespace and length are normalized."""
    return sanitize_name(unit, max_length=MAX_LENGTHS['unit'])

"""Common validation utilities."""

import re

from ...core.exceptions import ValidationError


def validate_url(url: str) -> None:
    """Validate URL format."""
    if not url:
        raise ValidationError("URL cannot be empty", "url")

    url_pattern = r'^https?://[^\s/$.?#].[^\s]*$'
    if not re.match(url_pattern, url):
        raise ValidationError("Invalid URL format", "url")

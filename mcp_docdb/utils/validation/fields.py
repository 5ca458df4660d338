"""Validation for caller-supplied field names used as query keys."""

import re
from typing import Optional

from ...core.exceptions import InvalidFieldNameError

FIELD_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.]+$")


def validate_field_name(name: str, parameter: Optional[str] = None) -> str:
    """Return ``name`` unchanged if it only holds letters, digits, ``_`` and ``.``.

    Operators such as ``$where`` and expression syntax are rejected.
    """
    if not isinstance(name, str) or not FIELD_NAME_PATTERN.fullmatch(name):
        raise InvalidFieldNameError(str(name), parameter)
    return name

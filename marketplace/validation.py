"""
Request validation.

``validate_request`` checks a raw body against a request serializer and either
hands the body back untouched or raises ``ValidationException`` with the
field-level problems flattened into ``{"field", "message"}`` entries.
"""

import logging
from typing import Any, Dict, List, Type

from rest_framework import serializers
from rest_framework.settings import api_settings

from marketplace.exceptions import ValidationException


logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Request body is not valid"


def flatten_errors(errors: Any, path: str = "") -> List[Dict[str, str]]:
    """Flatten DRF's nested ``serializer.errors`` into a list of field/message pairs."""
    details = []

    if isinstance(errors, dict):
        for field, value in errors.items():
            if field == api_settings.NON_FIELD_ERRORS_KEY:
                child_path = path
            else:
                child_path = f"{path}.{field}" if path else str(field)
            details.extend(flatten_errors(value, child_path))
    elif isinstance(errors, list):
        for index, value in enumerate(errors):
            if isinstance(value, (dict, list)):
                details.extend(flatten_errors(value, f"{path}.{index}" if path else str(index)))
            else:
                details.append({"field": path, "message": str(value)})
    else:
        details.append({"field": path, "message": str(errors)})

    return details


def validate_request(serializer_class: Type[serializers.Serializer], data: Any) -> Any:
    """
    Check ``data`` against ``serializer_class``.

    Returns:
        ``data`` itself when it is valid

    Raises:
        ValidationException: with flattened field errors when it is not
    """
    serializer = serializer_class(data=data)
    if not serializer.is_valid():
        details = flatten_errors(serializer.errors)
        logger.debug(f"{serializer_class.__name__} rejected request: {details}")
        raise ValidationException(INVALID_BODY_MESSAGE, details)
    return data

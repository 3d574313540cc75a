"""
Intake normalizer

Turns whatever the form or CRM webhook sent into a fully populated Intake.
The incoming payload has no schema, so every field is coerced here and
the rest of the pipeline can rely on plain strings.
"""
from collections.abc import Mapping
from typing import Any

from models.intake import Intake
from utils.logger import get_logger

logger = get_logger(__name__)

# Older CRM forms post the business name under a camelCase key
BUSINESS_NAME_ALIASES = ("business_name", "businessName")


def clean_value(value: Any) -> str:
    """
    Coerce one raw field to a trimmed string

    Strings are stripped; anything else (None, numbers, lists, dicts)
    becomes an empty string.
    """
    if isinstance(value, str):
        return value.strip()
    return ""


def normalize_intake(raw: Any) -> Intake:
    """
    Build an Intake from an untyped submission

    Args:
        raw: Parsed request body. Anything that is not a mapping is
             treated as an empty submission.

    Returns:
        Intake with every field present as a string. Never raises.
    """
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning(f"Intake payload is {type(raw).__name__}, not an object; using empty intake")
        raw = {}

    values = {name: clean_value(raw.get(name)) for name in Intake.field_names()}

    # First non-empty alias wins, primary key first
    values["business_name"] = next(
        (clean_value(raw.get(key)) for key in BUSINESS_NAME_ALIASES if clean_value(raw.get(key))),
        "",
    )

    intake = Intake(**values)
    filled = sum(1 for value in values.values() if value)
    logger.info(f"Normalized intake for '{intake.business_name or 'unnamed business'}' ({filled} fields filled)")
    return intake

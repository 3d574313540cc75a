"""
Layer 1: Intake
- Normalizer (coerce untyped form/CRM payloads into an Intake record)
"""
from .normalizer import normalize_intake, clean_value, BUSINESS_NAME_ALIASES

__all__ = [
    'normalize_intake',
    'clean_value',
    'BUSINESS_NAME_ALIASES',
]

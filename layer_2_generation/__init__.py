"""
Layer 2: Brand Kit Generation
- Prompt Builder (instruction + strict JSON shape for the model)
- Kit Validator (minimal gate: at least 5 taglines)
- Fallback (deterministic, network-free brand kit)
- Brand Kit Generator (one AI attempt, validate, else fallback)
"""
from .prompt_builder import SYSTEM_PROMPT, build_brand_kit_prompt
from .kit_validator import is_valid_brand_kit
from .fallback import fallback_brand_kit, split_keywords
from .brand_kit_generator import BrandKitGenerator, parse_generation_response

__all__ = [
    'SYSTEM_PROMPT',
    'build_brand_kit_prompt',
    'is_valid_brand_kit',
    'fallback_brand_kit',
    'split_keywords',
    'BrandKitGenerator',
    'parse_generation_response',
]

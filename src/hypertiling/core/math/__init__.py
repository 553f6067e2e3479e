"""
Core math modules для hypertiling

Комплексная арифметика, Möbius-преобразования диска Пуанкаре и
численные примитивы с гарантией стабильности.
"""

# Numerical Safeguards
from hypertiling.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_DENOMINATOR,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MAX_KEY_PRECISION,
    # Comparisons
    is_close,
    is_valid_float,
    is_zero,
    # Utilities
    clamp,
    quantize,
    # Validation
    validate_finite,
    validate_non_negative,
    validate_positive,
)

# Complex value
from hypertiling.core.math.complex_value import ONE, ZERO, Complex

# Möbius transform
from hypertiling.core.math.mobius import (
    DEFAULT_KEY_PRECISION,
    CanonicalKey,
    DegenerateTransform,
    Mobius,
    compose,
    identity,
    inverse,
    rotation,
    transform,
    translation,
)

# Hyperbolic metric
from hypertiling.core.math.hyperbolic import (
    hyperbolic_distance,
    hyperbolic_midpoint,
    is_in_disk,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_CALC",
    "EPS_DENOMINATOR",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "MAX_KEY_PRECISION",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_valid_float",
    "is_zero",
    # Numerical Safeguards — Utilities
    "clamp",
    "quantize",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_non_negative",
    "validate_positive",
    # Complex value
    "Complex",
    "ONE",
    "ZERO",
    # Möbius — Constants / Types
    "DEFAULT_KEY_PRECISION",
    "CanonicalKey",
    "Mobius",
    # Möbius — Exceptions
    "DegenerateTransform",
    # Möbius — Functions
    "compose",
    "identity",
    "inverse",
    "rotation",
    "transform",
    "translation",
    # Hyperbolic metric
    "hyperbolic_distance",
    "hyperbolic_midpoint",
    "is_in_disk",
]

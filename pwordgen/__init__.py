"""
pwordgen
Cryptographically secure password generation with unbiased sampling and
entropy estimation.
"""

from .options import (
    CHARACTER_CLASSES,
    SIMILAR_CHARACTERS,
    DEFAULT_OPTIONS,
    PasswordOptions,
    normalize_options,
)
from .errors import (
    PasswordGenerationError,
    ValidationError,
    InvalidLength,
    EmptyPool,
    InsufficientLengthForClasses,
    InvalidArgument,
    RandomnessExhausted,
    SourceUnavailable,
)
from .crypto import RandomSource, SystemRandomSource, UniformIntSampler, secure_random_int
from .pool import build_character_pool, describe_pool, filter_characters, selected_class_pools
from .generator import generate_password
from .entropy import estimate_entropy_bits

__all__ = [
    "CHARACTER_CLASSES",
    "SIMILAR_CHARACTERS",
    "DEFAULT_OPTIONS",
    "PasswordOptions",
    "normalize_options",
    "PasswordGenerationError",
    "ValidationError",
    "InvalidLength",
    "EmptyPool",
    "InsufficientLengthForClasses",
    "InvalidArgument",
    "RandomnessExhausted",
    "SourceUnavailable",
    "RandomSource",
    "SystemRandomSource",
    "UniformIntSampler",
    "secure_random_int",
    "build_character_pool",
    "describe_pool",
    "filter_characters",
    "selected_class_pools",
    "generate_password",
    "estimate_entropy_bits",
]

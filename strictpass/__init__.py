"""
strictpass: random passwords with unbiased sampling and optional strict mode.
"""

from .errors import (
    ValidationError,
    EmptyPool,
    StrictLengthViolation,
    UnsatisfiableConstraints,
    InvalidOption,
)
from .options import Options, Symbols, SymbolMode
from .pool import build_pool
from .sampler import IndexSampler
from .generator import PasswordGenerator, generate, generate_multiple

__all__ = [
    "ValidationError",
    "EmptyPool",
    "StrictLengthViolation",
    "UnsatisfiableConstraints",
    "InvalidOption",
    "Options",
    "Symbols",
    "SymbolMode",
    "build_pool",
    "IndexSampler",
    "PasswordGenerator",
    "generate",
    "generate_multiple",
]

"""Histogram-based mutual information, entropy and normalized MI."""

from .api import compute, compute_vec, entropy, normalized
from .config import DEFAULT_BASE, DEFAULT_BINS, EstimatorOptions
from .core_utils.validation import (
    ConfigurationError,
    EmptyInputError,
    LengthMismatchError,
    MutualInformationError,
    NonFiniteInputError,
)

__all__ = [
    "compute",
    "compute_vec",
    "entropy",
    "normalized",
    "EstimatorOptions",
    "DEFAULT_BINS",
    "DEFAULT_BASE",
    "MutualInformationError",
    "LengthMismatchError",
    "EmptyInputError",
    "NonFiniteInputError",
    "ConfigurationError",
]

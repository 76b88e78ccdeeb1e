"""
Central configuration for the histogram mutual-information library.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Integral, Real
from typing import Any, Mapping

from .core_utils.validation import ConfigurationError

# --- Estimation Parameters ---

# Default number of equal-width bins used to discretize continuous samples.
# Ignored for samples that are already integer-coded.
DEFAULT_BINS: int = 10

# Default logarithm base for entropy and mutual information (2 -> bits).
# Use math.e for nats or 10 for hartleys.
DEFAULT_BASE: float = 2.0

# Negative MI sums above -MI_CLIP_TOLERANCE are floating-point noise around
# zero and are clamped to 0.0.
MI_CLIP_TOLERANCE: float = 1e-12


@dataclass(frozen=True)
class EstimatorOptions:
    """Options shared by ``compute``, ``entropy`` and ``normalized``.

    Attributes
    ----------
    bins : int
        Number of equal-width bins for continuous discretization. Must be >= 1.
    base : float
        Logarithm base. Must be finite, positive and different from 1.
    """

    bins: int = DEFAULT_BINS
    base: float = DEFAULT_BASE

    def __post_init__(self) -> None:
        if isinstance(self.bins, bool) or not isinstance(self.bins, Integral):
            raise ConfigurationError(
                f"bins must be a positive integer. Got {self.bins!r}."
            )
        if self.bins < 1:
            raise ConfigurationError(f"bins must be >= 1. Got bins={self.bins}.")

        if isinstance(self.base, bool) or not isinstance(self.base, Real):
            raise ConfigurationError(f"base must be a real number. Got {self.base!r}.")
        if not math.isfinite(self.base) or self.base <= 0 or self.base == 1:
            raise ConfigurationError(
                f"base must be finite, positive and != 1. Got base={self.base}."
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "EstimatorOptions":
        """Build options from a keyword-style mapping such as ``{"bins": 5}``."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s): {', '.join(map(repr, unknown))}. "
                f"Recognized options: {sorted(known)}."
            )
        return cls(**dict(mapping))


def resolve_options(
    options: EstimatorOptions | Mapping[str, Any] | None = None,
) -> EstimatorOptions:
    """Return validated options from ``None``, an instance or a mapping."""
    if options is None:
        return EstimatorOptions()
    if isinstance(options, EstimatorOptions):
        return options
    if isinstance(options, Mapping):
        return EstimatorOptions.from_mapping(options)
    raise ConfigurationError(
        f"options must be EstimatorOptions, a mapping or None. Got {type(options).__name__}."
    )

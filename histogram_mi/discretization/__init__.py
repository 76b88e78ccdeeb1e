"""Discretization of raw samples into integer codes."""

from .discretizer import (
    DiscretizationStrategy,
    discretize,
    discretize_equal_width,
    is_discrete,
    select_strategy,
)

__all__ = [
    "DiscretizationStrategy",
    "discretize",
    "discretize_equal_width",
    "is_discrete",
    "select_strategy",
]

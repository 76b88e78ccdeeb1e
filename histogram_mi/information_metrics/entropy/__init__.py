"""Shannon entropy of empirical distributions."""

from .entropy import entropy_from_distribution, log_base

__all__ = [
    "entropy_from_distribution",
    "log_base",
]

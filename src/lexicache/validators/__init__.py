"""Sentence validators that consume cached dictionary data."""

from lexicache.validators.base import RuleAttributes, Validator
from lexicache.validators.doubled_particle import (
    DoubledParticleValidator,
    find_repeated_markers,
)

__all__ = [
    "DoubledParticleValidator",
    "RuleAttributes",
    "Validator",
    "find_repeated_markers",
]

"""Data models for deptree."""

from .distribution import Distribution, Distributions

__all__ = [
    'Distribution',
    'Distributions',
]

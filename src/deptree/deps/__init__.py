"""Dependency resolution for deptree."""

from .resolver import (
    DeptreeError, ResolutionError, UnknownDistributionError, IndexLoadError, Resolver
)
from .index_resolver import IndexResolver, parse_index

__all__ = [
    'Resolver',
    'IndexResolver',
    'parse_index',
    'DeptreeError',
    'ResolutionError',
    'UnknownDistributionError',
    'IndexLoadError',
]

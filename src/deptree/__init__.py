"""deptree - dependency trees for software distributions."""

__version__ = "0.1.0"

from .models.distribution import Distribution, Distributions
from .deps.resolver import Resolver, ResolutionError

__all__ = [
    'Distribution',
    'Distributions',
    'Resolver',
    'ResolutionError',
    '__version__',
]

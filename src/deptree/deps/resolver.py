"""Resolver contract and resolution errors.

A resolver turns one or more root distribution names into a populated
dependency tree. Concrete resolvers are injected by the caller, so the tree
model and renderers never depend on a particular package ecosystem.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from ..models.distribution import Distributions


class DeptreeError(Exception):
    """Base class for deptree errors."""


class ResolutionError(DeptreeError):
    """A dependency tree could not be resolved."""


class UnknownDistributionError(ResolutionError):
    """A distribution name is not known to the resolver."""

    def __init__(self, name: str, required_by: Optional[str] = None):
        self.name = name
        self.required_by = required_by
        if required_by:
            message = f"Unknown distribution '{name}' (required by '{required_by}')"
        else:
            message = f"Unknown distribution '{name}'"
        super().__init__(message)


class IndexLoadError(ResolutionError):
    """A dependency index could not be read or has the wrong shape."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot load index {self.path}: {reason}")


class Resolver(ABC):
    """Resolves the dependency tree of distributions."""

    @abstractmethod
    def resolve(self, *names: str) -> Distributions:
        """Return the distributions named, with their dependencies.

        Raises:
            ResolutionError: If the tree cannot be built.
        """

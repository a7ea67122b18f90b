"""Resolver backed by a local YAML dependency index.

The index maps each distribution name to the names it depends on::

    distributions:
      Moose:
        - Class-MOP
        - Try-Tiny
      Class-MOP: [Try-Tiny]
      Try-Tiny: []

The ``distributions:`` wrapper is optional; a bare mapping is accepted too.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Union

import yaml

from ..models.distribution import Distribution, Distributions
from .resolver import IndexLoadError, ResolutionError, Resolver, UnknownDistributionError

DEFAULT_MAX_DEPTH = 32


class IndexResolver(Resolver):
    """Resolves dependency trees from an in-memory name -> dependencies index."""

    def __init__(
        self,
        index: Mapping[str, Iterable[str]],
        strict: bool = True,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """
        Args:
            index: Mapping of distribution name to dependency names.
            strict: Raise on dependencies missing from the index. When False
                they are attached as leaves.
            max_depth: Longest dependency chain followed before giving up.
        """
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.index: Dict[str, List[str]] = {name: list(deps) for name, deps in index.items()}
        self.strict = strict
        self.max_depth = max_depth

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "IndexResolver":
        """Create a resolver from a YAML index file.

        Raises:
            IndexLoadError: If the file is missing, is not valid YAML or does
                not describe a name -> dependencies mapping.
        """
        path = Path(path)
        if not path.exists():
            raise IndexLoadError(path, "file not found")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise IndexLoadError(path, f"invalid YAML: {e}")
        return cls(parse_index(data, path), **kwargs)

    def resolve(self, *names: str) -> Distributions:
        """Resolve root names into a sorted, deduplicated tree."""
        result = Distributions()
        for name in names:
            if name not in self.index:
                raise UnknownDistributionError(name)
            if name in result:
                continue
            result.insert_sorted(self._build(name, 1))
        return result

    def _build(self, name: str, depth: int) -> Distribution:
        """Build a fresh node for ``name`` and its dependencies."""
        if depth > self.max_depth:
            raise ResolutionError(
                f"Dependency chain for '{name}' exceeds max depth {self.max_depth}"
            )
        dis = Distribution(name)
        for dep_name in self.index.get(name, []):
            if dep_name in dis.dependencies:
                continue
            if dep_name not in self.index:
                if self.strict:
                    raise UnknownDistributionError(dep_name, required_by=name)
                dis.add_dependencies(Distribution(dep_name))
                continue
            dis.add_dependencies(self._build(dep_name, depth + 1))
        return dis


def parse_index(data: Any, source: Union[str, Path] = "<index>") -> Dict[str, List[str]]:
    """Validate loaded YAML data and normalize it to name -> list of names.

    Raises:
        IndexLoadError: If the data does not have the expected shape.
    """
    if data is None:
        return {}
    if isinstance(data, dict) and "distributions" in data:
        data = data["distributions"] or {}
    if not isinstance(data, dict):
        raise IndexLoadError(source, "expected a mapping of distribution names")

    index: Dict[str, List[str]] = {}
    for name, deps in data.items():
        if not isinstance(name, str) or not name:
            raise IndexLoadError(source, f"invalid distribution name: {name!r}")
        if deps is None:
            index[name] = []
        elif isinstance(deps, str):
            index[name] = [deps]
        elif isinstance(deps, list) and all(isinstance(d, str) and d for d in deps):
            index[name] = list(deps)
        else:
            raise IndexLoadError(source, f"dependencies of '{name}' must be a list of names")
    return index

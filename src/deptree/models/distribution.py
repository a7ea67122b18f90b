"""Dependency tree model.

A ``Distribution`` is a named node whose dependencies are themselves a
``Distributions`` collection, so every level of the tree uses the same type.
Collections built through ``insert_sorted`` stay sorted by name with no
duplicate names.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class Distributions(list):
    """Ordered collection of distributions, sorted by name."""

    def _lower_bound(self, name: str) -> int:
        """Return the first index whose name is >= ``name``."""
        lo, hi = 0, len(self)
        while lo < hi:
            mid = (lo + hi) // 2
            if self[mid].name < name:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def insert_sorted(self, *distributions: "Distribution") -> None:
        """Insert distributions keeping the collection sorted by name.

        A distribution whose name is already present is dropped, so the
        first node inserted under a given name is the one that is kept.
        """
        for dis in distributions:
            i = self._lower_bound(dis.name)

            if i == len(self):
                self.append(dis)
                continue
            if self[i].name == dis.name:
                continue

            self.insert(i, dis)

    def get(self, name: str) -> Optional["Distribution"]:
        """Look up a distribution by name."""
        i = self._lower_bound(name)
        if i < len(self) and self[i].name == name:
            return self[i]
        return None

    def names(self) -> List[str]:
        """Names of the distributions, in collection order."""
        return [dis.name for dis in self]

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, str):
            return self.get(item) is not None
        return super().__contains__(item)

    def to_dict(self) -> Dict[str, Any]:
        """Nested ``{name: {...}}`` mapping, in collection order."""
        return {
            dis.name: dis.dependencies.to_dict() if dis.dependencies else {}
            for dis in self
        }

    def to_json(self, indent: str = "", escape: bool = False) -> str:
        """Render the tree as JSON text.

        An empty ``indent`` renders everything on one line.
        """
        from ..output.json_text import render_json

        return render_json(self, indent=indent, escape=escape)


@dataclass
class Distribution:
    """A distribution and the distributions it depends on."""

    name: str
    dependencies: Distributions = field(default_factory=Distributions)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Distribution name must not be empty")
        if self.dependencies is not None and not _is_ordered(self.dependencies):
            dependencies = Distributions()
            dependencies.insert_sorted(*self.dependencies)
            self.dependencies = dependencies

    def add_dependencies(self, *distributions: "Distribution") -> None:
        """Attach dependencies, ordered by name for efficient search and insert."""
        if self.dependencies is None:
            self.dependencies = Distributions()
        self.dependencies.insert_sorted(*distributions)

    @property
    def is_leaf(self) -> bool:
        return not self.dependencies


def _is_ordered(dependencies) -> bool:
    """True for a Distributions already sorted by name with unique names."""
    if not isinstance(dependencies, Distributions):
        return False
    return all(a.name < b.name for a, b in zip(dependencies, dependencies[1:]))

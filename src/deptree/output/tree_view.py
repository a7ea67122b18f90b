"""Terminal rendering and summary helpers for dependency trees."""

from rich.markup import escape
from rich.tree import Tree

from ..models.distribution import Distributions


def to_rich_tree(distributions: Distributions, label: str = "dependencies") -> Tree:
    """Build a rich Tree mirroring the dependency tree."""
    root = Tree(f"[bold cyan]{escape(label)}[/bold cyan]")
    if not distributions:
        root.add("[dim]No distributions[/dim]")
        return root
    _add_branches(root, distributions)
    return root


def _add_branches(parent: Tree, distributions: Distributions) -> None:
    for dis in distributions:
        if dis.dependencies:
            branch = parent.add(f"[green]{escape(dis.name)}[/green]")
            _add_branches(branch, dis.dependencies)
        else:
            parent.add(f"[dim]{escape(dis.name)}[/dim]")


def count_nodes(distributions: Distributions) -> int:
    """Total number of nodes in the forest."""
    if not distributions:
        return 0
    return sum(1 + count_nodes(dis.dependencies) for dis in distributions)


def max_depth(distributions: Distributions) -> int:
    """Nesting depth of the forest; 0 when empty."""
    if not distributions:
        return 0
    return 1 + max(max_depth(dis.dependencies) for dis in distributions)

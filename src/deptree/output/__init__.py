"""Output renderers for dependency trees."""

from .json_text import render_json
from .tree_view import count_nodes, max_depth, to_rich_tree

__all__ = [
    'render_json',
    'to_rich_tree',
    'count_nodes',
    'max_depth',
]

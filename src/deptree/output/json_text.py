"""JSON text rendering for dependency trees.

Each key is a distribution name and each value is either ``{}`` for a leaf
or a nested object of the same shape. Key order is the collection order,
which the tree model keeps sorted by name.
"""

import json
from typing import List

from ..models.distribution import Distributions


def render_json(distributions: Distributions, indent: str = "", escape: bool = False) -> str:
    """Render a collection of distributions as JSON text.

    Args:
        distributions: Collection to render.
        indent: Indentation unit. When empty the output is a single line,
            otherwise each entry goes on its own line prefixed with one
            unit per nesting level.
        escape: Encode names as JSON string literals. Without it names are
            written verbatim, so a name holding a quote or backslash yields
            invalid JSON.

    Returns:
        str: The rendered tree.
    """
    parts: List[str] = []
    _render(distributions, parts, indent, 0, escape)
    return "".join(parts)


def _render(distributions: Distributions, dst: List[str], indent: str, depth: int, escape: bool) -> None:
    dst.append("{")
    depth += 1
    _newline(dst, indent, depth)
    last = len(distributions) - 1
    for k, dis in enumerate(distributions):
        dst.append(f"{_quote(dis.name, escape)}: ")
        if dis.dependencies:
            _render(dis.dependencies, dst, indent, depth, escape)
        else:
            dst.append("{}")
        if k < last:
            dst.append(",")
            _newline(dst, indent, depth)
    _newline(dst, indent, depth - 1)
    dst.append("}")


def _newline(dst: List[str], indent: str, depth: int) -> None:
    if not indent:
        return
    dst.append("\n" + indent * depth)


def _quote(name: str, escape: bool) -> str:
    if escape:
        return json.dumps(name, ensure_ascii=False)
    return f'"{name}"'

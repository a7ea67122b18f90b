"""The ``deptree resolve`` command."""

import sys
from typing import Optional, Tuple

import click
import yaml

from .. import config as deptree_config
from ..deps.index_resolver import IndexResolver
from ..deps.resolver import IndexLoadError, ResolutionError
from ..output.json_text import render_json
from ..output import tree_view
from ..utils.console import _get_console, _rich_error, _rich_info


@click.command(help="🌳 Resolve distributions and print their dependency tree")
@click.argument("names", nargs=-1, required=True)
@click.option("--index", "-i", "index_path", type=click.Path(dir_okay=False),
              help="YAML dependency index (default: config index_path or $DEPTREE_INDEX)")
@click.option("--format", "-f", "output_format", type=click.Choice(deptree_config.OUTPUT_FORMATS),
              help="Output format (default: config output_format)")
@click.option("--indent", type=click.IntRange(min=0),
              help="Spaces per nesting level for JSON output, 0 for a single line")
@click.option("--compact", is_flag=True, help="Render JSON on a single line")
@click.option("--escape", is_flag=True, help="Escape distribution names in JSON output")
@click.option("--strict/--lenient", default=None,
              help="Fail on dependencies missing from the index, or keep them as leaves")
@click.option("--max-depth", type=click.IntRange(min=1), help="Longest dependency chain to follow")
@click.option("--verbose", "-v", is_flag=True, help="Show resolution details")
def resolve(
    names: Tuple[str, ...],
    index_path: Optional[str],
    output_format: Optional[str],
    indent: Optional[int],
    compact: bool,
    escape: bool,
    strict: Optional[bool],
    max_depth: Optional[int],
    verbose: bool,
):
    """Resolve NAMES against the dependency index and print the tree."""
    settings = deptree_config.get_config()
    index_path = index_path or deptree_config.get_index_path()
    output_format = output_format or settings["output_format"]
    if strict is None:
        strict = bool(settings["strict"])
    if max_depth is None:
        max_depth = int(settings["max_depth"])
    if compact:
        indent = 0
    elif indent is None:
        indent = int(settings["indent"])

    try:
        resolver = IndexResolver.from_file(index_path, strict=strict, max_depth=max_depth)
        if verbose:
            _rich_info(f"Loaded {len(resolver.index)} distributions from {index_path}", err=True)
        tree = resolver.resolve(*names)
    except IndexLoadError as e:
        _rich_error(str(e))
        _rich_info("Pass --index or set one with 'deptree config set index_path <file>'", err=True)
        sys.exit(1)
    except ResolutionError as e:
        _rich_error(f"Resolution failed: {e}")
        sys.exit(1)

    if verbose:
        _rich_info(f"Resolved {tree_view.count_nodes(tree)} nodes, depth {tree_view.max_depth(tree)}", err=True)

    if output_format == "tree":
        _get_console().print(tree_view.to_rich_tree(tree, label=", ".join(names)))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump(tree.to_dict(), default_flow_style=False, sort_keys=False), nl=False)
    else:
        click.echo(render_json(tree, indent=" " * indent, escape=escape))

"""The ``deptree config`` command group."""

import sys

import click
from rich.table import Table

from .. import config as deptree_config
from ..utils.console import _get_console, _rich_error, _rich_success

_BOOL_VALUES = {"true": True, "yes": True, "1": True, "false": False, "no": False, "0": False}


@click.group(help="⚙️  Show or change deptree configuration")
def config():
    """deptree configuration commands."""
    pass


@config.command(name="show", help="Show current configuration")
def show():
    """Print every configuration value."""
    settings = deptree_config.get_config()
    table = Table(title="deptree configuration", show_header=True, header_style="bold cyan")
    table.add_column("Key", style="bold white")
    table.add_column("Value", style="yellow")
    for key, value in settings.items():
        table.add_row(key, str(value))
    _get_console().print(table)
    click.echo(f"Config file: {deptree_config.CONFIG_FILE}")


@config.command(name="set", help="Set a configuration value")
@click.argument("key", type=click.Choice(sorted(deptree_config.DEFAULT_CONFIG)))
@click.argument("value")
def set_value(key: str, value: str):
    """Set KEY to VALUE."""
    try:
        if key == "index_path":
            deptree_config.set_index_path(value)
        elif key == "indent":
            deptree_config.set_indent(_parse_int(value, key))
        elif key == "max_depth":
            deptree_config.set_max_depth(_parse_int(value, key))
        elif key == "output_format":
            deptree_config.set_output_format(value)
        elif key == "strict":
            if value.lower() not in _BOOL_VALUES:
                raise click.BadParameter(f"'{value}' is not a boolean", param_hint="VALUE")
            deptree_config.set_strict(_BOOL_VALUES[value.lower()])
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="VALUE")
    except OSError as e:
        _rich_error(f"Error writing configuration: {e}")
        sys.exit(1)

    _rich_success(f"Set {key} = {value}")


@config.command(help="Restore default configuration")
def reset():
    """Overwrite the configuration file with defaults."""
    try:
        deptree_config.reset_config()
    except OSError as e:
        _rich_error(f"Error writing configuration: {e}")
        sys.exit(1)
    _rich_success("Configuration reset to defaults")


def _parse_int(value: str, key: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter(f"{key} must be an integer", param_hint="VALUE")

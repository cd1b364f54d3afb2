import functools
import logging
import sys

import click

from .config import Indices, Notation, defaults
from .exceptions import PathError
from .path import Path


class PathType(click.ParamType):
    name = "path"

    def convert(self, value, param, ctx):
        if isinstance(value, Path):
            return value

        try:
            return Path(value)
        except PathError as e:
            self.fail(str(e), param, ctx)


PATH = PathType()

indices_option = click.option(
    "-i",
    "--indices",
    type=click.Choice([str(mode) for mode in Indices], case_sensitive=False),
    help="Index comparison mode for this call.",
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.option(
    "-w",
    "--wildcard",
    "wildcards",
    multiple=True,
    help="Index wildcard, repeatable. Numbers are read as numbers.",
)
@click.option(
    "-c",
    "--children",
    "children",
    multiple=True,
    help="Node children property name, repeatable.",
)
@click.pass_context
def cli(ctx, verbose=False, wildcards=(), children=()):
    """Parse, render, compare and navigate object property paths."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    overrides = {}
    if wildcards:
        overrides["index_wildcards"] = [_wildcard(value) for value in wildcards]
    if children:
        overrides["node_children_properties"] = list(children)

    try:
        ctx.with_resource(defaults.overrides(**overrides))
    except PathError as e:
        raise click.UsageError(str(e), ctx)


def _wildcard(value: str):
    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        return value


@cli.command()
@click.argument("path", type=PATH)
@click.option(
    "-n",
    "--notation",
    type=click.Choice([str(notation) for notation in Notation], case_sensitive=False),
    help="Notation to render in.",
)
@click.option("--pointer", is_flag=True, help="Render as a JSON Pointer.")
@click.option("--jsonpath", is_flag=True, help="Render as a JSONPath expression.")
def render(path, notation=None, pointer=False, jsonpath=False):
    """Render PATH in another notation."""
    if pointer:
        click.echo(path.to_json_pointer())
    elif jsonpath:
        click.echo(path.to_json_path())
    else:
        click.echo(path.to_string(notation))


@cli.command()
@click.argument("path", type=PATH)
@click.argument("other", type=PATH)
@indices_option
def compare(path, other, indices=None):
    """Compare PATH with OTHER."""
    click.echo(f"equals: {path.equals(other, indices)}")
    click.echo(f"starts with: {path.starts_with(other, indices)}")
    click.echo(f"ends with: {path.ends_with(other, indices)}")
    click.echo(f"includes: {path.includes(other, indices)}")
    click.echo(f"position: {path.position_of(other, indices)}")
    click.echo(f"last position: {path.last_position_of(other, indices)}")


@cli.command()
@click.argument("path", type=PATH)
@click.argument("pattern", type=PATH)
@click.option("--start", "anchor", flag_value="start", help="Match at the start only.")
@click.option("--end", "anchor", flag_value="end", help="Match at the end only.")
@indices_option
@click.pass_context
def match(ctx, path, pattern, anchor=None, indices=None):
    """Print the part of PATH matched by PATTERN."""
    if anchor == "start":
        result = path.match_start(pattern, indices)
    elif anchor == "end":
        result = path.match_end(pattern, indices)
    else:
        result = path.match(pattern, indices)

    if result is None:
        click.echo("No match", err=True)
        ctx.exit(1)

    click.echo(result)


@cli.command()
@click.argument("path", type=PATH)
@click.argument("others", type=PATH, nargs=-1, required=True)
def merge(path, others):
    """Merge each of OTHERS onto PATH in turn."""
    click.echo(functools.reduce(Path.merge, others, path))


@cli.command()
@click.argument("path", type=PATH)
@click.argument("base", type=PATH)
@indices_option
@click.pass_context
def relative(ctx, path, base, indices=None):
    """Print PATH relative to BASE."""
    result = path.relative_to(base, indices)

    if result is None:
        click.echo(f"{path} does not start with {base}", err=True)
        ctx.exit(1)

    click.echo(result)


@cli.command()
@click.argument("path", type=PATH)
def nodes(path):
    """Show the tree node run in PATH."""
    click.echo(f"first position: {path.first_node_position()}")
    click.echo(f"last position: {path.last_node_position()}")
    click.echo(f"indices: {', '.join(str(index) for index in path.node_indices())}")
    click.echo(f"before: {path.before_node_path()}")
    click.echo(f"after: {path.after_node_path()}")

    for node_path in path.node_paths():
        click.echo(f"node: {node_path}")


def main(as_module=False):  # pragma: nocover
    prog_name = as_module and "python -m pathist" or sys.argv[0]
    cli.main(sys.argv[1:], prog_name=prog_name)


if __name__ == "__main__":
    main(as_module=True)

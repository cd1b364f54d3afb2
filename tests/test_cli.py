import pytest

from click.testing import CliRunner

from pathist import defaults
from pathist.cli import cli
from pathist.config import DEFAULT_INDEX_WILDCARDS


@pytest.fixture
def runner():
    return CliRunner()


def test_render(runner):
    result = runner.invoke(cli, ["render", "foo[0].bar"])

    assert result.exit_code == 0
    assert result.output == "foo[0].bar\n"


@pytest.mark.parametrize(
    "args, expected",
    [
        (["-n", "bracket"], '["foo"][0]["bar"]'),
        (["--notation", "DOT"], "foo.0.bar"),
        (["--pointer"], "/foo/0/bar"),
        (["--jsonpath"], "$.foo[0].bar"),
    ],
)
def test_render_formats(runner, args, expected):
    result = runner.invoke(cli, ["render", "foo[0].bar", *args])

    assert result.exit_code == 0
    assert result.output == f"{expected}\n"


def test_render_syntax_error(runner):
    result = runner.invoke(cli, ["render", "foo[0"])

    assert result.exit_code == 2
    assert "Unclosed bracket" in result.output


def test_compare(runner):
    result = runner.invoke(cli, ["compare", "items[0].name", "items[5].name"])

    assert result.exit_code == 0
    assert "equals: False" in result.output

    result = runner.invoke(
        cli, ["compare", "items[0].name", "items[5].name", "--indices", "ignore"]
    )

    assert result.exit_code == 0
    assert "equals: True" in result.output
    assert "position: 0" in result.output


def test_match(runner):
    result = runner.invoke(cli, ["match", "foo[2].bar.baz", "foo[-1].bar", "--start"])

    assert result.exit_code == 0
    assert result.output == "foo[2].bar\n"

    result = runner.invoke(cli, ["match", "a.b[3]", "b[*]", "--end"])

    assert result.exit_code == 0
    assert result.output == "b[3]\n"


def test_match_not_found(runner):
    result = runner.invoke(cli, ["match", "foo.bar", "baz"])

    assert result.exit_code == 1
    assert "No match" in result.output


def test_merge(runner):
    result = runner.invoke(cli, ["merge", "a.b.c", "b.c.d", "d.e"])

    assert result.exit_code == 0
    assert result.output == "a.b.c.d.e\n"


def test_relative(runner):
    result = runner.invoke(cli, ["relative", "a.b.c", "a"])

    assert result.exit_code == 0
    assert result.output == "b.c\n"

    result = runner.invoke(cli, ["relative", "a.b.c", "x"])

    assert result.exit_code == 1
    assert "does not start with" in result.output


def test_nodes(runner):
    result = runner.invoke(cli, ["nodes", "children[2].children[3].foo"])

    assert result.exit_code == 0
    assert "first position: 1" in result.output
    assert "last position: 3" in result.output
    assert "indices: 2, 3" in result.output
    assert "after: foo" in result.output
    assert result.output.index("node: \n") < result.output.index("node: children[2]\n")
    assert "node: children[2].children[3]\n" in result.output


def test_children_option(runner):
    result = runner.invoke(cli, ["-c", "items", "nodes", "items[0].items[1]"])

    assert result.exit_code == 0
    assert "last position: 3" in result.output


def test_wildcard_option(runner):
    result = runner.invoke(cli, ["-w", "*", "render", "a[-1]"])

    assert result.exit_code == 2
    assert "Negative index" in result.output

    result = runner.invoke(cli, ["-w", "-2", "compare", "a[-2]", "a[4]"])

    assert result.exit_code == 0
    assert "equals: True" in result.output
    assert defaults.index_wildcards == DEFAULT_INDEX_WILDCARDS


def test_invalid_wildcard_option(runner):
    result = runner.invoke(cli, ["-w", "5", "render", "a"])

    assert result.exit_code == 2
    assert "negative or non-finite" in result.output

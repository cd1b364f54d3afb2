import pytest

from pathist import Indices, Path


def test_equals():
    path = Path("foo.bar[0]")

    assert path.equals("foo.bar[0]")
    assert path.equals(["foo", "bar", 0])
    assert path.equals(Path("foo.bar[0]"))
    assert not path.equals("foo.bar[1]")
    assert not path.equals("foo.bar")
    assert not path.equals("foo.bar[0].baz")


def test_equals_root():
    assert Path().equals("")
    assert Path().equals([])
    assert not Path().equals("foo")


def test_mixed_kinds_never_match():
    assert not Path(["0"]).equals([0])
    assert not Path([0]).equals(["0"])
    assert not Path(["0"]).equals([0], indices="ignore")


def test_indices_ignore():
    assert Path("items[0].name").equals("items[5].name", indices="ignore")
    assert Path("items[0].name").equals("items[5].name", indices=Indices.Ignore)
    assert not Path("items[0].name").equals("items[5].name")
    assert not Path("items[0].name").equals("items[5].name", indices="preserve")


def test_indices_ignore_from_config():
    ignoring = Path("items[0].name", indices="ignore")

    assert ignoring.equals("items[5].name")
    assert not ignoring.equals("items[5].name", indices="preserve")


def test_indices_option_does_not_change_instance():
    path = Path("items[0]")
    path.equals("items[1]", indices="ignore")

    assert path.indices is Indices.Preserve
    assert not path.equals("items[1]")


def test_pattern_config_drives_comparison():
    ignoring = Path("a[0]", indices="ignore")
    preserving = Path("a[5]")

    assert not ignoring.equals(preserving)
    assert preserving.equals(ignoring)
    assert ignoring.equals(preserving, indices="ignore")

    custom = Path("a[-2]", index_wildcards=[-2])
    plain = Path("a[3]")

    assert not custom.equals(plain)
    assert plain.equals(custom)


@pytest.mark.parametrize(
    "a, b",
    [
        ("foo[0]", "foo[0]"),
        ("foo[0]", "foo[1]"),
        ("foo[-1]", "foo[3]"),
        ("foo[*]", "foo[-1]"),
        ("foo.bar", "foo.baz"),
        ("foo[2]", "foo.bar"),
    ],
)
@pytest.mark.parametrize("indices", [None, "ignore"])
def test_symmetry_and_reflexivity(a, b, indices):
    p, q = Path(a), Path(b)

    assert p.equals(p, indices)
    assert q.equals(q, indices)
    assert p.equals(q, indices) == q.equals(p, indices)


def test_not_transitive_with_wildcards():
    concrete = Path("items[3]")
    wildcard = Path("items[-1]")
    other = Path("items[7]")

    assert concrete.equals(wildcard)
    assert wildcard.equals(other)
    assert not concrete.equals(other)


def test_not_transitive_with_ignore():
    first = Path("items[3]", indices="ignore")
    wildcard = Path("items[*]")
    other = Path("items[7]")

    assert first.equals(wildcard)
    assert wildcard.equals(other)
    assert first.equals("items[7]")
    assert not first.equals(other)
    assert not Path("items[3]").equals(other)


def test_exact_equality_operator():
    assert Path("a[0]") == Path(["a", 0])
    assert Path("a[0]") != Path("a[-1]")
    assert Path("a[0]", indices="ignore") != Path("a[1]")
    assert Path("a") != "a"
    assert Path("a[0]").equals("a[-1]")

    assert len({Path("a[0]"), Path(["a", 0]), Path("a[1]")}) == 2


def test_starts_with():
    path = Path("foo.bar.baz")

    assert path.starts_with("foo")
    assert path.starts_with("foo.bar")
    assert path.starts_with("foo.bar.baz")
    assert path.starts_with("")
    assert not path.starts_with("bar")
    assert not path.starts_with("foo.bar.baz.qux")


def test_ends_with():
    path = Path("foo.bar.baz")

    assert path.ends_with("baz")
    assert path.ends_with("bar.baz")
    assert path.ends_with([])
    assert not path.ends_with("foo")
    assert not path.ends_with("qux.foo.bar.baz")


def test_includes():
    path = Path("foo.items[3].name")

    assert path.includes("items[3]")
    assert path.includes("items[-1].name")
    assert path.includes("[*].name")
    assert not path.includes("items.name")
    assert not path.includes("name.foo")


def test_position_of():
    path = Path("a.b.a.b")

    assert path.position_of("a.b") == 0
    assert path.last_position_of("a.b") == 2
    assert path.position_of("b") == 1
    assert path.last_position_of("b") == 3
    assert path.position_of("c") == -1
    assert path.last_position_of("c") == -1
    assert path.position_of("a.b.a.b.a") == -1


def test_position_of_empty_pattern():
    assert Path("a.b.c").position_of([]) == 0
    assert Path("a.b.c").last_position_of([]) == 3
    assert Path().position_of("") == 0
    assert Path().last_position_of("") == 0


def test_position_of_with_wildcards():
    path = Path("list[0].items[2].items[5]")

    assert path.position_of("items[*]") == 2
    assert path.last_position_of("items[-1]") == 4
    assert path.position_of("items[9]") == -1
    assert path.position_of("items[9]", indices="ignore") == 2


@pytest.mark.parametrize("value", [None, 42, 1.5, {"a": 1}, object()])
def test_predicates_reject_other_types(value):
    path = Path("foo[0]")

    assert path.equals(value) is False
    assert path.starts_with(value) is False
    assert path.ends_with(value) is False
    assert path.includes(value) is False
    assert path.position_of(value) == -1
    assert path.last_position_of(value) == -1

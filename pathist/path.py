import functools
import typing as t

from . import compare, tree
from .codec import parse, render, to_json_path, to_json_pointer, validate
from .config import Config, Indices, Notation
from .exceptions import InvalidPathInputError
from .typing import PathInput, Reducer, Segment, Segments


class Path:
    """An immutable property path such as ``foo.bar[0]``.

    A path is built from a string in any notation, a list of segments, or
    another path, and keeps the :class:`~pathist.config.Config` resolved at
    that moment. Every path derived from it shares that config.

    ``==`` compares segments exactly. Use :meth:`equals` and the other
    predicates for comparisons that honour index wildcards and the indices
    mode.
    """

    Notation = Notation
    Indices = Indices

    def __init__(
        self,
        value: PathInput = "",
        *,
        notation: Notation | str | None = None,
        indices: Indices | str | None = None,
        index_wildcards=None,
        node_children_properties=None,
    ):
        options = dict(
            notation=notation,
            indices=indices,
            index_wildcards=index_wildcards,
            node_children_properties=node_children_properties,
        )

        if isinstance(value, Path):
            self._config = Config.resolve(value._config, **options)
            if self._config.index_wildcards == value._config.index_wildcards:
                self._segments = value._segments
            else:
                self._segments = validate(value._segments, self._config)
        elif isinstance(value, str):
            self._config = Config.resolve(**options)
            self._segments = parse(value, self._config)
        elif isinstance(value, (list, tuple)):
            self._config = Config.resolve(**options)
            self._segments = validate(value, self._config)
        else:
            raise InvalidPathInputError(value)

        self._reset_cache()

    def _reset_cache(self):
        self._strings: dict[Notation, str] = {}
        self._json_pointer: str | None = None
        self._json_path: str | None = None
        self._node_scan: tree.NodeScan | None = None

    @classmethod
    def from_(cls, value: PathInput = "", **config) -> "Path":
        return cls(value, **config)

    def _derive(self, segments: t.Iterable[Segment]) -> "Path":
        path = type(self).__new__(type(self))
        path._segments = tuple(segments)
        path._config = self._config
        path._reset_cache()
        return path

    def _coerce(self, value) -> t.Tuple[Segments, Config] | None:
        if isinstance(value, Path):
            return value._segments, value._config
        elif isinstance(value, str):
            return parse(value, self._config), self._config
        elif isinstance(value, (list, tuple)):
            return validate(value, self._config), self._config

        return None

    def _require(self, value) -> t.Tuple[Segments, Config]:
        coerced = self._coerce(value)
        if coerced is None:
            raise InvalidPathInputError(value)

        return coerced

    def _against(self, other, indices) -> t.Tuple[Segments, Config] | None:
        coerced = self._coerce(other)
        if coerced is None:
            return None

        segments, config = coerced
        return segments, compare.settings_for(self._config, config, indices)

    # Protocols

    def __eq__(self, other):
        if not isinstance(other, Path):
            return False

        return self._segments == other._segments

    def __hash__(self):
        return hash(self._segments)

    @t.overload
    def __getitem__(self, key: int) -> Segment:
        ...

    @t.overload
    def __getitem__(self, key: slice) -> "Path":
        ...

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._derive(self._segments[key])

        return self._segments[key]

    def __iter__(self) -> t.Iterator[Segment]:
        return iter(self._segments)

    def __len__(self):
        return len(self._segments)

    def __repr__(self):
        return f"Path({self.to_string()!r})"

    def __str__(self):
        return self.to_string()

    def __truediv__(self, other: PathInput) -> "Path":
        return self.concat(other)

    # Configuration

    @property
    def config(self) -> Config:
        return self._config

    @property
    def notation(self) -> Notation:
        return self._config.notation

    @property
    def indices(self) -> Indices:
        return self._config.indices

    @property
    def index_wildcards(self) -> t.FrozenSet[Segment]:
        return self._config.index_wildcards

    @property
    def node_children_properties(self) -> t.FrozenSet[str]:
        return self._config.node_children_properties

    # Conversion

    @property
    def length(self) -> int:
        return len(self._segments)

    @property
    def has_index_wildcards(self) -> bool:
        return any(self._config.is_wildcard(segment) for segment in self._segments)

    def to_string(self, notation: Notation | str | None = None) -> str:
        if notation is None:
            notation = self._config.notation
        else:
            notation = Notation.coerce(notation)

        string = self._strings.get(notation)
        if string is None:
            string = self._strings[notation] = render(self._segments, notation, self._config)

        return string

    @property
    def string(self) -> str:
        return self.to_string()

    def to_array(self) -> list[Segment]:
        return list(self._segments)

    @property
    def array(self) -> list[Segment]:
        return self.to_array()

    def to_json_pointer(self) -> str:
        if self._json_pointer is None:
            self._json_pointer = to_json_pointer(self._segments)

        return self._json_pointer

    @property
    def json_pointer(self) -> str:
        return self.to_json_pointer()

    def to_json_path(self) -> str:
        if self._json_path is None:
            self._json_path = to_json_path(self._segments, self._config)

        return self._json_path

    @property
    def json_path(self) -> str:
        return self.to_json_path()

    # Comparison

    def equals(self, other: PathInput, indices: Indices | str | None = None) -> bool:
        against = self._against(other, indices)
        if against is None:
            return False

        return compare.equals(self._segments, *against)

    def starts_with(self, other: PathInput, indices: Indices | str | None = None) -> bool:
        against = self._against(other, indices)
        if against is None:
            return False

        return compare.starts_with(self._segments, *against)

    def ends_with(self, other: PathInput, indices: Indices | str | None = None) -> bool:
        against = self._against(other, indices)
        if against is None:
            return False

        return compare.ends_with(self._segments, *against)

    def includes(self, other: PathInput, indices: Indices | str | None = None) -> bool:
        return self.position_of(other, indices) != -1

    def position_of(self, other: PathInput, indices: Indices | str | None = None) -> int:
        against = self._against(other, indices)
        if against is None:
            return -1

        return compare.find_first(self._segments, *against)

    def last_position_of(
        self, other: PathInput, indices: Indices | str | None = None
    ) -> int:
        against = self._against(other, indices)
        if against is None:
            return -1

        return compare.find_last(self._segments, *against)

    # Matching

    def match(
        self, pattern: PathInput, indices: Indices | str | None = None
    ) -> "Path | None":
        against = self._against(pattern, indices)
        if against is None:
            return None

        offset = compare.find_first(self._segments, *against)
        if offset == -1:
            return None

        return self._derive(self._segments[offset : offset + len(against[0])])

    def match_start(
        self, pattern: PathInput, indices: Indices | str | None = None
    ) -> "Path | None":
        against = self._against(pattern, indices)
        if against is None or not compare.starts_with(self._segments, *against):
            return None

        return self._derive(self._segments[: len(against[0])])

    def match_end(
        self, pattern: PathInput, indices: Indices | str | None = None
    ) -> "Path | None":
        against = self._against(pattern, indices)
        if against is None or not compare.ends_with(self._segments, *against):
            return None

        return self._derive(self._segments[len(self._segments) - len(against[0]) :])

    # Transforms

    def slice(self, start: int | None = None, end: int | None = None) -> "Path":
        return self._derive(self._segments[start:end])

    def parent_path(self, depth: int = 1) -> "Path":
        if depth < 0:
            raise ValueError(f"Depth must be non-negative, got {depth}")

        return self._derive(self._segments[: max(len(self._segments) - depth, 0)])

    def concat(self, *parts: PathInput) -> "Path":
        segments = list(self._segments)

        for part in parts:
            segments.extend(self._require(part)[0])

        return self._derive(segments)

    def merge(self, other: PathInput) -> "Path":
        """Join ``other`` onto this path, folding the longest overlap.

        The longest suffix of this path that matches a prefix of ``other`` is
        kept once. Inside the overlap a concrete index replaces a wildcard::

            >>> Path("items[-1].name").merge("items[5].name.value")
            Path('items[5].name.value')

        Without any overlap this is :meth:`concat`.
        """

        segments, config = self._require(other)
        settings = compare.settings_for(self._config, config)

        size = compare.longest_overlap(self._segments, segments, settings)
        if not size:
            return self._derive(self._segments + segments)

        split = len(self._segments) - size
        overlap = (
            b if settings.is_wildcard(a) and not settings.is_wildcard(b) else a
            for a, b in zip(self._segments[split:], segments)
        )

        return self._derive((*self._segments[:split], *overlap, *segments[size:]))

    def relative_to(
        self, base: PathInput, indices: Indices | str | None = None
    ) -> "Path | None":
        segments, config = self._require(base)
        settings = compare.settings_for(self._config, config, indices)

        if not compare.starts_with(self._segments, segments, settings):
            return None

        return self._derive(self._segments[len(segments) :])

    def common_start(
        self, other: PathInput, indices: Indices | str | None = None
    ) -> "Path":
        segments, config = self._require(other)
        settings = compare.settings_for(self._config, config, indices)

        length = compare.common_prefix_length(self._segments, segments, settings)
        return self._derive(self._segments[:length])

    def common_end(
        self, other: PathInput, indices: Indices | str | None = None
    ) -> "Path":
        segments, config = self._require(other)
        settings = compare.settings_for(self._config, config, indices)

        length = compare.common_suffix_length(self._segments, segments, settings)
        return self._derive(self._segments[len(self._segments) - length :])

    def path_to(
        self, pattern: PathInput, indices: Indices | str | None = None
    ) -> "Path | None":
        segments, config = self._require(pattern)
        settings = compare.settings_for(self._config, config, indices)

        offset = compare.find_first(self._segments, segments, settings)
        if offset == -1:
            return None

        return self._derive(self._segments[: offset + len(segments)])

    def path_to_last(
        self, pattern: PathInput, indices: Indices | str | None = None
    ) -> "Path | None":
        segments, config = self._require(pattern)
        settings = compare.settings_for(self._config, config, indices)

        offset = compare.find_last(self._segments, segments, settings)
        if offset == -1:
            return None

        return self._derive(self._segments[: offset + len(segments)])

    def reduce(self, function: Reducer, initial: t.Any) -> t.Any:
        return functools.reduce(function, self._segments, initial)

    # Tree navigation

    @property
    def _nodes(self) -> tree.NodeScan:
        if self._node_scan is None:
            self._node_scan = tree.scan(self._segments, self._config)

        return self._node_scan

    def first_node_position(self) -> int:
        return self._nodes.first

    def last_node_position(self) -> int:
        return self._nodes.last

    def node_indices(self) -> list[Segment]:
        return [self._segments[i] for i in self._nodes.positions]

    def first_node_path(self) -> "Path":
        return self._derive(self._segments[: self._nodes.first + 1])

    def last_node_path(self) -> "Path":
        return self._derive(self._segments[: self._nodes.last + 1])

    def before_node_path(self) -> "Path":
        nodes = self._nodes
        if not nodes:
            return self._derive(())

        return self._derive(self._segments[: nodes.first])

    def after_node_path(self) -> "Path":
        return self._derive(self._segments[self._nodes.last + 1 :])

    def parent_node(self, depth: int = 1) -> "Path":
        if depth < 0:
            raise ValueError(f"Depth must be non-negative, got {depth}")

        positions = self._nodes.positions
        if depth >= len(positions):
            return self._derive(())

        return self._derive(self._segments[: positions[-1 - depth] + 1])

    def node_paths(self) -> t.Iterator["Path"]:
        """Yield the root, then the path through each node of the run."""

        yield self._derive(())

        for position in self._nodes.positions:
            yield self._derive(self._segments[: position + 1])

"""Path configuration and the process-wide defaults.

A :class:`Config` is resolved once, when a path is constructed, from explicit
keyword arguments, then :data:`defaults`, then the built-in values below. It is
frozen and handed unchanged to every path derived from that path, so changing
:data:`defaults` later only affects paths created afterwards.

The defaults object is plain shared state. Configure it before constructing
paths; mutating it from several threads at once is not supported.
"""

import contextlib
import dataclasses
import logging
import math
import re
import typing as t

from enum import Enum

from .exceptions import ConfigurationError


logger = logging.getLogger("pathist")


class Notation(Enum):
    Mixed = "mixed"
    Dot = "dot"
    Bracket = "bracket"

    def __str__(self):
        return self.value

    @classmethod
    def coerce(cls, value: "Notation | str") -> "Notation":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass

        raise ConfigurationError(f"Invalid notation: {value!r}")


class Indices(Enum):
    Preserve = "preserve"
    Ignore = "ignore"

    def __str__(self):
        return self.value

    @classmethod
    def coerce(cls, value: "Indices | str") -> "Indices":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass

        raise ConfigurationError(f"Invalid indices mode: {value!r}")


DEFAULT_INDEX_WILDCARDS: t.FrozenSet[int | float | str] = frozenset({-1, "*"})
DEFAULT_NODE_CHILDREN_PROPERTIES: t.FrozenSet[str] = frozenset({"children"})

_NUMERIC_STRING = re.compile(r"\d+")
_UNSAFE_WILDCARD = re.compile(r"""[.\[\]'"\\\s]""")


def is_number(segment) -> bool:
    return isinstance(segment, (int, float)) and not isinstance(segment, bool)


def _check_wildcard(value):
    if is_number(value):
        if math.isfinite(value) and (value >= 0 or value != int(value)):
            raise ConfigurationError(
                "Numeric index wildcards must be negative or non-finite "
                f"(whole numbers when finite), got {value!r}"
            )
    elif isinstance(value, str):
        if _NUMERIC_STRING.fullmatch(value):
            raise ConfigurationError(
                f"Index wildcards cannot be numeric strings, got {value!r}"
            )
        if not value or _UNSAFE_WILDCARD.search(value):
            raise ConfigurationError(
                "Index wildcards cannot be empty or contain dots, brackets, quotes, "
                f"backslashes or whitespace, got {value!r}"
            )
    else:
        raise ConfigurationError(
            f"Index wildcards must be strings or numbers, got {value!r}"
        )


def normalise_index_wildcards(value) -> t.FrozenSet[int | float | str]:
    if isinstance(value, str) or is_number(value):
        values = [value] if value != "" else []
    elif isinstance(value, (set, frozenset, list, tuple)):
        values = list(value)
    else:
        raise ConfigurationError(
            f"Index wildcards must be a set, list, string, or number, got {value!r}"
        )

    for wildcard in values:
        _check_wildcard(wildcard)

    return frozenset(values)


def normalise_node_children_properties(value) -> t.FrozenSet[str]:
    if isinstance(value, str):
        values = [value]
    elif isinstance(value, (set, frozenset, list, tuple)):
        values = list(value)
    else:
        raise ConfigurationError(
            f"Node children properties must be a set, list, or string, got {value!r}"
        )

    for name in values:
        if not isinstance(name, str):
            raise ConfigurationError(
                f"Node children properties must be strings, got {name!r}"
            )

    return frozenset(values)


@dataclasses.dataclass(frozen=True)
class Config:
    notation: Notation = Notation.Mixed
    indices: Indices = Indices.Preserve
    index_wildcards: t.FrozenSet[int | float | str] = DEFAULT_INDEX_WILDCARDS
    node_children_properties: t.FrozenSet[str] = DEFAULT_NODE_CHILDREN_PROPERTIES

    @classmethod
    def resolve(
        cls,
        base: "Config | None" = None,
        *,
        notation: Notation | str | None = None,
        indices: Indices | str | None = None,
        index_wildcards=None,
        node_children_properties=None,
    ) -> "Config":
        if base is None:
            base = defaults.snapshot()

        changes = {}
        if notation is not None:
            changes["notation"] = Notation.coerce(notation)
        if indices is not None:
            changes["indices"] = Indices.coerce(indices)
        if index_wildcards is not None:
            changes["index_wildcards"] = normalise_index_wildcards(index_wildcards)
        if node_children_properties is not None:
            changes["node_children_properties"] = normalise_node_children_properties(
                node_children_properties
            )

        if not changes:
            return base

        return dataclasses.replace(base, **changes)

    def is_wildcard(self, segment) -> bool:
        if isinstance(segment, bool):
            return False
        if isinstance(segment, float) and math.isnan(segment):
            return any(w != w for w in self.index_wildcards)

        return segment in self.index_wildcards

    def is_index(self, segment) -> bool:
        return is_number(segment) or (
            isinstance(segment, str) and segment in self.index_wildcards
        )


class Defaults:
    def __init__(self):
        self._config = Config()

    def __repr__(self):
        return f"Defaults({self._config!r})"

    @property
    def notation(self) -> Notation:
        return self._config.notation

    @notation.setter
    def notation(self, value: Notation | str):
        self._config = dataclasses.replace(self._config, notation=Notation.coerce(value))
        logger.debug("Default notation set to %s", self._config.notation)

    @property
    def indices(self) -> Indices:
        return self._config.indices

    @indices.setter
    def indices(self, value: Indices | str):
        self._config = dataclasses.replace(self._config, indices=Indices.coerce(value))
        logger.debug("Default indices mode set to %s", self._config.indices)

    @property
    def index_wildcards(self) -> t.FrozenSet[int | float | str]:
        return self._config.index_wildcards

    @index_wildcards.setter
    def index_wildcards(self, value):
        self._config = dataclasses.replace(
            self._config, index_wildcards=normalise_index_wildcards(value)
        )
        logger.debug("Default index wildcards set to %r", set(self._config.index_wildcards))

    @property
    def node_children_properties(self) -> t.FrozenSet[str]:
        return self._config.node_children_properties

    @node_children_properties.setter
    def node_children_properties(self, value):
        self._config = dataclasses.replace(
            self._config,
            node_children_properties=normalise_node_children_properties(value),
        )
        logger.debug(
            "Default node children properties set to %r",
            set(self._config.node_children_properties),
        )

    def reset(self):
        self._config = Config()
        logger.debug("Defaults reset")

    def snapshot(self) -> Config:
        return self._config

    @contextlib.contextmanager
    def overrides(self, **kwargs) -> t.Iterator["Defaults"]:
        saved = self._config

        try:
            for name, value in kwargs.items():
                if name not in Config.__dataclass_fields__:
                    raise ConfigurationError(f"Unknown default: {name!r}")
                setattr(self, name, value)

            yield self
        finally:
            self._config = saved


defaults = Defaults()

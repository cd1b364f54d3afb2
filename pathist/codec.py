"""Parse and render path strings.

---------
NOTATIONS
---------

Segments:       ["foo", 0, "bar.baz", "*"]       (with "*" an index wildcard)

Mixed:          foo[0]["bar.baz"][*]
Dot:            foo.0.bar\\.baz.*
Bracket:        ["foo"][0]["bar.baz"][*]

JSON Pointer:   /foo/0/bar.baz/*                 (RFC 6901, output only)
JSONPath:       $.foo[0]['bar.baz'][*]           (RFC 9535, output only)

-------
PARSING
-------

Parsing always auto-detects, so any mix of the notations above is accepted:

    foo             property "foo" (a leading "." is allowed: ".foo")
    foo\\.bar        property "foo.bar"
    [0]             index 0 (no leading zeros; "[01]" is the property "01")
    [-1]            index wildcard -1, only when -1 is a configured wildcard
    ["a.b"] ['a']   quoted property, backslash escapes the next character
    [foo] [*]       unquoted bracket content that is not an index: a property

Dot notation is lossy: numbers come back as strings, and empty names or names
with brackets cannot be written in it.
"""

import math
import re
import typing as t

from .config import Config, Notation, is_number
from .exceptions import InvalidSegmentError, PathSyntaxError
from .typing import Segment, Segments


_BARE = re.compile(r"(?:[^.\[\]\\]|\\\.|\\)+")
_INDEX = re.compile(r"0|-?[1-9][0-9]*")
_QUOTED = {
    '"': re.compile(r'"((?:[^"\\]|\\.)*)"\]', re.DOTALL),
    "'": re.compile(r"'((?:[^'\\]|\\.)*)'\]", re.DOTALL),
}
_ESCAPED = re.compile(r"\\(.)", re.DOTALL)
_PLAIN_NAME = re.compile(r"""[^.\[\]'"\\\s]+""")
_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")
_NON_FINITE = {"Infinity": math.inf, "-Infinity": -math.inf, "NaN": math.nan}


def parse(text: str, config: Config) -> Segments:
    segments: list[Segment] = []
    length = len(text)
    i = 0

    while i < length:
        char = text[i]

        if char == "[":
            i = _parse_bracket(text, i, config, segments)
            continue
        elif char == "]":
            raise PathSyntaxError("Unbalanced ']'", text, i)
        elif char == ".":
            i += 1
            if i < length and text[i] == "[":
                continue
        elif segments:
            raise PathSyntaxError("Expected '.' or '['", text, i)

        match = _BARE.match(text, i)
        if match is None:
            raise PathSyntaxError("Empty property name", text, i)

        name = match.group()
        if "\\" in name:
            name = name.replace("\\.", ".")
        if name in config.index_wildcards:
            raise PathSyntaxError(
                f"Index wildcard '{name}' cannot appear in property position", text, i
            )

        segments.append(name)
        i = match.end()

    return tuple(segments)


def _parse_bracket(text: str, i: int, config: Config, segments: list[Segment]) -> int:
    start = i + 1

    if start < len(text) and text[start] in _QUOTED:
        match = _QUOTED[text[start]].match(text, start)
        if match is None:
            raise PathSyntaxError("Mismatched quotes in bracket", text, i)

        body = match.group(1)
        segments.append(_ESCAPED.sub(r"\1", body) if "\\" in body else body)
        return match.end()

    close = text.find("]", start)
    if close == -1:
        raise PathSyntaxError("Unclosed bracket", text, i)

    content = text[start:close]
    if not content:
        raise PathSyntaxError("Empty brackets", text, i)
    if '"' in content or "'" in content:
        raise PathSyntaxError("Mismatched quotes in bracket", text, i)
    if "[" in content:
        raise PathSyntaxError("Unexpected '[' inside brackets", text, start + content.index("["))

    segments.append(_bracket_value(content, text, i, config))
    return close + 1


def _bracket_value(content: str, text: str, position: int, config: Config) -> Segment:
    if _INDEX.fullmatch(content):
        value = int(content)
        if value < 0 and not config.is_wildcard(value):
            raise PathSyntaxError(
                f"Negative index {value} is not a configured index wildcard",
                text,
                position,
            )
        return value

    if content in _NON_FINITE and config.is_wildcard(_NON_FINITE[content]):
        return _NON_FINITE[content]

    return content


def validate(segments: t.Iterable, config: Config) -> Segments:
    result = []

    for segment in segments:
        if isinstance(segment, float) and segment.is_integer():
            segment = int(segment)

        if isinstance(segment, str):
            pass
        elif not is_number(segment):
            raise InvalidSegmentError(segment)
        elif config.is_wildcard(segment):
            pass
        elif isinstance(segment, float) or segment < 0:
            raise InvalidSegmentError(
                segment,
                "Indices must be non-negative integers or configured index wildcards",
            )

        result.append(segment)

    return tuple(result)


def format_index(value: int | float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(int(value))

    return str(value)


def _quote(name: str) -> str:
    return '["' + name.replace("\\", "\\\\").replace('"', '\\"') + '"]'


def _render_mixed(segments: Segments, config: Config) -> str:
    parts = []

    for position, segment in enumerate(segments):
        if is_number(segment):
            parts.append(f"[{format_index(segment)}]")
        elif segment in config.index_wildcards:
            parts.append(f"[{segment}]")
        elif _PLAIN_NAME.fullmatch(segment):
            parts.append(f".{segment}" if position else segment)
        else:
            parts.append(_quote(segment))

    return "".join(parts)


def _render_dot(segments: Segments, config: Config) -> str:
    return ".".join(
        format_index(segment) if is_number(segment) else segment.replace(".", "\\.")
        for segment in segments
    )


def _render_bracket(segments: Segments, config: Config) -> str:
    parts = []

    for segment in segments:
        if is_number(segment):
            parts.append(f"[{format_index(segment)}]")
        elif segment in config.index_wildcards:
            parts.append(f"[{segment}]")
        else:
            parts.append(_quote(segment))

    return "".join(parts)


_RENDERERS: dict[Notation, t.Callable[[Segments, Config], str]] = {
    Notation.Mixed: _render_mixed,
    Notation.Dot: _render_dot,
    Notation.Bracket: _render_bracket,
}


def render(segments: Segments, notation: Notation, config: Config) -> str:
    return _RENDERERS[notation](segments, config)


def to_json_pointer(segments: Segments) -> str:
    if not segments:
        return ""

    return "/" + "/".join(
        (format_index(segment) if is_number(segment) else segment)
        .replace("~", "~0")
        .replace("/", "~1")
        for segment in segments
    )


def to_json_path(segments: Segments, config: Config) -> str:
    parts = ["$"]

    for segment in segments:
        if config.is_wildcard(segment):
            parts.append("[*]")
        elif is_number(segment):
            parts.append(f"[{format_index(segment)}]")
        elif _IDENTIFIER.fullmatch(segment):
            parts.append(f".{segment}")
        else:
            escaped = segment.replace("\\", "\\\\").replace("'", "\\'")
            parts.append(f"['{escaped}']")

    return "".join(parts)

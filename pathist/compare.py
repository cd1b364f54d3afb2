"""Segment comparison.

Every predicate on :class:`~pathist.path.Path` reduces to one window test:
does ``pattern`` line up with ``subject`` starting at ``offset``? Two segments
match when

- either one is an index wildcard and the other is an index or a wildcard,
- both are numbers and they are equal, or the indices mode is ``Ignore``,
- both are plain property strings and they are equal.

A property string never matches a number or a wildcard. Under ``Ignore`` or
with wildcards the relation is not transitive: ``3`` matches ``-1`` which
matches ``7``, but ``3`` does not match ``7``.
"""

import dataclasses

from .config import Config, Indices, is_number
from .typing import Segment, Segments


def settings_for(
    receiver: Config, pattern: Config, indices: Indices | str | None = None
) -> Config:
    """Settings used when ``pattern`` is looked for in ``receiver``.

    The pattern supplies the indices mode and the index wildcards. An explicit
    ``indices`` overrides the mode for this one call.
    """

    mode = pattern.indices if indices is None else Indices.coerce(indices)
    wildcards = pattern.index_wildcards

    if mode is receiver.indices and wildcards == receiver.index_wildcards:
        return receiver

    return dataclasses.replace(receiver, indices=mode, index_wildcards=wildcards)


def segments_match(a: Segment, b: Segment, settings: Config) -> bool:
    a_wildcard = settings.is_wildcard(a)
    b_wildcard = settings.is_wildcard(b)

    if a_wildcard or b_wildcard:
        return (a_wildcard or is_number(a)) and (b_wildcard or is_number(b))

    a_number = is_number(a)
    b_number = is_number(b)

    if a_number and b_number:
        return settings.indices is Indices.Ignore or a == b
    elif a_number or b_number:
        return False

    return a == b


def window_matches(
    subject: Segments, pattern: Segments, offset: int, settings: Config
) -> bool:
    if offset < 0 or offset + len(pattern) > len(subject):
        return False

    for i, segment in enumerate(pattern):
        if not segments_match(subject[offset + i], segment, settings):
            return False

    return True


def equals(subject: Segments, pattern: Segments, settings: Config) -> bool:
    return len(subject) == len(pattern) and window_matches(subject, pattern, 0, settings)


def starts_with(subject: Segments, pattern: Segments, settings: Config) -> bool:
    return window_matches(subject, pattern, 0, settings)


def ends_with(subject: Segments, pattern: Segments, settings: Config) -> bool:
    return window_matches(subject, pattern, len(subject) - len(pattern), settings)


def find_first(subject: Segments, pattern: Segments, settings: Config) -> int:
    for offset in range(len(subject) - len(pattern) + 1):
        if window_matches(subject, pattern, offset, settings):
            return offset

    return -1


def find_last(subject: Segments, pattern: Segments, settings: Config) -> int:
    for offset in range(len(subject) - len(pattern), -1, -1):
        if window_matches(subject, pattern, offset, settings):
            return offset

    return -1


def common_prefix_length(a: Segments, b: Segments, settings: Config) -> int:
    length = 0

    for x, y in zip(a, b):
        if not segments_match(x, y, settings):
            break
        length += 1

    return length


def common_suffix_length(a: Segments, b: Segments, settings: Config) -> int:
    length = 0

    for x, y in zip(reversed(a), reversed(b)):
        if not segments_match(x, y, settings):
            break
        length += 1

    return length


def longest_overlap(head: Segments, tail: Segments, settings: Config) -> int:
    """Length of the longest suffix of ``head`` matching a prefix of ``tail``."""

    for size in range(min(len(head), len(tail)), 0, -1):
        if window_matches(head, tail[:size], len(head) - size, settings):
            return size

    return 0

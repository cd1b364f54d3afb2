"""Locate the run of tree node indices inside a path.

A node run looks like ``[i] (child [i])*`` where ``child`` is one of the
configured node children properties, for example ``children[2].children[3]``
in ``children[2].children[3].foo.bar``. Only the first run counts; once it
breaks, later segments are never reconsidered.
"""

import dataclasses
import typing as t

from .config import Config
from .typing import Segments


@dataclasses.dataclass(frozen=True)
class NodeScan:
    positions: t.Tuple[int, ...] = ()

    @property
    def first(self) -> int:
        return self.positions[0] if self.positions else -1

    @property
    def last(self) -> int:
        return self.positions[-1] if self.positions else -1

    def __bool__(self):
        return bool(self.positions)


NO_NODES = NodeScan()


def _starts_run(segments: Segments, i: int, config: Config) -> bool:
    if i == 0:
        return True

    if segments[i - 1] in config.node_children_properties:
        return True

    return (
        i + 2 < len(segments)
        and segments[i + 1] in config.node_children_properties
        and config.is_index(segments[i + 2])
    )


def scan(segments: Segments, config: Config) -> NodeScan:
    positions: list[int] = []

    for i, segment in enumerate(segments):
        if not positions:
            if config.is_index(segment) and _starts_run(segments, i, config):
                positions.append(i)
            continue

        last = positions[-1]
        if i == last + 1:
            if segment not in config.node_children_properties:
                break
        elif i == last + 2 and config.is_index(segment):
            positions.append(i)
        else:
            break

    if not positions:
        return NO_NODES

    return NodeScan(tuple(positions))

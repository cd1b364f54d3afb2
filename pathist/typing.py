import typing as t

if t.TYPE_CHECKING:
    from .path import Path


Segment = str | int | float
Segments = t.Tuple[Segment, ...]
PathInput = t.Union[str, t.Sequence[Segment], "Path"]
Reducer = t.Callable[[t.Any, Segment], t.Any]

"""Traces of charge on channels and frames that collect them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

_MICROSECOND = 1000.0
DEFAULT_TICK = 0.5 * _MICROSECOND


@dataclass(eq=False)
class Trace:
    """Contiguous charge samples on a channel starting at time bin ``tbin``."""

    channel: int
    tbin: int
    charge: list = field(default_factory=list)

    def __post_init__(self) -> None:
        self.charge = [float(q) for q in self.charge]

    @classmethod
    def zeros(cls, channel: int, tbin: int, ncharges: int) -> Trace:
        """A trace holding ``ncharges`` zero samples."""
        if ncharges < 0:
            raise ValueError("number of charges must not be negative")
        return cls(channel, tbin, [0.0] * ncharges)

    def __len__(self) -> int:
        return len(self.charge)


@dataclass
class _TraceInfo:
    indices: tuple = ()
    summary: tuple = ()


class Frame:
    """A sequence of traces with a reference time, tick and optional tags."""

    def __init__(
        self,
        ident: int,
        time: float,
        traces: Iterable[Trace],
        tick: float = DEFAULT_TICK,
        masks: dict | None = None,
    ) -> None:
        self.ident = ident
        self.time = time
        self.tick = tick
        self.traces = tuple(traces)
        self.masks = dict(masks) if masks else {}
        self._frame_tags: list[str] = []
        self._trace_info: dict[str, _TraceInfo] = {}

    @property
    def frame_tags(self) -> tuple[str, ...]:
        """Tags applied to the frame as a whole, in the order given."""
        return tuple(self._frame_tags)

    @property
    def trace_tags(self) -> tuple[str, ...]:
        """All tags applied to subsets of traces, in sorted order."""
        return tuple(sorted(self._trace_info))

    def tagged_traces(self, tag: str) -> tuple[int, ...]:
        """Indices of the traces carrying ``tag``; empty if none."""
        info = self._trace_info.get(tag)
        return info.indices if info else ()

    def trace_summary(self, tag: str) -> tuple[float, ...]:
        """Summary values matching ``tagged_traces(tag)``; empty if none."""
        info = self._trace_info.get(tag)
        return info.summary if info else ()

    def tag_frame(self, tag: str) -> None:
        self._frame_tags.append(tag)

    def tag_traces(
        self, tag: str, indices: Sequence[int], summary: Sequence[float] = ()
    ) -> None:
        """Tag a subset of traces by index, replacing any earlier use of ``tag``."""
        self._trace_info[tag] = _TraceInfo(
            tuple(int(i) for i in indices), tuple(float(s) for s in summary)
        )

    def __repr__(self) -> str:
        return (
            f"Frame(ident={self.ident}, time={self.time}, tick={self.tick},"
            f" ntraces={len(self.traces)})"
        )
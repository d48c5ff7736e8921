"""Operations on frames and the traces they hold."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

from wireface.frames import Frame, Trace


def untagged_traces(frame: Frame) -> list[Trace]:
    """Return the traces of ``frame`` that carry no trace tag.

    Frame tags are ignored.  Traces keep their order in the frame.
    """
    tagged: set[int] = set()
    for tag in frame.trace_tags:
        tagged.update(frame.tagged_traces(tag))
    return [trace for ind, trace in enumerate(frame.traces) if ind not in tagged]


def tagged_traces(frame: Frame, tag: str) -> list[Trace]:
    """Return the traces matching ``tag``.

    A matching trace tag gives its traces.  Otherwise, if the frame as
    a whole carries the tag, all traces are given, else none.  The
    empty tag selects the untagged traces.
    """
    if tag == "":
        return untagged_traces(frame)
    all_traces = frame.traces
    selected = [all_traces[index] for index in frame.tagged_traces(tag)]
    if selected:
        return selected
    if tag not in frame.frame_tags:
        return []
    return list(all_traces)


def channels(traces: Iterable[Trace]) -> list[int]:
    """Return the channel of each trace, one to one and in order."""
    return [trace.channel for trace in traces]


def tbin_range(traces: Iterable[Trace]) -> tuple[int, int]:
    """Return the smallest ``tbin`` and the largest ``tbin + len(charge)``."""
    traces = list(traces)
    if not traces:
        raise ValueError("tbin range of no traces is undefined")
    low = min(trace.tbin for trace in traces)
    high = max(trace.tbin + len(trace.charge) for trace in traces)
    return low, high


def fill(
    array: np.ndarray,
    traces: Iterable[Trace],
    channels: Sequence[int],
    tbin: int = 0,
) -> None:
    """Add trace charge into a 2D ``[channel row, tick column]`` array in place.

    Row ``i`` holds the channel ``channels[i]``; column 0 corresponds to
    time bin ``tbin``.  Traces on channels not listed, and samples that
    fall outside the array, are ignored.
    """
    if array.ndim != 2:
        raise ValueError("array must be two dimensional")
    nrows, ncols = array.shape
    row_of: dict[int, int] = {}
    for irow, chan in zip(range(nrows), channels):
        row_of[chan] = irow

    for trace in traces:
        irow = row_of.get(trace.channel)
        if irow is None:
            continue
        charge = trace.charge
        dtbin = trace.tbin - tbin
        icol0 = max(dtbin, 0)
        itick0 = max(-dtbin, 0)
        nleft = min(ncols - icol0, len(charge) - itick0)
        if nleft <= 0:
            continue
        array[irow, icol0:icol0 + nleft] += np.asarray(
            charge[itick0:itick0 + nleft], dtype=array.dtype
        )


def frmtcmp(frame: Frame, time: float) -> int:
    """Compare the time span of ``frame`` with ``time``.

    Return -1 if the frame lies wholly before the time, +1 if wholly
    after and 0 if its span covers it.  A span edge exactly at the
    time does not count as covering it.
    """
    low, high = tbin_range(frame.traces)
    tmin = frame.time + low * frame.tick
    tmax = frame.time + high * frame.tick
    if tmax <= time:
        return -1
    if tmin >= time:
        return 1
    return 0


def split(frame: Frame, time: float) -> tuple[Optional[Frame], Optional[Frame]]:
    """Split ``frame`` into the samples before and on-or-after ``time``.

    If the frame does not span the time, it is returned whole in the
    matching half and the other half is ``None``.
    """
    cmp = frmtcmp(frame, time)
    if cmp < 0:
        return frame, None
    if cmp > 0:
        return None, frame

    tref = frame.time
    tick = frame.tick
    tbin_split = int(0.5 + (time - tref) / tick)

    before: list[Trace] = []
    after: list[Trace] = []
    for trace in frame.traces:
        if trace.tbin >= tbin_split:
            after.append(trace)
            continue
        wave = trace.charge
        if trace.tbin + len(wave) <= tbin_split:
            before.append(trace)
            continue
        cut = tbin_split - trace.tbin
        before.append(Trace(trace.channel, trace.tbin, wave[:cut]))
        after.append(Trace(trace.channel, tbin_split, wave[cut:]))

    return (
        Frame(frame.ident, tref, before, tick),
        Frame(frame.ident, tref, after, tick),
    )
"""Wire segments, channels, wire planes and wire selectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Tuple

from wireface.wireplaneid import Layer, WirePlaneId

Point = Tuple[float, float, float]
Ray = Tuple[Point, Point]


def _bogus_planeid() -> WirePlaneId:
    return WirePlaneId(Layer.UNKNOWN, -1, -1)


@dataclass(frozen=True, eq=False)
class Wire:
    """A physical wire segment."""

    planeid: WirePlaneId
    ident: int
    index: int
    channel: int
    ray: Ray
    segment: int = 0

    @property
    def center(self) -> Point:
        """The midpoint of the wire segment."""
        tail, head = self.ray
        return tuple(0.5 * (a + b) for a, b in zip(tail, head))


def ascending_index(lhs: Wire, rhs: Wire) -> bool:
    """True if ``lhs`` comes before ``rhs`` by index within a common plane.

    Wires in different planes are not ordered.
    """
    if lhs.planeid == rhs.planeid:
        return lhs.index < rhs.index
    return False


def ident_key(wire: Wire) -> tuple:
    """Sort key by wire ident, ties broken by object identity."""
    return (wire.ident, id(wire))


def index_key(wire: Wire) -> tuple:
    """Sort key by wire index, ties broken by object identity."""
    return (wire.index, id(wire))


def segment_key(wire: Wire) -> tuple:
    """Sort key by wire segment, ties broken by object identity."""
    return (wire.segment, id(wire))


class Channel:
    """An electronics channel fed by wire segments ordered by segment number."""

    def __init__(self, ident: int = -1, index: int = -1, wires: Iterable[Wire] = ()) -> None:
        self.ident = ident
        self.index = index
        self._wires = sorted(wires, key=segment_key)

    @property
    def wires(self) -> tuple[Wire, ...]:
        return tuple(self._wires)

    def add(self, wire: Wire) -> None:
        """Attach another wire segment, keeping segment order."""
        self._wires.append(wire)
        self._wires.sort(key=segment_key)

    @property
    def planeid(self) -> WirePlaneId:
        """The plane of the first wire, or a bogus id if there are none."""
        if not self._wires:
            return _bogus_planeid()
        return self._wires[0].planeid

    def __repr__(self) -> str:
        return f"Channel(ident={self.ident}, index={self.index}, nwires={len(self._wires)})"


@dataclass(frozen=True)
class WirePlane:
    """A plane of wires and the channels attached to them."""

    ident: int
    wires: tuple = field(default_factory=tuple)
    channels: tuple = field(default_factory=tuple)

    @property
    def planeid(self) -> WirePlaneId:
        """The plane of the first wire, or a bogus id if there are none."""
        if not self.wires:
            return _bogus_planeid()
        return self.wires[0].planeid


@dataclass(frozen=True)
class WirePlaneSelector:
    """Select wires by layer bits, face and apa.  Negative face or apa match any."""

    layers: int
    face: int = 0
    apa: int = 0

    def __call__(self, wire: Wire) -> bool:
        planeid = wire.planeid
        if self.layers and not (int(self.layers) & planeid.ilayer):
            return False
        if self.apa >= 0 and planeid.apa != self.apa:
            return False
        if self.face >= 0 and planeid.face != self.face:
            return False
        return True


select_u_wires = WirePlaneSelector(Layer.U, 0, 0)
select_v_wires = WirePlaneSelector(Layer.V, 0, 0)
select_w_wires = WirePlaneSelector(Layer.W, 0, 0)
select_uvw_wires = (select_u_wires, select_v_wires, select_w_wires)
select_all_wires = WirePlaneSelector(Layer.U | Layer.V | Layer.W, 0, 0)
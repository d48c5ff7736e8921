"""Identification of a wire plane by layer, anode face and anode (APA) number."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import Any

_LAYER_MASK = 0x7
_FACE_SHIFT = 3
_APA_SHIFT = 4


class Layer(enum.IntFlag):
    """Wire plane layer bits.  These are flags, not indices."""

    UNKNOWN = 0
    U = 1
    V = 2
    W = 4

    def __str__(self) -> str:
        return _LAYER_LABELS.get(int(self), "<?>")


_LAYER_LABELS = {1: "<U>", 2: "<V>", 4: "<W>"}
_LAYER_INDEX = {1: 0, 2: 1, 4: 2}
_PLANE_LAYERS = (Layer.U, Layer.V, Layer.W)


def layer_from_index(index: int) -> Layer:
    """Return the layer for a plane index of 0, 1 or 2."""
    if not 0 <= index < len(_PLANE_LAYERS):
        raise IndexError(f"plane index out of range: {index}")
    return _PLANE_LAYERS[index]


class WirePlaneId:
    """A wire plane identifier packed into a single integer."""

    __slots__ = ("_pack",)

    def __init__(self, layer: Layer | int, face: int = 0, apa: int = 0) -> None:
        self._pack = (int(layer) & _LAYER_MASK) | (face << _FACE_SHIFT) | (apa << _APA_SHIFT)

    @classmethod
    def from_packed(cls, packed: int) -> WirePlaneId:
        """Build an identifier from an already packed integer."""
        obj = cls.__new__(cls)
        obj._pack = int(packed)
        return obj

    @classmethod
    def from_config(cls, cfg: Sequence[Any]) -> WirePlaneId:
        """Build from a configuration array ``[plane_index, face, apa]``.

        The face and apa entries are optional and default to 0.
        """

        def entry(pos: int) -> int:
            if pos < len(cfg) and cfg[pos] is not None:
                return int(cfg[pos])
            return 0

        if not cfg or cfg[0] is None:
            raise ValueError("configuration must give a plane index")
        return cls(layer_from_index(int(cfg[0])), entry(1), entry(2))

    @property
    def ident(self) -> int:
        """The packed identifier."""
        return self._pack

    @property
    def layer(self) -> Layer:
        return Layer(self.ilayer)

    @property
    def ilayer(self) -> int:
        """The layer bits as an integer (not an index)."""
        return self._pack & _LAYER_MASK

    @property
    def index(self) -> int:
        """The layer as an index 0, 1 or 2, or -1 if unknown."""
        return _LAYER_INDEX.get(self.ilayer, -1)

    @property
    def face(self) -> int:
        return (self._pack & (1 << _FACE_SHIFT)) >> _FACE_SHIFT

    @property
    def apa(self) -> int:
        return self._pack >> _APA_SHIFT

    @property
    def valid(self) -> bool:
        return 0 <= self.index < 3

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WirePlaneId):
            return NotImplemented
        return self._pack == other._pack

    def __hash__(self) -> int:
        return hash(self._pack)

    def __lt__(self, other: WirePlaneId) -> bool:
        if not isinstance(other, WirePlaneId):
            return NotImplemented
        if not self.valid or not other.valid:
            return False
        return (self.apa, self.face, self.index) < (other.apa, other.face, other.index)

    def __str__(self) -> str:
        text = (
            f"[WirePlaneId {self.ident} ind:{self.index} layer:{self.layer}"
            f" apa:{self.apa} face:{self.face}"
        )
        if not self.valid:
            text += " bogus"
        return text + "]"

    def __repr__(self) -> str:
        return f"WirePlaneId.from_packed({self._pack})"
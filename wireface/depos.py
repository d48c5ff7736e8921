"""Charge depositions, sets of depositions and diffusion patches."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Tuple

Point = Tuple[float, float, float]

_MM = 1.0
_MICROSECOND = 1000.0
DEFAULT_DRIFT_SPEED = 1.6 * _MM / _MICROSECOND


@dataclass(frozen=True, eq=False)
class Depo:
    """A deposition of charge at a point in space and time.

    ``prior`` may refer to the deposition this one was drifted from.
    Extents are Gaussian-like half widths along the drift (long) and
    pitch (tran) directions.
    """

    time: float
    pos: Point
    charge: float = 1.0
    prior: Optional[Depo] = None
    extent_long: float = 0.0
    extent_tran: float = 0.0
    id: int = 0
    pdg: int = 0
    energy: float = 1.0


def depo_chain(recent: Depo) -> list[Depo]:
    """Return ``recent`` followed by each of its priors, most recent first."""
    chain = []
    depo: Optional[Depo] = recent
    while depo is not None:
        chain.append(depo)
        depo = depo.prior
    return chain


def drift_key(drift_speed: float = DEFAULT_DRIFT_SPEED) -> Callable[[Depo], tuple]:
    """Return a sort key ordering depos by ``time + x / drift_speed``.

    A negative speed indicates drift toward positive X.  Ties are
    broken by object identity so no two distinct depos compare equal.
    """
    if drift_speed == 0:
        raise ValueError("drift speed must be non-zero")

    def key(depo: Depo) -> tuple:
        return (depo.time + depo.pos[0] / drift_speed, id(depo))

    return key


def ascending_time(lhs: Depo, rhs: Depo) -> bool:
    """True if ``lhs`` comes before ``rhs`` by ascending time.

    Equal times are ordered by object identity.
    """
    if lhs.time == rhs.time:
        return id(lhs) < id(rhs)
    return lhs.time < rhs.time


def descending_time(lhs: Depo, rhs: Depo) -> bool:
    """True if ``lhs`` comes before ``rhs`` by descending time.

    Equal times are ordered by descending object identity.
    """
    if lhs.time == rhs.time:
        return id(lhs) > id(rhs)
    return lhs.time > rhs.time


@dataclass(frozen=True)
class DepoSet:
    """An identified, immutable collection of depositions."""

    ident: int
    depos: Tuple[Depo, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "depos", tuple(self.depos))

    @classmethod
    def of(cls, ident: int, depos: Iterable[Depo]) -> DepoSet:
        return cls(ident, tuple(depos))

    def __len__(self) -> int:
        return len(self.depos)

    def __iter__(self):
        return iter(self.depos)


class Diffusion(abc.ABC):
    """A rectangular patch of diffused charge on a longitudinal by transverse grid."""

    @property
    @abc.abstractmethod
    def depo(self) -> Depo:
        """The deposition that led to this diffusion."""

    @abc.abstractmethod
    def get(self, lind: int, tind: int) -> float:
        """The value in the given bin."""

    @property
    @abc.abstractmethod
    def lsize(self) -> int:
        """Number of bins in the longitudinal dimension."""

    @property
    @abc.abstractmethod
    def tsize(self) -> int:
        """Number of bins in the transverse dimension."""

    @abc.abstractmethod
    def lpos(self, ind: int, offset: float = 0.0) -> float:
        """Longitudinal position at a bin index plus offset (0.5 is bin centre)."""

    @abc.abstractmethod
    def tpos(self, ind: int, offset: float = 0.0) -> float:
        """Transverse position at a bin index plus offset (0.5 is bin centre)."""

    @property
    def lbegin(self) -> float:
        return self.lpos(0)

    @property
    def tbegin(self) -> float:
        return self.tpos(0)

    @property
    def lend(self) -> float:
        return self.lpos(self.lsize)

    @property
    def tend(self) -> float:
        return self.tpos(self.tsize)

    @property
    def lbin(self) -> float:
        return self.lpos(1) - self.lpos(0)

    @property
    def tbin(self) -> float:
        return self.tpos(1) - self.tpos(0)


def diffusion_lbegin_key(diffusion: Diffusion) -> tuple:
    """Sort key by start of patch in the longitudinal direction, ties by identity."""
    return (diffusion.lbegin, id(diffusion))
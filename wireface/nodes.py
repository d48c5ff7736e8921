"""Data flow graph nodes, classified by how many inputs and outputs they take.

Each node names the types of its input and output ports through
``input_types()`` and ``output_types()``.  A concrete node sets the
class attributes that describe its ports and implements ``__call__``.

A node that cannot do its work raises.  A node reaching the end of its
stream returns ``None`` where a single output is expected.
"""

from __future__ import annotations

import abc
import enum
from collections import deque
from typing import Any, ClassVar, Optional, Sequence


class NodeCategory(enum.Enum):
    """How a node consumes and produces data."""

    UNKNOWN = enum.auto()
    SOURCE = enum.auto()      # one output
    SINK = enum.auto()        # one input
    FUNCTION = enum.auto()    # one input, one output
    QUEUEDOUT = enum.auto()   # one input, a queue of outputs
    JOIN = enum.auto()        # tuple input, one output
    SPLIT = enum.auto()       # one input, tuple output
    FANIN = enum.auto()       # list input, one output
    FANOUT = enum.auto()      # one input, list output
    MULTIOUT = enum.auto()    # one input, several output queues
    HYDRA = enum.auto()       # several input and output queues


def _type_name(kind: Any) -> str:
    if isinstance(kind, type):
        return kind.__name__
    return str(kind)


def _type_names(kinds: Sequence[Any]) -> list[str]:
    return [_type_name(kind) for kind in kinds]


class Node(abc.ABC):
    """A vertex in a data flow graph."""

    @abc.abstractmethod
    def category(self) -> NodeCategory:
        """The behaviour category of this node."""

    @abc.abstractmethod
    def signature(self) -> str:
        """A string shared by all nodes with the same calling signature."""

    def concurrency(self) -> int:
        """How many instances may run at once; 0 means unlimited."""
        return 1

    def input_types(self) -> list[str]:
        """Names of the types taken on each input port."""
        return []

    def output_types(self) -> list[str]:
        """Names of the types produced on each output port."""
        return []

    def reset(self) -> None:
        """Hook called to reset after an end of stream; nothing by default."""
        return None


class FunctionNode(Node):
    """Takes one object and produces one object."""

    input_type: ClassVar[Any] = object
    output_type: ClassVar[Any] = object

    def category(self) -> NodeCategory:
        return NodeCategory.FUNCTION

    def signature(self) -> str:
        return f"FunctionNode[{_type_name(self.input_type)}, {_type_name(self.output_type)}]"

    def concurrency(self) -> int:
        return 0

    def input_types(self) -> list[str]:
        return [_type_name(self.input_type)]

    def output_types(self) -> list[str]:
        return [_type_name(self.output_type)]

    @abc.abstractmethod
    def __call__(self, item: Any) -> Any:
        """Transform ``item`` into the output object."""


class SourceNode(Node):
    """Produces one object per call."""

    output_type: ClassVar[Any] = object

    def category(self) -> NodeCategory:
        return NodeCategory.SOURCE

    def signature(self) -> str:
        return f"SourceNode[{_type_name(self.output_type)}]"

    def output_types(self) -> list[str]:
        return [_type_name(self.output_type)]

    @abc.abstractmethod
    def __call__(self) -> Any:
        """Produce the next object, or ``None`` at the end of the stream."""


class SinkNode(Node):
    """Consumes one object per call."""

    input_type: ClassVar[Any] = object

    def category(self) -> NodeCategory:
        return NodeCategory.SINK

    def input_types(self) -> list[str]:
        return [_type_name(self.input_type)]

    @abc.abstractmethod
    def __call__(self, item: Any) -> None:
        """Consume ``item``."""


class QueuedoutNode(Node):
    """Takes one object and produces zero or more; usually keeps state."""

    input_type: ClassVar[Any] = object
    output_type: ClassVar[Any] = object

    def category(self) -> NodeCategory:
        return NodeCategory.QUEUEDOUT

    def input_types(self) -> list[str]:
        return [_type_name(self.input_type)]

    def output_types(self) -> list[str]:
        return [_type_name(self.output_type)]

    @abc.abstractmethod
    def __call__(self, item: Any) -> deque:
        """Consume ``item`` and return a queue of any outputs now ready."""


class FaninNode(Node):
    """Takes one object from each of several ports of a common type."""

    input_type: ClassVar[Any] = object
    output_type: ClassVar[Any] = object
    multiplicity: ClassVar[int] = 3

    def category(self) -> NodeCategory:
        return NodeCategory.FANIN

    def concurrency(self) -> int:
        return 0

    def input_types(self) -> list[str]:
        return [_type_name(self.input_type)] * self.multiplicity

    def output_types(self) -> list[str]:
        return [_type_name(self.output_type)]

    @abc.abstractmethod
    def __call__(self, items: Sequence[Any]) -> Any:
        """Combine one object per input port into one output."""


class FanoutNode(Node):
    """Takes one object and produces one object on each of several ports."""

    input_type: ClassVar[Any] = object
    output_type: ClassVar[Any] = object
    multiplicity: ClassVar[int] = 3

    def category(self) -> NodeCategory:
        return NodeCategory.FANOUT

    def concurrency(self) -> int:
        return 0

    def input_types(self) -> list[str]:
        return [_type_name(self.input_type)]

    def output_types(self) -> list[str]:
        return [_type_name(self.output_type)] * self.multiplicity

    @abc.abstractmethod
    def __call__(self, item: Any) -> list:
        """Return one output per port, as many as ``output_types()`` names."""


class SplitNode(Node):
    """Takes one object and produces a tuple of objects of distinct types."""

    input_type: ClassVar[Any] = object
    output_tuple: ClassVar[tuple] = ()

    def category(self) -> NodeCategory:
        return NodeCategory.SPLIT

    def concurrency(self) -> int:
        return 0

    def input_types(self) -> list[str]:
        return [_type_name(self.input_type)]

    def output_types(self) -> list[str]:
        return _type_names(self.output_tuple)

    @abc.abstractmethod
    def __call__(self, item: Any) -> tuple:
        """Return one output per port of ``output_tuple``."""


class JoinNode(Node):
    """Takes a tuple of objects of distinct types arriving together."""

    input_tuple: ClassVar[tuple] = ()
    output_type: ClassVar[Any] = object

    def category(self) -> NodeCategory:
        return NodeCategory.JOIN

    def concurrency(self) -> int:
        return 0

    def input_types(self) -> list[str]:
        return _type_names(self.input_tuple)

    def output_types(self) -> list[str]:
        return [_type_name(self.output_type)]

    @abc.abstractmethod
    def __call__(self, items: tuple) -> Optional[Any]:
        """Combine one object per port of ``input_tuple`` into one output."""


class HydraNode(Node):
    """Has several typed input queues and several typed output queues.

    Items left in the input queues remain for a later call.
    """

    input_tuple: ClassVar[tuple] = ()
    output_tuple: ClassVar[tuple] = ()

    def category(self) -> NodeCategory:
        return NodeCategory.HYDRA

    def concurrency(self) -> int:
        return 0

    def input_types(self) -> list[str]:
        return _type_names(self.input_tuple)

    def output_types(self) -> list[str]:
        return _type_names(self.output_tuple)

    @abc.abstractmethod
    def __call__(self, input_queues: Sequence[deque], output_queues: Sequence[deque]) -> None:
        """Consume from the input queues and append to the output queues in place."""
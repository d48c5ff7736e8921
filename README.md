# wireface

Data interfaces for wire-chamber detector simulation and reconstruction.
The package describes the objects that flow through a processing chain:
wire planes, charge depositions, traces and frames. It also has tools to
work with frames and abstract base classes for data-flow graph nodes.

## Modules

### `wireface.wireplaneid`

- `Layer` is an `IntFlag` with the members `UNKNOWN` (0), `U` (1), `V` (2)
  and `W` (4). Its `str()` is `<U>`, `<V>`, `<W>` or `<?>`.
- `layer_from_index(index)` maps a plane index 0, 1 or 2 to `Layer.U`,
  `Layer.V` or `Layer.W`. Any other index raises `IndexError`.
- `WirePlaneId(layer, face=0, apa=0)` packs a layer, an anode face and an
  APA number into one integer.
  - Its properties are `ident`, `layer`, `ilayer`, `index`, `face`, `apa`
    and `valid`. `index` is -1 for an unknown layer, and `valid` is true
    only for U, V and W.
  - `WirePlaneId.from_packed(packed)` wraps a packed integer as given.
  - `WirePlaneId.from_config([plane_index, face, apa])` builds an id from
    a configuration list. Face and APA default to 0, and a missing plane
    index raises `ValueError`.
  - Ids compare equal by their packed value and are hashable.
  - `<` orders valid ids by APA, then face, then index. If either id is
    invalid, `<` is false.

### `wireface.wires`

- `Wire(planeid, ident, index, channel, ray, segment=0)` is a frozen wire
  segment. `ray` is a pair of 3D points, and `center` gives their midpoint.
- `ascending_index(lhs, rhs)` tells whether `lhs` comes before `rhs` by
  index. It is true only for wires in the same plane.
- `ident_key`, `index_key` and `segment_key` are sort keys. Ties are
  broken by object identity.
- `Channel(ident=-1, index=-1, wires=())` keeps its wires sorted by
  segment, also after `add(wire)`.
- `WirePlane(ident, wires=(), channels=())` holds the wires and channels
  of one plane.
- Both `Channel` and `WirePlane` have `planeid`, the plane of their first
  wire. With no wires it is an id with an unknown layer, face -1 and APA -1.
- `WirePlaneSelector(layers, face=0, apa=0)` is a callable predicate on
  wires. A `layers` value of 0 accepts any layer. A negative face or APA
  accepts any face or APA.
- Ready-made selectors for face 0, APA 0: `select_u_wires`,
  `select_v_wires`, `select_w_wires`, the tuple `select_uvw_wires` and
  `select_all_wires`.

### `wireface.depos`

- `Depo(time, pos, charge=1.0, prior=None, extent_long=0.0, extent_tran=0.0, id=0, pdg=0, energy=1.0)`
  is a frozen charge deposition.
- `depo_chain(recent)` lists a depo followed by each of its `prior`s.
- `drift_key(drift_speed)` returns a sort key on `time + x / drift_speed`.
  The default speed is 1.6 mm/µs in units where mm = 1 and µs = 1000. A
  speed of zero raises `ValueError`.
- `ascending_time(lhs, rhs)` and `descending_time(lhs, rhs)` compare two
  depos by time. Equal times are broken by object identity.
- `DepoSet(ident, depos)` is an immutable, iterable collection of depos.
  It can also be built with `DepoSet.of(ident, iterable)`.
- `Diffusion` is an abstract base for a diffusion patch. A subclass
  supplies `depo`, `get`, `lsize`, `tsize`, `lpos` and `tpos`.
  - The base class derives `lbegin`, `tbegin`, `lend`, `tend`, `lbin` and
    `tbin` from them.
  - `diffusion_lbegin_key` sorts patches by `lbegin`.

### `wireface.frames`

- `Trace(channel, tbin, charge)` holds contiguous charge samples on one
  channel, starting at time bin `tbin`.
  - `Trace.zeros(channel, tbin, ncharges)` makes a trace of zero samples.
    A negative count raises `ValueError`.
- `Frame(ident, time, traces, tick=500.0, masks=None)` holds a tuple of
  traces. The default tick is 0.5 µs in units where µs = 1000.
  - `tag_frame(tag)` tags the whole frame. `frame_tags` lists these tags
    in the order they were given.
  - `tag_traces(tag, indices, summary=())` tags a subset of traces by
    index. Tagging with the same tag again replaces the earlier entry.
  - `trace_tags` lists the trace tags in sorted order.
  - `tagged_traces(tag)` and `trace_summary(tag)` return the indices and
    summary values for a tag. Both are empty for an unknown tag.

### `wireface.frametools`

- `untagged_traces(frame)` returns the traces that carry no trace tag.
- `tagged_traces(frame, tag)` selects traces by tag:
  - If the tag is a trace tag, it returns that tag's traces.
  - Otherwise, if the tag is a frame tag, it returns all traces.
  - Otherwise it returns an empty list.
  - The empty tag `""` selects the untagged traces.
- `channels(traces)` returns the channel of each trace, in order.
- `tbin_range(traces)` returns `(min tbin, max tbin + len(charge))`. It
  raises `ValueError` when there are no traces.
- `fill(array, traces, channels, tbin=0)` adds charge into a 2D numpy
  array in place.
  - Row `i` holds the channel `channels[i]`, and column 0 is time bin
    `tbin`.
  - Unlisted channels and samples outside the array are ignored.
  - An array that is not 2D raises `ValueError`.
- `frmtcmp(frame, time)` compares the frame's time span with `time`. It
  returns -1 if the span lies wholly before the time, +1 if it lies
  wholly after, and 0 if it covers the time. A span edge exactly at the
  time does not count as covering it.
- `split(frame, time)` cuts a frame into the samples before the time and
  those at or after it. A frame that does not span the time comes back
  whole in one half, with `None` in the other.

### `wireface.nodes`

`NodeCategory` is an enum of the node kinds. `Node` is the abstract base
class for all nodes, and it has:

- `category()`
- `signature()`
- `concurrency()`
- `input_types()`
- `output_types()`
- `reset()`

The abstract subclasses below describe their ports through class
attributes such as `input_type`, `output_type`, `multiplicity`,
`input_tuple` and `output_tuple`. A concrete node implements `__call__`.

- `FunctionNode`: one object in, one object out.
- `SourceNode`: no input, one object out on each call, or `None` at the
  end of the stream.
- `SinkNode`: one object in, nothing out.
- `QueuedoutNode`: one object in, a `deque` of zero or more objects out.
- `FaninNode`: a sequence of objects in, one object out.
- `FanoutNode`: one object in, a list with one object per output port out.
- `SplitNode`: one object in, a tuple with one object per output port out.
- `JoinNode`: a tuple of objects in, one object out.
- `HydraNode`: consumes from input queues and appends to output queues in
  place.

## Example

```python
import numpy as np

from wireface.frames import Frame, Trace
from wireface.frametools import channels, fill, split, tbin_range
from wireface.wireplaneid import Layer, WirePlaneId

wpid = WirePlaneId(Layer.V, face=1, apa=2)
print(wpid.index, wpid.face, wpid.apa)   # 1 1 2

traces = [Trace(1, 0, [1.0, 2.0, 3.0]), Trace(2, 2, [4.0, 5.0])]
frame = Frame(0, 0.0, traces, tick=0.5)

lo, hi = tbin_range(traces)              # (0, 4)
array = np.zeros((2, hi - lo), dtype=np.float32)
fill(array, traces, channels(traces), lo)

before, after = split(frame, 1.0)        # cut at time bin 2
```

## What the package does not do

This package defines data types, frame tools and abstract node classes
only. It does not have:

- concrete processing nodes, such as drifters, diffusion models or noise
  filters;
- anything that connects nodes into a graph and runs it;
- detector geometry loaders or file readers and writers;
- a command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```
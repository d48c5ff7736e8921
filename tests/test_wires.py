import pytest

from wireface.wireplaneid import Layer, WirePlaneId
from wireface.wires import (
    Channel,
    Wire,
    WirePlane,
    WirePlaneSelector,
    ascending_index,
    ident_key,
    index_key,
    segment_key,
    select_all_wires,
    select_u_wires,
    select_uvw_wires,
    select_w_wires,
)

RAY = ((0.0, 0.0, 0.0), (0.0, 2.0, 4.0))


def make_wire(layer, index, ray=RAY, segment=0, face=0, apa=0):
    wpid = WirePlaneId(layer, face, apa)
    ident = (1 + wpid.index) * 100000 + index
    return Wire(wpid, ident, index, ident, ray, segment)


def test_mywire_style_ident():
    wire = make_wire(Layer.V, 7)
    assert wire.ident == 200007
    assert wire.channel == 200007
    assert wire.planeid == WirePlaneId(Layer.V)
    assert wire.segment == 0


def test_center():
    wire = make_wire(Layer.U, 0, ray=((1.0, 2.0, 3.0), (3.0, 6.0, -3.0)))
    assert wire.center == pytest.approx((2.0, 4.0, 0.0))


def test_ascending_index_same_plane():
    a, b = make_wire(Layer.U, 1), make_wire(Layer.U, 2)
    assert ascending_index(a, b)
    assert not ascending_index(b, a)


def test_ascending_index_different_planes_unordered():
    a, b = make_wire(Layer.U, 1), make_wire(Layer.V, 2)
    assert not ascending_index(a, b)
    assert not ascending_index(b, a)


def test_sort_keys():
    wires = [make_wire(Layer.W, i, segment=s) for i, s in [(3, 0), (1, 2), (2, 1)]]
    assert [w.index for w in sorted(wires, key=index_key)] == [1, 2, 3]
    assert [w.segment for w in sorted(wires, key=segment_key)] == [0, 1, 2]
    assert [w.ident for w in sorted(wires, key=ident_key)] == [300001, 300002, 300003]


def test_sort_key_tie_keeps_distinct_wires():
    a, b = make_wire(Layer.U, 1), make_wire(Layer.U, 1)
    assert ident_key(a) != ident_key(b)
    assert len({id(w) for w in sorted([a, b], key=ident_key)}) == 2


def test_channel_sorts_wires_by_segment():
    w2 = make_wire(Layer.U, 5, segment=2)
    w0 = make_wire(Layer.U, 5, segment=0)
    w1 = make_wire(Layer.U, 5, segment=1)
    chan = Channel(100005, 3, [w2, w0])
    assert [w.segment for w in chan.wires] == [0, 2]
    chan.add(w1)
    assert [w.segment for w in chan.wires] == [0, 1, 2]
    assert chan.ident == 100005
    assert chan.index == 3


def test_channel_set_index():
    chan = Channel(1)
    chan.index = 9
    assert chan.index == 9


def test_channel_planeid():
    chan = Channel(1, 0, [make_wire(Layer.W, 0, face=1, apa=2)])
    assert chan.planeid == WirePlaneId(Layer.W, 1, 2)


def test_empty_channel_planeid_is_bogus():
    planeid = Channel().planeid
    assert not planeid.valid
    assert planeid == WirePlaneId(Layer.UNKNOWN, -1, -1)


def test_wireplane_planeid():
    wires = (make_wire(Layer.V, 0, apa=1), make_wire(Layer.V, 1, apa=1))
    plane = WirePlane(4, wires)
    assert plane.planeid == WirePlaneId(Layer.V, 0, 1)
    assert not WirePlane(0).planeid.valid


def test_selectors_by_layer():
    u, v, w = make_wire(Layer.U, 0), make_wire(Layer.V, 0), make_wire(Layer.W, 0)
    assert [select_u_wires(x) for x in (u, v, w)] == [True, False, False]
    assert [select_w_wires(x) for x in (u, v, w)] == [False, False, True]
    assert [sel(v) for sel in select_uvw_wires] == [False, True, False]
    assert all(select_all_wires(x) for x in (u, v, w))


def test_selector_face_and_apa():
    wire = make_wire(Layer.U, 0, face=1, apa=2)
    assert not select_u_wires(wire)
    assert WirePlaneSelector(Layer.U, 1, 2)(wire)
    assert WirePlaneSelector(Layer.U, -1, -1)(wire)
    assert not WirePlaneSelector(Layer.U, 0, -1)(wire)


def test_selector_zero_layers_matches_any_layer():
    assert WirePlaneSelector(0)(make_wire(Layer.V, 3))
    assert WirePlaneSelector(0)(make_wire(Layer.UNKNOWN, 3))
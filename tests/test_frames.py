import pytest

from wireface.frames import DEFAULT_TICK, Frame, Trace


def _traces():
    return [Trace(1, 0, [1, 2, 3]), Trace(2, 5, [4.0]), Trace(3, 2, [])]


def test_trace_converts_charge_to_floats():
    t = Trace(7, 3, [1, 2])
    assert t.channel == 7
    assert t.tbin == 3
    assert t.charge == [1.0, 2.0]
    assert all(isinstance(q, float) for q in t.charge)


def test_trace_zeros():
    t = Trace.zeros(4, 10, 5)
    assert (t.channel, t.tbin) == (4, 10)
    assert t.charge == [0.0] * 5
    assert len(t) == 5


def test_trace_zeros_negative_rejected():
    with pytest.raises(ValueError):
        Trace.zeros(1, 0, -1)


def test_trace_charge_is_mutable():
    t = Trace.zeros(1, 0, 3)
    t.charge[1] += 2.5
    assert t.charge == [0.0, 2.5, 0.0]


def test_frame_basic_attributes_and_default_tick():
    traces = _traces()
    f = Frame(3, 1.5, traces)
    assert f.ident == 3
    assert f.time == 1.5
    assert f.tick == DEFAULT_TICK
    assert f.tick == 500.0
    assert f.traces == tuple(traces)
    assert f.masks == {}


def test_frame_holds_copy_of_traces():
    traces = _traces()
    f = Frame(0, 0.0, traces, tick=2.0)
    traces.append(Trace(9, 0, [1.0]))
    assert len(f.traces) == 3
    assert f.tick == 2.0


def test_frame_masks_kept():
    masks = {"bad": {5: [(0, 10)]}}
    f = Frame(0, 0.0, [], masks=masks)
    assert f.masks == masks


def test_frame_tags_in_order():
    f = Frame(0, 0.0, _traces())
    assert f.frame_tags == ()
    f.tag_frame("raw")
    f.tag_frame("orig")
    assert f.frame_tags == ("raw", "orig")


def test_tag_traces_and_lookup():
    f = Frame(0, 0.0, _traces())
    f.tag_traces("wiener", [0, 2], [0.5, 1.5])
    f.tag_traces("gauss", [1])
    assert f.trace_tags == ("gauss", "wiener")
    assert f.tagged_traces("wiener") == (0, 2)
    assert f.trace_summary("wiener") == (0.5, 1.5)
    assert f.tagged_traces("gauss") == (1,)
    assert f.trace_summary("gauss") == ()


def test_unknown_tag_gives_empty():
    f = Frame(0, 0.0, _traces())
    assert f.tagged_traces("missing") == ()
    assert f.trace_summary("missing") == ()


def test_retagging_replaces():
    f = Frame(0, 0.0, _traces())
    f.tag_traces("x", [0, 1], [1.0, 2.0])
    f.tag_traces("x", [2])
    assert f.trace_tags == ("x",)
    assert f.tagged_traces("x") == (2,)
    assert f.trace_summary("x") == ()
    assert f.frame_tags == ()
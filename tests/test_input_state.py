"""Tests for the input state and its snapshots."""
from laser_strike.input_state import InputState


class TestInputState:

    def test_key_names_are_case_insensitive(self):
        state = InputState()
        state.press("ArrowUp")
        snap = state.snapshot()
        assert snap.up and not snap.down

    def test_wasd_and_arrows_share_directions(self):
        state = InputState()
        state.press("a")
        state.press("arrowright")
        snap = state.snapshot()
        assert snap.left and snap.right

    def test_release(self):
        state = InputState()
        state.press("s")
        state.release("S")
        assert not state.snapshot().down

    def test_snapshot_is_isolated_from_later_writes(self):
        state = InputState()
        state.set_pointer(10, 20)
        snap = state.snapshot()
        state.press("w")
        state.set_pointer(30, 40)
        state.dragging = True
        assert snap.pointer == (10.0, 20.0)
        assert not snap.up
        assert not snap.dragging

    def test_clear_drops_keys_and_drag(self):
        state = InputState()
        state.press("d")
        state.dragging = True
        state.clear()
        snap = state.snapshot()
        assert not snap.right
        assert not snap.dragging

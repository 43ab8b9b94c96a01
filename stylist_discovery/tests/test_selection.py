from __future__ import annotations

from stylist_discovery.candidates.models import Candidate
from stylist_discovery.placement.selection import SelectionState


def _candidates(*ids: str) -> list[Candidate]:
    return [Candidate(id=i, name=i) for i in ids]


def test_initial_state_is_empty():
    assert SelectionState(_candidates("a")).selected is None


def test_select_known_id():
    state = SelectionState(_candidates("a", "b"))
    assert state.select("a") is True
    assert state.selected == "a"


def test_select_unknown_id_is_noop():
    state = SelectionState(_candidates("a"))
    state.select("a")
    assert state.select("zzz") is False
    assert state.selected == "a"


def test_reselect_keeps_selection():
    state = SelectionState(_candidates("a"))
    state.select("a")
    assert state.select("a") is False
    assert state.selected == "a"


def test_select_other_overwrites():
    state = SelectionState(_candidates("a", "b"))
    state.select("a")
    state.select("b")
    assert state.selected == "b"


def test_clear_resets():
    state = SelectionState(_candidates("a"))
    state.select("a")
    state.clear()
    assert state.selected is None


def test_sync_drops_selection_that_left_the_list():
    state = SelectionState(_candidates("a", "b"))
    state.select("b")
    state.sync(_candidates("a", "b", "c"))
    assert state.selected == "b"
    state.sync(_candidates("a"))
    assert state.selected is None
    assert state.select("c") is False


def test_instances_are_independent():
    cands = _candidates("a", "b")
    left, right = SelectionState(cands), SelectionState(cands)
    left.select("a")
    assert right.selected is None

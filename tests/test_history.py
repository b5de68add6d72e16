import pytest
from undoable import Undoable, push_present, reset, clear_history
from undoable import history


def test_reset_starts_empty():
    assert reset(0) == Undoable(past=(), present=0, future=())


def test_push_present_moves_present_to_past_and_clears_future():
    h = Undoable(past=(0,), present=1, future=(2, 3))
    out = push_present(h, 5)
    assert out == Undoable(past=(0, 1), present=5, future=())
    # input untouched
    assert h == Undoable(past=(0,), present=1, future=(2, 3))


def test_push_present_evicts_oldest():
    h = Undoable(past=(0, 1), present=2)
    assert push_present(h, 3, limit_past=2).past == (1, 2)
    assert push_present(h, 3, limit_past=0).past == ()


def test_undo_at_start_is_noop():
    h = Undoable(past=(), present=4, future=(5,))
    assert history.undo(h) == h
    assert history.undo(history.undo(h)) == h


def test_redo_at_end_is_noop():
    h = Undoable(past=(1, 2), present=3, future=())
    assert history.redo(h) == h


def test_undo_moves_latest_past_to_present():
    h = Undoable(past=(0, 1), present=2, future=(3,))
    assert history.undo(h) == Undoable(past=(0,), present=1, future=(2, 3))


def test_undo_future_limit_drops_oldest_redo_candidate():
    h = Undoable(past=(0, 1), present=2, future=(3, 4))
    out = history.undo(h, limit_future=2)
    assert out.future == (2, 3)
    assert history.undo(h, limit_future=0).future == ()


def test_redo_past_limit_drops_oldest():
    h = Undoable(past=(0, 1), present=2, future=(3, 4))
    out = history.redo(h, limit_past=2)
    assert out == Undoable(past=(1, 2), present=3, future=(4,))


def test_negative_limits_behave_like_zero():
    h = Undoable(past=(0,), present=1, future=(2,))
    assert push_present(h, 9, limit_past=-1).past == ()
    assert history.undo(h, limit_future=-5).future == ()


@pytest.mark.parametrize("h", [
    Undoable(past=(0,), present=1),
    Undoable(past=(0, 1, 2), present=3, future=(4, 5)),
])
def test_redo_after_undo_restores(h):
    assert history.redo(history.undo(h)) == h


@pytest.mark.parametrize("h", [
    Undoable(present=1, future=(2,)),
    Undoable(past=(0,), present=1, future=(2, 3)),
])
def test_undo_after_redo_restores(h):
    assert history.undo(history.redo(h)) == h


def test_clear_history_keeps_present():
    h = Undoable(past=(0, 1), present=2, future=(3,))
    assert clear_history(h) == Undoable(present=2)
    empty = Undoable(present=7)
    assert clear_history(empty) is empty


def test_lists_are_stored_as_tuples():
    h = Undoable(past=[0, 1], present=2, future=[3])
    assert h.past == (0, 1) and h.future == (3,)
    assert h.can_undo and h.can_redo
    assert not Undoable(present=0).can_undo

import threading

import pytest
import counter
from undoable import Action, Store, Undoable, undoable_reducer


def test_store_dispatch_undo_redo(store):
    assert store.state == Undoable(present=0)
    assert not store.can_undo and not store.can_redo

    store.dispatch(counter.increment())
    store.dispatch(counter.increment())
    assert store.present == 2

    store.undo()
    assert store.present == 1
    assert store.can_undo and store.can_redo

    store.redo()
    assert store.present == 2
    assert not store.can_redo

    store.init()
    assert store.state == Undoable(present=0)


def test_store_accepts_existing_history(reducer):
    st = Store(reducer, state=Undoable(past=(1,), present=2))
    st.undo()
    assert st.state == Undoable(present=1, future=(2,))


def test_subscribers_only_see_changes(store):
    seen = []
    unsubscribe = store.subscribe(seen.append)

    store.dispatch(counter.increment())
    store.undo()
    store.undo()                   # no-op, same value
    store.dispatch(Action("NOPE"))  # comparator says unchanged
    assert [s.present for s in seen] == [1, 0]

    unsubscribe()
    store.dispatch(counter.increment())
    assert len(seen) == 2


def test_failed_dispatch_keeps_previous_state():
    def base(state=None, action=None):
        if action.type == "BOOM":
            raise ValueError("bad action")
        return 0

    st = Store(undoable_reducer(base, Action("INIT")))
    before = st.state
    with pytest.raises(ValueError):
        st.dispatch(Action("BOOM"))
    assert st.state is before


def test_clear_history(store):
    store.dispatch(counter.increment())
    store.dispatch(counter.increment())
    store.undo()
    store.clear_history()
    assert store.state == Undoable(present=1)


def test_concurrent_dispatches_are_serialized(store):
    seen = []
    returned = []
    store.subscribe(lambda s: seen.append(s.present))

    def worker():
        for _ in range(200):
            returned.append(store.dispatch(counter.increment()).present)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert store.present == 800
    assert len(store.state.past) == 800
    # every dispatch notifies and returns its own result exactly once
    assert sorted(seen) == list(range(1, 801))
    assert sorted(returned) == list(range(1, 801))


def test_clear_history_notifies_with_its_own_result(store):
    seen = []
    store.dispatch(counter.increment())
    store.subscribe(seen.append)
    out = store.clear_history()
    assert seen == [out]
    assert out == Undoable(present=1)

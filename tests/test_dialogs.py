import pytest

from ramen_console import dialogs


def test_happy_path_returns_to_idle():
    calls = []

    def action(draft, editing_id):
        calls.append((draft, editing_id))
        return True, ""

    state = dialogs.open_new({"name": "", "value": ""})
    state = dialogs.revise(state, name="Corn", value="1")
    assert dialogs.submit(state, action) == dialogs.Idle()
    assert calls == [({"name": "Corn", "value": "1"}, None)]


def test_failure_keeps_draft_and_message():
    state = dialogs.open_edit("k1", {"name": "Corn"})
    state = dialogs.submit(state, lambda d, k: (False, "Failed to update add-on"))
    assert isinstance(state, dialogs.ShowingError)
    assert state.message == "Failed to update add-on"
    assert state.editing_id == "k1"
    assert dict(state.draft) == {"name": "Corn"}


def test_revise_after_error_clears_message():
    state = dialogs.ShowingError(draft=dialogs._freeze({"name": "x"}), message="boom")
    revised = dialogs.revise(state, name="y")
    assert isinstance(revised, dialogs.Composing)
    assert dict(revised.draft) == {"name": "y"}


def test_drafts_are_read_only():
    state = dialogs.open_new({"name": ""})
    with pytest.raises(TypeError):
        state.draft["name"] = "changed"


def test_revise_leaves_previous_draft_alone():
    first = dialogs.open_new({"name": "a"})
    second = dialogs.revise(first, name="b")
    assert first.draft["name"] == "a"
    assert second.draft["name"] == "b"


def test_invalid_transitions():
    with pytest.raises(dialogs.InvalidTransition):
        dialogs.revise(dialogs.Idle(), name="x")
    with pytest.raises(dialogs.InvalidTransition):
        dialogs.begin_submit(dialogs.Idle())
    with pytest.raises(dialogs.InvalidTransition):
        dialogs.finish(dialogs.open_new({}), True)


def test_close_from_any_state():
    assert dialogs.close(dialogs.open_new({})) == dialogs.Idle()
    assert not dialogs.is_open(dialogs.close(dialogs.Idle()))


@pytest.mark.parametrize("state", [
    dialogs.Idle(),
    dialogs.open_new({"name": "Nori"}),
    dialogs.open_edit("k", {"status": "Completed"}),
    dialogs.ShowingError(draft=dialogs._freeze({"name": "x"}), editing_id="k", message="boom"),
])
def test_store_round_trip(state):
    assert dialogs.restore(dialogs.dump(state)) == state


def test_restore_empty_is_idle():
    assert dialogs.restore(None) == dialogs.Idle()
    assert dialogs.restore({"state": "Bogus"}) == dialogs.Idle()

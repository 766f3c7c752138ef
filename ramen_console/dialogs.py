"""
dialogs.py — Create/edit dialog state.

    Idle → Composing(draft) → Submitting → Idle
                                         → ShowingError(draft) → Composing ...

States are immutable; every edit produces a new state with a new draft.
`dump`/`restore` turn a state into plain data for a dcc.Store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping


def _freeze(draft) -> Mapping:
    return MappingProxyType(dict(draft or {}))


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Composing:
    draft: Mapping = field(default_factory=lambda: _freeze({}))
    editing_id: str | None = None


@dataclass(frozen=True)
class Submitting:
    draft: Mapping
    editing_id: str | None = None


@dataclass(frozen=True)
class ShowingError:
    draft: Mapping
    editing_id: str | None = None
    message: str = ""


DialogState = Idle | Composing | Submitting | ShowingError

# (draft, editing_id) -> (ok, message)
SubmitAction = Callable[[dict, str | None], tuple[bool, str]]


class InvalidTransition(Exception):
    pass


def open_new(defaults: Mapping) -> Composing:
    return Composing(draft=_freeze(defaults))


def open_edit(key: str, fields: Mapping) -> Composing:
    return Composing(draft=_freeze(fields), editing_id=key)


def revise(state: DialogState, **changes) -> Composing:
    """New draft with `changes` applied; clears any shown error."""
    if not isinstance(state, (Composing, ShowingError)):
        raise InvalidTransition(f"cannot edit a draft while {type(state).__name__}")
    return Composing(draft=_freeze({**state.draft, **changes}), editing_id=state.editing_id)


def begin_submit(state: DialogState) -> Submitting:
    if not isinstance(state, (Composing, ShowingError)):
        raise InvalidTransition(f"nothing to submit while {type(state).__name__}")
    return Submitting(draft=state.draft, editing_id=state.editing_id)


def finish(state: Submitting, ok: bool, message: str = "") -> Idle | ShowingError:
    if not isinstance(state, Submitting):
        raise InvalidTransition(f"not submitting ({type(state).__name__})")
    if ok:
        return Idle()
    return ShowingError(draft=state.draft, editing_id=state.editing_id, message=message)


def submit(state: DialogState, action: SubmitAction) -> Idle | ShowingError:
    pending = begin_submit(state)
    ok, message = action(dict(pending.draft), pending.editing_id)
    return finish(pending, ok, message)


def close(state: DialogState) -> Idle:
    return Idle()


def is_open(state: DialogState) -> bool:
    return not isinstance(state, Idle)


# ── dcc.Store round trip ─────────────────────────────────────────────────────

_NAMES = {cls.__name__: cls for cls in (Idle, Composing, Submitting, ShowingError)}


def dump(state: DialogState) -> dict:
    data = {"state": type(state).__name__}
    if not isinstance(state, Idle):
        data["draft"] = dict(state.draft)
        data["editing_id"] = state.editing_id
    if isinstance(state, ShowingError):
        data["message"] = state.message
    return data


def restore(data) -> DialogState:
    if not data:
        return Idle()
    cls = _NAMES.get(data.get("state"), Idle)
    if cls is Idle:
        return Idle()
    kwargs = {"draft": _freeze(data.get("draft")), "editing_id": data.get("editing_id")}
    if cls is ShowingError:
        kwargs["message"] = data.get("message", "")
    return cls(**kwargs)

from dataclasses import dataclass, replace
from typing import List, Tuple

import input_controller as ic
from viewport import ViewportResult, select


RUNNING = "running"
CONFIRMED = "confirmed"
CANCELLED = "cancelled"


@dataclass(frozen=True)
class MenuState:
    selected: int = 0
    scroll: int = 0
    phase: str = RUNNING

    @property
    def done(self) -> bool:
        return self.phase != RUNNING


# ---- effects handed back to the orchestrator ----


@dataclass(frozen=True)
class EnsureCapacity:
    past_index: int


@dataclass(frozen=True)
class ExpandItem:
    index: int


@dataclass(frozen=True)
class CollapseItem:
    index: int


@dataclass(frozen=True)
class ToggleItem:
    index: int


def transition(
    state: MenuState, intent: ic.Intent, total: int, frame: ViewportResult
) -> Tuple[MenuState, List[object]]:
    """
    Apply one intent. `frame` is the layout the user was looking at when the
    key was pressed; scrolling decisions are made against it.
    """
    if state.done:
        return state, []

    kind = intent.kind
    if kind == ic.MOVE:
        nxt = state.selected + intent.delta
        if 0 <= nxt < total:
            scroll = select(state.scroll, nxt, frame.visible_indices)
            return replace(state, selected=nxt, scroll=scroll), [EnsureCapacity(nxt)]
        if nxt >= total and total > 0:
            # bottom of what's loaded; ask for more, stay put
            return state, [EnsureCapacity(state.selected)]
        return state, []

    if total == 0:
        if kind == ic.QUIT:
            return replace(state, phase=CANCELLED), []
        return state, []

    if kind == ic.EXPAND:
        return state, [ExpandItem(state.selected)]
    if kind == ic.COLLAPSE:
        return state, [CollapseItem(state.selected)]
    if kind == ic.TOGGLE:
        return state, [ToggleItem(state.selected)]
    if kind == ic.CONFIRM:
        return replace(state, phase=CONFIRMED), []
    if kind == ic.QUIT:
        return replace(state, phase=CANCELLED), []
    return state, []

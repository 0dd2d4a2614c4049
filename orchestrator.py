import time
from dataclasses import replace

import input_controller as ic
from app_state import (
    CONFIRMED,
    CollapseItem,
    EnsureCapacity,
    ExpandItem,
    MenuState,
    ToggleItem,
    transition,
)
from commit_pane import CommitPane
from screen_layout import ScreenLayout
from status_bar import render_status
from viewport import ViewportResult, reveal


class Orchestrator:
    def __init__(self, term, commits, expansion, page_size=None):
        self.term = term
        self.commits = commits
        self.expansion = expansion
        self.page_size = page_size

        self.pane = CommitPane()
        self.layout = None
        self.state = MenuState()
        self.frame = ViewportResult()

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _page_size(self):
        if self.page_size:
            return self.page_size
        list_h = self.layout.list_h if self.layout is not None else 0
        return max(1, list_h)

    def _collect_errors(self):
        if self.commits.last_error:
            self._set_status(f"History incomplete: {self.commits.last_error}", 5)
            self.commits.last_error = None
        if self.expansion.last_error:
            self._set_status("No description available", 3)
            self.expansion.last_error = None

    # ---------------- UI ----------------

    def redraw(self):
        self.layout = ScreenLayout(self.term.window)
        scroll, self.frame = reveal(
            len(self.commits),
            self.expansion.height,
            self.layout.list_h,
            self.state.scroll,
            self.state.selected,
        )
        if scroll != self.state.scroll:
            self.state = replace(self.state, scroll=scroll)

        rows = self.pane.build_rows(
            self.commits,
            self.frame,
            self.state.selected,
            self.expansion,
            self.layout.list_h,
        )
        status = render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "selected": self.state.selected,
                "loaded": len(self.commits),
                "exhausted": self.commits.exhausted,
            },
            self.layout.W,
        )
        self.pane.draw(self.term.window, self.layout, rows, status)

    # ---------------- state ----------------

    def _apply(self, effects):
        grown = 0
        for effect in effects:
            if isinstance(effect, EnsureCapacity):
                grown += self.commits.ensure_capacity(effect.past_index, self._page_size())
            elif isinstance(effect, ExpandItem):
                self.expansion.expand(effect.index)
            elif isinstance(effect, CollapseItem):
                self.expansion.collapse(effect.index)
            elif isinstance(effect, ToggleItem):
                self.expansion.toggle(effect.index)
        self._collect_errors()
        return grown

    def dispatch(self, intent):
        before = self.state
        self.state, effects = transition(before, intent, len(self.commits), self.frame)
        grown = self._apply(effects)

        # a press past the loaded bottom fetched more; let it land
        if intent.kind == ic.MOVE and self.state == before and grown:
            # lay out again so the new rows count as on screen
            list_h = self.layout.list_h if self.layout is not None else 0
            _, self.frame = reveal(
                len(self.commits),
                self.expansion.height,
                list_h,
                self.state.scroll,
                self.state.selected,
            )
            self.state, effects = transition(self.state, intent, len(self.commits), self.frame)
            self._apply(effects)

    # ---------------- main loop ----------------

    def run(self):
        self.term.clear()
        self.term.refresh()

        while not self.state.done:
            self.redraw()
            self.dispatch(ic.read_intent(self.term.read_key))

        if self.state.phase == CONFIRMED:
            return self.state.selected
        return None

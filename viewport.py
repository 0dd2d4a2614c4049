from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple


@dataclass(frozen=True)
class ViewportResult:
    visible_indices: Tuple[int, ...] = ()
    has_more_above: bool = False
    has_more_below: bool = False

    def __contains__(self, index):
        return index in self.visible_indices

    @property
    def last(self):
        return self.visible_indices[-1] if self.visible_indices else None


def _fit(total: int, height_fn: Callable[[int], int], scroll: int, budget: int) -> List[int]:
    visible: List[int] = []
    used = 0
    for idx in range(scroll, total):
        h = height_fn(idx)
        if used + h > budget:
            break
        visible.append(idx)
        used += h
    return visible


def compute_viewport(
    total: int,
    height_fn: Callable[[int], int],
    row_budget: int,
    scroll: int,
) -> ViewportResult:
    """
    Decide which items fit in `row_budget` rows starting at `scroll`.

    The "more above" indicator takes a row whenever scroll > 0. The "more
    below" indicator only takes one when the first pass shows the list
    continues, in which case the items are fitted again with one row less.
    An item taller than the whole budget is still shown on its own (clipped
    when drawn) so the cursor never lands on an invisible row.
    """
    has_more_above = scroll > 0
    if scroll >= total or row_budget <= 0:
        return ViewportResult((), has_more_above, False)

    base_budget = max(0, row_budget - (1 if has_more_above else 0))
    visible = _fit(total, height_fn, scroll, base_budget) or [scroll]

    has_more_below = visible[-1] + 1 < total
    if has_more_below:
        visible = _fit(total, height_fn, scroll, max(0, base_budget - 1)) or [scroll]

    return ViewportResult(tuple(visible), has_more_above, has_more_below)


def select(scroll: int, next_index: int, visible: Sequence[int]) -> int:
    """Scroll offset after the cursor moves to `next_index`."""
    if next_index < scroll:
        return next_index
    if next_index not in visible:
        was_top = scroll == 0
        scroll += 1
        if was_top:
            # the "more above" row is about to appear and take a slot
            scroll += 1
        return min(scroll, next_index)
    return scroll


def reveal(
    total: int,
    height_fn: Callable[[int], int],
    row_budget: int,
    scroll: int,
    selected: int,
) -> Tuple[int, ViewportResult]:
    """
    Recompute the frame for the current cursor, nudging `scroll` forward
    until `selected` is on screen. Covers rows lost to expansion or a
    smaller terminal since the previous frame.
    """
    scroll = max(0, min(scroll, selected))
    result = compute_viewport(total, height_fn, row_budget, scroll)
    while selected not in result and scroll < selected:
        scroll += 1
        result = compute_viewport(total, height_fn, row_budget, scroll)
    return scroll, result

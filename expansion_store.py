from typing import Callable, Dict, List, Optional, Set

from commit_source import FetchFailure


NO_DESCRIPTION = "(no description)"


def body_lines(message: str) -> List[str]:
    """
    Lines shown under an expanded commit: everything after the summary,
    minus the blank separator lines that usually follow it.
    """
    lines = (message or "").splitlines()[1:]
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1
    body = lines[start:]
    return body if body else [NO_DESCRIPTION]


class ExpansionStore:
    def __init__(self, message_fn: Callable[[int], str]):
        self.message_fn = message_fn
        self.expanded: Set[int] = set()
        self.bodies: Dict[int, List[str]] = {}
        self.last_error: Optional[str] = None

    def is_expanded(self, index: int) -> bool:
        return index in self.expanded

    def body(self, index: int) -> Optional[List[str]]:
        return self.bodies.get(index)

    def expand(self, index: int) -> None:
        self.expanded.add(index)
        if index in self.bodies:
            return
        try:
            message = self.message_fn(index)
        except FetchFailure as e:
            # stays expanded with nothing to show
            self.last_error = str(e)
            return
        self.bodies[index] = body_lines(message)

    def collapse(self, index: int) -> None:
        self.expanded.discard(index)

    def toggle(self, index: int) -> None:
        if index in self.expanded:
            self.collapse(index)
        else:
            self.expand(index)

    def height(self, index: int) -> int:
        if index not in self.expanded:
            return 1
        return 1 + len(self.bodies.get(index, ()))

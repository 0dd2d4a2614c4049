from typing import List, Optional

from commit_source import Commit, FetchFailure


class PagedList:
    """Append-only list of commits, grown from a source page by page."""

    def __init__(self, source):
        self.source = source
        self._items: List[Commit] = []
        self.exhausted = False
        self.last_error: Optional[str] = None

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self):
        return iter(self._items)

    @property
    def items(self) -> List[Commit]:
        return list(self._items)

    def grow(self, n: int) -> int:
        if self.exhausted or n <= 0:
            return 0
        try:
            page = self.source.fetch_page(n)
        except FetchFailure as e:
            self.exhausted = True
            self.last_error = str(e)
            return 0
        page = list(page)[:n]
        self._items.extend(page)
        if len(page) < n:
            self.exhausted = True
        return len(page)

    def ensure_capacity(self, past_index: int, page_size: int) -> int:
        if past_index + page_size >= len(self._items):
            return self.grow(page_size)
        return 0

import curses


class CommitPane:
    PAIR_HEADER = 1
    PAIR_ID = 2
    PAIR_BODY = 3
    PAIR_INDICATOR = 4

    HEADER_TEXT = "Select a commit  ↑/↓ move  →/← expand/collapse  Enter confirm  q quit"
    MORE_ABOVE = "  ↑ more commits above..."
    MORE_BELOW = "  ↓ more commits below..."
    BODY_INDENT = "    "

    def __init__(self):
        self.header_attr = 0
        self.id_attr = 0
        self.body_attr = 0
        self.indicator_attr = curses.A_DIM if hasattr(curses, "A_DIM") else 0
        self.status_attr = self.indicator_attr
        try:
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.PAIR_HEADER, curses.COLOR_YELLOW, -1)
            curses.init_pair(self.PAIR_ID, curses.COLOR_GREEN, -1)
            curses.init_pair(self.PAIR_BODY, curses.COLOR_WHITE, -1)
            curses.init_pair(self.PAIR_INDICATOR, curses.COLOR_WHITE, -1)
            self.header_attr = curses.color_pair(self.PAIR_HEADER)
            self.id_attr = curses.color_pair(self.PAIR_ID)
            self.body_attr = curses.color_pair(self.PAIR_BODY)
            self.indicator_attr |= curses.color_pair(self.PAIR_INDICATOR)
        except curses.error:
            pass

    # ---------- layout ----------
    def build_rows(self, items, frame, selected, expansion, height):
        """
        Styled rows for the list region: a list of rows, each a list of
        (text, attr) segments. Never returns more than `height` rows.

        Commit rows win over indicator rows when a tiny screen can't hold
        both; "more above" is dropped before "more below".
        """
        rows = []
        for idx in frame.visible_indices:
            commit = items[idx]
            if idx == selected:
                rev = curses.A_REVERSE
                rows.append(
                    [
                        ("> ", rev),
                        (commit.id, self.id_attr | rev),
                        (f" {commit.summary}", rev),
                    ]
                )
            else:
                rows.append(
                    [
                        ("  ", 0),
                        (commit.id, self.id_attr),
                        (f" {commit.summary}", 0),
                    ]
                )
            if expansion.is_expanded(idx):
                for line in expansion.body(idx) or []:
                    rows.append([(f"{self.BODY_INDENT}{line}", self.body_attr)])

        height = max(0, height)
        show_below = frame.has_more_below and len(rows) + 1 <= height
        show_above = frame.has_more_above and len(rows) + show_below + 1 <= height

        if show_above:
            rows.insert(0, [(self.MORE_ABOVE, self.indicator_attr)])
        if show_below:
            rows.append([(self.MORE_BELOW, self.indicator_attr)])

        return rows[:height]

    # ---------- rendering ----------
    @staticmethod
    def _put_row(win, y, segments, width):
        x = 0
        for text, attr in segments:
            remaining = width - x
            if remaining <= 0:
                break
            # drop control chars from commit text; they would move the cursor
            text = text.replace("\t", " ").replace("\r", "")
            try:
                win.addnstr(y, x, text, remaining, attr)
            except curses.error:
                # writing the bottom-right cell raises after the text lands
                pass
            x += min(len(text), remaining)

    def draw(self, win, layout, rows, status_text):
        win.erase()
        w = layout.W
        if layout.H > layout.header_y:
            self._put_row(win, layout.header_y, [(self.HEADER_TEXT, self.header_attr)], w)
        if layout.H > layout.status_y:
            self._put_row(win, layout.status_y, [(status_text, self.status_attr)], w)
        for i, segments in enumerate(rows[: layout.list_h]):
            self._put_row(win, layout.list_y + i, segments, w)
        win.refresh()

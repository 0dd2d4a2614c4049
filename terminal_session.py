import curses
from contextlib import contextmanager


class TerminalSession:
    """Draw/read surface over a curses screen that is already set up."""

    def __init__(self, stdscr):
        self.window = stdscr

    def size(self):
        return self.window.getmaxyx()

    def clear(self):
        self.window.clear()

    def refresh(self):
        self.window.refresh()

    def read_key(self):
        return self.window.getch()


@contextmanager
def interactive_mode(initscr=curses.initscr):
    """
    Alternate screen, raw input, hidden cursor for the duration of the
    block. The terminal is handed back on every way out, exceptions
    included.
    """
    stdscr = initscr()
    try:
        curses.noecho()
        curses.raw()
        stdscr.keypad(True)
        stdscr.nodelay(False)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        yield TerminalSession(stdscr)
    finally:
        try:
            stdscr.keypad(False)
            curses.noraw()
            curses.echo()
            curses.curs_set(1)
        except curses.error:
            pass
        curses.endwin()

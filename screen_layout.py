class ScreenLayout:
    def __init__(self, stdscr):
        self.H, self.W = stdscr.getmaxyx()

        # layout: header hint (1 line), status line (1 line), commit list (rest)
        self.header_h = 1
        self.status_h = 1

        self.header_y = 0
        self.status_y = self.header_h
        self.list_y = self.header_h + self.status_h
        self.list_h = max(0, self.H - self.header_h - self.status_h)

import contextlib
import io
import re

import pytest


class FakeKey(str):
    """Stands in for blessed.keyboard.Keystroke."""
    def __new__(cls, text="", name=None):
        key = super().__new__(cls, text)
        key.name = name
        key.is_sequence = name is not None
        return key


class FakeTerminal:
    '''
    The slice of blessed.Terminal caseecho uses. Escape sequences are replaced
    by readable markers so `Screen` can replay them.
    '''
    clear_eol = "<EOL>"
    normal = "</dim>"

    def __init__(self, height=24, width=80, keys=(), location=(0, 0), tty=True, stream=None):
        self.height = height
        self.width = width
        self.stream = stream if stream is not None else io.StringIO()
        self.keys = list(keys)
        self.location = location
        self.is_a_tty = tty
        self.in_raw = False
        self.raw_entered = 0
        self.raw_exited = 0

    def move_yx(self, y, x):
        return f"<{y},{x}>"

    def bright_black(self, text):
        return f"<dim>{text}</dim>"

    @contextlib.contextmanager
    def raw(self):
        self.in_raw = True
        self.raw_entered += 1
        try:
            yield
        finally:
            self.in_raw = False
            self.raw_exited += 1

    def get_location(self, timeout=None):
        return self.location

    def inkey(self, timeout=None):
        assert self.in_raw, "keys read outside raw mode"
        return self.keys.pop(0)


TOKEN = re.compile(r"<(\d+),(\d+)>|<EOL>|</?dim>|\r|\n|.", re.S)


class Screen:
    '''
    Replays FakeTerminal output onto a grid of `height` rows.
    Rows are 1-based, columns 0-based. LF keeps the column (raw mode) and scrolls on the last row.
    '''
    def __init__(self, height):
        self.height = height
        self.rows = [[] for _ in range(height)]
        self.row, self.col = 1, 0
        self.scrolls = 0

    def feed(self, data):
        for m in TOKEN.finditer(data):
            tok = m.group(0)
            if m.group(1) is not None:
                self.row, self.col = int(m.group(1)) + 1, int(m.group(2))
            elif tok == "<EOL>":
                del self.rows[self.row - 1][self.col:]
            elif tok in ("<dim>", "</dim>"):
                continue
            elif tok == "\r":
                self.col = 0
            elif tok == "\n":
                if self.row == self.height:
                    self.rows.pop(0)
                    self.rows.append([])
                    self.scrolls += 1
                else:
                    self.row += 1
            else:
                line = self.rows[self.row - 1]
                while len(line) < self.col:
                    line.append(" ")
                if self.col < len(line):
                    line[self.col] = tok
                else:
                    line.append(tok)
                self.col += 1
        return self

    def line(self, row):
        return "".join(self.rows[row - 1]).rstrip()

    @property
    def cursor(self):
        return self.row, self.col


def screen_of(term):
    return Screen(term.height).feed(term.stream.getvalue())


@pytest.fixture
def term():
    return FakeTerminal()

from dataclasses import replace
from typing import List
import logging

from caseecho.state import Session, clamp

logger = logging.getLogger(__name__)

PLACEHOLDER = "Start typing..."
BLOCK_ROWS = 3  # input line + uppercase + lowercase


def goto(term, row: int, col: int, height: int) -> str:
    '''1-based row, 0-based column. Rows past the screen clamp to the edge.'''
    return term.move_yx(clamp(row, 1, height) - 1, max(col, 0))


def format_lines(term, session: Session) -> List[str]:
    if not session.text:
        return [term.bright_black(PLACEHOLDER)]
    return [
        session.text,
        term.bright_black(session.text.upper()),
        term.bright_black(session.text.lower()),
    ]


def render(term, session: Session, out=None) -> Session:
    '''
    Repaints the block for `session` and returns it with `anchor_row` adjusted
    for any scrolling that was needed to fit the block on screen.
    '''
    out = out or term.stream
    height = term.height
    # a shrunk screen can leave the anchor below the last row.
    anchor = min(session.anchor_row, height)

    # clean canvas: the current row and the two below it.
    buf = [goto(term, anchor + i, 0, height) + term.clear_eol for i in range(BLOCK_ROWS)]

    # NOTE: lines are written one at a time, each after its own absolute move.
    for i, line in enumerate(format_lines(term, session)):
        if anchor + i > height:
            # out of room at the bottom: scroll up a row and follow it.
            buf.append(goto(term, height, 0, height) + "\n")
            anchor -= 1
            logger.debug("scrolled at bottom row %d, anchor now %d", height, anchor)
        buf.append(goto(term, anchor + i, 0, height) + line)

    buf.append(goto(term, anchor, session.caret, height))

    out.write("".join(buf))
    out.flush()

    if anchor != session.anchor_row:
        session = replace(session, anchor_row=anchor)
    return session


def park(term, session: Session, out=None):
    """Leaves the cursor somewhere harmless once the loop is over."""
    out = out or term.stream
    height = term.height
    if session.text:
        out.write(goto(term, session.anchor_row, len(session.text), height) + "\r\n")
    else:
        out.write(goto(term, session.anchor_row, 0, height) + term.clear_eol)
    out.flush()

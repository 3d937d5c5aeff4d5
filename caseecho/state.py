from dataclasses import dataclass, replace
import logging

logger = logging.getLogger(__name__)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass(frozen=True)
class Session:
    '''
    One entry being typed.
    `anchor_row` is the 1-based terminal row the entry's first line is drawn on.
    '''
    text: str = ""
    caret: int = 0
    anchor_row: int = 1
    committed: bool = False

    @classmethod
    def start(cls, row: int) -> 'Session':
        return cls(anchor_row=max(row, 1))


def _checked(session: Session) -> Session:
    caret = clamp(session.caret, 0, len(session.text))
    if caret != session.caret:
        session = replace(session, caret=caret)
    return session


def insert(session: Session, ch: str) -> Session:
    text = session.text[:session.caret] + ch + session.text[session.caret:]
    return _checked(replace(session, text=text, caret=session.caret + 1))


def delete_before_caret(session: Session) -> Session:
    if not session.text or session.caret == 0:
        return session
    i = session.caret
    return _checked(replace(session, text=session.text[:i-1] + session.text[i:], caret=i - 1))


def move_caret(session: Session, delta: int) -> Session:
    # caret stays on the typed text; it can't rest past the last character.
    last = max(len(session.text) - 1, 0)
    return replace(session, caret=clamp(session.caret + delta, 0, last))


def commit_or_exit(session: Session, height: int) -> Session:
    """Enter: quit on an empty entry, otherwise leave the block and start a new one below it."""
    if not session.text:
        return replace(session, committed=True)

    # block ends on the terminal's last row
    step = 2 if session.anchor_row + 2 == height else 3
    logger.debug("commit of %d chars at row %d, advancing %d rows", len(session.text), session.anchor_row, step)
    return Session(anchor_row=session.anchor_row + step)


def abort(session: Session) -> Session:
    if session.text:
        # rest on the lowercase mirror instead of writing over it.
        session = replace(session, anchor_row=session.anchor_row + 2)
    return replace(session, committed=True)

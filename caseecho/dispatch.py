from typing import Literal, Optional, Tuple
import logging

import readchar

from caseecho.state import Session, insert, delete_before_caret, move_caret, commit_or_exit, abort

logger = logging.getLogger(__name__)

Action = Literal["insert", "backspace", "left", "right", "enter", "interrupt", "ignore"]

# blessed key names
KEY_NAMES = {
    'KEY_BACKSPACE': "backspace",
    'KEY_LEFT': "left",
    'KEY_RIGHT': "right",
    'KEY_ENTER': "enter",
}

# raw bytes, for when the terminal hands them over undecoded
RAW_KEYS = {
    readchar.key.CTRL_C: "interrupt",
    readchar.key.CR: "enter",
    readchar.key.LF: "enter",
    readchar.key.BACKSPACE: "backspace",
    readchar.key.CTRL_H: "backspace",
    readchar.key.LEFT: "left",
    readchar.key.RIGHT: "right",
}


def classify(key) -> Tuple[Action, Optional[str]]:
    '''
    Accepts a blessed Keystroke (or a plain str) and returns (action, char).
    `char` is only set for "insert".
    '''
    raw = str(key)
    name = getattr(key, 'name', None)
    if name in KEY_NAMES:
        return KEY_NAMES[name], None
    if raw in RAW_KEYS:
        return RAW_KEYS[raw], None
    if len(raw) == 1 and not getattr(key, 'is_sequence', False) and raw.isprintable():
        return "insert", raw
    return "ignore", None


def dispatch(session: Session, key, height: int) -> Session:
    action, ch = classify(key)
    logger.debug("key %r -> %s", str(key), action)

    if action == "insert": return insert(session, ch)
    if action == "backspace": return delete_before_caret(session)
    if action == "left": return move_caret(session, -1)
    if action == "right": return move_caret(session, 1)
    if action == "enter": return commit_or_exit(session, height)
    if action == "interrupt": return abort(session)
    return session

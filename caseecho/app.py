from typing import Optional
import logging

from blessed import Terminal
from rich.console import Console
from rich.markup import escape

from caseecho.dispatch import dispatch
from caseecho.log import setup_logging
from caseecho.render import render, park
from caseecho.state import Session

logger = logging.getLogger(__name__)

LOCATION_TIMEOUT = 2.0  # seconds to wait for the terminal's cursor report


class TerminalError(RuntimeError):
    """The terminal can't be queried or drawn on. Nothing to fall back to."""


def start_session(term) -> Session:
    y, _ = term.get_location(timeout=LOCATION_TIMEOUT)
    if y < 0:
        raise TerminalError("could not read the cursor position from the terminal")
    return Session.start(y + 1)


def run(term: Optional[Terminal] = None) -> Session:
    '''
    Runs the editor until Enter on an empty line or Ctrl-C.
    Raw mode is held for the whole loop and restored on the way out, however that happens.
    Returns the final session.
    '''
    term = term or Terminal()
    if not term.is_a_tty:
        raise TerminalError("stdout is not a terminal")

    with term.raw():
        session = start_session(term)
        logger.info("started at row %d (%dx%d)", session.anchor_row, term.width, term.height)
        session = render(term, session)

        while True:
            key = term.inkey()
            session = dispatch(session, key, term.height)
            if session.committed:
                break
            session = render(term, session)

        park(term, session)

    logger.info("done, cursor parked at row %d", session.anchor_row)
    return session


def main() -> int:
    setup_logging()
    try:
        run()
    except KeyboardInterrupt:
        pass
    except (TerminalError, OSError) as err:
        logger.exception("terminal failure")
        Console(stderr=True).print(f"[bold red]caseecho:[/bold red] {escape(str(err))}")
        return 1
    return 0

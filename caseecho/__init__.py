'''
caseecho: type a line, watch it echoed back in UPPER and lower case as you go.
'''
import logging

__version__ = "0.1.0"

# stdout is the drawing surface; nothing may fall through to logging.lastResort.
logging.getLogger(__name__).addHandler(logging.NullHandler())

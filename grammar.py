######################################################################
#
# grammar.py
#
# L-system grammars and string rewriting.
#
######################################################################
#
# Based on documentation in https://en.wikipedia.org/wiki/L-system and
# http://paulbourke.net/fractals/lsys/
#
# A grammar is a start string, a table of production rules mapping a
# single symbol to its replacement, and a table of drawing rules
# telling the turtle what to do with each symbol.

import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

Grammar = namedtuple('Grammar', 'start, rules, drawing_rules')

######################################################################
# drawing actions

DrawingAction = namedtuple('DrawingAction', 'kind, angle_deg')

DRAW = DrawingAction('draw', 0.)   # line segment of unit length
MOVE = DrawingAction('move', 0.)   # unit step without drawing
PUSH = DrawingAction('push', 0.)   # save position and heading
POP = DrawingAction('pop', 0.)     # restore last saved state
NOOP = DrawingAction('noop', 0.)

def turn_left(angle_deg):
    return DrawingAction('turn_left', float(angle_deg))

def turn_right(angle_deg):
    return DrawingAction('turn_right', float(angle_deg))

######################################################################
# errors

class LSystemError(Exception):
    pass

class MissingDrawingRuleError(LSystemError):

    def __init__(self, symbol):
        super().__init__('no drawing rule for symbol {!r}'.format(symbol))
        self.symbol = symbol

######################################################################
# one rewriting pass: every symbol is replaced by its successor, or
# copied if it has no rule. Replacements never see their neighbors.

def expand(grammar, symbols):

    rules = grammar.rules

    return ''.join(rules.get(symbol, symbol) for symbol in symbols)

######################################################################
# apply expand() count times to the start string

def expand_generations(grammar, count):

    if count < 0:
        raise ValueError('generation count must be >= 0, got {}'.format(count))

    lstring = grammar.start

    for i in range(count):
        lstring = expand(grammar, lstring)

    logger.debug('generation %d has %d symbols', count, len(lstring))

    return lstring

# yields generations 0 through count, each built from the previous one
def iter_generations(grammar, count):

    if count < 0:
        raise ValueError('generation count must be >= 0, got {}'.format(count))

    lstring = grammar.start
    yield lstring

    for i in range(count):
        lstring = expand(grammar, lstring)
        yield lstring

######################################################################
# set of symbols appearing in any generation up to max_generation,
# computed without building the strings themselves

def reachable_symbols(grammar, max_generation):

    seen = set(grammar.start)
    frontier = set(seen)

    for i in range(max_generation):

        produced = set()

        for symbol in frontier:
            produced.update(grammar.rules.get(symbol, ''))

        frontier = produced - seen

        if not frontier:
            break

        seen |= frontier

    return seen

# strict coverage check; interpretation itself is lenient and treats
# unmapped symbols as no-ops
def check_drawing_rules(grammar, max_generation):

    missing = reachable_symbols(grammar, max_generation) - set(grammar.drawing_rules)

    if missing:
        raise MissingDrawingRuleError(sorted(missing)[0])

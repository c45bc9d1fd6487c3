######################################################################
#
# turtle_path.py
#
# Turtle interpretation of an L-system string into a fitted 2-D path.
#
######################################################################
#
# Each symbol is looked up in a table of drawing rules and executed
# by a turtle with a position and a heading. Besides the polyline
# geometry, the interpreter records the turtle state before and after
# every symbol so that a renderer can animate the drawing one symbol
# at a time, and the fraction of the drawn lines reached by each
# symbol (its stroke range).

import logging
from collections import namedtuple
import numpy as np

from geometry import (unit_vector, bounding_box, fit_transform,
                      apply_transform)
from grammar import NOOP, LSystemError, MissingDrawingRuleError

logger = logging.getLogger(__name__)

# space left around the path inside the container
DEFAULT_MARGIN = 10.

# padding added to the raw bounding box so that empty or collinear
# paths still have a nonzero extent
BOX_EPSILON = 0.001

######################################################################

# position is a length-2 array, heading is in radians (0 = pointing
# right, counter clockwise positive)
TurtleState = namedtuple('TurtleState', 'position, heading')

PathElement = namedtuple('PathElement',
                         'symbol, from_state, to_state, action, '
                         'stroke_start, stroke_end')

Path = namedtuple('Path',
                  'elements, geometry, bounding_box, line_count, '
                  'is_single_path')

class EmptyStackError(LSystemError):

    def __init__(self, symbol, index):
        super().__init__(
            'symbol {!r} at index {} restores state from an empty '
            'stack'.format(symbol, index))
        self.symbol = symbol
        self.index = index

######################################################################
# accumulates subpaths; a new one is started after every move/pop

class _SubpathBuffer:

    def __init__(self, start):
        self.subpaths = [[start]]

    def start_new(self, point):
        self.subpaths.append([point])

    def add_point(self, point):
        self.subpaths[-1].append(point)

######################################################################
# execute a single drawing action, returns the new state. stack and
# buf are read-write.

def _execute_action(action, state, stack, buf):

    kind = action.kind

    if kind == 'draw':

        new_pos = state.position + unit_vector(state.heading)
        buf.add_point(new_pos)
        return TurtleState(new_pos, state.heading)

    elif kind == 'move':

        new_pos = state.position + unit_vector(state.heading)
        buf.start_new(new_pos)
        return TurtleState(new_pos, state.heading)

    elif kind == 'turn_left':

        return TurtleState(state.position,
                           state.heading + np.radians(action.angle_deg))

    elif kind == 'turn_right':

        return TurtleState(state.position,
                           state.heading - np.radians(action.angle_deg))

    elif kind == 'push':

        stack.append(TurtleState(state.position.copy(), state.heading))
        return state

    elif kind == 'pop':

        restored = stack.pop()
        buf.start_new(restored.position)
        return restored

    elif kind == 'noop':

        return state

    else:

        raise RuntimeError('invalid drawing action: {!r}'.format(action))

######################################################################
# interpret symbols into a Path fitted into container_size = (width,
# height). Symbols without a drawing rule are no-ops unless strict is
# set, in which case MissingDrawingRuleError is raised.

def interpret(symbols, drawing_rules, start_heading_deg=0.,
              container_size=(100., 100.), margin=DEFAULT_MARGIN,
              strict=False):

    width, height = container_size
    if width <= 2*margin or height <= 2*margin:
        raise ValueError('container size {} leaves no room inside a margin '
                         'of {}'.format(container_size, margin))

    state = TurtleState(np.array([0., 0.]), np.radians(start_heading_deg))

    # stack of saved turtle states
    stack = []

    buf = _SubpathBuffer(state.position)

    raw_elements = []
    line_count = 0
    unmapped = set()

    for index, symbol in enumerate(symbols):

        action = drawing_rules.get(symbol)

        if action is None:
            if strict:
                raise MissingDrawingRuleError(symbol)
            if symbol not in unmapped:
                logger.debug('no drawing rule for %r, ignoring it', symbol)
                unmapped.add(symbol)
            action = NOOP

        if action.kind == 'pop' and not stack:
            raise EmptyStackError(symbol, index)

        new_state = _execute_action(action, state, stack, buf)

        if action.kind == 'draw':
            line_count += 1

        raw_elements.append((symbol, state, new_state, action))
        state = new_state

    raw_geometry = [np.array(sp) for sp in buf.subpaths]

    # fit into the container
    box = bounding_box(raw_geometry).inset(-BOX_EPSILON)
    transform = fit_transform(box, container_size, margin)

    geometry = []
    for sp in raw_geometry:
        pts = apply_transform(transform, sp)
        pts.flags.writeable = False
        geometry.append(pts)

    # element positions are transformed in one batch; headings stay as
    # they were
    from_pos = _transform_positions(transform,
                                    [e[1].position for e in raw_elements])
    to_pos = _transform_positions(transform,
                                  [e[2].position for e in raw_elements])

    elements = []
    drawn = 0

    for i, (symbol, from_state, to_state, action) in enumerate(raw_elements):

        if line_count:
            stroke_start = drawn / line_count
            if action.kind == 'draw':
                drawn += 1
            stroke_end = drawn / line_count
        else:
            stroke_start = stroke_end = 0.

        elements.append(PathElement(
            symbol,
            TurtleState(from_pos[i], from_state.heading),
            TurtleState(to_pos[i], to_state.heading),
            action,
            stroke_start,
            stroke_end))

    logger.debug('interpreted %d symbols into %d lines in %d subpaths',
                 len(elements), line_count, len(geometry))

    return Path(elements=tuple(elements),
                geometry=tuple(geometry),
                bounding_box=bounding_box(geometry),
                line_count=line_count,
                is_single_path=(len(geometry) == 1))

def _transform_positions(transform, positions):
    pts = apply_transform(transform, np.array(positions).reshape(-1, 2))
    pts.flags.writeable = False
    return pts

######################################################################
#
# lsystems.py
#
# Catalog of fractal and plant L-systems, and a command-line program
# to render a generation (or the morph into it) to PNG.
#
######################################################################
#
# Based on documentation in https://en.wikipedia.org/wiki/L-system and
# http://paulbourke.net/fractals/lsys/

import argparse
import logging
from datetime import datetime
import numpy as np

from grammar import (Grammar, DRAW, MOVE, PUSH, POP, NOOP,
                     turn_left, turn_right, expand_generations,
                     LSystemError)
from evolution import (describe, fixed_angle, alternating_angle,
                       scaled_angle)
from turtle_path import interpret, DEFAULT_MARGIN
from path_morph import MorphAnimator

######################################################################
# fractals

def dragon(angle=90):

    return describe(
        Grammar(
            start = 'FX',
            rules = dict(X='X+YF+', Y='-FX-Y'),
            drawing_rules = {
                'F': DRAW,
                'X': NOOP,
                'Y': NOOP,
                '-': turn_left(angle),
                '+': turn_right(angle)
            }
        ),
        starting_angle = scaled_angle(angle, 0.5),
        max_generation = 13
    )

FRACTALS = {

    'snowflake': describe(
        Grammar(
            start = 'A--A--A',
            rules = dict(A='A+A--A+A'),
            drawing_rules = {
                'A': DRAW,
                '-': turn_right(60),
                '+': turn_left(60)
            }
        ),
        starting_angle = fixed_angle(60),
        max_generation = 5,
        line_width_range = (1., 2.)
    ),

    'sierpinski': describe(
        Grammar(
            start = 'A',
            rules = dict(A='B-A-B', B='A+B+A'),
            drawing_rules = {
                'A': DRAW,
                'B': DRAW,
                '-': turn_right(60),
                '+': turn_left(60)
            }
        ),
        starting_angle = alternating_angle(0, 60),
        max_generation = 9,
        line_width_range = (1.5, 3.5)
    ),

    'dragon': dragon(90),

    # nested rectangles, not really a chessboard
    'chessboard': describe(
        Grammar(
            start = 'F+F+F+F',
            rules = dict(F='FF+F+F+F+FF'),
            drawing_rules = {
                'F': DRAW,
                '-': turn_left(90),
                '+': turn_right(90)
            }
        ),
        starting_angle = fixed_angle(0),
        max_generation = 4
    ),

    'pentagon': describe(
        Grammar(
            start = 'F++F++F++F++F',
            rules = dict(F='F++F++F|F-F++F'),
            drawing_rules = {
                'F': DRAW,
                '|': turn_left(180),
                '+': turn_right(36),
                '-': turn_left(36)
            }
        ),
        starting_angle = fixed_angle(180),
        max_generation = 4,
        line_width_range = (1.5, 2.5)
    ),

    'levy_curve': describe(
        Grammar(
            start = 'F',
            rules = dict(F='-F++F-'),
            drawing_rules = {
                'F': DRAW,
                '+': turn_right(45),
                '-': turn_left(45)
            }
        ),
        starting_angle = fixed_angle(180),
        max_generation = 12
    )

}

######################################################################
# plants

# symbols of the second fern that only advance the turtle
_FARN2_MOVES = 'abcdeghijklmnopqrstuv'

PLANTS = {

    'farn1': describe(
        Grammar(
            start = 'F',
            rules = dict(F='F[-F]F[+F][F]'),
            drawing_rules = {
                'F': DRAW,
                '+': turn_right(25),
                '-': turn_left(25),
                '[': PUSH,
                ']': POP
            }
        ),
        starting_angle = fixed_angle(45),
        max_generation = 5,
        line_width_range = (1., 2.)
    ),

    'weed': describe(
        Grammar(
            start = 'X',
            rules = dict(F='FF', X='F[+X]F[-X]+X'),
            drawing_rules = {
                'F': DRAW,
                'X': DRAW,
                '-': turn_left(25),
                '+': turn_right(25),
                '[': PUSH,
                ']': POP
            }
        ),
        starting_angle = fixed_angle(90),
        max_generation = 8,
        line_width_range = (1.5, 3.)
    ),

    'binary_tree': describe(
        Grammar(
            start = '0',
            rules = {'0': '1[-0]+0', '1': '11'},
            drawing_rules = {
                '0': DRAW,
                '1': DRAW,
                '+': turn_right(45),
                '-': turn_left(45),
                '[': PUSH,
                ']': POP
            }
        ),
        starting_angle = fixed_angle(90),
        max_generation = 8
    ),

    'farn2': describe(
        Grammar(
            start = 'aF',
            rules = dict(
                a='FFFFFv[+++h][---q]fb',
                b='FFFFFv[+++h][---q]fc',
                c='FFFFFv[+++fa]fd',
                d='FFFFFv[+++h][---q]fe',
                e='FFFFFv[+++h][---q]fg',
                g='FFFFFv[---fa]fa',
                h='ifFF',
                i='fFFF[--m]j',
                j='fFFF[--n]k',
                k='fFFF[--o]l',
                l='fFFF[--p]',
                m='fFn',
                n='fFo',
                o='fFp',
                p='fF',
                q='rfF',
                r='fFFF[++m]s',
                s='fFFF[++n]t',
                t='fFFF[++o]u',
                u='fFFF[++p]',
                v='Fv'
            ),
            drawing_rules = {
                **{symbol: MOVE for symbol in _FARN2_MOVES},
                'F': DRAW,
                '-': turn_left(12),
                '+': turn_right(12),
                '[': PUSH,
                ']': POP
            }
        ),
        starting_angle = fixed_angle(90),
        start_generation = 4,
        max_generation = 22,
        line_width_range = (1., 2.)
    )

}

KNOWN_LSYSTEMS = dict(FRACTALS, **PLANTS)

######################################################################
# parse command-line options for this program

def parse_options(argv=None):

    parser = argparse.ArgumentParser(
        description='render a generation of an L-system')

    parser.add_argument('lname', metavar='LSYSTEM',
                        help='name of desired L-system',
                        type=str,
                        choices=KNOWN_LSYSTEMS)

    parser.add_argument('generation', metavar='GENERATION', type=int,
                        help='generation to render')

    parser.add_argument('-x', dest='max_segments', metavar='MAXSEGMENTS',
                        type=int, default=100000,
                        help='maximum number of segments to plot')

    parser.add_argument('-t', dest='text_only', action='store_true',
                        help='use text output instead of PNG')

    parser.add_argument('-W', dest='width', type=float, default=800.,
                        help='container width')

    parser.add_argument('-H', dest='height', type=float, default=800.,
                        help='container height')

    parser.add_argument('-m', dest='morph_frames', metavar='FRAMES',
                        type=int, default=0,
                        help='plot the morph from the previous generation '
                        'in FRAMES keyframes')

    parser.add_argument('--strict', action='store_true',
                        help='fail on symbols without a drawing rule')

    parser.add_argument('-v', dest='verbose', action='store_true',
                        help='print debug logging')

    opts = parser.parse_args(argv)

    opts.lsys = KNOWN_LSYSTEMS[opts.lname]

    if opts.generation < 0:
        parser.error('generation must be >= 0')

    if opts.generation > opts.lsys.max_generation:
        parser.error('{} supports at most {} generations'.format(
            opts.lname, opts.lsys.max_generation))

    if opts.morph_frames and opts.morph_frames < 2:
        parser.error('-m needs at least 2 frames')

    if opts.morph_frames and opts.generation == 0:
        parser.error('-m needs a generation >= 1')

    return opts

######################################################################

def build_path(lsys, generation, container_size, strict=False):

    grammar = lsys.grammar

    lstring = expand_generations(grammar, generation)

    return interpret(lstring, grammar.drawing_rules,
                     lsys.starting_angle(generation),
                     container_size, DEFAULT_MARGIN, strict)

# segments as an n-by-2-by-2 array, one [(x0, y0), (x1, y1)] per line
def path_segments(path):

    segments = [np.stack([sp[:-1], sp[1:]], axis=1)
                for sp in path.geometry if len(sp) > 1]

    if not segments:
        return np.zeros((0, 2, 2))

    return np.vstack(segments)

######################################################################
# main function

def main(argv=None):

    opts = parse_options(argv)

    if opts.verbose:
        logging.basicConfig(level=logging.DEBUG)

    container_size = (opts.width, opts.height)

    # time expansion and interpretation
    start = datetime.now()

    try:
        path = build_path(opts.lsys, opts.generation, container_size,
                          opts.strict)
    except LSystemError as e:
        print('error: {}'.format(e))
        return 2

    elapsed = (datetime.now() - start).total_seconds()

    print('generated {} segments in {} subpaths in {:.6f} seconds'.format(
        path.line_count, len(path.geometry), elapsed))

    if opts.max_segments >= 0 and path.line_count > opts.max_segments:
        print('...maximum of {} segments exceeded, skipping output!'.format(
            opts.max_segments))
        return 0

    # imported here so text output works without a plotting backend
    from plot_segments import plot_segments, plot_morph

    if opts.text_only:
        np.savetxt('segments.txt', path_segments(path).reshape(-1, 4))
        print('wrote segments.txt')
    elif opts.morph_frames:
        prev = build_path(opts.lsys, opts.generation - 1, container_size,
                          opts.strict)
        animator = MorphAnimator(opts.lsys.line_width_range)
        animator.generation = opts.generation - 1
        animator.set_path(prev)
        morph = animator.request(path)
        print('morphing with {}'.format(type(morph).__name__))
        plot_morph(animator, opts.morph_frames, container_size)
    else:
        plot_segments(path_segments(path))

    return 0

if __name__ == '__main__':
    raise SystemExit(main())

######################################################################
#
# evolution.py
#
# Stepping an L-system through its generations and interpreting each
# one into a fitted path.
#
######################################################################

import logging
from collections import namedtuple

from grammar import expand, expand_generations, check_drawing_rules
from turtle_path import interpret, DEFAULT_MARGIN
from path_morph import DEFAULT_LINE_WIDTH_RANGE

logger = logging.getLogger(__name__)

# starting_angle maps a generation number to a starting heading in
# degrees. max_generation caps the expansion, which grows exponentially
# for most grammars.
EvolutionDescription = namedtuple(
    'EvolutionDescription',
    'grammar, starting_angle, start_generation, max_generation, '
    'line_width_range')

def describe(grammar, starting_angle, max_generation, start_generation=0,
             line_width_range=DEFAULT_LINE_WIDTH_RANGE):

    if not 0 <= start_generation <= max_generation:
        raise ValueError('need 0 <= start_generation <= max_generation, '
                         'got {} and {}'.format(start_generation,
                                                max_generation))

    return EvolutionDescription(grammar, starting_angle, start_generation,
                                max_generation, line_width_range)

######################################################################
# starting angle policies

def fixed_angle(angle_deg):
    return lambda generation: angle_deg

def alternating_angle(even_deg, odd_deg):
    return lambda generation: even_deg if generation % 2 == 0 else odd_deg

# rotates by per_generation_deg every generation; the dragon curve
# turns by half its turning angle per generation
def scaled_angle(angle_deg, per_generation=0.5):
    return lambda generation: angle_deg * generation * per_generation

######################################################################

class Evolution:

    def __init__(self, description, container_size,
                 margin=DEFAULT_MARGIN, strict=False):

        if strict:
            check_drawing_rules(description.grammar,
                                description.max_generation)

        self.description = description
        self.container_size = container_size
        self.margin = margin
        self.strict = strict

        self.reset()

    @property
    def is_finished(self):
        return self.generation >= self.description.max_generation

    def reset(self):
        self.generation = self.description.start_generation
        self.symbols = expand_generations(self.description.grammar,
                                          self.generation)
        self._path = None

    def resize(self, container_size):
        self.container_size = container_size
        self._path = None

    def path(self):

        if self._path is None:
            self._path = interpret(
                self.symbols,
                self.description.grammar.drawing_rules,
                self.description.starting_angle(self.generation),
                self.container_size,
                self.margin,
                self.strict)

        return self._path

    def evolve(self):
        """Advance one generation; returns the new Path, or None at the cap."""

        if self.is_finished:
            return None

        self.generation += 1
        self.symbols = expand(self.description.grammar, self.symbols)
        self._path = None

        logger.debug('evolved to generation %d (%d symbols)',
                     self.generation, len(self.symbols))

        return self.path()

    # current path followed by the path of every remaining generation
    def paths(self):

        yield self.path()

        while not self.is_finished:
            yield self.evolve()

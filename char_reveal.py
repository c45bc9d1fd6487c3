######################################################################
#
# char_reveal.py
#
# Symbol-by-symbol reveal of an interpreted path. The cursor only
# reads data already stored in the Path; the renderer animates the
# stroke from stroke_start to stroke_end and moves a marker from
# from_state to to_state for every step.
#
######################################################################

from collections import namedtuple

RevealStep = namedtuple('RevealStep',
                        'index, symbol, from_state, to_state, '
                        'stroke_start, stroke_end')

class RevealCursor:

    def __init__(self, path):
        self.path = path
        self.index = 0

    def __iter__(self):
        return self

    def __next__(self):
        return self.advance()

    def __len__(self):
        return len(self.path.elements)

    @property
    def remaining(self):
        return len(self.path.elements) - self.index

    @property
    def is_finished(self):
        return self.index >= len(self.path.elements)

    # fraction of the drawn lines revealed so far
    @property
    def stroke_end(self):
        if self.index == 0:
            return 0.
        return self.path.elements[self.index - 1].stroke_end

    def advance(self):

        if self.is_finished:
            raise StopIteration

        element = self.path.elements[self.index]

        step = RevealStep(self.index, element.symbol,
                          element.from_state, element.to_state,
                          element.stroke_start, element.stroke_end)

        self.index += 1

        return step

    def marker_state(self, animating=False):
        """Turtle state to show for the next element, or None when done.

        While the step is animating the marker sits at the element's
        target state, otherwise at its starting state.
        """
        if self.is_finished:
            return None

        element = self.path.elements[self.index]

        return element.to_state if animating else element.from_state

    def reset(self):
        self.index = 0

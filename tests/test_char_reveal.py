import pytest
from numpy.testing import assert_allclose

from grammar import DRAW, turn_left
from turtle_path import interpret
from char_reveal import RevealCursor


RULES = {'F': DRAW, '+': turn_left(90)}


@pytest.fixture
def path():
    return interpret('F+F', RULES, container_size=(100., 100.))


class TestRevealCursor:
    def test_visits_every_element_once(self, path):
        steps = list(RevealCursor(path))
        assert [s.index for s in steps] == [0, 1, 2]
        assert ''.join(s.symbol for s in steps) == 'F+F'

    def test_step_data_comes_from_elements(self, path):
        cursor = RevealCursor(path)
        step = cursor.advance()
        element = path.elements[0]
        assert step.from_state is element.from_state
        assert step.to_state is element.to_state
        assert (step.stroke_start, step.stroke_end) == (0., 0.5)

    def test_progress(self, path):
        cursor = RevealCursor(path)
        assert len(cursor) == 3
        assert cursor.remaining == 3
        assert cursor.stroke_end == 0.

        cursor.advance()
        cursor.advance()
        assert cursor.remaining == 1
        assert cursor.stroke_end == 0.5
        assert not cursor.is_finished

        cursor.advance()
        assert cursor.is_finished
        assert cursor.stroke_end == 1.

    def test_advance_past_end(self, path):
        cursor = RevealCursor(path)
        for _ in range(3):
            cursor.advance()
        with pytest.raises(StopIteration):
            cursor.advance()

    def test_marker_state(self, path):
        cursor = RevealCursor(path)
        first = path.elements[0]
        assert_allclose(cursor.marker_state().position,
                        first.from_state.position)
        assert_allclose(cursor.marker_state(animating=True).position,
                        first.to_state.position)

        list(cursor)
        assert cursor.marker_state() is None

    def test_reset(self, path):
        cursor = RevealCursor(path)
        list(cursor)
        cursor.reset()
        assert cursor.index == 0
        assert len(list(cursor)) == 3

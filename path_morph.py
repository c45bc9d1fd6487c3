######################################################################
#
# path_morph.py
#
# Transitions between the paths of two consecutive generations.
#
######################################################################
#
# When every line of generation N is replaced by a fixed number of
# lines in generation N+1 and both paths are a single polyline, the
# transition is animated point for point: the shorter polyline is
# subdivided so both have the same number of points, and keyframes
# are linear interpolations between the two. Any other pair of paths
# is cross-faded instead.

import logging
from collections import namedtuple
import numpy as np

from geometry import lerp
from grammar import LSystemError

logger = logging.getLogger(__name__)

# seconds; a direct morph takes longer than a fade
ANIMATION_DURATION = 0.5
TRANSITION_DURATION = 0.2

DEFAULT_LINE_WIDTH_RANGE = (2., 3.5)

# direction is 'refine' when the target path has more lines than the
# source (the source was subdivided) and 'coarsen' otherwise
DirectMorph = namedtuple('DirectMorph',
                         'factor, direction, from_points, to_points')

CrossFade = namedtuple('CrossFade', 'from_geometry, to_geometry')

MorphFrame = namedtuple('MorphFrame',
                        'plan, progress, points, opacities, line_width')

class TransitionInProgressError(LSystemError):
    pass

######################################################################
# split every segment of an n-by-2 polyline into factor equal parts

def subdivide(points, factor):

    points = np.asarray(points, dtype=float)

    if factor < 1:
        raise ValueError('subdivision factor must be >= 1, got {}'.format(factor))

    if factor == 1 or len(points) < 2:
        return points.copy()

    starts = points[:-1]
    ends = points[1:]

    # fractions 0, 1/factor, ..., (factor-1)/factor along each segment
    t = (np.arange(factor) / factor).reshape(1, -1, 1)

    inner = (1. - t) * starts[:, None, :] + t * ends[:, None, :]

    return np.vstack([inner.reshape(-1, 2), points[-1:]])

######################################################################

def can_morph_directly(from_path, to_path):

    if not (from_path.is_single_path and to_path.is_single_path):
        return False

    a = from_path.line_count
    b = to_path.line_count

    if a == 0 or b == 0:
        return False

    return max(a, b) % min(a, b) == 0

######################################################################
# choose and prepare the transition from one path to the next

def plan(from_path, to_path):

    if not can_morph_directly(from_path, to_path):

        logger.debug('cross-fading %d lines (%d subpaths) to %d lines '
                     '(%d subpaths)',
                     from_path.line_count, len(from_path.geometry),
                     to_path.line_count, len(to_path.geometry))

        return CrossFade(from_path.geometry, to_path.geometry)

    a = from_path.line_count
    b = to_path.line_count

    factor = max(a, b) // min(a, b)

    from_points = from_path.geometry[0]
    to_points = to_path.geometry[0]

    if b >= a:
        direction = 'refine'
        from_points = subdivide(from_points, factor)
    else:
        direction = 'coarsen'
        to_points = subdivide(to_points, factor)

    assert from_points.shape == to_points.shape

    logger.debug('direct morph %d -> %d lines, factor %d',
                 a, b, factor)

    return DirectMorph(factor, direction, from_points, to_points)

######################################################################
# keyframe at progress t in [0, 1] for a direct morph

def morph_points(morph, t):
    t = min(max(t, 0.), 1.)
    return lerp(morph.from_points, morph.to_points, t)

# (old, new) layer opacities at progress t for a cross-fade
def fade_opacities(t):
    t = min(max(t, 0.), 1.)
    return (1. - t, t)

######################################################################
# per-view transition state machine: idle -> transitioning -> idle.
# The animator never owns a clock; the caller reports the time
# elapsed since request() through tick().

class MorphAnimator:

    def __init__(self, line_width_range=DEFAULT_LINE_WIDTH_RANGE,
                 animation_duration=ANIMATION_DURATION,
                 transition_duration=TRANSITION_DURATION):

        self.line_width_range = line_width_range
        self.animation_duration = animation_duration
        self.transition_duration = transition_duration

        self.current_path = None
        self.generation = 0

        self.plan = None

    @property
    def is_idle(self):
        return self.plan is None

    @property
    def duration(self):
        if isinstance(self.plan, DirectMorph):
            return self.animation_duration
        return self.transition_duration

    def line_width(self, generation):
        """Stroke width for a generation; thins over five generations."""
        lo, hi = self.line_width_range
        per_generation = (hi - lo) / 5
        return hi - per_generation * max(0, min(5, generation - 1))

    def set_path(self, path):
        """Show path immediately, e.g. after the container was resized."""
        self._check_idle()
        self.current_path = path

    def request(self, path):

        self._check_idle()

        if self.current_path is None:
            self.current_path = path
            return None

        self.plan = plan(self.current_path, path)
        self.current_path = path
        self.generation += 1

        return self.plan

    def tick(self, elapsed):

        if self.plan is None:
            raise LSystemError('tick() called with no transition running')

        duration = self.duration
        progress = 1. if duration <= 0 else min(max(elapsed / duration, 0.), 1.)

        current_plan = self.plan

        if isinstance(current_plan, DirectMorph):
            points = morph_points(current_plan, progress)
            opacities = (0., 1.)
            line_width = float(lerp(self.line_width(self.generation - 1),
                                    self.line_width(self.generation),
                                    progress))
        else:
            # the new layer is drawn at its final width while fading in
            points = None
            opacities = fade_opacities(progress)
            line_width = self.line_width(self.generation)

        if progress >= 1.:
            self.plan = None

        return MorphFrame(current_plan, progress, points, opacities, line_width)

    def cancel(self):
        self.plan = None

    def reset(self, generation=0):
        self._check_idle()
        self.current_path = None
        self.generation = generation

    def _check_idle(self):
        if self.plan is not None:
            raise TransitionInProgressError(
                'a transition is already running; wait until it finishes')

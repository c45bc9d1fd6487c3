######################################################################
#
# geometry.py
#
# 2-D point and vector helpers shared by the turtle interpreter and
# the path morpher. Points are float numpy arrays, polylines are
# n-by-2 arrays, and affine transforms are 3-by-3 homogeneous
# matrices applied to row vectors.
#
######################################################################

from collections import namedtuple
import numpy as np

######################################################################
# unit-length offset for a heading given in radians (0 = +x, counter
# clockwise positive)

def unit_vector(heading):
    return np.array([np.cos(heading), np.sin(heading)])

######################################################################
# axis-aligned bounding box

class BoundingBox(namedtuple('BoundingBox', 'min_x, min_y, max_x, max_y')):

    __slots__ = ()

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y

    @property
    def center(self):
        return np.array([0.5 * (self.min_x + self.max_x),
                         0.5 * (self.min_y + self.max_y)])

    def inset(self, dx, dy=None):
        """Shrink the box by dx/dy on every side (negative values grow it)."""
        if dy is None:
            dy = dx
        return BoundingBox(self.min_x + dx, self.min_y + dy,
                           self.max_x - dx, self.max_y - dy)

# box around every point in a sequence of n-by-2 arrays; empty input
# gives the zero box at the origin
def bounding_box(point_arrays):

    arrays = [np.asarray(a, dtype=float).reshape(-1, 2) for a in point_arrays]
    arrays = [a for a in arrays if len(a)]

    if not arrays:
        return BoundingBox(0., 0., 0., 0.)

    allpts = np.vstack(arrays)
    lo = allpts.min(axis=0)
    hi = allpts.max(axis=0)

    return BoundingBox(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))

######################################################################
# homogeneous transforms

def translation(dx, dy):
    return np.array([[1., 0., dx],
                     [0., 1., dy],
                     [0., 0., 1.]])

def scaling(s):
    return np.array([[s, 0., 0.],
                     [0., s, 0.],
                     [0., 0., 1.]])

# transform an n-by-2 array (or a single point) by a 3x3 matrix
def apply_transform(matrix, points):

    pts = np.asarray(points, dtype=float)
    single = (pts.ndim == 1)
    pts = pts.reshape(-1, 2)

    result = pts @ matrix[:2, :2].T + matrix[:2, 2]

    if single:
        return result[0]

    return result

######################################################################
# transform mapping box into a container of the given (width, height),
# inset by margin on every side: translate to origin, scale uniformly
# so the box fits, then translate to the centre of the container.

def fit_transform(box, container_size, margin=0.):

    width, height = container_size

    inner = BoundingBox(0., 0., width, height).inset(margin)

    if inner.width <= 0 or inner.height <= 0:
        raise ValueError('container {} leaves no room inside a margin of '
                         '{}'.format(container_size, margin))

    if box.width <= 0 or box.height <= 0:
        raise ValueError('cannot fit a degenerate box: {}'.format(box))

    scale = min(inner.width / box.width, inner.height / box.height)

    to_origin = translation(-box.min_x, -box.min_y)

    offset = inner.center - 0.5*scale*np.array([box.width, box.height])
    to_center = translation(offset[0], offset[1])

    return to_center @ scaling(scale) @ to_origin

######################################################################
# linear interpolation, t=0 gives a and t=1 gives b

def lerp(a, b, t):
    return (1. - t) * np.asarray(a, dtype=float) + t * np.asarray(b, dtype=float)

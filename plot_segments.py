import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from path_morph import DirectMorph

def plot_segments(segments, image_filename='segment_plot.png'):

    assert len(segments.shape) == 3 and segments.shape[1:] == (2, 2)

    fig = plt.figure()
    ax = fig.add_subplot(1, 1, 1)

    lc = LineCollection(segments, color='b')

    ax.add_collection(lc)
    ax.autoscale()

    ax.axis('equal')
    ax.axis('off')

    fig.savefig(image_filename)
    plt.close(fig)
    print('wrote', image_filename)

######################################################################
# one panel per keyframe of a running transition. The animator is
# ticked at evenly spaced times until it reports the end.

def plot_morph(animator, nframes, container_size,
               image_filename='morph_plot.png'):

    assert nframes >= 2

    width, height = container_size

    fig, axes = plt.subplots(1, nframes, figsize=(2.5*nframes, 2.5),
                             squeeze=False)

    duration = animator.duration

    for i, ax in enumerate(axes[0]):

        frame = animator.tick(duration * i / (nframes - 1))

        if isinstance(frame.plan, DirectMorph):
            layers = [([frame.points], 1.)]
        else:
            old_alpha, new_alpha = frame.opacities
            layers = [(frame.plan.from_geometry, old_alpha),
                      (frame.plan.to_geometry, new_alpha)]

        for geometry, alpha in layers:
            lc = LineCollection([np.asarray(sp) for sp in geometry],
                                color='b', alpha=alpha,
                                linewidth=frame.line_width)
            ax.add_collection(lc)

        ax.set_xlim(0, width)
        ax.set_ylim(0, height)
        ax.set_aspect('equal')
        ax.axis('off')
        ax.set_title('{:.2f}'.format(frame.progress))

    fig.savefig(image_filename)
    plt.close(fig)
    print('wrote', image_filename)

from typing import Iterable, List, Optional

import matplotlib.pyplot as plt
import matplotlib.animation as animation
import numpy as np

from .complex import Complex
from .sampling import to_complex_list


def plot_spectrum(spectrum: Iterable[Complex], ax: Optional[plt.Axes] = None) -> plt.Axes:
    """
    Stem plot of the bin magnitudes of a transform.

    Parameters
    ----------
    spectrum : iterable of `Complex` (e.g. the output of ``fft``)
    ax       : axes to draw on; a new figure is created when omitted

    Returns
    -------
    matplotlib.axes.Axes
    """
    bins = to_complex_list(spectrum)
    mags = np.array([z.magnitude() for z in bins])

    if ax is None:
        _, ax = plt.subplots()
    ax.stem(np.arange(len(mags)), mags)
    ax.set_xlabel("bin")
    ax.set_ylabel("|X[k]|")
    ax.set_title(f"Spectrum ({len(mags)} bins)")
    ax.grid(True, linestyle="--", alpha=0.3)
    return ax


def animate_complex(
    sequence: Iterable["Complex | complex | float"],
    *,
    interval: int = 200,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Animate a sequence of complex values in the 2-D plane.

    Parameters
    ----------
    sequence : iterable of `Complex`, Python `complex`, or real numbers
    interval : delay between frames in **ms**
    show     : call ``plt.show()`` before returning

    Returns
    -------
    matplotlib.animation.FuncAnimation – handy if you need to save().
    """
    seq: List[Complex] = to_complex_list(sequence)
    if not seq:
        raise ValueError("Nothing to animate")

    # Pre-compute limits for a box that fits everything
    xs = [z.real for z in seq]
    ys = [z.imag for z in seq]
    span = max(max(map(abs, xs)), max(map(abs, ys)), 1.0)
    margin = 0.1 * span

    fig, ax = plt.subplots()
    ax.set_aspect("equal")
    ax.set_xlim(-span - margin, span + margin)
    ax.set_ylim(-span - margin, span + margin)
    ax.set_xlabel("Re")
    ax.set_ylabel("Im")
    ax.grid(True, linestyle="--", alpha=0.3)

    point, = ax.plot([], [], "ro", markersize=6)
    trail, = ax.plot([], [], "b-", alpha=0.5, linewidth=1)

    history_x: List[float] = []
    history_y: List[float] = []

    def init():
        history_x.clear()
        history_y.clear()
        point.set_data([], [])
        trail.set_data([], [])
        return point, trail

    def update(frame: int):
        z = seq[frame]
        history_x.append(z.real)
        history_y.append(z.imag)

        point.set_data([z.real], [z.imag])
        trail.set_data(history_x, history_y)
        return point, trail

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(seq),
        init_func=init,
        interval=interval,
        blit=True,
        repeat=False,
    )
    if show:
        plt.show()
    return anim

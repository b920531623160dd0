"""Buffer analysis: turning raw pointer input into strokes.

Example usage::

    from freehand_lib.analysis import split_strokes

    for stroke in split_strokes(buffer):
        print(len(stroke), stroke.start, stroke.end)
"""

from .segmentation import iter_runs, split_sentinel_points, split_strokes

__all__ = ['split_strokes', 'split_sentinel_points', 'iter_runs']

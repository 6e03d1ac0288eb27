"""
Split tall content into overlapping fixed-height windows for static export.

Consecutive windows overlap by ``OVERLAP`` pixels so nothing is cut in half
at a boundary. A final window that would mostly repeat the previous one
(less than ``TRIVIAL_FRACTION`` of a window of content left) is dropped.
"""

from typing import List

from .models import Segment

OVERLAP = 100
TRIVIAL_FRACTION = 0.2


def partition(content_height: int, window_height: int) -> List[Segment]:
    """
    Partition ``content_height`` pixels into windows of ``window_height``.

    Args:
        content_height: Height of the resized content image
        window_height: Height of one exported segment

    Returns:
        Segments ordered by ``start``; empty when either height is not positive
    """
    if content_height <= 0 or window_height <= 0:
        return []

    # A window no taller than the overlap could never advance past it.
    step = window_height - OVERLAP if window_height > OVERLAP else window_height

    segments: List[Segment] = []
    y = 0
    while True:
        end = min(y + window_height, content_height)
        is_last = end == content_height

        if is_last and segments:
            remaining = content_height - y
            if remaining < TRIVIAL_FRACTION * window_height:
                break

        segments.append(Segment(start=y, end=end))
        if is_last:
            break
        y += step

    return segments

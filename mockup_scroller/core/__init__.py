"""
mockup-scroller core module

Frame-sequence synthesis: device geometry, segment partitioning and scroll
offset sequencing. Nothing in here touches the filesystem or spawns processes.
"""

from .device_profile import DeviceProfile, Rect, IPHONE_SE_PORTRAIT
from .models import Segment, FrameRenderSpec, RenderResult, BatchSummary
from .segment_partitioner import partition, OVERLAP
from .scroll_sequencer import (
    FPS,
    PAUSE_FRAMES,
    STATIC_FRAMES,
    MotionConfig,
    MotionModel,
    SpeedTier,
    SwipeStep,
    compute_offsets,
)

__all__ = [
    'DeviceProfile',
    'Rect',
    'IPHONE_SE_PORTRAIT',
    'Segment',
    'FrameRenderSpec',
    'RenderResult',
    'BatchSummary',
    'partition',
    'OVERLAP',
    'FPS',
    'PAUSE_FRAMES',
    'STATIC_FRAMES',
    'MotionConfig',
    'MotionModel',
    'SpeedTier',
    'SwipeStep',
    'compute_offsets',
]

"""
mockup-scroller

Turns full-page screenshots into device-framed scrolling GIFs and
fixed-height screenshot segments.
"""

__version__ = "1.0.0"

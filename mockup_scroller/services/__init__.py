"""
Services package for mockup-scroller.

Contains the batch render pipeline and the upload service.
"""

from .render_pipeline import RenderOptions, ScrollRenderPipeline
from .upload_service import UploadResult, UploadService

__all__ = [
    'RenderOptions',
    'ScrollRenderPipeline',
    'UploadResult',
    'UploadService',
]

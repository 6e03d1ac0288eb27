"""
Media processing exceptions for mockup-scroller.

This module defines custom exceptions for input validation,
frame rendering and GIF encoding.
"""


class MediaValidationError(Exception):
    """Raised when media validation fails"""

    def __init__(self, message: str, file_path: str = None):
        self.file_path = file_path
        self.message = message
        if file_path:
            super().__init__(f"{message} (File: {file_path})")
        else:
            super().__init__(message)


class InputRejectedError(MediaValidationError):
    """Raised when an input image has the wrong format or unsupported dimensions"""
    pass


class FrameRenderingError(Exception):
    """Raised when cropping, masking or compositing a frame fails"""

    def __init__(self, message: str, frame_index: int = None, file_path: str = None):
        self.frame_index = frame_index
        self.file_path = file_path
        self.message = message

        error_msg = message
        if frame_index is not None:
            error_msg += f" (Frame: {frame_index})"
        if file_path:
            error_msg += f" (File: {file_path})"

        super().__init__(error_msg)


class GifEncodingError(Exception):
    """Raised when the external encoder fails to produce a GIF"""

    def __init__(self, message: str, stderr: str = None, file_path: str = None):
        self.stderr = stderr
        self.file_path = file_path
        self.message = message

        error_msg = message
        if file_path:
            error_msg += f" (File: {file_path})"

        super().__init__(error_msg)


class EncoderNotFoundError(Exception):
    """Raised when the ffmpeg binary is not available on PATH"""
    pass

"""
Settings management for mockup-scroller.

This module provides simple accessor functions for configuration values.
All configuration is stored in YAML files (default.yaml, config.yaml).
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .config import ConfigLoader
from .core.device_profile import DeviceProfile
from .core.scroll_sequencer import MotionModel, SpeedTier, SwipeStep

logger = logging.getLogger(__name__)

# Single source of configuration
_config_loader = ConfigLoader()


def load(user_config_path: Optional[str] = None) -> ConfigLoader:
    """Replace the active configuration, e.g. with a file passed on the command line."""
    global _config_loader
    _config_loader = ConfigLoader(user_config_path)
    return _config_loader


def get_config_loader() -> ConfigLoader:
    return _config_loader


# ============================================================================
# Section Accessors
# ============================================================================

def get_app_config() -> Dict[str, Any]:
    """Get application settings"""
    return _config_loader.get_section('app') or {}


def get_device_config() -> Dict[str, Any]:
    """Get device profile configuration"""
    return _config_loader.get_section('device') or {}


def get_animation_config() -> Dict[str, Any]:
    """Get animation configuration"""
    return _config_loader.get_section('animation') or {}


def get_segments_config() -> Dict[str, Any]:
    """Get segment export configuration"""
    return _config_loader.get_section('segments') or {}


def get_validation_config() -> Dict[str, Any]:
    """Get input validation configuration"""
    return _config_loader.get_section('validation') or {}


def get_png_config() -> Dict[str, Any]:
    """Get PNG encoding configuration"""
    return _config_loader.get_section('png') or {}


def get_encoder_config() -> Dict[str, Any]:
    """Get GIF encoder configuration"""
    return _config_loader.get_section('encoder') or {}


def get_storage_config() -> Dict[str, Any]:
    """Get storage configuration"""
    return _config_loader.get_section('storage') or {}


# ============================================================================
# Application
# ============================================================================

def get_log_file() -> Optional[str]:
    return get_app_config().get('log_file')


# ============================================================================
# Device & Animation
# ============================================================================

def get_device_profile() -> DeviceProfile:
    """Device profile built from the ``device`` section."""
    return DeviceProfile.from_dict(get_device_config())


def get_speed_tiers() -> Dict[str, SpeedTier]:
    tiers = get_animation_config().get('speed_tiers', {})
    return {
        name: SpeedTier(
            target_ppf=float(values['target_ppf']),
            min_frames=int(values['min_frames']),
            max_frames=int(values['max_frames']),
        )
        for name, values in tiers.items()
    }


def get_speed_tier(name: str) -> SpeedTier:
    """
    Get a named speed tier.

    Raises:
        ValueError: If the tier is not configured
    """
    tiers = get_speed_tiers()
    if name not in tiers:
        raise ValueError(f"Unknown speed tier '{name}'. Available: {', '.join(sorted(tiers))}")
    return tiers[name]


def get_swipe_pattern() -> Tuple[SwipeStep, ...]:
    steps = get_animation_config().get('swipe_pattern', [])
    return tuple(
        SwipeStep(
            distance_factor=float(step['distance_factor']),
            swipe_frames=int(step['swipe_frames']),
            pause_frames=int(step['pause_frames']),
        )
        for step in steps
    )


def get_default_motion() -> MotionModel:
    return MotionModel(get_animation_config().get('default_motion', MotionModel.CONSTANT.value))


# ============================================================================
# Segments
# ============================================================================

def get_segments_enabled() -> bool:
    return bool(get_segments_config().get('enabled', True))


def get_screen_width() -> int:
    return int(get_segments_config().get('screen_width', 750))


def get_screen_height() -> int:
    return int(get_segments_config().get('screen_height', 1600))


# ============================================================================
# Validation
# ============================================================================

def get_supported_extensions() -> List[str]:
    return [ext.lower() for ext in get_validation_config().get('extensions', ['.png'])]


def get_min_file_bytes() -> int:
    return int(get_validation_config().get('min_file_bytes', 1024))


def get_dimension_limits() -> Dict[str, int]:
    """Minimum width and allowed height range for input images."""
    cfg = get_validation_config()
    return {
        'min_width': int(cfg.get('min_width', 300)),
        'min_height': int(cfg.get('min_height', 500)),
        'max_height': int(cfg.get('max_height', 20000)),
    }


# ============================================================================
# Encoding
# ============================================================================

def get_png_compress_level() -> int:
    level = int(get_png_config().get('compress_level', 6))
    return max(0, min(9, level))


def get_png_optimize() -> bool:
    return bool(get_png_config().get('optimize', False))


def get_ffmpeg_binary() -> str:
    return get_encoder_config().get('binary', 'ffmpeg')


def get_gif_width() -> int:
    return int(get_encoder_config().get('gif_width', 800))


def get_gif_dither() -> str:
    return get_encoder_config().get('dither', 'floyd_steinberg')


def get_palette_stats_mode() -> str:
    return get_encoder_config().get('palette_stats_mode', 'diff')


def get_ffmpeg_version_timeout() -> int:
    return int(get_encoder_config().get('version_timeout', 10))


# ============================================================================
# Storage
# ============================================================================

def get_storage_backend() -> str:
    return get_storage_config().get('backend', 's3')


def get_storage_local_path() -> str:
    return get_storage_config().get('local', {}).get('path', 'uploads')


def get_storage_s3_config() -> Dict[str, Any]:
    return get_storage_config().get('s3', {}) or {}

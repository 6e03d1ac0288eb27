"""
Unit tests for scroll offset sequencing.

Tests cover:
- Static (non-scrolling) content for every motion model
- Pause framing, bounds and monotonicity
- Frame count clamping per speed tier (capped and uncapped)
- Swipe motion: exact easing values, termination, degenerate steps
- Configuration validation
"""
import pytest

from mockup_scroller.core.scroll_sequencer import (
    DEFAULT_SWIPE_PATTERN,
    PAUSE_FRAMES,
    SPEED_TIERS,
    STATIC_FRAMES,
    MotionConfig,
    MotionModel,
    SpeedTier,
    SwipeStep,
    compute_frame_count,
    compute_offsets,
    constant_speed_offsets,
    describe_sequence,
    ease_in_out_cubic,
    round_half_up,
    swipe_offsets,
    uncapped_speed_offsets,
)

VIEWPORT = 1334


def assert_well_formed(offsets, scrollable):
    assert offsets[0] == 0
    assert offsets[-1] == scrollable
    assert all(0 <= o <= scrollable for o in offsets)
    assert all(b >= a for a, b in zip(offsets, offsets[1:]))


class TestStaticContent:

    @pytest.mark.parametrize("model", list(MotionModel))
    @pytest.mark.parametrize("scrollable", [0, -5])
    def test_static_sequence(self, model, scrollable):
        offsets = compute_offsets(model, scrollable, VIEWPORT)
        assert len(offsets) == STATIC_FRAMES == 180
        assert set(offsets) == {0}


class TestConstantSpeed:

    def test_pauses_at_both_ends(self):
        config = MotionConfig(speed=SPEED_TIERS["normal"])
        offsets = constant_speed_offsets(1000, VIEWPORT, config)

        assert offsets[:PAUSE_FRAMES] == [0] * 30
        assert offsets[-PAUSE_FRAMES:] == [1000] * 30
        assert_well_formed(offsets, 1000)

    def test_short_scroll_uses_minimum_duration(self):
        offsets = compute_offsets(MotionModel.CONSTANT, 1000, VIEWPORT, MotionConfig(speed=SPEED_TIERS["normal"]))
        assert len(offsets) == SPEED_TIERS["normal"].min_frames

    @pytest.mark.parametrize("tier_name", ["slow", "normal", "fast"])
    def test_tall_page_within_tier_bounds(self, tier_name):
        tier = SPEED_TIERS[tier_name]
        offsets = compute_offsets(MotionModel.CONSTANT, 4666, VIEWPORT, MotionConfig(speed=tier))

        assert tier.min_frames <= len(offsets) <= tier.max_frames
        assert len(offsets) == compute_frame_count(4666, tier)
        assert_well_formed(offsets, 4666)

    def test_normal_tier_caps_tall_page(self):
        # ceil(4666 / 21.5) + 1 = 219 scroll frames, capped at 270 - 60
        assert compute_frame_count(4666, SPEED_TIERS["normal"]) == 270

    def test_linear_scroll_phase(self):
        offsets = constant_speed_offsets(870, VIEWPORT, MotionConfig(speed=SPEED_TIERS["fast"]))
        motion = offsets[PAUSE_FRAMES:-PAUSE_FRAMES]
        assert len(motion) == 30
        assert motion[0] == 0
        assert motion[-1] == 870
        assert motion[15] == round_half_up(15 / 29 * 870)

    def test_one_pixel_scroll(self):
        offsets = constant_speed_offsets(1, VIEWPORT, MotionConfig())
        assert_well_formed(offsets, 1)
        assert len(offsets) == SPEED_TIERS["normal"].min_frames

    def test_scroll_phase_never_shorter_than_two_frames(self):
        tier = SpeedTier(target_ppf=10000, min_frames=0, max_frames=0)
        offsets = constant_speed_offsets(500, VIEWPORT, MotionConfig(speed=tier))
        assert offsets == [0] * PAUSE_FRAMES + [0, 500] + [500] * PAUSE_FRAMES


class TestUncappedSpeed:

    def test_no_upper_bound(self):
        tier = SPEED_TIERS["normal"]
        offsets = uncapped_speed_offsets(4666, VIEWPORT, MotionConfig(speed=tier))
        assert len(offsets) == 219 + 2 * PAUSE_FRAMES
        assert len(offsets) > tier.max_frames
        assert_well_formed(offsets, 4666)

    def test_minimum_still_applies(self):
        tier = SPEED_TIERS["slow"]
        offsets = uncapped_speed_offsets(100, VIEWPORT, MotionConfig(speed=tier))
        assert len(offsets) == tier.min_frames

    def test_speed_stays_constant_for_long_pages(self):
        tier = SPEED_TIERS["fast"]
        scrollable = 30000
        offsets = uncapped_speed_offsets(scrollable, VIEWPORT, MotionConfig(speed=tier))
        motion = offsets[PAUSE_FRAMES:-PAUSE_FRAMES]
        assert scrollable / (len(motion) - 1) <= tier.target_ppf


class TestSwipe:

    def test_exact_eased_swipes(self):
        config = MotionConfig(swipe_pattern=(SwipeStep(1.0, 5, 2),))
        offsets = swipe_offsets(250, 100, config)
        motion = offsets[PAUSE_FRAMES:-PAUSE_FRAMES]
        assert motion == [
            0, 6, 50, 94, 100,
            100, 100,
            100, 106, 150, 194, 200,
            200, 200,
            200, 203, 225, 247, 250,
        ]

    @pytest.mark.parametrize("scrollable", [1, 500, 1333, 4666, 10000])
    def test_default_pattern_well_formed(self, scrollable):
        offsets = compute_offsets(MotionModel.SWIPE, scrollable, VIEWPORT)
        assert offsets[:PAUSE_FRAMES] == [0] * PAUSE_FRAMES
        assert offsets[-PAUSE_FRAMES:] == [scrollable] * PAUSE_FRAMES
        assert_well_formed(offsets, scrollable)

    def test_increments_sum_to_scrollable(self):
        scrollable = 4666
        offsets = compute_offsets(MotionModel.SWIPE, scrollable, VIEWPORT)
        increments = [b - a for a, b in zip(offsets, offsets[1:]) if b > a]
        assert sum(increments) == scrollable

    def test_no_pause_after_final_swipe(self):
        config = MotionConfig(swipe_pattern=(SwipeStep(0.5, 1, 3),))
        offsets = swipe_offsets(1000, 1000, config)
        assert offsets == [0] * PAUSE_FRAMES + [500, 500, 500, 500, 1000] + [1000] * PAUSE_FRAMES

    def test_pattern_wraps(self):
        pattern = (SwipeStep(0.1, 2, 1), SwipeStep(0.2, 2, 1))
        offsets = swipe_offsets(1000, 1000, MotionConfig(swipe_pattern=pattern))
        held = offsets[PAUSE_FRAMES:-PAUSE_FRAMES]
        # Positions after each swipe: 100, 300, 400, 600, 700, 900, 1000
        for stop in (100, 300, 400, 600, 700, 900):
            assert stop in held
        assert_well_formed(offsets, 1000)

    def test_tiny_distance_factor_terminates(self):
        config = MotionConfig(swipe_pattern=(SwipeStep(0.0001, 2, 0),))
        offsets = swipe_offsets(50, 100, config)
        assert len(offsets) == 2 * PAUSE_FRAMES + 50 * 2
        assert_well_formed(offsets, 50)

    def test_default_pattern_used(self):
        assert MotionConfig().swipe_pattern == DEFAULT_SWIPE_PATTERN


class TestHelpers:

    def test_ease_in_out_cubic_endpoints(self):
        assert ease_in_out_cubic(0.0) == 0.0
        assert ease_in_out_cubic(0.5) == 0.5
        assert ease_in_out_cubic(1.0) == 1.0

    def test_ease_in_out_cubic_monotonic(self):
        values = [ease_in_out_cubic(i / 100) for i in range(101)]
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2

    def test_compute_offsets_accepts_string_model(self):
        assert compute_offsets("uncapped", 1000, VIEWPORT) == uncapped_speed_offsets(1000, VIEWPORT, MotionConfig())

    def test_describe_sequence(self):
        stats = describe_sequence([0, 0, 10, 20, 20], fps=10)
        assert stats['frames'] == 5
        assert stats['duration_seconds'] == 0.5
        assert stats['distance'] == 20
        assert stats['pixels_per_moving_frame'] == 10


class TestConfigValidation:

    def test_speed_tier_rejects_non_positive_speed(self):
        with pytest.raises(ValueError):
            SpeedTier(target_ppf=0, min_frames=90, max_frames=180)

    def test_speed_tier_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            SpeedTier(target_ppf=10, min_frames=200, max_frames=100)

    @pytest.mark.parametrize("args", [(0, 10, 5), (0.5, 0, 5), (0.5, 10, -1)])
    def test_swipe_step_rejects_bad_values(self, args):
        with pytest.raises(ValueError):
            SwipeStep(*args)

    def test_empty_swipe_pattern_rejected(self):
        with pytest.raises(ValueError):
            MotionConfig(swipe_pattern=())

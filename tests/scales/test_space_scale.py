"""Tests for the space scale generator."""

import math

import pytest

from fluidscale.export.serialize import to_dict
from fluidscale.scales.space_scale import (
    calculate_custom_pairs,
    calculate_one_up_pairs,
    calculate_space_scale,
    calculate_space_size,
)
from fluidscale.schemas.config import RelativeTo, SpaceScaleConfig


def _config(**overrides):
    params = dict(
        min_width=320,
        max_width=1240,
        min_size=18,
        max_size=20,
        positive_steps=[1.5, 2, 3, 4, 6],
        negative_steps=[0.75, 0.5, 0.25],
        custom_sizes=["s-l", "2xl-4xl"],
        relative_to=RelativeTo.VIEWPORT_WIDTH,
    )
    params.update(overrides)
    return SpaceScaleConfig(**params)


_SIZES = [
    {
        "label": "3xs",
        "minSize": 5,
        "maxSize": 5,
        "clamp": "clamp(0.3125rem, 0.3125rem + 0vw, 0.3125rem)",
        "clampPx": "clamp(5px, 5px + 0vw, 5px)",
        "multiplier": 0.25,
    },
    {
        "label": "2xs",
        "minSize": 9,
        "maxSize": 10,
        "clamp": "clamp(0.5625rem, 0.5408rem + 0.1087vw, 0.625rem)",
        "clampPx": "clamp(9px, 8.6522px + 0.1087vw, 10px)",
        "multiplier": 0.5,
    },
    {
        "label": "xs",
        "minSize": 14,
        "maxSize": 15,
        "clamp": "clamp(0.875rem, 0.8533rem + 0.1087vw, 0.9375rem)",
        "clampPx": "clamp(14px, 13.6522px + 0.1087vw, 15px)",
        "multiplier": 0.75,
    },
    {
        "label": "s",
        "minSize": 18,
        "maxSize": 20,
        "clamp": "clamp(1.125rem, 1.0815rem + 0.2174vw, 1.25rem)",
        "clampPx": "clamp(18px, 17.3043px + 0.2174vw, 20px)",
        "multiplier": 1,
    },
    {
        "label": "m",
        "minSize": 27,
        "maxSize": 30,
        "clamp": "clamp(1.6875rem, 1.6223rem + 0.3261vw, 1.875rem)",
        "clampPx": "clamp(27px, 25.9565px + 0.3261vw, 30px)",
        "multiplier": 1.5,
    },
    {
        "label": "l",
        "minSize": 36,
        "maxSize": 40,
        "clamp": "clamp(2.25rem, 2.163rem + 0.4348vw, 2.5rem)",
        "clampPx": "clamp(36px, 34.6087px + 0.4348vw, 40px)",
        "multiplier": 2,
    },
    {
        "label": "xl",
        "minSize": 54,
        "maxSize": 60,
        "clamp": "clamp(3.375rem, 3.2446rem + 0.6522vw, 3.75rem)",
        "clampPx": "clamp(54px, 51.913px + 0.6522vw, 60px)",
        "multiplier": 3,
    },
    {
        "label": "2xl",
        "minSize": 72,
        "maxSize": 80,
        "clamp": "clamp(4.5rem, 4.3261rem + 0.8696vw, 5rem)",
        "clampPx": "clamp(72px, 69.2174px + 0.8696vw, 80px)",
        "multiplier": 4,
    },
    {
        "label": "3xl",
        "minSize": 108,
        "maxSize": 120,
        "clamp": "clamp(6.75rem, 6.4891rem + 1.3043vw, 7.5rem)",
        "clampPx": "clamp(108px, 103.8261px + 1.3043vw, 120px)",
        "multiplier": 6,
    },
]

_ONE_UP_PAIRS = [
    ("3xs-2xs", 5, 10, "clamp(0.3125rem, 0.2038rem + 0.5435vw, 0.625rem)",
     "clamp(5px, 3.2609px + 0.5435vw, 10px)"),
    ("2xs-xs", 9, 15, "clamp(0.5625rem, 0.4321rem + 0.6522vw, 0.9375rem)",
     "clamp(9px, 6.913px + 0.6522vw, 15px)"),
    ("xs-s", 14, 20, "clamp(0.875rem, 0.7446rem + 0.6522vw, 1.25rem)",
     "clamp(14px, 11.913px + 0.6522vw, 20px)"),
    ("s-m", 18, 30, "clamp(1.125rem, 0.8641rem + 1.3043vw, 1.875rem)",
     "clamp(18px, 13.8261px + 1.3043vw, 30px)"),
    ("m-l", 27, 40, "clamp(1.6875rem, 1.4049rem + 1.413vw, 2.5rem)",
     "clamp(27px, 22.4783px + 1.413vw, 40px)"),
    ("l-xl", 36, 60, "clamp(2.25rem, 1.7283rem + 2.6087vw, 3.75rem)",
     "clamp(36px, 27.6522px + 2.6087vw, 60px)"),
    ("xl-2xl", 54, 80, "clamp(3.375rem, 2.8098rem + 2.8261vw, 5rem)",
     "clamp(54px, 44.9565px + 2.8261vw, 80px)"),
    ("2xl-3xl", 72, 120, "clamp(4.5rem, 3.4565rem + 5.2174vw, 7.5rem)",
     "clamp(72px, 55.3043px + 5.2174vw, 120px)"),
]


@pytest.fixture(scope="module")
def scale():
    return calculate_space_scale(_config())


class TestCalculateSpaceSize:
    def test_rounds_half_up_to_whole_pixels(self):
        """18 × 0.25 = 4.5 → 5, 20 × 0.25 = 5."""
        size = calculate_space_size(_config(), 0.25, -3)
        assert (size.label, size.min_size, size.max_size) == ("3xs", 5, 5)
        assert isinstance(size.min_size, int)

    def test_base(self):
        size = calculate_space_size(_config(), 1.0, 0)
        assert (size.label, size.min_size, size.max_size, size.multiplier) == ("s", 18, 20, 1.0)


class TestCalculateSpaceScale:
    def test_reference_sizes(self, scale):
        assert to_dict(scale.sizes) == _SIZES

    def test_reference_one_up_pairs(self, scale):
        actual = [
            (p.label, p.min_size, p.max_size, p.clamp, p.clamp_px) for p in scale.one_up_pairs
        ]
        assert actual == _ONE_UP_PAIRS

    def test_reference_custom_pairs(self, scale):
        """'2xl-4xl' names a step this scale does not have and is dropped."""
        assert to_dict(scale.custom_pairs) == [
            {
                "label": "s-l",
                "minSize": 18,
                "maxSize": 40,
                "clamp": "clamp(1.125rem, 0.6467rem + 2.3913vw, 2.5rem)",
                "clampPx": "clamp(18px, 10.3478px + 2.3913vw, 40px)",
            }
        ]

    def test_nine_sizes(self, scale):
        assert len(scale.sizes) == 9

    def test_base_and_smallest(self, scale):
        assert (scale.get("s").min_size, scale.get("s").max_size) == (18, 20)
        assert (scale.get("3xs").min_size, scale.get("3xs").max_size) == (5, 5)

    def test_sizes_ascending(self, scale):
        assert [s.step for s in scale.sizes] == [-3, -2, -1, 0, 1, 2, 3, 4, 5]

    def test_one_up_pair_count(self, scale):
        assert len(scale.one_up_pairs) == len(scale.sizes) - 1

    def test_one_up_pairs_span_neighbours(self, scale):
        for pair, lower, upper in zip(scale.one_up_pairs, scale.sizes, scale.sizes[1:]):
            assert pair.min_size == lower.min_size
            assert pair.max_size == upper.max_size

    def test_multiplier_order_does_not_matter(self, scale):
        shuffled = calculate_space_scale(
            _config(positive_steps=[6, 2, 4, 1.5, 3], negative_steps=[0.25, 0.75, 0.5])
        )
        assert shuffled == scale

    def test_numeric_sort_of_multipliers(self):
        """10 sorts after 8, not before 1.5."""
        result = calculate_space_scale(
            _config(positive_steps=[1.5, 2, 3, 4, 6, 8, 10], custom_sizes=["s-l", "2xl-4xl"])
        )
        assert [s.label for s in result.sizes[-2:]] == ["4xl", "5xl"]
        assert result.get("5xl").multiplier == 10
        assert result.get("5xl").clamp == "clamp(11.25rem, 10.8152rem + 2.1739vw, 12.5rem)"
        assert [p.label for p in result.custom_pairs] == ["s-l", "2xl-4xl"]
        assert result.custom_pairs[1].clamp_px == "clamp(72px, 41.3913px + 9.5652vw, 160px)"

    def test_base_only(self):
        result = calculate_space_scale(_config(positive_steps=[], negative_steps=[]))
        assert [s.label for s in result.sizes] == ["s"]
        assert result.one_up_pairs == ()

    def test_default_unit_is_vi(self):
        result = calculate_space_scale(SpaceScaleConfig(320, 1240, 18, 20))
        assert result.sizes[0].clamp == "clamp(1.125rem, 1.0815rem + 0.2174vi, 1.25rem)"

    def test_idempotent(self):
        assert calculate_space_scale(_config()) == calculate_space_scale(_config())


class TestCustomPairs:
    def test_malformed_and_unknown_entries_dropped(self):
        config = _config(custom_sizes=["s", "-l", "s-", "huge-s", "s-9xl", "xs-m"])
        result = calculate_space_scale(config)
        assert [p.label for p in result.custom_pairs] == ["xs-m"]

    def test_extra_parts_ignored(self):
        result = calculate_space_scale(_config(custom_sizes=["s-l-xl"]))
        assert [p.label for p in result.custom_pairs] == ["s-l"]

    def test_reverse_pair(self):
        """A pair may run from a larger step to a smaller one."""
        result = calculate_space_scale(_config(custom_sizes=["l-s"]))
        [pair] = result.custom_pairs
        assert (pair.min_size, pair.max_size) == (36, 20)
        assert pair.clamp_px.startswith("clamp(20px, ")

    def test_helpers_accept_generated_sizes(self, scale):
        config = _config()
        assert calculate_one_up_pairs(config, scale.sizes) == list(scale.one_up_pairs)
        assert calculate_custom_pairs(config, scale.sizes) == list(scale.custom_pairs)


class TestNonFiniteBase:
    def test_nan_base_size_propagates(self):
        """Non-strict configs accept NaN; sizes carry it instead of raising."""
        scale = calculate_space_scale(
            SpaceScaleConfig(320, 1240, float("nan"), 20, positive_steps=[2])
        )
        assert [s.label for s in scale.sizes] == ["s", "m"]
        for size in scale.sizes:
            assert math.isnan(size.min_size)
            assert "NaN" in size.clamp
        assert scale.get("m").max_size == 40

"""Tests for BubbleConfig defaults, derived values, and validation."""
from __future__ import annotations

import pytest

from tick_bubble import BubbleConfig


class TestDefaults:
    def test_derived_geometry(self) -> None:
        """Columns, spawn point, and loss line follow from the canvas."""
        config = BubbleConfig()
        assert config.columns == 11
        assert config.half_size == 20.0
        assert (config.spawn_x, config.spawn_y) == (220.0, 410.0)
        assert config.loss_line == 370.0

    def test_explicit_paddle(self) -> None:
        """An explicit paddle_y overrides the derived loss line."""
        assert BubbleConfig(paddle_y=250.0).loss_line == 250.0

    def test_with_canvas_copies(self) -> None:
        """with_canvas returns a resized copy and keeps other settings."""
        config = BubbleConfig(win_threshold=7)
        resized = config.with_canvas(600.0, 800.0)
        assert resized.columns == 15
        assert resized.win_threshold == 7
        assert config.canvas_width == 440.0


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cell_size": 0.0},
            {"canvas_width": float("nan")},
            {"canvas_width": 20.0},
            {"shot_speed": 40.0},
            {"collision_epsilon": 20.0},
            {"collision_epsilon": -1.0},
            {"color_palette": ("a", "b", "c")},
            {"color_palette": ("a", "b", "c", "a")},
            {"win_threshold": 0},
            {"match_threshold": 1},
            {"row_insert_interval_ms": 0},
            {"pop_duration_ms": 0},
            {"loading_delay_ms": -5},
            {"initial_rows": -1},
            {"initial_rows": 10},
            {"initial_rows": 1, "paddle_y": 40.0},
            {"min_launch_angle_deg": 90.0},
            {"min_launch_angle_deg": -1.0},
            {"pop_easing": "bounce"},
            {"tps": 0},
            {"launcher_margin": 600.0},
            {"paddle_y": float("inf")},
        ],
    )
    def test_rejected(self, kwargs: dict) -> None:
        """Invalid settings raise ValueError at construction."""
        with pytest.raises(ValueError):
            BubbleConfig(**kwargs)

    def test_frozen(self) -> None:
        """Configs are immutable."""
        config = BubbleConfig()
        with pytest.raises(AttributeError):
            config.cell_size = 10.0  # type: ignore[misc]

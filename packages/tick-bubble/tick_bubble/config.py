"""Bubble game configuration dataclass."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from tick_tween import resolve

DEFAULT_PALETTE: tuple[str, ...] = (
    "#ff4d4d",
    "#4dff88",
    "#4da6ff",
    "#ffff4d",
    "#ff4dff",
)


@dataclass(frozen=True)
class BubbleConfig:
    """Immutable configuration for a bubble-shooter game.

    Attributes:
        cell_size: Lattice cell edge (and bubble diameter) in pixels.
        canvas_width: Play field width in pixels.
        canvas_height: Play field height in pixels.
        color_palette: Colours drawn uniformly for rows and shots.
        win_threshold: Popped bubbles required to win.
        shot_speed: Projectile speed in pixels per tick.
        row_insert_interval_ms: Period of the grid advance timer.
        pop_duration_ms: Length of the shrink/fade pop animation.
        collision_epsilon: Tolerance for hit and adjacency distances.
        initial_rows: Rows generated on start and reset.
        launcher_margin: Distance from the bottom edge to the launcher.
        paddle_y: Loss line. Defaults to one cell above the launcher.
        loading_delay_ms: Auto enter-play delay (0 waits for the host).
        min_launch_angle_deg: Shallowest accepted aim above horizontal.
        pop_easing: Easing curve applied to pop scale and alpha.
        match_threshold: Minimum connected set size that pops.
        tps: Engine ticks per second.
        seed: RNG seed; random when None.
    """

    cell_size: float = 40.0
    canvas_width: float = 440.0
    canvas_height: float = 510.0
    color_palette: tuple[str, ...] = DEFAULT_PALETTE
    win_threshold: int = 20
    shot_speed: float = 10.0
    row_insert_interval_ms: int = 10_000
    pop_duration_ms: int = 300
    collision_epsilon: float = 1.0
    initial_rows: int = 1
    launcher_margin: float = 100.0
    paddle_y: float | None = None
    loading_delay_ms: int = 0
    min_launch_angle_deg: float = 10.0
    pop_easing: str = "linear"
    match_threshold: int = 3
    tps: int = 50
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("cell_size", "canvas_width", "canvas_height", "shot_speed"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number, got {value}")
        if self.canvas_width < self.cell_size:
            raise ValueError(
                f"canvas_width must fit at least one cell, got {self.canvas_width}"
            )
        if self.shot_speed >= self.cell_size:
            raise ValueError(
                f"shot_speed must be < cell_size ({self.cell_size}), got {self.shot_speed}"
            )
        if not 0 <= self.collision_epsilon < self.cell_size / 2:
            raise ValueError(
                f"collision_epsilon must be in [0, cell_size/2), got {self.collision_epsilon}"
            )
        if len(self.color_palette) < 4:
            raise ValueError(
                f"color_palette needs at least 4 colours, got {len(self.color_palette)}"
            )
        if len(set(self.color_palette)) != len(self.color_palette):
            raise ValueError("color_palette entries must be unique")
        if self.win_threshold < 1:
            raise ValueError(f"win_threshold must be >= 1, got {self.win_threshold}")
        if self.match_threshold < 2:
            raise ValueError(f"match_threshold must be >= 2, got {self.match_threshold}")
        if self.row_insert_interval_ms <= 0:
            raise ValueError(
                f"row_insert_interval_ms must be > 0, got {self.row_insert_interval_ms}"
            )
        if self.pop_duration_ms <= 0:
            raise ValueError(f"pop_duration_ms must be > 0, got {self.pop_duration_ms}")
        if self.loading_delay_ms < 0:
            raise ValueError(f"loading_delay_ms must be >= 0, got {self.loading_delay_ms}")
        if self.initial_rows < 0:
            raise ValueError(f"initial_rows must be >= 0, got {self.initial_rows}")
        if not 0 <= self.min_launch_angle_deg < 90:
            raise ValueError(
                f"min_launch_angle_deg must be in [0, 90), got {self.min_launch_angle_deg}"
            )
        resolve(self.pop_easing)
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if not 0 <= self.launcher_margin < self.canvas_height:
            raise ValueError(
                f"launcher_margin must be in [0, canvas_height), got {self.launcher_margin}"
            )
        if self.paddle_y is not None and not math.isfinite(self.paddle_y):
            raise ValueError(f"paddle_y must be finite, got {self.paddle_y}")
        if self.initial_rows and self.initial_rows * self.cell_size >= self.loss_line:
            raise ValueError(
                f"{self.initial_rows} initial rows reach the loss line at {self.loss_line}"
            )

    @property
    def half_size(self) -> float:
        return self.cell_size / 2

    @property
    def columns(self) -> int:
        return int(self.canvas_width // self.cell_size)

    @property
    def spawn_x(self) -> float:
        return self.canvas_width / 2

    @property
    def spawn_y(self) -> float:
        return self.canvas_height - self.launcher_margin

    @property
    def loss_line(self) -> float:
        if self.paddle_y is not None:
            return self.paddle_y
        return self.spawn_y - self.cell_size

    def with_canvas(self, width: float, height: float) -> BubbleConfig:
        """Return a copy resized to a new canvas."""
        return dataclasses.replace(self, canvas_width=width, canvas_height=height)

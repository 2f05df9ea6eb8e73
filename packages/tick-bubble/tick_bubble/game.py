"""BubbleGame - phase state machine wiring input, ticks, and timers."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick import Engine
from tick_physics import vec
from tick_schedule import Periodic, Timer, make_periodic_system, make_timer_system
from tick_signal import SignalBus, make_signal_system

from tick_bubble.components import AimVector, Phase, Projectile
from tick_bubble.config import BubbleConfig
from tick_bubble.grid import GridModel
from tick_bubble.pop import PopAnimator
from tick_bubble.projectile import Outcome, land, step_projectile
from tick_bubble.snapshot import BubbleView, GameView, ProjectileView
from tick_bubble.spawn import SpawnGenerator

if TYPE_CHECKING:
    from tick import EntityId, TickContext, World

logger = logging.getLogger(__name__)

LOADING_TIMER = "loading"
ROW_GROWTH = "row_growth"

_PLAYING = (Phase.AIMING, Phase.SHOT)


@dataclass
class GameState:
    """All mutable game state. Only BubbleGame writes to it."""

    phase: Phase
    grid: GridModel
    projectile: Projectile | None = None
    aim: AimVector | None = None
    dragging: bool = False
    popped_count: int = 0


class BubbleGame:
    """Top-level bubble-shooter simulation.

    The host feeds pointer events and calls ``tick()`` once per frame;
    everything else (projectile flight, pop animations, row growth, the
    loading delay) advances on the engine clock. ``snapshot()`` returns an
    immutable view for drawing.
    """

    def __init__(self, config: BubbleConfig | None = None) -> None:
        self._config = config if config is not None else BubbleConfig()
        self._engine = Engine(tps=self._config.tps, seed=self._config.seed)
        self._spawner = SpawnGenerator(self._config.color_palette, self._engine.random)
        self._pops = PopAnimator(self._config.pop_duration_ms, self._config.pop_easing)
        self._state = GameState(phase=Phase.LOADING, grid=GridModel(self._config.cell_size))
        self.bus = SignalBus()

        world = self._engine.world
        self._clock_eid = world.spawn()

        self._engine.add_system(make_timer_system(self._on_timer))
        self._engine.add_system(self._projectile_system)
        self._engine.add_system(self._pop_system)
        self._engine.add_system(make_periodic_system(self._on_periodic))
        self._engine.add_system(make_signal_system(self.bus))

        self._fill_grid()
        if self._config.loading_delay_ms > 0:
            world.attach(
                self._clock_eid,
                Timer(
                    name=LOADING_TIMER,
                    remaining=self._engine.clock.ticks_for(self._config.loading_delay_ms),
                ),
            )

    # -- Read-only state --

    @property
    def config(self) -> BubbleConfig:
        return self._config

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def grid(self) -> GridModel:
        return self._state.grid

    @property
    def popped_count(self) -> int:
        return self._state.popped_count

    @property
    def won(self) -> bool:
        return self._state.phase is Phase.WIN

    @property
    def lost(self) -> bool:
        return self._state.phase is Phase.GAME_OVER

    @property
    def pops(self) -> PopAnimator:
        return self._pops

    # -- Commands --

    def tick(self, n: int = 1) -> None:
        """Advance the simulation ``n`` fixed ticks (one by default)."""
        self._engine.run(n)

    def enter_play(self) -> bool:
        """Leave the loading phase. Ignored in any other phase."""
        if self._state.phase is not Phase.LOADING:
            return False
        self._engine.world.detach(self._clock_eid, Timer)
        self._start_round()
        return True

    def reset(self) -> None:
        """Start a fresh game from any phase. Drops in-flight pops and the shot."""
        self._pops.clear()
        self._state.grid.clear()
        self._state.popped_count = 0
        self._state.aim = None
        self._state.dragging = False
        self._state.projectile = None
        self._fill_grid()
        self._engine.world.detach(self._clock_eid, Timer)
        logger.info("game reset")
        self._start_round()

    def resize(self, width: float, height: float) -> bool:
        """Adopt a new canvas size. Positions are kept as they are.

        A size the current settings cannot fit is dropped and the old
        canvas stays.
        """
        try:
            config = self._config.with_canvas(width, height)
        except (TypeError, ValueError) as exc:
            logger.debug("dropped resize to %rx%r: %s", width, height, exc)
            return False
        self._config = config
        logger.debug("canvas resized to %sx%s", width, height)
        return True

    def pointer_down(self, x: float, y: float) -> bool:
        if self._state.phase is not Phase.AIMING:
            return False
        if not _finite(x, y):
            logger.debug("dropped non-finite pointer (%r, %r)", x, y)
            return False
        self._state.dragging = True
        return self._aim_at(x, y)

    def pointer_move(self, x: float, y: float) -> bool:
        if self._state.phase is not Phase.AIMING or not self._state.dragging:
            return False
        if not _finite(x, y):
            logger.debug("dropped non-finite pointer (%r, %r)", x, y)
            return False
        return self._aim_at(x, y)

    def pointer_up(self) -> bool:
        """Release the drag. Launches the shot when a valid aim is held."""
        aim = self._state.aim
        self._state.aim = None
        self._state.dragging = False
        if self._state.phase is not Phase.AIMING or self._state.projectile is None:
            return False
        if aim is None or aim.dy >= 0:
            logger.debug("shot cancelled, no upward aim")
            return False
        vx, vy = vec.scale(vec.normalize((aim.dx, aim.dy)), self._config.shot_speed)
        self._state.projectile.vx = vx
        self._state.projectile.vy = vy
        self._set_phase(Phase.SHOT)
        return True

    def pointer_cancel(self) -> None:
        self._state.aim = None
        self._state.dragging = False

    # -- Snapshot --

    def snapshot(self) -> GameView:
        state = self._state
        bubbles = tuple(
            BubbleView(
                id=b.id,
                x=b.x,
                y=b.y,
                color=b.color,
                state=b.anim_state,
                progress=b.popping_progress,
                scale=1.0 if b.settled else self._pops.scale(b.popping_progress),
                alpha=1.0 if b.settled else self._pops.scale(b.popping_progress),
            )
            for b in state.grid
        )
        projectile = None
        loaded_color = None
        if state.projectile is not None:
            p = state.projectile
            if state.phase is Phase.SHOT:
                projectile = ProjectileView(x=p.x, y=p.y, vx=p.vx, vy=p.vy, color=p.color)
            elif state.phase is Phase.AIMING:
                loaded_color = p.color
        playing = state.phase in _PLAYING
        return GameView(
            phase=state.phase,
            tick_number=self._engine.clock.tick_number,
            bubbles=bubbles,
            projectile=projectile,
            loaded_color=loaded_color,
            next_color=self._spawner.next_color if playing else None,
            aim=(state.aim.dx, state.aim.dy) if state.aim is not None else None,
            popped_count=state.popped_count,
            win_threshold=self._config.win_threshold,
            loss_line=self._config.loss_line,
            row_countdown=self._row_countdown(),
        )

    def _row_countdown(self) -> int | None:
        world = self._engine.world
        if not world.has(self._clock_eid, Periodic):
            return None
        return world.get(self._clock_eid, Periodic).remaining

    # -- Transitions --

    def _set_phase(self, phase: Phase) -> None:
        old = self._state.phase
        self._state.phase = phase
        if old is not phase:
            logger.info("phase %s -> %s", old.value, phase.value)
            self.bus.publish("phase", old=old, new=phase)

    def _fill_grid(self) -> None:
        for _ in range(self._config.initial_rows):
            self._state.grid.advance(
                self._spawner.spawn_row(self._config.canvas_width, self._config.cell_size)
            )

    def _respawn(self) -> None:
        self._state.projectile = self._spawner.spawn_projectile(
            self._config.spawn_x, self._config.spawn_y
        )

    def _start_round(self) -> None:
        self._respawn()
        self._engine.world.attach(
            self._clock_eid,
            Periodic(
                name=ROW_GROWTH,
                interval=self._engine.clock.ticks_for(self._config.row_insert_interval_ms),
            ),
        )
        self._set_phase(Phase.AIMING)

    def _finish(self, phase: Phase) -> None:
        """Freeze the game in GAME_OVER or WIN."""
        self._state.projectile = None
        self._state.aim = None
        self._state.dragging = False
        self._engine.world.detach(self._clock_eid, Periodic)
        self._set_phase(phase)

    def _lose(self, reason: str) -> None:
        logger.info("game over (%s) with %d popped", reason, self._state.popped_count)
        self._finish(Phase.GAME_OVER)
        self.bus.publish("lost", reason=reason)

    def _win(self) -> None:
        logger.info("won with %d popped", self._state.popped_count)
        self._finish(Phase.WIN)
        self.bus.publish("won", popped=self._state.popped_count)

    def _aim_at(self, x: float, y: float) -> bool:
        dx = x - self._config.spawn_x
        dy = y - self._config.spawn_y
        if dy >= 0:
            logger.debug("ignored aim below the launcher (dy=%.1f)", dy)
            return False
        angle = math.degrees(math.atan2(-dy, abs(dx)))
        if angle < self._config.min_launch_angle_deg:
            logger.debug("ignored aim %.1f degrees above horizontal", angle)
            return False
        self._state.aim = AimVector(dx, dy)
        return True

    def _land(self, projectile: Projectile, ctx: TickContext) -> None:
        state = self._state
        landing = land(projectile, state.grid, self._config, self._spawner)
        state.projectile = None
        if landing is not None:
            self.bus.publish(
                "landed",
                bubble_id=landing.bubble.id,
                row=landing.row,
                col=landing.col,
                color=landing.bubble.color,
            )
            if len(landing.matches) >= self._config.match_threshold:
                self._pops.schedule(state.grid, landing.matches, ctx.elapsed_ms)
                self.bus.publish("matched", ids=landing.matches)
        if state.grid.breaches_line(self._config.loss_line):
            self._lose("landing")
            return
        self._respawn()
        self._set_phase(Phase.AIMING)

    # -- Systems --

    def _projectile_system(self, world: World, ctx: TickContext) -> None:
        state = self._state
        if state.phase is not Phase.SHOT or state.projectile is None:
            return
        outcome = step_projectile(state.projectile, state.grid, self._config)
        if outcome is Outcome.HIT:
            self._land(state.projectile, ctx)
        elif outcome is Outcome.MISSED:
            logger.debug("shot left the field")
            self._respawn()
            self._set_phase(Phase.AIMING)

    def _pop_system(self, world: World, ctx: TickContext) -> None:
        state = self._state
        if state.phase not in _PLAYING:
            return
        for group in self._pops.update(state.grid, ctx.elapsed_ms):
            state.popped_count += len(group.ids)
            self.bus.publish("popped", count=len(group.ids), total=state.popped_count)
            logger.debug("popped %d, total %d", len(group.ids), state.popped_count)
            if state.popped_count >= self._config.win_threshold and state.phase in _PLAYING:
                self._win()

    def _on_timer(self, world: World, ctx: TickContext, eid: EntityId, timer: Timer) -> None:
        if timer.name == LOADING_TIMER:
            self.enter_play()

    def _on_periodic(
        self, world: World, ctx: TickContext, eid: EntityId, periodic: Periodic
    ) -> None:
        if periodic.name != ROW_GROWTH or self._state.phase not in _PLAYING:
            return
        row = self._spawner.spawn_row(self._config.canvas_width, self._config.cell_size)
        self._state.grid.advance(row)
        self.bus.publish("row_added", count=len(row))
        logger.debug("grid advanced by one row of %d", len(row))
        if self._state.grid.breaches_line(self._config.loss_line):
            self._lose("row_advance")


def _finite(x: float, y: float) -> bool:
    try:
        return math.isfinite(x) and math.isfinite(y)
    except TypeError:
        return False

"""
stepper.py — Step-by-Step Playback Driver
==========================================
The Stepper is the ONLY object the UI interacts with during a run.  It
owns a SearchEngine, buffers every SearchState it has produced (enabling
rewind), and exposes a clean play/pause/next/prev/speed API.

State machine:
    IDLE     →  start()  →  PAUSED
    PAUSED   →  play()   →  PLAYING
    PLAYING  →  pause()  →  PAUSED
    PLAYING  →  (engine terminal or step cap hit) → FINISHED
    any      →  reset()  →  IDLE

Step cap:
  `max_steps` bounds how many expansions the stepper will request.  On a
  malformed scenario that never terminates, hitting the cap finishes
  playback with `limit_reached = True` and a logged warning.  It is a
  reported condition, not an exception.

Thread safety:
  Not thread-safe.  Drive it from one thread (the Flask request, a Tk/Qt
  main loop, …).  Two side-by-side visualizations need two Steppers with
  two engines; they share nothing.
"""

import time
from enum import Enum
from typing import Callable, List, Optional

from algorithms.state import SearchState
from engine.search import SearchEngine
from logger import get_logger

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.5,    # teaching mode
    "medium": 0.8,
    "fast":   0.3,    # demo mode
    "turbo":  0.1,
}

DEFAULT_MAX_STEPS = 500


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        engine        : The SearchEngine being driven (None while IDLE).
        states        : Every SearchState produced so far; states[0] is the initial one.
        current_idx   : Index into `states` currently displayed.
        state         : Current StepperState.
        speed         : Seconds between auto-advance ticks.
        max_steps     : Cap on expansions requested from the engine.
        limit_reached : True once the cap stopped a non-terminated search.
        on_step       : Optional callback(SearchState) fired whenever the displayed
                        snapshot changes.  The UI hooks its re-render here.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[SearchState], None]] = None,
        max_steps: int = DEFAULT_MAX_STEPS,
        speed: str = "medium",
    ):
        self.engine:        Optional[SearchEngine] = None
        self.states:        List[SearchState]      = []
        self.current_idx:   int                    = -1
        self.state:         StepperState           = StepperState.IDLE
        self.speed:         float                  = SPEED_PRESETS.get(speed, SPEED_PRESETS["medium"])
        self.max_steps:     int                    = max_steps
        self.limit_reached: bool                   = False
        self.on_step:       Optional[Callable[[SearchState], None]] = on_step

        self._last_tick: float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, engine: SearchEngine) -> None:
        """Attach an engine and show its current snapshot."""
        self.engine        = engine
        self.states        = [engine.state]
        self.limit_reached = False
        self.state         = StepperState.FINISHED if engine.is_terminal else StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Back to IDLE; caller must call start() again with a fresh engine."""
        self.engine        = None
        self.states        = []
        self.current_idx   = -1
        self.limit_reached = False
        self.state         = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at the end."""
        target = self.current_idx + 1
        if target >= len(self.states):
            if not self._fetch_next():
                self.state = StepperState.FINISHED
                return False
        self._goto(target)
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index, expanding forward if needed."""
        while idx >= len(self.states):
            if not self._fetch_next():
                break
        if 0 <= idx < len(self.states):
            self._goto(idx)
            return True
        return False

    def rewind(self) -> None:
        """Jump back to step 0."""
        if self.states:
            self._goto(0)

    def jump_to_end(self) -> None:
        """Expand until terminal (or the cap) and show the last snapshot."""
        while self._fetch_next():
            pass
        if self.states:
            self._goto(len(self.states) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.FINISHED, StepperState.IDLE):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically (e.g. every 50 ms).  If playing and enough time
        has elapsed, advances one step.  Returns True if a step was taken.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if now - self._last_tick < self.speed:
            return False
        self._last_tick = now
        if not self.next_step():
            return False
        if self.is_at_end and self._exhausted:
            self.state = StepperState.FINISHED
        return True

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(0.02, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_state(self) -> Optional[SearchState]:
        if 0 <= self.current_idx < len(self.states):
            return self.states[self.current_idx]
        return None

    @property
    def total_steps_fetched(self) -> int:
        return len(self.states)

    @property
    def is_at_end(self) -> bool:
        return self.current_idx == len(self.states) - 1

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    @property
    def max_frontier_size(self) -> int:
        return max((s.max_frontier_size for s in self.states), default=0)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    @property
    def _exhausted(self) -> bool:
        return self.engine is None or self.engine.is_terminal or self.limit_reached

    def _fetch_next(self) -> bool:
        """Ask the engine for one more snapshot.  False when there is none."""
        if self._exhausted:
            return False
        if len(self.states) - 1 >= self.max_steps:
            self.limit_reached = True
            log.warning(
                "%s on '%s' stopped at the %d-step cap without terminating",
                self.engine.algo.short, self.engine.scenario.key, self.max_steps,
            )
            return False
        self.states.append(self.engine.step())
        return True

    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify(self.states[idx] if 0 <= idx < len(self.states) else None)

    def _notify(self, state: Optional[SearchState]) -> None:
        if self.on_step and state is not None:
            self.on_step(state)

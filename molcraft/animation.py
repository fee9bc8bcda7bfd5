# molcraft/animation.py
"""
SPIN: Continuous Rotation of the 3D Structure
=============================================

The 3D view turns slowly about the vertical axis. This is a presentation
affordance, kept entirely outside the geometry functions:

    render loop ──tick(now)──► SpinClock ──► SpinState(angle) ──► root group rotation

- SpinState is an immutable value: advance(elapsed) returns a NEW state with
  angle + rate * elapsed.
- SpinClock holds the current state for a live loop. It measures elapsed
  time between ticks, can be paused, and is disposed when the view is torn
  down. A disposed clock holds no state and refuses to tick.

For renderers that cannot tick (a plotly figure is static once sent to the
browser), `spin_frames()` pre-computes the successive states for an
animation at a fixed frame rate.
"""

import math
import time
from dataclasses import dataclass, replace
from typing import Callable, Iterator, Optional

import numpy as np

from .geometry import quaternion_about_axis

VERTICAL_AXIS = (0.0, 1.0, 0.0)
DEFAULT_SPIN_RATE = 0.1  # rad/s


@dataclass(frozen=True)
class SpinState:
    """
    Rotation of the whole molecule about VERTICAL_AXIS.

    Parameters:
    -----------
    angle : float
        Current angle (radians), kept in [0, 2*pi)

    rate : float
        Angular speed (radians per second)
    """
    angle: float = 0.0
    rate: float = DEFAULT_SPIN_RATE

    def advance(self, elapsed: float) -> 'SpinState':
        """State after `elapsed` seconds (negative elapsed is ignored)."""
        if elapsed <= 0:
            return self
        return replace(self, angle=(self.angle + self.rate * elapsed) % (2 * math.pi))

    def orientation(self) -> np.ndarray:
        """Quaternion (x, y, z, w) for the current angle."""
        return quaternion_about_axis(VERTICAL_AXIS, self.angle)


class SpinClock:
    """
    Per-frame driver for a SpinState.

    Example:
    --------
    >>> clock = SpinClock()
    >>> state = clock.tick()        # first tick starts the clock
    >>> state = clock.tick()        # later ticks advance by elapsed time
    >>> clock.dispose()             # view torn down
    """

    def __init__(
        self,
        state: Optional[SpinState] = None,
        now: Callable[[], float] = time.monotonic,
    ):
        self._state = state if state is not None else SpinState()
        self._now = now
        self._last: Optional[float] = None
        self._paused = False
        self._disposed = False

    @property
    def state(self) -> SpinState:
        self._check_alive()
        return self._state

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def disposed(self) -> bool:
        return self._disposed

    def tick(self, now: Optional[float] = None) -> SpinState:
        """Advance by the time since the previous tick and return the new state."""
        self._check_alive()
        now = self._now() if now is None else now
        if not self._paused and self._last is not None:
            self._state = self._state.advance(now - self._last)
        self._last = now
        return self._state

    def pause(self) -> None:
        """Stop advancing (e.g. scene hidden). The angle is kept."""
        self._check_alive()
        self._paused = True

    def resume(self) -> None:
        """Resume without jumping over the paused interval."""
        self._check_alive()
        self._paused = False
        self._last = None

    def dispose(self) -> None:
        """Release the state. Any later call except `dispose` raises."""
        self._state = None
        self._last = None
        self._disposed = True

    def _check_alive(self) -> None:
        if self._disposed:
            raise RuntimeError("SpinClock has been disposed")


def spin_frames(state: SpinState, n_frames: int, fps: float = 30.0) -> Iterator[SpinState]:
    """Yield `n_frames` states starting at `state`, spaced 1/fps seconds apart."""
    dt = 1.0 / fps
    for _ in range(n_frames):
        yield state
        state = state.advance(dt)

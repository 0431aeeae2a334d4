"""
Driving-mix normalizer

The driving mix splits total driving into city / state highway / national highway
percentages. The widget is a bar with two draggable dividers d0 <= d1:

    city = d0, state = d1 - d0, national = 100 - d1

so every emitted mix is three non-negative integers summing to exactly 100.
"""
from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Tuple

from config.range_model_constants import BASELINE_SCENARIO, INPUT_BOUNDS
from src.utils.logger import get_logger
from src.utils.rounding import round_half_up, clamp
from config.logging_config import is_detailed_logging_enabled

logger = get_logger('driving_mix')

SEGMENTS = ('city', 'state', 'national')
DIVIDER_INDICES = (0, 1)

MIX_MIN, MIX_MAX = INPUT_BOUNDS['mix_pct']


def clamp_percent(raw_percent: float) -> int:
    """Clamp to [0, 100], then round to the nearest integer. NaN counts as 0."""
    value = float(raw_percent)
    if math.isnan(value):
        return MIX_MIN
    return int(round_half_up(clamp(value, MIX_MIN, MIX_MAX)))


def _is_nan(raw_percent) -> bool:
    return math.isnan(float(raw_percent))


@dataclass(frozen=True)
class DrivingMix:
    city_pct: int = BASELINE_SCENARIO['city_pct']
    state_pct: int = BASELINE_SCENARIO['state_pct']
    national_pct: int = BASELINE_SCENARIO['national_pct']

    @property
    def total(self) -> int:
        return self.city_pct + self.state_pct + self.national_pct

    def get(self, segment: str) -> int:
        if segment not in SEGMENTS:
            raise ValueError(f"Unknown driving-mix segment: {segment!r}")
        return getattr(self, f'{segment}_pct')

    def fractions(self) -> Tuple[float, float, float]:
        return (self.city_pct / 100.0, self.state_pct / 100.0, self.national_pct / 100.0)

    def as_dict(self) -> Dict[str, int]:
        return {segment: self.get(segment) for segment in SEGMENTS}

    @classmethod
    def from_dict(cls, values: Dict[str, int]) -> "DrivingMix":
        return cls(values['city'], values['state'], values['national'])


BASELINE_MIX = DrivingMix()


@dataclass(frozen=True)
class DividerState:
    """Positions of the two dividers on the 0-100 bar"""
    d0: int
    d1: int

    @classmethod
    def from_mix(cls, mix: DrivingMix) -> "DividerState":
        return cls(mix.city_pct, mix.city_pct + mix.state_pct)

    def to_mix(self) -> DrivingMix:
        return DrivingMix(self.d0, self.d1 - self.d0, 100 - self.d1)

    def set_divider_position(self, which: int, raw_percent: float) -> "DividerState":
        """Move one divider, never letting it cross the other. A NaN position is ignored."""
        if which not in DIVIDER_INDICES:
            raise ValueError(f"Divider index must be 0 or 1, got {which!r}")
        if _is_nan(raw_percent):
            return self
        percent = clamp_percent(raw_percent)
        if which == 0:
            return DividerState(min(percent, self.d1), self.d1)
        return DividerState(self.d0, max(percent, self.d0))

    def set_positions(self, raw_d0: float, raw_d1: float) -> "DividerState":
        """
        Move both dividers in one event. When divider 1 moves right it goes first,
        otherwise divider 0 does, so neither is clamped against a stale partner.
        """
        if not _is_nan(raw_d1) and clamp_percent(raw_d1) >= self.d1:
            return self.set_divider_position(1, raw_d1).set_divider_position(0, raw_d0)
        return self.set_divider_position(0, raw_d0).set_divider_position(1, raw_d1)


def adjust_mix_proportionally(mix: DrivingMix, changed_segment: str, new_value: float) -> DrivingMix:
    """
    Set one segment directly and spread the remainder over the other two in their
    previous ratio. The later of the two other segments (in city, state, national
    order) absorbs the rounding remainder, so the total is always exactly 100.
    """
    if changed_segment not in SEGMENTS:
        raise ValueError(f"Unknown driving-mix segment: {changed_segment!r}")
    if _is_nan(new_value):
        logger.debug(f"Ignoring NaN value for {changed_segment}")
        return mix

    value = clamp_percent(new_value)
    remainder = 100 - value
    first, last = [segment for segment in SEGMENTS if segment != changed_segment]
    prior_first = max(0, mix.get(first))
    prior_last = max(0, mix.get(last))
    prior_total = prior_first + prior_last

    if prior_total <= 0:
        # Nothing to scale: the whole remainder goes to the later segment
        logger.debug(f"Degenerate mix redistribution, {remainder}% assigned to {last}")
        first_value = 0
    else:
        first_value = round_half_up(remainder * prior_first / prior_total)

    values = {changed_segment: value, first: first_value, last: remainder - first_value}
    return DrivingMix.from_dict(values)


def normalize_mix(city: Optional[float], state: Optional[float], national: Optional[float]) -> DrivingMix:
    """
    Scale an arbitrary triple so it sums to 100. City and state are rounded, national
    absorbs the drift. State is capped so national can never go negative.
    NaN counts as 0; infinite segments share the whole mix.
    """
    values = [float(v or 0) for v in (city, state, national)]
    values = [0.0 if math.isnan(v) else max(0.0, v) for v in values]
    if any(math.isinf(v) for v in values):
        values = [1.0 if math.isinf(v) else 0.0 for v in values]
    total = sum(values)
    if total <= 0:
        logger.debug("Empty driving mix, defaulting to all national highway")
        return DrivingMix(0, 0, 100)

    scale = 100.0 / total
    city_pct = min(round_half_up(values[0] * scale), 100)
    state_pct = min(round_half_up(values[1] * scale), 100 - city_pct)
    return DrivingMix(city_pct, state_pct, 100 - city_pct - state_pct)


def pointer_to_percent(client_x: float, container_left: float, container_width: float) -> Optional[int]:
    """Convert a pointer x coordinate to a position on the bar, None if it cannot be placed"""
    if not container_width > 0:
        return None
    raw_percent = (client_x - container_left) / container_width * 100
    if _is_nan(raw_percent):
        return None
    return clamp_percent(raw_percent)


# =============================================================================
# DRAG SESSION
# =============================================================================

class DragCaptureError(RuntimeError):
    """A divider was grabbed while another one is still captured"""


class DragSession:
    """
    Pointer capture state machine: Idle <-> Capturing(index).
    Only one divider can be captured at a time.
    """

    def __init__(self):
        self._captured: Optional[int] = None

    @property
    def captured_index(self) -> Optional[int]:
        return self._captured

    @property
    def is_capturing(self) -> bool:
        return self._captured is not None

    def begin(self, index: int):
        if index not in DIVIDER_INDICES:
            raise ValueError(f"Divider index must be 0 or 1, got {index!r}")
        if self._captured is not None:
            raise DragCaptureError(
                f"Divider {self._captured} is already captured, cannot capture {index}"
            )
        self._captured = index
        logger.debug(f"Captured divider {index}")

    def end(self) -> Optional[int]:
        """Release the capture. Safe to call when idle."""
        released, self._captured = self._captured, None
        if released is not None:
            logger.debug(f"Released divider {released}")
        return released

    def cancel(self) -> Optional[int]:
        released = self.end()
        if released is not None:
            logger.debug(f"Drag on divider {released} cancelled")
        return released

    @contextmanager
    def capture(self, index: int) -> Iterator["DragSession"]:
        self.begin(index)
        try:
            yield self
        finally:
            self.end()


@dataclass(frozen=True)
class PointerEvent:
    """A mouse or touch position; both are handled with the same math"""
    client_x: float
    source: str = 'mouse'

    @classmethod
    def from_touches(cls, touch_xs) -> "PointerEvent":
        # Only the first touch point drives the divider
        return cls(client_x=float(touch_xs[0]), source='touch')


class DrivingMixSelector:
    """
    Interactive model of the two-divider mix bar.

    `on_change` is called synchronously with the new DrivingMix after every change,
    there is no debouncing.
    """

    def __init__(self,
                 mix: DrivingMix = BASELINE_MIX,
                 on_change: Optional[Callable[[DrivingMix], None]] = None,
                 container_left: float = 0.0,
                 container_width: float = 100.0):
        if mix.total != 100:
            mix = normalize_mix(mix.city_pct, mix.state_pct, mix.national_pct)
        self._dividers = DividerState.from_mix(mix)
        self._on_change = on_change
        self.drag = DragSession()
        self.container_left = container_left
        self.container_width = container_width

    @property
    def mix(self) -> DrivingMix:
        return self._dividers.to_mix()

    @property
    def dividers(self) -> Tuple[int, int]:
        return (self._dividers.d0, self._dividers.d1)

    def set_container(self, left: float, width: float):
        self.container_left = left
        self.container_width = width

    def set_divider_position(self, which: int, raw_percent: float) -> DrivingMix:
        self._dividers = self._dividers.set_divider_position(which, raw_percent)
        mix = self.mix
        if is_detailed_logging_enabled('drag_events'):
            logger.debug(f"Divider {which} -> {raw_percent}: {mix.as_dict()}")
        if self._on_change is not None:
            self._on_change(mix)
        return mix

    def set_divider_positions(self, raw_d0: float, raw_d1: float) -> DrivingMix:
        """Both dividers moved in one event (two-handle slider); emits once"""
        self._dividers = self._dividers.set_positions(raw_d0, raw_d1)
        mix = self.mix
        if self._on_change is not None:
            self._on_change(mix)
        return mix

    def sync(self, mix: DrivingMix) -> bool:
        """
        Adopt a mix set from outside (e.g. the per-segment sliders). Small differences
        are ignored so an echo of our own emitted value does not reset the bar.
        """
        current = self.mix
        if (abs(current.city_pct - mix.city_pct) > 0.5
                or abs(current.state_pct - mix.state_pct) > 0.5):
            if mix.total != 100:
                mix = normalize_mix(mix.city_pct, mix.state_pct, mix.national_pct)
            self._dividers = DividerState.from_mix(mix)
            return True
        return False

    # Pointer lifecycle -------------------------------------------------------

    def pointer_down(self, index: int):
        self.drag.begin(index)

    def pointer_move(self, event: PointerEvent) -> Optional[DrivingMix]:
        if not self.drag.is_capturing:
            return None
        percent = pointer_to_percent(event.client_x, self.container_left, self.container_width)
        if percent is None:
            return None
        return self.set_divider_position(self.drag.captured_index, percent)

    def pointer_up(self):
        self.drag.end()

    def pointer_cancel(self):
        self.drag.cancel()

    def unmount(self):
        # A view going away mid-drag must not leave the capture behind
        self.drag.cancel()

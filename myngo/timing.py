import math
from numbers import Real
from typing import NamedTuple

# Host setup sliders
PLAYER_RANGE = (10, 100)
MEETING_RANGE = (15, 90)
MEETING_STEP = 5
DEFAULT_PLAYERS = 25
DEFAULT_MEETING_MINUTES = 30

CALL_INTERVAL_BOUNDS = (10, 90)
CALLS_NEEDED_BOUNDS = (15, 75)
SECONDS_BETWEEN_BOUNDS = (5, 120)

INTERVAL_TIME_SHARE = 0.90
CADENCE_TIME_SHARE = 0.85


class TimingError(ValueError):
    pass


class CallPlan(NamedTuple):
    players: int
    meeting_minutes: int
    call_interval: int
    calls_needed: int
    seconds_between_calls: int

    @property
    def estimated_seconds(self) -> int:
        return self.calls_needed * self.seconds_between_calls

    def as_dict(self) -> dict:
        out = self._asdict()
        out["estimated_seconds"] = self.estimated_seconds
        return out


def _require_number(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TimingError(f"{name} must be a number, got {value!r}")
    try:
        as_float = float(value)
    except OverflowError:
        raise TimingError(f"{name} is too large: {value!r}")
    if not math.isfinite(as_float):
        raise TimingError(f"{name} must be finite, got {value!r}")


def _require_players(player_count) -> None:
    _require_number("player_count", player_count)
    if player_count < 1:
        raise TimingError(f"player_count must be at least 1, got {player_count}")


def _require_positive(name: str, value) -> None:
    _require_number(name, value)
    if value <= 0:
        raise TimingError(f"{name} must be positive, got {value}")


def _clamp(value: int, bounds) -> int:
    low, high = bounds
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def recommended_call_interval(player_count, meeting_minutes) -> int:
    """Seconds between calls so that a winner likely appears before the meeting ends.

    45 minus half the player count approximates how many numbers get called
    before someone completes a line; 90% of the meeting is spread across them.
    """
    _require_players(player_count)
    _require_positive("meeting_minutes", meeting_minutes)
    numbers_needed = max(1, 45 - 0.5 * player_count)
    available_seconds = meeting_minutes * 60 * INTERVAL_TIME_SHARE
    return _clamp(round_half_up(available_seconds / numbers_needed), CALL_INTERVAL_BOUNDS)


def calls_needed_for_winner(player_count) -> int:
    _require_players(player_count)
    calls = math.ceil(50 - 10 * math.log10(player_count))
    return _clamp(calls, CALLS_NEEDED_BOUNDS)


def seconds_between_calls(meeting_minutes, calls_needed) -> int:
    _require_positive("meeting_minutes", meeting_minutes)
    _require_positive("calls_needed", calls_needed)
    available_seconds = meeting_minutes * 60 * CADENCE_TIME_SHARE
    return _clamp(round_half_up(available_seconds / calls_needed), SECONDS_BETWEEN_BOUNDS)


def plan_room(player_count, meeting_minutes) -> CallPlan:
    """Everything the host setup screen shows for one pair of slider values."""
    calls = calls_needed_for_winner(player_count)
    return CallPlan(
        players=player_count,
        meeting_minutes=meeting_minutes,
        call_interval=recommended_call_interval(player_count, meeting_minutes),
        calls_needed=calls,
        seconds_between_calls=seconds_between_calls(meeting_minutes, calls),
    )

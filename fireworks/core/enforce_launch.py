"""Launch Enforcement — validates a firework before it is scheduled.

Invariants:
    - All functions are PURE: no IO, no side effects
    - Return error dict on violation, None on success
    - validate_launch chains all checks, first error wins
    - Capacity is checked against previously accepted fireworks only

Design Decisions:
    - Return dicts (not exceptions): add_firework reports rejection as False,
      the dict only feeds the debug log with a stable error_code
"""


def check_duration(duration: int) -> dict | None:
    """A firework must stay up for at least one tick."""
    if duration < 1:
        return {
            "status": "error",
            "error_code": "INVALID_DURATION",
            "message": f"Duration must be at least 1, got {duration}.",
        }
    return None


def check_cost(cost: float) -> dict | None:
    """Fireworks cannot have a negative cost."""
    if cost < 0:
        return {
            "status": "error",
            "error_code": "NEGATIVE_COST",
            "message": f"Cost cannot be negative, got {cost}.",
        }
    return None


def check_launch_time(time: int, current_time: int) -> dict | None:
    """Launches cannot be scheduled before the show's current time."""
    if time < current_time:
        return {
            "status": "error",
            "error_code": "LAUNCH_IN_PAST",
            "message": (
                f"Launch time {time} is before the current time {current_time}."
            ),
        }
    return None


def check_capacity(fireworks_up: int, max_fireworks: int) -> dict | None:
    """The sky at launch time must have room for one more firework."""
    if fireworks_up >= max_fireworks:
        return {
            "status": "error",
            "error_code": "CAPACITY_REACHED",
            "message": (
                f"{fireworks_up} firework(s) already up, "
                f"maximum is {max_fireworks}."
            ),
        }
    return None


def validate_launch_parameters(duration: int, cost: float) -> dict | None:
    """Checks that need no show state. Returns first error or None."""
    return check_duration(duration) or check_cost(cost)


def validate_launch(
    time: int,
    duration: int,
    cost: float,
    *,
    current_time: int,
    fireworks_up: int,
    max_fireworks: int,
) -> dict | None:
    """Chain all launch checks. Returns first error or None."""
    return (
        validate_launch_parameters(duration, cost)
        or check_launch_time(time, current_time)
        or check_capacity(fireworks_up, max_fireworks)
    )

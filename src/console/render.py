from __future__ import annotations

from typing import Iterable, List

from simulation import RequestView, StateSnapshot

EMPTY_SHAFT = "[            ]"


def format_requests(requests: Iterable[RequestView]) -> str:
    """Join requests as ``"3 to 9, 5 to 7"``, or ``"None"`` when empty."""
    text = ", ".join(str(request) for request in requests)
    return text or "None"


def render_building(snapshot: StateSnapshot) -> str:
    lines: List[str] = ["", "Building state:"]
    for floor in range(snapshot.floor_count, 0, -1):
        line = f"[{floor:02d}]  "
        if floor == snapshot.current_floor:
            line += (
                f"[ ELEVATOR {snapshot.direction.label} ]  "
                f"Inside: {format_requests(snapshot.riding)}"
            )
        else:
            line += EMPTY_SHAFT
        waiting_here = snapshot.waiting_at(floor)
        if waiting_here:
            line += f"  Waiting: {format_requests(waiting_here)}"
        lines.append(line)
    lines.append("")
    return "\n".join(lines)


def render_status(snapshot: StateSnapshot) -> str:
    return "\n".join(
        [
            "",
            "--- STATUS ---",
            f"Current floor: {snapshot.current_floor} | Direction: {snapshot.direction.label}",
            f"Passengers inside: {format_requests(snapshot.riding)}",
            f"Waiting passengers: {format_requests(snapshot.all_waiting)}",
            "----------------",
            "",
        ]
    )


def render_step_events(snapshot: StateSnapshot) -> List[str]:
    lines = [f"  >> Dropped off passenger {view}" for view in snapshot.dropped_off]
    lines.extend(f"  >> Picked up passenger {view}" for view in snapshot.picked_up)
    return lines

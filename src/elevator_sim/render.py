from __future__ import annotations

from typing import List, Sequence

from .building import BuildingState
from .people import Person, riding_counts, waiting_counts


def render_frame(state: BuildingState, people: Sequence[Person]) -> str:
    """Draw the building top floor first, one line per floor."""
    waiting = waiting_counts(people, state.num_floors)
    riding = riding_counts(people, len(state.cars))

    lines: List[str] = []
    for floor_state in reversed(state.floors):
        up = "^" if floor_state.hall_up else "."
        down = "v" if floor_state.hall_down else "."
        cells = [
            f"{car.car_id}({riding[car.car_id]})" if car.nearest_floor == floor_state.floor else "  . "
            for car in state.cars
        ]
        lines.append(
            f"Floor: {floor_state.floor} [{up}{down}] "
            f"Waiting: {waiting[floor_state.floor]} | {' '.join(cells)}"
        )
    lines.append("")
    return "\n".join(lines) + "\n"

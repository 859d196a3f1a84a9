from __future__ import annotations

from typing import Optional, Sequence

import pytest

from elevator_sim import BuildingState, CarId, CarState, FloorState


def make_state(
    num_floors: int = 3,
    cars: Sequence[dict] = ({},),
    hall_calls: Sequence[int] = (),
) -> BuildingState:
    """Build a snapshot directly, without going through a Building."""
    floors = tuple(
        FloorState(floor=i, hall_up=i in hall_calls, hall_down=False) for i in range(num_floors)
    )
    car_states = []
    for index, overrides in enumerate(cars):
        buttons = [False] * num_floors
        for floor in overrides.get("buttons", ()):
            buttons[floor] = True
        car_states.append(
            CarState(
                car_id=CarId(index),
                position=overrides.get("position", 0.0),
                target_floor=overrides.get("target"),
                door_open=overrides.get("door_open", False),
                car_buttons=tuple(buttons),
            )
        )
    return BuildingState(floors=floors, cars=tuple(car_states))


@pytest.fixture
def state_factory():
    return make_state


class ScriptedRandom:
    """Stands in for random.Random, returning queued values from randrange."""

    def __init__(self, values: Sequence[int]) -> None:
        self.values = list(values)

    def randrange(self, stop: int, _unused: Optional[int] = None) -> int:
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value

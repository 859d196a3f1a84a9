from __future__ import annotations

from typing import List, Optional, Sequence

from elevator_sim.building import BuildingState, CarState, MoveCarTo
from elevator_sim.types import Floor


class NearestIdleCarDispatcher:
    """Sends the closest idle car to each hall call, then honours car buttons.

    Car buttons take precedence over hall calls: interior commands are
    emitted after every hall command, so when both target the same car
    the interior one is applied last and wins.
    """

    def decide(self, state: BuildingState) -> List[MoveCarTo]:
        commands: List[MoveCarTo] = []

        for floor_state in state.floors:
            if not floor_state.has_call:
                continue
            if not state.cars:
                break
            if self._already_served(state.cars, floor_state.floor):
                continue
            candidate = self._nearest_idle(state.cars, floor_state.floor)
            if candidate is not None:
                commands.append(MoveCarTo(car_id=candidate.car_id, floor=floor_state.floor))

        for car in state.cars:
            for floor in car.pressed_floors:
                commands.append(MoveCarTo(car_id=car.car_id, floor=floor))
        return commands

    def _already_served(self, cars: Sequence[CarState], floor: Floor) -> bool:
        return any(car.target_floor == floor or car.is_open_at(floor) for car in cars)

    def _nearest_idle(self, cars: Sequence[CarState], floor: Floor) -> Optional[CarState]:
        best: Optional[CarState] = None
        best_distance = float("inf")
        for car in cars:
            if car.target_floor is not None:
                continue
            distance = abs(car.position - floor)
            # strict comparison keeps the first car on ties
            if distance < best_distance:
                best = car
                best_distance = distance
        return best

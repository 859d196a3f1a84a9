from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Union

from .config import CarConstraints
from .types import CarId, Direction, Floor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FloorState:
    """Hall buttons of a single floor."""

    floor: Floor
    hall_up: bool = False
    hall_down: bool = False

    @property
    def has_call(self) -> bool:
        return self.hall_up or self.hall_down


@dataclass(frozen=True)
class CarState:
    """Position, target, door and interior buttons of one car."""

    car_id: CarId
    position: float
    target_floor: Optional[Floor]
    door_open: bool
    car_buttons: Tuple[bool, ...]

    @property
    def nearest_floor(self) -> Floor:
        return int(round(self.position))

    def is_open_at(self, floor: Floor) -> bool:
        """True when the car is physically at ``floor`` with its door open."""
        return self.door_open and self.nearest_floor == floor

    @property
    def pressed_floors(self) -> List[Floor]:
        return [floor for floor, pressed in enumerate(self.car_buttons) if pressed]


@dataclass(frozen=True)
class BuildingState:
    """Read-only view of every floor and car at one point in time."""

    floors: Tuple[FloorState, ...]
    cars: Tuple[CarState, ...]

    @property
    def num_floors(self) -> int:
        return len(self.floors)

    def car(self, car_id: CarId) -> Optional[CarState]:
        if 0 <= car_id < len(self.cars):
            return self.cars[car_id]
        return None


@dataclass(frozen=True)
class PressHallButton:
    floor: Floor
    direction: Direction


@dataclass(frozen=True)
class PressCarButton:
    car_id: CarId
    floor: Floor


@dataclass(frozen=True)
class MoveCarTo:
    car_id: CarId
    floor: Floor


Command = Union[PressHallButton, PressCarButton, MoveCarTo]


class Building:
    """Owner of floor and car state.

    ``apply`` is the only way to change requests and targets, and
    ``advance`` is the only way to move cars. Everything else reads the
    immutable ``state`` snapshot.
    """

    def __init__(
        self,
        num_floors: int,
        car_count: int,
        constraints: Optional[CarConstraints] = None,
    ) -> None:
        if num_floors < 1:
            raise ValueError(f"num_floors must be positive, got {num_floors}")
        if car_count < 1:
            raise ValueError(f"car_count must be positive, got {car_count}")
        self.num_floors = num_floors
        self.constraints = constraints or CarConstraints()
        self._floors: List[FloorState] = [FloorState(floor=i) for i in range(num_floors)]
        self._cars: List[CarState] = [
            CarState(
                car_id=CarId(i),
                position=0.0,
                target_floor=None,
                door_open=False,
                car_buttons=(False,) * num_floors,
            )
            for i in range(car_count)
        ]

    @property
    def state(self) -> BuildingState:
        return BuildingState(floors=tuple(self._floors), cars=tuple(self._cars))

    def apply(self, command: Command) -> None:
        """Apply a command; one naming an unknown car or floor is ignored."""
        if isinstance(command, PressHallButton):
            if not self._has_floor(command.floor):
                self._reject(command)
            elif command.direction == Direction.UP:
                self._floors[command.floor] = replace(self._floors[command.floor], hall_up=True)
            else:
                self._floors[command.floor] = replace(self._floors[command.floor], hall_down=True)
        elif isinstance(command, PressCarButton):
            if not self._has_car(command.car_id) or not self._has_floor(command.floor):
                self._reject(command)
                return
            car = self._cars[command.car_id]
            buttons = list(car.car_buttons)
            buttons[command.floor] = True
            self._cars[command.car_id] = replace(car, car_buttons=tuple(buttons))
        elif isinstance(command, MoveCarTo):
            if not self._has_car(command.car_id):
                self._reject(command)
                return
            car = self._cars[command.car_id]
            self._cars[command.car_id] = replace(car, target_floor=command.floor, door_open=False)
        else:
            raise TypeError(f"Unsupported command {command!r}")

    def advance(self, dt: float) -> None:
        """Move every targeted car and open its doors when it arrives."""
        for index, car in enumerate(self._cars):
            if car.target_floor is None:
                continue
            self._cars[index] = self._advance_car(car, dt)

    def _advance_car(self, car: CarState, dt: float) -> CarState:
        target = car.target_floor
        distance = target - car.position
        if abs(distance) >= self.constraints.arrival_threshold:
            step = self.constraints.speed_floors_per_tick * dt
            if abs(distance) <= step:
                position = float(target)
            else:
                position = car.position + math.copysign(step, distance)
            car = replace(car, position=position)
            distance = target - position

        if abs(distance) < self.constraints.arrival_threshold:
            return self._arrive(car, target)
        return car

    def _arrive(self, car: CarState, floor: Floor) -> CarState:
        # Buttons clear together with the door opening, never before.
        if self._has_floor(floor):
            self._floors[floor] = replace(self._floors[floor], hall_up=False, hall_down=False)
        buttons = list(car.car_buttons)
        if 0 <= floor < len(buttons):
            buttons[floor] = False
        logger.debug("car %s arrived at floor %s", car.car_id, floor)
        return replace(
            car,
            position=float(floor),
            target_floor=None,
            door_open=True,
            car_buttons=tuple(buttons),
        )

    def _has_floor(self, floor: Floor) -> bool:
        return 0 <= floor < self.num_floors

    def _has_car(self, car_id: CarId) -> bool:
        return 0 <= car_id < len(self._cars)

    def _reject(self, command: Command) -> None:
        logger.debug("ignoring %r: unknown car or floor", command)

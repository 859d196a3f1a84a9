from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .building import BuildingState, CarState
from .types import CarId, Direction, Floor, PersonId

logger = logging.getLogger(__name__)


class PersonState(Enum):
    NEW = "new"
    WAITING = "waiting"
    RIDING = "riding"
    DONE = "done"


@dataclass(frozen=True)
class CallElevator:
    """A person pressing the hall button on their floor."""

    floor: Floor
    direction: Direction


@dataclass(frozen=True)
class SelectFloor:
    """A person inside ``car_id`` pressing the button for ``floor``."""

    car_id: CarId
    floor: Floor


Intent = Union[CallElevator, SelectFloor]


@dataclass
class Person:
    """A passenger travelling from one floor to another."""

    person_id: PersonId
    current_floor: Floor
    target_floor: Floor
    state: PersonState = PersonState.NEW
    in_car: Optional[CarId] = None

    @property
    def direction(self) -> Direction:
        return Direction.UP if self.target_floor > self.current_floor else Direction.DOWN


class PassengerModel:
    """Spawns passengers on a timer and steps each one's decisions.

    The model only reads the building state it is handed; everything a
    passenger wants done to the building comes back as an intent.
    """

    def __init__(
        self,
        num_floors: int,
        spawn_interval: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        if spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be positive, got {spawn_interval}")
        self.num_floors = num_floors
        self.spawn_interval = spawn_interval
        self.random = rng or random.Random()
        self._spawn_timer: float = 0.0
        self._next_person_id = 0
        self._people: List[Person] = []
        if num_floors < 2:
            logger.warning("spawning disabled: %s floor(s) leave no distinct target", num_floors)

    @property
    def people(self) -> Tuple[Person, ...]:
        return tuple(self._people)

    def advance(self, dt: float, building: BuildingState) -> List[Intent]:
        self._spawn_timer += dt
        if self._spawn_timer >= self.spawn_interval:
            self._spawn_timer = 0.0
            self._spawn()

        intents: List[Intent] = []
        for person in self._people:
            if person.state is PersonState.NEW:
                self._step_new(person, building, intents)
            elif person.state is PersonState.WAITING:
                self._step_waiting(person, building, intents)
            elif person.state is PersonState.RIDING:
                self._step_riding(person, building)
        return intents

    def _spawn(self) -> None:
        if self.num_floors < 2:
            return
        start = self.random.randrange(self.num_floors)
        target = self.random.randrange(self.num_floors)
        while target == start:
            target = self.random.randrange(self.num_floors)

        person = Person(
            person_id=PersonId(self._next_person_id),
            current_floor=start,
            target_floor=target,
        )
        self._next_person_id += 1
        self._people.append(person)
        logger.debug("person %s spawned on floor %s heading to %s", person.person_id, start, target)

    def _step_new(self, person: Person, building: BuildingState, intents: List[Intent]) -> None:
        if _open_car_at(building, person.current_floor) is None:
            intents.append(CallElevator(floor=person.current_floor, direction=person.direction))
        person.state = PersonState.WAITING

    def _step_waiting(self, person: Person, building: BuildingState, intents: List[Intent]) -> None:
        car = _open_car_at(building, person.current_floor)
        if car is None:
            return
        intents.append(SelectFloor(car_id=car.car_id, floor=person.target_floor))
        person.in_car = car.car_id
        person.state = PersonState.RIDING
        logger.debug("person %s boarded car %s", person.person_id, car.car_id)

    def _step_riding(self, person: Person, building: BuildingState) -> None:
        if person.in_car is None:
            return
        car = building.car(person.in_car)
        if car is None or not car.is_open_at(person.target_floor):
            return
        person.current_floor = person.target_floor
        person.in_car = None
        person.state = PersonState.DONE
        logger.debug("person %s arrived at floor %s", person.person_id, person.current_floor)


def _open_car_at(building: BuildingState, floor: Floor) -> Optional[CarState]:
    for car in building.cars:
        if car.is_open_at(floor):
            return car
    return None


def waiting_counts(people: Sequence[Person], num_floors: int) -> List[int]:
    counts = [0] * num_floors
    for person in people:
        if person.state is PersonState.WAITING and 0 <= person.current_floor < num_floors:
            counts[person.current_floor] += 1
    return counts


def riding_counts(people: Sequence[Person], num_cars: int) -> List[int]:
    counts = [0] * num_cars
    for person in people:
        if person.state is PersonState.RIDING and person.in_car is not None:
            if 0 <= person.in_car < num_cars:
                counts[person.in_car] += 1
    return counts


def state_counts(people: Sequence[Person]) -> Dict[PersonState, int]:
    """How many people are in each state, every state present even at zero."""
    counts = {state: 0 for state in PersonState}
    for person in people:
        counts[person.state] += 1
    return counts

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, List

import dispatch

from .building import Building, Command, MoveCarTo, PressCarButton, PressHallButton
from .config import SimulationConfig
from .people import CallElevator, Intent, PassengerModel, SelectFloor

if TYPE_CHECKING:  # pragma: no cover - dispatch imports elevator_sim.building
    from dispatch import Dispatcher

logger = logging.getLogger(__name__)


@dataclass
class StepReport:
    time: float
    intents: List[Intent] = field(default_factory=list)
    commands: List[MoveCarTo] = field(default_factory=list)


def intent_to_command(intent: Intent) -> Command:
    """Translate what a passenger wants into the button press it causes."""
    if isinstance(intent, CallElevator):
        return PressHallButton(floor=intent.floor, direction=intent.direction)
    if isinstance(intent, SelectFloor):
        return PressCarButton(car_id=intent.car_id, floor=intent.floor)
    raise TypeError(f"Unsupported intent {intent!r}")


class Simulation:
    """Fixed-step loop tying passengers, dispatcher and building together."""

    def __init__(
        self,
        building: Building,
        passengers: PassengerModel,
        dispatcher: Dispatcher,
        timestep: float = 0.1,
        dispatcher_name: str = "nearest_idle",
    ) -> None:
        if timestep <= 0:
            raise ValueError(f"timestep must be positive, got {timestep}")
        self.building = building
        self.passengers = passengers
        self.dispatcher = dispatcher
        self.dispatcher_name = dispatcher_name
        self.timestep = timestep
        self.current_time: float = 0.0
        self.step_count: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}

    def run(self, steps: int) -> None:
        for _ in range(steps):
            self.step()

    def step(self) -> StepReport:
        report = StepReport(time=self.current_time)

        report.intents = self.passengers.advance(self.timestep, self.building.state)
        for intent in report.intents:
            self.building.apply(intent_to_command(intent))

        report.commands = self.dispatcher.decide(self.building.state)
        for command in report.commands:
            self.building.apply(command)

        self.building.advance(self.timestep)

        self.step_count += 1
        self.current_time = self.step_count * self.timestep
        self._emit("step", report)
        return report

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def set_dispatcher(self, name: str, **options) -> None:
        self.dispatcher = dispatch.get_dispatcher(name, **options)
        self.dispatcher_name = name
        logger.info("dispatcher set to %s", name)

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)


def build_simulation(config: SimulationConfig) -> Simulation:
    building = Building(
        num_floors=config.num_floors,
        car_count=config.car_count,
        constraints=config.constraints,
    )
    passengers = PassengerModel(
        num_floors=config.num_floors,
        spawn_interval=config.spawn_interval,
        rng=random.Random(config.random_seed),
    )
    return Simulation(
        building=building,
        passengers=passengers,
        dispatcher=dispatch.get_dispatcher(config.dispatcher),
        timestep=config.timestep,
        dispatcher_name=config.dispatcher,
    )

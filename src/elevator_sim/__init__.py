"""Discrete-time elevator simulation primitives."""

from .building import (
    Building,
    BuildingState,
    CarState,
    Command,
    FloorState,
    MoveCarTo,
    PressCarButton,
    PressHallButton,
)
from .config import CarConstraints, SimulationConfig
from .people import (
    CallElevator,
    Intent,
    PassengerModel,
    Person,
    PersonState,
    SelectFloor,
    riding_counts,
    state_counts,
    waiting_counts,
)
from .simulation import Simulation, StepReport, build_simulation, intent_to_command
from .types import CarId, Direction, Floor, PersonId

__all__ = [
    "Building",
    "BuildingState",
    "CallElevator",
    "CarConstraints",
    "CarId",
    "CarState",
    "Command",
    "Direction",
    "Floor",
    "FloorState",
    "Intent",
    "MoveCarTo",
    "PassengerModel",
    "Person",
    "PersonId",
    "PersonState",
    "PressCarButton",
    "PressHallButton",
    "SelectFloor",
    "Simulation",
    "SimulationConfig",
    "StepReport",
    "build_simulation",
    "intent_to_command",
    "riding_counts",
    "state_counts",
    "waiting_counts",
]

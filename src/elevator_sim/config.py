from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CarConstraints:
    """Physical constraints applied to every car in the building."""

    speed_floors_per_tick: float = 1.0
    arrival_threshold: float = 0.01


@dataclass
class SimulationConfig:
    num_floors: int = 10
    car_count: int = 2
    steps: int = 2000
    timestep: float = 0.1
    spawn_interval: float = 3.0
    frame_delay: float = 0.025
    random_seed: Optional[int] = None
    dispatcher: str = "nearest_idle"
    constraints: CarConstraints = field(default_factory=CarConstraints)

from __future__ import annotations

from typing import List, Protocol

from elevator_sim.building import BuildingState, MoveCarTo


class Dispatcher(Protocol):
    """Strategy interface for assigning cars to outstanding requests."""

    def decide(self, state: BuildingState) -> List[MoveCarTo]:
        """
        Return move commands for this step, in the order they must be applied.

        Implementations must treat ``state`` as read-only and keep no
        state of their own between calls.
        """
        ...

from __future__ import annotations

import pytest

from elevator_sim import (
    Building,
    CarConstraints,
    CarId,
    Direction,
    MoveCarTo,
    PressCarButton,
    PressHallButton,
)


class TestInitialize:
    @pytest.mark.parametrize("floors,cars", [(1, 1), (3, 2), (10, 4)])
    def test_initial_state(self, floors, cars):
        building = Building(num_floors=floors, car_count=cars)
        state = building.state
        assert len(state.floors) == floors
        assert [f.floor for f in state.floors] == list(range(floors))
        assert not any(f.hall_up or f.hall_down for f in state.floors)
        assert len(state.cars) == cars
        for index, car in enumerate(state.cars):
            assert car.car_id == index
            assert car.position == 0.0
            assert car.target_floor is None
            assert car.door_open is False
            assert car.car_buttons == (False,) * floors

    @pytest.mark.parametrize("floors,cars", [(0, 1), (3, 0), (-1, 2)])
    def test_rejects_non_positive_counts(self, floors, cars):
        with pytest.raises(ValueError):
            Building(num_floors=floors, car_count=cars)


class TestApply:
    def test_press_hall_button(self):
        building = Building(3, 1)
        building.apply(PressHallButton(floor=1, direction=Direction.UP))
        floor = building.state.floors[1]
        assert floor.hall_up
        assert not floor.hall_down

    def test_press_hall_button_is_idempotent(self):
        building = Building(3, 1)
        building.apply(PressHallButton(floor=2, direction=Direction.DOWN))
        before = building.state
        building.apply(PressHallButton(floor=2, direction=Direction.DOWN))
        assert building.state == before

    def test_press_car_button(self):
        building = Building(3, 1)
        building.apply(PressCarButton(car_id=CarId(0), floor=2))
        assert building.state.cars[0].car_buttons == (False, False, True)

    @pytest.mark.parametrize(
        "command",
        [
            PressHallButton(floor=3, direction=Direction.UP),
            PressHallButton(floor=-1, direction=Direction.DOWN),
            PressCarButton(car_id=CarId(1), floor=0),
            PressCarButton(car_id=CarId(0), floor=5),
            MoveCarTo(car_id=CarId(7), floor=1),
        ],
    )
    def test_unknown_ids_are_ignored(self, command):
        building = Building(3, 1)
        before = building.state
        building.apply(command)
        assert building.state == before

    def test_unknown_command_type_raises(self):
        with pytest.raises(TypeError):
            Building(3, 1).apply(("move", 0, 2))

    def test_move_closes_door_and_overwrites_target(self):
        building = Building(3, 1)
        building.apply(MoveCarTo(car_id=CarId(0), floor=0))
        building.advance(0.1)
        assert building.state.cars[0].door_open

        building.apply(MoveCarTo(car_id=CarId(0), floor=2))
        building.apply(MoveCarTo(car_id=CarId(0), floor=1))
        car = building.state.cars[0]
        assert car.target_floor == 1
        assert car.door_open is False

    def test_snapshot_is_not_changed_by_later_commands(self):
        building = Building(3, 1)
        snapshot = building.state
        building.apply(PressHallButton(floor=0, direction=Direction.UP))
        assert not snapshot.floors[0].hall_up


class TestAdvance:
    def test_single_tick_reaches_adjacent_floor(self):
        building = Building(3, 1)
        building.apply(MoveCarTo(car_id=CarId(0), floor=1))
        building.advance(1.0)
        car = building.state.cars[0]
        assert car.position == 1.0
        assert car.target_floor is None
        assert car.door_open

    def test_small_steps_travel_at_constant_speed(self):
        building = Building(5, 1)
        building.apply(MoveCarTo(car_id=CarId(0), floor=2))
        building.advance(0.5)
        car = building.state.cars[0]
        assert car.position == pytest.approx(0.5)
        assert car.target_floor == 2
        assert not car.door_open

        for _ in range(15):
            building.advance(0.1)
        car = building.state.cars[0]
        assert car.position == 2.0
        assert car.door_open

    def test_moves_down(self):
        building = Building(5, 1)
        building.apply(MoveCarTo(car_id=CarId(0), floor=4))
        building.advance(10.0)
        building.apply(MoveCarTo(car_id=CarId(0), floor=1))
        building.advance(1.0)
        assert building.state.cars[0].position == pytest.approx(3.0)

    def test_large_step_does_not_overshoot(self):
        building = Building(5, 1)
        building.apply(MoveCarTo(car_id=CarId(0), floor=3))
        building.advance(7.5)
        car = building.state.cars[0]
        assert car.position == 3.0
        assert car.door_open

    def test_speed_comes_from_constraints(self):
        building = Building(5, 1, constraints=CarConstraints(speed_floors_per_tick=2.0))
        building.apply(MoveCarTo(car_id=CarId(0), floor=4))
        building.advance(1.0)
        assert building.state.cars[0].position == pytest.approx(2.0)

    def test_arrival_clears_buttons_with_door_opening(self):
        building = Building(4, 2)
        building.apply(PressHallButton(floor=2, direction=Direction.UP))
        building.apply(PressHallButton(floor=2, direction=Direction.DOWN))
        building.apply(PressCarButton(car_id=CarId(0), floor=2))
        building.apply(PressCarButton(car_id=CarId(0), floor=3))
        building.apply(MoveCarTo(car_id=CarId(0), floor=2))

        building.advance(1.0)
        state = building.state
        assert not state.cars[0].door_open
        assert state.floors[2].hall_up and state.floors[2].hall_down
        assert state.cars[0].car_buttons[2]

        building.advance(1.0)
        state = building.state
        car = state.cars[0]
        assert car.door_open
        assert car.target_floor is None
        assert not state.floors[2].hall_up
        assert not state.floors[2].hall_down
        assert car.car_buttons == (False, False, False, True)

    def test_idle_cars_keep_doors(self):
        building = Building(3, 2)
        building.apply(MoveCarTo(car_id=CarId(0), floor=0))
        building.advance(0.1)
        for _ in range(5):
            building.advance(0.1)
        state = building.state
        assert state.cars[0].door_open
        assert state.cars[0].position == 0.0
        assert not state.cars[1].door_open


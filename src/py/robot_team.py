from typing import List

from capacity import MAX_TEAM_SIZE
from data_types import WAITING
from errors import InvalidAddItemError, InvalidDispatchError
from planner import can_add_to_plan, heaviest_item, plan_required_team_size
from robot import Robot
from task import Task


class RobotTeam:
    """Several robots carrying one heavy item, stepped as a single actor.

    Items are collected while the team is being formed and loaded onto the
    members at dispatch: every member holds the heavy item in hand (only the
    leader reports it), fillers go into the supporters' tubes in member order.
    Members that make it back to the mailroom leave the team and are handed
    back to the stepping loop.
    """

    def __init__(self):
        self.robots: List[Robot] = []
        self.pending: List = []
        self.dispatched = False

    def __repr__(self) -> str:
        return f"RobotTeam({[r.id for r in self.robots]}, pending={len(self.pending)})"

    def list_mail_items(self) -> List:
        items = list(self.pending)
        seen = {item.id for item in items}
        for robot in self.robots:
            for item in robot.list_mail_items():
                if item.id not in seen:
                    seen.add(item.id)
                    items.append(item)
        return items

    def list_robots(self) -> List[Robot]:
        return list(self.robots)

    def is_active(self) -> bool:
        return bool(self.robots)

    def required_team_size(self) -> int:
        return plan_required_team_size(self.pending)

    def has_enough_team_member(self) -> bool:
        return bool(self.robots) and len(self.robots) == self.required_team_size()

    def add_robot(self, robot: Robot) -> None:
        if self.dispatched:
            raise ValueError("Cannot add robots to a team already dispatched")
        if len(self.robots) >= MAX_TEAM_SIZE or (
            self.pending and len(self.robots) >= self.required_team_size()
        ):
            raise ValueError(f"Team already has {len(self.robots)} members")
        self.robots.append(robot)

    def can_add_mail_item(self, item) -> bool:
        if self.dispatched:
            return False
        # a filler only joins while the team is still short of members
        if self.pending and len(self.robots) >= self.required_team_size():
            return False
        return can_add_to_plan(self.pending, item)

    def add_mail_item(self, item) -> None:
        if not self.can_add_mail_item(item):
            raise InvalidAddItemError(f"Team cannot take {item}")
        self.pending.append(item)

    def can_dispatch(self) -> bool:
        return not self.dispatched and bool(self.pending) and self.has_enough_team_member()

    def dispatch(self) -> None:
        if not self.can_dispatch():
            raise InvalidDispatchError(
                f"Team of {len(self.robots)} not ready for {len(self.pending)} pending items"
            )
        heavy = heaviest_item(self.pending)
        fillers = [item for item in self.pending if item is not heavy]
        tube_slots = self.robots[1:] or self.robots[:1]
        if len(fillers) > len(tube_slots):
            raise InvalidDispatchError(f"{len(fillers)} fillers for {len(tube_slots)} tubes")

        task = Task.form(self.robots, heavy.destination_floor)
        for robot in self.robots:
            robot.assign_task(task)
            robot.add_to_hand(heavy)
        for robot, filler in zip(tube_slots, fillers):
            robot.add_to_tube(filler)

        self.pending = []
        self.dispatched = True
        for robot in self.robots:
            robot.dispatch()

    def step(self) -> List[Robot]:
        released = []
        for robot in list(self.robots):
            robot.step()
            if self.dispatched and robot.state == WAITING:
                self.robots.remove(robot)
                released.append(robot)
        return released

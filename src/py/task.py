from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Task:
    """One delivery leg: where to go, who leads, who helps carry.

    Tasks are never mutated. A robot reaching ``destination_floor`` swaps its
    task for ``next_task`` or ``return_task``.
    """

    destination_floor: int
    leader: object
    supporters: Tuple[object, ...] = ()

    @classmethod
    def form(cls, robots: Sequence[object], destination_floor: int) -> "Task":
        if not robots:
            raise ValueError("A task needs at least one robot")
        # first robot in selection order leads
        return cls(destination_floor, robots[0], tuple(robots[1:]))

    @property
    def robot_count(self) -> int:
        return 1 + len(self.supporters)

    @property
    def robots(self) -> Tuple[object, ...]:
        return (self.leader,) + self.supporters

    def is_leading(self, robot) -> bool:
        return robot.id == self.leader.id

    def next_task(self, robot, destination_floor: int) -> "Task":
        return Task(destination_floor, robot)

    def return_task(self, robot, mailroom_floor: int) -> "Task":
        return Task(mailroom_floor, robot)

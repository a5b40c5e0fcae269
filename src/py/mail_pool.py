from typing import List, Optional

from capacity import required_team_size
from data_types import Clock
from errors import UnsupportedTeamSizeError
from planner import generate_plan, has_enough_robot, plan_required_team_size
from robot_team import RobotTeam


def _pool_order(item):
    return (-item.priority_level, item.arrival_time, item.id)


class MailPool:
    """Holds undelivered mail and idle robots, and dispatches plans to them.

    Pending items are kept ordered by priority (highest first), then arrival.
    ``step`` returns the teams formed this tick so the stepping loop can
    adopt them in place of their member robots.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        verbose: bool = False,
        fleet_size: Optional[int] = None,
    ):
        self.clock = clock or Clock()
        self.verbose = verbose
        self.fleet_size = fleet_size
        self.pending: List = []
        self.waiting: List = []

    def add_to_pool(self, item) -> None:
        # rejects items no team (or no team this fleet can form) can carry
        team_size = required_team_size(item.weight)
        if self.fleet_size is not None and team_size > self.fleet_size:
            raise UnsupportedTeamSizeError(
                f"{item} needs {team_size} robots but the fleet has {self.fleet_size}"
            )
        self.pending.append(item)
        self.pending.sort(key=_pool_order)

    def register_waiting(self, robot) -> None:
        if robot not in self.waiting:
            self.waiting.append(robot)

    def step(self) -> List[RobotTeam]:
        formed: List[RobotTeam] = []
        while self.waiting and self.pending:
            plan = generate_plan(self.pending)
            if not has_enough_robot(len(self.waiting), plan):
                break
            team_size = plan_required_team_size(plan)
            robots = self.waiting[:team_size]
            del self.waiting[:team_size]

            if team_size == 1:
                actor = robots[0]
                for item in plan:
                    actor.add_mail_item(item)
            else:
                actor = RobotTeam()
                for item in plan:
                    actor.add_mail_item(item)
                for robot in robots:
                    actor.add_robot(robot)
                formed.append(actor)

            planned = {item.id for item in plan}
            self.pending = [item for item in self.pending if item.id not in planned]
            actor.dispatch()
            self._trace(
                f"dispatch {[r.id for r in robots]} with {[item.id for item in plan]}"
            )
        return formed

    def _trace(self, message: str) -> None:
        if self.verbose:
            print(f"T: {self.clock.time:3d} > {message}")

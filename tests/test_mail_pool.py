import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src", "py")))

from data_types import DELIVERING, WAITING, Building, Clock, MailItem, PriorityMailItem
from delivery import DeliveryReport
from errors import UnsupportedTeamSizeError
from mail_pool import MailPool
from robot import Robot
from robot_team import RobotTeam

BUILDING = Building(floors=8, lowest_floor=1, mailroom_floor=1)


def _mail(mid, dest, weight, arrival=1):
    return MailItem(id=mid, destination_floor=dest, arrival_time=arrival, weight=weight)


def _setup(robot_count):
    clock = Clock()
    pool = MailPool(clock)
    report = DeliveryReport(clock)
    robots = [Robot(f"R{i}", report, pool, BUILDING, clock=clock) for i in range(robot_count)]
    for robot in robots:
        robot.step()
    return pool, robots


def test_rejects_uncarryable_item():
    pool = MailPool()
    with pytest.raises(UnsupportedTeamSizeError):
        pool.add_to_pool(_mail(1, 3, 3200))
    assert pool.pending == []


def test_orders_priority_then_arrival():
    pool = MailPool()
    late = _mail(1, 3, 100, arrival=5)
    early = _mail(2, 3, 100, arrival=2)
    urgent = PriorityMailItem(3, 4, 9, 100, 10)
    for item in (late, early, urgent):
        pool.add_to_pool(item)
    assert pool.pending == [urgent, early, late]


def test_register_waiting_once():
    pool = MailPool()
    robot = object()
    pool.register_waiting(robot)
    pool.register_waiting(robot)
    assert pool.waiting == [robot]


def test_step_dispatches_solo_robot():
    pool, robots = _setup(1)
    a, b, c = _mail(1, 3, 500), _mail(2, 5, 700), _mail(3, 2, 100)
    for item in (a, b, c):
        pool.add_to_pool(item)
    assert pool.step() == []
    robot = robots[0]
    assert robot.hand is a and robot.tube is b
    assert robot.received_dispatch
    assert pool.pending == [c]
    assert pool.waiting == []


def test_heavy_plan_waits_for_enough_robots():
    pool, robots = _setup(1)
    pool.add_to_pool(_mail(1, 3, 2400))
    assert pool.step() == []
    assert pool.waiting == robots
    assert len(pool.pending) == 1
    assert robots[0].state == WAITING


def test_step_forms_team_for_heavy_item():
    pool, robots = _setup(3)
    heavy, filler, other = _mail(1, 3, 2400), _mail(2, 5, 300), _mail(3, 6, 200)
    for item in (heavy, filler, other):
        pool.add_to_pool(item)
    teams = pool.step()
    assert len(teams) == 1
    team = teams[0]
    assert isinstance(team, RobotTeam)
    assert team.list_robots() == robots[:2]
    # remaining robot takes the leftover item on its own
    assert robots[2].hand is other
    assert pool.pending == []
    for robot in robots:
        robot.step()
    assert all(r.state == DELIVERING for r in robots)


def test_rejects_item_needing_more_robots_than_fleet():
    pool = MailPool(fleet_size=2)
    pool.add_to_pool(_mail(1, 3, 2400))
    with pytest.raises(UnsupportedTeamSizeError):
        pool.add_to_pool(_mail(2, 3, 2800))
    assert [m.id for m in pool.pending] == [1]

"""Greedy selection of mail items that one robot (or one team) can carry together.

A plan holds at most one heavy item, which must come first, plus light
filler items. Without a heavy item a single robot takes up to two light
items, one in hand and one in its tube. With a heavy item every team member
carries the heavy item and each supporter's tube can take one filler, capped
at one light companion in total.
"""

from typing import List, Sequence

from capacity import is_heavy, required_team_size

MAX_PLAN_ITEMS = 2


def heaviest_item(items: Sequence) -> object:
    if not items:
        raise ValueError("Cannot pick the heaviest item of an empty plan")
    heaviest = items[0]
    for item in items[1:]:
        if item.weight > heaviest.weight:
            heaviest = item
    return heaviest


def plan_required_team_size(plan: Sequence) -> int:
    return required_team_size(heaviest_item(plan).weight)


def can_add_to_plan(plan: Sequence, item) -> bool:
    if not plan:
        return True
    if len(plan) >= MAX_PLAN_ITEMS or is_heavy(item.weight):
        return False
    heavy_count = sum(1 for m in plan if is_heavy(m.weight))
    if heavy_count == 0:
        return True
    light_count = len(plan) - heavy_count
    # one filler per supporter slot
    return heavy_count == 1 and light_count < plan_required_team_size(plan) - 1


def generate_plan(pending: Sequence) -> List:
    plan: List = []
    for item in pending:
        if can_add_to_plan(plan, item):
            plan.append(item)
    return plan


def has_enough_robot(available_count: int, plan: Sequence) -> bool:
    return available_count >= plan_required_team_size(plan)

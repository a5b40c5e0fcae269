import random
from typing import Dict, List, Optional

from capacity import MAX_TEAM_SIZE, team_max_weight
from data_types import Building, IdIssuer, MailItem, PriorityMailItem

PRIORITY_LEVELS = (10, 100)


class MailGenerator:
    """Creates the run's mail up front and releases it to the pool by arrival tick."""

    def __init__(
        self,
        building: Building,
        ids: IdIssuer,
        mail_to_create: int,
        last_delivery_time: int,
        seed: Optional[int] = None,
        priority_rate: int = 10,
        max_team_size: int = MAX_TEAM_SIZE,
    ):
        if mail_to_create < 0:
            raise ValueError("mail_to_create must be non-negative")
        if last_delivery_time < 1:
            raise ValueError("last_delivery_time must be at least 1")
        self.building = building
        self.ids = ids
        self.last_delivery_time = last_delivery_time
        self.priority_rate = priority_rate
        self.max_weight = team_max_weight(min(max_team_size, MAX_TEAM_SIZE))
        self.random = random.Random(seed)
        # +/- 20% around the requested amount
        spread = (mail_to_create * 2) // 5
        self.mail_to_create = mail_to_create * 4 // 5 + (self.random.randrange(spread) if spread else 0)
        self.allocation: Dict[int, List[MailItem]] = {}
        self._generate_all_mail()

    def generate_mail(self) -> MailItem:
        destination = self.random.randint(self.building.lowest_floor, self.building.top_floor)
        arrival = self.random.randint(1, self.last_delivery_time)
        weight = self._generate_weight()
        mail_id = self.ids.next_mail_id()
        if self.priority_rate > 0 and self.random.randrange(self.priority_rate) == 0:
            level = self.random.choice(PRIORITY_LEVELS)
            return PriorityMailItem(mail_id, destination, arrival, weight, level)
        return MailItem(mail_id, destination, arrival, weight)

    def _generate_weight(self) -> int:
        weight = int(200 + abs(self.random.gauss(0, 1)) * 1000)
        return min(weight, self.max_weight)

    def _generate_all_mail(self) -> None:
        for _ in range(self.mail_to_create):
            item = self.generate_mail()
            self.allocation.setdefault(item.arrival_time, []).append(item)

    def add_to_pool(self, mail_pool, now: int) -> int:
        arrived = self.allocation.pop(now, [])
        for item in arrived:
            mail_pool.add_to_pool(item)
        return len(arrived)

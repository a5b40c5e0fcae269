import math
from typing import Dict, List, Optional

from data_types import Clock
from errors import MailAlreadyDeliveredError

DEFAULT_DELIVERY_PENALTY = 1.2


def calculate_delivery_score(item, delivered_time: int, penalty: float = DEFAULT_DELIVERY_PENALTY) -> float:
    """Penalty for late delivery, scaled up for priority items."""
    waited = delivered_time - item.arrival_time
    return math.pow(waited, penalty) * (1 + math.sqrt(item.priority_level))


class DeliveryReport:
    def __init__(
        self,
        clock: Optional[Clock] = None,
        penalty: float = DEFAULT_DELIVERY_PENALTY,
        verbose: bool = False,
    ):
        self.clock = clock or Clock()
        self.penalty = penalty
        self.verbose = verbose
        self.records: Dict[int, Dict] = {}
        self.total_score = 0.0

    @property
    def delivered_count(self) -> int:
        return len(self.records)

    def deliver(self, item) -> None:
        if item.id in self.records:
            raise MailAlreadyDeliveredError(f"Mail item {item.id} delivered twice")
        now = self.clock.time
        score = calculate_delivery_score(item, now, self.penalty)
        self.records[item.id] = {
            "id": item.id,
            "destination_floor": item.destination_floor,
            "arrival_time": item.arrival_time,
            "weight": item.weight,
            "priority_level": item.priority_level,
            "delivered_time": now,
            "score": score,
        }
        self.total_score += score
        if self.verbose:
            print(f"T: {now:3d} > Delivered({len(self.records):4d}) [{item}]")

    def deliveries(self) -> List[Dict]:
        return sorted(self.records.values(), key=lambda r: (r["delivered_time"], r["id"]))

    def summary(self) -> Dict:
        last = max((r["delivered_time"] for r in self.records.values()), default=0)
        return {
            "delivered": self.delivered_count,
            "final_delivery_time": last,
            "total_score": self.total_score,
        }

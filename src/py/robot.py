from typing import List, Optional

from capacity import SINGLE, team_max_weight
from data_types import DELIVERING, RETURNING, WAITING, Building, Clock, IdIssuer
from errors import (
    ExcessiveDeliveryError,
    InvalidAddItemError,
    InvalidDispatchError,
    ItemTooHeavyError,
)
from task import Task

# hand + tube
MAX_DELIVERIES_PER_TRIP = 2


class Robot:
    """A single delivery robot holding one item in hand and one in its tube."""

    def __init__(
        self,
        robot_id: str,
        delivery,
        mail_pool,
        building: Building,
        floor: Optional[int] = None,
        clock: Optional[Clock] = None,
        verbose: bool = False,
    ):
        self.id = robot_id
        self.delivery = delivery
        self.mail_pool = mail_pool
        self.building = building
        self.floor = building.mailroom_floor if floor is None else floor
        self.clock = clock or Clock()
        self.verbose = verbose
        # starts away from the mailroom and heads home
        self.state = RETURNING
        self.task: Optional[Task] = None
        self.hand = None
        self.tube = None
        self.received_dispatch = False
        self.delivery_counter = 0

    def __repr__(self) -> str:
        return f"Robot({self.id}, floor={self.floor}, state={self.state})"

    # ------------------------------------------------------------------
    # actor surface

    def list_mail_items(self) -> List:
        return [item for item in (self.hand, self.tube) if item is not None]

    def list_robots(self) -> List["Robot"]:
        return [self]

    def is_active(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return self.hand is None and self.tube is None

    def can_add_mail_item(self, item) -> bool:
        if self.state != WAITING:
            return False
        if self.hand is None:
            team_size = self.task.robot_count if self.task is not None else SINGLE
            return item.weight <= team_max_weight(team_size)
        if self.tube is None:
            return item.weight <= team_max_weight(SINGLE)
        return False

    def add_mail_item(self, item) -> None:
        if self.state != WAITING:
            raise InvalidAddItemError(f"{self.id} is {self.state}, cannot load {item}")
        if self.hand is None:
            task = self.task or Task.form([self], item.destination_floor)
            if item.weight > team_max_weight(task.robot_count):
                raise ItemTooHeavyError(f"{item} too heavy for a team of {task.robot_count}")
            self.task = task
            self.add_to_hand(item)
        elif self.tube is None:
            self.add_to_tube(item)
        else:
            raise InvalidAddItemError(f"{self.id} has no free slot for {item}")

    def can_dispatch(self) -> bool:
        return self.state == WAITING and self.hand is not None and self.task is not None

    def dispatch(self) -> None:
        if not self.can_dispatch():
            raise InvalidDispatchError(f"{self.id} cannot be dispatched in state {self.state}")
        self.received_dispatch = True

    # ------------------------------------------------------------------
    # loading

    def assign_task(self, task: Task) -> None:
        if self.hand is not None:
            raise InvalidAddItemError(f"{self.id} already carries {self.hand}")
        self.task = task

    def add_to_hand(self, item) -> None:
        if self.hand is not None:
            raise InvalidAddItemError(f"{self.id} hand already holds {self.hand}")
        if self.task is None:
            raise InvalidAddItemError(f"{self.id} has no task for {item}")
        if item.weight > team_max_weight(self.task.robot_count):
            raise ItemTooHeavyError(
                f"{item} too heavy for a team of {self.task.robot_count}"
            )
        self.hand = item

    def add_to_tube(self, item) -> None:
        if self.hand is None:
            raise InvalidAddItemError(f"{self.id} cannot fill its tube with an empty hand")
        if self.tube is not None:
            raise InvalidAddItemError(f"{self.id} tube already holds {self.tube}")
        if item.weight > team_max_weight(SINGLE):
            raise ItemTooHeavyError(f"{item} too heavy for the tube")
        self.tube = item

    # ------------------------------------------------------------------
    # stepping

    def step(self) -> List:
        if self.state == RETURNING:
            mailroom = self.building.mailroom_floor
            if self.floor == mailroom:
                if self.tube is not None:
                    self.mail_pool.add_to_pool(self.tube)
                    self._trace(f"old addToPool [{self.tube}]")
                    self.tube = None
                self.mail_pool.register_waiting(self)
                self._change_state(WAITING)
                self.task = None
            else:
                self._move_towards(mailroom)
        elif self.state == WAITING:
            if not self.is_empty() and self.received_dispatch:
                self.received_dispatch = False
                self.delivery_counter = 0
                self._change_state(DELIVERING)
        elif self.state == DELIVERING:
            destination = self.task.destination_floor
            if self.floor == destination:
                if self.task.is_leading(self):
                    self.delivery.deliver(self.hand)
                self.hand = None
                self.delivery_counter += 1
                if self.delivery_counter > MAX_DELIVERIES_PER_TRIP:
                    raise ExcessiveDeliveryError(
                        f"{self.id} delivered {self.delivery_counter} items in one trip"
                    )
                if self.tube is None:
                    self.task = self.task.return_task(self, self.building.mailroom_floor)
                    self._change_state(RETURNING)
                else:
                    self.task = self.task.next_task(self, self.tube.destination_floor)
                    self.hand = self.tube
                    self.tube = None
                    self._change_state(DELIVERING)
            else:
                self._move_towards(destination)
        else:
            raise RuntimeError(f"{self.id} in unknown state {self.state}")
        return []

    def _move_towards(self, destination: int) -> None:
        if self.floor < destination:
            self.floor += 1
        elif self.floor > destination:
            self.floor -= 1

    def _change_state(self, next_state: str) -> None:
        if self.hand is None and self.tube is not None:
            raise RuntimeError(f"{self.id} holds {self.tube} in its tube with an empty hand")
        if self.state != next_state:
            self._trace(f"{self._id_tube()} changed from {self.state} to {next_state}")
        self.state = next_state
        if next_state == DELIVERING:
            self._trace(f"{self._id_tube()}-> [{self.hand}]")

    def _id_tube(self) -> str:
        return f"{self.id}({0 if self.tube is None else 1})"

    def _trace(self, message: str) -> None:
        if self.verbose:
            print(f"T: {self.clock.time:3d} > {message}")


def create_robots(
    count: int,
    delivery,
    mail_pool,
    building: Building,
    ids: IdIssuer,
    clock: Optional[Clock] = None,
    verbose: bool = False,
) -> List[Robot]:
    return [
        Robot(ids.next_robot_id(), delivery, mail_pool, building, clock=clock, verbose=verbose)
        for _ in range(count)
    ]

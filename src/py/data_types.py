import itertools
from dataclasses import dataclass, field

# Robot states
WAITING = "WAITING"
DELIVERING = "DELIVERING"
RETURNING = "RETURNING"

ROBOT_STATES = (WAITING, DELIVERING, RETURNING)


@dataclass(frozen=True)
class MailItem:
    id: int
    destination_floor: int
    arrival_time: int
    weight: int

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"Mail item {self.id} has negative weight {self.weight}")

    @property
    def priority_level(self) -> int:
        return 0

    def __str__(self) -> str:
        return (
            f"Mail Item:: ID: {self.id:6d} | Arrival: {self.arrival_time:4d}"
            f" | Destination: {self.destination_floor:2d} | Weight: {self.weight:4d}"
        )


@dataclass(frozen=True)
class PriorityMailItem(MailItem):
    level: int = 1

    @property
    def priority_level(self) -> int:
        return self.level

    def __str__(self) -> str:
        return super().__str__() + f" | Priority: {self.level:3d}"


@dataclass(frozen=True)
class Building:
    floors: int = 14
    lowest_floor: int = 1
    mailroom_floor: int = 1

    def __post_init__(self):
        if self.floors < 1:
            raise ValueError("Building needs at least one floor")
        top = self.lowest_floor + self.floors - 1
        if not self.lowest_floor <= self.mailroom_floor <= top:
            raise ValueError(
                f"Mailroom floor {self.mailroom_floor} outside building [{self.lowest_floor}, {top}]"
            )

    @property
    def top_floor(self) -> int:
        return self.lowest_floor + self.floors - 1


@dataclass
class Clock:
    time: int = 0

    def tick(self) -> int:
        self.time += 1
        return self.time


@dataclass
class IdIssuer:
    """Hands out stable identities for robots and mail items of one run."""

    _robot_ids: itertools.count = field(default_factory=itertools.count)
    _mail_ids: itertools.count = field(default_factory=itertools.count)

    def next_robot_id(self) -> str:
        return f"R{next(self._robot_ids)}"

    def next_mail_id(self) -> int:
        return next(self._mail_ids)

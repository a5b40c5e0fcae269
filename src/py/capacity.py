from typing import Dict

from errors import NotEnoughRobotError, UnsupportedTeamSizeError

SINGLE = 1
PAIR = 2
TRIPLE = 3

# team size -> max carryable weight
TEAM_MAX_WEIGHT: Dict[int, int] = {
    SINGLE: 2000,
    PAIR: 2600,
    TRIPLE: 3000,
}

MAX_TEAM_SIZE = max(TEAM_MAX_WEIGHT)


def team_max_weight(team_size: int) -> int:
    if team_size <= 0:
        raise NotEnoughRobotError(f"Team size must be positive, got {team_size}")
    if team_size not in TEAM_MAX_WEIGHT:
        raise UnsupportedTeamSizeError(
            f"Team size {team_size} exceeds the largest supported team ({MAX_TEAM_SIZE})"
        )
    return TEAM_MAX_WEIGHT[team_size]


def required_team_size(weight: int) -> int:
    """Smallest team able to carry ``weight``."""
    for team_size in sorted(TEAM_MAX_WEIGHT):
        if weight <= TEAM_MAX_WEIGHT[team_size]:
            return team_size
    raise UnsupportedTeamSizeError(
        f"Weight {weight} exceeds the largest team capacity {TEAM_MAX_WEIGHT[MAX_TEAM_SIZE]}"
    )


def is_heavy(weight: int) -> bool:
    return weight > team_max_weight(SINGLE)

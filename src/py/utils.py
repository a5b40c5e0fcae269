from typing import Dict, List


def validate_trajectories(trajectories: Dict[str, List[int]], lowest_floor: int, top_floor: int) -> None:
    """Check each robot stays in the building and moves at most one floor per tick."""
    for rid, floors in trajectories.items():
        for t, floor in enumerate(floors):
            if floor < lowest_floor or floor > top_floor:
                raise RuntimeError(f"Robot {rid} out of building at t={t}: floor {floor}")
            if t > 0 and abs(floor - floors[t - 1]) > 1:
                raise RuntimeError(
                    f"Robot {rid} jumped from floor {floors[t - 1]} to {floor} at t={t}"
                )


def count_delivered(deliveries: List[Dict], t: int) -> int:
    return sum(
        1 for d in deliveries
        if d.get("delivered_time") is not None and d["delivered_time"] <= t
    )

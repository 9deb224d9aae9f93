"""
Weekly training volume.

Counts working sets per muscle group and compares them to a weekly target
that depends on the user's goal (10-20 sets per muscle per week is the usual
hypertrophy range).
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from domain.models import SetLog

VOLUME_WINDOW_DAYS = 7

VOLUME_TARGETS: Dict[str, int] = {
    "strength": 10,
    "hypertrophy": 15,
    "general": 12,
}
DEFAULT_VOLUME_TARGET = 12


def volume_target(goal: Optional[str]) -> int:
    """Weekly sets per muscle group recommended for a goal."""
    return VOLUME_TARGETS.get((goal or "").strip().lower(), DEFAULT_VOLUME_TARGET)


def sets_per_muscle_group(logs: List[SetLog]) -> Dict[str, int]:
    """
    Count sets per muscle group.

    Sets whose exercise has no muscle group are not counted.
    """
    volume: Dict[str, int] = {}
    for log in logs:
        if log.muscle_group:
            volume[log.muscle_group] = volume.get(log.muscle_group, 0) + 1
    return volume


@dataclass
class MuscleGroupVolume:
    """Sets done for one muscle group against the weekly target."""
    muscle_group: str
    sets: int
    target: int

    @property
    def remaining(self) -> int:
        return max(0, self.target - self.sets)

    @property
    def on_target(self) -> bool:
        return self.sets >= self.target


def volume_report(logs: List[SetLog], goal: Optional[str]) -> List[MuscleGroupVolume]:
    """
    Per-muscle-group volume against the goal's target.

    Args:
        logs: Sets from the volume window
        goal: Training goal selecting the target

    Returns:
        One entry per trained muscle group, most sets first (ties by name)
    """
    target = volume_target(goal)
    counts = sets_per_muscle_group(logs)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        MuscleGroupVolume(muscle_group=group, sets=sets, target=target)
        for group, sets in ordered
    ]

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


RANK_UPGRADE = "Rank Upgrade"
TYPE_RATING = "Aircraft Type Rating"
GENERAL_TRAINING = "General Training"

PENDING = "Pending"
APPROVED = "Approved"


@dataclass(frozen=True)
class TrainingRequest:
    """
    A pilot's request for a rank upgrade, a type rating or general training.

    Approving a request is how a pilot's rank or type ratings change outside
    of direct staff edits.
    """
    request_id: str
    pilot_id: str
    category: str
    desired_rank: Optional[str] = None   # only for rank upgrades
    aircraft_type: Optional[str] = None  # only for type ratings
    status: str = PENDING

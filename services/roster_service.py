"""
Roster service.

Builds participants from plain records and selects the drafted subset that
feeds a generation round. Persistence of participant records belongs to the
caller; this module only converts and filters.
"""

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from domain.models.participant import Participant
from domain.models.role import Role

logger = logging.getLogger("balanced_squads.services.roster")

DF, MID, FW = Role.DEFENDER, Role.MIDFIELDER, Role.FORWARD

# Demo roster: 23 players so the default 3 x 6 draft can leave some out
SAMPLE_PLAYERS: list[tuple[str, int, tuple[Role, ...]]] = [
    # Forwards (some versatile)
    ('Alex "Striker" Johnson', 5, (FW,)),
    ('Ben "Goal" Miller', 4, (FW, MID)),
    ('Casey "Fox" Davis', 3, (FW,)),
    # Midfielders (some versatile)
    ('Dana "Maestro" Lee', 5, (MID, FW)),
    ('Eli "Engine" Smith', 4, (MID,)),
    ('Finn "Playmaker" Brown', 4, (MID, DF)),
    ('Gale "Pass" Wilson', 3, (MID,)),
    ('Harper "Dynamo" Garcia', 3, (MID,)),
    ('Iris "Spark" Rodriguez', 2, (MID,)),
    # Defenders (some versatile)
    ('Jack "The Wall" Martinez', 5, (DF,)),
    ('Kai "Rock" Anderson', 4, (DF, MID)),
    ('Liam "Titan" Thomas', 4, (DF,)),
    ('Morgan "King" Jackson', 3, (DF,)),
    ('Noel "Stopper" White', 3, (DF,)),
    ('Owen "Guardian" Harris', 3, (DF,)),
    ('Pat "Backbone" Martin', 2, (DF,)),
    ('Quinn "Last Line" Thompson', 2, (DF,)),
    ('Riley "Sweeper" Moore', 1, (DF,)),
    # Extras
    ('Sam "Shadow" Green', 4, (MID, DF)),
    ('Terry "Flash" Bell', 5, (FW, MID)),
    ('Uma "Utility" Vance', 3, (DF, MID, FW)),
    ('Vic "Versatile" King', 4, (DF, MID)),
    ('Wendy "Winger" Cross', 3, (FW,)),
]


def sample_participants() -> list[Participant]:
    """The built-in demo roster, ids ``p01``..``p23`` in declaration order."""
    return [
        Participant(id=f"p{i:02d}", name=name, rating=rating, roles=frozenset(roles))
        for i, (name, rating, roles) in enumerate(SAMPLE_PLAYERS, start=1)
    ]


def participant_from_record(record: Mapping[str, Any]) -> Participant:
    """
    Build a participant from a ``{id, name, rating, roles}`` mapping.

    Raises:
        ValueError: If a field is missing or invalid
    """
    if not isinstance(record, Mapping):
        raise ValueError(f"Participant record must be an object, got {type(record).__name__}")
    missing = [key for key in ("id", "name", "rating", "roles") if key not in record]
    if missing:
        raise ValueError(f"Participant record missing fields: {missing}")
    roles = record["roles"]
    if isinstance(roles, str):
        roles = [r for r in roles.split(",") if r.strip()]
    elif not isinstance(roles, (list, tuple)):
        raise ValueError(f"Invalid roles for {record['name']!r}: {roles!r}")
    raw_rating = record["rating"]
    if isinstance(raw_rating, bool) or (isinstance(raw_rating, float) and not raw_rating.is_integer()):
        raise ValueError(f"Invalid rating for {record['name']!r}: {raw_rating!r}")
    try:
        rating = int(raw_rating)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid rating for {record['name']!r}: {raw_rating!r}") from exc
    return Participant(
        id=str(record["id"]),
        name=str(record["name"]),
        rating=rating,
        roles=frozenset(Role.parse(r) for r in roles),
    )


def load_participants(path: str | Path) -> list[Participant]:
    """
    Read a JSON array of participant records.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content is not a list of valid records
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of participants in {path}")
    participants = [participant_from_record(record) for record in data]
    logger.debug(f"Loaded {len(participants)} participants from {path}")
    return participants


def select_draft(participants: Sequence[Participant], included_ids: Iterable[str]) -> list[Participant]:
    """
    Pick the drafted participants, preserving input order.

    Raises:
        ValueError: If an included id matches no participant
    """
    wanted = set(included_ids)
    known = {p.id for p in participants}
    unknown = sorted(wanted - known)
    if unknown:
        raise ValueError(f"Unknown participant ids in draft: {unknown}")
    return [p for p in participants if p.id in wanted]

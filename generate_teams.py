#!/usr/bin/env python3
"""
Generate balanced teams from the command line.

Examples:
    python generate_teams.py                       # demo roster, first 18 players
    python generate_teams.py --roster players.json --seed 7
    python generate_teams.py --attempts 100 --iterations 500 --verbose
"""

import argparse
import logging
import sys

from allocator import AllocationConfig
from config import LOG_LEVEL
from domain.models.role import Role
from services.allocation_service import AllocationService
from services.roster_service import load_participants, sample_participants

logger = logging.getLogger("balanced_squads")


def _format_outcome(outcome) -> str:
    lines = [outcome.summary(), ""]
    for group in outcome.groups:
        average = group.average_rating
        avg_text = f"{average:.1f}" if average is not None else "N/A"
        lines.append(f"{group.name}  (Avg. Rating: {avg_text}, Total: {group.total_rating})")
        for role, members in group.members_by_role().items():
            if not members:
                continue
            names = ", ".join(f"{p.name} [{p.rating}]" for p in members)
            lines.append(f"  {role.value:<11} {names}")
        lines.append("")
    return "\n".join(lines).rstrip()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Split a drafted roster into balanced teams.")
    parser.add_argument("--roster", help="JSON list of {id, name, rating, roles} (default: demo roster)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible draw")
    parser.add_argument("--attempts", type=int, default=None, help="Greedy attempts per round")
    parser.add_argument("--iterations", type=int, default=None, help="Swap refinement iterations")
    parser.add_argument("--verbose", action="store_true", help="Log per-attempt and per-swap detail")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    overrides = {}
    if args.attempts is not None:
        overrides["max_attempts"] = args.attempts
    if args.iterations is not None:
        overrides["refinement_iterations"] = args.iterations
    try:
        config = AllocationConfig.from_settings(**overrides)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    try:
        if args.roster:
            roster = load_participants(args.roster)
        else:
            roster = sample_participants()[: config.required_participants]
    except (OSError, ValueError) as exc:
        print(f"ERROR: Could not read roster: {exc}", file=sys.stderr)
        return 2

    demand = ", ".join(f"{config.role_demand.slots_for(r)} {r.value}" for r in Role)
    logger.info(f"Drafting {len(roster)} players into {len(config.group_names)} teams of ({demand})")

    result = AllocationService(config).generate(roster, seed=args.seed)
    if not result.success:
        print(f"ERROR ({result.error_code}): {result.error}", file=sys.stderr)
        return 1

    print(_format_outcome(result.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())

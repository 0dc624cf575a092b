from __future__ import annotations

import argparse
import random
import string
import sys
from typing import List, Optional

from .models import Schedule


def elevator_labels(count: int) -> List[str]:
    letters = string.ascii_uppercase
    if count <= len(letters):
        return list(letters[:count])
    return [f"E{index}" for index in range(1, count + 1)]


def generate_schedule(
    elevators: int,
    horizon: int,
    floors: int,
    seed: Optional[int] = None,
) -> Schedule:
    if elevators < 1 or horizon < 1 or floors < 1:
        raise ValueError("elevators, horizon and floors must all be positive")
    rng = random.Random(seed)
    table = {
        label: tuple(rng.randint(1, floors) for _ in range(horizon))
        for label in elevator_labels(elevators)
    }
    return Schedule(elevators=table)


def schedule_to_text(schedule: Schedule) -> str:
    lines = [f"{label} " + " ".join(str(floor) for floor in floors) for label, floors in schedule.elevators.items()]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Random elevator schedule generator")
    parser.add_argument("--elevators", type=int, default=4, help="Number of elevators")
    parser.add_argument("--horizon", type=int, default=5, help="Number of time steps")
    parser.add_argument("--floors", type=int, default=6, help="Highest floor number")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--start", help="Optional start elevator directive")
    parser.add_argument("--destination", help="Optional FLOOR-TIME destination directive")
    args = parser.parse_args(argv)

    try:
        schedule = generate_schedule(args.elevators, args.horizon, args.floors, seed=args.seed)
    except ValueError as exc:
        print(f"Failed to generate schedule: {exc}", file=sys.stderr)
        return 2

    text = schedule_to_text(schedule)
    if args.start:
        text += f"start {args.start}\n"
    if args.destination:
        text += f"destination {args.destination}\n"
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

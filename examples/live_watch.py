"""Watch live weather for a place using the dashboard's refresh controller.

Run from the repository root:
    python examples/live_watch.py "Reykjavik" --seconds 20
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "dashboard"))

from shared.data import get_geolocation_provider, get_repository  # noqa: E402
from shared.services import RefreshController  # noqa: E402


async def watch(query: str, seconds: int) -> None:
    repo = get_repository()
    location = await repo.geocode(query)
    if location is None:
        print(f"No match for {query!r}")
        return

    controller = RefreshController.from_settings(repo, get_geolocation_provider())
    await controller.set_location(location)
    controller.start()
    try:
        for _ in range(seconds):
            await asyncio.sleep(1)
            display = controller.compute_display()
            status = controller.error or f"next sync in {controller.seconds_until_next_refresh}s"
            print(
                f"[{display.timestamp}] {display.location_label}: {display.condition.value}, "
                f"{display.temperature:.1f}°C, {display.humidity:.0f}% ({status})"
            )
    finally:
        await controller.stop()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("query", help="Place to watch")
    parser.add_argument("--seconds", type=int, default=15)
    args = parser.parse_args()
    asyncio.run(watch(args.query, args.seconds))


if __name__ == "__main__":
    main()

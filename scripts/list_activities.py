"""Print the titles of every activity exposed by a running API."""

from __future__ import annotations

import argparse
import logging

from app.interfaces.client import DEFAULT_BASE_URL, fetch_activities, render_activities


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="List activity titles.")
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Root URL of the activities API (default: {DEFAULT_BASE_URL})",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    print(render_activities(fetch_activities(args.base_url)))


if __name__ == "__main__":
    main()

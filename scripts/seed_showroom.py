#!/usr/bin/env python3
"""
Fill a running showroom with a deterministic mix of vehicles.

Features:
- Deterministic: fixed seed → same sequence of variants every run
- Goes through the public HTTP endpoints, exactly like a browser would

Usage:
    showroom-lite &
    python scripts/seed_showroom.py --base-url http://127.0.0.1:8000 --count 6
"""

from __future__ import annotations

import argparse
import random
import sys

import httpx

from showroom_lite.domain.creators import VehicleVariant


RANDOM_SEED = 42
NUM_VEHICLES = 6


def seed_showroom(base_url: str, count: int = NUM_VEHICLES, seed: int = RANDOM_SEED) -> None:
    random.seed(seed)
    variants = [random.choice(list(VehicleVariant)) for _ in range(count)]

    print(f"🌱 Adding {count} vehicles to {base_url} (seed={seed})...")

    with httpx.Client(base_url=base_url, follow_redirects=False) as client:
        for variant in variants:
            response = client.get(f"/add/{variant.value}")
            if response.status_code != 302:
                raise RuntimeError(f"Unexpected status {response.status_code} adding {variant.value}")

        listing = client.get("/").json()

    print(f"✅ Showroom now holds {listing['total']} vehicles")
    for i, vehicle in enumerate(listing["vehicles"][-count:], 1):
        print(f"   {i}. {vehicle['year']} {vehicle['brand']} {vehicle['model']} ({vehicle['color']}, {vehicle['engine_type']})")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--base-url", default="http://127.0.0.1:8000")
    parser.add_argument("--count", type=int, default=NUM_VEHICLES)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    args = parser.parse_args()

    try:
        seed_showroom(args.base_url, args.count, args.seed)
    except Exception as e:
        print(f"❌ Error seeding showroom: {e}", file=sys.stderr)
        sys.exit(1)

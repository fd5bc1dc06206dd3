#!/usr/bin/env python3
"""
Seed script: demo marketplace data.

Default: runs SeedService directly against DATABASE_URL (no-op when users exist).
With --extra-users, also registers random sellers through a running API and lists
vinyls for them, which exercises the same path the web client uses.
  python scripts/seed_data.py
  python scripts/seed_data.py --extra-users 20 --vinyls-per-user 10
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx

from vinylplatz.main import run_seed

API_BASE = "http://localhost:8000/api/v1"

ARTISTS = [
    "Miles Davis", "Nina Simone", "Fleetwood Mac", "Kraftwerk", "Aretha Franklin",
    "Radiohead", "Fela Kuti", "Joni Mitchell", "Talking Heads", "Bill Evans",
    "Portishead", "Sade", "The Clash", "Herbie Hancock", "Björk",
]

TITLE_WORDS = [
    "Blue", "Night", "Live", "Sessions", "Dreams", "Electric", "Sunday", "Rumours",
    "Motion", "Silver", "Echoes", "Home", "Vol. 2", "Revisited", "Deluxe",
]

CONDITIONS = ["Mint", "Near Mint", "Excellent", "Very Good Plus", "Very Good", "Good", "Fair", "Poor"]


def random_title() -> str:
    return " ".join(random.sample(TITLE_WORDS, k=random.randint(1, 3)))


def random_price() -> str:
    return f"{random.randint(5, 250)}.{random.choice(['00', '50', '99'])}"


def seed_via_api(base_url: str, users: int, vinyls_per_user: int) -> None:
    created_users = 0
    created_vinyls = 0
    errors = []

    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        genres = [g["id"] for g in client.get("/genres").json()]
        print(f"Creating {users} sellers with {vinyls_per_user} vinyls each...")
        for i in range(users):
            email = f"seller{i+1}@example.com"
            r = client.post(
                "/auth/register",
                json={"name": f"Seller {i+1}", "email": email, "password": "password123"},
            )
            if r.status_code == 409:
                r = client.post("/auth/login", json={"email": email, "password": "password123"})
            if r.status_code not in (200, 201):
                errors.append(f"Register {email}: {r.status_code} {r.text[:80]}")
                continue
            created_users += 1
            headers = {"Authorization": f"Bearer {r.json()['access_token']}"}
            for _ in range(vinyls_per_user):
                r2 = client.post(
                    "/vinyls",
                    headers=headers,
                    json={
                        "title": random_title(),
                        "artist": random.choice(ARTISTS),
                        "release_year": random.randint(1955, 2024),
                        "condition": random.choice(CONDITIONS),
                        "price": random_price(),
                        "genre_id": random.choice(genres) if genres else None,
                    },
                )
                if r2.status_code == 201:
                    created_vinyls += 1
                else:
                    errors.append(f"Vinyl {email}: {r2.status_code}")
            if (i + 1) % 10 == 0:
                print(f"  ... {i+1} sellers")

    print(f"\nDone. Sellers: {created_users}, Vinyls created: {created_vinyls}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


def main():
    ap = argparse.ArgumentParser(description="Seed demo marketplace data")
    ap.add_argument("--extra-users", type=int, default=0, help="Random sellers to create via the API")
    ap.add_argument("--vinyls-per-user", type=int, default=10, help="Vinyls per random seller")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    seeded = asyncio.run(run_seed())
    print("Demo data seeded." if seeded else "Database already has users; demo seed skipped.")

    if args.extra_users:
        seed_via_api(args.base_url, args.extra_users, args.vinyls_per_user)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""run_demo.py — Exercise the recommendation and chat endpoints of a live server.

Usage:
    python scripts/run_demo.py              # default: http://localhost:3000
    python scripts/run_demo.py --base-url http://localhost:3000
    python scripts/run_demo.py --interests "astronomy, drawing and chess"
"""

from __future__ import annotations

import argparse
import sys

import httpx

DEFAULT_INTERESTS = "I love coding, solving puzzles and playing the guitar."

CHAT_HISTORY = [
    {"role": "user", "parts": [{"text": "Hi Eva! I enjoy biology but I'm not sure I want to be a doctor."}]},
]


def run_demo(base_url: str, interests: str) -> int:
    print("═" * 60)
    print(" EduAdvisor API — Demo")
    print("═" * 60)
    print(f"Target: {base_url}\n")

    # Health check
    try:
        resp = httpx.get(f"{base_url}/api/health", timeout=5)
        resp.raise_for_status()
        print(f"✅ Health check: {resp.json()}\n")
    except httpx.HTTPError as exc:
        print(f"❌ Health check failed: {exc}")
        print("   Make sure the server is running: python -m app.main")
        return 1

    failures = 0

    print(f"─── Recommendations {'─' * 40}")
    print(f"  Interests: {interests}")
    try:
        resp = httpx.post(
            f"{base_url}/api/recommendations",
            json={"interests": interests},
            timeout=30,
        )
        data = resp.json()
        if resp.status_code != 200:
            raise RuntimeError(f"HTTP {resp.status_code}: {data.get('error')}")
        for entry in data["careers"]:
            print(f"  → Career: {entry['career']} [{entry['icon']}]")
            print(f"       study: {', '.join(entry['studies'])}")
        for entry in data["hobbies"]:
            print(f"  → Hobby:  {entry['hobby']} [{entry['icon']}] — {entry['description']}")
    except (httpx.HTTPError, RuntimeError, KeyError, ValueError) as exc:
        print(f"  ❌ Error: {exc}")
        failures += 1
    print()

    print(f"─── Chat {'─' * 51}")
    print(f"  User: {CHAT_HISTORY[-1]['parts'][0]['text']}")
    try:
        resp = httpx.post(
            f"{base_url}/api/chat",
            json={"history": CHAT_HISTORY},
            timeout=60,
        )
        data = resp.json()
        if resp.status_code != 200:
            raise RuntimeError(f"HTTP {resp.status_code}: {data.get('error')}")
        print(f"  Eva:  {data['message']}")
    except (httpx.HTTPError, RuntimeError, KeyError, ValueError) as exc:
        print(f"  ❌ Error: {exc}")
        failures += 1
    print()

    print("═" * 60)
    print(f" Results: {2 - failures}/2 endpoints responded successfully")
    print("═" * 60)
    return 1 if failures else 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run EduAdvisor demo requests")
    parser.add_argument("--base-url", default="http://localhost:3000", help="API base URL")
    parser.add_argument("--interests", default=DEFAULT_INTERESTS, help="Interests to submit")
    args = parser.parse_args()
    sys.exit(run_demo(args.base_url, args.interests))

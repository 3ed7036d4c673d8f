"""Lightweight REST client for the teambalance API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_players(path: Path) -> list[dict]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid players JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the teambalance REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("players", type=Path, nargs="?", help="Players JSON")
    parser.add_argument("--teams", type=int, default=2, help="Number of teams to request")
    parser.add_argument("--players-per-team", type=int, default=None, help="Target roster size")
    parser.add_argument("--preset", default=None, help="Weight preset key")
    parser.add_argument("--lock", nargs="*", default=[], help="Player IDs to lock after generation")
    parser.add_argument("--reshuffle", action="store_true", help="Request a reshuffle after generation")
    parser.add_argument("--list-presets", action="store_true", help="List weight presets and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_presets:
            resp = client.get("/presets")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.players is None:
            raise SystemExit("players file is required unless using --list-presets")

        players = load_players(args.players)
        request = {
            "players": players,
            "number_of_teams": args.teams,
            "players_per_team": args.players_per_team,
            "preset": args.preset,
        }
        resp = client.post("/teams", json=request)
        if resp.status_code == 400:
            raise SystemExit(resp.json().get("detail", "request rejected"))
        resp.raise_for_status()
        payload = resp.json()
        teams = payload["teams"]
        print(f"Spread {payload['total_score_difference']:.3f} after {payload['iterations']} iteration(s)")

        for player_id in args.lock:
            resp = client.post("/teams/lock", json={"teams": teams, "player_id": player_id, "locked": True})
            resp.raise_for_status()
            body = resp.json()
            if not body["ok"]:
                print(f"Player {player_id} not found; skipping lock")
            teams = body["teams"]

        if args.reshuffle:
            resp = client.post(
                "/teams/reshuffle",
                json={"players": players, "teams": teams, "players_per_team": args.players_per_team},
            )
            resp.raise_for_status()
            body = resp.json()
            teams = body["teams"]
            label = "forced" if body["forced"] else f"{body['attempts']} attempt(s)"
            print(f"Reshuffled ({label}); {body['moved_players']} players moved")

        print(json.dumps(teams, indent=2))


if __name__ == "__main__":
    main()

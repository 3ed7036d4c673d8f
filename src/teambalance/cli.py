"""Command-line interface for splitting a player pool into balanced teams."""

from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from teambalance.config import apply_overrides, get_preset
from teambalance.config_loader import MatchTemplate
from teambalance.engine import NoEligiblePlayersError, generate_teams
from teambalance.models import PlayerRecord


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate balanced teams from rated players")
    parser.add_argument("players", type=Path, help="Path to a JSON list of player records")
    parser.add_argument("--teams", type=int, default=None, help="Number of teams (default 2)")
    parser.add_argument("--players-per-team", type=int, default=None, help="Target roster size per team")
    parser.add_argument("--preset", default=None, help="Weight preset (default, uniform, offense, defense)")
    parser.add_argument(
        "--weight",
        action="append",
        default=[],
        help="Override one skill weight (e.g., attack=0.3)",
    )
    parser.add_argument(
        "--normalize-weights",
        action="store_true",
        help="Scale weights so they sum to 1.0 before scoring",
    )
    parser.add_argument("--template", type=Path, default=None, help="Load a match template JSON")
    parser.add_argument("--save-template", type=Path, default=None, help="Save the resolved settings as a template")
    parser.add_argument("--seed", type=int, default=None, help="Seed recorded with the result")
    parser.add_argument("--output", type=Path, default=Path("teams.csv"), help="Output CSV path")
    parser.add_argument("--verbose", action="store_true", help="Log optimizer progress")
    return parser.parse_args()


def _parse_weights(entries: list[str]) -> dict[str, float]:
    overrides: dict[str, float] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid weight entry '{entry}', expected skill=value")
        key, value = entry.split("=", 1)
        overrides[key.strip().lower()] = float(value)
    return overrides


def _load_players(path: Path) -> list[PlayerRecord]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Could not read players from {path}: {exc}") from exc
    if not isinstance(payload, list):
        raise SystemExit(f"{path} must contain a JSON list of players")
    try:
        return [PlayerRecord.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise SystemExit(f"Invalid player record in {path}: {exc}") from exc


def _load_template(path: Path) -> MatchTemplate:
    try:
        return MatchTemplate.load(path)
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Could not read template from {path}: {exc}") from exc
    except (ValidationError, ValueError, TypeError, AttributeError) as exc:
        raise SystemExit(f"Invalid match template in {path}: {exc}") from exc


def main() -> None:
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    template = _load_template(args.template) if args.template else None
    if args.preset:
        try:
            weights = get_preset(args.preset).weights
        except KeyError as exc:
            raise SystemExit(str(exc.args[0])) from exc
    elif template is not None:
        weights = template.skill_weights
    else:
        weights = get_preset("default").weights

    try:
        weights = apply_overrides(weights, _parse_weights(args.weight))
    except (KeyError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    if args.normalize_weights:
        weights = weights.normalized()

    number_of_teams = args.teams or (template.number_of_teams if template else 2)
    players_per_team = args.players_per_team
    if players_per_team is None and template is not None:
        players_per_team = template.players_per_team

    if args.save_template:
        name = template.name if template else args.save_template.stem
        MatchTemplate(name, number_of_teams, players_per_team, weights).save(args.save_template)
        print(f"Saved match template to {args.save_template}")

    players = _load_players(args.players)
    try:
        result = generate_teams(
            players,
            number_of_teams,
            players_per_team=players_per_team,
            skill_weights=weights,
            random_seed=args.seed,
        )
    except NoEligiblePlayersError as exc:
        raise SystemExit(str(exc)) from exc

    with args.output.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["team_id", "team_name", "total_score", "player_ids", "player_names", "locked"])
        for team in result.teams:
            writer.writerow([
                team.team_id,
                team.name,
                f"{team.total_score:.3f}",
                " ".join(slot.player_id for slot in team.players),
                "|".join(slot.name for slot in team.players),
                " ".join(slot.player_id for slot in team.players if slot.locked),
            ])

    for team in result.teams:
        print(f"{team.name}: {team.total_score:.2f} ({len(team.players)} players)")
    print(
        "Spread {:.3f}, skill balance {:.4f}, {} iteration(s) in {:.1f} ms".format(
            result.total_score_difference,
            result.skill_balance_score,
            result.iterations,
            result.execution_time_ms,
        )
    )
    print(f"Wrote teams to {args.output}")


if __name__ == "__main__":
    main()

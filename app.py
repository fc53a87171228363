"""
Fantasy league simulator: Flask app.
JSON API over the league engine: register teams, draft, set lineups, schedule and simulate weeks, read standings.
"""
import logging
import threading

from flask import Flask, jsonify, request

from league import League, LeagueConfig, ValidationError
from models.constants import (
    DEFAULT_LEAGUE_NAME,
    DEFAULT_MAX_TEAMS,
    DEFAULT_ROSTER_SIZE,
    DEFAULT_LINEUP_SIZE,
    ScoringMode,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
# FANTASY_MAX_TEAMS, FANTASY_ROSTER_SIZE, FANTASY_LINEUP_SIZE, FANTASY_SCORING_MODE, FANTASY_SEED, FANTASY_LEAGUE_NAME
app.config.from_prefixed_env("FANTASY")

# Serializes every request that mutates or replaces the league
_league_lock = threading.RLock()

_league: League | None = None


def config_from_app() -> LeagueConfig:
    """League settings from app.config, falling back to the league defaults."""
    return LeagueConfig.from_dict({
        "name": app.config.get("LEAGUE_NAME", DEFAULT_LEAGUE_NAME),
        "max_teams": app.config.get("MAX_TEAMS", DEFAULT_MAX_TEAMS),
        "roster_size": app.config.get("ROSTER_SIZE", DEFAULT_ROSTER_SIZE),
        "lineup_size": app.config.get("LINEUP_SIZE", DEFAULT_LINEUP_SIZE),
        "scoring_mode": app.config.get("SCORING_MODE", ScoringMode.CUMULATIVE.value),
        "seed": app.config.get("SEED"),
    })


def reset_league(config: LeagueConfig | None = None) -> League:
    """Replace the in-memory league with a fresh one."""
    global _league
    with _league_lock:
        _league = League(config or config_from_app())
        logger.info("League reset: %s", _league.config.to_dict())
        return _league


def get_league() -> League:
    with _league_lock:
        if _league is None:
            return reset_league()
        return _league


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _bad_request(message: str, code: str = "bad_request"):
    return jsonify({"error": message, "code": code}), 400


@app.errorhandler(ValidationError)
def handle_validation_error(e: ValidationError):
    return jsonify(e.to_dict()), 404 if e.is_not_found else 400


# ---------------------------------------------------------------------------
# League
# ---------------------------------------------------------------------------

@app.route("/api/league", methods=["GET"])
def api_league():
    """League settings, current week and phase."""
    return jsonify(get_league().summary())


@app.route("/api/league/reset", methods=["POST"])
def api_league_reset():
    """Start a new league. Optional JSON body overrides settings: {max_teams, roster_size, lineup_size, scoring_mode, seed, name}."""
    data = _json_body()
    base = config_from_app().to_dict()
    base.update({k: v for k, v in data.items() if k in base or k == "seed"})
    try:
        config = LeagueConfig.from_dict(base)
    except (TypeError, ValueError) as e:
        return _bad_request(str(e), "invalid_config")
    with _league_lock:
        league = reset_league(config)
        summary = league.summary()
    return jsonify(summary), 201


# ---------------------------------------------------------------------------
# Teams
# ---------------------------------------------------------------------------

@app.route("/api/teams", methods=["GET"])
def api_teams():
    return jsonify({"teams": get_league().list_teams()})


@app.route("/api/teams", methods=["POST"])
def api_register_team():
    """Register a team from JSON: { name, owner }."""
    data = _json_body()
    with _league_lock:
        team = get_league().register_team(str(data.get("name") or ""), str(data.get("owner") or ""))
    return jsonify(team.to_summary()), 201


@app.route("/api/teams/<int:team_id>/roster", methods=["GET"])
def api_team_roster(team_id: int):
    league = get_league()
    team = league.get_team(team_id)
    return jsonify({"team": team.to_summary(), "roster": league.team_roster(team_id)})


@app.route("/api/teams/<int:team_id>/lineup", methods=["GET"])
def api_team_lineup(team_id: int):
    league = get_league()
    team = league.get_team(team_id)
    return jsonify({"team": team.to_summary(), "lineup": league.team_lineup(team_id)})


@app.route("/api/teams/<int:team_id>/draft", methods=["POST"])
def api_draft_player(team_id: int):
    """Draft from JSON: { player_id }."""
    try:
        player_id = int(_json_body().get("player_id"))
    except (TypeError, ValueError):
        return _bad_request("Missing or invalid player_id")
    with _league_lock:
        player = get_league().draft_player(team_id, player_id)
    return jsonify({"ok": True, "player": player.to_summary()})


@app.route("/api/teams/<int:team_id>/release", methods=["POST"])
def api_release_player(team_id: int):
    """Release to the draft pool from JSON: { player_id }."""
    try:
        player_id = int(_json_body().get("player_id"))
    except (TypeError, ValueError):
        return _bad_request("Missing or invalid player_id")
    with _league_lock:
        player = get_league().release_player(team_id, player_id)
    return jsonify({"ok": True, "player": player.to_summary()})


@app.route("/api/teams/<int:team_id>/lineup", methods=["POST"])
def api_set_lineup(team_id: int):
    """Set lineup from JSON: { player_ids: [id, ...] }."""
    raw = _json_body().get("player_ids")
    if not isinstance(raw, list):
        return _bad_request("Missing player_ids")
    try:
        player_ids = [int(pid) for pid in raw]
    except (TypeError, ValueError):
        return _bad_request("player_ids must be integers")
    with _league_lock:
        lineup = get_league().set_team_lineup(team_id, player_ids)
        body = {"ok": True, "lineup": [p.to_summary() for p in lineup]}
    return jsonify(body)


# ---------------------------------------------------------------------------
# Season
# ---------------------------------------------------------------------------

@app.route("/api/matchups", methods=["POST"])
def api_generate_matchups():
    """Pair teams for the current week."""
    with _league_lock:
        result = get_league().generate_matchups()
    return jsonify(result.to_dict()), 200 if result.ok else 409


@app.route("/api/week/sim", methods=["POST"])
def api_sim_week():
    """Simulate the scheduled matchups and advance the week."""
    with _league_lock:
        result = get_league().simulate_week()
    return jsonify(result.to_dict()), 200 if result.ok else 409


@app.route("/api/standings", methods=["GET"])
def api_standings():
    return jsonify({"standings": get_league().standings()})


@app.route("/api/report", methods=["GET"])
def api_weekly_report():
    report = get_league().weekly_report()
    return jsonify(report.to_dict()), 200 if report.ok else 409


# ---------------------------------------------------------------------------
# Players
# ---------------------------------------------------------------------------

@app.route("/api/players", methods=["GET"])
def api_available_players():
    """Undrafted players, optionally ?position=QB|RB|WR|TE|K|DEF."""
    position = request.args.get("position") or None
    return jsonify({"players": get_league().available_players(position)})


@app.route("/api/players/leaders", methods=["GET"])
def api_player_leaders():
    return jsonify({"players": get_league().player_leaderboard()})


@app.route("/api/players/<int:player_id>", methods=["GET"])
def api_player_stats(player_id: int):
    return jsonify({"player": get_league().player_stats(player_id)})


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=True, port=5000)

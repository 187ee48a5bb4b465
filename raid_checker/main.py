# raid_checker/main.py
import datetime
import traceback

import pytz
from flask import Flask, jsonify, render_template, request
from flask_socketio import SocketIO, emit

from raid_checker import config
from raid_checker.classes import player as player_class
from raid_checker.database import connection as db_connection
from raid_checker.database import data_loader, profile_handler
from raid_checker.errors import InvalidInputError, ParseError, UpstreamUnavailableError
from raid_checker.game_logic import eligibility, hiscores
from raid_checker.game_logic.lookup import HiscoreService, validate_player_name

app = Flask(__name__)
app.config['SECRET_KEY'] = config.SECRET_KEY
socketio = SocketIO(app, async_mode=config.SOCKETIO_ASYNC_MODE)

# Loaded once at start; replaced by run_server() with the database copy when one is reachable.
RAID_CATALOG = data_loader.default_raid_catalog()
UI_OPTIONS = data_loader.load_ui_options()
HISCORE_SERVICE = HiscoreService()


def _log_prefix():
    return f"[{datetime.datetime.now(pytz.utc).strftime('%Y-%m-%d %H:%M:%S %Z')}]"


def lookup_profile(player_name, quests=None, gear=None):
    """Fetches (or reuses cached) hiscores and turns them into a profile."""
    player_name = validate_player_name(player_name)
    raw_text = HISCORE_SERVICE.get_hiscore_data(player_name)
    records = hiscores.parse_hiscores(raw_text)
    return player_class.profile_from_hiscores(records, quests, gear, name=player_name)


def profile_from_request(data):
    """Builds a profile from either typed-in levels or a player name to look up."""
    if not isinstance(data, dict):
        raise InvalidInputError("body", "Expected a JSON object.")
    if data.get("levels") is not None:
        return player_class.build_profile(
            data["levels"], data.get("quests"), data.get("gear"),
            combat_level=data.get("combat_level"), name=data.get("player")
        )
    if data.get("player"):
        return lookup_profile(data["player"], data.get("quests"), data.get("gear"))
    raise InvalidInputError("levels", "Provide either 'levels' or a 'player' name to look up.")


def stats_payload(profile):
    return {
        "player": profile.name,
        "combat_level": profile.combat_level,
        "skills": {skill: record.to_dict() for skill, record in profile.skills.items()},
    }


def results_payload(profile, results):
    return {
        "player": profile.name,
        "combat_level": profile.combat_level,
        "levels": profile.levels,
        "raids": [dict(result.to_dict(), name=requirement.name) for requirement, result in results],
        "unlocked": eligibility.unlocked_raid_names(results),
    }


def error_payload(error):
    """Maps a core failure to (user message, http status, extra fields)."""
    if isinstance(error, InvalidInputError):
        return error.message, 400, {"field": error.field}
    if isinstance(error, ParseError):
        return config.MSG_UNEXPECTED_FORMAT, 502, {"kind": error.kind}
    if isinstance(error, UpstreamUnavailableError):
        return config.MSG_UPSTREAM_UNAVAILABLE, 503, {}
    raise error


def _json_error(error):
    message, status, extra = error_payload(error)
    if config.DEBUG_MODE: print(f"{_log_prefix()} DEBUG API: {request.path} -> {status}: {error}")
    return jsonify(dict(extra, error=message)), status


# --- HTTP ---

@app.route('/')
def index_page():
    return render_template('index.html', app_name=config.APP_NAME)


@app.route('/api/hiscore')
def hiscore_passthrough():
    player_name = request.args.get('player', '')
    if not player_name.strip():
        return config.MSG_MISSING_PLAYER, 400, {'Content-Type': 'text/plain'}
    try:
        data = HISCORE_SERVICE.get_hiscore_data(player_name)
    except InvalidInputError as e:
        return e.message, 400, {'Content-Type': 'text/plain'}
    except UpstreamUnavailableError as e:
        print(f"{_log_prefix()} ERROR API: {e}")
        return config.MSG_FETCH_FAILED, 500, {'Content-Type': 'text/plain'}
    return data, 200, {'Content-Type': 'text/plain'}


@app.route('/api/stats')
def player_stats():
    try:
        profile = lookup_profile(request.args.get('player', ''))
    except (InvalidInputError, ParseError, UpstreamUnavailableError) as e:
        return _json_error(e)
    return jsonify(stats_payload(profile))


@app.route('/api/eligibility', methods=['POST'])
def check_eligibility():
    try:
        profile = profile_from_request(request.get_json(silent=True))
    except (InvalidInputError, ParseError, UpstreamUnavailableError) as e:
        return _json_error(e)
    return jsonify(results_payload(profile, eligibility.evaluate(profile, RAID_CATALOG)))


@app.route('/api/raids')
def list_raids():
    return jsonify({"raids": [requirement.to_dict() for requirement in RAID_CATALOG]})


@app.route('/api/options')
def list_options():
    return jsonify(UI_OPTIONS)


# --- SOCKET.IO ---

def _emit_error(event, error):
    message, _status, extra = error_payload(error)
    if config.DEBUG_MODE: print(f"{_log_prefix()} DEBUG SOCKET: SID {request.sid} -> {event}: {error}")
    emit(event, dict(extra, error=message))


@socketio.on('connect')
def handle_connect():
    if config.DEBUG_MODE: print(f"DEBUG: Client connected: SID {request.sid}")
    emit('raid_catalog', {"raids": [requirement.to_dict() for requirement in RAID_CATALOG]})


@socketio.on('disconnect')
def handle_disconnect(*args):
    if config.DEBUG_MODE: print(f"DEBUG: Client SID {request.sid} disconnected.")


@socketio.on('lookup_player')
def handle_lookup_player(data):
    try:
        profile = lookup_profile((data or {}).get('player'))
    except (InvalidInputError, ParseError, UpstreamUnavailableError) as e:
        _emit_error('lookup_error', e)
        return
    emit('player_stats', stats_payload(profile))


@socketio.on('check_raids')
def handle_check_raids(data):
    try:
        profile = profile_from_request(data)
    except InvalidInputError as e:
        _emit_error('input_error', e)
        return
    except (ParseError, UpstreamUnavailableError) as e:
        _emit_error('lookup_error', e)
        return
    emit('raid_results', results_payload(profile, eligibility.evaluate(profile, RAID_CATALOG)))


@socketio.on('save_profile')
def handle_save_profile(data):
    data = data or {}
    try:
        player_name = validate_player_name(data.get('player'))
        profile = profile_from_request(data)
    except (InvalidInputError, ParseError, UpstreamUnavailableError) as e:
        _emit_error('profile_error', e)
        return
    saved = profile_handler.save_profile(player_name, profile)
    emit('profile_saved', {"player": player_name, "saved": saved})


@socketio.on('load_profile')
def handle_load_profile(data):
    try:
        player_name = validate_player_name((data or {}).get('player'))
    except InvalidInputError as e:
        _emit_error('profile_error', e)
        return
    profile = profile_handler.load_profile(player_name)
    emit('profile_loaded', {"player": player_name, "profile": profile.to_dict() if profile else None})


def run_server():
    global RAID_CATALOG
    print(f"Starting {config.APP_NAME}...")
    db_connection.connect_to_mongo()

    print("Loading raid catalog...")
    RAID_CATALOG = data_loader.load_raid_catalog()
    print(f"Loaded: {len(RAID_CATALOG)} Raids, {len(UI_OPTIONS['quests'])} Quests, {len(UI_OPTIONS['equipment'])} Equipment Slots.")

    use_reloader_flask = config.FLASK_USE_RELOADER and config.DEBUG_MODE_FLASK
    print(f"{config.APP_NAME} on http://{config.HOST}:{config.PORT} (Flask Debug: {'ON' if config.DEBUG_MODE_FLASK else 'OFF'}, Reloader: {'ON' if use_reloader_flask else 'OFF'})")
    try:
        socketio.run(app, host=config.HOST, port=config.PORT, debug=config.DEBUG_MODE_FLASK,
                     use_reloader=use_reloader_flask, allow_unsafe_werkzeug=True)
    except KeyboardInterrupt:
        print("\nServer shutting down (KeyboardInterrupt)...")
    except OSError as e:
        print(f"Failed to start server: {e}")
        traceback.print_exc()
    finally:
        db_connection.close_mongo_connection()
        print(f"{config.APP_NAME} has shut down.")


if __name__ == '__main__':
    run_server()

from __future__ import annotations
from pathlib import Path
from flask import Blueprint, current_app, g, render_template_string, redirect, url_for, flash, request, jsonify

from .errors import StoreError
from .models import Game
from .settings import load_settings, save_settings
from .store import Store, open_store
from .launch import launch_game

from .templates import INDEX_HTML

bp = Blueprint("gameshelf", __name__)

def _store() -> Store:
    # one store per app context, closed by the teardown hook in create_app()
    if "store" not in g:
        g.store = open_store(current_app.config["DB_PATH"])
    return g.store

def _wants_json() -> bool:
    return request.accept_mimetypes.accept_json and not request.accept_mimetypes.accept_html

@bp.get("/")
def index():
    settings = load_settings(Path(current_app.config["SETTINGS_FILE"]))
    try:
        games = _store().list_all()
    except StoreError as e:
        flash(f"Could not read games: {e}")
        games = []
    return render_template_string(
        INDEX_HTML,
        app_title=current_app.config["APP_TITLE"],
        games=games,
        show_paths=settings["show_paths"],
        settings=settings,
    )

@bp.post("/settings")
def settings_post():
    settings_file = Path(current_app.config["SETTINGS_FILE"])
    settings = load_settings(settings_file)
    settings["confirm_delete"] = bool(request.form.get("confirm_delete"))
    settings["show_paths"] = bool(request.form.get("show_paths"))
    try:
        save_settings(settings_file, settings)
        flash("Settings saved.")
    except OSError as e:
        flash(f"Failed to save settings: {e}")
    return redirect(url_for("gameshelf.index"))

@bp.post("/add")
def add_game():
    name = request.form.get("name", "").strip()
    exe_path = request.form.get("exe_path", "").strip()
    if not name or not exe_path:
        flash("Name and executable path are both required.")
        return redirect(url_for("gameshelf.index"))
    try:
        _store().add(Game(name=name, exe_path=exe_path))
        flash(f"Added {name}.")
    except StoreError as e:
        flash(f"Add failed: {e}")
    return redirect(url_for("gameshelf.index"))

@bp.post("/delete/<game_id>")
def delete_game(game_id):
    try:
        _store().delete(game_id)
        flash("Deleted.")
    except StoreError as e:
        flash(f"Delete failed: {e}")
    return redirect(url_for("gameshelf.index"))

@bp.post("/run/<game_id>")
def run_game(game_id):
    status = 500
    try:
        game = _store().get(game_id)
    except StoreError as e:
        ok, msg = False, str(e)
    else:
        if game is None:
            ok, msg, status = False, "No such game.", 404
        else:
            ok, msg = launch_game(game)

    if _wants_json():
        return (jsonify({"ok": ok, ("message" if ok else "error"): msg}), 200 if ok else status)

    flash(("Launch requested. " if ok else "Launch failed: ") + msg)
    return redirect(url_for("gameshelf.index"))

@bp.get("/favicon.ico")
def favicon():
    return ("", 204)

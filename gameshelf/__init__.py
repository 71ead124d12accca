import os
from pathlib import Path
from flask import Flask, g
from .routes import bp as routes_bp
from .utils import settings_file_for

# Bind only localhost unless overridden
BIND = os.environ.get("BIND", "127.0.0.1")
PORT = int(os.environ.get("PORT", "5000"))

def _close_store(exc=None) -> None:
    store = g.pop("store", None)
    if store is not None:
        store.close()

def create_app(db_path: str) -> Flask:
    app = Flask(__name__)
    app.secret_key = os.environ.get("FLASK_SECRET", "dev-" + os.urandom(8).hex())
    app.config["DB_PATH"] = str(db_path)
    app.config["APP_TITLE"] = "Game Shelf"
    app.config["SETTINGS_FILE"] = str(settings_file_for(Path(db_path)))

    app.register_blueprint(routes_bp)
    app.teardown_appcontext(_close_store)
    return app

import logging
import os

from flask import Flask, jsonify, render_template
from flask_cors import CORS

from config import Config
from extensions import db, migrate

# Models must be imported before create_all() so their tables are registered
from rooms.models import Room, Member
from expenses.models import Expense

# Blueprints
from rooms.routes import rooms_bp
from expenses.routes import expenses_bp
from utils.errors import register_error_handlers

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    level = getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    app.logger.setLevel(level)

    # ✅ Browser client calls the API from another origin during development
    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    # ✅ Initialize extensions
    os.makedirs(app.instance_path, exist_ok=True)
    db.init_app(app)
    migrate.init_app(app, db)

    # ✅ Register Blueprints
    app.register_blueprint(rooms_bp)
    app.register_blueprint(expenses_bp)

    register_error_handlers(app)

    # ✅ Schema is created on first start; `flask db upgrade` manages later changes
    with app.app_context():
        db.create_all()

    # Root route -> two-view budget page
    @app.route("/")
    def index():
        return render_template("index.html")

    @app.route("/api/health")
    def health():
        return jsonify({"status": "ok"}), 200

    app.logger.info("Roommate budget API ready (db=%s)", app.config["SQLALCHEMY_DATABASE_URI"])
    return app


if __name__ == '__main__':
    create_app().run(host="0.0.0.0", port=int(os.environ.get("PORT", 3001)), debug=True)

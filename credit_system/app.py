from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv
from werkzeug.exceptions import HTTPException
from credit_system.extension import db, migrate, ma
from credit_system.routes_controller import register_routes
import os
import logging


load_dotenv()

MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "migrations")


def create_app(test_config=None):
    app = Flask(__name__)

    # Defaults, overridden by FLASK_* environment variables
    app.config["SQLALCHEMY_DATABASE_URI"] = "sqlite:///credit.db"
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
        "pool_pre_ping": True
    }
    app.config["CORS_ORIGINS"] = ["http://localhost:5173"]
    app.config["AUTO_MIGRATE"] = True
    app.config["LOG_LEVEL"] = "INFO"
    # Let Flask-RESTful hand unhandled errors to handle_error below
    app.config["PROPAGATE_EXCEPTIONS"] = True
    app.config.from_prefixed_env()

    if test_config:
        app.config.from_mapping(test_config)

    logging.basicConfig(level=app.config["LOG_LEVEL"])

    CORS(app,
         origins=app.config["CORS_ORIGINS"],
         methods=["GET", "POST", "PATCH", "OPTIONS"],
         allow_headers=["Content-Type"],
         max_age=3600
    )

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)
    ma.init_app(app)

    if app.config["AUTO_MIGRATE"]:
        with app.app_context():
            from flask_migrate import upgrade
            upgrade()

    # Register routes
    register_routes(app)

    @app.errorhandler(Exception)
    def handle_error(e):
        if isinstance(e, HTTPException):
            return e
        app.logger.error(f"Unhandled error: {e}", exc_info=True)
        return jsonify({"error": str(e)}), 500

    @app.route('/')
    def home():
        return {"message": "Welcome to the credit application API"}

    return app

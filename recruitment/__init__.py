import logging

from flask import Flask, jsonify
from pymysql import connect
from sqlalchemy.engine import make_url

from config import Config
from .extensions import *
from .models import *
from .routes.candidate_routes import candidate_bp
from .routes.interview_routes import interview_bp
from .routes.dashboard_routes import dashboard_bp
from .routes.settings_routes import settings_bp
from .services.storage import LocalObjectStore
from recruitment.database.seed.seed_all import seed_all

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Allow CORS from the front-end
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    app.extensions["object_store"] = LocalObjectStore(app.config["STORAGE_ROOT"])

    app.register_blueprint(candidate_bp)
    app.register_blueprint(interview_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(settings_bp)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"❌ Unhandled error: {error}")
        return jsonify({"error": "Internal server error", "kind": "OperationFailed"}), 500

    app.cli.add_command(seed_all)

    return app


def create_database_if_not_exists(database_uri):
    url = make_url(database_uri)
    if not url.drivername.startswith("mysql"):
        return

    logger.info(f"🔧 Ensuring database '{url.database}' exists...")
    logger.info(f"Connecting to DB server at {url.host}:{url.port or 3306} with user '{url.username}'")

    conn = connect(
        host=url.host,
        port=url.port or 3306,
        user=url.username,
        password=url.password or "",
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()

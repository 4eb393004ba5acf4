import logging

from flask import Flask
from sqlalchemy import event

from .extensions import db, migrate, ma
from .config import Config
from catalog.utils.error_handlers import register_error_handlers
from catalog.routes import register_blueprints
from catalog.commands import register_commands


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE SET NULL unless foreign keys are switched on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_logging(app):
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])


def create_app(config_class=Config):

    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    db.init_app(app)
    with app.app_context():
        if db.engine.dialect.name == "sqlite":
            event.listen(db.engine, "connect", _enable_sqlite_foreign_keys)
    migrate.init_app(app, db)
    ma.init_app(app)

    # Make sure the models are registered on the metadata before create_all/migrate
    from catalog import models  # noqa: F401

    register_blueprints(app)
    register_error_handlers(app)
    register_commands(app)

    @app.route("/health")
    def health():
        return {"status": "healthy"}, 200

    return app

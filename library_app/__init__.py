import logging

from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from library_app.config import Config
from library_app.errors import InfrastructureError, LibraryError
from library_app.extensions import db, migrate, mail


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.logger.setLevel(app.config.get("LOG_LEVEL", logging.INFO))

    # 1) extensions
    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)

    # 2) models must be imported before create_all / migrations see them
    from library_app.models import book, user, borrowed_book  # noqa: F401

    # 3) API blueprints
    from library_app.controllers.book_controller import book_bp
    from library_app.controllers.user_controller import user_bp
    from library_app.controllers.borrowed_book_controller import borrowed_bp
    from library_app.controllers.notification_controller import notif_bp
    app.register_blueprint(book_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(borrowed_bp)
    app.register_blueprint(notif_bp)

    register_error_handlers(app)

    from library_app.cli import register_commands
    register_commands(app)

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    # Scheduler (due-date reminders)
    from library_app.tasks.scheduler import start_scheduler
    start_scheduler(app)

    return app


def register_error_handlers(app):
    @app.errorhandler(LibraryError)
    def _library_error(e):
        if isinstance(e, InfrastructureError):
            db.session.rollback()
            app.logger.exception(f"[api] {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def _store_error(e):
        db.session.rollback()
        app.logger.exception(f"[api] Store error: {e}")
        return jsonify(InfrastructureError(str(e)).to_dict()), 500

    @app.errorhandler(Exception)
    def _unhandled(e):
        if isinstance(e, HTTPException):
            return jsonify({"success": False, "message": e.description}), e.code
        db.session.rollback()
        app.logger.exception(f"[api] Unhandled error: {e}")
        return jsonify(InfrastructureError(str(e)).to_dict()), 500

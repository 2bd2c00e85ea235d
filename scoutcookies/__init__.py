import logging

from flask import Flask

from .config import Config
from .extensions import db, jwt, cors, migrate


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=True)

    config_object = config_object or Config
    app.config.from_object(config_object)
    config_object.init_app(app)

    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": "*"}})
    migrate.init_app(app, db)

    from .errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from .auth import bp as auth_bp; app.register_blueprint(auth_bp)
    from .order import bp as order_bp; app.register_blueprint(order_bp)
    from .payment import bp as payment_bp; app.register_blueprint(payment_bp)
    from .cookie import bp as cookie_bp; app.register_blueprint(cookie_bp)
    from .web import bp as web_bp; app.register_blueprint(web_bp)

    from .cli import register_cli
    register_cli(app)

    with app.app_context():
        from . import model  # noqa: F401  (register tables)
        db.create_all()
        if app.config.get("SEED_DEMO_SCOUT"):
            from .services.scout_service import ensure_demo_scout
            ensure_demo_scout()

    return app

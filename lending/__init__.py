import logging

from flask import Flask

from .config import Config
from .controllers.cli import bp as cli_bp


def _log_level(value):
    """Map a level name such as 'debug' to its number; None if unknown."""
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else None


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    # app.logger is the `lending` package logger, so the level covers every module
    level = _log_level(app.config["LENDING_LOG_LEVEL"])
    if level is None:
        app.logger.setLevel(logging.WARNING)
        app.logger.warning("Unknown LENDING_LOG_LEVEL %r; using WARNING", app.config["LENDING_LOG_LEVEL"])
    else:
        app.logger.setLevel(level)
    app.register_blueprint(cli_bp)

    return app

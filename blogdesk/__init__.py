# blogdesk/__init__.py
from flask import Flask

from blogdesk.config import Config
from blogdesk.extensions import db, migrate, cors
from blogdesk.auth.tokens import TokenService
from blogdesk.logging_config import configure_logging, get_logger
from blogdesk.routes import register_routes

logger = get_logger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app.config["LOG_LEVEL"])
    if app.config["JWT_SECRET_KEY"] == "change-me" and not app.testing:
        logger.warning("JWT_SECRET_KEY is not set, using an insecure default")

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization"]
    )

    # Servicio de tokens construido aquí y no como global del módulo
    app.extensions["token_service"] = TokenService.from_config(app.config)

    # Registrar blueprints centralizado
    register_routes(app)

    from blogdesk import models  # noqa: F401  registra las tablas en db.metadata

    if app.config.get("AUTO_CREATE_TABLES"):
        with app.app_context():
            db.create_all()

    logger.info(f"App created with database {app.config['SQLALCHEMY_DATABASE_URI'].split('://')[0]}")
    return app

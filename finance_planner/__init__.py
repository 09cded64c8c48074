"""Personal Finance Planner Flask Application Factory."""

from typing import Optional

from flask import Flask

from finance_planner.config import Settings, get_global_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Settings to use; defaults to the global environment settings

    Returns:
        Flask: Configured Flask application instance
    """
    from finance_planner.services.catalog_service import CatalogService
    from finance_planner.services.planning_service import PlanningService
    from finance_planner.services.profile_repository import ProfileRepository
    from finance_planner.storage import create_storage_service

    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = settings or get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = settings.flask_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["TESTING"] = settings.app_env == "testing"
    app.logger.setLevel(settings.log_level)

    storage = create_storage_service(settings)
    if settings.catalog_storage_key:
        catalog_service = CatalogService(
            storage=storage, storage_key=settings.catalog_storage_key
        )
    else:
        catalog_service = CatalogService(catalog_path=settings.catalog_path)

    app.extensions["catalog_service"] = catalog_service
    app.extensions["planning_service"] = PlanningService(
        settings.retirement_assumptions()
    )
    app.extensions["profile_repository"] = ProfileRepository(storage)
    app.logger.info(
        f"Finance planner configured: {settings.app_env}, "
        f"{settings.storage_type} storage"
    )

    # Register blueprints
    from finance_planner.blueprints.health import health_bp
    from finance_planner.blueprints.planner import planner_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(planner_bp)

    return app

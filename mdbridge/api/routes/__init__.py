from .files import files_bp  # noqa
from .health import health_bp  # noqa

def register_routes(app):
    """Register all API blueprints under /api/v1 prefix."""
    for bp in (files_bp, health_bp):
        app.register_blueprint(bp, url_prefix='/api/v1')

__all__ = ['register_routes']

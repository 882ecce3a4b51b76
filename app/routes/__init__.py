"""HTTP API blueprints."""

from app.routes.leaders import create_leaders_blueprint
from app.routes.schedules import create_schedules_blueprint

__all__ = ["create_leaders_blueprint", "create_schedules_blueprint"]

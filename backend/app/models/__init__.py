from app.models.trip import Trip

__all__ = ["Trip"]

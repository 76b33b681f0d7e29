from app.repositories.common.state import StateRepository

__all__ = ["StateRepository"]

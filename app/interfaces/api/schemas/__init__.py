from .activity import ActivityCreate, ActivityRead, ActivityUpdate

__all__ = [
    "ActivityCreate",
    "ActivityRead",
    "ActivityUpdate",
]

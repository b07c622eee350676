from maplist.models.enums import PrimaryCategory

__all__ = ["PrimaryCategory"]

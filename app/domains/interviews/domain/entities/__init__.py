# Domain Entities
from .interview import Interview

__all__ = ["Interview"]

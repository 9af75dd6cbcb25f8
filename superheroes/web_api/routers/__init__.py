"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import health, heroes

__all__ = ["health", "heroes"]

"""
API v1 Package
===============

Version 1 API controllers.
"""
from .influencer_controller import router as influencer_router

__all__ = ["influencer_router"]

"""
Influencer API
==============

CRUD HTTP service over a MongoDB collection of influencer records.
"""

__version__ = "1.0.0"

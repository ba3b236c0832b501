"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Influencer records, summaries and listing queries
- Repository Interfaces: Abstract contracts for data access
"""

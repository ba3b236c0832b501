"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (list, create, update influencers)
- Services: Application services that coordinate multiple use cases
- DTO: Request/response models for the API
"""

"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: FastAPI route handlers and dependencies
- error_handlers: rendering of errors into the response envelope
"""

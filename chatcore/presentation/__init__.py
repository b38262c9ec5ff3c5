"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: caller authentication for routes
"""

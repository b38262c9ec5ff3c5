"""
DOMAIN SERVICES - Pure domain logic (no I/O)
"""

from chatcore.domain.services.pagination import resolve_page_limit

__all__ = ["resolve_page_limit"]

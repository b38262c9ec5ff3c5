"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/memory/: In-process storage adapter
- persistence/: Prisma repositories (PostgreSQL)
"""

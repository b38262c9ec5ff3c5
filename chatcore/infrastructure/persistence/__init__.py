"""
Persistence Layer - Database implementations.

- memory/: in-process store (default backend, used by tests)
- prisma_*_repository.py: PostgreSQL via Prisma

The Prisma adapters are not re-exported here: `prisma` can only be
imported once its client has been generated, so they are loaded by the
IoC container only when STORAGE_BACKEND=prisma.
"""

"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Think of it as a contract:
- Domain says: "I need to store a conversation together with its participants"
- Infrastructure implements: "I'll do it in one PostgreSQL transaction"

Subfolders:
- repositories/  → Data persistence interfaces (the storage port)
"""

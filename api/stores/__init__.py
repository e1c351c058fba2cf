"""
API Stores - Data access abstraction layer

Provides a clean interface over repository records that can be swapped
between in-memory storage (current) and a database (future).

Pattern: Repository Pattern
"""

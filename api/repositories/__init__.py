"""
API Repositories - Data access abstraction layer

Provides a clean interface to the movie records so the routers never
touch the underlying storage directly.

Pattern: Repository Pattern
"""

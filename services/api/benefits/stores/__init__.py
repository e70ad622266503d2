"""Data stores for persistence.

Stores handle:
- Database: engine, session lifecycle, table creation
- Users / deals / claims: thin repositories over an AsyncSession

No business logic in stores - that belongs in services.
"""

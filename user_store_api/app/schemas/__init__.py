"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so the API representation does
not depend on how users are held in memory.
"""

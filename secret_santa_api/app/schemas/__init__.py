"""
Pydantic schema definitions for API payloads.

Users and groups each define their own request and response models.
Schemas are separated from the in-memory store records to decouple
the API representation from storage.
"""

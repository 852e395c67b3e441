"""
Domain layer - Protocol entities, schemas, enums and static data.
"""

from domain import enums, schemas

__all__ = ["enums", "schemas"]

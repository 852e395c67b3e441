"""API routes package"""

from . import health, protocol

__all__ = ["health", "protocol"]

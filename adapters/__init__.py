"""
Adapters package - External configuration sources.
Builds the protocol catalog and meal policy from static data or JSON files.
"""

from adapters import catalog_adapter

__all__ = ["catalog_adapter"]

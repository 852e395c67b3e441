"""
Core package - Shared, dependency-free utilities.
"""

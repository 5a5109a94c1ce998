"""
Core package for Travel Bucket.

Models, persistence and the place store live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []

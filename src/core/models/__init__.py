"""
Pydantic models for Travel Bucket.
"""

from core.models.place import TravelPlace

__all__ = ["TravelPlace"]

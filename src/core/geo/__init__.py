# src/core/geo/__init__.py
"""
Geo service.
Route distance lookups through the Google Maps API.
"""

from src.core.geo.service import GeoService, LatLng

__all__ = [
    "GeoService",
    "LatLng",
]

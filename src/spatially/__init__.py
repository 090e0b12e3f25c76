"""
spatially - Well-Known-Text geometry parsing for GeoJSON feature stores.

This package converts WKT geometry literals into immutable GeoJSON-style
geometry values and builds the feature records that carry them.
"""

__version__ = "0.1.0"

"""
Pydantic models for GeoJSON features.

A feature pairs an optional geometry with free-form properties; features
built from WKT go through the same parser as every other geometry input.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from spatially.models.geometry import Geometry


class Feature(BaseModel):
    """
    A GeoJSON Feature.

    Attributes:
        id: Identifier assigned by the feature store, if any
        geometry: Parsed geometry value
        properties: Free-form feature properties
    """

    type: Literal["Feature"] = "Feature"
    id: Optional[str] = Field(None, description="Feature identifier")
    geometry: Optional[Geometry] = Field(None, description="Feature geometry")
    properties: Dict[str, Any] = Field(
        default_factory=dict, description="Feature properties"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "Feature",
                "id": "5a1b2c3d",
                "geometry": {"type": "Point", "coordinates": [-71.0641, 42.3586]},
                "properties": {"name": "Downtown Crossing"},
            }
        }
    )

    @classmethod
    def from_wkt(
        cls,
        wkt: str,
        properties: Optional[Dict[str, Any]] = None,
        id: Optional[str] = None,
    ) -> "Feature":
        """
        Create a feature whose geometry is parsed from Well-Known-Text.

        Args:
            wkt: WKT geometry literal
            properties: Optional feature properties
            id: Optional feature identifier

        Returns:
            Feature with the parsed geometry

        Raises:
            WKTParseError: If the WKT is malformed (propagated unchanged)
        """
        # The parser imports the geometry models, so import it lazily
        from spatially.core.wkt import parse_wkt

        return cls(id=id, geometry=parse_wkt(wkt), properties=properties or {})

    def to_geojson(self) -> Dict[str, Any]:
        """Convert to a GeoJSON Feature dictionary."""
        data: Dict[str, Any] = {
            "type": self.type,
            "geometry": self.geometry.to_geojson() if self.geometry else None,
            "properties": dict(self.properties),
        }
        if self.id is not None:
            data["id"] = self.id
        return data


class FeatureCollection(BaseModel):
    """An ordered collection of features."""

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: List[Feature] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.features)

    def get_features_by_type(self, geometry_type: str) -> List[Feature]:
        """
        Get features whose geometry is of the given type.

        Args:
            geometry_type: GeoJSON geometry type name (e.g. "Polygon")

        Returns:
            Matching features, in collection order
        """
        return [
            feature
            for feature in self.features
            if feature.geometry is not None and feature.geometry.type == geometry_type
        ]

    def to_geojson(self) -> Dict[str, Any]:
        """Convert to a GeoJSON FeatureCollection dictionary."""
        return {
            "type": self.type,
            "features": [feature.to_geojson() for feature in self.features],
        }

"""GeoJSON reading and writing."""

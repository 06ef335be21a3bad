"""Tangram engine — fit the seven tangram pieces onto target slots.

Subpackages, leaves first:

  shapes    canonical polygons per piece kind
  geometry  percentage <-> canvas mapping, rotation and bounding-box helpers
  level     level records: parsing, validation, built-in levels, authoring capture
  board     runtime pieces/targets, snap matching, magnetism, completion
"""

__version__ = "0.1.0"

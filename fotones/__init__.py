"""Vectors, matrices, camera, materials, photon maps and PPM files for photon-mapping rendering."""

__version__ = "0.1.0"
"""Photon maps: k-d trees of photons and the searches run on them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .kdtree import KDTree
from .photon import Photon

PhotonMap = KDTree[Photon]


def photon_axis_position(photon: Photon, index: int) -> float:
    """The position of ``photon`` along axis ``index``."""
    return photon.coordinate(index)


def build_photon_map(photons: Iterable[Photon]) -> PhotonMap:
    """A three-dimensional k-d tree over ``photons``."""
    return KDTree(photons, 3, photon_axis_position)


def nearby_photons(
    photon_map: PhotonMap, position: Sequence[float], radius: float, count: int
) -> list[Photon]:
    """At most ``count`` photons closer to ``position`` than ``radius``."""
    return photon_map.nearest_neighbors(position, count, radius)


def nearby_photons_by_count(
    photon_map: PhotonMap, position: Sequence[float], count: int
) -> list[Photon]:
    """The ``count`` photons closest to ``position``."""
    return photon_map.nearest_neighbors(position, count, sys.float_info.max)


def nearby_photons_by_radius(
    photon_map: PhotonMap, position: Sequence[float], radius: float
) -> list[Photon]:
    """Every photon closer to ``position`` than ``radius``."""
    return photon_map.nearest_neighbors(position, None, radius)
"""
Geographic Processing Utilities
Great-circle distances, point-set proximity and point-in-polygon tests
All computations are pure and in-memory
"""

import numpy as np
from typing import Dict, Iterable, Sequence, Tuple

from jaldhara_core.config.settings import EARTH_RADIUS_KM


class GeoProcessor:
    """Geographic calculations on (latitude, longitude) pairs in degrees"""

    EARTH_RADIUS_KM = EARTH_RADIUS_KM

    @staticmethod
    def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """
        Calculate great-circle distance between two points using Haversine formula
        Returns distance in kilometers

        Args:
            lat1, lon1, lat2, lon2: Geographic coordinates in degrees

        Raises:
            ValueError: If coordinates are outside valid ranges
        """
        # Validate inputs
        if not (-90 <= lat1 <= 90):
            raise ValueError(f"Invalid latitude: lat1={lat1} (must be -90 to 90)")
        if not (-90 <= lat2 <= 90):
            raise ValueError(f"Invalid latitude: lat2={lat2} (must be -90 to 90)")
        if not (-180 <= lon1 <= 180):
            raise ValueError(f"Invalid longitude: lon1={lon1} (must be -180 to 180)")
        if not (-180 <= lon2 <= 180):
            raise ValueError(f"Invalid longitude: lon2={lon2} (must be -180 to 180)")

        lat1, lon1, lat2, lon2 = map(np.radians, [lat1, lon1, lat2, lon2])
        dlat = lat2 - lat1
        dlon = lon2 - lon1
        a = np.sin(dlat/2)**2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon/2)**2
        c = 2 * np.arcsin(np.sqrt(a))
        return float(GeoProcessor.EARTH_RADIUS_KM * c)

    @staticmethod
    def distances_to_points(latitude: float, longitude: float,
                            points: np.ndarray) -> np.ndarray:
        """
        Vectorised haversine distance from one location to many points

        Args:
            latitude, longitude: Query location in degrees
            points: (N, 2) array of (lat, lon) rows in degrees

        Returns:
            (N,) array of distances in kilometers
        """
        lat_q, lon_q = np.radians(latitude), np.radians(longitude)
        lats = np.radians(points[:, 0])
        lons = np.radians(points[:, 1])

        a = (np.sin((lats - lat_q) / 2) ** 2
             + np.cos(lat_q) * np.cos(lats) * np.sin((lons - lon_q) / 2) ** 2)
        return GeoProcessor.EARTH_RADIUS_KM * 2 * np.arcsin(np.sqrt(np.clip(a, 0.0, 1.0)))

    @staticmethod
    def min_distance_to_points(latitude: float, longitude: float,
                               points: np.ndarray) -> float:
        """Distance in km to the closest point of a point set (inf for an empty set)"""
        if len(points) == 0:
            return float('inf')
        return float(np.min(GeoProcessor.distances_to_points(latitude, longitude, points)))

    @staticmethod
    def build_point_array(segments: Dict[str, Sequence[Tuple[float, float]]]) -> np.ndarray:
        """
        Flatten {region: [(lat, lon), ...]} into a read-only (N, 2) array
        Region order and point order are preserved
        """
        rows = [point for points in segments.values() for point in points]
        array = np.array(rows, dtype=float).reshape(-1, 2)
        array.flags.writeable = False
        return array

    @staticmethod
    def point_in_polygon(latitude: float, longitude: float,
                         vertices: Iterable[Tuple[float, float]]) -> bool:
        """
        Crossing-number (ray casting) test with longitude as x and latitude as y

        Args:
            latitude, longitude: Point to test
            vertices: Ordered (lat, lon) polygon vertices, implicitly closed

        Returns:
            True if the point is inside the polygon
        """
        polygon = list(vertices)
        x, y = longitude, latitude
        inside = False

        j = len(polygon) - 1
        for i in range(len(polygon)):
            yi, xi = polygon[i]
            yj, xj = polygon[j]
            if (yi > y) != (yj > y):
                x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
                if x < x_cross:
                    inside = not inside
            j = i

        return inside

    @staticmethod
    def is_within_bounds(latitude: float, longitude: float,
                         bounds: Dict[str, float]) -> bool:
        """Inclusive check against a {'lat_min', 'lat_max', 'lon_min', 'lon_max'} box"""
        return (bounds['lat_min'] <= latitude <= bounds['lat_max'] and
                bounds['lon_min'] <= longitude <= bounds['lon_max'])

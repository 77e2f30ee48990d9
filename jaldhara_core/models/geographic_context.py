"""
GEOGRAPHIC CONTEXT BUILDER
Describes a coordinate's setting from static reference tables

Elevation: regional bands (Himalayan latitude tiers, Western/Eastern Ghats,
Deccan, coastal plain, Indo-Gangetic plain)
Climate: first matching aridity box
Terrain: coastal distance, then elevation thresholds
Urbanization: nearest containing urban center
Industrial: named industrial belts
Coastal distance: haversine to a curated coastline point set
"""

from typing import Optional
import logging

from jaldhara_core.config.settings import (
    CLIMATE_REGIONS, COASTAL_PLAIN_DISTANCE_KM, COASTLINE_POINTS, ELEVATION_BANDS_M,
    ELEVATION_REGIONS, EXCLUSION_CITIES, EXCLUSION_CITY_RADIUS_KM, INDUSTRIAL_BELTS,
    TERRAIN_COASTAL_KM, TERRAIN_HILLS_M, TERRAIN_MOUNTAIN_M, TERRAIN_PLATEAU_M,
    URBAN_CENTERS, WESTERN_GHATS_FALLOFF_M_PER_2DEG, WESTERN_GHATS_RIDGE_LON,
)
from jaldhara_core.models.aquifer_types import (
    ClimateClass, Coordinate, GeographicContext, TerrainClass, UrbanizationLevel,
)
from jaldhara_core.utils.geo_processor import GeoProcessor

logger = logging.getLogger(__name__)

COASTLINE = GeoProcessor.build_point_array(COASTLINE_POINTS)


def coastal_distance_km(coordinate: Coordinate) -> float:
    """Minimum great-circle distance (km) to the coastline point set"""
    return GeoProcessor.min_distance_to_points(
        coordinate.latitude, coordinate.longitude, COASTLINE
    )


def estimate_elevation(coordinate: Coordinate, coastal_distance: float) -> float:
    """
    Regional elevation estimate in meters; the first rule that fires wins

    Western Ghats elevation peaks on the ridge line and falls off by
    200 m per 2 degrees of longitude, never below the floor value.
    """
    lat, lon = coordinate.latitude, coordinate.longitude

    if lat >= 32:
        return float(ELEVATION_BANDS_M['high_himalaya'])
    if lat >= 30:
        return float(ELEVATION_BANDS_M['middle_himalaya'])
    if lat >= 28:
        return float(ELEVATION_BANDS_M['sub_himalaya'])

    if GeoProcessor.is_within_bounds(lat, lon, ELEVATION_REGIONS['western_ghats']):
        falloff = abs(lon - WESTERN_GHATS_RIDGE_LON) / 2 * WESTERN_GHATS_FALLOFF_M_PER_2DEG
        return float(max(ELEVATION_BANDS_M['western_ghats_floor'],
                         ELEVATION_BANDS_M['western_ghats_ridge'] - falloff))

    if GeoProcessor.is_within_bounds(lat, lon, ELEVATION_REGIONS['eastern_ghats']):
        return float(ELEVATION_BANDS_M['eastern_ghats'])
    if GeoProcessor.is_within_bounds(lat, lon, ELEVATION_REGIONS['deccan_plateau']):
        return float(ELEVATION_BANDS_M['deccan_plateau'])
    if coastal_distance <= COASTAL_PLAIN_DISTANCE_KM:
        return float(ELEVATION_BANDS_M['coastal_plain'])
    if GeoProcessor.is_within_bounds(lat, lon, ELEVATION_REGIONS['indo_gangetic_plain']):
        return float(ELEVATION_BANDS_M['indo_gangetic_plain'])

    return float(ELEVATION_BANDS_M['default'])


def classify_climate(coordinate: Coordinate) -> ClimateClass:
    for climate, boxes in CLIMATE_REGIONS.items():
        if any(GeoProcessor.is_within_bounds(coordinate.latitude, coordinate.longitude, box)
               for box in boxes):
            return ClimateClass(climate)
    return ClimateClass.SUB_HUMID


def classify_terrain(elevation_m: float, coastal_distance: float) -> TerrainClass:
    if coastal_distance <= TERRAIN_COASTAL_KM:
        return TerrainClass.COASTAL
    if elevation_m > TERRAIN_MOUNTAIN_M:
        return TerrainClass.MOUNTAIN
    if elevation_m > TERRAIN_HILLS_M:
        return TerrainClass.HILLS
    if elevation_m > TERRAIN_PLATEAU_M:
        return TerrainClass.PLATEAU
    return TerrainClass.PLAINS


def classify_urbanization(coordinate: Coordinate) -> UrbanizationLevel:
    """Tier of the nearest urban center whose degree radius contains the point"""
    nearest_tier = None
    nearest_offset = None

    for lat, lon, radius_deg, tier in URBAN_CENTERS.values():
        offset = ((coordinate.latitude - lat) ** 2 + (coordinate.longitude - lon) ** 2) ** 0.5
        if offset <= radius_deg and (nearest_offset is None or offset < nearest_offset):
            nearest_tier, nearest_offset = tier, offset

    if nearest_tier is None:
        return UrbanizationLevel.RURAL
    return UrbanizationLevel(nearest_tier)


def is_industrial(coordinate: Coordinate) -> bool:
    return any(
        GeoProcessor.is_within_bounds(coordinate.latitude, coordinate.longitude, belt)
        for belt in INDUSTRIAL_BELTS.values()
    )


def nearest_city(coordinate: Coordinate,
                 radius_km: float = EXCLUSION_CITY_RADIUS_KM) -> Optional[str]:
    """Name of the closest gazetteer city within radius_km, or None"""
    best_name = None
    best_distance = radius_km

    for name, (lat, lon) in EXCLUSION_CITIES.items():
        distance = GeoProcessor.calculate_distance(
            coordinate.latitude, coordinate.longitude, lat, lon
        )
        if distance <= best_distance:
            best_name, best_distance = name, distance

    return best_name


def build_context(coordinate: Coordinate) -> GeographicContext:
    """Derive the full geographic context for a coordinate (pure)"""
    coastal_distance = coastal_distance_km(coordinate)
    elevation = estimate_elevation(coordinate, coastal_distance)

    context = GeographicContext(
        elevation_m=elevation,
        climate=classify_climate(coordinate),
        terrain=classify_terrain(elevation, coastal_distance),
        urbanization=classify_urbanization(coordinate),
        industrial=is_industrial(coordinate),
        coastal_distance_km=coastal_distance,
        nearest_city=nearest_city(coordinate),
    )

    logger.debug(f"Context for ({coordinate.latitude}, {coordinate.longitude}): {context.to_dict()}")
    return context

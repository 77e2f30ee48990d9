"""
Configuration settings for the Jaldhara aquifer resolution engine
Static geographic reference tables for India

This module contains ONLY configuration constants.
Nothing here touches the network, the disk or the environment:
- Envelope and scoring constants for aquifer resolution
- Climate boxes, city tiers and industrial belts for the geographic context
- Curated coastline points for coastal distance
- Reference sites with known principal aquifers for benchmarking
"""

from pathlib import Path

# Project Root
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Output directory for CLI exports (created on demand, never at import)
OUTPUT_DIR = PROJECT_ROOT / 'jaldhara_outputs'

# MODEL VERSION TRACKING
MODEL_VERSION = "1.0.0"
AQUIFER_CATALOG_VERSION = "2024.2"  # CGWB principal aquifer atlas, curated zone boundaries

# GEOGRAPHIC CONSTANTS
EARTH_RADIUS_KM = 6371.0                    # Earth radius in kilometers
INDIA_ENVELOPE = {
    'lat_min': 6.0,                         # Indira Point with margin
    'lat_max': 37.0,                        # Ladakh
    'lon_min': 68.0,                        # Kutch
    'lon_max': 98.0,                        # Arunachal Pradesh
}

# ZONE CONFIDENCE MULTIPLIERS
ALLUVIAL_COASTAL_BOOST = 1.2                # Coastal distance <= ALLUVIAL_COASTAL_NEAR_KM
ALLUVIAL_COASTAL_NEUTRAL = 1.0              # Coastal distance <= ALLUVIAL_COASTAL_MID_KM
ALLUVIAL_INLAND_PENALTY = 0.3               # Beyond ALLUVIAL_COASTAL_MID_KM
ALLUVIAL_COASTAL_NEAR_KM = 5.0
ALLUVIAL_COASTAL_MID_KM = 12.0
HIMALAYAN_ELEVATION_BOOST = 1.3
HIMALAYAN_BOOST_ELEVATION_M = 1000.0
TERRAIN_MATCH_BOOST = 1.2                   # Zone name matches terrain class
METROPOLITAN_HARD_ROCK_PENALTY = 0.9        # Non-alluvial zones in metro areas
SPECIAL_ZONE_DISCOUNT = 0.9                 # Extreme terrain catalog

# CANDIDATE SELECTION
TIE_BREAK_EPSILON = 0.05                    # Top two closer than this -> tie-break rules
PROXIMITY_CONFIDENCE = 0.6
DEFAULT_CONFIDENCE = 0.5
HIMALAYAN_PROXIMITY_LATITUDE = 28.0
NORTHEAST_PROXIMITY_BOUNDS = {'lat_min': 23.0, 'lon_min': 88.0}

# DYNAMIC ADJUSTMENT FACTORS (applied in this order)
METROPOLITAN_EC_FACTOR = 1.2
INDUSTRIAL_EC_FACTOR = 1.3
COASTAL_SALINITY_EC_FACTOR = 1.5
COASTAL_SALINITY_DISTANCE_KM = 50.0
DRY_CLIMATE_DTW_FACTOR = 1.3
HIGH_ELEVATION_YIELD_FACTOR = 1.1
HIGH_ELEVATION_RECHARGE_M = 1500.0

# ELEVATION ESTIMATES (meters) - deterministic regional bands
ELEVATION_BANDS_M = {
    'high_himalaya': 3500,                  # lat >= 32
    'middle_himalaya': 2000,                # lat >= 30
    'sub_himalaya': 800,                    # lat >= 28
    'western_ghats_ridge': 800,             # At lng 75, falls off with distance
    'western_ghats_floor': 200,
    'eastern_ghats': 500,
    'deccan_plateau': 400,
    'coastal_plain': 50,                    # Within COASTAL_PLAIN_DISTANCE_KM
    'indo_gangetic_plain': 200,
    'default': 300,
}
WESTERN_GHATS_RIDGE_LON = 75.0
WESTERN_GHATS_FALLOFF_M_PER_2DEG = 200.0
COASTAL_PLAIN_DISTANCE_KM = 50.0

# REGIONAL BOXES FOR ELEVATION (inclusive lat/lon ranges)
ELEVATION_REGIONS = {
    'western_ghats': {'lat_min': 8.0, 'lat_max': 21.0, 'lon_min': 73.0, 'lon_max': 77.0},
    'eastern_ghats': {'lat_min': 12.0, 'lat_max': 20.0, 'lon_min': 78.0, 'lon_max': 84.0},
    'deccan_plateau': {'lat_min': 15.0, 'lat_max': 25.0, 'lon_min': 73.0, 'lon_max': 82.0},
    'indo_gangetic_plain': {'lat_min': 24.0, 'lat_max': 31.0, 'lon_min': 74.0, 'lon_max': 89.0},
}

# CLIMATE BOXES - first matching class wins, Sub-Humid otherwise
CLIMATE_REGIONS = {
    'Arid': [
        {'lat_min': 24.0, 'lat_max': 30.0, 'lon_min': 68.0, 'lon_max': 76.0},  # Thar Desert
        {'lat_min': 20.0, 'lat_max': 24.0, 'lon_min': 68.0, 'lon_max': 72.0},  # Kutch/Saurashtra
    ],
    'Semi-Arid': [
        {'lat_min': 15.0, 'lat_max': 25.0, 'lon_min': 73.0, 'lon_max': 82.0},  # Deccan Plateau
        {'lat_min': 20.0, 'lat_max': 28.0, 'lon_min': 75.0, 'lon_max': 82.0},  # Central India
    ],
    'Humid': [
        {'lat_min': 8.0, 'lat_max': 18.0, 'lon_min': 73.0, 'lon_max': 77.0},   # Western Ghats
        {'lat_min': 22.0, 'lat_max': 29.0, 'lon_min': 88.0, 'lon_max': 98.0},  # Northeast
        {'lat_min': 8.0, 'lat_max': 13.0, 'lon_min': 76.0, 'lon_max': 82.0},   # Deep south
    ],
}

# TERRAIN THRESHOLDS
TERRAIN_COASTAL_KM = 25.0
TERRAIN_MOUNTAIN_M = 1500.0
TERRAIN_HILLS_M = 500.0
TERRAIN_PLATEAU_M = 300.0

# URBAN CENTERS - (lat, lon, containment radius in degrees, tier)
URBAN_CENTERS = {
    'Delhi NCR': (28.61, 77.21, 0.50, 'Metropolitan'),
    'Mumbai': (19.08, 72.88, 0.40, 'Metropolitan'),
    'Bangalore': (12.97, 77.59, 0.30, 'Metropolitan'),
    'Chennai': (13.09, 80.27, 0.30, 'Metropolitan'),
    'Kolkata': (22.57, 88.36, 0.30, 'Metropolitan'),
    'Hyderabad': (17.39, 78.49, 0.30, 'Metropolitan'),
    'Pune': (18.52, 73.86, 0.25, 'Urban'),
    'Ahmedabad': (23.03, 72.59, 0.25, 'Urban'),
    'Surat': (21.17, 72.83, 0.20, 'Urban'),
    'Jaipur': (26.92, 75.82, 0.20, 'Urban'),
    'Amravati': (20.93, 77.75, 0.15, 'Urban'),
}

# GAZETTEER FOR ZONE CITY EXCLUSIONS - (lat, lon)
EXCLUSION_CITIES = {
    'Chennai': (13.09, 80.27),
    'Mumbai': (19.08, 72.88),
    'Delhi': (28.61, 77.21),
    'Bangalore': (12.97, 77.59),
    'Kolkata': (22.57, 88.36),
    'Hyderabad': (17.39, 78.49),
    'Visakhapatnam': (17.69, 83.22),
    'Amravati': (20.93, 77.75),
}
EXCLUSION_CITY_RADIUS_KM = 50.0

# INDUSTRIAL BELTS (inclusive bounding boxes)
INDUSTRIAL_BELTS = {
    'Mumbai-Pune Corridor': {'lat_min': 18.4, 'lat_max': 19.6, 'lon_min': 72.5, 'lon_max': 74.2},
    'Gujarat Industrial Belt': {'lat_min': 21.0, 'lat_max': 23.5, 'lon_min': 72.0, 'lon_max': 73.5},
    'Chennai Industrial': {'lat_min': 12.8, 'lat_max': 13.4, 'lon_min': 79.8, 'lon_max': 80.8},
    'Bangalore IT Belt': {'lat_min': 12.7, 'lat_max': 13.2, 'lon_min': 77.3, 'lon_max': 77.9},
    'NCR Industrial': {'lat_min': 28.3, 'lat_max': 28.9, 'lon_min': 76.8, 'lon_max': 77.6},
    'Vizag Industrial': {'lat_min': 17.5, 'lat_max': 17.9, 'lon_min': 83.0, 'lon_max': 83.5},
}

# COASTLINE POINTS BY REGION - (lat, lon)
# Metro coasts (Mumbai, Chennai) are sampled more densely than open coast
COASTLINE_POINTS = {
    'Gujarat': [
        (23.70, 68.40), (23.22, 68.72), (22.83, 69.35), (22.74, 69.70),
        (23.03, 70.22), (22.47, 69.07), (22.24, 68.97), (21.64, 69.60),
        (20.91, 70.37), (20.71, 70.98), (21.09, 71.76), (21.76, 72.15),
        (21.10, 72.64), (20.60, 72.90),
    ],
    'Konkan': [
        (20.41, 72.83), (19.97, 72.71), (19.40, 72.80), (19.25, 72.78),
        (19.10, 72.82), (19.02, 72.81), (18.92, 72.82), (18.64, 72.87),
        (18.33, 72.96), (18.03, 73.01), (17.58, 73.17), (16.99, 73.28),
        (16.56, 73.33), (16.06, 73.46),
    ],
    'Goa': [
        (15.86, 73.63), (15.49, 73.82), (15.27, 73.92),
    ],
    'Karnataka': [
        (14.81, 74.12), (14.42, 74.39), (13.98, 74.55), (13.62, 74.66),
        (13.35, 74.70), (12.87, 74.84),
    ],
    'Kerala': [
        (12.50, 74.98), (11.87, 75.35), (11.25, 75.77), (10.78, 75.92),
        (10.55, 76.01), (9.97, 76.24), (9.49, 76.32), (8.88, 76.58),
        (8.48, 76.92), (8.08, 77.55),
    ],
    'Tamil Nadu South': [
        (8.50, 78.12), (8.79, 78.15), (9.29, 79.31), (9.48, 78.90),
        (9.74, 79.02), (10.30, 79.85), (10.77, 79.85), (10.92, 79.84),
        (11.03, 79.85), (11.75, 79.77), (11.93, 79.84),
    ],
    'Tamil Nadu North': [
        (12.20, 79.95), (12.62, 80.20), (12.79, 80.25), (13.00, 80.27),
        (13.05, 80.28), (13.09, 80.29), (13.10, 80.30), (13.22, 80.33),
        (13.42, 80.32),
    ],
    'Andhra Pradesh': [
        (13.70, 80.24), (14.03, 80.17), (14.25, 80.13), (14.45, 80.15),
        (14.91, 80.09), (15.47, 80.12), (15.82, 80.35), (16.17, 81.18),
        (16.33, 81.71), (16.95, 82.25), (17.30, 82.60), (17.69, 83.29),
        (17.89, 83.45), (18.34, 84.12),
    ],
    'Odisha': [
        (18.88, 84.58), (19.26, 84.91), (19.65, 85.45), (19.80, 85.83),
        (19.88, 86.10), (20.26, 86.67), (20.79, 86.97), (21.45, 87.05),
    ],
    'West Bengal': [
        (21.63, 87.53), (22.03, 88.06), (21.65, 88.05), (21.60, 88.60),
        (21.65, 89.05),
    ],
}

# REFERENCE SITES WITH KNOWN PRINCIPAL AQUIFERS - (lat, lon, expected code, description)
BENCHMARK_SITES = {
    'Delhi': (28.61, 77.21, 'AL', 'Indo-Gangetic alluvium'),
    'Mumbai Coast': (19.05, 72.85, 'AL', 'Very close to coast'),
    'Mumbai Inland': (19.15, 72.95, 'BS', 'Deccan basalt inland'),
    'Chennai City': (13.09, 80.27, 'AL', 'Coastal alluvium'),
    'Chennai Coast': (13.05, 80.25, 'AL', 'True coastal strip'),
    'Amravati': (20.93, 77.75, 'BS', 'Deccan basalt'),
    'Bangalore': (12.97, 77.59, 'BG', 'Banded gneissic complex'),
    'Kolkata': (22.57, 88.36, 'AL', 'Gangetic delta alluvium'),
    'Raipur': (21.25, 81.63, 'ST', 'Gondwana sandstone'),
    'Bhopal': (23.26, 77.41, 'BS', 'Deccan basalt'),
    'Shimla': (31.10, 77.17, 'HR', 'Himalayan rocks'),
    'Jaisalmer': (26.91, 70.91, 'DS', 'Desert aquifer'),
    'Shillong': (25.57, 91.88, 'HL', 'Hill aquifer'),
    'Kochi': (9.93, 76.27, 'AL', 'Coastal alluvium'),
    'Mysore': (12.30, 76.65, 'GN', 'Gneiss aquifer'),
}

"""
CGWB PRINCIPAL AQUIFER CATALOG
Prioritized geological zones for India, built once at import

Priority 1-2: alluvial systems (Indo-Gangetic, eastern and western coastal strips)
Priority 3-8: hard rock and sedimentary provinces of the peninsula and Rajasthan
Priority 10+: extreme terrain (Himalaya, Thar, Northeast hills), matched with a discount

Zones overlap on purpose. The matcher gathers every containing zone and the
ranker decides, so boundaries here are generous outlines rather than exact
geological contacts.
"""

from typing import Dict, List

from jaldhara_core.config.settings import AQUIFER_CATALOG_VERSION
from jaldhara_core.models.aquifer_types import (
    AquiferCode, AquiferDescriptor, CircleBoundary, ConfidenceLabel, Coordinate, GeologicalZone,
    PolygonBoundary, RectangleBoundary, ValueRange, ZoneCatalog, ZoneExclusions,
)

_RANGE_FIELDS = (
    'weathered_zone', 'fracture_zones', 'yield_range', 'dtw_range',
    'transmissivity_range', 'specific_yield', 'quality_ec_range',
)


def build_descriptor(definition: Dict) -> AquiferDescriptor:
    """
    Build a frozen descriptor from an atlas-style dict with textual ranges

    Raises:
        ValueError: If a range or code is malformed
    """
    fields = dict(definition)
    for key in _RANGE_FIELDS:
        fields[key] = ValueRange.parse(fields[key])
    fields['code'] = AquiferCode(fields['code'])
    fields['confidence'] = ConfidenceLabel(fields['confidence'])
    fields['states'] = tuple(fields['states'])
    return AquiferDescriptor(**fields)


def build_zone(definition: Dict) -> GeologicalZone:
    """
    Build a zone from a dict carrying one boundary key

    'polygon' takes (lat, lng) vertices, 'rectangle' an inclusive box and
    'circle' a (lat, lng) center with radius_km.

    Raises:
        ValueError: If no boundary is given or a field is malformed
    """
    if 'polygon' in definition:
        boundary = PolygonBoundary(tuple(tuple(vertex) for vertex in definition['polygon']))
    elif 'rectangle' in definition:
        boundary = RectangleBoundary(**definition['rectangle'])
    elif 'circle' in definition:
        circle = definition['circle']
        boundary = CircleBoundary(Coordinate(*circle['center']), radius_km=circle['radius_km'])
    else:
        raise ValueError(f"Zone {definition.get('name')!r} has no polygon, rectangle or circle boundary")

    exclusions = None
    if 'exclusions' in definition:
        exclusions = ZoneExclusions.build(
            cities=definition['exclusions'].get('cities'),
            conditions=definition['exclusions'].get('conditions'),
        )

    return GeologicalZone(
        name=definition['name'],
        priority=definition['priority'],
        boundary=boundary,
        aquifer=build_descriptor(definition['aquifer']),
        geological_features=tuple(definition.get('features', ())),
        exclusions=exclusions,
    )


def build_catalog(name: str, definitions: List[Dict], version: str = AQUIFER_CATALOG_VERSION) -> ZoneCatalog:
    return ZoneCatalog(name, [build_zone(definition) for definition in definitions], version=version)


# ============================================================================
# AQUIFER DESCRIPTORS
# ============================================================================

INDO_GANGETIC_ALLUVIUM = {
    'name': "Alluvium Aquifer",
    'code': "AL",
    'formation_type': "Indo-Gangetic Plains Alluvium",
    'description': "Multi-layered unconsolidated sediments with excellent groundwater potential. "
                   "Most productive aquifer system in India.",
    'area_coverage_percent': 25.6,
    'weathered_zone': "5-40m",
    'fracture_zones': "Up to 700m",
    'yield_range': "100-6500 L/min",
    'dtw_range': "2-40m bgl",
    'age': "Quaternary",
    'states': ["Punjab", "Haryana", "Uttar Pradesh", "Bihar", "West Bengal", "Delhi"],
    'confidence': "High",
    'aquifer_system_type': "Multiple Confined to Semi-confined",
    'transmissivity_range': "500-16000 m²/day",
    'specific_yield': "6-20%",
    'quality_ec_range': "500-2500 µS/cm",
}

EASTERN_COASTAL_ALLUVIUM = {
    'name': "Coastal Alluvium Aquifer",
    'code': "AL",
    'formation_type': "Eastern Coastal Alluvium",
    'description': "Deltaic deposits along Bay of Bengal with good groundwater potential in sandy formations.",
    'area_coverage_percent': 2.1,
    'weathered_zone': "2-25m",
    'fracture_zones': "Up to 150m",
    'yield_range': "100-3000 L/min",
    'dtw_range': "1-15m bgl",
    'age': "Quaternary",
    'states': ["West Bengal", "Odisha", "Andhra Pradesh", "Tamil Nadu"],
    'confidence': "High",
    'aquifer_system_type': "Multiple Unconfined to Semi-confined",
    'transmissivity_range': "200-4000 m²/day",
    'specific_yield': "8-20%",
    'quality_ec_range': "800-4000 µS/cm",
}

WESTERN_COASTAL_ALLUVIUM = {
    'name': "Coastal Alluvium Aquifer",
    'code': "AL",
    'formation_type': "Western Coastal Alluvium",
    'description': "Sandy coastal deposits along Arabian Sea with good groundwater potential.",
    'area_coverage_percent': 2.1,
    'weathered_zone': "2-30m",
    'fracture_zones': "Up to 200m",
    'yield_range': "50-2500 L/min",
    'dtw_range': "1-20m bgl",
    'age': "Quaternary",
    'states': ["Gujarat", "Maharashtra", "Goa", "Karnataka", "Kerala"],
    'confidence': "High",
    'aquifer_system_type': "Multiple Unconfined to Semi-confined",
    'transmissivity_range': "200-3000 m²/day",
    'specific_yield': "8-18%",
    'quality_ec_range': "500-3500 µS/cm",
}

DECCAN_BASALT = {
    'name': "Basalt Aquifer",
    'code': "BS",
    'formation_type': "Deccan Trap Basalt",
    'description': "Volcanic rock formations with moderate groundwater potential in weathered zones "
                   "and fractures. Dominant aquifer of Deccan Plateau.",
    'area_coverage_percent': 16.15,
    'weathered_zone': "5-30m",
    'fracture_zones': "10-200m bgl",
    'yield_range': "10-480 L/min",
    'dtw_range': "5-35m bgl",
    'age': "Cretaceous-Paleocene",
    'states': ["Maharashtra", "Madhya Pradesh", "Gujarat", "Karnataka", "Telangana", "Andhra Pradesh"],
    'confidence': "High",
    'aquifer_system_type': "Single/Multiple Unconfined to Semi-confined",
    'transmissivity_range': "20-280 m²/day",
    'specific_yield': "1-3%",
    'quality_ec_range': "500-5000 µS/cm",
}

CHARNOCKITE = {
    'name': "Charnockite Aquifer",
    'code': "CK",
    'formation_type': "Charnockite and Granulite",
    'description': "High-grade metamorphic rocks with limited to moderate groundwater potential. "
                   "Characteristic of Tamil Nadu's Eastern Ghats region.",
    'area_coverage_percent': 2.41,
    'weathered_zone': "2-40m",
    'fracture_zones': "5-45m bgl",
    'yield_range': "10-3000 L/min",
    'dtw_range': "5-40m bgl",
    'age': "Archean",
    'states': ["Tamil Nadu", "Karnataka", "Andhra Pradesh", "Kerala"],
    'confidence': "High",
    'aquifer_system_type': "Single Unconfined to Semi-confined",
    'transmissivity_range': "15-291 m²/day",
    'specific_yield': "1-3%",
    'quality_ec_range': "500-4000 µS/cm",
}

BANDED_GNEISSIC_COMPLEX = {
    'name': "Banded Gneissic Complex Aquifer",
    'code': "BG",
    'formation_type': "Banded Gneissic Complex (BGC)",
    'description': "Ancient crystalline rocks with groundwater in weathered zones and fractures. "
                   "Widely distributed across peninsular India.",
    'area_coverage_percent': 15.09,
    'weathered_zone': "3-25m",
    'fracture_zones': "5-200m bgl",
    'yield_range': "10-3600 L/min",
    'dtw_range': "5-25m bgl",
    'age': "Archean",
    'states': ["Karnataka", "Andhra Pradesh", "Telangana", "Jharkhand", "Odisha", "Chhattisgarh"],
    'confidence': "High",
    'aquifer_system_type': "Single Unconfined to Semi-confined",
    'transmissivity_range': "6-691 m²/day",
    'specific_yield': "1-3%",
    'quality_ec_range': "500-3500 µS/cm",
}

SANDSTONE = {
    'name': "Sandstone Aquifer",
    'code': "ST",
    'formation_type': "Gondwana and Tertiary Sandstone",
    'description': "Sedimentary sandstone formations with good groundwater potential in consolidated zones.",
    'area_coverage_percent': 8.21,
    'weathered_zone': "5-40m",
    'fracture_zones': "20-600m bgl",
    'yield_range': "20-3700 L/min",
    'dtw_range': "5-40m bgl",
    'age': "Permian-Cretaceous",
    'states': ["Chhattisgarh", "Odisha", "Jharkhand", "Madhya Pradesh"],
    'confidence': "High",
    'aquifer_system_type': "Multiple Unconfined to Confined",
    'transmissivity_range': "20-600 m²/day",
    'specific_yield': "3-8%",
    'quality_ec_range': "300-2500 µS/cm",
}

GRANITE = {
    'name': "Granite Aquifer",
    'code': "GR",
    'formation_type': "Granite and Acidic Intrusive Rocks",
    'description': "Igneous intrusive rocks with limited groundwater potential in weathered zones.",
    'area_coverage_percent': 3.18,
    'weathered_zone': "5-40m",
    'fracture_zones': "15-200m bgl",
    'yield_range': "10-1440 L/min",
    'dtw_range': "5-40m bgl",
    'age': "Proterozoic",
    'states': ["Rajasthan", "Gujarat", "Madhya Pradesh"],
    'confidence': "Medium",
    'aquifer_system_type': "Single Unconfined to Semi-confined",
    'transmissivity_range': "2-50 m²/day",
    'specific_yield': "1-3%",
    'quality_ec_range': "500-2500 µS/cm",
}

GNEISS = {
    'name': "Gneiss Aquifer",
    'code': "GN",
    'formation_type': "Gneiss and Migmatitic Gneiss",
    'description': "Metamorphic gneissic rocks with moderate groundwater potential in tropical weathered zones.",
    'area_coverage_percent': 5.01,
    'weathered_zone': "3-25m",
    'fracture_zones': "20-200m bgl",
    'yield_range': "15-2500 L/min",
    'dtw_range': "5-15m bgl",
    'age': "Archean to Proterozoic",
    'states': ["Kerala", "Karnataka", "Tamil Nadu"],
    'confidence': "Medium",
    'aquifer_system_type': "Single Unconfined to Semi-confined",
    'transmissivity_range': "5-80 m²/day",
    'specific_yield': "2-5%",
    'quality_ec_range': "300-2000 µS/cm",
}

HIMALAYAN_ROCK = {
    'name': "Himalayan Rock Aquifer",
    'code': "HR",
    'formation_type': "Metamorphic and Sedimentary Rocks",
    'description': "Limited groundwater in fractured rocks of Himalayan terrain with seasonal variations.",
    'area_coverage_percent': 8.0,
    'weathered_zone': "2-20m",
    'fracture_zones': "10-300m bgl",
    'yield_range': "5-800 L/min",
    'dtw_range': "5-50m bgl",
    'age': "Paleozoic to Cenozoic",
    'states': ["Jammu & Kashmir", "Himachal Pradesh", "Uttarakhand", "Sikkim", "Arunachal Pradesh"],
    'confidence': "Medium",
    'aquifer_system_type': "Single to Multiple Semi-confined",
    'transmissivity_range': "10-500 m²/day",
    'specific_yield': "2-10%",
    'quality_ec_range': "200-1500 µS/cm",
}

DESERT = {
    'name': "Desert Aquifer",
    'code': "DS",
    'formation_type': "Aeolian and Alluvial Deposits",
    'description': "Limited groundwater in aeolian sands and scattered alluvial deposits of arid region.",
    'area_coverage_percent': 4.0,
    'weathered_zone': "5-40m",
    'fracture_zones': "20-300m bgl",
    'yield_range': "5-300 L/min",
    'dtw_range': "10-80m bgl",
    'age': "Quaternary",
    'states': ["Rajasthan", "Gujarat", "Haryana"],
    'confidence': "Medium",
    'aquifer_system_type': "Multiple Unconfined",
    'transmissivity_range': "20-600 m²/day",
    'specific_yield': "5-15%",
    'quality_ec_range': "1000-8000 µS/cm",
}

NORTHEAST_HILL = {
    'name': "Hill Aquifer",
    'code': "HL",
    'formation_type': "Tertiary Sedimentary Rocks",
    'description': "Moderate groundwater in folded sedimentary rocks with high rainfall recharge.",
    'area_coverage_percent': 5.0,
    'weathered_zone': "5-30m",
    'fracture_zones': "20-200m bgl",
    'yield_range': "20-1200 L/min",
    'dtw_range': "5-25m bgl",
    'age': "Tertiary",
    'states': ["Assam", "Meghalaya", "Manipur", "Mizoram", "Nagaland", "Tripura"],
    'confidence': "Medium",
    'aquifer_system_type': "Single to Multiple Semi-confined",
    'transmissivity_range': "50-400 m²/day",
    'specific_yield': "3-12%",
    'quality_ec_range': "200-1200 µS/cm",
}

GENERIC_HARD_ROCK = {
    'name': "Hard Rock Aquifer",
    'code': "HR",
    'formation_type': "Mixed Crystalline and Metamorphic Rocks",
    'description': "Hard rock aquifer with groundwater potential in weathered zones and fractures. "
                   "Typical of peninsular Indian geology.",
    'area_coverage_percent': 30.0,
    'weathered_zone': "5-25m",
    'fracture_zones': "10-150m bgl",
    'yield_range': "10-800 L/min",
    'dtw_range': "5-30m bgl",
    'age': "Archean to Proterozoic",
    'states': ["Multiple States"],
    'confidence': "Medium",
    'aquifer_system_type': "Single Unconfined to Semi-confined",
    'transmissivity_range': "10-300 m²/day",
    'specific_yield': "1-5%",
    'quality_ec_range': "500-3000 µS/cm",
}


# ============================================================================
# PRIMARY ZONES
# ============================================================================

PRIMARY_ZONES = [
    {
        'name': "Indo-Gangetic Plains Alluvium",
        'priority': 1,
        'aquifer': INDO_GANGETIC_ALLUVIUM,
        # Extended south-east over the Bengal delta down to the Sundarbans.
        # North-east corner follows the Siwalik front so hill towns fall outside
        'polygon': [
            (31.5, 74.0), (31.5, 76.2), (30.8, 76.9), (30.0, 77.9), (30.0, 89.0),
            (21.6, 89.0), (21.6, 87.2), (24.0, 86.8), (24.0, 74.0),
        ],
        'features': ["Quaternary alluvium", "River terraces", "Flood plains"],
    },
    {
        'name': "Coastal Eastern Alluvium",
        'priority': 2,
        'aquifer': EASTERN_COASTAL_ALLUVIUM,
        # Bay of Bengal strip, sea side north to south then inland edge back north
        'polygon': [
            (22.6, 89.2), (21.3, 88.0), (20.0, 87.2), (19.2, 85.6), (18.0, 84.6),
            (16.8, 82.9), (15.6, 81.6), (14.0, 80.7), (12.5, 80.6), (11.0, 80.2),
            (9.5, 79.8), (8.5, 78.6), (8.0, 77.9),
            (8.4, 77.6), (9.4, 78.3), (10.6, 79.2), (12.0, 79.4), (13.5, 79.7),
            (15.0, 79.7), (16.3, 80.6), (17.3, 82.0), (18.5, 83.6), (19.6, 84.9),
            (20.8, 86.1), (22.0, 87.3), (22.6, 87.6),
        ],
        'features': ["Deltaic deposits", "Beach sands", "Estuarine clays"],
        'exclusions': {
            'cities': ["Visakhapatnam"],  # Khondalite headlands
            'conditions': ["distance_from_coast > 12km"],
        },
    },
    {
        'name': "Coastal Western Alluvium",
        'priority': 2,
        'aquifer': WESTERN_COASTAL_ALLUVIUM,
        'polygon': [(23.5, 68.0), (23.5, 73.5), (8.0, 77.0), (8.0, 76.0)],
        'features': ["Beach sands", "Lagoon deposits", "Coastal terraces"],
        'exclusions': {'conditions': ["distance_from_coast > 15km"]},
    },
    {
        'name': "Deccan Basalt Plateau",
        'priority': 3,
        'aquifer': DECCAN_BASALT,
        'polygon': [(26.0, 72.0), (26.0, 82.0), (15.0, 82.0), (15.0, 73.0)],
        'features': ["Basalt flows", "Weathered basalt", "Jointed structures"],
    },
    {
        'name': "Tamil Nadu Charnockite Belt",
        'priority': 4,
        'aquifer': CHARNOCKITE,
        'polygon': [
            (16.0, 79.0), (16.0, 82.0), (8.0, 82.0), (8.0, 76.8),
            (11.8, 76.8), (12.6, 78.2), (13.5, 78.6),
        ],
        'features': ["Charnockite", "Granulite", "Khondalite"],
        'exclusions': {'conditions': ["distance_from_coast < 8km"]},
    },
    {
        'name': "Peninsular Banded Gneissic Complex",
        'priority': 5,
        'aquifer': BANDED_GNEISSIC_COMPLEX,
        'polygon': [
            (24.0, 82.0), (24.0, 88.0), (18.0, 88.0),
            (12.0, 85.0), (12.0, 73.0), (18.0, 73.0),
        ],
        'features': ["Banded gneiss", "Migmatite", "Granite gneiss"],
    },
    {
        'name': "Central India Sandstone Belt",
        'priority': 6,
        'aquifer': SANDSTONE,
        'rectangle': {'lat_min': 18.0, 'lat_max': 26.0, 'lon_min': 78.0, 'lon_max': 88.0},
        'features': ["Gondwana sandstone", "Coal measures", "Lameta beds"],
    },
    {
        'name': "Rajasthan Granite Belt",
        'priority': 7,
        'aquifer': GRANITE,
        # Western edge stops short of the Thar dune field
        'rectangle': {'lat_min': 22.0, 'lat_max': 30.0, 'lon_min': 72.5, 'lon_max': 78.0},
        'features': ["Granite intrusions", "Pegmatite", "Quartz veins"],
    },
    {
        'name': "Kerala-Karnataka Gneiss Belt",
        'priority': 8,
        'aquifer': GNEISS,
        'rectangle': {'lat_min': 8.0, 'lat_max': 16.0, 'lon_min': 74.0, 'lon_max': 78.0},
        'features': ["Hornblende gneiss", "Biotite gneiss", "Laterite"],
    },
]

# ============================================================================
# SPECIAL (EXTREME TERRAIN) ZONES
# ============================================================================

SPECIAL_ZONES = [
    {
        'name': "Himalayan Zone",
        'priority': 10,
        'aquifer': HIMALAYAN_ROCK,
        'rectangle': {'lat_min': 28.0, 'lat_max': 37.0, 'lon_min': 72.0, 'lon_max': 98.0},
        'features': ["Metamorphic rocks", "Sedimentary formations", "Glacial deposits"],
    },
    {
        'name': "Thar Desert Zone",
        'priority': 11,
        'aquifer': DESERT,
        'rectangle': {'lat_min': 24.0, 'lat_max': 30.0, 'lon_min': 68.0, 'lon_max': 76.0},
        'features': ["Aeolian sands", "Calcrete", "Scattered alluvium"],
    },
    {
        'name': "Northeast Hill Zone",
        'priority': 12,
        'aquifer': NORTHEAST_HILL,
        'rectangle': {'lat_min': 22.0, 'lat_max': 29.0, 'lon_min': 88.0, 'lon_max': 98.0},
        'features': ["Folded sediments", "Shale", "Sandstone intercalations"],
    },
]


PRIMARY_CATALOG = build_catalog("CGWB Principal Aquifers", PRIMARY_ZONES)
SPECIAL_CATALOG = build_catalog("Extreme Terrain Zones", SPECIAL_ZONES)
DEFAULT_AQUIFER = build_descriptor(GENERIC_HARD_ROCK)


def himalayan_aquifer() -> AquiferDescriptor:
    return SPECIAL_CATALOG.find("Himalayan Zone").aquifer


def desert_aquifer() -> AquiferDescriptor:
    return SPECIAL_CATALOG.find("Thar Desert Zone").aquifer


def northeast_hill_aquifer() -> AquiferDescriptor:
    return SPECIAL_CATALOG.find("Northeast Hill Zone").aquifer


def peninsular_gneiss_aquifer() -> AquiferDescriptor:
    return PRIMARY_CATALOG.find("Peninsular Banded Gneissic Complex").aquifer

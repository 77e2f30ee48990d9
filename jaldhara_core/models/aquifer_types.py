"""
AQUIFER RESOLUTION DATA MODEL
Immutable value types shared by the context builder, matcher, ranker and adjuster
Catalog entries are frozen so reference data cannot drift at runtime
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple, Union

from jaldhara_core.utils.geo_processor import GeoProcessor


class AquiferCode(str, Enum):
    """CGWB principal aquifer codes"""
    AL = 'AL'  # Alluvium
    BS = 'BS'  # Basalt
    CK = 'CK'  # Charnockite
    BG = 'BG'  # Banded Gneissic Complex
    ST = 'ST'  # Sandstone
    GR = 'GR'  # Granite
    GN = 'GN'  # Gneiss
    HR = 'HR'  # Hard rock / Himalayan rock
    DS = 'DS'  # Desert
    HL = 'HL'  # Hill

    @property
    def is_alluvial(self) -> bool:
        return self is AquiferCode.AL

    @property
    def is_hill(self) -> bool:
        return self in (AquiferCode.HR, AquiferCode.HL)

    @property
    def is_desert(self) -> bool:
        return self is AquiferCode.DS

    @property
    def is_hard_rock(self) -> bool:
        return self in (AquiferCode.BS, AquiferCode.BG)


class ConfidenceLabel(str, Enum):
    HIGH = 'High'
    MEDIUM = 'Medium'
    LOW = 'Low'


class ClimateClass(str, Enum):
    ARID = 'Arid'
    SEMI_ARID = 'Semi-Arid'
    SUB_HUMID = 'Sub-Humid'
    HUMID = 'Humid'


class TerrainClass(str, Enum):
    COASTAL = 'Coastal'
    PLAINS = 'Plains'
    PLATEAU = 'Plateau'
    HILLS = 'Hills'
    MOUNTAIN = 'Mountain'


class UrbanizationLevel(str, Enum):
    RURAL = 'Rural'
    URBAN = 'Urban'
    METROPOLITAN = 'Metropolitan'


class MatchType(str, Enum):
    POLYGON = 'Polygon'        # Primary catalog
    GEOLOGICAL = 'Geological'  # Special (extreme terrain) catalog
    PROXIMITY = 'Proximity'    # Regional decision tree, no zone matched
    DEFAULT = 'Default'        # Generic hard rock fallback


_RANGE_PATTERN = re.compile(r'^\s*(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)(.*)$')
_OPEN_RANGE_PATTERN = re.compile(r'^\s*Up to\s+(\d+(?:\.\d+)?)(.*)$', re.IGNORECASE)


@dataclass(frozen=True)
class ValueRange:
    """
    Numeric (min, max, unit) range such as "500-2500 µS/cm"

    The unit keeps its original spacing (" L/min", "m bgl", "%") so that
    rendering reproduces catalog text exactly. An absent minimum is an
    open range rendered as "Up to <max><unit>".
    """
    minimum: Optional[float]
    maximum: float
    unit: str = ''

    def __post_init__(self):
        if self.minimum is not None and self.minimum > self.maximum:
            raise ValueError(f"Range minimum {self.minimum} exceeds maximum {self.maximum}")

    @classmethod
    def parse(cls, text: str) -> 'ValueRange':
        """Parse "min-max[unit]" or "Up to max[unit]" text"""
        match = _RANGE_PATTERN.match(text)
        if match:
            return cls(float(match.group(1)), float(match.group(2)), match.group(3))

        match = _OPEN_RANGE_PATTERN.match(text)
        if match:
            return cls(None, float(match.group(1)), match.group(2))

        raise ValueError(f"Unparseable range: {text!r}")

    def scaled(self, factor: float) -> 'ValueRange':
        """Multiply both bounds by factor; rounding is deferred to rendering"""
        minimum = None if self.minimum is None else self.minimum * factor
        return ValueRange(minimum, self.maximum * factor, self.unit)

    @staticmethod
    def _round_half_up(value: float) -> int:
        return int(math.floor(value + 0.5))

    def __str__(self) -> str:
        maximum = self._round_half_up(self.maximum)
        if self.minimum is None:
            return f"Up to {maximum}{self.unit}"
        return f"{self._round_half_up(self.minimum)}-{maximum}{self.unit}"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class PolygonBoundary:
    """Closed polygon given as ordered (lat, lon) vertices"""
    vertices: Tuple[Tuple[float, float], ...]

    def __post_init__(self):
        if len(self.vertices) < 3:
            raise ValueError(f"Polygon needs at least 3 vertices, got {len(self.vertices)}")

    def contains(self, coordinate: Coordinate) -> bool:
        return GeoProcessor.point_in_polygon(
            coordinate.latitude, coordinate.longitude, self.vertices
        )


@dataclass(frozen=True)
class CircleBoundary:
    center: Coordinate
    radius_km: float

    def __post_init__(self):
        if not self.radius_km > 0:
            raise ValueError(f"Circle radius must be positive, got {self.radius_km}")

    def contains(self, coordinate: Coordinate) -> bool:
        distance = GeoProcessor.calculate_distance(
            coordinate.latitude, coordinate.longitude,
            self.center.latitude, self.center.longitude
        )
        return distance <= self.radius_km


@dataclass(frozen=True)
class RectangleBoundary:
    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float

    def __post_init__(self):
        if self.lat_min > self.lat_max or self.lon_min > self.lon_max:
            raise ValueError(f"Inverted rectangle bounds: {self}")

    def contains(self, coordinate: Coordinate) -> bool:
        return (self.lat_min <= coordinate.latitude <= self.lat_max and
                self.lon_min <= coordinate.longitude <= self.lon_max)


Boundary = Union[PolygonBoundary, CircleBoundary, RectangleBoundary]


@dataclass(frozen=True)
class GeographicContext:
    """Static-table description of a coordinate's setting"""
    elevation_m: float
    climate: ClimateClass
    terrain: TerrainClass
    urbanization: UrbanizationLevel
    industrial: bool
    coastal_distance_km: float
    nearest_city: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'elevation_m': round(self.elevation_m, 1),
            'climate': self.climate.value,
            'terrain': self.terrain.value,
            'urbanization': self.urbanization.value,
            'industrial': self.industrial,
            'coastal_distance_km': round(self.coastal_distance_km, 2),
            'nearest_city': self.nearest_city,
        }


_CONDITION_PATTERN = re.compile(
    r'^\s*(distance_from_coast|elevation)\s*(>=|<=|>|<|=)\s*(\d+(?:\.\d+)?)\s*(km|m)?\s*$'
)


@dataclass(frozen=True)
class ExclusionCondition:
    """Parsed rule such as "distance_from_coast > 12km" or "elevation > 1000m" """
    metric: str
    operator: str
    threshold: float

    @classmethod
    def parse(cls, text: str) -> 'ExclusionCondition':
        match = _CONDITION_PATTERN.match(text)
        if not match:
            raise ValueError(f"Unrecognized exclusion condition: {text!r}")
        return cls(match.group(1), match.group(2), float(match.group(3)))

    def evaluate(self, context: GeographicContext) -> bool:
        if self.metric == 'distance_from_coast':
            value = context.coastal_distance_km
        else:
            value = context.elevation_m

        if self.operator == '>':
            return value > self.threshold
        if self.operator == '<':
            return value < self.threshold
        if self.operator == '>=':
            return value >= self.threshold
        if self.operator == '<=':
            return value <= self.threshold
        return abs(value - self.threshold) < 1

    def __str__(self) -> str:
        unit = 'km' if self.metric == 'distance_from_coast' else 'm'
        return f"{self.metric} {self.operator} {self.threshold:g}{unit}"


@dataclass(frozen=True)
class ZoneExclusions:
    cities: FrozenSet[str] = frozenset()
    conditions: Tuple[ExclusionCondition, ...] = ()

    @classmethod
    def build(cls, cities: Optional[List[str]] = None,
              conditions: Optional[List[str]] = None) -> 'ZoneExclusions':
        return cls(
            cities=frozenset(cities or ()),
            conditions=tuple(ExclusionCondition.parse(c) for c in conditions or ())
        )

    def reason(self, context: GeographicContext) -> Optional[str]:
        """Why the context is excluded, or None if it is not"""
        if context.nearest_city and context.nearest_city in self.cities:
            return f"near excluded city {context.nearest_city}"

        for condition in self.conditions:
            if condition.evaluate(context):
                return f"condition {condition}"

        return None


@dataclass(frozen=True)
class AquiferDescriptor:
    """CGWB principal aquifer description; ranges stay structured until rendered"""
    name: str
    code: AquiferCode
    formation_type: str
    description: str
    area_coverage_percent: float
    weathered_zone: ValueRange
    fracture_zones: ValueRange
    yield_range: ValueRange
    dtw_range: ValueRange
    age: str
    states: Tuple[str, ...]
    confidence: ConfidenceLabel
    aquifer_system_type: str
    transmissivity_range: ValueRange
    specific_yield: ValueRange
    quality_ec_range: ValueRange
    notes: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        """Presentation form: every range rendered to its display string"""
        return {
            'name': self.name,
            'code': self.code.value,
            'type': self.formation_type,
            'description': self.description,
            'area_coverage_percent': self.area_coverage_percent,
            'weathered_zone': str(self.weathered_zone),
            'fracture_zones': str(self.fracture_zones),
            'yield_range': str(self.yield_range),
            'dtw_range': str(self.dtw_range),
            'age': self.age,
            'states': list(self.states),
            'confidence': self.confidence.value,
            'aquifer_system_type': self.aquifer_system_type,
            'transmissivity_range': str(self.transmissivity_range),
            'specific_yield': str(self.specific_yield),
            'quality_ec_range': str(self.quality_ec_range),
            'notes': list(self.notes),
        }


@dataclass(frozen=True)
class GeologicalZone:
    name: str
    priority: int
    boundary: Boundary
    aquifer: AquiferDescriptor
    geological_features: Tuple[str, ...] = ()
    exclusions: Optional[ZoneExclusions] = None

    def __post_init__(self):
        if isinstance(self.priority, bool) or not isinstance(self.priority, int) or self.priority < 1:
            raise ValueError(f"Zone '{self.name}' priority must be a positive integer, got {self.priority!r}")


@dataclass(frozen=True)
class CandidateMatch:
    aquifer: AquiferDescriptor
    confidence: float
    match_type: MatchType
    adjustments: Tuple[str, ...] = ()
    zone_name: Optional[str] = None
    zone_priority: Optional[int] = None

    def __post_init__(self):
        if not (0.0 <= self.confidence <= 1.0):
            raise ValueError(f"Invalid confidence: {self.confidence} (must be 0-1)")


class ZoneCatalog:
    """
    Read-only, priority-ordered collection of geological zones
    Equal priorities keep registration order
    """

    def __init__(self, name: str, zones: List[GeologicalZone], version: str = ''):
        self.name = name
        self.version = version
        self._zones: Tuple[GeologicalZone, ...] = tuple(
            sorted(zones, key=lambda zone: zone.priority)
        )

    @property
    def zones(self) -> Tuple[GeologicalZone, ...]:
        return self._zones

    def __iter__(self) -> Iterator[GeologicalZone]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    def find(self, name: str) -> GeologicalZone:
        for zone in self._zones:
            if zone.name == name:
                return zone
        raise KeyError(f"No zone named '{name}' in catalog '{self.name}'")

    def __repr__(self) -> str:
        return f"ZoneCatalog({self.name!r}, zones={len(self._zones)}, version={self.version!r})"

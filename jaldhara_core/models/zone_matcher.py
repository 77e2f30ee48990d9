"""
ZONE MATCHER
Scores every catalog zone that contains a coordinate

Zones are visited in priority order and all matches are gathered. Base
confidence is 1/priority, refined by coastal, elevation, terrain and
urbanization factors, clamped to [0, 1] and finally scaled by the catalog
discount.
"""

from typing import List, Tuple
import logging

from jaldhara_core.config import aquifer_catalog
from jaldhara_core.config.settings import (
    ALLUVIAL_COASTAL_BOOST, ALLUVIAL_COASTAL_MID_KM, ALLUVIAL_COASTAL_NEAR_KM,
    ALLUVIAL_COASTAL_NEUTRAL, ALLUVIAL_INLAND_PENALTY, HIMALAYAN_BOOST_ELEVATION_M,
    HIMALAYAN_ELEVATION_BOOST, HIMALAYAN_PROXIMITY_LATITUDE, METROPOLITAN_HARD_ROCK_PENALTY,
    NORTHEAST_PROXIMITY_BOUNDS, PROXIMITY_CONFIDENCE, TERRAIN_MATCH_BOOST,
)
from jaldhara_core.models.aquifer_types import (
    CandidateMatch, ClimateClass, Coordinate, GeographicContext, GeologicalZone,
    MatchType, TerrainClass, UrbanizationLevel, ZoneCatalog,
)

logger = logging.getLogger(__name__)

# Zone name keyword -> terrain class it should agree with
TERRAIN_KEYWORDS = (
    ('Coastal', TerrainClass.COASTAL),
    ('Hill', TerrainClass.HILLS),
    ('Plateau', TerrainClass.PLATEAU),
)


def zone_confidence(zone: GeologicalZone, context: GeographicContext) -> Tuple[float, List[str]]:
    """
    Confidence in [0, 1] for a zone known to contain the coordinate

    Returns:
        (confidence, notes) where notes name every factor applied
    """
    confidence = 1.0 / zone.priority
    notes = [f"Base confidence 1/{zone.priority} from zone priority"]
    code = zone.aquifer.code

    if code.is_alluvial:
        distance = context.coastal_distance_km
        if distance <= ALLUVIAL_COASTAL_NEAR_KM:
            confidence *= ALLUVIAL_COASTAL_BOOST
            notes.append(f"Coastal alluvium boost x{ALLUVIAL_COASTAL_BOOST} ({distance:.1f}km from coast)")
        elif distance <= ALLUVIAL_COASTAL_MID_KM:
            confidence *= ALLUVIAL_COASTAL_NEUTRAL
            notes.append(f"Near-coast alluvium x{ALLUVIAL_COASTAL_NEUTRAL} ({distance:.1f}km from coast)")
        else:
            confidence *= ALLUVIAL_INLAND_PENALTY
            notes.append(f"Inland alluvium x{ALLUVIAL_INLAND_PENALTY} ({distance:.1f}km from coast)")

    if 'Himalayan' in zone.name and context.elevation_m > HIMALAYAN_BOOST_ELEVATION_M:
        confidence *= HIMALAYAN_ELEVATION_BOOST
        notes.append(f"High elevation boost x{HIMALAYAN_ELEVATION_BOOST} ({context.elevation_m:.0f}m)")

    for keyword, terrain in TERRAIN_KEYWORDS:
        if keyword in zone.name and context.terrain is terrain:
            confidence *= TERRAIN_MATCH_BOOST
            notes.append(f"{terrain.value} terrain match x{TERRAIN_MATCH_BOOST}")
            break

    if context.urbanization is UrbanizationLevel.METROPOLITAN and not code.is_alluvial:
        confidence *= METROPOLITAN_HARD_ROCK_PENALTY
        notes.append(f"Metropolitan hard rock penalty x{METROPOLITAN_HARD_ROCK_PENALTY}")

    if confidence > 1.0:
        notes.append("Clamped to 1.0")
    return min(1.0, max(0.0, confidence)), notes


def match_zones(coordinate: Coordinate, context: GeographicContext, catalog: ZoneCatalog,
                discount: float = 1.0,
                match_type: MatchType = MatchType.POLYGON) -> List[CandidateMatch]:
    """
    Gather a candidate for every zone that contains the coordinate and is not excluded

    Args:
        coordinate: Location to test
        context: Geographic context of the location
        catalog: Zones to test, already priority ordered
        discount: Multiplier applied after clamping
        match_type: Tag for produced candidates

    Returns:
        Candidates in catalog priority order
    """
    candidates = []

    for zone in catalog:
        if zone.exclusions is not None:
            reason = zone.exclusions.reason(context)
            if reason:
                logger.debug(f"Zone '{zone.name}' excluded: {reason}")
                continue

        if not zone.boundary.contains(coordinate):
            continue

        confidence, notes = zone_confidence(zone, context)
        if discount != 1.0:
            confidence *= discount
            notes.append(f"{catalog.name} discount x{discount}")

        candidates.append(CandidateMatch(
            aquifer=zone.aquifer,
            confidence=confidence,
            match_type=match_type,
            adjustments=tuple(notes),
            zone_name=zone.name,
            zone_priority=zone.priority,
        ))
        logger.debug(f"Zone '{zone.name}' matched with confidence {confidence:.3f}")

    return candidates


def proximity_candidate(coordinate: Coordinate, context: GeographicContext) -> CandidateMatch:
    """Regional fallback when no catalog zone contains the coordinate"""
    if coordinate.latitude > HIMALAYAN_PROXIMITY_LATITUDE:
        aquifer, region = aquifer_catalog.himalayan_aquifer(), "Himalayan region"
    elif context.climate is ClimateClass.ARID:
        aquifer, region = aquifer_catalog.desert_aquifer(), "arid region"
    elif (coordinate.latitude >= NORTHEAST_PROXIMITY_BOUNDS['lat_min'] and
          coordinate.longitude >= NORTHEAST_PROXIMITY_BOUNDS['lon_min']):
        aquifer, region = aquifer_catalog.northeast_hill_aquifer(), "northeast hills"
    else:
        aquifer, region = aquifer_catalog.peninsular_gneiss_aquifer(), "peninsular hard rock"

    return CandidateMatch(
        aquifer=aquifer,
        confidence=PROXIMITY_CONFIDENCE,
        match_type=MatchType.PROXIMITY,
        adjustments=(f"No zone contains the location; nearest regional aquifer ({region})",),
    )

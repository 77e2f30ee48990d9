"""
AQUIFER RESOLUTION ENGINE
Coordinate -> context -> candidates -> selected candidate -> adjusted descriptor

The engine never raises: coordinates outside India and internal faults
resolve to the generic hard rock descriptor, and both are logged.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Optional, Tuple
import logging

from jaldhara_core.config.aquifer_catalog import DEFAULT_AQUIFER, PRIMARY_CATALOG, SPECIAL_CATALOG
from jaldhara_core.config.settings import INDIA_ENVELOPE, SPECIAL_ZONE_DISCOUNT
from jaldhara_core.models.aquifer_types import (
    AquiferDescriptor, CandidateMatch, Coordinate, GeographicContext, MatchType, ZoneCatalog,
)
from jaldhara_core.models.candidate_ranker import default_candidate, select_best
from jaldhara_core.models.dynamic_adjuster import adjust
from jaldhara_core.models.geographic_context import build_context
from jaldhara_core.models.zone_matcher import match_zones, proximity_candidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AquiferResolution:
    """Full trace of one resolution"""
    coordinate: Any
    descriptor: AquiferDescriptor
    selected: CandidateMatch
    context: Optional[GeographicContext] = None
    candidates: Tuple[CandidateMatch, ...] = ()
    fallback_reason: Optional[str] = None

    @property
    def is_default(self) -> bool:
        return self.selected.match_type is MatchType.DEFAULT

    def to_dict(self) -> Dict:
        return {
            'aquifer': self.descriptor.to_dict(),
            'match_type': self.selected.match_type.value,
            'match_confidence': round(self.selected.confidence, 3),
            'zone': self.selected.zone_name,
            'adjustments': list(self.selected.adjustments),
            'context': self.context.to_dict() if self.context else None,
            'candidates': [
                {
                    'zone': c.zone_name,
                    'code': c.aquifer.code.value,
                    'confidence': round(c.confidence, 3),
                    'match_type': c.match_type.value,
                }
                for c in self.candidates
            ],
            'fallback_reason': self.fallback_reason,
        }


def _in_envelope(coordinate: Any) -> bool:
    """Numeric, finite and inside the India envelope"""
    try:
        lat, lon = coordinate.latitude, coordinate.longitude
    except AttributeError:
        return False

    for value in (lat, lon):
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
            return False

    return (INDIA_ENVELOPE['lat_min'] <= lat <= INDIA_ENVELOPE['lat_max'] and
            INDIA_ENVELOPE['lon_min'] <= lon <= INDIA_ENVELOPE['lon_max'])


class AquiferResolutionEngine:
    """
    Resolves the principal aquifer beneath a coordinate in India

    Both catalogs are injectable so that alternative zone tables can be
    resolved with the same matching, ranking and adjustment pipeline.
    """

    def __init__(self, primary_catalog: ZoneCatalog = PRIMARY_CATALOG,
                 special_catalog: ZoneCatalog = SPECIAL_CATALOG,
                 special_discount: float = SPECIAL_ZONE_DISCOUNT):
        self.primary_catalog = primary_catalog
        self.special_catalog = special_catalog
        self.special_discount = special_discount
        self.logger = logging.getLogger(__name__)

    def resolve(self, coordinate: Coordinate) -> AquiferDescriptor:
        return self.resolve_detailed(coordinate).descriptor

    def resolve_detailed(self, coordinate: Coordinate) -> AquiferResolution:
        if not _in_envelope(coordinate):
            self.logger.warning(f"Coordinate {coordinate!r} outside India envelope, using default aquifer")
            return self._fallback(coordinate, "Coordinate outside India envelope")

        try:
            return self._resolve(coordinate)
        except Exception:
            self.logger.exception(f"Aquifer resolution failed for {coordinate!r}, using default aquifer")
            return self._fallback(coordinate, "Internal computation fault")

    def _resolve(self, coordinate: Coordinate) -> AquiferResolution:
        context = build_context(coordinate)

        candidates = match_zones(coordinate, context, self.primary_catalog)
        candidates += match_zones(coordinate, context, self.special_catalog,
                                  discount=self.special_discount,
                                  match_type=MatchType.GEOLOGICAL)
        self.logger.debug(f"Found {len(candidates)} candidate zones for {coordinate!r}")

        if not candidates:
            candidates = [proximity_candidate(coordinate, context)]

        selected = select_best(candidates, context)
        descriptor = adjust(selected.aquifer, context)

        self.logger.info(
            f"Resolved ({coordinate.latitude}, {coordinate.longitude}) -> "
            f"{descriptor.name} [{descriptor.code.value}] via {selected.match_type.value} "
            f"(confidence {selected.confidence:.2f})"
        )

        return AquiferResolution(
            coordinate=coordinate,
            descriptor=descriptor,
            selected=selected,
            context=context,
            candidates=tuple(candidates),
        )

    @staticmethod
    def _fallback(coordinate: Any, reason: str) -> AquiferResolution:
        return AquiferResolution(
            coordinate=coordinate,
            descriptor=DEFAULT_AQUIFER,
            selected=default_candidate(),
            fallback_reason=reason,
        )


_ENGINE = AquiferResolutionEngine()


def resolve_aquifer(coordinate: Coordinate) -> AquiferDescriptor:
    """Resolve with the built-in CGWB catalogs"""
    return _ENGINE.resolve(coordinate)

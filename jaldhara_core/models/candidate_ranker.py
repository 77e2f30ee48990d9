"""
CANDIDATE RANKER AND TIE-BREAKER
Picks one candidate from the scored matches

Candidates are sorted by confidence (stable). When the top two are within
TIE_BREAK_EPSILON, an ordered table of geological rules is consulted; the
first rule that applies to the context and finds a candidate decides.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence
import logging

from jaldhara_core.config.aquifer_catalog import DEFAULT_AQUIFER
from jaldhara_core.config.settings import DEFAULT_CONFIDENCE, TIE_BREAK_EPSILON
from jaldhara_core.models.aquifer_types import (
    AquiferCode, CandidateMatch, ClimateClass, GeographicContext, MatchType, TerrainClass,
)

logger = logging.getLogger(__name__)

Selector = Callable[[Sequence[CandidateMatch]], Optional[CandidateMatch]]


@dataclass(frozen=True)
class TieBreakRule:
    name: str
    applies: Callable[[GeographicContext], bool]
    select: Selector


def _first(predicate: Callable[[CandidateMatch], bool]) -> Selector:
    def select(candidates: Sequence[CandidateMatch]) -> Optional[CandidateMatch]:
        return next((c for c in candidates if predicate(c)), None)
    return select


def _lowest_zone_priority(threshold: float) -> Selector:
    """Among candidates above threshold, the one from the most specific zone"""
    def select(candidates: Sequence[CandidateMatch]) -> Optional[CandidateMatch]:
        eligible = [c for c in candidates if c.confidence > threshold and c.zone_priority is not None]
        if not eligible:
            return None
        # min() keeps the first of equal priorities, i.e. sorted order
        return min(eligible, key=lambda c: c.zone_priority)
    return select


def _alluvial(min_confidence: float = -1.0) -> Selector:
    return _first(lambda c: c.aquifer.code.is_alluvial and c.confidence > min_confidence)


_hill = _first(lambda c: c.aquifer.code.is_hill)
_desert = _first(lambda c: c.aquifer.code.is_desert)
_plateau_hard_rock = _first(lambda c: c.aquifer.code in (AquiferCode.BS, AquiferCode.BG))


TIE_BREAK_RULES = (
    TieBreakRule(
        "very close to coast favours alluvium",
        lambda ctx: ctx.coastal_distance_km <= 5,
        _alluvial(0.7),
    ),
    TieBreakRule(
        "high elevation favours hill aquifers",
        lambda ctx: ctx.elevation_m > 1000,
        _hill,
    ),
    TieBreakRule(
        "arid interior favours desert aquifer",
        lambda ctx: ctx.climate is ClimateClass.ARID and ctx.coastal_distance_km > 50,
        _desert,
    ),
    TieBreakRule(
        "coastal terrain favours alluvium",
        lambda ctx: ctx.terrain is TerrainClass.COASTAL and ctx.coastal_distance_km <= 10,
        _alluvial(),
    ),
    TieBreakRule(
        "most specific zone among confident candidates",
        lambda ctx: True,
        _lowest_zone_priority(0.6),
    ),
    TieBreakRule(
        "near coast favours confident alluvium",
        lambda ctx: ctx.coastal_distance_km <= 8,
        _alluvial(0.65),
    ),
    TieBreakRule(
        "elevated terrain favours hill aquifers",
        lambda ctx: ctx.elevation_m > 800,
        _hill,
    ),
    TieBreakRule(
        "dry inland favours desert aquifer",
        lambda ctx: ctx.climate is ClimateClass.ARID and ctx.coastal_distance_km > 30,
        _desert,
    ),
    TieBreakRule(
        "wet coastal belt favours alluvium",
        lambda ctx: ctx.coastal_distance_km <= 15 and (
            ctx.terrain is TerrainClass.COASTAL or ctx.climate is ClimateClass.HUMID),
        _alluvial(),
    ),
    TieBreakRule(
        "semi-arid plateau favours basalt or gneiss",
        lambda ctx: ctx.climate is ClimateClass.SEMI_ARID and ctx.terrain is TerrainClass.PLATEAU,
        _plateau_hard_rock,
    ),
)


def default_candidate() -> CandidateMatch:
    return CandidateMatch(
        aquifer=DEFAULT_AQUIFER,
        confidence=DEFAULT_CONFIDENCE,
        match_type=MatchType.DEFAULT,
        adjustments=("No specific geological match found",),
    )


def rank_candidates(candidates: Sequence[CandidateMatch]) -> List[CandidateMatch]:
    """Stable sort, highest confidence first"""
    return sorted(candidates, key=lambda c: c.confidence, reverse=True)


def select_best(candidates: Sequence[CandidateMatch], context: GeographicContext,
                rules: Sequence[TieBreakRule] = TIE_BREAK_RULES) -> CandidateMatch:
    """
    Choose the winning candidate

    Args:
        candidates: Scored matches in any order
        context: Geographic context used by the tie-break rules
        rules: Ordered tie-break table

    Returns:
        The selected candidate; the default candidate when none were given
    """
    if not candidates:
        logger.debug("No candidates, using default aquifer")
        return default_candidate()

    ranked = rank_candidates(candidates)
    if len(ranked) == 1 or ranked[0].confidence - ranked[1].confidence >= TIE_BREAK_EPSILON:
        return ranked[0]

    for rule in rules:
        if not rule.applies(context):
            continue
        selected = rule.select(ranked)
        if selected is not None:
            logger.debug(f"Tie between {ranked[0].aquifer.code.value} and "
                         f"{ranked[1].aquifer.code.value} broken by rule: {rule.name}")
            return selected

    return ranked[0]

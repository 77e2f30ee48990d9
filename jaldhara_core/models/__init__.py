"""
Models module initialization - Principal Aquifer Resolution
"""

from .aquifer_types import (
    AquiferCode, AquiferDescriptor, CandidateMatch, ClimateClass, Coordinate,
    GeographicContext, GeologicalZone, MatchType, TerrainClass, UrbanizationLevel,
    ValueRange, ZoneCatalog,
)
from .aquifer_resolution import AquiferResolution, AquiferResolutionEngine, resolve_aquifer
from .principal_aquifer import PrincipalAquiferModel

__all__ = [
    'AquiferCode',
    'AquiferDescriptor',
    'CandidateMatch',
    'ClimateClass',
    'Coordinate',
    'GeographicContext',
    'GeologicalZone',
    'MatchType',
    'TerrainClass',
    'UrbanizationLevel',
    'ValueRange',
    'ZoneCatalog',
    'AquiferResolution',
    'AquiferResolutionEngine',
    'resolve_aquifer',
    'PrincipalAquiferModel'
]

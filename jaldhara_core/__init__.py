"""
Package initialization file for Jaldhara Core
"""

__version__ = "1.0.0"
__description__ = "Jaldhara - CGWB Principal Aquifer Resolution for India"

# Models first: the zone catalog depends on the aquifer data model
from jaldhara_core.models import (
    AquiferResolutionEngine, PrincipalAquiferModel, resolve_aquifer, Coordinate
)

from jaldhara_core.utils.core import (
    AnalysisResult, DataValidator, ReportExporter
)

__all__ = [
    'AquiferResolutionEngine',
    'PrincipalAquiferModel',
    'resolve_aquifer',
    'Coordinate',
    'AnalysisResult',
    'DataValidator',
    'ReportExporter'
]

"""
PRINCIPAL AQUIFER MODEL
CGWB principal aquifer for a site, packaged as a standard AnalysisResult
with recharge and harvesting guidance derived from the resolved aquifer
"""

from typing import List, Optional
import logging

from jaldhara_core.config.settings import AQUIFER_CATALOG_VERSION, MODEL_VERSION
from jaldhara_core.models.aquifer_resolution import AquiferResolution, AquiferResolutionEngine
from jaldhara_core.models.aquifer_types import AquiferCode, AquiferDescriptor, Coordinate
from jaldhara_core.utils.core import AnalysisResult, get_timestamp

logger = logging.getLogger(__name__)

# Upper bound of the yield range (L/min) -> severity
YIELD_SEVERITY_THRESHOLDS = (
    (2500, 'favorable'),
    (1000, 'moderate'),
    (400, 'unfavorable'),
)


class PrincipalAquiferModel:
    """
    Principal aquifer analysis for a single coordinate

    Severity follows the yield potential of the resolved aquifer; the
    confidence score is the match confidence of the selected zone.
    """

    def __init__(self, engine: Optional[AquiferResolutionEngine] = None):
        self.logger = logging.getLogger(__name__)
        self.engine = engine or AquiferResolutionEngine()

    def analyze_aquifer(self, latitude: float, longitude: float) -> AnalysisResult:
        resolution = self.engine.resolve_detailed(Coordinate(latitude, longitude))
        aquifer = resolution.descriptor

        if resolution.is_default:
            self.logger.warning(f"No zone resolved for ({latitude}, {longitude}), "
                                f"reporting generic hard rock aquifer")

        return AnalysisResult(
            analysis_type='principal_aquifer',
            location={'latitude': latitude, 'longitude': longitude},
            timestamp=get_timestamp(),
            confidence_score=round(resolution.selected.confidence, 2),
            severity_level=self.classify_severity(aquifer),
            key_findings=self._key_findings(resolution),
            recommendations=self._generate_recharge_recommendations(aquifer),
            methodology=(f'Prioritized CGWB zone matching with exclusion rules, contextual '
                         f'confidence scoring and geological tie-breaking '
                         f'(model {MODEL_VERSION}, catalog {AQUIFER_CATALOG_VERSION})'),
            data_sources=['CGWB Principal Aquifer Systems of India',
                          'GSI Geological Formation Maps',
                          'Curated coastline and urban reference tables'],
        )

    @staticmethod
    def classify_severity(aquifer: AquiferDescriptor) -> str:
        peak_yield = aquifer.yield_range.maximum
        for threshold, severity in YIELD_SEVERITY_THRESHOLDS:
            if peak_yield >= threshold:
                return severity
        return 'critical'

    @staticmethod
    def _key_findings(resolution: AquiferResolution) -> dict:
        findings = resolution.descriptor.to_dict()
        findings['match_type'] = resolution.selected.match_type.value
        findings['matched_zone'] = resolution.selected.zone_name
        findings['scoring_notes'] = list(resolution.selected.adjustments)
        findings['geographic_context'] = resolution.context.to_dict() if resolution.context else None
        findings['candidate_codes'] = [c.aquifer.code.value for c in resolution.candidates]
        if resolution.fallback_reason:
            findings['fallback_reason'] = resolution.fallback_reason
        return findings

    def _generate_recharge_recommendations(self, aquifer: AquiferDescriptor) -> List[str]:
        """Recharge structure and borewell guidance from aquifer properties"""
        recommendations = []
        code = aquifer.code

        # Recharge structure by formation
        if code.is_alluvial:
            recommendations.append("Alluvial aquifer - recharge pits or shafts with filter media work well")
            recommendations.append("Recharge trench along boundary suits large plots")
        elif code.is_hard_rock or code in (AquiferCode.CK, AquiferCode.GN, AquiferCode.GR):
            recommendations.append("Hard rock aquifer - recharge through existing or abandoned borewells")
            recommendations.append("Target weathered zone "
                                   f"({aquifer.weathered_zone}) with recharge shafts")
        elif code is AquiferCode.ST:
            recommendations.append("Sandstone aquifer - recharge shafts reaching the permeable horizon")
        elif code.is_desert:
            recommendations.append("Desert aquifer - prioritize storage tanks (tanka) over recharge")
            recommendations.append("Minimize evaporation losses with covered storage")
        elif code.is_hill:
            recommendations.append("Hill aquifer - spring-shed protection and contour trenches")
            recommendations.append("Rooftop storage tanks for dry season supply")

        # Depth to water
        dtw_max = aquifer.dtw_range.maximum
        if dtw_max > 40:
            recommendations.append(f"Deep water table (up to {dtw_max:.0f}m bgl) - "
                                   f"recharge wells preferred over surface pits")
        elif dtw_max <= 20:
            recommendations.append("Shallow water table - keep recharge pits at least 3m above it")

        # Water quality
        ec_max = aquifer.quality_ec_range.maximum
        if ec_max > 4000:
            recommendations.append(f"Elevated salinity risk (EC up to {ec_max:.0f} µS/cm) - "
                                   f"test water quality before potable use")
        elif ec_max > 2500:
            recommendations.append("Moderate salinity possible - periodic EC testing advised")

        # Yield guidance
        if aquifer.yield_range.maximum >= 2500:
            recommendations.append("High yield potential - rooftop recharge measurably sustains borewells")
        else:
            recommendations.append("Limited yield - combine recharge with rainwater storage")

        if aquifer.notes:
            recommendations.append("Site caveats: " + "; ".join(aquifer.notes))

        return recommendations

"""
Core utility functions for the Jaldhara aquifer platform
"""

import json
import math
import pandas as pd
from pathlib import Path
from typing import Dict, List, Tuple, Any
from dataclasses import dataclass, asdict
from datetime import datetime
import logging

from jaldhara_core.config.settings import INDIA_ENVELOPE

logger = logging.getLogger(__name__)

SEVERITY_LEVELS = ['favorable', 'moderate', 'unfavorable', 'critical']


@dataclass
class AnalysisResult:
    """Standard result container for all analyses"""
    analysis_type: str
    location: Dict[str, float]  # {'latitude': float, 'longitude': float}
    timestamp: str
    confidence_score: float  # 0-1
    severity_level: str  # 'favorable', 'moderate', 'unfavorable', 'critical'
    key_findings: Dict[str, Any]
    recommendations: List[str]
    methodology: str
    data_sources: List[str]

    def to_dict(self) -> Dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str, ensure_ascii=False)

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate result before serialization"""
        errors = []

        if not self.analysis_type:
            errors.append("Missing analysis_type")

        if not self.location or 'latitude' not in self.location or 'longitude' not in self.location:
            errors.append("Missing or invalid location coordinates")

        if not (0 <= self.confidence_score <= 1):
            errors.append(f"Invalid confidence: {self.confidence_score} (must be 0-1)")

        if self.severity_level not in SEVERITY_LEVELS:
            errors.append(f"Invalid severity: {self.severity_level} (must be one of {SEVERITY_LEVELS})")

        if not self.key_findings:
            errors.append("Empty key_findings")

        try:
            datetime.fromisoformat(self.timestamp)
        except ValueError:
            errors.append(f"Invalid timestamp format: {self.timestamp}")

        return (len(errors) == 0, errors)


class DataValidator:
    """Validates user supplied inputs before they reach the models"""

    @staticmethod
    def validate_coordinates(latitude: float, longitude: float,
                             strict: bool = True) -> Tuple[bool, str]:
        """Validate geographic coordinates, optionally against the India envelope"""
        try:
            latitude = float(latitude)
            longitude = float(longitude)
        except (TypeError, ValueError) as e:
            return False, f"Invalid coordinate type: {e}"

        if math.isnan(latitude) or math.isnan(longitude):
            return False, "Coordinates must not be NaN"

        if not (-90 <= latitude <= 90):
            return False, f"Latitude {latitude}° outside global range [-90°, 90°]"

        if not (-180 <= longitude <= 180):
            return False, f"Longitude {longitude}° outside global range [-180°, 180°]"

        if strict:
            if not (INDIA_ENVELOPE['lat_min'] <= latitude <= INDIA_ENVELOPE['lat_max']):
                return False, (f"Latitude {latitude}° outside India bounds "
                               f"[{INDIA_ENVELOPE['lat_min']}°, {INDIA_ENVELOPE['lat_max']}°]")
            if not (INDIA_ENVELOPE['lon_min'] <= longitude <= INDIA_ENVELOPE['lon_max']):
                return False, (f"Longitude {longitude}° outside India bounds "
                               f"[{INDIA_ENVELOPE['lon_min']}°, {INDIA_ENVELOPE['lon_max']}°]")

        return True, "Valid coordinates"


class ReportExporter:
    """Export analysis results"""

    @staticmethod
    def to_json(result: AnalysisResult, output_path: Path) -> None:
        """Export result to JSON"""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(result.to_json())

        logger.info(f"JSON report exported to {output_path}")

    @staticmethod
    def to_csv(data: pd.DataFrame, output_path: Path) -> None:
        """Export DataFrame to CSV"""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        data.to_csv(output_path, index=False)
        logger.info(f"CSV report exported to {output_path}")


def get_timestamp() -> str:
    """Get current timestamp in ISO format"""
    return datetime.now().isoformat()

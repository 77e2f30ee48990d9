"""
TEST FILE: NORTH BOMBAY WELFARE SOCIETY SCHOOL - GHATKOPAR
Principal aquifer analysis for an institutional facility in Ghatkopar, Mumbai
Location: Ghatkopar, Maharashtra (19.0896°N, 72.9250°E)

This location is significant for:
- Coastal alluvium overlapping the western edge of the Deccan basalt
- High-density metropolitan setting inside the Mumbai-Pune industrial corridor
"""

import json

import pytest

from jaldhara_core.models.aquifer_types import AquiferCode
from jaldhara_core.models.principal_aquifer import PrincipalAquiferModel
from jaldhara_core.utils.core import ReportExporter

LATITUDE = 19.0896
LONGITUDE = 72.9250


@pytest.fixture(scope="module")
def model():
    return PrincipalAquiferModel()


def test_north_bombay_welfare_ghatkopar(model):
    """
    Principal aquifer for North Bombay Welfare Society School, Ghatkopar
    Coordinates: 19.0896°N, 72.9250°E (Ghatkopar, Mumbai, Maharashtra)
    """
    result = model.analyze_aquifer(LATITUDE, LONGITUDE)
    findings = result.key_findings

    valid, errors = result.validate()
    assert valid, errors

    assert findings['code'] == AquiferCode.AL.value
    assert findings['type'] == "Western Coastal Alluvium"
    assert findings['matched_zone'] == "Coastal Western Alluvium"
    assert set(findings['candidate_codes']) == {"AL", "BS"}
    assert result.confidence_score == pytest.approx(0.6)

    context = findings['geographic_context']
    assert context['urbanization'] == "Metropolitan"
    assert context['industrial'] is True
    assert context['terrain'] == "Coastal"

    # Metropolitan and industrial EC factors on 500-3500 µS/cm
    assert findings['quality_ec_range'] == "780-5460 µS/cm"
    assert findings['dtw_range'] == "1-20m bgl"
    assert len(findings['notes']) == 2


def test_ghatkopar_recommendations(model):
    result = model.analyze_aquifer(LATITUDE, LONGITUDE)
    recommendations = " ".join(result.recommendations)

    assert "Alluvial aquifer" in recommendations
    assert "salinity" in recommendations
    assert "Site caveats" in recommendations
    assert result.severity_level == 'favorable'


def test_ghatkopar_json_export(model, tmp_path):
    result = model.analyze_aquifer(LATITUDE, LONGITUDE)
    output_path = tmp_path / "ghatkopar" / "principal_aquifer.json"

    ReportExporter.to_json(result, output_path)

    exported = json.loads(output_path.read_text(encoding="utf-8"))
    assert exported['analysis_type'] == 'principal_aquifer'
    assert exported['key_findings']['quality_ec_range'] == "780-5460 µS/cm"


@pytest.mark.parametrize("lat, lon, severity", [
    (13.09, 80.27, 'favorable'),     # Coastal alluvium, yield up to 3000 L/min
    (20.93, 77.75, 'unfavorable'),   # Basalt, yield up to 480 L/min
    (31.10, 77.17, 'unfavorable'),   # Himalayan rock, yield up to 880 L/min
    (22.5, 69.5, 'critical'),        # Desert, yield up to 300 L/min
])
def test_severity_follows_yield(model, lat, lon, severity):
    assert model.analyze_aquifer(lat, lon).severity_level == severity


def test_outside_india_reports_default(model):
    result = model.analyze_aquifer(0.0, 0.0)

    valid, errors = result.validate()
    assert valid, errors
    assert result.key_findings['code'] == "HR"
    assert result.key_findings['match_type'] == "Default"
    assert result.key_findings['fallback_reason'] == "Coordinate outside India envelope"
    assert result.confidence_score == 0.5

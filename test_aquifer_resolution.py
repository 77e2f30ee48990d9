"""
TEST FILE: AQUIFER RESOLUTION ENGINE
End-to-end resolution for reference cities, fallbacks and engine guarantees
"""

import math

import pytest

from jaldhara_core.config.aquifer_catalog import (
    DEFAULT_AQUIFER, DECCAN_BASALT, PRIMARY_CATALOG, build_catalog,
)
from jaldhara_core.models import aquifer_resolution
from jaldhara_core.models.aquifer_resolution import AquiferResolutionEngine, resolve_aquifer
from jaldhara_core.models.aquifer_types import (
    AquiferCode, ConfidenceLabel, Coordinate, MatchType, ZoneCatalog,
)


@pytest.fixture
def engine():
    return AquiferResolutionEngine()


def test_chennai_resolves_to_coastal_alluvium(engine):
    resolution = engine.resolve_detailed(Coordinate(13.09, 80.27))
    aquifer = resolution.descriptor

    assert aquifer.code is AquiferCode.AL
    assert aquifer.confidence is ConfidenceLabel.HIGH
    assert aquifer.formation_type == "Eastern Coastal Alluvium"
    assert resolution.context.coastal_distance_km <= 10
    assert resolution.selected.confidence == pytest.approx(0.72)
    assert str(aquifer.quality_ec_range) == "1248-6240 µS/cm"
    assert "Metropolitan development may impact natural recharge" in aquifer.description


def test_amravati_resolves_to_deccan_basalt(engine):
    resolution = engine.resolve_detailed(Coordinate(20.93, 77.75))
    assert resolution.descriptor.code is AquiferCode.BS
    assert resolution.selected.match_type is MatchType.POLYGON
    assert str(resolution.descriptor.dtw_range) == "7-46m bgl"


def test_shimla_resolves_to_himalayan_rock(engine):
    resolution = engine.resolve_detailed(Coordinate(31.10, 77.17))
    assert resolution.descriptor.code.is_hill
    assert resolution.context.elevation_m > 1000
    assert resolution.selected.match_type is MatchType.GEOLOGICAL
    assert str(resolution.descriptor.yield_range) == "6-880 L/min"


@pytest.mark.parametrize("lat, lon", [
    (30.90, 75.85),   # Ludhiana
    (30.73, 76.78),   # Chandigarh
])
def test_punjab_plain_below_siwalik_front_stays_alluvial(engine, lat, lon):
    resolution = engine.resolve_detailed(Coordinate(lat, lon))

    # Latitude band puts these towns above 1000m, the polygon keeps them on the plain
    assert resolution.context.elevation_m > 1000
    assert resolution.descriptor.code is AquiferCode.AL
    assert resolution.selected.zone_name == "Indo-Gangetic Plains Alluvium"
    assert {c.aquifer.code for c in resolution.candidates} == {AquiferCode.AL, AquiferCode.HR}


def test_siwalik_front_separates_plain_from_hills():
    plains = PRIMARY_CATALOG.find("Indo-Gangetic Plains Alluvium")
    assert plains.exclusions is None
    assert plains.boundary.contains(Coordinate(30.73, 76.78))
    assert not plains.boundary.contains(Coordinate(31.10, 77.17))
    assert resolve_aquifer(Coordinate(31.10, 77.17)).code is AquiferCode.HR


@pytest.mark.parametrize("lat, lon, expected", [
    (28.61, 77.21, AquiferCode.AL),   # Delhi
    (22.57, 88.36, AquiferCode.AL),   # Kolkata
    (19.05, 72.85, AquiferCode.AL),   # Mumbai coast
    (19.15, 72.95, AquiferCode.BS),   # Mumbai inland
])
def test_reference_cities(lat, lon, expected):
    assert resolve_aquifer(Coordinate(lat, lon)).code is expected


def test_origin_resolves_to_default():
    assert resolve_aquifer(Coordinate(0.0, 0.0)) is DEFAULT_AQUIFER


@pytest.mark.parametrize("lat, lon", [
    (5.99, 77.0), (37.01, 77.0), (20.0, 67.99), (20.0, 98.01),
    (-20.0, 77.0), (20.0, -77.0), (90.0, 180.0),
])
def test_outside_envelope_resolves_to_default(engine, lat, lon):
    resolution = engine.resolve_detailed(Coordinate(lat, lon))
    assert resolution.descriptor is DEFAULT_AQUIFER
    assert resolution.is_default
    assert resolution.context is None
    assert resolution.fallback_reason == "Coordinate outside India envelope"


@pytest.mark.parametrize("coordinate", [
    Coordinate(float('nan'), 77.0),
    Coordinate(20.0, float('inf')),
    Coordinate("13.09", "80.27"),
    Coordinate(None, None),
    None,
])
def test_malformed_input_resolves_to_default(engine, coordinate):
    assert engine.resolve(coordinate) is DEFAULT_AQUIFER


def test_envelope_edges_are_inside(engine):
    assert not engine.resolve_detailed(Coordinate(6.0, 68.0)).fallback_reason
    assert not engine.resolve_detailed(Coordinate(37.0, 98.0)).fallback_reason


def test_internal_fault_resolves_to_default(engine, monkeypatch):
    def broken_context(coordinate):
        raise RuntimeError("reference table corrupted")

    monkeypatch.setattr(aquifer_resolution, 'build_context', broken_context)
    resolution = engine.resolve_detailed(Coordinate(13.09, 80.27))

    assert resolution.descriptor is DEFAULT_AQUIFER
    assert resolution.fallback_reason == "Internal computation fault"


def test_grid_over_envelope_never_raises(engine):
    for lat in range(0, 41, 2):
        for lon in range(64, 101, 2):
            aquifer = engine.resolve(Coordinate(float(lat), float(lon)))
            assert aquifer.code in AquiferCode


def test_resolution_is_deterministic(engine):
    for coordinate in (Coordinate(13.09, 80.27), Coordinate(25.57, 91.88), Coordinate(9.93, 76.27)):
        assert engine.resolve(coordinate) == engine.resolve(coordinate)
        assert resolve_aquifer(coordinate) == engine.resolve(coordinate)


@pytest.mark.parametrize("lat, lon", [
    (13.09, 80.27), (20.93, 77.75), (31.10, 77.17), (26.91, 70.91),
    (22.57, 88.36), (17.69, 83.22), (12.97, 77.59), (19.0896, 72.9250),
])
def test_adjusted_ranges_are_at_least_catalog_ranges(engine, lat, lon):
    resolution = engine.resolve_detailed(Coordinate(lat, lon))
    catalog, adjusted = resolution.selected.aquifer, resolution.descriptor

    for name in ('quality_ec_range', 'dtw_range', 'yield_range'):
        assert getattr(adjusted, name).minimum >= getattr(catalog, name).minimum
        assert getattr(adjusted, name).maximum >= getattr(catalog, name).maximum


def test_kutch_without_zone_uses_desert_proximity(engine):
    resolution = engine.resolve_detailed(Coordinate(22.5, 69.5))
    assert resolution.selected.match_type is MatchType.PROXIMITY
    assert resolution.descriptor.code is AquiferCode.DS
    assert resolution.selected.confidence == 0.6


def test_custom_catalog_engine():
    catalog = build_catalog("Single Zone", [
        {'name': "Everywhere Basalt", 'priority': 1, 'aquifer': DECCAN_BASALT,
         'rectangle': {'lat_min': 6.0, 'lat_max': 37.0, 'lon_min': 68.0, 'lon_max': 98.0}},
    ])
    engine = AquiferResolutionEngine(primary_catalog=catalog,
                                     special_catalog=ZoneCatalog("Empty", []))

    resolution = engine.resolve_detailed(Coordinate(28.61, 77.21))
    assert resolution.descriptor.code is AquiferCode.BS
    assert resolution.selected.zone_name == "Everywhere Basalt"
    assert len(resolution.candidates) == 1


def test_empty_catalogs_fall_back_to_proximity():
    engine = AquiferResolutionEngine(primary_catalog=ZoneCatalog("Empty", []),
                                     special_catalog=ZoneCatalog("Empty", []))
    resolution = engine.resolve_detailed(Coordinate(31.10, 77.17))
    assert resolution.selected.match_type is MatchType.PROXIMITY
    assert resolution.descriptor.code is AquiferCode.HR


def test_resolution_to_dict_is_presentable(engine):
    rendered = engine.resolve_detailed(Coordinate(13.09, 80.27)).to_dict()
    assert rendered['aquifer']['code'] == "AL"
    assert rendered['zone'] == "Coastal Eastern Alluvium"
    assert rendered['context']['urbanization'] == "Metropolitan"
    assert {c['code'] for c in rendered['candidates']} == {"AL", "BG"}
    assert rendered['fallback_reason'] is None
    assert not math.isnan(rendered['match_confidence'])


def test_catalog_is_shared_and_unchanged_after_resolution(engine):
    before = [zone.aquifer for zone in PRIMARY_CATALOG]
    engine.resolve(Coordinate(13.09, 80.27))
    engine.resolve(Coordinate(20.93, 77.75))
    assert [zone.aquifer for zone in PRIMARY_CATALOG] == before

"""
TEST FILE: DYNAMIC ADJUSTMENTS
Context caveats and compounding range multipliers
"""

import pytest

from jaldhara_core.config.aquifer_catalog import (
    DECCAN_BASALT, EASTERN_COASTAL_ALLUVIUM, HIMALAYAN_ROCK, build_descriptor,
)
from jaldhara_core.models.aquifer_types import (
    ClimateClass, GeographicContext, TerrainClass, UrbanizationLevel,
)
from jaldhara_core.models.dynamic_adjuster import adjust


def make_context(**overrides):
    values = dict(
        elevation_m=300.0,
        climate=ClimateClass.SUB_HUMID,
        terrain=TerrainClass.PLAINS,
        urbanization=UrbanizationLevel.RURAL,
        industrial=False,
        coastal_distance_km=100.0,
        nearest_city=None,
    )
    values.update(overrides)
    return GeographicContext(**values)


BASALT = build_descriptor(DECCAN_BASALT)


def test_neutral_context_returns_catalog_descriptor():
    assert adjust(BASALT, make_context()) is BASALT


def test_coastal_salinity_for_hard_rock():
    adjusted = adjust(BASALT, make_context(coastal_distance_km=20.4))

    assert adjusted.quality_ec_range.minimum == pytest.approx(750)
    assert adjusted.quality_ec_range.maximum == pytest.approx(7500)
    assert adjusted.notes == (
        "Proximity to coast (~20km) may affect water quality due to saltwater intrusion",
    )
    assert adjusted.description == (
        "Volcanic rock formations with moderate groundwater potential in weathered zones "
        "and fractures. Dominant aquifer of Deccan Plateau. Proximity to coast (~20km) may "
        "affect water quality due to saltwater intrusion."
    )


def test_alluvium_has_no_salinity_caveat():
    alluvium = build_descriptor(EASTERN_COASTAL_ALLUVIUM)
    assert adjust(alluvium, make_context(coastal_distance_km=3.0)) is alluvium


def test_ec_multipliers_compound_in_order():
    context = make_context(urbanization=UrbanizationLevel.METROPOLITAN, industrial=True,
                           coastal_distance_km=30.0)
    adjusted = adjust(BASALT, context)

    assert adjusted.quality_ec_range.minimum == pytest.approx(500 * 1.2 * 1.3 * 1.5)
    assert adjusted.quality_ec_range.maximum == pytest.approx(5000 * 1.2 * 1.3 * 1.5)
    assert str(adjusted.quality_ec_range) == "1170-11700 µS/cm"
    assert adjusted.notes[0] == ("Metropolitan development may impact natural recharge "
                                 "and groundwater quality")
    assert adjusted.notes[1] == "Industrial activities in the region may affect groundwater quality"
    assert adjusted.notes[2].startswith("Proximity to coast (~30km)")


def test_urban_tier_adds_caveat_without_ec_change():
    adjusted = adjust(BASALT, make_context(urbanization=UrbanizationLevel.URBAN))
    assert adjusted.quality_ec_range == BASALT.quality_ec_range
    assert adjusted.notes == ("Urban development may impact natural recharge and groundwater quality",)


@pytest.mark.parametrize("climate", [ClimateClass.ARID, ClimateClass.SEMI_ARID])
def test_dry_climate_deepens_water_table(climate):
    adjusted = adjust(BASALT, make_context(climate=climate))
    assert adjusted.dtw_range.minimum == pytest.approx(6.5)
    assert adjusted.dtw_range.maximum == pytest.approx(45.5)
    assert str(adjusted.dtw_range) == "7-46m bgl"
    assert adjusted.notes == (f"{climate.value} climate conditions may limit natural recharge",)


def test_high_elevation_improves_yield():
    himalayan = build_descriptor(HIMALAYAN_ROCK)
    adjusted = adjust(himalayan, make_context(elevation_m=2000.0))
    assert str(adjusted.yield_range) == "6-880 L/min"
    assert adjusted.notes == ("High elevation location with enhanced recharge potential",)


def test_elevation_at_threshold_is_not_adjusted():
    assert adjust(BASALT, make_context(elevation_m=1500.0)) is BASALT


def test_input_descriptor_is_untouched():
    before = build_descriptor(DECCAN_BASALT)
    adjust(BASALT, make_context(urbanization=UrbanizationLevel.METROPOLITAN, industrial=True,
                                climate=ClimateClass.ARID, elevation_m=2000.0,
                                coastal_distance_km=10.0))
    assert BASALT == before


def test_adjusted_ranges_never_narrow():
    context = make_context(urbanization=UrbanizationLevel.METROPOLITAN, industrial=True,
                           climate=ClimateClass.ARID, elevation_m=2000.0,
                           coastal_distance_km=10.0)
    adjusted = adjust(BASALT, context)
    for name in ('quality_ec_range', 'dtw_range', 'yield_range'):
        original, widened = getattr(BASALT, name), getattr(adjusted, name)
        assert widened.minimum >= original.minimum
        assert widened.maximum >= original.maximum

"""
DYNAMIC ADJUSTER
Tailors a catalog aquifer descriptor to the local context

Urban, industrial and coastal pressures raise the expected EC range; dry
climates deepen the water table; high elevation improves yield. Factors
compound on the structured ranges and are only rounded when rendered.
"""

import dataclasses
import logging

from jaldhara_core.config.settings import (
    COASTAL_SALINITY_DISTANCE_KM, COASTAL_SALINITY_EC_FACTOR, DRY_CLIMATE_DTW_FACTOR,
    HIGH_ELEVATION_RECHARGE_M, HIGH_ELEVATION_YIELD_FACTOR, INDUSTRIAL_EC_FACTOR,
    METROPOLITAN_EC_FACTOR,
)
from jaldhara_core.models.aquifer_types import (
    AquiferDescriptor, ClimateClass, GeographicContext, UrbanizationLevel,
)

logger = logging.getLogger(__name__)


def adjust(descriptor: AquiferDescriptor, context: GeographicContext) -> AquiferDescriptor:
    """Return a context-adjusted copy of descriptor; the input is never modified"""
    notes = []
    ec_range = descriptor.quality_ec_range
    dtw_range = descriptor.dtw_range
    yield_range = descriptor.yield_range

    if context.urbanization is not UrbanizationLevel.RURAL:
        notes.append(f"{context.urbanization.value} development may impact natural recharge "
                     f"and groundwater quality")
        if context.urbanization is UrbanizationLevel.METROPOLITAN:
            ec_range = ec_range.scaled(METROPOLITAN_EC_FACTOR)

    if context.industrial:
        notes.append("Industrial activities in the region may affect groundwater quality")
        ec_range = ec_range.scaled(INDUSTRIAL_EC_FACTOR)

    if (context.coastal_distance_km < COASTAL_SALINITY_DISTANCE_KM and
            not descriptor.code.is_alluvial):
        notes.append(f"Proximity to coast (~{round(context.coastal_distance_km)}km) may affect "
                     f"water quality due to saltwater intrusion")
        ec_range = ec_range.scaled(COASTAL_SALINITY_EC_FACTOR)

    if context.climate in (ClimateClass.ARID, ClimateClass.SEMI_ARID):
        notes.append(f"{context.climate.value} climate conditions may limit natural recharge")
        dtw_range = dtw_range.scaled(DRY_CLIMATE_DTW_FACTOR)

    if context.elevation_m > HIGH_ELEVATION_RECHARGE_M:
        notes.append("High elevation location with enhanced recharge potential")
        yield_range = yield_range.scaled(HIGH_ELEVATION_YIELD_FACTOR)

    if not notes:
        return descriptor

    logger.debug(f"Applied {len(notes)} contextual adjustments to {descriptor.code.value}")
    return dataclasses.replace(
        descriptor,
        description=f"{descriptor.description.rstrip('.')}. {'. '.join(notes)}.",
        quality_ec_range=ec_range,
        dtw_range=dtw_range,
        yield_range=yield_range,
        notes=descriptor.notes + tuple(notes),
    )

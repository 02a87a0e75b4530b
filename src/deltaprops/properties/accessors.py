"""
Typed reads of a resolved table property map.

The map is expected to have been resolved against DeltaLakeTableProperties, so
every value already has its declared type. None of these functions modify it.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

from deltaprops.const import TableProperty
from deltaprops.exceptions import InvalidPropertyValue


def get_location(table_properties: Mapping[str, Any]) -> Optional[str]:
    return table_properties.get(TableProperty.LOCATION)


def get_partitioned_by(table_properties: Mapping[str, Any]) -> List[str]:
    partitioned_by = table_properties.get(TableProperty.PARTITIONED_BY)
    return [] if partitioned_by is None else list(partitioned_by)


def get_checkpoint_interval(table_properties: Mapping[str, Any]) -> Optional[int]:
    """Returns the checkpoint interval, if set.

    The value is checked here rather than when the table is created, so the
    error surfaces where the interval is actually used.
    """
    checkpoint_interval = table_properties.get(TableProperty.CHECKPOINT_INTERVAL)
    if checkpoint_interval is not None and checkpoint_interval <= 0:
        raise InvalidPropertyValue(
            TableProperty.CHECKPOINT_INTERVAL,
            f"{TableProperty.CHECKPOINT_INTERVAL} must be greater than 0",
        )
    return checkpoint_interval


def get_analyze_columns(table_properties: Mapping[str, Any]) -> Optional[Set[str]]:
    return table_properties.get(TableProperty.ANALYZE_COLUMNS)


def with_analyze_columns(
    table_properties: Mapping[str, Any], columns: Iterable[str]
) -> Dict[str, Any]:
    """Copy of the map that also carries the columns to analyze.

    Used to hand the analysis scope from one planning phase to the next
    within the same statement.
    """
    result = dict(table_properties)
    result[TableProperty.ANALYZE_COLUMNS] = set(columns)
    return result

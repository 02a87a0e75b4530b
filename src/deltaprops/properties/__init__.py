from .property_definition import (
    PropertyDefinition,
    long_property,
    string_list_property,
    string_property,
)
from .table_properties import DeltaLakeTableProperties
from .accessors import (
    get_analyze_columns,
    get_checkpoint_interval,
    get_location,
    get_partitioned_by,
    with_analyze_columns,
)

__all__ = [
    "PropertyDefinition",
    "long_property",
    "string_list_property",
    "string_property",
    "DeltaLakeTableProperties",
    "get_analyze_columns",
    "get_checkpoint_interval",
    "get_location",
    "get_partitioned_by",
    "with_analyze_columns",
]

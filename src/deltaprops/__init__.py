"""
Table properties of the Delta Lake connector: the schema of recognized
properties and typed accessors over a resolved property map.
"""

from deltaprops.const import INVALID_TABLE_PROPERTY, TableProperty  # noqa: F401
from deltaprops.exceptions import (  # noqa: F401
    DeltaPropsException,
    InvalidPropertyValue,
    TablePropertyException,
    TablePropertyTypeError,
    UnknownTableId,
    UnknownTableProperty,
)
from deltaprops.properties import (  # noqa: F401
    DeltaLakeTableProperties,
    PropertyDefinition,
    get_analyze_columns,
    get_checkpoint_interval,
    get_location,
    get_partitioned_by,
    with_analyze_columns,
)
from deltaprops.configurator import Configurator  # noqa: F401
from deltaprops.resolver import PropertyResolver  # noqa: F401

from .version import __version__  # noqa: F401

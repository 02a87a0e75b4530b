from typing import Tuple

from deltaprops.const import TableProperty
from deltaprops.exceptions import DeltaPropsException, UnknownTableProperty
from deltaprops.properties.property_definition import (
    PropertyDefinition,
    long_property,
    lower_case_all,
    string_list_property,
    string_property,
)


class DeltaLakeTableProperties:
    """
    The set of properties a Delta Lake table can be created with.

    An instance is built once per connector and only read afterwards, so it can
    be shared between planning threads without locking. Building it twice gives
    two instances that compare equal.
    """

    def __init__(self):
        self._table_properties: Tuple[PropertyDefinition, ...] = (
            string_property(
                TableProperty.LOCATION,
                "File system location URI for external table",
            ),
            string_list_property(
                TableProperty.PARTITIONED_BY,
                "Partition columns",
                default=[],
                normalize=lower_case_all,
            ),
            long_property(
                TableProperty.CHECKPOINT_INTERVAL,
                "Checkpoint interval",
            ),
            # TODO: drop once the statistics collection entry point receives the
            #  table handle, which already knows the columns to be analyzed
            string_list_property(
                TableProperty.ANALYZE_COLUMNS,
                "Columns to be analyzed",
                hidden=True,
                python_type=set,
            ),
        )

        names = [definition.name for definition in self._table_properties]
        if len(set(names)) != len(names):
            raise DeltaPropsException(f"Duplicate table property in {names}")
        self._by_name = {
            definition.name: definition for definition in self._table_properties
        }

    def __eq__(self, other):
        if not isinstance(other, DeltaLakeTableProperties):
            return NotImplemented
        return self._table_properties == other._table_properties

    def __hash__(self):
        return hash(self._table_properties)

    def get_table_properties(self) -> Tuple[PropertyDefinition, ...]:
        return self._table_properties

    def get_visible_table_properties(self) -> Tuple[PropertyDefinition, ...]:
        """The properties users may see, e.g. in SHOW CREATE TABLE."""
        return tuple(
            definition for definition in self._table_properties if not definition.hidden
        )

    def get_property(self, name: str) -> PropertyDefinition:
        if name not in self._by_name:
            raise UnknownTableProperty(name, f"Unknown table property: {name}")
        return self._by_name[name]

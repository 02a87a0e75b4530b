import copy
import logging
from typing import Any, Dict, Mapping

from deltaprops.configurator import Configurator
from deltaprops.properties import DeltaLakeTableProperties, PropertyDefinition

logger = logging.getLogger(__name__)


class PropertyResolver:
    """
    Turns user supplied table properties into a resolved property map:
    names are checked against the schema, values are coerced to their declared
    type and normalized, and every omitted property receives its default.

    No value validation happens here. Range checks such as a positive
    checkpoint interval are done by the accessors when the value is read.
    """

    def __init__(self, schema: DeltaLakeTableProperties = None):
        self._schema = schema or DeltaLakeTableProperties()

    def resolve(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        given = {}
        for name, value in raw.items():
            definition = self._schema.get_property(name)
            if value is None:
                continue
            given[definition.name] = definition.decode(value)

        resolved = {}
        defaulted = []
        for definition in self._schema.get_table_properties():
            if definition.name in given:
                resolved[definition.name] = given[definition.name]
            else:
                resolved[definition.name] = copy.copy(definition.default)
                defaulted.append(definition.name)

        logger.debug(
            "resolved table properties %s, defaulted %s", sorted(given), defaulted
        )
        return resolved

    def resolve_tc(self, table_id: str) -> Dict[str, Any]:
        """Resolve the raw properties registered for table_id in the Configurator."""
        return self.resolve(Configurator().get_table_properties(table_id))

    def render_with_clause(self, table_properties: Mapping[str, Any]) -> str:
        """Render the WITH clause of a SHOW CREATE TABLE statement.

        Hidden properties and properties without a value are left out.
        Returns an empty string if nothing remains.
        """
        entries = []
        for definition in self._schema.get_visible_table_properties():
            value = table_properties.get(definition.name)
            if value is None or value == []:
                continue
            entries.append(f"   {definition.name} = {_literal(definition, value)}")

        if not entries:
            return ""
        return "WITH (\n" + ",\n".join(entries) + "\n)"


def _literal(definition: PropertyDefinition, value: Any) -> str:
    if definition.data_type.simpleString() == "bigint":
        return str(value)
    if definition.data_type.simpleString() == "array<string>":
        return "ARRAY[" + ",".join(_quote(element) for element in value) + "]"
    return _quote(value)


def _quote(value: str) -> str:
    escaped = value.replace("'", "''")
    return f"'{escaped}'"

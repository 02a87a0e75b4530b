import logging
from typing import Any, Dict

from deltaprops.exceptions import UnknownTableId
from deltaprops.singleton import Singleton

logger = logging.getLogger(__name__)


class Configurator(metaclass=Singleton):
    """
    Central place to declare the raw table properties of each table in a project.
    Tables are registered under an id, e.g.

        Configurator().register("MyTbl", {"partitioned_by": ["Year", "Month"]})

    and later resolved with PropertyResolver.from_tc("MyTbl").
    """

    def __init__(self):
        self._tables: Dict[str, Dict[str, Any]] = {}

    def register(self, table_id: str, properties: Dict[str, Any]) -> None:
        logger.debug("registering table %s with %s", table_id, sorted(properties))
        self._tables[table_id] = dict(properties)

    def get_table_properties(self, table_id: str) -> Dict[str, Any]:
        if table_id not in self._tables:
            raise UnknownTableId(f"No table registered with id {table_id}")
        return dict(self._tables[table_id])

    def table_property(self, table_id: str, name: str, default: Any = None) -> Any:
        return self.get_table_properties(table_id).get(name, default)

    def clear_all_configurations(self) -> None:
        self._tables = {}

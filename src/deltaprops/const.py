from enum import StrEnum


class TableProperty(StrEnum):
    LOCATION = "location"
    PARTITIONED_BY = "partitioned_by"
    CHECKPOINT_INTERVAL = "checkpoint_interval"
    # Internal. Carries the columns selected by ANALYZE from one planning phase
    # to the next; never shown to users and never persisted.
    ANALYZE_COLUMNS = "$trino.analyze_columns"


INVALID_TABLE_PROPERTY = "INVALID_TABLE_PROPERTY"

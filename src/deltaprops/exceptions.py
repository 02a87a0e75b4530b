from deltaprops.const import INVALID_TABLE_PROPERTY


class DeltaPropsException(Exception):
    pass


class TablePropertyException(DeltaPropsException):
    """Base for every error reported against a single table property.

    The error code is the one the host engine reports for invalid table
    properties, so callers can map all of these to the same error channel.
    """

    def __init__(self, property_name: str, message: str):
        super().__init__(message)
        self.property_name = property_name
        self.error_code = INVALID_TABLE_PROPERTY


class InvalidPropertyValue(TablePropertyException):
    pass


class UnknownTableProperty(TablePropertyException):
    pass


class TablePropertyTypeError(TablePropertyException):
    pass


class UnknownTableId(DeltaPropsException, KeyError):
    pass

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from pyspark.sql.types import ArrayType, DataType, LongType, StringType

from deltaprops.exceptions import TablePropertyTypeError


@dataclass(frozen=True)
class PropertyDefinition:
    """One recognized table property.

    Attributes:
    ----------
        name : str
            Key of the property in a resolved property map
        description : str
            Human readable documentation
        data_type : DataType
            Semantic type: StringType, LongType or ArrayType(StringType)
        python_type : type
            Class of the value held by a resolved map (str, int, list or set)
        default : Any
            Value used when the property is not given, None means absent
        hidden : bool
            Internal property, excluded from anything shown to users
        normalize : Callable
            Applied once to an accepted user value
    """

    name: str
    description: str
    data_type: DataType
    python_type: type
    default: Any = field(default=None, hash=False)
    hidden: bool = False
    normalize: Optional[Callable[[Any], Any]] = None

    def decode(self, value: Any) -> Any:
        """Coerce a raw user value to the declared type and normalize it."""
        value = self._coerce(value)
        if self.normalize is not None:
            value = self.normalize(value)
        return value

    def _coerce(self, value: Any) -> Any:
        if isinstance(self.data_type, ArrayType):
            if isinstance(value, (str, bytes)) or not isinstance(
                value, (list, tuple, set, frozenset)
            ):
                raise self._type_error(value)
            for element in value:
                if not isinstance(element, str):
                    raise self._type_error(value)
            return self.python_type(value)

        # bool is an int subclass but never a valid bigint
        if isinstance(value, bool) or not isinstance(value, self.python_type):
            raise self._type_error(value)
        return value

    def _type_error(self, value: Any) -> TablePropertyTypeError:
        return TablePropertyTypeError(
            self.name,
            f"{self.name} requires a value of type "
            f"{self.data_type.simpleString()}, got {value!r}",
        )


def lower_case_all(names):
    # str.lower is locale independent, unlike Java's default toLowerCase
    return [name.lower() for name in names]


def string_property(
    name: str, description: str, default: Optional[str] = None, hidden: bool = False
) -> PropertyDefinition:
    return PropertyDefinition(name, description, StringType(), str, default, hidden)


def long_property(
    name: str, description: str, default: Optional[int] = None, hidden: bool = False
) -> PropertyDefinition:
    return PropertyDefinition(name, description, LongType(), int, default, hidden)


def string_list_property(
    name: str,
    description: str,
    default: Any = None,
    hidden: bool = False,
    normalize: Optional[Callable[[Any], Any]] = None,
    python_type: type = list,
) -> PropertyDefinition:
    return PropertyDefinition(
        name,
        description,
        ArrayType(StringType()),
        python_type,
        default,
        hidden,
        normalize,
    )

"""Property storage types and the recognized value-type names for ordered properties."""

from enum import Enum


class InvalidArgumentError(ValueError):
    """Raised when a value-type name is not one of the recognized names."""


class PropertyType(str, Enum):
    """Storage type of a node property."""

    STRING = "String"
    STRINGS = "Strings"
    BOOLEAN = "Boolean"
    LONG = "Long"
    NAME = "Name"

    @property
    def is_array(self) -> bool:
        return self is PropertyType.STRINGS


class ValueType(str, Enum):
    """
    Value-type names accepted by ordered property rules. Names are case sensitive
    and match the repository's scalar property types.
    """

    STRING = "String"
    BINARY = "Binary"
    LONG = "Long"
    DOUBLE = "Double"
    DATE = "Date"
    BOOLEAN = "Boolean"
    NAME = "Name"
    PATH = "Path"
    REFERENCE = "Reference"
    WEAK_REFERENCE = "WeakReference"
    URI = "URI"
    DECIMAL = "Decimal"
    UNDEFINED = "undefined"

    @classmethod
    def from_name(cls, name: str) -> "ValueType":
        """Return the ValueType for name. Raises InvalidArgumentError if unknown."""
        try:
            return cls(name)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown value type name: {name!r}. Expected one of: {', '.join(cls.names())}"
            ) from None

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]

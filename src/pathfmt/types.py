from typing import Any, Final, NewType, TypeAlias

#: The attrs metadata key associating a field with a template variable.
PATH_TAG: Final = "path"

#: A parsed path, split on slashes.
PathTokens: TypeAlias = list[str]

Int8 = NewType("Int8", int)
Int16 = NewType("Int16", int)
Int32 = NewType("Int32", int)
Int64 = NewType("Int64", int)

UInt8 = NewType("UInt8", int)
UInt16 = NewType("UInt16", int)
UInt32 = NewType("UInt32", int)
UInt64 = NewType("UInt64", int)
#: A pointer-sized unsigned integer.
UIntPtr = NewType("UIntPtr", int)

#: A float rounded to single precision.
Float32 = NewType("Float32", float)

#: Inclusive bounds for the fixed-width integers.
INT_BOUNDS: Final[dict[Any, tuple[int, int]]] = {
    Int8: (-(2**7), 2**7 - 1),
    Int16: (-(2**15), 2**15 - 1),
    Int32: (-(2**31), 2**31 - 1),
    Int64: (-(2**63), 2**63 - 1),
}
UINT_BOUNDS: Final[dict[Any, tuple[int, int]]] = {
    UInt8: (0, 2**8 - 1),
    UInt16: (0, 2**16 - 1),
    UInt32: (0, 2**32 - 1),
    UInt64: (0, 2**64 - 1),
    UIntPtr: (0, 2**64 - 1),
}

#: Field types a path value can be coerced into. Everything else is skipped.
SUPPORTED_TYPES: Final = frozenset(
    {bool, int, float, str, Float32, *INT_BOUNDS, *UINT_BOUNDS}
)


def type_name(type: Any) -> str:
    return getattr(type, "__name__", repr(type))

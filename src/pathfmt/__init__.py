from .binding import PathVar, bind_mapping, path_field
from .converters import make_converter
from .errors import (
    FieldNotFoundError,
    InaccessibleTaggedFieldError,
    InvalidTargetError,
    MismatchError,
    PathFmtError,
    TemplateError,
    TypeCoercionFailedError,
)
from .path import Segment, Static, Template, Variable, compile_template
from .types import (
    Float32,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UIntPtr,
)

__all__ = [
    "bind_mapping",
    "compile_template",
    "FieldNotFoundError",
    "Float32",
    "InaccessibleTaggedFieldError",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidTargetError",
    "make_converter",
    "MismatchError",
    "path_field",
    "PathFmtError",
    "PathVar",
    "Segment",
    "Static",
    "Template",
    "TemplateError",
    "TypeCoercionFailedError",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UIntPtr",
    "Variable",
]

"""Wire codec: the engine's ValidationResult / ValidationError protobuf schema.

Only the fields this layer reads are declared. Enum fields are declared as
int32, which is wire-identical to a protobuf enum, so numbers outside the
local enum tables still decode and are resolved (or not) by the EnumCodecs.
Fields the schema does not declare are kept as unknown fields and survive
re-serialization untouched.
"""

import base64
from typing import Union

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "amp.validator"

_Field = descriptor_pb2.FieldDescriptorProto


def _add_field(message, name: str, number: int, field_type: int, label: int = _Field.LABEL_OPTIONAL, **extra) -> None:
    message.field.add(name=name, number=number, type=field_type, label=label, **extra)


def _build_schema() -> descriptor_pb2.FileDescriptorProto:
    schema = descriptor_pb2.FileDescriptorProto(
        name="amp_validator/validation_result.proto",
        package=PACKAGE,
        syntax="proto2",
    )

    error = schema.message_type.add(name="ValidationError")
    _add_field(error, "code", 1, _Field.TYPE_INT32, default_value="0")
    _add_field(error, "line", 2, _Field.TYPE_INT32, default_value="1")
    _add_field(error, "col", 3, _Field.TYPE_INT32, default_value="0")
    _add_field(error, "params", 4, _Field.TYPE_STRING, label=_Field.LABEL_REPEATED)
    _add_field(error, "spec_url", 5, _Field.TYPE_STRING)
    _add_field(error, "severity", 6, _Field.TYPE_INT32, default_value="1")

    result = schema.message_type.add(name="ValidationResult")
    _add_field(result, "status", 1, _Field.TYPE_INT32, default_value="0")
    _add_field(
        result, "errors", 2, _Field.TYPE_MESSAGE,
        label=_Field.LABEL_REPEATED,
        type_name=f".{PACKAGE}.ValidationError",
    )
    return schema


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_schema().SerializeToString())

WireValidationError = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{PACKAGE}.ValidationError")
)
WireValidationResult = message_factory.GetMessageClass(
    _pool.FindMessageTypeByName(f"{PACKAGE}.ValidationResult")
)


def coerce_wire_bytes(payload: Union[bytes, bytearray, str]) -> bytes:
    """Normalize an engine payload to raw bytes.

    Engines built for text-only call interfaces hand back base64 strings.
    """
    if isinstance(payload, str):
        return base64.b64decode(payload)
    return bytes(payload)


def decode_result(payload: bytes) -> "WireValidationResult":
    """Parse raw bytes into a wire ValidationResult message."""
    message = WireValidationResult()
    message.ParseFromString(payload)
    return message


def decode_error(payload: bytes) -> "WireValidationError":
    """Parse raw bytes into a wire ValidationError message."""
    message = WireValidationError()
    message.ParseFromString(payload)
    return message


def encode(message) -> bytes:
    """Serialize a wire message to bytes."""
    return message.SerializeToString()

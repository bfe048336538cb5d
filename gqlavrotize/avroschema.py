"""
Avro schema nodes produced by the GraphQL converter.

The set of node kinds is closed: a schema is a primitive, a record, an array,
a union or a logical type. Every node serializes to the plain JSON structure
Avro expects; optional attributes are left out of the JSON when they are not
set.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

JsonNode = Dict[str, 'JsonNode'] | List['JsonNode'] | str | bool | int | float | None


class PrimitiveType(str, Enum):
    """Avro primitive types."""
    NULL = 'null'
    BOOLEAN = 'boolean'
    INT = 'int'
    LONG = 'long'
    FLOAT = 'float'
    DOUBLE = 'double'
    BYTES = 'bytes'
    STRING = 'string'

    def to_json(self) -> JsonNode:
        return self.value


@dataclass
class FieldDefinition:
    """A field of an Avro record."""
    name: str
    type: 'AvroSchema'
    has_default: bool = False
    default: JsonNode = None

    def to_json(self) -> JsonNode:
        avro_field: Dict[str, JsonNode] = {
            'name': self.name,
            'type': schema_to_json(self.type)
        }
        if self.has_default:
            avro_field['default'] = self.default
        return avro_field


@dataclass
class RecordDefinition:
    """An Avro record. A namespace of None is omitted, an empty one is kept."""
    name: str
    namespace: Optional[str] = None
    fields: List[FieldDefinition] = field(default_factory=list)

    def to_json(self) -> JsonNode:
        record: Dict[str, JsonNode] = {
            'type': 'record',
            'name': self.name
        }
        if self.namespace is not None:
            record['namespace'] = self.namespace
        record['fields'] = [avro_field.to_json() for avro_field in self.fields]
        return record


@dataclass
class ArrayType:
    """
    An Avro array.

    `name` is not part of the Avro grammar for arrays. It carries the item
    name taken from the GraphQL `@item` directive for consumers that read it.
    """
    items: 'AvroSchema'
    name: Optional[str] = None

    def to_json(self) -> JsonNode:
        array: Dict[str, JsonNode] = {
            'type': 'array',
            'items': schema_to_json(self.items)
        }
        if self.name is not None:
            array['name'] = self.name
        return array


@dataclass
class UnionType:
    """An Avro union, serialized as a bare JSON array."""
    variants: List['AvroSchema'] = field(default_factory=list)

    def to_json(self) -> JsonNode:
        return [schema_to_json(variant) for variant in self.variants]


@dataclass
class LogicalType:
    """An Avro primitive annotated with a logical type."""
    type: str
    logical_type: str
    scale: Optional[int] = None
    precision: Optional[int] = None

    @classmethod
    def uuid(cls) -> 'LogicalType':
        return cls(PrimitiveType.STRING.value, 'uuid')

    def to_json(self) -> JsonNode:
        logical: Dict[str, JsonNode] = {
            'type': self.type,
            'logicalType': self.logical_type
        }
        if self.scale is not None:
            logical['scale'] = self.scale
        if self.precision is not None:
            logical['precision'] = self.precision
        return logical


AvroSchema = Union[PrimitiveType, RecordDefinition, ArrayType, UnionType, LogicalType]

SCHEMA_NODE_TYPES = (PrimitiveType, RecordDefinition, ArrayType, UnionType, LogicalType)


def nullable(avro_schema: AvroSchema) -> UnionType:
    """Wrap a schema into a union with null, null first."""
    return UnionType([PrimitiveType.NULL, avro_schema])


def schema_to_json(avro_schema: AvroSchema) -> JsonNode:
    """
    Convert a schema node into its JSON representation.

    Args:
        avro_schema: One of the five schema node kinds.

    Returns:
        The JSON value (str, dict or list) for the node.

    Raises:
        TypeError: If the value is not a schema node.
    """
    if not isinstance(avro_schema, SCHEMA_NODE_TYPES):
        raise TypeError(f"Not an Avro schema node: {avro_schema!r}")
    return avro_schema.to_json()


def schema_to_json_text(avro_schema: AvroSchema, indent: int | None = 2) -> str:
    """Render a schema node as JSON text."""
    return json.dumps(schema_to_json(avro_schema), indent=indent)

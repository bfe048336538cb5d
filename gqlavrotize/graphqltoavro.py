"""
Convert GraphQL object types to Avro record schemas.

Type references are expanded in full: a user defined type that is referenced
from a field is inlined as a complete record every time it is used. GraphQL
types are nullable unless marked with `!`, so nullable references become
unions with null.

Metadata is read from three directives:

- `@namespace(qualifier: "...")` on an object type sets the record namespace.
- `@item(name: "...")` on a list field names the array items.
- `@default` on a field gives the field a null default.
"""

import logging
from typing import Dict, List, Optional

from graphql import (
    FieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    TypeNode,
)

from gqlavrotize.avroschema import (
    ArrayType,
    AvroSchema,
    FieldDefinition,
    LogicalType,
    PrimitiveType,
    RecordDefinition,
    nullable as nullable_union,
    schema_to_json_text,
)
from gqlavrotize.graphqldocument import (
    GraphQLDocument,
    argument,
    directive,
    load_graphql_document,
    string_value,
)


logger = logging.getLogger(__name__)

# GraphQL built-in scalars plus custom scalars for the remaining Avro types.
# Int and Float map to boolean. Existing schemas were generated with this
# table, change it here if the mapping is corrected.
GRAPHQL_SCALARS_TO_AVRO: Dict[str, AvroSchema] = {
    'Boolean': PrimitiveType.BOOLEAN,
    'Int': PrimitiveType.BOOLEAN,
    'Float': PrimitiveType.BOOLEAN,
    'String': PrimitiveType.STRING,
    'Long': PrimitiveType.LONG,
    'Double': PrimitiveType.DOUBLE,
    'Bytes': PrimitiveType.BYTES,
}

LOGICAL_SCALARS = {
    'UUID': LogicalType.uuid,
}


class GraphQLToAvroError(Exception):
    """
    Exception raised when a GraphQL schema cannot be converted to Avro.

    Attributes:
        message: Human-readable error description
        context: Optional context about where the error occurred
    """

    def __init__(self, message: str, context: Optional[str] = None) -> None:
        self.message = message
        self.context = context
        full_message = message
        if context:
            full_message = f"{message} (context: {context})"
        super().__init__(full_message)


class UnknownTypeError(GraphQLToAvroError):
    """Raised for a type reference that is neither a known scalar nor an object type."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Unknown type '{type_name}'")


class CyclicTypeError(GraphQLToAvroError):
    """
    Raised when an object type references itself, directly or through other types.

    Attributes:
        cycle_path: Type names from the first occurrence to the revisit
    """

    def __init__(self, cycle_path: List[str]) -> None:
        self.cycle_path = cycle_path
        cycle_str = ' -> '.join(cycle_path)
        super().__init__(f"Circular type reference detected: {cycle_str}")


class NoObjectTypesError(GraphQLToAvroError):
    """Raised when a document has no object type to convert."""

    def __init__(self) -> None:
        super().__init__("No object types found in GraphQL schema")


class GraphQLToAvroConverter:
    """Converts object types of one GraphQL document to Avro records."""

    def __init__(self, graphql_document: GraphQLDocument):
        self.graphql_document = graphql_document
        # names of the records currently being expanded, outermost first
        self.expanding: List[str] = []

    def named_type(self, name: str) -> AvroSchema:
        """
        Convert a named type reference to an Avro schema.

        User defined types are expanded in full.

        Raises:
            UnknownTypeError: If the name is neither a scalar nor an object type.
            CyclicTypeError: If the object type is already being expanded.
        """
        if name in GRAPHQL_SCALARS_TO_AVRO:
            return GRAPHQL_SCALARS_TO_AVRO[name]
        if name in LOGICAL_SCALARS:
            return LOGICAL_SCALARS[name]()
        object_type = self.graphql_document.object_type(name)
        if object_type is None:
            raise UnknownTypeError(name)
        return self.record(object_type)

    def choose_nullability(self, avro_schema: AvroSchema, nullable: bool) -> AvroSchema:
        """Optionally make a schema a union with null."""
        if nullable:
            return nullable_union(avro_schema)
        return avro_schema

    def type_reference(self, graphql_type: TypeNode, item_name: Optional[str] = None, nullable: bool = True) -> AvroSchema:
        """
        Map a GraphQL type reference to an Avro schema.

        Args:
            graphql_type: The non-null, named or list type reference.
            item_name: Name for the array if the reference is a list.
            nullable: Whether the reference may be null. Non-null wrappers
                override this for everything they wrap.
        """
        if isinstance(graphql_type, NonNullTypeNode):
            return self.type_reference(graphql_type.type, item_name, False)
        if isinstance(graphql_type, NamedTypeNode):
            avro_schema = self.named_type(graphql_type.name.value)
            return self.choose_nullability(avro_schema, nullable)
        if isinstance(graphql_type, ListTypeNode):
            avro_array = self.array(graphql_type.type, item_name)
            return self.choose_nullability(avro_array, nullable)
        raise TypeError(f"Unsupported GraphQL type reference: {graphql_type!r}")

    def array(self, inner_type: TypeNode, item_name: Optional[str]) -> ArrayType:
        """Convert the element type of a GraphQL list to an Avro array."""
        # list elements are nullable unless marked otherwise, and unnamed
        avro_schema = self.type_reference(inner_type, None, True)
        return ArrayType(avro_schema, item_name)

    def field(self, graphql_field: FieldDefinitionNode) -> FieldDefinition:
        """Convert a GraphQL field definition to an Avro field definition."""
        item_name = None
        item = directive(graphql_field, 'item')
        if item is not None:
            item_name = string_value(argument(item, 'name')) or ''
        avro_schema = self.type_reference(graphql_field.type, item_name, True)
        # TODO: read the value of @default instead of always defaulting to null
        has_default = directive(graphql_field, 'default') is not None
        return FieldDefinition(graphql_field.name.value, avro_schema, has_default, None)

    def record(self, object_type: ObjectTypeDefinitionNode) -> RecordDefinition:
        """
        Convert a GraphQL object type to an Avro record.

        Fields are converted in declaration order and the first failure
        aborts the conversion.
        """
        name = object_type.name.value
        if name in self.expanding:
            cycle_path = self.expanding[self.expanding.index(name):] + [name]
            logger.warning("Cyclic reference to type %s", name)
            raise CyclicTypeError(cycle_path)

        logger.debug("Expanding record %s", name)
        self.expanding.append(name)
        try:
            avro_fields = [self.field(graphql_field) for graphql_field in object_type.fields or ()]
        finally:
            self.expanding.pop()

        namespace = None
        namespace_directive = directive(object_type, 'namespace')
        if namespace_directive is not None:
            namespace = string_value(argument(namespace_directive, 'qualifier')) or ''
        return RecordDefinition(name, namespace, avro_fields)


def convert_graphql_to_avro_schema(graphql_document: GraphQLDocument, type_name: Optional[str] = None) -> RecordDefinition:
    """
    Convert one object type of a GraphQL document to an Avro record.

    Args:
        graphql_document: The parsed GraphQL schema.
        type_name: The object type to convert. Defaults to the first object
            type of the document.

    Returns:
        The fully expanded Avro record.
    """
    if type_name:
        object_type = graphql_document.object_type(type_name)
        if object_type is None:
            raise UnknownTypeError(type_name)
    else:
        object_type = graphql_document.first_object_type()
        if object_type is None:
            raise NoObjectTypesError()
    converter = GraphQLToAvroConverter(graphql_document)
    return converter.record(object_type)


def convert_graphql_to_avro(graphql_file_path: str, avro_file_path: str, type_name: Optional[str] = None):
    """
    Convert a GraphQL schema file to an Avro schema file.

    The output file is only written once the conversion succeeded.

    Args:
        graphql_file_path: Path to the GraphQL schema file.
        avro_file_path: Path to save the Avro schema file.
        type_name: The object type to convert, defaults to the first one.
    """
    if not graphql_file_path:
        raise ValueError("GraphQL schema file path is required.")

    graphql_document = load_graphql_document(graphql_file_path)
    avro_schema = convert_graphql_to_avro_schema(graphql_document, type_name)
    avro_schema_text = schema_to_json_text(avro_schema)

    with open(avro_file_path, 'w', encoding='utf-8') as file:
        file.write(avro_schema_text)
    logger.info("Converted GraphQL type %s to %s", avro_schema.name, avro_file_path)

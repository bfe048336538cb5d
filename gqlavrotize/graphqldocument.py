"""
Lookups over a parsed GraphQL schema document.

The document is parsed with graphql-core and never modified. All lookups are
linear scans in document order and return the first match.
"""

from typing import Iterator, Optional

from graphql import (
    DirectiveNode,
    DocumentNode,
    FieldDefinitionNode,
    ObjectTypeDefinitionNode,
    StringValueNode,
    ValueNode,
    parse,
)


class GraphQLDocument:
    """A parsed GraphQL schema document."""

    def __init__(self, document: DocumentNode):
        self.document = document

    def object_types(self) -> Iterator[ObjectTypeDefinitionNode]:
        """Iterate the object type definitions in document order."""
        for definition in self.document.definitions:
            if isinstance(definition, ObjectTypeDefinitionNode):
                yield definition

    def object_type(self, name: str) -> Optional[ObjectTypeDefinitionNode]:
        """Return the first object type definition called `name`."""
        return next((object_type for object_type in self.object_types() if object_type.name.value == name), None)

    def first_object_type(self) -> Optional[ObjectTypeDefinitionNode]:
        """Return the first object type definition of the document."""
        return next(self.object_types(), None)


def parse_graphql_document(graphql_schema: str) -> GraphQLDocument:
    """
    Parse GraphQL schema definition language text.

    Raises:
        GraphQLError: If the text is not syntactically valid.
    """
    return GraphQLDocument(parse(graphql_schema))


def load_graphql_document(graphql_file_path: str) -> GraphQLDocument:
    """Read and parse a GraphQL schema file."""
    with open(graphql_file_path, 'r', encoding='utf-8') as file:
        return parse_graphql_document(file.read())


def directive(node: ObjectTypeDefinitionNode | FieldDefinitionNode, name: str) -> Optional[DirectiveNode]:
    """Return the first directive called `name` attached to a type or field."""
    return next((d for d in node.directives or () if d.name.value == name), None)


def argument(graphql_directive: DirectiveNode, name: str) -> Optional[ValueNode]:
    """Return the value of the first argument called `name` of a directive."""
    return next((arg.value for arg in graphql_directive.arguments or () if arg.name.value == name), None)


def string_value(value: Optional[ValueNode]) -> Optional[str]:
    """Return the string of a string literal, None for any other value."""
    if isinstance(value, StringValueNode):
        return value.value
    return None

import os
import sys
import unittest

from graphql import GraphQLError, IntValueNode, StringValueNode

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from gqlavrotize.graphqldocument import (
    argument,
    directive,
    load_graphql_document,
    parse_graphql_document,
    string_value,
)

SCHEMA = '''
scalar Email

interface Named {
  name: String
}

extend type Person {
  nickname: String
}

type Person @namespace(qualifier: "com.example") @namespace(qualifier: "ignored") {
  name: String @item(name: "first", name: "second") @default
  email: Email
}

type Pet {
  name: String!
}

type Person {
  duplicate: String
}
'''


class TestGraphQLDocument(unittest.TestCase):

    def setUp(self):
        self.graphql_document = parse_graphql_document(SCHEMA)

    def test_first_object_type_skips_other_definitions(self):
        self.assertEqual(self.graphql_document.first_object_type().name.value, "Person")

    def test_object_type_returns_first_match(self):
        person = self.graphql_document.object_type("Person")
        self.assertEqual([f.name.value for f in person.fields], ["name", "email"])
        self.assertEqual(self.graphql_document.object_type("Pet").name.value, "Pet")

    def test_object_type_ignores_non_object_definitions(self):
        self.assertIsNone(self.graphql_document.object_type("Email"))
        self.assertIsNone(self.graphql_document.object_type("Named"))
        self.assertIsNone(self.graphql_document.object_type("Missing"))

    def test_no_object_types(self):
        self.assertIsNone(parse_graphql_document("scalar Email").first_object_type())

    def test_directive_returns_first_match(self):
        person = self.graphql_document.object_type("Person")
        namespace = directive(person, "namespace")
        self.assertEqual(string_value(argument(namespace, "qualifier")), "com.example")
        self.assertIsNone(directive(person, "item"))

    def test_field_directives(self):
        name_field = self.graphql_document.object_type("Person").fields[0]
        item = directive(name_field, "item")
        self.assertEqual(string_value(argument(item, "name")), "first")
        self.assertIsNotNone(directive(name_field, "default"))
        self.assertIsNone(argument(directive(name_field, "default"), "value"))

    def test_string_value(self):
        self.assertEqual(string_value(StringValueNode(value="x")), "x")
        self.assertIsNone(string_value(IntValueNode(value="1")))
        self.assertIsNone(string_value(None))

    def test_load_document(self):
        graphql_path = os.path.join(os.path.dirname(__file__), "graphql", "person.graphql")
        graphql_document = load_graphql_document(graphql_path)
        self.assertEqual(graphql_document.first_object_type().name.value, "Person")

    def test_syntax_error(self):
        with self.assertRaises(GraphQLError):
            parse_graphql_document("type Person {")


if __name__ == '__main__':
    unittest.main()

"""
Tests for the JSON form of Avro schema nodes.
"""

import json
import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from gqlavrotize.avroschema import (
    ArrayType,
    FieldDefinition,
    LogicalType,
    PrimitiveType,
    RecordDefinition,
    UnionType,
    nullable,
    schema_to_json,
    schema_to_json_text,
)


class TestAvroSchema(unittest.TestCase):
    """Test cases for schema node serialization."""

    def test_primitives_are_bare_strings(self):
        for primitive in PrimitiveType:
            self.assertEqual(schema_to_json(primitive), primitive.value)
        self.assertEqual(json.dumps(schema_to_json(PrimitiveType.LONG)), '"long"')

    def test_record_without_namespace(self):
        record = RecordDefinition("Person", None, [FieldDefinition("name", PrimitiveType.STRING)])
        self.assertEqual(schema_to_json(record), {
            "type": "record",
            "name": "Person",
            "fields": [{"name": "name", "type": "string"}]
        })

    def test_record_with_empty_namespace(self):
        record = RecordDefinition("Person", "", [])
        self.assertEqual(schema_to_json(record), {
            "type": "record",
            "name": "Person",
            "namespace": "",
            "fields": []
        })

    def test_record_key_order(self):
        record = RecordDefinition("Person", "com.example", [])
        self.assertEqual(list(schema_to_json(record).keys()), ["type", "name", "namespace", "fields"])

    def test_field_default_null_is_kept(self):
        avro_field = FieldDefinition("age", nullable(PrimitiveType.LONG), True, None)
        self.assertEqual(avro_field.to_json(), {"name": "age", "type": ["null", "long"], "default": None})
        self.assertIn('"default": null', json.dumps(avro_field.to_json()))

    def test_field_without_default(self):
        avro_field = FieldDefinition("age", PrimitiveType.LONG)
        self.assertNotIn("default", avro_field.to_json())

    def test_array(self):
        self.assertEqual(schema_to_json(ArrayType(PrimitiveType.STRING)), {"type": "array", "items": "string"})
        self.assertEqual(schema_to_json(ArrayType(PrimitiveType.STRING, "tag")),
                         {"type": "array", "items": "string", "name": "tag"})
        self.assertEqual(schema_to_json(ArrayType(PrimitiveType.STRING, "")),
                         {"type": "array", "items": "string", "name": ""})

    def test_union_is_a_bare_list(self):
        union = UnionType([PrimitiveType.NULL, ArrayType(PrimitiveType.INT)])
        self.assertEqual(schema_to_json(union), ["null", {"type": "array", "items": "int"}])

    def test_nullable_puts_null_first(self):
        union = nullable(PrimitiveType.BYTES)
        self.assertEqual(union.variants, [PrimitiveType.NULL, PrimitiveType.BYTES])

    def test_logical_type(self):
        self.assertEqual(schema_to_json(LogicalType.uuid()), {"type": "string", "logicalType": "uuid"})
        decimal = LogicalType("bytes", "decimal", 2, 10)
        self.assertEqual(schema_to_json(decimal),
                         {"type": "bytes", "logicalType": "decimal", "scale": 2, "precision": 10})

    def test_uuid_instances_are_independent(self):
        self.assertIsNot(LogicalType.uuid(), LogicalType.uuid())

    def test_not_a_schema_node(self):
        with self.assertRaises(TypeError):
            schema_to_json({"type": "string"})
        with self.assertRaises(TypeError):
            schema_to_json(UnionType(["string"]))

    def test_json_text(self):
        record = RecordDefinition("A", None, [FieldDefinition("x", LogicalType.uuid())])
        text = schema_to_json_text(record)
        self.assertEqual(json.loads(text), schema_to_json(record))
        self.assertIn('\n  "name": "A"', text)


if __name__ == '__main__':
    unittest.main()

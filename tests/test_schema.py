import datetime as _dt
import typing
import unittest

import shape_schema as ss
from shape_schema.result import STANDARD_KEY
from tests._util import SAMPLES, person_schema


class PrimitiveValidateTests(unittest.TestCase):
    def test_each_leaf_accepts_only_its_category(self):
        leaves = {
            "string": ss.string(),
            "number": ss.number(),
            "boolean": ss.boolean(),
        }
        for kind, node in leaves.items():
            for category, values in SAMPLES.items():
                for v in values:
                    result = node.validate(v)
                    if category == kind:
                        self.assertEqual(result, {"value": v}, (kind, v))
                        self.assertIs(result["value"], v)
                    else:
                        self.assertFalse(result.ok, (kind, v))

    def test_string_mismatch_message(self):
        self.assertEqual(
            ss.string().validate(5),
            {"issues": [{"message": "Expected string but got number"}]},
        )

    def test_number_rejects_bool(self):
        result = ss.number().validate(True)
        self.assertEqual(result.issues, [{"message": "Expected number but got boolean"}])

    def test_null_is_reported_as_null(self):
        result = ss.boolean().validate(None)
        self.assertEqual(result.issues, [{"message": "Expected boolean but got null"}])

    def test_date_never_accepts_a_datetime(self):
        for value in (_dt.datetime.now(), _dt.date(2025, 1, 1)):
            self.assertEqual(
                ss.date().validate(value),
                {"issues": [{"message": "Expected Date but got object"}]},
            )

    def test_date_rejects_strings_too(self):
        result = ss.date().validate("2025-01-01")
        self.assertEqual(result.issues[0]["message"], "Expected Date but got string")


class ContainerValidateTests(unittest.TestCase):
    def test_object_does_not_inspect_children(self):
        node = ss.object({"a": ss.string()})
        self.assertEqual(node.validate({"a": 5}), {"value": {"a": 5}})

    def test_object_accepts_any_object_category(self):
        node = ss.object({"a": ss.string()})
        for v in SAMPLES["object"]:
            self.assertTrue(node.validate(v).ok, v)

    def test_object_rejects_primitives(self):
        result = ss.object({}).validate("x")
        self.assertEqual(result.issues, [{"message": "Expected object but got string"}])

    def test_array_never_accepts_a_list(self):
        node = ss.array(ss.string())
        self.assertEqual(
            node.validate(["a", "b"]),
            {"issues": [{"message": "Expected array but got object"}]},
        )

    def test_manual_field_validation(self):
        node = ss.object({"a": ss.string()})
        self.assertEqual(
            node.properties["a"].validate(5),
            {"issues": [{"message": "Expected string but got number"}]},
        )
        self.assertEqual(node.properties["a"].validate("ok"), {"value": "ok"})

    def test_manual_item_validation(self):
        node = ss.array(ss.number())
        results = [node.items.validate(v) for v in [1, "two", 3.0]]
        self.assertEqual([r.ok for r in results], [True, False, True])

    def test_properties_is_the_mapping_given(self):
        fields = {"a": ss.string()}
        node = ss.object(fields)
        self.assertIs(node.properties, fields)

    def test_items_is_the_schema_given(self):
        child = ss.string()
        self.assertIs(ss.array(child).items, child)


class ParseTests(unittest.TestCase):
    def test_parse_returns_input_unchanged(self):
        nodes = [ss.string(), ss.number(), ss.boolean(), ss.date(),
                 ss.object({"a": ss.string()}), ss.array(ss.number())]
        weird = [5, "x", None, {"a": 5}, [1, "b"], object()]
        for node in nodes:
            for v in weird:
                self.assertIs(node.parse(v), v)

    def test_parse_does_not_copy_containers(self):
        payload = {"name": "John", "arr": ["John", "Doe"]}
        out = person_schema().parse(payload)
        self.assertIs(out, payload)

    def test_round_trip_through_field(self):
        node = ss.object({"x": ss.number()})
        self.assertEqual(node.properties["x"].parse(5), 5)


class ModifierTests(unittest.TestCase):
    def test_nullable_and_default_return_the_same_node(self):
        for node in (ss.string(), ss.number(), ss.object({}), ss.array(ss.string())):
            self.assertIs(node.nullable(), node)
            self.assertIs(node.default("fallback"), node)

    def test_nullable_does_not_accept_none(self):
        node = ss.string().nullable()
        self.assertEqual(node.validate(None).issues,
                         [{"message": "Expected string but got null"}])

    def test_default_is_not_substituted(self):
        node = ss.number().default(0)
        self.assertIsNone(node.parse(None))
        self.assertFalse(node.validate(None).ok)

    def test_modified_node_behaves_like_original(self):
        plain, modified = ss.boolean(), ss.boolean().nullable().default(False)
        for v in (True, 0, None, "x"):
            self.assertEqual(plain.validate(v), modified.validate(v))
            self.assertIs(plain.parse(v), modified.parse(v))


class ConstructionTests(unittest.TestCase):
    def test_kinds(self):
        self.assertEqual(
            [n.kind for n in (ss.string(), ss.number(), ss.boolean(), ss.date(),
                              ss.object({}), ss.array(ss.string()))],
            ["string", "number", "boolean", "Date", "object", "array"],
        )

    def test_constructors_return_new_nodes(self):
        self.assertIsNot(ss.string(), ss.string())

    def test_kind_cannot_be_reassigned(self):
        node = ss.string()
        with self.assertRaises(AttributeError):
            node.kind = "number"
        self.assertEqual(node.kind, "string")

    def test_object_rejects_non_schema_children(self):
        with self.assertRaisesRegex(TypeError, "Field 'a' must be a Schema"):
            ss.object({"a": str})

    def test_object_rejects_non_string_names(self):
        with self.assertRaisesRegex(TypeError, "Field names must be str"):
            ss.object({1: ss.string()})

    def test_object_rejects_non_mapping(self):
        with self.assertRaises(TypeError):
            ss.object([ss.string()])

    def test_array_rejects_non_schema_items(self):
        with self.assertRaisesRegex(TypeError, "array\\(\\) expects a Schema"):
            ss.array("string")

    def test_repr_mirrors_constructors(self):
        node = ss.object({"a": ss.array(ss.date())})
        self.assertEqual(repr(node), "object({'a': array(date())})")


class StandardPropsTests(unittest.TestCase):
    def test_standard_props_shape(self):
        node = ss.string()
        props = getattr(node, STANDARD_KEY)
        self.assertIs(props, node.standard)
        self.assertEqual(props["version"], 1)
        self.assertEqual(props["vendor"], "")

    def test_standard_validate_is_bound_to_node(self):
        node = ss.number()
        validate = getattr(node, "~standard")["validate"]
        self.assertEqual(validate(3), {"value": 3})
        self.assertEqual(validate("3"), node.validate("3"))


class DescribeTests(unittest.TestCase):
    def test_describe_nested_tree(self):
        self.assertEqual(
            person_schema().describe(),
            {
                "type": "object",
                "fields": {
                    "name": {"type": "string"},
                    "age": {"type": "number"},
                    "nested": {
                        "type": "object",
                        "fields": {
                            "name": {"type": "Date"},
                            "age": {"type": "boolean"},
                        },
                    },
                    "arr": {"type": "array", "items": {"type": "string"}},
                },
            },
        )


class GenericParameterTests(unittest.TestCase):
    def test_array_is_generic_over_its_items(self):
        base = ss.ArraySchema.__orig_bases__[0]
        self.assertIs(typing.get_origin(base), ss.Schema)
        item_in, item_out = ss.ArraySchema.__parameters__
        self.assertEqual(typing.get_args(base), (list[item_in], list[item_out]))

    def test_array_subscription_follows_item_types(self):
        alias = ss.ArraySchema[float, float]
        self.assertIs(typing.get_origin(alias), ss.ArraySchema)
        self.assertEqual(typing.get_args(alias), (float, float))

    def test_leaf_parameters_are_fixed(self):
        self.assertEqual(typing.get_args(ss.NumberSchema.__orig_bases__[0]), (float, float))
        self.assertEqual(ss.NumberSchema.__parameters__, ())

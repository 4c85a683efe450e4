# Copyright 2017-present Kensho Technologies, LLC.
import datetime
from decimal import Decimal
import unittest

from ..exceptions import CypherLiteralError
from ..query_formatting import represent_cypher_map, represent_cypher_value
from ..query_formatting.representations import represent_float_as_str, represent_map_key


class CypherFormattingTests(unittest.TestCase):
    def test_scalar_values(self) -> None:
        test_data = [
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (-42, "-42"),
            (1.5, "1.5"),
            (5.0, "5.0"),
            (1e-07, "0.0000001"),
            (1e16, "10000000000000000.0"),
            (1e19, "10000000000000000000.0"),
            (1.5e30, "1500000000000000000000000000000.0"),
            (-2e20, "-200000000000000000000.0"),
            ("Heat", '"Heat"'),
            ('Say "Hi"\n', '"Say \\"Hi\\"\\n"'),
            ("", '""'),
        ]
        for value, expected_literal in test_data:
            self.assertEqual(expected_literal, represent_cypher_value(value), msg=repr(value))

    def test_list_values(self) -> None:
        self.assertEqual("[]", represent_cypher_value([]))
        self.assertEqual('[1, "two", null]', represent_cypher_value([1, "two", None]))
        self.assertEqual("[[1], [2, 3]]", represent_cypher_value(([1], (2, 3))))

    def test_map_values(self) -> None:
        self.assertEqual("{}", represent_cypher_map({}))
        self.assertEqual(
            '{title: "Heat", year: 1995, cast: {lead: "Pacino"}}',
            represent_cypher_map({"title": "Heat", "year": 1995, "cast": {"lead": "Pacino"}}),
        )
        self.assertEqual(
            '{title:"Heat",genres:["Crime","Drama"]}',
            represent_cypher_map(
                {"title": "Heat", "genres": ["Crime", "Drama"]},
                item_separator=",",
                key_value_separator=":",
            ),
        )

    def test_map_keys(self) -> None:
        self.assertEqual("title", represent_map_key("title"))
        self.assertEqual("_private2", represent_map_key("_private2"))
        self.assertEqual("`release year`", represent_map_key("release year"))
        self.assertEqual("`2nd`", represent_map_key("2nd"))
        self.assertEqual("`odd``key`", represent_map_key("odd`key"))
        self.assertEqual('{`first name`: "Al"}', represent_cypher_map({"first name": "Al"}))

        with self.assertRaises(CypherLiteralError):
            represent_map_key(1)  # type: ignore

    def test_unrepresentable_values(self) -> None:
        invalid_values = [
            Decimal("1.5"),
            datetime.date(2020, 1, 1),
            datetime.datetime(2020, 1, 1, 12, 0),
            float("nan"),
            float("inf"),
            {1, 2},
            object(),
        ]
        for value in invalid_values:
            with self.assertRaises(CypherLiteralError, msg=repr(value)):
                represent_cypher_value(value)

    def test_represent_float_as_str_type_check(self) -> None:
        with self.assertRaises(CypherLiteralError):
            represent_float_as_str(3)  # type: ignore

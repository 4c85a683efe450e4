# Copyright 2017-present Kensho Technologies, LLC.
import unittest

from graphql import parse

from ..filters import inner_filter_params
from .test_helpers import get_head_selection, get_operation


class InnerFilterParamsTests(unittest.TestCase):
    def test_pagination_arguments_are_excluded(self) -> None:
        head_selection = get_head_selection('{ Movie(first: 5, name: "x") { title } }')
        self.assertEqual('{name:"x"}', inner_filter_params([head_selection]))

        head_selection = get_head_selection("{ Movie(first: 5, offset: 10) { title } }")
        self.assertEqual("", inner_filter_params([head_selection]))

    def test_no_filters(self) -> None:
        self.assertEqual("", inner_filter_params([]))
        self.assertEqual("", inner_filter_params([get_head_selection("{ Movie { title } }")]))

    def test_literal_kinds(self) -> None:
        head_selection = get_head_selection(
            """{
                Movie(title: "Heat", year: 1995, imdbRating: 8.3, seen: true, rating: R) {
                    title
                }
            }"""
        )
        self.assertEqual(
            '{title:"Heat",year:1995,imdbRating:8.3,seen:true,rating:"R"}',
            inner_filter_params([head_selection]),
        )

    def test_list_values_are_list_literals(self) -> None:
        head_selection = get_head_selection('{ Movie(genres: ["Crime", "Drama"]) { title } }')
        self.assertEqual('{genres:["Crime","Drama"]}', inner_filter_params([head_selection]))

    def test_only_head_selection_is_used(self) -> None:
        operation = get_operation(
            parse(
                """{
                    Movie(title: "Heat") {
                        title
                    }
                    MoviesByYear(year: 1995) {
                        title
                    }
                }"""
            )
        )
        self.assertEqual(
            '{title:"Heat"}', inner_filter_params(operation.selection_set.selections)
        )

    def test_variables(self) -> None:
        head_selection = get_head_selection(
            """query ($title: String, $year: Int, $first: Int) {
                Movie(title: $title, year: $year, first: $first) {
                    title
                }
            }"""
        )
        self.assertEqual(
            '{title:"Heat"}',
            inner_filter_params([head_selection], {"title": "Heat", "first": 3}),
        )
        self.assertEqual("", inner_filter_params([head_selection]))

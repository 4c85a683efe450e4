# Copyright 2017-present Kensho Technologies, LLC.
import unittest

from ..exceptions import (
    AmbiguousRelationshipParamsError,
    MissingMutationMetadataError,
    MutationMetadataErrorKind,
)
from ..mutations import (
    RelationshipParamRemap,
    fix_params_for_add_relationship_mutation,
    is_add_relationship_mutation,
    is_mutation,
    remap_add_relationship_params,
)
from ..schema import FieldMetadata, MutationMetaInfo
from .test_helpers import capture_resolve_info, get_schema, get_schema_index


class RemapAddRelationshipParamsTests(unittest.TestCase):
    def setUp(self) -> None:
        """Disable max diff limits for all tests."""
        self.maxDiff = None
        self.schema_index = get_schema_index()

    def _remap(self, field_name, params) -> RelationshipParamRemap:
        field_metadata = self.schema_index.get_mutation_field_metadata(field_name)
        return remap_add_relationship_params(params, field_metadata)

    def test_prefix_stripping(self) -> None:
        params = {"movieMovieId": "m1", "genreName": "Crime"}
        remap = self._remap("AddMovieGenre", params)
        self.assertIsNone(remap.error)
        self.assertEqual({"MovieId": "m1", "Name": "Crime"}, remap.params)

        # The input is not modified.
        self.assertEqual({"movieMovieId": "m1", "genreName": "Crime"}, params)

    def test_lowercase_mutation_name(self) -> None:
        remap = self._remap("addActorMovie", {"actorId": "a1", "movieMovieId": "m1"})
        self.assertEqual({"Id": "a1", "MovieId": "m1"}, remap.unwrap())

    def test_other_params_are_kept(self) -> None:
        remap = self._remap(
            "AddMovieGenre", {"movieMovieId": "m1", "genreName": "Crime", "first": 3}
        )
        self.assertEqual({"first": 3, "MovieId": "m1", "Name": "Crime"}, remap.unwrap())

    def test_missing_param_stays_missing(self) -> None:
        remap = self._remap("AddMovieGenre", {"genreName": "Crime"})
        self.assertEqual({"Name": "Crime"}, remap.unwrap())

    def test_explicit_parameter_keys(self) -> None:
        remap = self._remap("AddMovieSequel", {"movieFromId": "m1", "movieToId": "m2"})
        self.assertEqual({"fromId": "m1", "toId": "m2"}, remap.unwrap())

    def test_colliding_parameter_keys(self) -> None:
        # Both "fromYear" and "toYear" strip down to "Year".
        remap = self._remap("AddYearSpan", {"fromYear": 1999, "toYear": 2001})
        self.assertIsNone(remap.params)
        self.assertIsInstance(remap.error, AmbiguousRelationshipParamsError)
        self.assertEqual(MutationMetadataErrorKind.AMBIGUOUS_PARAMETER_KEYS, remap.error.kind)
        self.assertIn('"Year"', str(remap.error))

        with self.assertRaises(AmbiguousRelationshipParamsError):
            remap.unwrap()

    def test_collision_resolved_by_explicit_keys(self) -> None:
        remap = self._remap("AddYearRange", {"fromYear": 1999, "toYear": 2001})
        self.assertEqual({"startYear": 1999, "endYear": 2001}, remap.unwrap())

    def test_missing_directive_argument(self) -> None:
        remap = self._remap("AddBrokenRelation", {"movieMovieId": "m1", "genreName": "Crime"})
        self.assertIsInstance(remap.error, MissingMutationMetadataError)
        self.assertEqual(MutationMetadataErrorKind.MISSING_DIRECTIVE_ARGUMENT, remap.error.kind)

    def test_missing_directive(self) -> None:
        remap = self._remap("addUnmarkedRelation", {"movieMovieId": "m1", "genreName": "Crime"})
        self.assertIsInstance(remap.error, MissingMutationMetadataError)
        self.assertEqual(MutationMetadataErrorKind.MISSING_DIRECTIVE, remap.error.kind)

    def test_wrong_argument_count(self) -> None:
        remap = self._remap(
            "AddTooManyArguments", {"movieMovieId": "m1", "genreName": "Crime", "weight": 2}
        )
        self.assertIsInstance(remap.error, MissingMutationMetadataError)
        self.assertEqual(MutationMetadataErrorKind.WRONG_ARGUMENT_COUNT, remap.error.kind)

    def test_argument_name_without_role_prefix(self) -> None:
        remap = self._remap("AddMismatchedNames", {"filmId": "m1", "genreName": "Crime"})
        self.assertIsInstance(remap.error, AmbiguousRelationshipParamsError)
        self.assertEqual(MutationMetadataErrorKind.UNDERIVABLE_PARAMETER_KEY, remap.error.kind)

    def test_argument_name_equal_to_role_prefix(self) -> None:
        field_metadata = FieldMetadata(
            field_name="AddMovieGenre",
            argument_names=("movie", "genreName"),
            default_arguments={},
            directives={"MutationMeta": {"from": "Movie", "to": "Genre"}},
        )
        remap = remap_add_relationship_params({"movie": "m1"}, field_metadata)
        self.assertEqual(MutationMetadataErrorKind.UNDERIVABLE_PARAMETER_KEY, remap.error.kind)

    def test_precomputed_mutation_meta_info(self) -> None:
        field_metadata = FieldMetadata(
            field_name="AddPersonMovie",
            argument_names=("personName", "movieTitle"),
            default_arguments={},
            directives={},
            mutation_meta_info=MutationMetaInfo(
                relationship="ACTED_IN",
                from_type="Person",
                to_type="Movie",
                from_param=None,
                to_param=None,
            ),
        )
        remap = remap_add_relationship_params(
            {"personName": "Tom", "movieTitle": "Big"}, field_metadata
        )
        self.assertEqual({"Name": "Tom", "Title": "Big"}, remap.unwrap())

    def test_remap_requires_exactly_one_outcome(self) -> None:
        with self.assertRaises(AssertionError):
            RelationshipParamRemap()
        with self.assertRaises(AssertionError):
            RelationshipParamRemap(
                params={},
                error=MissingMutationMetadataError(
                    MutationMetadataErrorKind.MISSING_DIRECTIVE, "missing"
                ),
            )
        self.assertEqual({}, RelationshipParamRemap(params={}).unwrap())


class FixParamsForAddRelationshipMutationTests(unittest.TestCase):
    def setUp(self) -> None:
        """Disable max diff limits for all tests."""
        self.maxDiff = None
        self.schema_index = get_schema_index()

    def test_remapped_params(self) -> None:
        field_metadata = self.schema_index.get_mutation_field_metadata("AddMovieGenre")
        with self.assertLogs("graphql_cypher.mutations", level="DEBUG"):
            params = fix_params_for_add_relationship_mutation(
                {"movieMovieId": "m1", "genreName": "Crime"}, field_metadata
            )
        self.assertEqual({"MovieId": "m1", "Name": "Crime"}, params)

    def test_errors_are_raised(self) -> None:
        field_metadata = self.schema_index.get_mutation_field_metadata("AddBrokenRelation")
        with self.assertRaises(MissingMutationMetadataError):
            fix_params_for_add_relationship_mutation({"movieMovieId": "m1"}, field_metadata)

        field_metadata = self.schema_index.get_mutation_field_metadata("AddYearSpan")
        with self.assertRaises(AmbiguousRelationshipParamsError):
            fix_params_for_add_relationship_mutation({"fromYear": 1999}, field_metadata)

        with self.assertRaises(MissingMutationMetadataError) as context:
            fix_params_for_add_relationship_mutation({"fromYear": 1999}, None)
        self.assertEqual(MutationMetadataErrorKind.MISSING_DIRECTIVE, context.exception.kind)


class MutationDetectionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema = get_schema()
        self.schema_index = get_schema_index()

    def test_query_is_not_a_mutation(self) -> None:
        info = capture_resolve_info(self.schema, "{ Movie { title } }")
        self.assertFalse(is_mutation(info))
        self.assertFalse(is_add_relationship_mutation(info, self.schema_index))

    def test_add_relationship_mutations(self) -> None:
        info = capture_resolve_info(
            self.schema,
            'mutation { AddMovieGenre(movieMovieId: "m1", genreName: "Crime") { title } }',
        )
        self.assertTrue(is_mutation(info))
        self.assertTrue(is_add_relationship_mutation(info, self.schema_index))

        info = capture_resolve_info(
            self.schema, 'mutation { addActorMovie(actorId: "a1", movieMovieId: "m1") { name } }'
        )
        self.assertTrue(is_add_relationship_mutation(info, self.schema_index))

    def test_other_mutations(self) -> None:
        info = capture_resolve_info(
            self.schema, 'mutation { CreateMovie(movieId: "m1", title: "Heat") { title } }'
        )
        self.assertTrue(is_mutation(info))
        self.assertFalse(is_add_relationship_mutation(info, self.schema_index))

        # Named like an add-relationship mutation, but lacking @MutationMeta.
        info = capture_resolve_info(
            self.schema,
            'mutation { addUnmarkedRelation(movieMovieId: "m1", genreName: "Crime") { title } }',
        )
        self.assertFalse(is_add_relationship_mutation(info, self.schema_index))

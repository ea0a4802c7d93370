"""Tests for turning records into flat triples."""

import pytest

from ldrecords.errors import InvalidSubjectSelector
from ldrecords.terms import (
    RDF_LANGSTRING,
    XSD_INTEGER,
    XSD_STRING,
    Contraction as C,
    Literal,
    literal,
)
from ldrecords.triples import (
    SubjectField,
    SubjectFunction,
    Subjects,
    as_selector,
    objectify,
    triplify,
    triplify_all,
    triplify_one,
)

RESOURCES = {"Alice": C("ex:alice"), "Bob": C("ex:bob")}


def assert_well_formed(triples):
    for triple in triples:
        assert len(triple) in (3, 4, 5)
        if len(triple) == 5:
            assert triple[3] == RDF_LANGSTRING


class TestObjectify:
    def test_contraction_passes_through(self):
        obj = C("ex:o")
        assert objectify(RESOURCES, obj) is obj

    def test_literal_passes_through(self):
        obj = literal("hi", "@en")
        assert objectify(RESOURCES, obj) is obj

    def test_resource_map(self):
        assert objectify(RESOURCES, "Alice") == C("ex:alice")

    def test_literal_fallback(self):
        assert objectify(RESOURCES, "Carol") == Literal("Carol")
        assert objectify(None, "Alice") == Literal("Alice")
        assert objectify(None, 7) == Literal("7", XSD_INTEGER)

    def test_unhashable_value_is_a_literal(self):
        assert objectify({"a": C("ex:a")}, ["a"]) == Literal("['a']")


class TestTriplifyOne:
    def test_default_literal_gets_explicit_string_type(self):
        assert triplify_one(None, "s", "p", "text") == ("s", "p", "text", XSD_STRING)

    def test_typed_literal(self):
        assert triplify_one(None, "s", "p", 3) == ("s", "p", "3", XSD_INTEGER)

    def test_language_literal(self):
        assert triplify_one(None, "s", "p", literal("hi", "@en")) == (
            "s",
            "p",
            "hi",
            RDF_LANGSTRING,
            "en",
        )

    def test_resource(self):
        assert triplify_one(RESOURCES, C("ex:alice"), C("ex:knows"), "Bob") == (
            C("ex:alice"),
            C("ex:knows"),
            C("ex:bob"),
        )

    def test_resource_map_does_not_create_self_loop(self):
        assert triplify_one(RESOURCES, C("ex:alice"), C("ex:name"), "Alice") == (
            C("ex:alice"),
            C("ex:name"),
            "Alice",
            XSD_STRING,
        )

    def test_plain_string_equal_to_subject_is_a_literal(self):
        triple = triplify_one(None, "s1", "p1", "s1")
        assert triple != ("s1", "p1", "s1")
        assert triple == ("s1", "p1", "s1", XSD_STRING)

    def test_contraction_equal_to_subject_stays_a_self_loop(self):
        # retried once without resources, still the same contraction
        assert triplify_one(None, C("ex:a"), C("ex:p"), C("ex:a")) == (
            C("ex:a"),
            C("ex:p"),
            C("ex:a"),
        )


class TestTriplify:
    def test_record_order_preserved(self):
        record = {"p1": 1, "p2": C("ex:o"), "p3": "x", "p4": "Bob"}
        triples = triplify(RESOURCES, "s", record)
        assert triples == [
            ("s", "p1", "1", XSD_INTEGER),
            ("s", "p2", C("ex:o")),
            ("s", "p3", "x", XSD_STRING),
            ("s", "p4", C("ex:bob")),
        ]
        assert_well_formed(triples)

    def test_empty_record(self):
        assert triplify(None, "s", {}) == []


class TestTriplifyAll:
    RECORDS = [{"id": "Alice", "age": 36}, {"id": "Bob", "age": 41}]

    def test_explicit_subjects(self):
        triples = triplify_all(None, [C("ex:a"), C("ex:b")], [{"n": 1}, {"n": 2}])
        assert triples == [
            (C("ex:a"), "n", "1", XSD_INTEGER),
            (C("ex:b"), "n", "2", XSD_INTEGER),
        ]

    def test_subjects_from_iterator(self):
        subjects = iter([C("ex:a")])
        assert triplify_all(None, subjects, [{"n": 1}]) == [(C("ex:a"), "n", "1", XSD_INTEGER)]

    def test_field_selector(self):
        triples = triplify_all(RESOURCES, "id", self.RECORDS)
        assert triples == [
            (C("ex:alice"), "id", "Alice", XSD_STRING),
            (C("ex:alice"), "age", "36", XSD_INTEGER),
            (C("ex:bob"), "id", "Bob", XSD_STRING),
            (C("ex:bob"), "age", "41", XSD_INTEGER),
        ]
        assert triplify_all(RESOURCES, SubjectField("id"), self.RECORDS) == triples

    def test_field_selector_without_resource(self):
        assert triplify_all(None, "id", [{"id": "x"}]) == [("x", "id", "x", XSD_STRING)]

    def test_field_selector_missing_field(self):
        with pytest.raises(KeyError):
            triplify_all(RESOURCES, "id", [{"id": "Alice"}, {"age": 3}])

    def test_function_selector(self):
        def subject(record):
            return C(f"ex:{record['id'].lower()}")

        triples = triplify_all(None, subject, self.RECORDS)
        assert [triple[0] for triple in triples] == [
            C("ex:alice"),
            C("ex:alice"),
            C("ex:bob"),
            C("ex:bob"),
        ]
        assert triplify_all(None, SubjectFunction(subject), self.RECORDS) == triples

    def test_empty_records(self):
        assert triplify_all(None, [], []) == []

    def test_invalid_selector(self):
        with pytest.raises(InvalidSubjectSelector):
            triplify_all(None, 42, self.RECORDS)
        with pytest.raises(TypeError):
            triplify_all(None, None, self.RECORDS)

    def test_as_selector(self):
        assert as_selector("id") == SubjectField("id")
        assert as_selector(["s"]) == Subjects(["s"])
        assert as_selector(len) == SubjectFunction(len)
        selector = Subjects(("a",))
        assert as_selector(selector) is selector

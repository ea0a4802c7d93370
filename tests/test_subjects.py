"""Tests for subject maps and flat triple encoding."""

from ldrecords.terms import (
    RDF_LANGSTRING,
    XSD_INTEGER,
    XSD_STRING,
    Contraction as C,
    Literal,
)
from ldrecords.triples import (
    flat_triple,
    squash,
    squash_objects,
    squash_predicates,
    subjectify,
    triplify_all,
    unflatten,
)

TRIPLES = [
    ("s", "p", "o"),
    ("s", "p", "o"),
    ("s", "p", "v", XSD_STRING),
    ("s", "p", "42", XSD_INTEGER),
    ("s", "q", "hi", RDF_LANGSTRING, "en"),
    ("t", "p", "o"),
]

SUBJECT_MAP = {
    "s": {
        "p": {"o", Literal("v"), Literal("42", XSD_INTEGER)},
        "q": {Literal("hi", RDF_LANGSTRING, "en")},
    },
    "t": {"p": {"o"}},
}


class TestFlatTriple:
    def test_encode(self):
        assert flat_triple("s", "p", "o") == ("s", "p", "o")
        assert flat_triple("s", "p", Literal("v")) == ("s", "p", "v", XSD_STRING)
        assert flat_triple("s", "p", Literal("1", XSD_INTEGER)) == ("s", "p", "1", XSD_INTEGER)
        assert flat_triple("s", "p", Literal("hi", RDF_LANGSTRING, "en")) == (
            "s",
            "p",
            "hi",
            RDF_LANGSTRING,
            "en",
        )

    def test_decode(self):
        assert unflatten(("s", "p", "o")) == ("s", "p", "o")
        assert unflatten(("s", "p", "v", XSD_STRING)) == ("s", "p", Literal("v"))
        assert unflatten(("s", "p", "hi", RDF_LANGSTRING, "en")) == (
            "s",
            "p",
            Literal("hi", RDF_LANGSTRING, "en"),
        )


class TestSubjectify:
    def test_groups_and_deduplicates(self):
        assert subjectify(TRIPLES) == SUBJECT_MAP

    def test_empty(self):
        assert subjectify([]) == {}

    def test_accepts_generators(self):
        assert subjectify(triple for triple in TRIPLES) == SUBJECT_MAP

    def test_no_empty_object_sets(self):
        for predicate_map in subjectify(TRIPLES).values():
            assert all(predicate_map.values())


class TestSquash:
    def test_empty(self):
        assert squash({}) == []

    def test_objects(self):
        assert squash_objects("s", "p", ["a", Literal("b")]) == [
            ("s", "p", "a"),
            ("s", "p", "b", XSD_STRING),
        ]

    def test_predicates_in_map_order(self):
        assert squash_predicates("s", {"p1": ["a"], "p2": ["b"]}) == [
            ("s", "p1", "a"),
            ("s", "p2", "b"),
        ]

    def test_subjects_in_map_order(self):
        assert squash({"b": {"p": ["x"]}, "a": {"p": ["y"]}}) == [
            ("b", "p", "x"),
            ("a", "p", "y"),
        ]

    def test_arity(self):
        for triple in squash(SUBJECT_MAP):
            assert len(triple) in (3, 4, 5)
            if len(triple) == 5:
                assert triple[3] == RDF_LANGSTRING

    def test_deterministic_within_a_map(self):
        assert squash(SUBJECT_MAP) == squash(SUBJECT_MAP)


class TestRoundTrip:
    def test_subject_map_round_trip(self):
        assert subjectify(squash(SUBJECT_MAP)) == SUBJECT_MAP

    def test_triple_round_trip(self):
        unique = sorted(set(TRIPLES))
        assert sorted(squash(subjectify(TRIPLES))) == unique

    def test_triplified_records(self):
        records = [{"name": "Ada", "born": 1815}, {"name": "Alan", "friend": C("ex:ada")}]
        triples = triplify_all(None, [C("ex:ada"), C("ex:alan")], records)
        assert sorted(squash(subjectify(triples))) == sorted(triples)

import asyncio

import pytest

from degree_audit.engines import CourseResolver, normalize_course, to_resolved_course
from degree_audit.exceptions import CatalogContentTypeError, CatalogHTTPError, CatalogTransportError

from helpers import FakeCatalog, course

TERMS = (1258, 1254, 1252, 1248)


def resolve(catalog, subject, number, terms=TERMS):
    return asyncio.run(CourseResolver(catalog, terms).resolve(subject, number))


def test_normalize_course():
    assert normalize_course(" cse ", " 2231H ") == ("CSE", "2231H", "2231")
    assert normalize_course(None, None) == ("", "", "")


class TestRanking:

    def test_exact_match_beats_core_match(self):
        catalog = FakeCatalog({(1258, True): [course("CSE", "2231H"), course("CSE", "2231")]})
        result = resolve(catalog, "CSE", "2231")
        assert result.class_number == "2231"
        assert result.course_id == "CSE-2231"
        assert result.not_found is False

    def test_core_match_when_no_exact(self):
        catalog = FakeCatalog({(1258, True): [course("MATH", "2231"), course("CSE", "2231")]})
        result = resolve(catalog, "cse", "2231H")
        assert (result.subject, result.class_number) == ("CSE", "2231")
        assert len(catalog.calls) == 1

    def test_exact_match_ignores_whitespace_and_subject_case(self):
        catalog = FakeCatalog({(1258, True): [course("cse ", " 2231 H")]})
        result = resolve(catalog, "CSE", "2231H")
        assert result.not_found is False

    def test_filtered_pass_never_takes_arbitrary_candidate(self):
        catalog = FakeCatalog({
            (1258, True): [course("ECE", "2020")],
            (1258, False): [],
        })
        result = resolve(catalog, "CSE", "2231", terms=(1258,))
        assert result.not_found is True
        assert catalog.calls == [("CSE", "2231", 1258, True), ("CSE", "2231", 1258, False)]

    def test_unfiltered_pass_prefers_core_match(self):
        catalog = FakeCatalog({
            (1258, True): [],
            (1258, False): [course("ECE", "2020"), course("CSE", "2231H", course_id="77")],
        })
        assert resolve(catalog, "CSE", "2231").course_id == "77"

    def test_unfiltered_pass_falls_back_to_first_candidate(self):
        catalog = FakeCatalog({
            (1258, True): [course("ECE", "2020")],
            (1258, False): [course("ECE", "2020", course_id="first"), course("ECE", "3020")],
        })
        result = resolve(catalog, "CSE", "2231")
        assert result.course_id == "first"
        assert result.subject == "ECE"
        assert result.not_found is False

    def test_unfiltered_query_skipped_after_filtered_match(self):
        catalog = FakeCatalog({(1258, True): [course("CSE", "2231")]})
        resolve(catalog, "CSE", "2231")
        assert catalog.calls == [("CSE", "2231", 1258, True)]


class TestTermFallback:

    def test_empty_terms_fall_through_in_order(self):
        catalog = FakeCatalog({(1252, True): [course("CSE", "2231", course_id="sp25")]})
        result = resolve(catalog, "CSE", "2231")
        assert result.course_id == "sp25"
        assert [c[2:] for c in catalog.calls] == [
            (1258, True), (1258, False),
            (1254, True), (1254, False),
            (1252, True),
        ]

    @pytest.mark.parametrize("error", [
        CatalogTransportError("reset"),
        CatalogHTTPError(503, "Service Unavailable", "down"),
        CatalogContentTypeError("text/html", "<html>login</html>"),
    ])
    def test_failed_term_is_skipped(self, error):
        catalog = FakeCatalog({
            (1258, True): error,
            (1254, True): [course("CSE", "2231", course_id="su25")],
        })
        assert resolve(catalog, "CSE", "2231").course_id == "su25"

    def test_failure_in_unfiltered_query_skips_to_next_term(self):
        catalog = FakeCatalog({
            (1258, False): CatalogTransportError("timeout"),
            (1254, False): [course("CSE", "2231", course_id="su25")],
        })
        assert resolve(catalog, "CSE", "2231").course_id == "su25"

    def test_unexpected_error_skips_to_next_term(self):
        catalog = FakeCatalog({
            (1258, True): RuntimeError("decoder blew up"),
            (1254, True): [course("CSE", "2231", course_id="su25")],
        })
        assert resolve(catalog, "CSE", "2231").course_id == "su25"
        assert (1258, False) not in [c[2:] for c in catalog.calls]

    def test_every_term_failing_is_not_found(self, transport_error):
        catalog = FakeCatalog({(term, flag): transport_error for term in TERMS for flag in (True, False)})
        result = resolve(catalog, "cse", " 3345 ")
        assert result.to_dict() == {
            "subject": "CSE",
            "classNumber": "3345",
            "title": "Course not found",
            "units": 0,
            "description": "",
            "courseID": None,
            "notFound": True,
        }

    def test_only_configured_terms_are_queried(self):
        catalog = FakeCatalog()
        resolve(catalog, "CSE", "9999")
        assert {c[2] for c in catalog.calls} == set(TERMS)
        assert len(catalog.calls) == 2 * len(TERMS)


class TestConversion:

    def test_units_precedence(self):
        record = course("A", "1", units=4)
        record.update(units=3, minUnits=1)
        assert to_resolved_course(record, "A", "1").units == 4
        record = {"subject": "A", "catalogNumber": "1", "units": 3, "minUnits": 1, "id": 5}
        assert to_resolved_course(record, "A", "1").units == 3
        record = {"subject": "A", "catalogNumber": "1", "minUnits": 1, "id": 5}
        assert to_resolved_course(record, "A", "1").units == 1

    def test_zero_max_units_wins(self):
        record = {"subject": "A", "catalogNumber": "1", "maxUnits": 0, "units": 3, "courseId": "x"}
        assert to_resolved_course(record, "A", "1").units == 0

    def test_fallback_fields(self):
        record = {"longDesc": "Long title", "longDescription": "Long text", "id": 42}
        resolved = to_resolved_course(record, "CSE", "2231")
        assert resolved.title == "Long title"
        assert resolved.description == "Long text"
        assert resolved.course_id == "42"
        assert (resolved.subject, resolved.class_number) == ("CSE", "2231")
        assert resolved.units == 0

    def test_not_found_tracks_missing_identifier(self):
        resolved = to_resolved_course({"subject": "CSE", "catalogNumber": "1"}, "CSE", "1")
        assert resolved.course_id is None
        assert resolved.not_found is True


def test_resolve_is_idempotent():
    catalog = FakeCatalog({(1254, False): [course("CSE", "2231H")]})
    first = resolve(catalog, "CSE", "2231")
    second = resolve(catalog, "CSE", "2231")
    assert first == second


def test_resolve_reference_splits_string():
    catalog = FakeCatalog({(1258, True): [course("CSE", "2221", units=4)]})
    result = asyncio.run(CourseResolver(catalog, TERMS).resolve_reference("  CSE   2221 "))
    assert result.units == 4
    assert catalog.calls[0][:2] == ("CSE", "2221")

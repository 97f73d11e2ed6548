"""Response normalization tests.

Covers the shapes Gemini has used for URL context and grounding metadata,
both as plain mappings and as SDK-style attribute objects.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from gemini_mcp.result import (
    GenerationResult,
    ListUrlContext,
    NoUrlContext,
    SingleUrlContext,
    normalize_response,
    parse_url_context,
)

pytestmark = pytest.mark.unit


def _response(text: str = "answer", **candidate: Any) -> dict[str, Any]:
    return {"text": text, "candidates": [candidate]}


# =============================================================================
# URL context classification
# =============================================================================


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, NoUrlContext()),
        ({"url": "http://a.com"}, SingleUrlContext("http://a.com")),
        ([{"url": "http://a.com"}, {}], ListUrlContext(("http://a.com",))),
        (
            {"url_metadata": [{"retrieved_url": "http://b.com"}, {"retrieved_url": None}]},
            ListUrlContext(("http://b.com",)),
        ),
        ({"urlMetadata": [{"retrievedUrl": "http://c.com"}]}, ListUrlContext(("http://c.com",))),
        ({"unexpected": True}, NoUrlContext()),
        ("not-an-object", NoUrlContext()),
        ({"url": 42}, NoUrlContext()),
    ],
)
def test_parse_url_context_shapes(raw: Any, expected: Any) -> None:
    assert parse_url_context(raw) == expected


# =============================================================================
# Normalization
# =============================================================================


def test_single_url_context_object_yields_one_source() -> None:
    result = normalize_response(_response(urlContextMetadata={"url": "http://a.com"}))

    assert result.sources == ("http://a.com",)


def test_url_context_list_skips_entries_without_url() -> None:
    result = normalize_response(
        _response(
            urlContextMetadata=[
                {"url": "http://a.com"},
                {"title": "no url"},
                None,
                {"url": "http://b.com"},
            ]
        )
    )

    assert result.sources == ("http://a.com", "http://b.com")


def test_same_url_across_channels_appears_once() -> None:
    result = normalize_response(
        _response(
            urlContextMetadata={"url": "http://a.com"},
            groundingMetadata={
                "groundingChunks": [
                    {"web": {"uri": "http://a.com"}},
                    {"web": {"uri": "http://b.com"}},
                    {"web": {"uri": "http://b.com"}},
                ]
            },
        )
    )

    assert sorted(result.sources) == ["http://a.com", "http://b.com"]
    assert len(result.sources) == len(set(result.sources))


def test_grounding_chunk_without_web_uri_contributes_nothing() -> None:
    result = normalize_response(
        _response(
            groundingMetadata={
                "groundingChunks": [
                    {},
                    {"web": None},
                    {"web": {"title": "no uri"}},
                    {"retrievedContext": {"uri": "gs://ignored"}},
                ]
            }
        )
    )

    assert result.sources == ()


def test_no_candidates_keeps_text_and_empty_collections() -> None:
    for response in ({"text": "only text"}, {"text": "only text", "candidates": []}):
        result = normalize_response(response)
        assert result == GenerationResult(text="only text")


def test_missing_text_becomes_empty_string() -> None:
    assert normalize_response({"candidates": None}).text == ""
    assert normalize_response({"text": None}).text == ""
    assert normalize_response(None).text == ""


def test_search_suggestion_is_sole_element() -> None:
    result = normalize_response(
        _response(
            groundingMetadata={
                "searchEntryPoint": {"renderedContent": "<div>chips</div>"}
            }
        )
    )

    assert result.search_suggestions == ("<div>chips</div>",)


def test_empty_search_suggestion_is_ignored() -> None:
    result = normalize_response(
        _response(groundingMetadata={"searchEntryPoint": {"renderedContent": ""}})
    )

    assert result.search_suggestions == ()


def test_whitespace_search_suggestion_is_kept_verbatim() -> None:
    result = normalize_response(
        _response(groundingMetadata={"searchEntryPoint": {"renderedContent": "  "}})
    )

    assert result.search_suggestions == ("  ",)


@pytest.mark.parametrize(
    "candidate",
    [
        {"groundingMetadata": "garbage"},
        {"groundingMetadata": {"groundingChunks": "garbage"}},
        {"groundingMetadata": {"groundingChunks": [1, "two", None]}},
        {"urlContextMetadata": 12},
        {"groundingMetadata": {"searchEntryPoint": ["x"]}},
    ],
)
def test_malformed_metadata_degrades_to_no_sources(candidate: dict[str, Any]) -> None:
    result = normalize_response({"text": "t", "candidates": [candidate]})

    assert result.sources == ()
    assert result.search_suggestions == ()
    assert result.text == "t"


def test_sdk_attribute_objects_are_supported() -> None:
    """google-genai responses expose snake_case attributes, not mapping keys."""
    response = SimpleNamespace(
        text="From the SDK",
        candidates=[
            SimpleNamespace(
                url_context_metadata=SimpleNamespace(
                    url_metadata=[SimpleNamespace(retrieved_url="http://a.com")]
                ),
                grounding_metadata=SimpleNamespace(
                    grounding_chunks=[
                        SimpleNamespace(web=SimpleNamespace(uri="http://b.com")),
                        SimpleNamespace(web=None),
                    ],
                    search_entry_point=SimpleNamespace(rendered_content="<chips/>"),
                ),
            )
        ],
    )

    result = normalize_response(response)

    assert result.text == "From the SDK"
    assert result.sources == ("http://a.com", "http://b.com")
    assert result.search_suggestions == ("<chips/>",)


def test_text_property_that_raises_is_treated_as_empty() -> None:
    class _Response:
        candidates = None

        @property
        def text(self) -> str:
            raise ValueError("no text parts")

    assert normalize_response(_Response()).text == ""


def test_normalization_is_stable_across_runs() -> None:
    response = _response(
        urlContextMetadata=[{"url": "http://b.com"}, {"url": "http://a.com"}],
        groundingMetadata={"groundingChunks": [{"web": {"uri": "http://c.com"}}]},
    )

    assert normalize_response(response) == normalize_response(response)

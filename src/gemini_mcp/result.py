"""Response normalization: raw Gemini responses to a stable GenerationResult.

Upstream metadata changes shape across API versions: URL context arrives as a
single object, a list, or the SDK's ``url_metadata`` wrapper, and any nested
field may be missing. Raw payloads are probed once at this boundary and
everything downstream works with the typed values below.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = [
    "GenerationResult",
    "ListUrlContext",
    "NoUrlContext",
    "SingleUrlContext",
    "UrlContext",
    "normalize_response",
    "parse_url_context",
]


@dataclass(frozen=True)
class GenerationResult:
    """Normalized answer with the sources it was grounded on."""

    text: str = ""
    #: Distinct URLs, first-seen order.
    sources: tuple[str, ...] = ()
    search_suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class NoUrlContext:
    """No usable URL context metadata."""


@dataclass(frozen=True)
class SingleUrlContext:
    url: str


@dataclass(frozen=True)
class ListUrlContext:
    urls: tuple[str, ...]


UrlContext = NoUrlContext | SingleUrlContext | ListUrlContext


def _field(obj: Any, *names: str) -> Any:
    """Read the first present field from a mapping or an SDK object."""
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, Mapping):
            value = obj.get(name)
        else:
            value = getattr(obj, name, None)
        if value is not None:
            return value
    return None


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _url_of(entry: Any) -> str | None:
    url = _field(entry, "url", "retrieved_url", "retrievedUrl")
    if isinstance(url, str) and url:
        return url
    return None


def parse_url_context(raw: Any) -> UrlContext:
    """Classify raw URL context metadata into the tagged union."""
    if raw is None:
        return NoUrlContext()
    if isinstance(raw, (list, tuple)):
        return ListUrlContext(tuple(u for u in map(_url_of, raw) if u))

    single = _url_of(raw)
    if single is not None:
        return SingleUrlContext(single)

    # google-genai wraps entries as UrlContextMetadata(url_metadata=[...])
    entries = _field(raw, "url_metadata", "urlMetadata")
    if isinstance(entries, (list, tuple)):
        return ListUrlContext(tuple(u for u in map(_url_of, entries) if u))
    return NoUrlContext()


def _url_context_sources(context: UrlContext) -> tuple[str, ...]:
    if isinstance(context, SingleUrlContext):
        return (context.url,)
    if isinstance(context, ListUrlContext):
        return context.urls
    return ()


def _grounding_sources(grounding: Any) -> list[str]:
    sources: list[str] = []
    chunks = _field(grounding, "grounding_chunks", "groundingChunks")
    for chunk in _as_list(chunks):
        uri = _field(_field(chunk, "web"), "uri")
        if isinstance(uri, str) and uri:
            sources.append(uri)
    return sources


def _search_suggestions(grounding: Any) -> tuple[str, ...]:
    entry_point = _field(grounding, "search_entry_point", "searchEntryPoint")
    rendered = _field(entry_point, "rendered_content", "renderedContent")
    if isinstance(rendered, str) and rendered:
        return (rendered,)
    return ()


def _extract_text(response: Any) -> str:
    """Extract the top-level text verbatim; unreadable text becomes ''."""
    try:
        text = _field(response, "text")
    except Exception:
        # The SDK's ``text`` property can raise on unusual part layouts.
        return ""
    return text if isinstance(text, str) else ""


def _first_candidate(response: Any) -> Any:
    try:
        candidates = _field(response, "candidates")
    except Exception:
        return None
    items = _as_list(candidates)
    return items[0] if items else None


def normalize_response(response: Any) -> GenerationResult:
    """Build a GenerationResult from a raw response.

    Never raises on malformed metadata: missing or oddly shaped fields simply
    contribute no sources.
    """
    text = _extract_text(response)

    candidate = _first_candidate(response)
    if candidate is None:
        return GenerationResult(text=text)

    url_context = parse_url_context(
        _field(candidate, "url_context_metadata", "urlContextMetadata")
    )
    grounding = _field(candidate, "grounding_metadata", "groundingMetadata")

    merged = [*_url_context_sources(url_context), *_grounding_sources(grounding)]
    return GenerationResult(
        text=text,
        sources=tuple(dict.fromkeys(merged)),
        search_suggestions=_search_suggestions(grounding),
    )

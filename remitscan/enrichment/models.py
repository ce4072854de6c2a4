from dataclasses import dataclass, field


@dataclass(frozen=True)
class Citation:
    """A web source backing the enrichment narrative."""

    uri: str
    title: str


@dataclass(frozen=True)
class EnrichmentResult:
    """Narrative about the beneficiary and its bank, plus cited sources."""

    narrative: str
    sources: tuple[Citation, ...] = ()


@dataclass(frozen=True)
class RawCitation:
    """Citation metadata as reported by the backend; either part may be missing."""

    uri: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class SearchResponse:
    """Raw output of an enrichment backend call."""

    text: str | None
    citations: list[RawCitation] = field(default_factory=list)

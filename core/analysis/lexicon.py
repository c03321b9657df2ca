"""Static word lists used by the Document Analyzer.

Keeping the lexicon as plain data lets callers swap in a custom vocabulary
(for a different practice area, or for tests) without touching the scanning
logic.

Usage:
    from core.analysis.lexicon import Lexicon, DEFAULT_LEXICON
    analyzer = DocumentAnalyzer(lexicon=Lexicon(legal_terms=("tenant", "lease")))
"""

from dataclasses import dataclass, field


# Keyword taxonomy for key point extraction. Order matters: key points are
# emitted sentence by sentence, then category, then keyword.
KEYWORD_TAXONOMY: dict[str, tuple[str, ...]] = {
    "obligations": ("must", "shall", "required to", "obligated to"),
    "rights": ("may", "entitled to", "has the right to", "can"),
    "penalties": ("penalty", "fine", "breach", "violation", "damages"),
    "dates": ("on or before", "within", "by", "effective date", "expiration"),
    "parties": ("party", "parties", "hereinafter", "referred to as"),
}

LEGAL_TERMS: tuple[str, ...] = (
    "agreement",
    "contract",
    "party",
    "obligation",
    "breach",
    "indemnify",
    "liability",
    "damages",
    "force majeure",
    "arbitration",
    "governing law",
    "jurisdiction",
    "entire agreement",
    "amendment",
    "severability",
)

POSITIVE_WORDS: tuple[str, ...] = ("agree", "beneficial", "clear", "fair", "reasonable")
NEGATIVE_WORDS: tuple[str, ...] = ("breach", "liable", "penalty", "violation", "dispute")

# Placeholder markers written by the generator into unfilled sections
PLACEHOLDER_OPEN = "[Add"
PLACEHOLDER_CLOSE = "here]"
PLACEHOLDER_TEMPLATE = "[Add {section} content here]"

LIABILITY_MARKER = "liable"
OPTIONAL_LANGUAGE_MARKER = "may"

DEFAULT_AUTHOR = "System"


def placeholder_for(section: str) -> str:
    """Return the filler text for a section that has no content yet."""
    return PLACEHOLDER_TEMPLATE.format(section=section)


def has_placeholder(text: str) -> bool:
    """Check whether text still holds unfilled placeholder content."""
    return PLACEHOLDER_OPEN in text and PLACEHOLDER_CLOSE in text


@dataclass(frozen=True)
class Lexicon:
    """Bundle of word lists the analyzer scans for."""
    keyword_taxonomy: dict[str, tuple[str, ...]] = field(
        default_factory=lambda: dict(KEYWORD_TAXONOMY)
    )
    legal_terms: tuple[str, ...] = LEGAL_TERMS
    positive_words: tuple[str, ...] = POSITIVE_WORDS
    negative_words: tuple[str, ...] = NEGATIVE_WORDS
    liability_marker: str = LIABILITY_MARKER
    optional_language_marker: str = OPTIONAL_LANGUAGE_MARKER


DEFAULT_LEXICON = Lexicon()

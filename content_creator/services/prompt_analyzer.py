"""
Rule-based prompt analysis.

Classifies a prompt into a topical category, picks representative keywords and
estimates complexity and tone. Matching is plain substring containment on the
lower-cased prompt, so "apps" or "application" both count as "app".
"""
import logging
from typing import Sequence

from content_creator.models.analysis_model import PromptAnalysis

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "topic"
MAX_KEYWORDS = 5

# Checked in insertion order, first match wins.
CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technology": ("app", "website", "software", "program", "code", "system", "platform", "database", "api", "algorithm"),
    "business": ("business", "company", "startup", "marketing", "strategy", "plan", "project", "team", "product", "service"),
    "creative": ("story", "poem", "art", "design", "creative", "imagination", "fantasy", "adventure", "character", "world"),
    "education": ("learning", "study", "education", "course", "lesson", "tutorial", "guide", "explanation", "concept", "theory"),
    "lifestyle": ("health", "fitness", "cooking", "travel", "fashion", "beauty", "home", "garden", "hobby", "sport"),
}

KEYWORD_STOP_WORDS = frozenset({
    "what", "how", "why", "when", "where", "this", "that", "with",
    "from", "into", "during", "before", "after", "above", "below",
})

HIGH_COMPLEXITY_MARKERS = ("advanced", "complex")
ENTHUSIASTIC_MARKERS = ("fun", "creative", "exciting")
FORMAL_MARKERS = ("serious", "professional", "formal")


def tokenize(prompt: str) -> list[str]:
    """Trim, lower-case and split a raw prompt, keeping tokens longer than 2 chars"""
    return [word for word in prompt.strip().lower().split(" ") if len(word) > 2]


def classify_category(prompt: str) -> str:
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in prompt for keyword in keywords):
            return category
    return "uncategorized"


def extract_keywords(tokens: Sequence[str]) -> list[str]:
    keywords = [word for word in tokens if len(word) > 3 and word not in KEYWORD_STOP_WORDS]
    return keywords[:MAX_KEYWORDS]


def estimate_complexity(prompt: str, tokens: Sequence[str]) -> str:
    if len(tokens) > 10 or any(marker in prompt for marker in HIGH_COMPLEXITY_MARKERS):
        return "high"
    if len(tokens) < 5:
        return "low"
    return "medium"


def detect_tone(prompt: str) -> str:
    if any(marker in prompt for marker in ENTHUSIASTIC_MARKERS):
        return "enthusiastic"
    if any(marker in prompt for marker in FORMAL_MARKERS):
        return "formal"
    return "neutral"


def analyze(prompt: str, tokens: Sequence[str]) -> PromptAnalysis:
    """Build a PromptAnalysis from a lower-cased prompt and its tokens.

    The caller is expected to pass the output of tokenize() for the same
    prompt. No input raises: an empty prompt yields the default topic,
    the "uncategorized" category and no keywords.
    """
    analysis = PromptAnalysis(
        topic=tokens[0] if tokens else DEFAULT_TOPIC,
        category=classify_category(prompt),
        keywords=tuple(extract_keywords(tokens)),
        complexity=estimate_complexity(prompt, tokens),
        tone=detect_tone(prompt),
    )
    logger.debug(f"Prompt analysis: {analysis}")
    return analysis

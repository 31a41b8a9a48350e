import logging

from content_creator.agents.templates import TEMPLATES, COMPLEXITY_PHRASES
from content_creator.models.analysis_model import PromptAnalysis
from content_creator.utils.config import settings

logger = logging.getLogger(__name__)

TOP_KEYWORD_COUNT = 3


def select_template(analysis: PromptAnalysis, style: str) -> str:
    """Pick the category template for a style, or the style's default"""
    if style not in TEMPLATES:
        logger.warning(f"Unknown text type '{style}', using '{settings.DEFAULT_TEXT_TYPE}'")
        style = settings.DEFAULT_TEXT_TYPE
    style_templates = TEMPLATES[style]
    return style_templates.get(analysis.category, style_templates["default"])


def synthesize(prompt: str, analysis: PromptAnalysis, style: str) -> str:
    """Fill the selected template with the prompt and its analysis.

    `prompt` is used with its original casing. The result depends only on the
    arguments, so repeated calls return identical text.
    """
    template = select_template(analysis, style)
    phrases = COMPLEXITY_PHRASES["high" if analysis.complexity == "high" else "standard"]
    return template.format(
        prompt=prompt,
        topic=analysis.topic,
        keywords=", ".join(analysis.keywords),
        top_keywords=", ".join(analysis.keywords[:TOP_KEYWORD_COUNT]),
        **phrases,
    )

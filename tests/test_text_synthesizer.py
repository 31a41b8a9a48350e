import pytest

from content_creator.agents.templates import TEMPLATES
from content_creator.models.analysis_model import PromptAnalysis
from content_creator.services.prompt_analyzer import analyze, tokenize
from content_creator.services.text_synthesizer import select_template, synthesize


def analysis_for(prompt: str) -> PromptAnalysis:
    return analyze(prompt.strip().lower(), tokenize(prompt))


def test_professional_technology_variant():
    prompt = "Build a mobile app"
    text = synthesize(prompt, analysis_for(prompt), "professional")
    assert text.startswith("🔧 **Professional Technical Analysis: Build a mobile app**")
    assert "Build a mobile app" in text
    assert "handle standard requirements" in text
    assert "Estimated 3-6 months" in text


def test_professional_high_complexity_wording():
    analysis = PromptAnalysis(topic="platform", category="technology", keywords=("platform",), complexity="high")
    text = synthesize("Advanced platform", analysis, "professional")
    assert "complex, enterprise-level requirements" in text
    assert "Estimated 6-12 months" in text
    assert "Senior development team with specialized skills" in text


def test_missing_category_template_uses_style_default():
    analysis = PromptAnalysis(topic="fitness", category="lifestyle", keywords=("fitness", "routine"))
    text = synthesize("Fitness routine", analysis, "academic")
    assert text
    assert select_template(analysis, "academic") is TEMPLATES["academic"]["default"]
    assert "the relevant academic discipline" in text
    assert "particularly in areas of fitness, routine." in text


def test_creative_category_has_dedicated_creative_template():
    analysis = PromptAnalysis(topic="story", category="creative", keywords=("story", "dragons"))
    assert synthesize("A story about dragons", analysis, "creative").startswith("🎭 **Creative Expression:")
    assert synthesize("A story about dragons", analysis, "professional").startswith("📋 **Professional Analysis:")


def test_casual_template_lists_only_three_keywords():
    analysis = PromptAnalysis(
        topic="startup",
        category="business",
        keywords=("startup", "growth", "funding", "pitch", "investors"),
    )
    text = synthesize("Startup growth", analysis, "casual")
    assert "• startup, growth, funding are your main focus areas" in text
    assert "pitch" not in text


def test_empty_prompt_renders_default_template():
    text = synthesize("", analysis_for(""), "creative")
    assert text.startswith("✨ **Creative Exploration: **")
    assert "topic isn't just a topic" in text


def test_unknown_style_falls_back_to_creative():
    analysis = analysis_for("Build a mobile app")
    assert synthesize("Build a mobile app", analysis, "poetic") == synthesize("Build a mobile app", analysis, "creative")


@pytest.mark.parametrize("style", ["creative", "professional", "casual", "academic"])
@pytest.mark.parametrize("category", ["technology", "business", "creative", "education", "lifestyle", "uncategorized"])
def test_every_combination_fills_all_placeholders(style, category):
    analysis = PromptAnalysis(topic="garden", category=category, keywords=("garden", "plants"))
    text = synthesize("My {curly} garden", analysis, style)
    assert "My {curly} garden" in text
    assert "{topic}" not in text
    assert "{keywords}" not in text


def test_synthesize_is_repeatable():
    prompt = "Plan a fun marketing campaign"
    analysis = analysis_for(prompt)
    assert synthesize(prompt, analysis, "professional") == synthesize(prompt, analysis, "professional")
    assert synthesize(prompt, analysis, "casual") == synthesize(prompt, analysis, "casual")


def test_creative_templates_keep_their_wording():
    analysis = PromptAnalysis(topic="build", category="technology", keywords=("build", "mobile"))
    text = synthesize("Build a mobile app", analysis, "creative")
    assert "build isn't just a concept—it's a living, breathing digital ecosystem" in text
    assert "build, mobile aren't just features—they're the colors" in text
    assert "more than words on a screen—it becomes a gateway to infinite possibilities. ✨" in text

import pytest

from content_creator.agents import text_agent
from content_creator.agents.text_agent import TextAgent
from content_creator.services.scoring_service import ScoringService
from content_creator.utils.formatter import strip_markup, to_display_html


@pytest.mark.asyncio
async def test_generation_workflow_produces_text_and_html():
    agent = TextAgent()

    result = await agent.process_generation_request("  Launch a startup  ", "casual")

    assert result["error"] is None
    assert result["text_type"] == "casual"
    assert result["analysis"].category == "business"
    assert result["analysis"].topic == "launch"
    assert result["text"].startswith("💼 **Hey business-minded friend!**")
    assert "So you want to know about Launch a startup?" in result["text"]
    assert "\n" not in result["html"]
    assert "<br><br>" in result["html"]
    assert 0.0 <= result["readability_score"] <= 100.0
    assert result["word_count"] > 50


@pytest.mark.asyncio
async def test_scoring_failure_is_recorded_with_fallbacks(monkeypatch):
    agent = TextAgent()

    def broken(self, text):
        raise RuntimeError("textstat unavailable")

    monkeypatch.setattr(ScoringService, "count_words", broken)

    result = await agent.process_generation_request("Build a mobile app", "academic")

    assert result["error"] == "Score calculation failed: textstat unavailable"
    assert result["readability_score"] == 50.0
    assert result["word_count"] == len(result["text"].split())
    assert result["text"].startswith("🎓 **Academic Research: Build a mobile app**")


def test_display_html_converts_escaped_and_real_line_breaks():
    assert to_display_html("one\\ntwo\nthree") == "one<br>two<br>three"


def test_strip_markup_removes_bold_markers():
    assert strip_markup("**The Vision:** ahead") == "The Vision: ahead"


def test_readability_of_blank_text_is_neutral():
    assert ScoringService().calculate_flesch_reading_ease("   ") == 50.0


def test_word_count_ignores_markup():
    assert ScoringService().count_words("**Hello** world") == 2


@pytest.mark.asyncio
async def test_html_escapes_markup_from_the_prompt():
    agent = TextAgent()

    result = await agent.process_generation_request("<script>alert(1)</script> <img src=x onerror=alert(1)> app", "casual")

    assert "<script>alert(1)</script>" in result["text"]
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in result["html"]
    assert "<script" not in result["html"]
    assert "<img" not in result["html"]
    assert "<br>" in result["html"]


def test_display_html_escapes_before_adding_line_breaks():
    assert to_display_html("<b>bold</b>\n\"quoted\"") == "&lt;b&gt;bold&lt;/b&gt;<br>&quot;quoted&quot;"


@pytest.mark.asyncio
async def test_analysis_failure_falls_back_to_default_template(monkeypatch):
    agent = TextAgent()

    def broken(prompt, tokens):
        raise RuntimeError("bad table")

    monkeypatch.setattr(text_agent, "analyze", broken)

    result = await agent.process_generation_request("Build a mobile app", "professional")

    assert result["error"] == "Prompt analysis failed: bad table"
    assert result["analysis"].category == "uncategorized"
    assert result["analysis"].topic == "topic"
    assert result["text"].startswith("📋 **Professional Analysis: Build a mobile app**")


@pytest.mark.asyncio
async def test_synthesis_failure_falls_back_to_prompt(monkeypatch):
    agent = TextAgent()

    def broken(prompt, analysis, style):
        raise KeyError("missing placeholder")

    monkeypatch.setattr(text_agent, "synthesize", broken)

    result = await agent.process_generation_request("  Build a mobile app  ", "creative")

    assert result["error"] == "Text generation failed: 'missing placeholder'"
    assert result["text"] == "Build a mobile app"
    assert result["html"] == "Build a mobile app"
    assert result["word_count"] == 4

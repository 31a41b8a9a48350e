import asyncio
from typing import Any, Optional, TypedDict
from langgraph.graph import StateGraph, END
from content_creator.models.analysis_model import PromptAnalysis
from content_creator.services.prompt_analyzer import DEFAULT_TOPIC, analyze, tokenize
from content_creator.services.scoring_service import ScoringService
from content_creator.services.text_synthesizer import synthesize
from content_creator.utils.config import settings
from content_creator.utils.formatter import to_display_html
import logging

logger = logging.getLogger(__name__)

class TextAgentState(TypedDict):
    prompt: str
    text_type: str
    clean_prompt: str
    tokens: list[str]
    analysis: Optional[PromptAnalysis]
    text: str
    html: str
    readability_score: float
    word_count: int
    error: Optional[str]

class TextAgent:
    def __init__(self):
        self.scoring_service = ScoringService()
        self.graph = self._build_graph()

    def _build_graph(self):
        """Build the LangGraph workflow"""
        workflow = StateGraph(TextAgentState)
        workflow.add_node("prepare_prompt", self._prepare_prompt)
        workflow.add_node("analyze_prompt", self._analyze_prompt)
        workflow.add_node("synthesize_text", self._synthesize_text)
        workflow.add_node("score_text", self._score_text)
        workflow.add_node("format_output", self._format_output)
        workflow.add_edge("prepare_prompt", "analyze_prompt")
        workflow.add_edge("analyze_prompt", "synthesize_text")
        workflow.add_edge("synthesize_text", "score_text")
        workflow.add_edge("score_text", "format_output")
        workflow.add_edge("format_output", END)
        workflow.set_entry_point("prepare_prompt")

        return workflow.compile()

    async def _prepare_prompt(self, state: TextAgentState) -> TextAgentState:
        """Trim the prompt and derive the lower-cased form and its tokens"""
        state["prompt"] = state["prompt"].strip()
        state["clean_prompt"] = state["prompt"].lower()
        state["tokens"] = tokenize(state["prompt"])
        return state

    async def _analyze_prompt(self, state: TextAgentState) -> TextAgentState:
        try:
            logger.info("Analyzing prompt")
            state["analysis"] = analyze(state["clean_prompt"], state["tokens"])
            logger.info(
                f"Prompt classified as {state['analysis'].category} "
                f"({state['analysis'].complexity} complexity, {state['analysis'].tone} tone)"
            )
        except Exception as e:
            logger.error(f"Error analyzing prompt: {e}")
            state["error"] = f"Prompt analysis failed: {str(e)}"
            # Uncategorized analysis selects each style's default template
            state["analysis"] = PromptAnalysis(topic=DEFAULT_TOPIC)
        return state

    async def _synthesize_text(self, state: TextAgentState) -> TextAgentState:
        """Generate the text after the simulated generation delay"""
        if settings.SIMULATED_LATENCY_SECONDS > 0:
            await asyncio.sleep(settings.SIMULATED_LATENCY_SECONDS)
        try:
            logger.info(f"Synthesizing {state['text_type']} text")
            state["text"] = synthesize(state["prompt"], state["analysis"], state["text_type"])
        except Exception as e:
            logger.error(f"Error synthesizing text: {e}")
            state["error"] = f"Text generation failed: {str(e)}"
            state["text"] = state["prompt"]
        return state

    async def _score_text(self, state: TextAgentState) -> TextAgentState:
        """Calculate readability and length of the generated text"""
        try:
            state["readability_score"] = self.scoring_service.calculate_flesch_reading_ease(state["text"])
            state["word_count"] = self.scoring_service.count_words(state["text"])
            logger.info(f"Scores calculated - Readability: {state['readability_score']:.2f}, Words: {state['word_count']}")
        except Exception as e:
            logger.error(f"Error calculating scores: {e}")
            state["error"] = f"Score calculation failed: {str(e)}"
            state["readability_score"] = settings.DEFAULT_READABILITY_SCORE
            state["word_count"] = len(state["text"].split())

        return state

    async def _format_output(self, state: TextAgentState) -> TextAgentState:
        """Format the final output"""
        logger.info("Formatting output")
        state["html"] = to_display_html(state["text"])
        return state

    async def process_generation_request(
        self,
        prompt: str,
        text_type: str = settings.DEFAULT_TEXT_TYPE
    ) -> dict[str, Any]:
        """Process a text generation request through the agent workflow"""
        state: TextAgentState = {
            "prompt": prompt,
            "text_type": text_type,
            "clean_prompt": "",
            "tokens": [],
            "analysis": None,
            "text": "",
            "html": "",
            "readability_score": 0.0,
            "word_count": 0,
            "error": None
        }

        final_state = await self.graph.ainvoke(state)

        return {
            "text": final_state["text"],
            "html": final_state["html"],
            "text_type": final_state["text_type"],
            "analysis": final_state["analysis"],
            "readability_score": final_state["readability_score"],
            "word_count": final_state["word_count"],
            "error": final_state.get("error")
        }

from fastapi import APIRouter, Depends, HTTPException
import logging

from content_creator.auth.authentication import verify_api_key
from content_creator.models.request_models import analyzePromptRequest, generateTextRequest
from content_creator.models.response_model import promptAnalysisResponse, textGenerationResponse, textTypesResponse
from content_creator.agents.text_agent import TextAgent
from content_creator.services.prompt_analyzer import analyze, tokenize
from content_creator.utils.config import settings

logger = logging.getLogger(__name__)

router = APIRouter()


_text_agent = None

def get_text_agent():
    global _text_agent
    if _text_agent is None:
        _text_agent = TextAgent()
    return _text_agent

@router.get("/text-types", response_model=textTypesResponse)
def list_text_types(api_key: str = Depends(verify_api_key)) -> textTypesResponse:
    """
    List the supported writing styles
    """
    return textTypesResponse(text_types=list(settings.TEXT_TYPES), default=settings.DEFAULT_TEXT_TYPE)

@router.post("/analyze-prompt", response_model=promptAnalysisResponse)
def analyze_prompt(
    request: analyzePromptRequest,
    api_key: str = Depends(verify_api_key)
) -> promptAnalysisResponse:
    """
    Classify a prompt and extract its topic, keywords, complexity and tone
    """
    try:
        clean_prompt = request.prompt.strip().lower()
        tokens = tokenize(request.prompt)
        analysis = analyze(clean_prompt, tokens)
        logger.info(f"Prompt analyzed: category={analysis.category}, keywords={len(analysis.keywords)}")
        return promptAnalysisResponse(prompt=request.prompt, tokens=tokens, analysis=analysis)

    except Exception as e:
        logger.error(f"Error analyzing prompt: {e}")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")

@router.post("/generate-text", response_model=textGenerationResponse)
async def generate_text(
    request: generateTextRequest,
    api_key: str = Depends(verify_api_key)
) -> textGenerationResponse:
    """
    Generate styled text from a prompt using the agentic workflow
    """
    if not request.prompt.strip():
        raise HTTPException(status_code=400, detail="Please enter a description for your text")

    try:
        text_agent = get_text_agent()
        result = await text_agent.process_generation_request(
            prompt=request.prompt,
            text_type=request.text_type
        )

        if result.get("error"):
            logger.warning(f"Agent workflow completed with error: {result['error']}")

        response = textGenerationResponse(
            text=result["text"],
            html=result["html"],
            text_type=result["text_type"],
            analysis=result["analysis"],
            readability_score=result["readability_score"],
            word_count=result["word_count"]
        )

        logger.info(f"Successfully generated {response.text_type} text ({response.word_count} words)")
        return response

    except Exception as e:
        logger.error(f"Error generating text: {e}")
        raise HTTPException(status_code=500, detail=f"Text generation failed: {str(e)}")

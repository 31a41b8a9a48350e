from pydantic import BaseModel
from content_creator.models.analysis_model import PromptAnalysis
class promptAnalysisResponse(BaseModel):
    prompt: str
    tokens: list[str]
    analysis: PromptAnalysis
class textGenerationResponse(BaseModel):
    text: str
    html: str
    text_type: str
    analysis: PromptAnalysis
    readability_score: float
    word_count: int
class textTypesResponse(BaseModel):
    text_types: list[str]
    default: str

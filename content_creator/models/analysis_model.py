from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

Category = Literal["technology", "business", "creative", "education", "lifestyle", "uncategorized"]
Complexity = Literal["low", "medium", "high"]
Tone = Literal["neutral", "enthusiastic", "formal"]
TextType = Literal["creative", "professional", "casual", "academic"]


class PromptAnalysis(BaseModel):
    """Derived view of a prompt used to pick and fill a text template"""
    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., description="First meaningful token of the prompt")
    category: Category = Field("uncategorized", description="Topical bucket of the prompt")
    keywords: tuple[str, ...] = Field((), max_length=5, description="Up to five representative tokens")
    complexity: Complexity = "medium"
    tone: Tone = "neutral"

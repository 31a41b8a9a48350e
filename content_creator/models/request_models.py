from pydantic import BaseModel,Field
from content_creator.models.analysis_model import TextType
class analyzePromptRequest(BaseModel):
    prompt:str=Field(...,description="Free-text prompt to analyze")
class generateTextRequest(BaseModel):
    prompt:str=Field(...,description="Description of the text to generate")
    text_type:TextType=Field("creative",description="Writing style (creative,professional,casual,academic)")

import logging
import textstat
from content_creator.utils.config import settings
from content_creator.utils.formatter import strip_markup

logger = logging.getLogger(__name__)

class ScoringService:
    def calculate_flesch_reading_ease(self, text: str) -> float:
        """Calculate Flesch reading ease, clamped to 0-100"""
        if not text.strip():
            return settings.DEFAULT_READABILITY_SCORE
        try:
            flesch_score=textstat.flesch_reading_ease(strip_markup(text))
            return max(0.0,min(100.0,float(flesch_score)))
        except Exception as e:
            logger.warning(f"Readability scoring failed: {e}")
            return settings.DEFAULT_READABILITY_SCORE
    def count_words(self,text:str)->int:
        return textstat.lexicon_count(strip_markup(text),removepunct=True)

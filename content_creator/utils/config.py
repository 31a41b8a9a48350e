import os
from dotenv import load_dotenv
load_dotenv()
class Settings:
    API_KEY=os.getenv("API_KEY","content-creator")
    APP_VERSION="1.0.0"
    TEXT_TYPES=("creative","professional","casual","academic")
    DEFAULT_TEXT_TYPE="creative"
    SIMULATED_LATENCY_SECONDS=float(os.getenv("SIMULATED_LATENCY_SECONDS","1.5"))
    DEFAULT_READABILITY_SCORE=50.0

settings=Settings()

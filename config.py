# --- CONFIGURATION ---
# PROJECT_ID, SCHEMA_NAME and REMOTE_CONNECTION are placeholders filled in at
# deployment time, either here or through same-named environment variables.
import os

PROJECT_ID = os.environ.get("PROJECT_ID", "")
SCHEMA_NAME = os.environ.get("SCHEMA_NAME", "")
REMOTE_CONNECTION = os.environ.get("REMOTE_CONNECTION", "")

# Remote model backends
TRANSLATION_REMOTE_SERVICE_TYPE = "CLOUD_AI_TRANSLATE_V3"
TEXT_LLM_ENDPOINT = "gemini-1.5-flash-002"
EMBEDDING_REMOTE_SERVICE_TYPE = "CLOUD_AI_TEXT_EMBEDDING_MODEL_V1"

SENTIMENT_LABELS = (
    "disappointed", "satisfied", "thrilled", "angry", "content",
    "delighted", "underwhelmed", "frustrated", "happy", "impressed",
)
SENTIMENT_ANALYSIS_PROMPT = (
    "Classify the sentiment of the following text as one of the following: "
    "disappointed, satisfied, thrilled, angry, content, delighted, underwhelmed, "
    "frustrated, happy, or impressed. Text:"
)

CONFIG_KEYS = (
    "PROJECT_ID",
    "SCHEMA_NAME",
    "REMOTE_CONNECTION",
    "TRANSLATION_REMOTE_SERVICE_TYPE",
    "TEXT_LLM_ENDPOINT",
    "EMBEDDING_REMOTE_SERVICE_TYPE",
    "SENTIMENT_ANALYSIS_PROMPT",
)
REQUIRED_KEYS = ("PROJECT_ID", "SCHEMA_NAME", "REMOTE_CONNECTION")
# --------------------------------------------------------------------

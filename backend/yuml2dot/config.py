import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

GRAPHVIZ_ENGINE = os.getenv("YUML_GRAPHVIZ_ENGINE", "dot")
WRAP_WIDTH = int(os.getenv("YUML_WRAP_WIDTH", "20"))
LOG_LEVEL = os.getenv("YUML_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("YUML_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

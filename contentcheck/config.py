import os
from dotenv import load_dotenv

load_dotenv()

# ───── Eden AI ─────
EDEN_AI_API_KEY = os.getenv("EDEN_AI_API_KEY", "")
EDEN_AI_BASE_URL = os.getenv("EDEN_AI_BASE_URL", "https://api.edenai.run").rstrip("/")
# 0 disables the timeout and waits on the provider indefinitely
EDEN_AI_TIMEOUT = float(os.getenv("EDEN_AI_TIMEOUT", "60"))

AI_DETECTION_PROVIDER = "winstonai"
PLAGIARISM_PROVIDER = "originalityai"

USE_MOCK_DATA = os.getenv("USE_MOCK_DATA", "false").lower() in ("1", "true", "yes")

# ───── Text thresholds ─────
MIN_WORD_COUNT = 10
IDEAL_MIN_WORDS = 50
IDEAL_MAX_WORDS = 1000

# ───── File support ─────
ALLOWED_EXTENSIONS = {"pdf", "doc", "docx"}
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024)))

# ───── Server ─────
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

from pathlib import Path
import os

# Centralized config for paths, logging and fusion constants

# Allow overriding base/log directories via environment variables
BASE_DIR = Path(os.getenv("MFE_BASE_DIR", Path(__file__).resolve().parents[1]))
LOG_DIR = Path(os.getenv("MFE_LOG_DIR", BASE_DIR / "logs"))
LOG_LEVEL = os.getenv("MFE_LOG_LEVEL", "INFO").upper()
# Rotating file logs are on by default; set MFE_LOG_TO_FILE=0 to keep logs on stderr only
LOG_TO_FILE = os.getenv("MFE_LOG_TO_FILE", "1") in {"1", "true", "True"}

DEFAULT_MOOD = "neutral"

# Fused opinions are never reported as fully certain nor as carrying no information
CONFIDENCE_FLOOR = 0.1
CONFIDENCE_CEILING = 1.0

DEFAULT_CONFIDENCE = 1.0
DEFAULT_WEIGHT = 1.0
DEFAULT_SOURCE = "manual"
# Source used when inputs arrive as loose dicts without one
API_SOURCE = "api"

INPUT_SOURCES = ("manual", "voice", "face", "text", "api")
RESULT_SOURCES = ("single", "fusion", "default", "error")

FUSION_METHOD = "weighted_average"

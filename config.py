import os
from pathlib import Path
from dotenv import load_dotenv

from chances.logic.constants import ProMode, ScoringAlgorithm

load_dotenv()

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "chances" / "data" / "universities.json"

CATALOG_PATH = os.getenv("CATALOG_PATH") or str(DEFAULT_CATALOG_PATH)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

try:
    PRO_MODE = ProMode(os.getenv("PRO_MODE", ProMode.DECOUPLED_BUDGET.value))
except ValueError:
    raise RuntimeError(
        f"PRO_MODE must be one of {[m.value for m in ProMode]}, got {os.getenv('PRO_MODE')!r}"
    )

try:
    DEFAULT_ALGORITHM = ScoringAlgorithm(os.getenv("DEFAULT_ALGORITHM", ScoringAlgorithm.SIMPLE.value))
except ValueError:
    raise RuntimeError(
        f"DEFAULT_ALGORITHM must be one of {[a.value for a in ScoringAlgorithm]}, got {os.getenv('DEFAULT_ALGORITHM')!r}"
    )

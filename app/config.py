from __future__ import annotations

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000

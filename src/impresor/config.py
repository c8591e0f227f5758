from __future__ import annotations

import os
from pathlib import Path

import platformdirs
import yaml
from dotenv import load_dotenv

APP_NAME = "cfdi-impresor"

# Load .env from cwd; values already present in the environment win
load_dotenv()

SAT_VERIFY_URL = (
    "https://verificacfdi.facturaelectronica.sat.gob.mx/default.aspx"
    "?id={id}&re={re}&rr={rr}&tt={tt}&fe={fe}"
)

WRAP_WIDTH = 86
ZEBRA_COLOR = "#CCCCCC"

LOGO_FIT = [260, 260]
QR_FIT = 140

FOOTER_TEXT = "Este documento es una representación impresa de un CFDI"


def get_catalog_override_dir() -> Path:
    """Resolve the directory holding catalog override YAML files.

    Priority: 1) IMPRESOR_CATALOG_DIR env var, 2) dev repo layout,
    3) platformdirs user config directory. Re-evaluated on each call to pick
    up env changes. The directory may not exist; that means no overrides.
    """
    from_env = os.environ.get("IMPRESOR_CATALOG_DIR")
    if from_env:
        return Path(from_env)
    # Development layout: src/impresor/config.py -> ../../.. = project root
    project_root = Path(__file__).resolve().parent.parent.parent
    candidate = project_root / "catalogs"
    if candidate.is_dir():
        return candidate
    return Path(platformdirs.user_config_dir(APP_NAME)) / "catalogs"


def load_yaml(path: Path) -> dict:
    """Load and parse a YAML file, returning the top-level dict ({} when empty)."""
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}

"""
gridtable shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

_KNOWN_KEYS = (
    "GRIDTABLE_LOG",
    "GRIDTABLE_JSON_INDENT",
    "GRIDTABLE_BORDER",
    "GRIDTABLE_MCP_RESPONSE_MODE",
)


def load_env():
    """Read KEY=VALUE pairs from .env, then let the process environment win."""
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key in _KNOWN_KEYS:
        if key in os.environ:
            env[key] = os.environ[key]
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "1.0.0"

# In-band token meaning "use this column's default value" during ingestion.
DEFAULT = "__DEFAULT__"

CSV_EXTENSIONS = frozenset({".csv"})
JSON_EXTENSIONS = frozenset({".json"})

VALID_FORMATS = ("table", "json", "csv")
VALID_ALIGNMENTS = ("left", "right", "center")
VALID_MCP_RESPONSE_MODES = {"legacy", "envelope"}

CONTRACT_SCHEMA_VERSION = "1.0"

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env)
# ---------------------------------------------------------------------------

env = load_env()

LOG_ENABLED = _env_bool("GRIDTABLE_LOG", False)
JSON_INDENT = max(0, _env_int("GRIDTABLE_JSON_INDENT", 2))
BORDER_DEFAULT = _env_bool("GRIDTABLE_BORDER", True)

MCP_RESPONSE_MODE = env.get("GRIDTABLE_MCP_RESPONSE_MODE", "legacy").strip().lower()
if MCP_RESPONSE_MODE not in VALID_MCP_RESPONSE_MODES:
    MCP_RESPONSE_MODE = "legacy"

# ---------------------------------------------------------------------------
# Runtime flags (set by the CLI)
# ---------------------------------------------------------------------------

RUNTIME_QUIET = False
RUNTIME_VERBOSE = False

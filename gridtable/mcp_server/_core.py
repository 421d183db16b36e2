"""Core helpers: response contract and error conversion for MCP tools."""

from __future__ import annotations

from gridtable import config
from gridtable.config import CONTRACT_SCHEMA_VERSION
from gridtable.exceptions import TableError, TableFileError


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope."""
    return {
        "ok": False,
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "error": message,
        "error_detail": {
            "type": error_type,
            "message": message,
        },
    }


def _finalize_tool_result(result):
    """Finalize tool response based on the configured MCP response mode.

    Modes:
        - legacy (default): dicts gain contract metadata (ok/schema_version).
        - envelope: always return {"ok", "schema_version", "data"} for success.
    """
    if isinstance(result, dict) and result.get("ok") is False:
        return result
    if config.MCP_RESPONSE_MODE == "envelope":
        return {"ok": True, "schema_version": CONTRACT_SCHEMA_VERSION, "data": result}
    if isinstance(result, dict):
        out = dict(result)
        out.setdefault("ok", True)
        out.setdefault("schema_version", CONTRACT_SCHEMA_VERSION)
        return out
    return result


def _call(fn, *args, **kwargs):
    """Run a tool body, converting table errors to contract error dicts."""
    try:
        return _finalize_tool_result(fn(*args, **kwargs))
    except TableFileError as e:
        return _contract_error(str(e), "file")
    except TableError as e:
        return _contract_error(str(e), "error")
    except (OSError, ValueError) as e:
        return _contract_error(f"Unexpected error: {e}", "error")

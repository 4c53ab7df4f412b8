# exporters.py
import io
import json
import logging
import math

import numpy as np
import pandas as pd

from presets import CATEGORIES, Preset

logger = logging.getLogger(__name__)

PRESET_COLUMNS = ["category", "id", "label", "cost", "iconUrl", "isCustom"]


def export_projection_series(result) -> tuple[str, bytes]:
    df = result.to_frame()
    return "projection.csv", df.to_csv(index=False).encode()


def _json_default(o):
    # Handle numpy arrays & scalars cleanly for JSON
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, (np.float32, np.float64, np.int32, np.int64)):
        return o.item()
    # Let json raise for anything else unexpected
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def _finite(obj):
    # JSON has no infinity; an endless runway is written as null
    if isinstance(obj, float) and math.isinf(obj):
        return None
    if isinstance(obj, dict):
        return {k: _finite(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_finite(v) for v in obj]
    return obj


def export_config(cfg_dict: dict) -> tuple[str, bytes]:
    """
    Export the current inputs to JSON.
    Handles numpy arrays/scalars; infinities become null.
    """
    blob = json.dumps(_finite(cfg_dict), indent=2, default=_json_default)
    return "config.json", blob.encode()


def export_custom_presets(presets: list[Preset]) -> tuple[str, bytes]:
    """Custom presets only, one row each. Raises ValueError when there is nothing to export."""
    custom = [p for p in presets if p.is_custom]
    if not custom:
        raise ValueError("No custom presets to export!")
    df = pd.DataFrame([{
        "category": p.category,
        "id": p.id,
        "label": p.label,
        "cost": p.cost,
        "iconUrl": p.icon_url or "",
        "isCustom": "true",
    } for p in custom], columns=PRESET_COLUMNS)
    logger.info("exporting %d custom presets", len(custom))
    return "lifestyle_presets.csv", df.to_csv(index=False).encode()


def import_custom_presets(data) -> dict[str, list[Preset]]:
    """
    Parse a presets CSV (as written by export_custom_presets) into {category: [Preset]}.
    Accepts bytes or str. Rows with an unknown category are skipped.
    """
    text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else (data or "")
    if not text.strip():
        raise ValueError("File is empty.")

    df = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False, skip_blank_lines=True)
    missing = [c for c in ["category", "id", "label", "cost"] if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    out: dict[str, list[Preset]] = {}
    for row in df.to_dict("records"):
        cat = str(row["category"]).strip()
        if cat not in CATEGORIES:
            logger.warning("skipping preset %r with unknown category %r", row["id"], cat)
            continue
        try:
            cost = float(row["cost"])
        except (TypeError, ValueError):
            cost = math.nan
        out.setdefault(cat, []).append(Preset(
            id=row["id"],
            label=row["label"],
            cost=cost,
            category=cat,
            is_custom=str(row.get("isCustom", "")).strip().lower() == "true",
            icon_url=row.get("iconUrl") or None,
        ))
    logger.info("imported %d presets", sum(len(v) for v in out.values()))
    return out

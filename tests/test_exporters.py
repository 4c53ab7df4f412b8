import json
import math
from io import BytesIO

import numpy as np
import pandas as pd
import pytest

from exporters import export_config, export_custom_presets, export_projection_series, import_custom_presets
from presets import PRESETS, Preset
from projection import ProjectionInputs, run_projection


def _custom():
    return [
        Preset("leisure-golf-1", 'Golf, "the good walk spoiled"', 300.0, "leisure", True, "https://x/golf.png"),
        Preset("travel-jet-2", "Private Jet", 90_000.0, "travel", True, None),
    ]


def test_export_skips_built_in_presets():
    name, blob = export_custom_presets(PRESETS["housing"] + _custom())
    assert name == "lifestyle_presets.csv"
    df = pd.read_csv(BytesIO(blob))
    assert list(df.columns) == ["category", "id", "label", "cost", "iconUrl", "isCustom"]
    assert list(df["id"]) == ["leisure-golf-1", "travel-jet-2"]


def test_export_without_custom_presets_fails():
    with pytest.raises(ValueError, match="No custom presets"):
        export_custom_presets(PRESETS["housing"])


def test_import_reads_back_quoted_labels():
    _, blob = export_custom_presets(_custom())
    imported = import_custom_presets(blob)
    assert imported["leisure"] == [_custom()[0]]
    assert imported["travel"] == [_custom()[1]]


def test_import_accepts_hand_written_csv():
    text = (
        "category,id,label,cost,iconUrl,isCustom\n"
        "car,car-kart-1,Go Kart,75,,true\n"
        "\n"
        "pets,pets-cat-1,Cat,40,,true\n"
    )
    imported = import_custom_presets(text)
    assert list(imported) == ["car"]
    kart = imported["car"][0]
    assert kart.cost == 75.0
    assert kart.icon_url is None
    assert kart.is_custom


def test_import_empty_file():
    with pytest.raises(ValueError, match="File is empty."):
        import_custom_presets(b"   \n")


def test_import_missing_columns():
    with pytest.raises(ValueError, match="Missing required columns"):
        import_custom_presets("category,id\nhousing,x\n")


def test_import_bad_cost_is_nan():
    imported = import_custom_presets("category,id,label,cost\nleisure,l-1,Chess,free\n")
    assert math.isnan(imported["leisure"][0].cost)


def test_export_projection_series():
    r = run_projection(ProjectionInputs(30, 32, 50_000.0, 65, 1_000.0, 2_000.0))
    name, blob = export_projection_series(r)
    df = pd.read_csv(BytesIO(blob))
    assert name == "projection.csv"
    assert list(df.columns) == ["age", "savings", "phase"]
    assert df["age"].tolist() == list(range(32, 101))


def test_export_config_handles_numpy_and_infinity():
    name, blob = export_config({
        "ages": np.array([30, 32]),
        "savings": np.float64(50_000.0),
        "years_of_savings_post_retirement": float("inf"),
    })
    data = json.loads(blob)
    assert name == "config.json"
    assert data["ages"] == [30, 32]
    assert data["savings"] == 50_000.0
    assert data["years_of_savings_post_retirement"] is None

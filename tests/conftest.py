"""Shared fixtures: asset pools, scene objects and content files."""

import json
from pathlib import Path

import pytest

from tourbinder.schemas import Asset, SceneObject
from tourbinder.utils import BinderSettings, CollectingDiagnosticSink


@pytest.fixture
def sounds():
    return [
        Asset("welcome_en"),
        Asset("welcome_fr"),
        Asset("radar_en"),
        Asset("radar_fr"),
        Asset("optA_en"),
        Asset("optA_fr"),
        Asset("optB_en"),
        Asset("optB_fr"),
    ]


@pytest.fixture
def sound(sounds):
    """Look up a fixture sound by name."""
    by_name = {asset.name: asset for asset in sounds}
    return by_name.__getitem__


@pytest.fixture
def images():
    return [Asset("bunker_map"), Asset("radar_photo"), Asset("missile_diagram")]


@pytest.fixture
def scene_objects():
    return [
        SceneObject(["CP_Entrance"]),
        SceneObject(["CP_Radar", "Interactive"]),
        SceneObject(["CP_Silo"]),
    ]


@pytest.fixture
def sink():
    return CollectingDiagnosticSink()


@pytest.fixture
def settings(tmp_path):
    return BinderSettings(content_dir=tmp_path)


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document under tmp_path and return its path."""
    def _write(relative: str, payload) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f)
        return path
    return _write


@pytest.fixture
def quiz_payload():
    return {
        "Questions": [
            {
                "QuestionOptions": {
                    "Options": [
                        {
                            "OptionName": "A",
                            "OptionDescription": "descA",
                            "EnglishNarrationSound": "optA_en",
                            "FrenchNarrationSound": "optA_fr",
                        },
                        {
                            "OptionName": "B",
                            "OptionDescription": "descB",
                            "EnglishNarrationSound": "optB_en",
                            "FrenchNarrationSound": "optB_fr",
                        },
                    ]
                }
            },
            {"QuestionOptions": {"Options": []}},
        ]
    }


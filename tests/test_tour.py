"""End-to-end tests for TourContent and the content audit."""

import pytest

from tourbinder import TourContent
from tourbinder.audit import AssetManifest, ContentAuditor, load_manifest
from tourbinder.binding import QuestionIndexError
from tourbinder.schemas import InstructionType
from tourbinder.utils import BinderSettings


@pytest.fixture
def tour_files(write_json, quiz_payload):
    write_json("JSONFiles/instructions.json", {
        "Data": [
            {
                "InstructionType": "HowToSelection",
                "TitleCaptionKey": "HOW_TITLE",
                "CaptionKeys": ["HOW_1"],
                "EnglishNarrationSoundNames": ["welcome_en"],
                "FrenchNarrationSoundNames": ["welcome_fr"],
            },
            {"InstructionType": "Inactivity_Instruction", "TitleCaptionKey": "IDLE"},
        ]
    })
    write_json("JSONFiles/AutomatedTour/checkpoints.json", {
        "Data": [
            {"CheckpointName": "CP_Entrance", "CheckpointFrameNumber": 0},
            {
                "CheckpointName": "CP_Radar",
                "CheckpointFrameNumber": 240,
                "EnglishNarrationSoundNames": ["radar_en"],
                "FrenchNarrationSoundNames": ["radar_fr"],
                "ShouldStopCamera": True,
                "HasLearnMoreOption": True,
                "NumOfLearnMoreOption": 2,
            },
            {"CheckpointName": "CP_Ghost", "CheckpointFrameNumber": 500},
        ]
    })
    write_json("JSONFiles/AutomatedTour/learn_more.json", {
        "Data": [
            {"CorrespondingCPIndex": 1, "TitleCaptionKey": "LM_1", "ImagesNames": ["radar_photo"],
             "ImagesSources": ["Canadian War Museum"]},
            {"CorrespondingCPIndex": 0, "TitleCaptionKey": "LM_0"},
            {"CorrespondingCPIndex": 1, "TitleCaptionKey": "LM_2", "ImagesNames": ["no_such_image"]},
        ]
    })
    write_json("JSONFiles/AutomatedTour/quiz.json", quiz_payload)


class TestTourContent:
    """Facade over reader, binders and diagnostics."""

    def test_full_tour(self, settings, sink, tour_files, sounds, sound, images, scene_objects):
        tour = TourContent(settings, sink=sink)

        instructions = tour.load_instructions("JSONFiles/instructions.json", sounds)
        assert instructions[InstructionType.HOW_TO_SELECTION].narration.english_sounds == [
            sound("welcome_en")
        ]
        assert instructions[InstructionType.INACTIVITY_INSTRUCTION].narration.title_key == "IDLE"

        checkpoints = tour.load_checkpoints(
            "JSONFiles/AutomatedTour/checkpoints.json", sounds, scene_objects
        )
        assert [c.name for c in checkpoints] == ["CP_Entrance", "CP_Radar", "CP_Ghost"]
        assert [c.found for c in checkpoints] == [True, True, False]
        radar = checkpoints.get(scene_objects[1])
        assert radar.frame_number == 240
        assert radar.stop_camera and radar.has_learn_more
        assert radar.learn_more_option_count == 2

        learn_more = tour.load_learn_more(
            "JSONFiles/AutomatedTour/learn_more.json", 1, sounds, images
        )
        assert [e.narration.title_key for e in learn_more] == ["LM_1", "LM_2"]
        assert learn_more[0].images == [images[1]]
        assert learn_more[0].source_citation == "Canadian War Museum"
        assert learn_more[1].images == []

        questions = tour.load_quiz_questions()
        options = tour.bind_quiz_options(sounds, questions, 0)
        assert options[1].narration.title_key == "B"
        with pytest.raises(QuestionIndexError):
            tour.bind_quiz_options(sounds, questions, 2)

        assert sink.messages == []

    def test_missing_files_degrade(self, settings, sink, sounds, images, scene_objects):
        tour = TourContent(settings, sink=sink)
        assert tour.load_instructions("missing.json", sounds) == {}
        assert len(tour.load_checkpoints("missing.json", sounds, scene_objects)) == 0
        assert tour.load_learn_more("missing.json", 0, sounds, images) == []
        assert tour.load_quiz_questions().questions == []
        assert len(sink.messages) == 4
        assert all("File not found" in m for m in sink.messages)

    def test_strict_setting(self, settings, sink, write_json, sounds):
        write_json("bad.json", {"Data": [{"InstructionType": "Typo"}]})
        strict = settings.model_copy(update={"strict_instruction_types": True})
        with pytest.raises(ValueError):
            TourContent(strict, sink=sink).load_instructions("bad.json", sounds)

    def test_invalid_checkpoint_keeps_its_slot(self, settings, sink, write_json, sounds, scene_objects):
        write_json("checkpoints.json", {
            "Data": [
                {"CheckpointName": "CP_Entrance", "CheckpointFrameNumber": "soon"},
                {"CheckpointName": "CP_Radar", "CheckpointFrameNumber": 240},
            ]
        })
        checkpoints = TourContent(settings, sink=sink).load_checkpoints(
            "checkpoints.json", sounds, scene_objects
        )
        assert [c.name for c in checkpoints] == ["CP_Entrance", "CP_Radar"]
        assert checkpoints[1].frame_number == 240
        assert len(sink.messages) == 1


class TestContentAudit:
    """Audit reports names that fail to resolve."""

    def test_reports_unresolved(self, settings, tour_files, write_json):
        write_json("JSONFiles/instructions.json", {
            "Data": [{"InstructionType": "Typo", "EnglishNarrationSoundNames": ["ghost_en"]}]
        })
        manifest = AssetManifest(
            sounds=["welcome_en", "radar_en", "radar_fr", "optA_en", "optA_fr", "optB_en"],
            images=["radar_photo"],
            scene_objects=["CP_Entrance", "CP_Radar"],
        )
        report = ContentAuditor(manifest, settings).run(
            instructions="JSONFiles/instructions.json",
            checkpoints="JSONFiles/AutomatedTour/checkpoints.json",
            learn_more="JSONFiles/AutomatedTour/learn_more.json",
        )

        assert not report.ok
        assert [i.name for i in report.by_kind("instruction_type")] == ["Typo"]
        assert [i.name for i in report.by_kind("scene_object")] == ["CP_Ghost"]
        assert [i.name for i in report.by_kind("image")] == ["no_such_image"]
        assert sorted(i.name for i in report.by_kind("sound")) == ["ghost_en", "optB_fr"]
        assert report.read_errors == []

    def test_clean_content(self, settings, write_json):
        write_json("JSONFiles/AutomatedTour/checkpoints.json", {
            "Data": [{"CheckpointName": "CP_Radar", "EnglishNarrationSoundNames": ["radar_en"]}]
        })
        manifest = AssetManifest(sounds=["radar_en"], scene_objects=["CP_Radar"])
        report = ContentAuditor(manifest, settings).run(
            checkpoints="JSONFiles/AutomatedTour/checkpoints.json", quiz=False
        )
        assert report.ok

    def test_read_errors_collected(self, settings):
        report = ContentAuditor(AssetManifest(), settings).run(checkpoints="missing.json")
        assert report.issues == []
        assert len(report.read_errors) == 2  # checkpoints and quiz

    def test_relative_content_dir(self, tmp_path, monkeypatch, write_json, quiz_payload):
        monkeypatch.chdir(tmp_path)
        write_json("content/JSONFiles/AutomatedTour/quiz.json", quiz_payload)
        write_json("content/checkpoints.json", {"Data": [{"CheckpointName": "CP_Radar"}]})
        settings = BinderSettings()
        manifest = AssetManifest(
            sounds=["optA_en", "optA_fr", "optB_en", "optB_fr"], scene_objects=["CP_Radar"]
        )

        report = ContentAuditor(manifest, settings).run(checkpoints="checkpoints.json")

        assert report.read_errors == []
        assert report.ok
        assert len(TourContent(settings).load_quiz_questions().questions) == 2

    def test_load_manifest(self, tmp_path):
        path = tmp_path / "assets.yaml"
        path.write_text("sounds: [a, b]\nscene_objects: [CP_Radar]\n", encoding="utf-8")
        manifest = load_manifest(path)
        assert manifest.sounds == ["a", "b"]
        assert manifest.images == []
        with pytest.raises(FileNotFoundError):
            load_manifest(tmp_path / "none.yaml")

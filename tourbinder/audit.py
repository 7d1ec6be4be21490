"""
Content audit - list every name in the content files that will not resolve.

Binding is silent about unknown sound and image names. The
audit runs the same resolution against a manifest of available asset and
scene-object names and reports each miss, so authoring errors can be
caught before a tour is run.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel

from tourbinder.binding import (
    is_known_instruction_type,
    resolve_images,
    resolve_object,
    resolve_sounds,
)
from tourbinder.schemas import (
    Asset,
    CheckpointsData,
    InstructionsData,
    LearnMoreData,
    QuizQuestions,
    ResolveStatus,
    SceneObject,
)
from tourbinder.utils.config_loader import BinderSettings
from tourbinder.utils.diagnostics import CollectingDiagnosticSink
from tourbinder.utils.json_reader import JsonReader

logger = logging.getLogger(__name__)


class AssetManifest(BaseModel):
    """Names available at runtime."""
    sounds: list[str] = []
    images: list[str] = []
    scene_objects: list[str] = []


def load_manifest(path: str | Path) -> AssetManifest:
    """
    Load a YAML (or JSON) asset manifest.

    Raises:
        FileNotFoundError: If the manifest doesn't exist
        yaml.YAMLError: If parsing fails
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Asset manifest not found: {file_path}")
    with open(file_path, "r", encoding="utf-8") as f:
        return AssetManifest(**(yaml.safe_load(f) or {}))


@dataclass
class UnresolvedName:
    source: str      # content file
    kind: str        # sound / image / scene_object / instruction_type
    name: str
    context: str     # which record referenced it


@dataclass
class AuditReport:
    issues: list[UnresolvedName] = field(default_factory=list)
    read_errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues and not self.read_errors

    def by_kind(self, kind: str) -> list[UnresolvedName]:
        return [issue for issue in self.issues if issue.kind == kind]


class ContentAuditor:
    """Check content files against an AssetManifest."""

    def __init__(
        self,
        manifest: AssetManifest,
        settings: Optional[BinderSettings] = None,
        reader: Optional[JsonReader] = None,
    ):
        self.manifest = manifest
        self.settings = settings or BinderSettings()
        self.reader = reader or JsonReader()
        self._sounds = [Asset(name) for name in manifest.sounds]
        self._images = [Asset(name) for name in manifest.images]
        self._objects = [SceneObject([name]) for name in manifest.scene_objects]
        self._sink = CollectingDiagnosticSink()

    def _missing(self, names: Iterable[str], pool: list[Asset], resolve=resolve_sounds) -> list[str]:
        names = [name for name in names if name]
        found = {asset.name for asset in resolve(names, pool)}
        return [name for name in names if name not in found]

    def _read(self, model, path: Path):
        # path is already resolved against content_dir
        result = self.reader.read(model, path)
        if not result.success:
            self._sink.emit(result.message)
        return result.record

    def _check_narration(self, report: AuditReport, source: str, context: str, record) -> None:
        names = list(record.english_narration_sound_names) + list(record.french_narration_sound_names)
        for name in self._missing(names, self._sounds):
            report.issues.append(UnresolvedName(source, "sound", name, context))

    # -------------------------------------------------------------------------
    # Per-file checks
    # -------------------------------------------------------------------------

    def check_instructions(self, path: str | Path, report: AuditReport) -> None:
        data = self._read(InstructionsData, self.settings.resolve(path))
        for item in data.data:
            context = item.instruction_type or "<no type>"
            if not is_known_instruction_type(item.instruction_type):
                report.issues.append(UnresolvedName(
                    str(path), "instruction_type", item.instruction_type, context
                ))
            self._check_narration(report, str(path), context, item)

    def check_checkpoints(self, path: str | Path, report: AuditReport) -> None:
        data = self._read(CheckpointsData, self.settings.resolve(path))
        for position, item in enumerate(data.data):
            context = f"checkpoint {position} ({item.checkpoint_name})"
            _, status = resolve_object(item.checkpoint_name, self._objects)
            if status is ResolveStatus.NOT_FOUND:
                report.issues.append(UnresolvedName(
                    str(path), "scene_object", item.checkpoint_name, context
                ))
            self._check_narration(report, str(path), context, item)

    def check_learn_more(self, path: str | Path, report: AuditReport) -> None:
        data = self._read(LearnMoreData, self.settings.resolve(path))
        for position, item in enumerate(data.data):
            context = f"entry {position} (checkpoint {item.corresponding_cp_index})"
            self._check_narration(report, str(path), context, item)
            for name in self._missing(item.images_names, self._images, resolve_images):
                report.issues.append(UnresolvedName(str(path), "image", name, context))

    def check_quiz(self, report: AuditReport) -> None:
        quiz_path = self.settings.quiz_path
        data = self._read(QuizQuestions, quiz_path)
        for q_index, question in enumerate(data.questions):
            for o_index, option in enumerate(question.options):
                context = f"question {q_index} option {o_index} ({option.option_name})"
                names = [option.english_narration_sound, option.french_narration_sound]
                for name in self._missing(names, self._sounds):
                    report.issues.append(UnresolvedName(str(quiz_path), "sound", name, context))

    def run(
        self,
        instructions: Optional[str | Path] = None,
        checkpoints: Optional[str | Path] = None,
        learn_more: Optional[str | Path] = None,
        quiz: bool = True,
    ) -> AuditReport:
        """Audit the given content files (and the quiz set unless `quiz` is False)."""
        self._sink.clear()
        report = AuditReport()
        if instructions is not None:
            self.check_instructions(instructions, report)
        if checkpoints is not None:
            self.check_checkpoints(checkpoints, report)
        if learn_more is not None:
            self.check_learn_more(learn_more, report)
        if quiz:
            self.check_quiz(report)
        report.read_errors = list(self._sink.messages)
        logger.info(
            f"Audit: {len(report.issues)} unresolved name(s), "
            f"{len(report.read_errors)} read error(s)"
        )
        return report

"""
TourContent - host-facing entry point for binding tour content.

Holds one stateless reader, the settings and a diagnostic sink, and
forwards each load to the matching binder. Nothing is cached between
calls: every load reads its file and binds from scratch.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence

from tourbinder.binding import (
    SoundPools,
    bind_checkpoints,
    bind_instructions,
    bind_learn_more,
    bind_quiz_options,
    load_quiz_questions,
)
from tourbinder.schemas import (
    CheckpointIndex,
    CheckpointsData,
    InstructionIndex,
    InstructionsData,
    LearnMoreData,
    LearnMoreSet,
    NamedAsset,
    QuizOptionIndex,
    QuizQuestions,
    TaggedObject,
)
from tourbinder.utils.config_loader import BinderSettings
from tourbinder.utils.diagnostics import LoggingDiagnosticSink, SinkLike, as_sink
from tourbinder.utils.json_reader import JsonReader

logger = logging.getLogger(__name__)


class TourContent:
    """
    Load and bind guided-tour content.

    Relative content paths are resolved against `settings.content_dir`.
    """

    def __init__(
        self,
        settings: Optional[BinderSettings] = None,
        reader: Optional[JsonReader] = None,
        sink: SinkLike = None,
    ):
        """
        Initialize with settings, a reader and a diagnostic channel.

        Args:
            settings: Binder settings (defaults if omitted)
            reader: Structured-file reader (a new JsonReader if omitted)
            sink: Diagnostic sink or callable; logs at the configured level if omitted
        """
        self.settings = settings or BinderSettings()
        self.reader = reader or JsonReader()
        if sink is None:
            self.sink = LoggingDiagnosticSink(self.settings.diagnostic_level)
        else:
            self.sink = as_sink(sink)

    def _path(self, path: str | Path) -> Path:
        return self.settings.resolve(path)

    # -------------------------------------------------------------------------
    # Instructions
    # -------------------------------------------------------------------------

    def load_instructions(self, path: str | Path, sounds: SoundPools) -> InstructionIndex:
        result = self.reader.read(InstructionsData, self._path(path))
        return bind_instructions(
            result, sounds, self.sink, strict=self.settings.strict_instruction_types
        )

    # -------------------------------------------------------------------------
    # Automated tour
    # -------------------------------------------------------------------------

    def load_checkpoints(
        self, path: str | Path, sounds: SoundPools, candidates: Iterable[TaggedObject]
    ) -> CheckpointIndex:
        result = self.reader.read(CheckpointsData, self._path(path))
        index = bind_checkpoints(result, sounds, candidates, self.sink)
        missing = index.unresolved()
        if missing:
            logger.info(f"{len(missing)} of {len(index)} checkpoint(s) have no scene object")
        return index

    def load_learn_more(
        self,
        path: str | Path,
        checkpoint_index: int,
        sounds: SoundPools,
        images: Sequence[NamedAsset],
    ) -> LearnMoreSet:
        """Bind the learn-more entries of the active checkpoint."""
        result = self.reader.read(LearnMoreData, self._path(path))
        return bind_learn_more(result, checkpoint_index, sounds, images, self.sink)

    # -------------------------------------------------------------------------
    # Quiz
    # -------------------------------------------------------------------------

    def load_quiz_questions(self) -> QuizQuestions:
        return load_quiz_questions(self.reader, self.settings, self.sink)

    def bind_quiz_options(
        self, sounds: SoundPools, questions: QuizQuestions, question_index: int
    ) -> QuizOptionIndex:
        return bind_quiz_options(sounds, questions, question_index)

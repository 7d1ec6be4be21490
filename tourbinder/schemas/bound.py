"""
Bound content types for tourbinder.

These are the fully-resolved structures handed to the presentation layer:
- NarrationBundle: title + captions + per-language sound handles
- Instruction, checkpoint, learn-more and quiz-option entries
- The indices and sets that collect them

Handles inside them are borrowed from host-owned pools.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from .assets import is_resolved


class Language(str, Enum):
    EN = "en"
    FR = "fr"


class InstructionType(str, Enum):
    """Instruction tags. The first member is the fallback for unknown strings."""
    LEARN_MORE_PROPOSED = "LearnMoreProposed"
    LEARN_MORE_COMPLETED = "LearnMoreCompleted"
    HOW_TO_SELECTION = "HowToSelection"
    QUIZ_PROPOSED = "QuizProposed"
    LEARN_MORE_NAVIGATION = "LearnMoreNavigation"
    MINI_GAME_QUIZ_CONTEXT = "MiniGameQuiz_Context"
    MINI_GAME_QUIZ_QUESTION_INSTRUCTION = "MiniGameQuiz_QuestionInstruction"
    INACTIVITY_INSTRUCTION = "Inactivity_Instruction"


class ResolveStatus(str, Enum):
    FOUND = "Actor Found"
    NOT_FOUND = "Actor Not Found"


@dataclass
class NarrationBundle:
    """Speakable/readable content. Caption order matches presentation slots."""
    title_key: str
    caption_keys: list[str] = field(default_factory=list)
    sounds_by_language: dict[Language, list[Any]] = field(default_factory=dict)

    def sounds_for(self, language: Language) -> list[Any]:
        return self.sounds_by_language.get(Language(language), [])

    @property
    def english_sounds(self) -> list[Any]:
        return self.sounds_for(Language.EN)

    @property
    def french_sounds(self) -> list[Any]:
        return self.sounds_for(Language.FR)


# -----------------------------------------------------------------------------
# Instructions
# -----------------------------------------------------------------------------

@dataclass
class InstructionEntry:
    instruction_type: InstructionType
    narration: NarrationBundle


InstructionIndex = dict[InstructionType, InstructionEntry]


# -----------------------------------------------------------------------------
# Checkpoints
# -----------------------------------------------------------------------------

@dataclass
class CheckpointEntry:
    """A checkpoint bound to its scene object (or an unresolved sentinel)."""
    name: str
    scene_object: Any
    frame_number: int
    narration: NarrationBundle
    stop_camera: bool = False
    has_learn_more: bool = False
    learn_more_option_count: int = 0
    has_quiz: bool = False
    status: str = ""

    @property
    def found(self) -> bool:
        return is_resolved(self.scene_object)


@dataclass
class CheckpointIndex:
    """
    Checkpoints in authoring order plus a lookup by scene object.

    Every entry of `ordered` has a key in `by_object`. If two checkpoints
    resolve to the same scene object, the later one wins the lookup.
    """
    ordered: list[CheckpointEntry] = field(default_factory=list)
    by_object: dict[Any, CheckpointEntry] = field(default_factory=dict)

    def add(self, entry: CheckpointEntry) -> None:
        self.ordered.append(entry)
        self.by_object[entry.scene_object] = entry

    def __len__(self) -> int:
        return len(self.ordered)

    def __iter__(self) -> Iterator[CheckpointEntry]:
        return iter(self.ordered)

    def __getitem__(self, position: int) -> CheckpointEntry:
        return self.ordered[position]

    def get(self, scene_object: Any) -> Optional[CheckpointEntry]:
        return self.by_object.get(scene_object)

    @property
    def scene_objects(self) -> list[Any]:
        """Scene objects to follow, in traversal order."""
        return [entry.scene_object for entry in self.ordered]

    def frame_for(self, scene_object: Any) -> Optional[int]:
        entry = self.by_object.get(scene_object)
        return entry.frame_number if entry else None

    def narration_for(self, scene_object: Any) -> Optional[NarrationBundle]:
        entry = self.by_object.get(scene_object)
        return entry.narration if entry else None

    def unresolved(self) -> list[CheckpointEntry]:
        return [entry for entry in self.ordered if not entry.found]


# -----------------------------------------------------------------------------
# Learn more
# -----------------------------------------------------------------------------

@dataclass
class LearnMoreEntry:
    owning_checkpoint_index: int
    narration: NarrationBundle
    images: list[Any] = field(default_factory=list)
    source_citation: Optional[str] = None


LearnMoreSet = list[LearnMoreEntry]


# -----------------------------------------------------------------------------
# Quiz
# -----------------------------------------------------------------------------

@dataclass
class QuizOption:
    narration: NarrationBundle

    @property
    def caption_key(self) -> str:
        return self.narration.caption_keys[0] if self.narration.caption_keys else ""


QuizOptionIndex = dict[int, QuizOption]

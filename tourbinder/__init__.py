"""
tourbinder - bind authored guided-tour content to runtime assets.

Reads instruction, checkpoint, learn-more and quiz content files and
resolves every sound, image, scene-object and instruction-type name into
the handles a presentation layer uses.
"""

from .binding import (
    BindingError,
    PreconditionViolation,
    QuestionIndexError,
    UnknownInstructionTypeError,
    resolve_object,
    resolve_sounds,
    resolve_images,
    tag_for,
    bind_instructions,
    bind_checkpoints,
    bind_learn_more,
    load_quiz_questions,
    bind_quiz_options,
)
from .schemas import (
    Asset,
    SceneObject,
    UnresolvedObject,
    Language,
    InstructionType,
    NarrationBundle,
    CheckpointIndex,
)
from .tour import TourContent
from .utils import BinderSettings, JsonReader, ReadResult, load_settings

__version__ = "0.1.0"

__all__ = [
    "BindingError",
    "PreconditionViolation",
    "QuestionIndexError",
    "UnknownInstructionTypeError",
    "resolve_object",
    "resolve_sounds",
    "resolve_images",
    "tag_for",
    "bind_instructions",
    "bind_checkpoints",
    "bind_learn_more",
    "load_quiz_questions",
    "bind_quiz_options",
    "Asset",
    "SceneObject",
    "UnresolvedObject",
    "Language",
    "InstructionType",
    "NarrationBundle",
    "CheckpointIndex",
    "TourContent",
    "BinderSettings",
    "JsonReader",
    "ReadResult",
    "load_settings",
]

"""
tourbinder binding - resolve content records into runtime structures.

This module provides:
- Identifier resolver: scene objects, sounds, images, instruction tags
- bind_instructions: InstructionIndex
- bind_checkpoints: CheckpointIndex
- bind_learn_more: LearnMoreSet for one checkpoint
- load_quiz_questions / bind_quiz_options: quiz set and QuizOptionIndex
"""

from .errors import (
    BindingError,
    PreconditionViolation,
    QuestionIndexError,
    UnknownInstructionTypeError,
)

from .resolver import (
    SoundPools,
    DEFAULT_INSTRUCTION_TYPE,
    resolve_object,
    resolve_sounds,
    resolve_images,
    pool_for,
    tag_for,
    is_known_instruction_type,
    build_narration,
    narration_from_record,
)

from .instructions import bind_instructions, entry_for
from .checkpoints import bind_checkpoints
from .learn_more import bind_learn_more
from .quiz import load_quiz_questions, bind_option, bind_quiz_options

__all__ = [
    # Errors
    "BindingError",
    "PreconditionViolation",
    "QuestionIndexError",
    "UnknownInstructionTypeError",
    # Resolver
    "SoundPools",
    "DEFAULT_INSTRUCTION_TYPE",
    "resolve_object",
    "resolve_sounds",
    "resolve_images",
    "pool_for",
    "tag_for",
    "is_known_instruction_type",
    "build_narration",
    "narration_from_record",
    # Binders
    "bind_instructions",
    "entry_for",
    "bind_checkpoints",
    "bind_learn_more",
    "load_quiz_questions",
    "bind_option",
    "bind_quiz_options",
]

"""
tourbinder schemas.

This module exports:
- Content: Pydantic models for the authored JSON content files
- Bound: resolved narration, checkpoint, learn-more and quiz structures
- Assets: handle protocols, simple handles and the unresolved sentinel
"""

# Content file schemas
from .content import (
    ContentRecord,
    ContentFile,
    NarratedRecord,
    InstructionRecord,
    InstructionsData,
    CheckpointRecord,
    CheckpointsData,
    LearnMoreRecord,
    LearnMoreData,
    QuizOptionRecord,
    QuizOptionList,
    QuizQuestionRecord,
    QuizQuestions,
)

# Bound schemas
from .bound import (
    Language,
    InstructionType,
    ResolveStatus,
    NarrationBundle,
    InstructionEntry,
    InstructionIndex,
    CheckpointEntry,
    CheckpointIndex,
    LearnMoreEntry,
    LearnMoreSet,
    QuizOption,
    QuizOptionIndex,
)

# Handles
from .assets import (
    NamedAsset,
    TaggedObject,
    Asset,
    SceneObject,
    UnresolvedObject,
    primary_tag,
    is_resolved,
)

__all__ = [
    # Content
    'ContentRecord',
    'ContentFile',
    'NarratedRecord',
    'InstructionRecord',
    'InstructionsData',
    'CheckpointRecord',
    'CheckpointsData',
    'LearnMoreRecord',
    'LearnMoreData',
    'QuizOptionRecord',
    'QuizOptionList',
    'QuizQuestionRecord',
    'QuizQuestions',
    # Bound
    'Language',
    'InstructionType',
    'ResolveStatus',
    'NarrationBundle',
    'InstructionEntry',
    'InstructionIndex',
    'CheckpointEntry',
    'CheckpointIndex',
    'LearnMoreEntry',
    'LearnMoreSet',
    'QuizOption',
    'QuizOptionIndex',
    # Assets
    'NamedAsset',
    'TaggedObject',
    'Asset',
    'SceneObject',
    'UnresolvedObject',
    'primary_tag',
    'is_resolved',
]

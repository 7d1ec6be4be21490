"""
Checkpoint binder - bind guided-tour checkpoints to scene objects.

Provides:
- Scene-object resolution by checkpoint name
- Frame number and narration per checkpoint
- Optional-content flags (camera stop, learn more, quiz)

Checkpoints keep authoring order. A checkpoint whose scene object cannot
be found is still bound, with an UnresolvedObject in place of the handle
and a "not found" status.
"""

import logging
from typing import Iterable

from tourbinder.schemas import (
    CheckpointEntry,
    CheckpointIndex,
    CheckpointsData,
    ResolveStatus,
    TaggedObject,
)
from tourbinder.utils.diagnostics import SinkLike, as_sink
from tourbinder.utils.json_reader import ReadResult

from .resolver import SoundPools, narration_from_record, resolve_object
from .source import records_of, unwrap_source

logger = logging.getLogger(__name__)


def bind_checkpoints(
    source: ReadResult[CheckpointsData] | CheckpointsData,
    sounds: SoundPools,
    candidates: Iterable[TaggedObject],
    sink: SinkLike = None,
) -> CheckpointIndex:
    """
    Build the checkpoint index.

    Args:
        source: Reader result (or record) for the checkpoints file
        sounds: Narration sound pool, shared or per language
        candidates: Scene objects to match checkpoint names against
        sink: Diagnostic channel for a failed read

    Returns:
        CheckpointIndex with one entry per record, in record order
    """
    record = unwrap_source(source, as_sink(sink))
    candidates = list(candidates)

    index = CheckpointIndex()
    for item in records_of(record):
        scene_object, status = resolve_object(item.checkpoint_name, candidates)
        if status is ResolveStatus.NOT_FOUND:
            logger.warning(f"{status.value}: {item.checkpoint_name!r}")

        index.add(CheckpointEntry(
            name=item.checkpoint_name,
            scene_object=scene_object,
            frame_number=item.checkpoint_frame_number,
            narration=narration_from_record(item, sounds),
            stop_camera=item.should_stop_camera,
            has_learn_more=item.has_learn_more_option,
            learn_more_option_count=item.num_of_learn_more_option,
            has_quiz=item.has_quiz,
            status=status.value,
        ))

    return index

"""
Learn-more binder - supplementary material for the active checkpoint.

The learn-more file is flat; every entry names the checkpoint it belongs
to. Binding keeps only the active checkpoint's entries, in file order, and
must be redone whenever the active checkpoint changes.
"""

from typing import Sequence

from tourbinder.schemas import LearnMoreData, LearnMoreEntry, LearnMoreSet, NamedAsset
from tourbinder.utils.diagnostics import SinkLike, as_sink
from tourbinder.utils.json_reader import ReadResult

from .resolver import SoundPools, narration_from_record, resolve_images
from .source import records_of, unwrap_source


def bind_learn_more(
    source: ReadResult[LearnMoreData] | LearnMoreData,
    checkpoint_index: int,
    sounds: SoundPools,
    images: Sequence[NamedAsset],
    sink: SinkLike = None,
) -> LearnMoreSet:
    """
    Bind the learn-more entries owned by one checkpoint.

    Args:
        source: Reader result (or record) for the learn-more file
        checkpoint_index: Position of the active checkpoint in the tour
        sounds: Narration sound pool, shared or per language
        images: Image pool
        sink: Diagnostic channel for a failed read

    Returns:
        Ordered list of LearnMoreEntry for that checkpoint
    """
    record = unwrap_source(source, as_sink(sink))

    entries: LearnMoreSet = []
    for item in records_of(record):
        if item.corresponding_cp_index != checkpoint_index:
            continue
        entries.append(LearnMoreEntry(
            owning_checkpoint_index=item.corresponding_cp_index,
            narration=narration_from_record(item, sounds),
            images=resolve_images(item.images_names, images),
            source_citation=item.images_sources[0] if item.images_sources else None,
        ))
    return entries

"""
Instruction binder - map instruction tags to their narration.

Each instruction record names its type as a string; the binder converts it
to an InstructionType and resolves both language sound lists. If the
source repeats a type, the last record wins.
"""

import logging
from typing import Optional

from tourbinder.schemas import InstructionEntry, InstructionIndex, InstructionsData
from tourbinder.utils.diagnostics import SinkLike, as_sink
from tourbinder.utils.json_reader import ReadResult

from .resolver import SoundPools, is_known_instruction_type, narration_from_record, tag_for
from .source import records_of, unwrap_source

logger = logging.getLogger(__name__)


def bind_instructions(
    source: ReadResult[InstructionsData] | InstructionsData,
    sounds: SoundPools,
    sink: SinkLike = None,
    strict: bool = False,
) -> InstructionIndex:
    """
    Build the instruction index.

    Args:
        source: Reader result (or record) for the instructions file
        sounds: Narration sound pool, shared or per language
        sink: Diagnostic channel for a failed read
        strict: Raise on unknown instruction types instead of falling back

    Returns:
        Mapping from InstructionType to InstructionEntry
    """
    record = unwrap_source(source, as_sink(sink))

    index: InstructionIndex = {}
    for item in records_of(record):
        tag = tag_for(item.instruction_type, strict=strict)
        if tag in index:
            logger.debug(f"Instruction {tag.value} defined more than once; keeping the last")
        index[tag] = InstructionEntry(
            instruction_type=tag,
            narration=narration_from_record(item, sounds),
        )
    return index


def entry_for(index: InstructionIndex, instruction_type: str) -> Optional[InstructionEntry]:
    """Look up an entry by its type string. Unknown strings find nothing."""
    if not is_known_instruction_type(instruction_type):
        return None
    return index.get(tag_for(instruction_type))

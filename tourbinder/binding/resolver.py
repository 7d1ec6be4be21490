"""
Identifier resolver - turn names found in content files into handles.

Provides:
- Scene-object lookup by primary tag
- Sound and image lookup by asset name
- Instruction-type string to tag conversion
- Narration bundle assembly shared by all binders

Pools and candidate lists are only read, never copied or mutated.
"""

import logging
from typing import Any, Iterable, Mapping, Sequence, Union

from tourbinder.schemas import (
    InstructionType,
    NamedAsset,
    Language,
    NarrationBundle,
    ResolveStatus,
    TaggedObject,
    UnresolvedObject,
    primary_tag,
)

from .errors import UnknownInstructionTypeError

logger = logging.getLogger(__name__)

# A single pool shared by both languages, or one pool per language
SoundPools = Union[Sequence[NamedAsset], Mapping[Language, Sequence[NamedAsset]]]

DEFAULT_INSTRUCTION_TYPE = InstructionType.LEARN_MORE_PROPOSED

_INSTRUCTION_TYPES = {member.value: member for member in InstructionType}


# -----------------------------------------------------------------------------
# Scene objects
# -----------------------------------------------------------------------------

def resolve_object(
    name: str, candidates: Iterable[TaggedObject]
) -> tuple[TaggedObject | UnresolvedObject, ResolveStatus]:
    """
    Find the scene object whose primary tag equals `name`.

    Matching is exact and case-sensitive; the first match in candidate
    order wins. Never raises.

    Returns:
        Tuple of (handle, status). On a miss the handle is an
        UnresolvedObject sentinel carrying `name`.
    """
    for candidate in candidates:
        if candidate is None:
            continue
        if primary_tag(candidate) == name:
            return candidate, ResolveStatus.FOUND
    return UnresolvedObject(name), ResolveStatus.NOT_FOUND


# -----------------------------------------------------------------------------
# Assets
# -----------------------------------------------------------------------------

def _resolve_assets(names: Iterable[str], pool: Sequence[NamedAsset]) -> list[NamedAsset]:
    found: list[NamedAsset] = []
    for name in names:
        match = next(
            (asset for asset in pool if asset is not None and getattr(asset, "name", None) == name),
            None,
        )
        if match is None:
            continue
        # identity, not equality: distinct assets may share a name
        if any(existing is match for existing in found):
            continue
        found.append(match)
    return found


def resolve_sounds(names: Iterable[str], pool: Sequence[NamedAsset]) -> list[NamedAsset]:
    """
    Resolve sound names against a sound pool.

    Each name contributes the first asset with that name, unless that
    asset is already in the output. Unknown names are skipped.
    """
    return _resolve_assets(names, pool)


def resolve_images(names: Iterable[str], pool: Sequence[NamedAsset]) -> list[NamedAsset]:
    """Resolve image names against an image pool. Same rules as resolve_sounds."""
    return _resolve_assets(names, pool)


def pool_for(pools: SoundPools, language: Language) -> Sequence[NamedAsset]:
    """Pick the pool for a language from a shared pool or a per-language mapping."""
    if isinstance(pools, Mapping):
        return pools.get(language, [])
    return pools


# -----------------------------------------------------------------------------
# Instruction types
# -----------------------------------------------------------------------------

def tag_for(type_string: str, strict: bool = False) -> InstructionType:
    """
    Convert an instruction type string to its tag.

    Unknown strings map to LEARN_MORE_PROPOSED (and are logged) unless
    `strict` is set, in which case UnknownInstructionTypeError is raised.
    """
    tag = _INSTRUCTION_TYPES.get(type_string)
    if tag is not None:
        return tag
    if strict:
        raise UnknownInstructionTypeError(type_string)
    logger.warning(
        f"Unknown instruction type {type_string!r}, using {DEFAULT_INSTRUCTION_TYPE.value}"
    )
    return DEFAULT_INSTRUCTION_TYPE


def is_known_instruction_type(type_string: str) -> bool:
    return type_string in _INSTRUCTION_TYPES


# -----------------------------------------------------------------------------
# Narration
# -----------------------------------------------------------------------------

def build_narration(
    title_key: str,
    caption_keys: Sequence[str],
    english_names: Sequence[str],
    french_names: Sequence[str],
    sounds: SoundPools,
) -> NarrationBundle:
    """Assemble a NarrationBundle, resolving both language channels."""
    return NarrationBundle(
        title_key=title_key,
        caption_keys=list(caption_keys),
        sounds_by_language={
            Language.EN: resolve_sounds(english_names, pool_for(sounds, Language.EN)),
            Language.FR: resolve_sounds(french_names, pool_for(sounds, Language.FR)),
        },
    )


def narration_from_record(record: Any, sounds: SoundPools) -> NarrationBundle:
    """Build the narration of any record with the shared narrated fields."""
    return build_narration(
        record.title_caption_key,
        record.caption_keys,
        record.english_narration_sound_names,
        record.french_narration_sound_names,
        sounds,
    )


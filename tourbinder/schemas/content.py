"""
Content file schemas for tourbinder.

Defines Pydantic models for the authored JSON content files:
- Instructions (narrated UI instructions keyed by type)
- Checkpoints (guided-tour waypoints)
- Learn-more entries (supplementary material per checkpoint)
- Quiz questions and their options

Keys follow the authoring tool's PascalCase property names. The exporter
lowercases the first letter, so both spellings are accepted.
"""

from typing import Any, ClassVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_pascal


class ContentRecord(BaseModel):
    """Base for every record read from a content file."""
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def standardize_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {field.alias or name for name, field in cls.model_fields.items()}
        normalized = {}
        for key, value in data.items():
            if isinstance(key, str) and key and key not in aliases:
                upper = key[0].upper() + key[1:]
                if upper in aliases:
                    key = upper
            normalized[key] = value
        return normalized


class NarratedRecord(ContentRecord):
    """Fields shared by every record that carries a narration."""
    title_caption_key: str = ""
    caption_keys: list[str] = []
    english_narration_sound_names: list[str] = []
    french_narration_sound_names: list[str] = []


# -----------------------------------------------------------------------------
# Instructions
# -----------------------------------------------------------------------------

class InstructionRecord(NarratedRecord):
    instruction_type: str = ""


# -----------------------------------------------------------------------------
# Checkpoints
# -----------------------------------------------------------------------------

class CheckpointRecord(NarratedRecord):
    checkpoint_name: str = ""
    checkpoint_frame_number: int = 0
    should_stop_camera: bool = False
    has_learn_more_option: bool = False
    num_of_learn_more_option: int = Field(default=0, ge=0)
    has_quiz: bool = False


# -----------------------------------------------------------------------------
# Learn more
# -----------------------------------------------------------------------------

class LearnMoreRecord(NarratedRecord):
    corresponding_cp_index: int = Field(default=-1, alias="CorrespondingCPIndex")
    images_names: list[str] = []
    images_sources: list[str] = []


# -----------------------------------------------------------------------------
# Quiz
# -----------------------------------------------------------------------------

class QuizOptionRecord(ContentRecord):
    option_name: str = ""
    option_description: str = ""
    english_narration_sound: str = ""
    french_narration_sound: str = ""


class QuizOptionList(ContentRecord):
    options: list[QuizOptionRecord] = []


class QuizQuestionRecord(ContentRecord):
    question_options: QuizOptionList = Field(default_factory=QuizOptionList)

    @property
    def options(self) -> list[QuizOptionRecord]:
        return self.question_options.options


# -----------------------------------------------------------------------------
# File containers
# -----------------------------------------------------------------------------

class ContentFile(ContentRecord):
    """
    Top-level content file.

    `items_field` names the list holding the records; `salvage` uses it to
    recover a file that failed validation as a whole. Quiz questions and
    checkpoints are addressed by position, so an invalid entry keeps its
    slot instead of being dropped.
    """
    items_field: ClassVar[str] = "data"

    @classmethod
    def salvage(cls, raw: Any) -> tuple["ContentFile", int]:
        """
        Build a partial file from raw JSON.

        Each invalid entry is replaced by a record holding only its valid
        fields, with defaults for the rest.

        Returns:
            Tuple of (partial record, number of invalid entries)
        """
        if not isinstance(raw, dict):
            return cls(), 0

        field = cls.model_fields[cls.items_field]
        alias = field.alias or cls.items_field
        candidates = [alias, alias[0].lower() + alias[1:], cls.items_field]
        if field.validation_alias is not None:
            candidates.extend(getattr(field.validation_alias, "choices", []))
        entries = next((raw[key] for key in candidates if key in raw), [])
        if not isinstance(entries, list):
            return cls(), 1

        item_model = cls.item_model()
        kept = []
        invalid = 0
        for entry in entries:
            try:
                kept.append(item_model.model_validate(entry))
            except ValidationError:
                invalid += 1
                kept.append(_valid_fields_of(item_model, entry))
        return cls(**{cls.items_field: kept}), invalid

    @classmethod
    def item_model(cls) -> type[ContentRecord]:
        raise NotImplementedError


def _valid_fields_of(item_model: type[ContentRecord], entry: Any) -> ContentRecord:
    """Keep the fields of an invalid entry that validate on their own."""
    if not isinstance(entry, dict):
        return item_model()
    valid = {}
    for key, value in entry.items():
        try:
            item_model.model_validate({key: value})
        except ValidationError:
            continue
        valid[key] = value
    return item_model.model_validate(valid)


class InstructionsData(ContentFile):
    data: list[InstructionRecord] = []

    @classmethod
    def item_model(cls) -> type[ContentRecord]:
        return InstructionRecord


class CheckpointsData(ContentFile):
    data: list[CheckpointRecord] = []

    @classmethod
    def item_model(cls) -> type[ContentRecord]:
        return CheckpointRecord


class LearnMoreData(ContentFile):
    data: list[LearnMoreRecord] = []

    @classmethod
    def item_model(cls) -> type[ContentRecord]:
        return LearnMoreRecord


class QuizQuestions(ContentFile):
    items_field: ClassVar[str] = "questions"

    questions: list[QuizQuestionRecord] = Field(
        default=[],
        validation_alias=AliasChoices("Questions", "questions", "m_Questions"),
    )

    @classmethod
    def item_model(cls) -> type[ContentRecord]:
        return QuizQuestionRecord

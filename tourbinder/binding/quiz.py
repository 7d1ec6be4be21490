"""
Quiz binder - question loading and option binding.

Two independent steps:
- load_quiz_questions: read the whole question set from its fixed location
- bind_quiz_options: resolve the options of one selected question

Option binding is the only binder step that raises: asking for a question
that does not exist is a caller error, reported as QuestionIndexError.
"""

import logging
from pathlib import Path
from typing import Optional

from tourbinder.schemas import (
    QuizOption,
    QuizOptionIndex,
    QuizOptionRecord,
    QuizQuestions,
)
from tourbinder.utils.config_loader import BinderSettings
from tourbinder.utils.diagnostics import SinkLike, as_sink
from tourbinder.utils.json_reader import JsonReader

from .errors import QuestionIndexError
from .resolver import SoundPools, build_narration
from .source import unwrap_source

logger = logging.getLogger(__name__)


def load_quiz_questions(
    reader: Optional[JsonReader] = None,
    settings: Optional[BinderSettings] = None,
    sink: SinkLike = None,
) -> QuizQuestions:
    """
    Read the full quiz question set.

    The location is fixed by the settings (content_dir/quiz_file), not
    chosen by the caller. A failed read is reported and the (possibly
    empty) question set is still returned, so check for an empty list
    before selecting a question.
    """
    reader = reader or JsonReader()
    settings = settings or BinderSettings()
    quiz_path: Path = settings.quiz_path

    result = reader.read(QuizQuestions, quiz_path)
    questions = unwrap_source(result, as_sink(sink))
    logger.debug(f"Loaded {len(questions.questions)} quiz question(s) from {quiz_path}")
    return questions


def bind_option(option: QuizOptionRecord, sounds: SoundPools) -> QuizOption:
    """Resolve one quiz option: name as title, description as the single caption."""
    english = [option.english_narration_sound] if option.english_narration_sound else []
    french = [option.french_narration_sound] if option.french_narration_sound else []
    return QuizOption(narration=build_narration(
        option.option_name,
        [option.option_description],
        english,
        french,
        sounds,
    ))


def bind_quiz_options(
    sounds: SoundPools,
    questions: QuizQuestions,
    question_index: int,
) -> QuizOptionIndex:
    """
    Bind the options of the selected question.

    Args:
        sounds: Narration sound pool, shared or per language
        questions: Full question set from load_quiz_questions
        question_index: 0-based index of the selected question

    Returns:
        Mapping from 0-based option position to QuizOption

    Raises:
        QuestionIndexError: If the set is empty or the index is out of range
    """
    question_count = len(questions.questions)
    if question_index < 0 or question_index >= question_count:
        raise QuestionIndexError(question_index, question_count)

    options = questions.questions[question_index].options
    return {
        position: bind_option(option, sounds)
        for position, option in enumerate(options)
    }

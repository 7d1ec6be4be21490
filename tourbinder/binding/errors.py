"""Errors raised by the binders. Recoverable content problems never raise."""


class BindingError(Exception):
    """Base class for binder errors."""


class PreconditionViolation(BindingError):
    """A binder was called with arguments outside its contract."""


class QuestionIndexError(PreconditionViolation, IndexError):
    """Quiz option binding asked for a question that does not exist."""

    def __init__(self, index: int, question_count: int):
        self.index = index
        self.question_count = question_count
        if question_count == 0:
            detail = "the question set is empty"
        else:
            detail = f"valid indices are 0..{question_count - 1}"
        super().__init__(f"Question index {index} out of range: {detail}")


class UnknownInstructionTypeError(BindingError, ValueError):
    """Strict mode: an instruction type string is not in the vocabulary."""

    def __init__(self, type_string: str):
        self.type_string = type_string
        super().__init__(f"Unknown instruction type: {type_string!r}")

"""
JSON reader - decode a content file into a typed record.

The reader never raises for bad content. It returns a ReadResult whose
record is whatever could be decoded (an empty record at worst) together
with a success flag and a human-readable message.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from tourbinder.schemas import ContentFile

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass
class ReadResult(Generic[T]):
    """Outcome of reading one content file."""
    record: T
    success: bool
    message: str


class JsonReader:
    """
    Stateless structured-file reader.

    Holds no per-call state, so one instance can be shared by every binder.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, model: type[T], path: str | Path) -> ReadResult[T]:
        """
        Read and validate a JSON file.

        Args:
            model: Pydantic model describing the file; must be constructible
                with no arguments
            path: Path to the JSON file

        Returns:
            ReadResult with the (possibly partial) record
        """
        file_path = Path(path)
        if not file_path.exists():
            return ReadResult(model(), False, f"File not found: {file_path}")

        try:
            with open(file_path, "r", encoding=self.encoding) as f:
                raw = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            return ReadResult(model(), False, f"Could not read {file_path}: {e}")
        except json.JSONDecodeError as e:
            return ReadResult(model(), False, f"Malformed JSON in {file_path}: {e}")

        try:
            record = model.model_validate(raw)
        except ValidationError as e:
            return self._partial(model, raw, file_path, e)

        logger.debug(f"Read {file_path} as {model.__name__}")
        return ReadResult(record, True, f"Read {file_path}")

    def _partial(
        self, model: type[T], raw, file_path: Path, error: ValidationError
    ) -> ReadResult[T]:
        """Recover the valid parts of a file that failed validation."""
        if issubclass(model, ContentFile):
            record, invalid = model.salvage(raw)
            message = (
                f"Invalid content in {file_path}: "
                f"{invalid} invalid entr{'y' if invalid == 1 else 'ies'} kept with defaults "
                f"({error.error_count()} validation error(s))"
            )
            return ReadResult(record, False, message)
        return ReadResult(
            model(), False,
            f"Invalid content in {file_path}: {error.error_count()} validation error(s)"
        )


def read_structured(model: type[T], path: str | Path, reader: JsonReader | None = None) -> ReadResult[T]:
    """Read a content file with the given (or a default) reader."""
    return (reader or JsonReader()).read(model, path)

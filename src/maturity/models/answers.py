"""Answer records supplied by the assessment answer store."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from maturity.models.shared import ResponseValue
from maturity.utils.error_handler import AnswersLoadError

logger = structlog.get_logger(__name__)

_KNOWN_VALUES = {v.value: v for v in ResponseValue}


class Answer(BaseModel):
    """One user response to one question.

    Unknown or empty ``response``/``evidence_ok`` values are coerced to
    ``None`` so a malformed record reads as unanswered instead of failing.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    question_id: str
    framework_id: Optional[str] = None
    response: Optional[ResponseValue] = None
    evidence_ok: Optional[ResponseValue] = None
    notes: Optional[str] = None
    evidence_links: Optional[Any] = None  # Can be string or list
    updated_at: Optional[datetime] = None

    @field_validator("response", "evidence_ok", mode="before")
    @classmethod
    def _coerce_unknown(cls, value: Any) -> Optional[ResponseValue]:
        if isinstance(value, ResponseValue):
            return value
        if isinstance(value, str):
            return _KNOWN_VALUES.get(value.strip())
        return None

    @property
    def is_answered(self) -> bool:
        return self.response is not None

    @property
    def is_not_applicable(self) -> bool:
        return self.response == ResponseValue.NA


class AnswerSnapshot(BaseModel):
    """Wire form of an answer file: a list of answer records."""
    answers: list[Answer] = Field(default_factory=list)


def answers_by_question(records: list[Answer]) -> dict[str, Answer]:
    """Key answers by question id; a later record for the same id wins."""
    return {answer.question_id: answer for answer in records}


def load_answers(path: Path) -> dict[str, Answer]:
    """Load an answer snapshot from JSON.

    Accepts a list of answer records, ``{"answers": [...]}``, or an object
    keyed by question id.

    Raises:
        AnswersLoadError: file missing, not JSON, or records malformed
    """
    if not path.exists():
        raise AnswersLoadError(str(path), "file not found")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise AnswersLoadError(str(path), str(e)) from e

    if isinstance(raw, dict) and "answers" not in raw:
        # Keyed by question id; the key fills a missing questionId.
        raw = [
            {"questionId": key, **value} if isinstance(value, dict) else value
            for key, value in raw.items()
        ]
    if isinstance(raw, list):
        raw = {"answers": raw}

    try:
        snapshot = AnswerSnapshot.model_validate(raw)
    except ValidationError as e:
        raise AnswersLoadError(str(path), str(e)[:500]) from e

    answers = answers_by_question(snapshot.answers)
    logger.info("answers_loaded", path=str(path), records=len(snapshot.answers), questions=len(answers))
    return answers

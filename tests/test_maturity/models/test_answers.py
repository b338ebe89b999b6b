"""Tests for answer records and answer snapshot loading."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from maturity.models import Answer, ResponseValue, answers_by_question, load_answers
from maturity.utils import AnswersLoadError


class TestAnswer:
    """Tests for the Answer model."""

    def test_camel_case_aliases(self):
        """Records in camelCase form load."""
        answer = Answer.model_validate(
            {"questionId": "Q1", "response": "Sim", "evidenceOk": "Parcial", "updatedAt": "2024-05-01T10:00:00Z"}
        )

        assert answer.question_id == "Q1"
        assert answer.response == ResponseValue.SIM
        assert answer.evidence_ok == ResponseValue.PARCIAL
        assert answer.updated_at.year == 2024

    @pytest.mark.parametrize("value", ["", "  ", "Maybe", 3, None])
    def test_unknown_values_coerced_to_none(self, value):
        """Empty or unknown values read as missing."""
        answer = Answer(question_id="Q1", response=value, evidence_ok=value)

        assert answer.response is None
        assert answer.evidence_ok is None
        assert answer.is_answered is False

    def test_surrounding_whitespace_ignored(self):
        """Known values with stray whitespace are accepted."""
        assert Answer(question_id="Q1", response=" Não ").response == ResponseValue.NAO

    def test_not_applicable_flag(self):
        """NA answers are answered but not applicable."""
        answer = Answer(question_id="Q1", response="NA")

        assert answer.is_answered is True
        assert answer.is_not_applicable is True

    def test_evidence_links_accept_string_or_list(self):
        """evidenceLinks passes through as given."""
        assert Answer(question_id="Q1", evidence_links="https://example.org").evidence_links == "https://example.org"
        assert Answer(question_id="Q1", evidence_links=["a", "b"]).evidence_links == ["a", "b"]


class TestLoadAnswers:
    """Tests for load_answers."""

    def test_list_form(self, tmp_path: Path):
        """A JSON list of records loads keyed by question id."""
        path = tmp_path / "answers.json"
        path.write_text(
            json.dumps([{"questionId": "Q1", "response": "Sim"}, {"questionId": "Q2", "response": "NA"}]),
            encoding="utf-8",
        )

        answers = load_answers(path)

        assert set(answers) == {"Q1", "Q2"}
        assert answers["Q2"].is_not_applicable is True

    def test_wrapped_form(self, tmp_path: Path):
        """{"answers": [...]} loads the same way."""
        path = tmp_path / "answers.json"
        path.write_text(json.dumps({"answers": [{"questionId": "Q1", "response": "Parcial"}]}), encoding="utf-8")

        assert load_answers(path)["Q1"].response == ResponseValue.PARCIAL

    def test_keyed_form(self, tmp_path: Path):
        """An object keyed by question id fills in the id."""
        path = tmp_path / "answers.json"
        path.write_text(
            json.dumps({"Q1": {"response": "Sim", "evidenceOk": "Não"}}, ensure_ascii=False),
            encoding="utf-8",
        )

        answer = load_answers(path)["Q1"]

        assert answer.question_id == "Q1"
        assert answer.evidence_ok == ResponseValue.NAO

    def test_last_record_wins(self, tmp_path: Path):
        """Later records for the same question replace earlier ones."""
        path = tmp_path / "answers.json"
        path.write_text(
            json.dumps([{"questionId": "Q1", "response": "Não"}, {"questionId": "Q1", "response": "Sim"}]),
            encoding="utf-8",
        )

        assert load_answers(path)["Q1"].response == ResponseValue.SIM

    def test_missing_file(self, tmp_path: Path):
        """A missing file raises AnswersLoadError."""
        with pytest.raises(AnswersLoadError) as exc_info:
            load_answers(tmp_path / "missing.json")

        assert exc_info.value.error_type == "ANSWERS_LOAD"

    def test_invalid_json(self, tmp_path: Path):
        """Malformed JSON raises AnswersLoadError."""
        path = tmp_path / "answers.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(AnswersLoadError):
            load_answers(path)

    def test_record_without_id(self, tmp_path: Path):
        """A list record missing questionId fails to load."""
        path = tmp_path / "answers.json"
        path.write_text(json.dumps([{"response": "Sim"}]), encoding="utf-8")

        with pytest.raises(AnswersLoadError):
            load_answers(path)


class TestAnswersByQuestion:
    """Tests for answers_by_question."""

    def test_keys_by_question_id(self):
        """Records are keyed by question id."""
        records = [Answer(question_id="Q1"), Answer(question_id="Q2", response="Sim")]

        assert list(answers_by_question(records)) == ["Q1", "Q2"]

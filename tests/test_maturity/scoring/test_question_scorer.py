"""Tests for per-question scoring."""
from __future__ import annotations

import pytest

from maturity.models import Answer, Question
from maturity.scoring import score_question, unique_questions


class TestScoreQuestion:
    """Tests for score_question."""

    def test_missing_answer_is_applicable_gap(self, catalog):
        """No answer: applicable, every score None, id carried over."""
        scored = score_question(None, catalog, "Q1")

        assert scored.question_id == "Q1"
        assert scored.is_applicable is True
        assert scored.response_score is None
        assert scored.evidence_multiplier is None
        assert scored.effective_score is None

    def test_answer_without_response_is_unanswered(self, catalog):
        """An answer record with no response counts as unanswered."""
        scored = score_question(Answer(question_id="Q1", evidence_ok="Sim"), catalog)

        assert scored.is_applicable is True
        assert scored.effective_score is None

    def test_not_applicable_response(self, catalog):
        """NA response drops the question from applicability."""
        scored = score_question(Answer(question_id="Q1", response="NA", evidence_ok="Sim"), catalog)

        assert scored.is_applicable is False
        assert scored.response_score is None
        assert scored.effective_score is None

    def test_full_answer_with_full_evidence(self, catalog):
        """Sim with complete evidence scores 1.0."""
        scored = score_question(Answer(question_id="Q1", response="Sim", evidence_ok="Sim"), catalog)

        assert scored.response_score == 1.0
        assert scored.evidence_multiplier == 1.0
        assert scored.effective_score == 1.0

    def test_partial_answer_with_partial_evidence(self, catalog):
        """Parcial response is discounted by the partial evidence multiplier."""
        scored = score_question(Answer(question_id="Q1", response="Parcial", evidence_ok="Parcial"), catalog)

        assert scored.effective_score == pytest.approx(0.5 * 0.85)

    def test_no_evidence_multiplier(self, catalog):
        """Evidence Não halves a full answer."""
        scored = score_question(Answer(question_id="Q1", response="Sim", evidence_ok="Não"), catalog)

        assert scored.effective_score == pytest.approx(0.5)

    @pytest.mark.parametrize("evidence", [None, "NA", ""])
    def test_missing_evidence_uses_degraded_multiplier(self, catalog, evidence):
        """Empty or NA evidence falls back to the 0.7 degraded multiplier."""
        scored = score_question(Answer(question_id="Q1", response="Sim", evidence_ok=evidence), catalog)

        assert scored.evidence_multiplier == pytest.approx(0.7)
        assert scored.effective_score == pytest.approx(0.7)

    def test_degraded_multiplier_sits_between_partial_and_none(self, catalog):
        """Missing evidence scores below partial evidence and above none."""
        partial = score_question(Answer(question_id="Q1", response="Sim", evidence_ok="Parcial"), catalog)
        missing = score_question(Answer(question_id="Q1", response="Sim"), catalog)
        none = score_question(Answer(question_id="Q1", response="Sim", evidence_ok="Não"), catalog)

        assert none.effective_score < missing.effective_score < partial.effective_score

    def test_negative_answer_scores_zero(self, catalog):
        """Não response scores 0 whatever the evidence."""
        scored = score_question(Answer(question_id="Q1", response="Não", evidence_ok="Sim"), catalog)

        assert scored.effective_score == 0.0
        assert scored.is_applicable is True

    def test_unknown_response_reads_as_unanswered(self, catalog):
        """An unrecognized response value is coerced to None, never an error."""
        scored = score_question(Answer(question_id="Q1", response="Maybe", evidence_ok="Sim"), catalog)

        assert scored.is_applicable is True
        assert scored.effective_score is None

    def test_to_dict_rounds_scores(self, catalog):
        """to_dict rounds to 4 decimals."""
        scored = score_question(Answer(question_id="Q1", response="Parcial", evidence_ok="Parcial"), catalog)

        assert scored.to_dict()["effective_score"] == 0.425


class TestUniqueQuestions:
    """Tests for active-question dedup."""

    def test_first_occurrence_wins(self):
        """Repeated ids keep the first question."""
        first = Question(question_id="Q1", domain_id="D1", question_text="default")
        custom = Question(question_id="Q1", domain_id="D1", question_text="custom")
        other = Question(question_id="Q2", domain_id="D1")

        result = unique_questions([first, other, custom])

        assert [q.question_id for q in result] == ["Q1", "Q2"]
        assert result[0].question_text == "default"

import asyncio

import pytest

from components.classification import (
    ClassificationConfig,
    ClassificationRequest,
    ClassificationService,
    category_confidence,
    predict_category,
    predict_priority,
    suggest_department,
    summarize_complaint,
)


class TestPredictCategory:
    def test_flooding_basement(self, campus):
        result = predict_category("URGENT water leak flooding the basement", campus)
        assert result.category == "water_supply"
        assert result.confidence == 75
        assert result.matched_keywords == ["water", "leak", "flood"]

    def test_tie_goes_to_earlier_category(self, campus):
        # water_supply is declared before electrical_issues
        assert predict_category("water power", campus).category == "water_supply"
        assert predict_category("power water", campus).category == "water_supply"

    def test_strict_maximum_wins(self, campus):
        result = predict_category("power outage and water", campus)
        assert result.category == "electrical_issues"
        assert result.confidence == 60

    def test_empty_text(self, campus):
        for text in ("", None):
            result = predict_category(text, campus)
            assert result.category == "other"
            assert result.confidence == 0
            assert result.matched_keywords == []

    def test_no_match(self, campus):
        result = predict_category("abc xyz", campus)
        assert result.category == "other"
        assert result.confidence == 0

    def test_case_insensitive(self, campus):
        assert predict_category("WIFI NETWORK", campus).category == "internet_connectivity"

    def test_civic_taxonomy(self, civic):
        result = predict_category("Garbage dumped on the road", civic)
        assert result.category == "garbage"
        assert result.confidence == 60

    def test_default_taxonomy(self):
        assert predict_category("The wifi keeps dropping").category == "internet_connectivity"


class TestCategoryConfidence:
    @pytest.mark.parametrize(
        "matches, expected",
        [(0, 0), (1, 45), (2, 60), (4, 90), (5, 100), (10, 100)],
    )
    def test_formula(self, matches, expected):
        assert category_confidence(matches) == expected


class TestPredictPriority:
    def test_first_urgent_keyword_is_cited(self, campus):
        result = predict_priority("URGENT water leak flooding the basement", campus)
        assert result.priority == "high"
        assert result.reason == 'Contains urgent keyword: "urgent"'

    def test_multi_word_urgent_keyword(self, campus):
        result = predict_priority("There is a gas leak near the lab", campus)
        assert result.priority == "high"
        assert result.reason == 'Contains urgent keyword: "gas leak"'

    def test_safety(self, campus):
        result = predict_priority("The stairs feel unsafe at night", campus)
        assert result.priority == "high"
        assert result.reason == "Potential safety hazard reported"

    def test_functional(self, campus):
        result = predict_priority("The projector is not working", campus)
        assert result.priority == "medium"
        assert result.reason == "Functional issue reported"

    def test_routine(self, campus):
        result = predict_priority("Please repaint the notice board", campus)
        assert result.priority == "low"
        assert result.reason == "Routine request"

    def test_empty_text(self, campus):
        result = predict_priority("", campus)
        assert result.priority == "low"
        assert result.reason == "Routine request"

    def test_ladder_order(self, campus):
        result = predict_priority("Urgent: broken and dangerous wiring", campus)
        assert result.reason == 'Contains urgent keyword: "urgent"'
        result = predict_priority("broken and dangerous wiring", campus)
        assert result.reason == "Potential safety hazard reported"


class TestSummarizeComplaint:
    def test_empty(self):
        assert summarize_complaint("") == ""
        assert summarize_complaint(None) == ""

    def test_short_text_unchanged(self):
        assert summarize_complaint("Tap is broken!") == "Tap is broken!"
        text = "x" * 49
        assert summarize_complaint(text) == text

    def test_first_sentence(self):
        text = "The hostel water tap is broken. It has been leaking for three days now."
        assert summarize_complaint(text) == "The hostel water tap is broken."

    def test_short_first_sentence_is_truncated(self):
        text = "Tap broken. " + "x" * 100
        summary = summarize_complaint(text)
        assert summary == text[:97] + "..."
        assert len(summary) == 100

    def test_long_first_sentence_is_truncated(self):
        text = "a" * 150
        assert summarize_complaint(text) == "a" * 97 + "..."


class TestSuggestDepartment:
    def test_known_category(self, campus):
        department = suggest_department("water_supply", campus)
        assert department.code == "PLMB"

    def test_unknown_category_uses_default(self, campus):
        department = suggest_department("other", campus)
        assert department == campus.default_department
        assert department.code == "CFHD"


class TestClassificationService:
    @pytest.fixture(scope="class")
    def service(self, campus):
        return ClassificationService(taxonomy=campus)

    def test_process(self, service):
        response = asyncio.run(
            service.process(
                ClassificationRequest(description="URGENT water leak flooding the basement")
            )
        )
        assert response.category == "water_supply"
        assert response.priority == "high"
        assert response.summary == "URGENT water leak flooding the basement"
        assert response.department.code == "PLMB"

    def test_health_check(self, service):
        health = asyncio.run(service.health_check())
        assert health["status"] == "healthy"
        assert health["component"] == "classification"
        assert "water_supply" in health["categories"]

    def test_taxonomy_from_environment(self, monkeypatch):
        monkeypatch.setenv("TAXONOMY", "civic")
        assert ClassificationConfig().taxonomy == "civic"

    def test_threshold_from_environment(self, monkeypatch):
        monkeypatch.setenv("CLASSIFICATION_SUGGESTION_THRESHOLD", "70")
        assert ClassificationConfig().suggestion_threshold == 70

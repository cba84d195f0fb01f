import asyncio

import pytest

from components.base.exceptions import ProcessingError
from components.complaints import Complaint
from components.orchestrator import (
    analyze_complaint_comprehensive,
    build_recommendations,
    compute_ai_score,
    prepare_initial_state,
    run_analysis,
)
from components.orchestrator.workflow import build_workflow, error_handler_node
from components.responses import generate_response_suggestions
from components.sentiment import analyze_sentiment
from components.similarity import find_similar_complaints

FLOODING = "URGENT water leak flooding the basement"


class FailingWorkflow:
    async def ainvoke(self, state):
        return {
            **state,
            "status": "failed",
            "current_agent": "sentiment",
            "error_message": "Workflow failed at sentiment: boom",
            "analysis": None,
        }


class TestScoring:
    def test_ai_score(self):
        score = compute_ai_score(80, 0)
        assert score.uniqueness == 100
        assert score.quality == 75
        assert score.overall == 84

    def test_uniqueness_floor(self):
        score = compute_ai_score(50, 30)
        assert score.uniqueness == 0
        assert score.overall == 45

    def test_recommendations(self, campus):
        complaint = {"id": 1, "description": "bad awful terrible angry problem", "category": "sanitation"}
        sentiment = analyze_sentiment(complaint["description"], campus)
        responses = generate_response_suggestions("sanitation", sentiment.sentiment, "medium", campus)
        similar = find_similar_complaints(complaint, [complaint])

        assert build_recommendations(similar, sentiment, responses) == [
            "Merge with similar complaint",
            "Assign experienced officer",
            "Include apology in response",
        ]


class TestAnalyzeComplaintComprehensive:
    def test_predictions_fill_missing_fields(self, campus):
        analysis = analyze_complaint_comprehensive(Complaint(description=FLOODING), [], campus)

        assert analysis.category == "water_supply"
        assert analysis.priority == "high"
        assert analysis.sentiment_analysis.sentiment == "urgent"
        assert analysis.response_suggestions.tone == "urgent"
        assert analysis.similar_complaints.total_similar == 0
        assert analysis.ai_score.overall == 84
        assert analysis.recommendations == ["Flag as priority for faster response"]

    def test_filed_fields_are_kept(self, campus):
        complaint = {"id": 5, "description": FLOODING, "category": "sanitation", "priority": "low"}
        analysis = analyze_complaint_comprehensive(complaint, [], campus)

        assert analysis.complaint_id == "5"
        assert analysis.category == "sanitation"
        assert analysis.priority == "low"
        assert analysis.classification.category == "water_supply"
        assert analysis.response_suggestions.category == "sanitation"


class TestBlankComplaintFields:
    @pytest.mark.parametrize(
        "complaint",
        [
            {"description": FLOODING, "category": None, "priority": None},
            {"description": FLOODING, "category": "", "priority": ""},
            Complaint(description=FLOODING, category=None, priority=None),
            Complaint(description=FLOODING, category=""),
            Complaint.model_validate({"description": FLOODING, "category": None}),
        ],
    )
    def test_blank_fields_are_predicted(self, complaint, campus):
        analysis = analyze_complaint_comprehensive(complaint, [], campus)
        assert analysis.category == "water_supply"
        assert analysis.priority == "high"

    @pytest.mark.parametrize(
        "complaint",
        [
            {"description": FLOODING, "category": None},
            Complaint(description=FLOODING, category=None),
        ],
    )
    def test_workflow_predicts_blank_fields(self, complaint):
        analysis = asyncio.run(run_analysis(complaint))
        assert analysis.category == "water_supply"
        assert analysis.priority == "high"

    def test_blank_fields_stay_unset(self):
        complaint = Complaint(description=FLOODING, category=None, priority="")
        assert complaint.model_fields_set == {"description"}
        assert complaint.category == "other"
        assert complaint.priority == "medium"


class TestWorkflow:
    def test_build(self):
        graph = build_workflow().get_graph()
        assert "Classification Agent" in graph.nodes
        assert "Error Handler" in graph.nodes

    def test_initial_state_leaves_unset_fields_out(self):
        state = prepare_initial_state(Complaint(description=FLOODING), [{"id": 1}])
        assert state["complaint"] == {"description": FLOODING}
        assert state["corpus"] == [{"id": 1}]
        assert state["status"] == "processing"

    def test_run_analysis(self):
        analysis = asyncio.run(run_analysis({"description": FLOODING}))

        assert analysis.category == "water_supply"
        assert analysis.priority == "high"
        assert analysis.classification.priority_reason == 'Contains urgent keyword: "urgent"'
        assert analysis.sentiment_analysis.score == 80
        assert analysis.similar_complaints.recommendation == "No similar complaints detected."
        assert analysis.ai_score.overall == 84

    def test_matches_synchronous_composition(self, wifi_pair):
        new, existing = wifi_pair
        from_graph = asyncio.run(run_analysis(new, [existing]))
        direct = analyze_complaint_comprehensive(new, [existing])
        assert from_graph.model_dump(mode="json") == direct.model_dump(mode="json")

    def test_duplicates_lower_uniqueness(self):
        complaint = {"id": 3, "description": FLOODING, "category": "water_supply"}
        corpus = [{"id": 1, "description": FLOODING, "category": "water_supply"}]

        analysis = asyncio.run(run_analysis(complaint, corpus))

        assert analysis.similar_complaints.has_duplicates
        assert analysis.ai_score.uniqueness == 95
        assert analysis.recommendations[0] == "Merge with similar complaint"

    def test_failure_raises(self):
        with pytest.raises(ProcessingError) as exc_info:
            asyncio.run(run_analysis({"description": FLOODING}, workflow=FailingWorkflow()))
        assert exc_info.value.details["stage"] == "sentiment"

    def test_error_handler_marks_failed(self):
        update = error_handler_node(
            {"current_agent": "similarity", "error_message": "bad corpus"}
        )
        assert update["status"] == "failed"
        assert update["analysis"] is None
        assert update["error_message"] == "Workflow failed at similarity: bad corpus"

import asyncio

import pytest

from components.sentiment import SentimentRequest, SentimentService, analyze_sentiment


class TestAnalyzeSentiment:
    def test_urgent(self, campus):
        result = analyze_sentiment("URGENT water leak flooding the basement", campus)
        assert result.sentiment == "urgent"
        assert result.score == 80
        assert result.keywords == ["URGENT: urgent"]
        assert result.has_urgent_words
        assert result.emotional_intensity == 1

    def test_urgent_score_is_capped(self, campus):
        result = analyze_sentiment("emergency urgent critical immediately asap danger", campus)
        assert result.sentiment == "urgent"
        assert result.score == 100

    def test_urgent_beats_positive(self, campus):
        result = analyze_sentiment("Great work but this is urgent", campus)
        assert result.sentiment == "urgent"
        assert result.keywords == ["great", "URGENT: urgent"]

    def test_positive(self, campus):
        result = analyze_sentiment("Thanks, the issue was resolved and the staff were great", campus)
        assert result.sentiment == "positive"
        assert result.score == 80
        assert result.keywords == ["great", "thanks", "resolved"]
        assert not result.has_negative_words

    def test_negative(self, campus):
        result = analyze_sentiment("The food is terrible and the service is awful", campus)
        assert result.sentiment == "negative"
        assert result.score == 30
        assert result.has_negative_words
        assert not result.has_urgent_words

    def test_negative_score_floor(self, campus):
        result = analyze_sentiment("bad terrible awful angry upset frustrated", campus)
        assert result.score == 0
        assert result.emotional_intensity == 6

    def test_keyword_counts_once(self, campus):
        result = analyze_sentiment("bad bad bad", campus)
        assert result.sentiment == "negative"
        assert result.score == 40
        assert result.keywords == ["bad"]

    def test_tie_is_neutral(self, campus):
        result = analyze_sentiment("good but bad", campus)
        assert result.sentiment == "neutral"
        assert result.score == 50
        assert result.keywords == ["good", "bad"]

    @pytest.mark.parametrize("text", ["", None])
    def test_empty(self, text, campus):
        result = analyze_sentiment(text, campus)
        assert result.sentiment == "neutral"
        assert result.score == 50
        assert result.keywords == []
        assert result.emotional_intensity == 0


class TestSentimentService:
    def test_process(self, campus):
        service = SentimentService(taxonomy=campus)
        result = asyncio.run(service.process(SentimentRequest(description="The lift is broken")))
        assert result.sentiment == "negative"
        assert result.score == 40

    def test_health_check(self, campus):
        health = asyncio.run(SentimentService(taxonomy=campus).health_check())
        assert health["status"] == "healthy"
        assert health["lexicon_sizes"]["urgent"] == len(campus.sentiment.urgent)

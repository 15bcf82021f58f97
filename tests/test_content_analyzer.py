"""Tests for message content analysis."""

from zerotrust.analyzer import AnalysisKind, ContentRiskAnalyzer, ThreatIndicatorCatalog, analyze_content


class TestContentRiskAnalyzer:
    """Test phrase and pattern rules."""

    def test_sample_phishing_email(self):
        result = analyze_content("Urgent! Your PayPal account suspended. Click here now!")
        # "Suspended account" is not a substring here; only the call-to-action fires.
        assert result.threat_indicators == ("Suspicious call-to-action",)
        assert result.risk_score == 10
        assert result.kind == AnalysisKind.CONTENT

    def test_phrase_match_is_case_insensitive(self):
        result = analyze_content("SECURITY ALERT: please review")
        assert result.threat_indicators == ('Phishing phrase: "Security alert"',)
        assert result.risk_score == 15

    def test_multiple_phrases_each_contribute(self):
        text = "Urgent action required. Verify your account now. Tax refund pending."
        result = analyze_content(text)
        assert result.threat_indicators == (
            'Phishing phrase: "Urgent action required"',
            'Phishing phrase: "Verify your account now"',
            'Phishing phrase: "Tax refund pending"',
        )
        assert result.risk_score == 45

    def test_phrase_and_call_to_action_both_fire(self):
        result = analyze_content("Click here immediately to restore access")
        assert result.threat_indicators == (
            'Phishing phrase: "Click here immediately"',
            "Suspicious call-to-action",
        )
        assert result.risk_score == 25

    def test_call_to_action_words_need_not_be_adjacent(self):
        result = analyze_content("Please CLICK the button over HERE")
        assert "Suspicious call-to-action" in result.threat_indicators

    def test_call_to_action_requires_order(self):
        result = analyze_content("here is the thing you should click")
        assert "Suspicious call-to-action" not in result.threat_indicators

    def test_call_to_action_does_not_span_lines(self):
        result = analyze_content("click\nhere")
        assert "Suspicious call-to-action" not in result.threat_indicators

    def test_money(self):
        result = analyze_content("You owe $250 today")
        assert result.threat_indicators == ("Money-related content",)
        assert result.risk_score == 10

    def test_dollar_without_digits(self):
        assert analyze_content("costs $ 5").risk_score == 0
        assert analyze_content("price in $USD").risk_score == 0

    def test_clean_text(self):
        result = analyze_content("See you at lunch tomorrow")
        assert result.risk_score == 0
        assert result.is_clean

    def test_score_is_unbounded(self):
        text = " ".join(ThreatIndicatorCatalog().phishing_phrases) + " click here $100"
        result = analyze_content(text)
        assert result.risk_score == 8 * 15 + 10 + 10
        assert result.risk_score > 100


class TestContentCatalogInjection:
    def test_custom_phrases(self):
        catalog = ThreatIndicatorCatalog(phishing_phrases=("Wire transfer",))
        analyzer = ContentRiskAnalyzer(catalog)
        result = analyzer.analyze("Please send a wire transfer")
        assert result.threat_indicators == ('Phishing phrase: "Wire transfer"',)

        assert analyzer.analyze("Security alert").risk_score == 0

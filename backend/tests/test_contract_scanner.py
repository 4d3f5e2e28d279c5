import pytest

from schemas.contract import ContractScanInput, ContractDealContext
from services.contract_scanner import (
    scan_contract, get_health_level, is_valid_contract_text, has_exclusivity_language,
    detect_contract_red_flags, split_sentences,
)
from services.errors import ValidationError

FAIR_CONTRACT = """
The Brand will pay the Creator a flat fee of $1,500 for this campaign.
Payment is due within 15 days of invoice.
Late payments will accrue interest at 1.5% per month.
A 50% deposit is paid upon signing.
If the Brand cancels after signing, a kill fee of 50% applies.
Deliverables are two Instagram posts and one reel.
The fee includes up to two rounds of revisions.
The Brand may use the content on organic social channels for 30 days.
The territory is the United States.
Creator retains ownership of raw footage.
Either party may terminate with 14 days written notice.
Any dispute will go to mediation first.
Liability is limited to the contract value.
Creator will disclose the partnership with #ad per FTC guidelines.
This agreement is governed by the laws of the State of California.
"""

ONE_SIDED_CONTRACT = (
    "The Brand may use the content in perpetuity across all channels. "
    "Payment will be made Net 90 after the campaign ends. "
    "Creator agrees to unlimited revisions until the Brand is satisfied. "
    "Creator waives all moral rights in the content. "
    "Deliverables are three Instagram posts."
)


def scan(text, **kwargs):
    return scan_contract(ContractScanInput(contract_text=text, **kwargs))


class TestContractScan:
    def test_fair_contract_is_healthy(self):
        result = scan(FAIR_CONTRACT, creator_name="Maya")

        assert result.health_score == 100
        assert result.health_level == "excellent"
        assert result.red_flags == []
        assert result.missing_clauses == []
        assert all(clause.assessment == "good" for clause in result.found_clauses)
        assert "looks good" in result.change_request_template
        assert result.change_request_template.endswith("Maya")
        assert len(result.recommendations) == 3

    def test_no_exclusivity_language_scores_full(self):
        exclusivity = scan(FAIR_CONTRACT).categories.exclusivity
        assert exclusivity.score == 25
        assert exclusivity.status == "complete"
        assert exclusivity.findings[0].startswith("No exclusivity restrictions")

    def test_one_sided_contract(self):
        result = scan(ONE_SIDED_CONTRACT)

        assert result.health_score < 60
        assert [flag.severity for flag in result.red_flags] == ["high", "high", "medium", "medium"]
        assert result.red_flags[0].clause == "Perpetual usage rights"
        assert result.categories.legal.status == "missing"
        assert result.categories.payment.status == "partial"
        assert result.missing_clauses[0].importance == "critical"

        usage = next(c for c in result.found_clauses if c.item == "Usage rights duration")
        assert usage.assessment == "red_flag"
        assert usage.note

    def test_change_request_priority_order(self):
        template = scan(ONE_SIDED_CONTRACT).change_request_template
        assert template.index("[HIGH PRIORITY]") < template.index("[CRITICAL]") < template.index("[IMPORTANT]")
        assert "1. [HIGH PRIORITY]" in template
        assert "[Your Name]" in template

    def test_recommendations_bounded(self):
        recommendations = scan(ONE_SIDED_CONTRACT).recommendations
        assert 3 <= len(recommendations) <= 5
        assert recommendations[0] == "Either remove perpetual rights or charge 3-5x the base rate"

    def test_offered_rate_mismatch(self):
        context = ContractDealContext(platform="instagram", deal_type="sponsored", offered_rate=2000)
        result = scan(FAIR_CONTRACT, deal_context=context)
        assert "Contract amounts do not match the offered rate of $2,000" in result.categories.payment.findings
        assert result.deal_context == ["Platform: instagram", "Deal Type: sponsored", "Offered Rate: $2,000"]

    def test_offered_rate_match(self):
        result = scan(FAIR_CONTRACT, deal_context=ContractDealContext(offered_rate=1500))
        assert not any("offered rate" in finding for finding in result.categories.payment.findings)

    def test_short_text_rejected(self):
        with pytest.raises(ValidationError, match="characters long"):
            scan("Pay me later.")

    def test_padded_text_at_minimum_length_accepted(self):
        clause = "The Brand will pay the Creator a flat fee of $500 within 30 days of posting the sponsored content."
        body = clause + "x" * (100 - len(clause))
        result = scan("\n\n   " + body + "   \n")
        assert len(body) == 100
        assert result.change_request_template

    def test_scan_is_deterministic(self):
        assert scan(ONE_SIDED_CONTRACT) == scan(ONE_SIDED_CONTRACT)


class TestContractHelpers:
    @pytest.mark.parametrize("score,level", [
        (100, "excellent"), (80, "excellent"), (79, "good"), (60, "good"),
        (59, "fair"), (40, "fair"), (39, "poor"), (0, "poor"),
    ])
    def test_health_levels(self, score, level):
        assert get_health_level(score) == level

    def test_contract_length_check_ignores_padding(self):
        assert is_valid_contract_text("x" * 100)
        assert is_valid_contract_text("   " + "x" * 100 + "   ")
        assert not is_valid_contract_text("  " + "x" * 99 + "  ")
        assert not is_valid_contract_text(None)

    def test_non_exclusive_is_not_exclusivity(self):
        assert not has_exclusivity_language("This is a non-exclusive agreement.")
        assert has_exclusivity_language("Creator will not promote competitors for 30 days.")

    def test_mutual_non_disparagement_not_flagged(self):
        flags = detect_contract_red_flags("Each party agrees to a mutual non-disparagement clause.")
        assert flags == []

    def test_kill_fee_cancels_cancellation_flag(self):
        text = "The Brand may cancel at any time. A kill fee of 50% is owed after signing."
        assert detect_contract_red_flags(text) == []
        assert [flag_id for flag_id, _ in detect_contract_red_flags("The Brand may cancel at any time.")] == [
            "no-kill-fee",
        ]

    def test_quotes_are_capped(self):
        sentence = "The Brand may use the content in perpetuity " + "and across every format " * 20
        _, flag = detect_contract_red_flags(sentence)[0]
        assert len(flag.quote) == 200
        assert flag.quote.endswith("...")

    def test_split_sentences(self):
        assert split_sentences("One. Two!\n\nThree; four") == ["One.", "Two!", "Three;", "four"]

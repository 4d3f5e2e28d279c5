from schemas.brief import RetainerConfig, MonthlyDeliverables
from services.contract_checklist import (
    get_contract_checklist, get_items_by_category, get_critical_items, get_highlighted_items,
    get_detected_red_flags, get_red_flags_by_severity, generate_deal_notes, is_item_applicable,
)


class TestChecklistWithoutBrief:
    def test_full_checklist(self):
        checklist = get_contract_checklist()
        assert checklist.summary.total_items == 19
        assert checklist.summary.critical_items == 9
        assert len(checklist.red_flags) == 11
        assert checklist.by_category == {"payment": 5, "content_rights": 6, "exclusivity": 3, "legal": 5}

    def test_nothing_detected_or_highlighted(self):
        checklist = get_contract_checklist()
        assert get_detected_red_flags(checklist) == []
        assert get_highlighted_items(checklist) == []
        assert all(item.applicable for item in checklist.items)
        assert checklist.deal_notes == ["Review all items - no specific deal data provided."]

    def test_filters(self):
        checklist = get_contract_checklist()
        assert {item.category for item in get_items_by_category(checklist, "legal")} == {"legal"}
        assert all(item.priority == "critical" for item in get_critical_items(checklist))
        assert {flag.id for flag in get_red_flags_by_severity(checklist, "low")} == {"auto-renewal"}


class TestChecklistForBrief:
    def test_standard_brief(self, reel_brief):
        checklist = get_contract_checklist(reel_brief)
        highlighted = {item.id for item in get_highlighted_items(checklist)}
        assert highlighted == {
            "usage-duration", "usage-channels", "usage-territory",
            "revision-rounds", "payment-amount", "payment-timeline",
        }
        assert not is_item_applicable("exclusivity-scope", reel_brief)
        assert checklist.deal_notes == ["Standard deal structure detected. Review all critical items before signing."]

    def test_risky_brief_detects_flags(self, brief_factory):
        brief = brief_factory(usage_rights={
            "duration_days": 400, "paid_amplification": True, "exclusivity": "category",
        })
        checklist = get_contract_checklist(brief)

        assert {flag.id for flag in get_detected_red_flags(checklist)} == {
            "perpetual-rights", "unpaid-usage-rights", "uncompensated-exclusivity",
        }
        assert checklist.summary.detected_red_flags == 3
        assert is_item_applicable("exclusivity-period", brief)
        assert len(checklist.deal_notes) == 3
        assert checklist.deal_notes[-1].startswith("Extended Usage: 400 days")

    def test_retainer_highlights_deposit_and_kill_fee(self, brief_factory):
        brief = brief_factory(retainer_config=RetainerConfig(
            deal_length="12_month", monthly_deliverables=MonthlyDeliverables(posts=1),
        ))
        highlighted = {item.id for item in get_highlighted_items(get_contract_checklist(brief))}
        assert {"deposit-upfront", "kill-fee"} <= highlighted
        assert generate_deal_notes(brief)[0].startswith("Ambassador Deal")

    def test_ugc_and_affiliate_notes(self, brief_factory):
        notes = generate_deal_notes(brief_factory(deal_type="ugc", pricing_model="affiliate"))
        assert notes[0].startswith("UGC Deal")
        assert notes[1].startswith("Affiliate Deal")

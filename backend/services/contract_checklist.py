"""
Pre-signing contract checklist. Works from the brief alone (no contract text):
marks which terms matter most for this deal and which red flags the brief
already implies.
"""
from typing import Optional

from data.contract_clauses import CONTRACT_CATEGORIES, CONTRACT_TERMS, CONTRACT_RED_FLAGS
from schemas.brief import ParsedBrief
from schemas.contract import (
    ContractChecklist, ContractChecklistItem, ContractChecklistSummary, ContractRedFlag,
)

USAGE_ITEMS = ("usage-duration", "usage-channels", "usage-territory")
EXCLUSIVITY_ITEMS = ("exclusivity-period", "exclusivity-scope", "exclusivity-compensation")
ALWAYS_HIGHLIGHTED = ("revision-rounds", "payment-amount", "payment-timeline")

PERPETUAL_USAGE_DAYS = 365
EXTENDED_USAGE_DAYS = 90


def _has_exclusivity(brief: ParsedBrief) -> bool:
    return brief.usage_rights.exclusivity != "none"


def is_item_applicable(item_id: str, brief: Optional[ParsedBrief] = None) -> bool:
    if brief is None:
        return True
    if CONTRACT_TERMS[item_id]["category"] == "exclusivity":
        return _has_exclusivity(brief)
    return True


def is_item_highlighted(item_id: str, brief: Optional[ParsedBrief] = None) -> bool:
    if brief is None:
        return False

    if item_id in USAGE_ITEMS:
        return brief.usage_rights.duration_days > 0 or brief.usage_rights.paid_amplification
    if item_id in EXCLUSIVITY_ITEMS:
        return _has_exclusivity(brief)
    if item_id in ALWAYS_HIGHLIGHTED:
        return True
    if item_id == "deposit-upfront":
        return brief.retainer_config is not None or brief.pricing_model in ("hybrid", "performance")
    if item_id == "kill-fee":
        return brief.retainer_config is not None
    return False


def is_red_flag_detected(flag_id: str, brief: Optional[ParsedBrief] = None) -> bool:
    if brief is None:
        return False

    if flag_id == "perpetual-rights":
        return brief.usage_rights.duration_days > PERPETUAL_USAGE_DAYS
    if flag_id == "unpaid-usage-rights":
        return brief.usage_rights.paid_amplification
    if flag_id == "uncompensated-exclusivity":
        return _has_exclusivity(brief)
    return False


def generate_deal_notes(brief: Optional[ParsedBrief] = None) -> list:
    if brief is None:
        return ["Review all items - no specific deal data provided."]

    notes = []

    if brief.deal_type == "ugc":
        notes.append(
            "UGC Deal: Ensure deliverables and revision rounds are clearly defined since "
            "you're being paid per asset, not per audience."
        )

    if brief.pricing_model == "affiliate":
        notes.append("Affiliate Deal: Ensure commission rate, tracking method, and payment frequency are clearly stated.")
    elif brief.pricing_model == "hybrid":
        notes.append("Hybrid Deal: Ensure both base fee AND commission terms are clearly documented separately.")
    elif brief.pricing_model == "performance":
        notes.append("Performance Deal: Ensure bonus thresholds and metrics are specific and measurable.")

    if brief.retainer_config:
        length = brief.retainer_config.deal_length
        if length == "12_month":
            notes.append(
                "Ambassador Deal: This is a long-term commitment. Ensure exit clauses and "
                "performance review periods exist."
            )
        elif length in ("6_month", "3_month"):
            notes.append("Retainer Deal: Monthly deliverables should be clearly defined with flexibility for unused content.")

    usage = brief.usage_rights
    if usage.paid_amplification:
        notes.append(
            "Paid Amplification: Brand wants to run your content as ads. Ensure this is "
            "compensated appropriately (+100% minimum)."
        )
    if usage.exclusivity == "full":
        notes.append(
            "Full Exclusivity: You cannot work with ANY other brands during this period. "
            "This should come with major premium (+100%)."
        )
    elif usage.exclusivity == "category":
        notes.append("Category Exclusivity: You cannot work with competitors. Ensure the category is narrowly defined.")
    if usage.duration_days > EXTENDED_USAGE_DAYS:
        notes.append(
            f"Extended Usage: {usage.duration_days} days is longer than standard. Ensure rate reflects this."
        )

    if not notes:
        notes.append("Standard deal structure detected. Review all critical items before signing.")
    return notes


def _checklist_item(item_id: str, applicable: bool, highlighted: bool) -> ContractChecklistItem:
    term = CONTRACT_TERMS[item_id]
    return ContractChecklistItem(
        id=item_id,
        category=term["category"],
        term=term["term"],
        explanation=term["explanation"],
        recommendation=term["recommendation"],
        priority=term["priority"],
        applicable=applicable,
        highlighted=highlighted,
    )


def _red_flag(flag_id: str, detected: bool) -> ContractRedFlag:
    rule = CONTRACT_RED_FLAGS[flag_id]
    return ContractRedFlag(
        id=flag_id,
        flag=rule["flag"],
        reason=rule["reason"],
        action=rule["action"],
        severity=rule["severity"],
        detected=detected,
    )


def get_contract_checklist(brief: Optional[ParsedBrief] = None) -> ContractChecklist:
    items = [
        _checklist_item(item_id, is_item_applicable(item_id, brief), is_item_highlighted(item_id, brief))
        for item_id in CONTRACT_TERMS
    ]
    red_flags = [_red_flag(flag_id, is_red_flag_detected(flag_id, brief)) for flag_id in CONTRACT_RED_FLAGS]

    return ContractChecklist(
        items=items,
        red_flags=red_flags,
        summary=ContractChecklistSummary(
            total_items=len(items),
            critical_items=sum(1 for i in items if i.priority == "critical"),
            highlighted_items=sum(1 for i in items if i.highlighted),
            detected_red_flags=sum(1 for f in red_flags if f.detected),
        ),
        by_category={
            category: sum(1 for i in items if i.category == category)
            for category in CONTRACT_CATEGORIES
        },
        deal_notes=generate_deal_notes(brief),
    )


def get_items_by_category(checklist: ContractChecklist, category: str) -> list:
    return [item for item in checklist.items if item.category == category]


def get_critical_items(checklist: ContractChecklist) -> list:
    return [item for item in checklist.items if item.priority == "critical"]


def get_highlighted_items(checklist: ContractChecklist) -> list:
    return [item for item in checklist.items if item.highlighted]


def get_detected_red_flags(checklist: ContractChecklist) -> list:
    return [flag for flag in checklist.red_flags if flag.detected]


def get_red_flags_by_severity(checklist: ContractChecklist, severity: str) -> list:
    return [flag for flag in checklist.red_flags if flag.severity == severity]

"""
Contract scanner.

Rule-based pass over an influencer contract: each sentence is checked against
the clause table (what a fair contract should contain) and the red-flag table
(terms that hurt the creator). Category scores start at 25 and lose points
for every missing clause and red flag in that category.
"""
import logging
import re
from typing import Optional

from data.contract_clauses import (
    CONTRACT_CATEGORIES, CATEGORY_MAX_SCORE, MISSING_CLAUSE_PENALTIES, RED_FLAG_PENALTIES,
    SEVERITY_RANK, IMPORTANCE_RANK, EXCLUSIVITY_LANGUAGE, CONTRACT_TERMS, CONTRACT_RED_FLAGS,
    GENERAL_CONTRACT_RECOMMENDATIONS, MIN_RECOMMENDATIONS, MAX_RECOMMENDATIONS,
    MAX_QUOTE_LENGTH, HEALTH_LEVELS,
)
from schemas.contract import (
    ContractScanInput, ContractScanResult, ContractCategories, ContractCategoryAnalysis,
    ContractDealContext, FoundClause, MissingClause, ContractScanRedFlag,
)
from services.numbers import clamp, format_money
from services.validation import MIN_CONTRACT_LENGTH, validate_contract_text

logger = logging.getLogger(__name__)

_SENTENCE_BREAK = re.compile(r"(?<=[.!?;])\s+|\n+")
_DOLLAR_AMOUNT = re.compile(r"\$\s?(\d[\d,]*(?:\.\d+)?)")

NO_EXCLUSIVITY_FINDING = "No exclusivity restrictions found - you're free to work with other brands"

# Change request sections, in the order they must appear
CHANGE_REQUEST_SECTIONS = [
    ("red_flag", "high", "[HIGH PRIORITY]"),
    ("missing", "critical", "[CRITICAL]"),
    ("red_flag", "medium", "[IMPORTANT]"),
    ("missing", "important", "[IMPORTANT]"),
]

LOOKS_GOOD_TEMPLATE = """Hi,

Thank you for sending over the contract. I've reviewed it and everything looks good! I'm ready to move forward.

Best,
{name}"""

CHANGES_TEMPLATE = """Hi,

Thank you for sending over the contract. I've reviewed it carefully and have a few requested changes before I can sign:

{changes}

I'm excited about this partnership and want to make sure we're both protected. Please let me know if these adjustments work for you.

Best,
{name}"""


def get_min_contract_length() -> int:
    return MIN_CONTRACT_LENGTH


def is_valid_contract_text(text) -> bool:
    return isinstance(text, str) and len(text.strip()) >= MIN_CONTRACT_LENGTH


def get_health_level(score: float) -> str:
    for min_score, level in HEALTH_LEVELS:
        if score >= min_score:
            return level
    return HEALTH_LEVELS[-1][1]


def split_sentences(text: str) -> list:
    return [s.strip() for s in _SENTENCE_BREAK.split(text) if s and s.strip()]


def _matches(text: str, patterns) -> bool:
    return any(re.search(pattern, text, re.IGNORECASE) for pattern in patterns or [])


def _first_matching_sentence(sentences: list, patterns) -> Optional[str]:
    for sentence in sentences:
        if _matches(sentence, patterns):
            return sentence
    return None


def _quote(sentence: str) -> str:
    if len(sentence) <= MAX_QUOTE_LENGTH:
        return sentence
    return sentence[:MAX_QUOTE_LENGTH - 3].rstrip() + "..."


def has_exclusivity_language(text: str) -> bool:
    return _matches(text, EXCLUSIVITY_LANGUAGE)


def detect_contract_red_flags(text: str, sentences: list = None) -> list:
    """
    Returns (flag_id, ContractScanRedFlag) pairs, highest severity first.
    A flag fires on the first sentence matching one of its patterns, unless
    that sentence (or, for contract-wide exceptions, the whole text) also
    contains language that neutralizes it.
    """
    sentences = sentences if sentences is not None else split_sentences(text)
    detected = []

    for flag_id, rule in CONTRACT_RED_FLAGS.items():
        hit = None
        for sentence in sentences:
            if _matches(sentence, rule["patterns"]) and not _matches(sentence, rule.get("unless_sentence")):
                hit = sentence
                break
        if hit is None:
            continue
        if _matches(text, rule.get("unless_contract")):
            continue

        detected.append((flag_id, ContractScanRedFlag(
            severity=rule["severity"],
            clause=rule["clause"],
            quote=_quote(hit),
            explanation=rule["reason"],
            suggestion=rule["action"],
        )))

    detected.sort(key=lambda pair: SEVERITY_RANK[pair[1].severity])
    return detected


def _scan_clauses(sentences: list, flagged_items: dict, exclusivity_expected: bool) -> tuple:
    found = []
    missing = []

    for term_id, term in CONTRACT_TERMS.items():
        if term["category"] == "exclusivity" and not exclusivity_expected:
            continue

        sentence = _first_matching_sentence(sentences, term["patterns"])
        if sentence is None:
            missing.append(MissingClause(
                category=term["category"],
                item=term["item"],
                importance=term["priority"],
                suggestion=term["recommendation"],
            ))
            continue

        if term_id in flagged_items:
            assessment = "red_flag"
            note = flagged_items[term_id]
        elif "good_patterns" not in term or _matches(sentence, term["good_patterns"]):
            assessment = "good"
            note = None
        else:
            assessment = "neutral"
            note = term.get("neutral_note")

        found.append(FoundClause(
            category=term["category"],
            item=term["item"],
            quote=_quote(sentence),
            assessment=assessment,
            note=note,
        ))

    missing.sort(key=lambda clause: IMPORTANCE_RANK[clause.importance])
    return found, missing


def _score_category(category: str, found: list, missing: list, flags: list) -> ContractCategoryAnalysis:
    category_found = [c for c in found if c.category == category]
    category_missing = [c for c in missing if c.category == category]
    category_flags = [f for flag_id, f in flags if CONTRACT_RED_FLAGS[flag_id]["category"] == category]

    penalty = sum(MISSING_CLAUSE_PENALTIES[c.importance] for c in category_missing)
    penalty += sum(RED_FLAG_PENALTIES[f.severity] for f in category_flags)
    score = clamp(CATEGORY_MAX_SCORE - penalty, 0, CATEGORY_MAX_SCORE)

    if not category_found:
        status = "missing"
    elif not category_missing and not category_flags:
        status = "complete"
    else:
        status = "partial"

    findings = []
    for clause in category_found:
        findings.append(f"{clause.item}: {clause.note}" if clause.note else f"{clause.item} is covered")
    for clause in category_missing:
        findings.append(f"Missing: {clause.item}")
    for flag in category_flags:
        findings.append(f"Red flag: {flag.clause}")

    return ContractCategoryAnalysis(score=score, status=status, findings=findings)


def _deal_context_lines(context: Optional[ContractDealContext]) -> list:
    if context is None:
        return []
    lines = []
    if context.platform:
        lines.append(f"Platform: {context.platform}")
    if context.deal_type:
        lines.append(f"Deal Type: {context.deal_type}")
    if context.offered_rate is not None:
        lines.append(f"Offered Rate: ${format_money(context.offered_rate)}")
    return lines


def _offered_rate_finding(text: str, offered_rate: Optional[float]) -> Optional[str]:
    """Flags a contract whose written amounts don't include the rate that was offered."""
    if offered_rate is None:
        return None
    amounts = []
    for raw in _DOLLAR_AMOUNT.findall(text):
        try:
            amounts.append(float(raw.replace(",", "")))
        except ValueError:
            continue
    if not amounts:
        return f"Offered rate of ${format_money(offered_rate)} is not written into the contract"
    if not any(abs(amount - offered_rate) < 0.01 for amount in amounts):
        return f"Contract amounts do not match the offered rate of ${format_money(offered_rate)}"
    return None


def build_recommendations(red_flags: list, missing: list) -> list:
    """Most severe issues first, padded with general advice to at least three."""
    recommendations = []
    for kind, level, _ in CHANGE_REQUEST_SECTIONS:
        if kind == "red_flag":
            recommendations.extend(f.suggestion for f in red_flags if f.severity == level)
        else:
            recommendations.extend(
                f"Add a {c.item} clause: {c.suggestion}" for c in missing if c.importance == level
            )

    deduped = []
    for rec in recommendations:
        if rec not in deduped:
            deduped.append(rec)
    deduped = deduped[:MAX_RECOMMENDATIONS]

    for general in GENERAL_CONTRACT_RECOMMENDATIONS:
        if len(deduped) >= MIN_RECOMMENDATIONS:
            break
        deduped.append(general)
    return deduped


def generate_change_request(result: ContractScanResult, creator_name: Optional[str] = None) -> str:
    """
    Negotiation email listing the changes to ask for, numbered in priority
    order. Low-severity flags and optional clauses are left out.
    """
    name = creator_name or "[Your Name]"
    changes = []

    for kind, level, label in CHANGE_REQUEST_SECTIONS:
        if kind == "red_flag":
            for flag in result.red_flags:
                if flag.severity == level:
                    changes.append(f"{len(changes) + 1}. {label} {flag.clause}: {flag.suggestion}")
        else:
            for clause in result.missing_clauses:
                if clause.importance == level:
                    changes.append(f"{len(changes) + 1}. {label} Add {clause.item}: {clause.suggestion}")

    if not changes:
        return LOOKS_GOOD_TEMPLATE.format(name=name)
    return CHANGES_TEMPLATE.format(changes="\n\n".join(changes), name=name)


def scan_contract(scan_input: ContractScanInput) -> ContractScanResult:
    text = validate_contract_text(scan_input.contract_text)
    sentences = split_sentences(text)

    flags = detect_contract_red_flags(text, sentences)
    flagged_items = {}
    for flag_id, flag in flags:
        item = CONTRACT_RED_FLAGS[flag_id].get("item")
        if item and item not in flagged_items:
            flagged_items[item] = flag.explanation

    exclusivity_expected = has_exclusivity_language(text)
    found, missing = _scan_clauses(sentences, flagged_items, exclusivity_expected)

    analyses = {}
    for category in CONTRACT_CATEGORIES:
        if category == "exclusivity" and not exclusivity_expected:
            analyses[category] = ContractCategoryAnalysis(
                score=CATEGORY_MAX_SCORE,
                status="complete",
                findings=[NO_EXCLUSIVITY_FINDING],
            )
        else:
            analyses[category] = _score_category(category, found, missing, flags)

    context = scan_input.deal_context
    rate_finding = _offered_rate_finding(text, context.offered_rate if context else None)
    if rate_finding:
        analyses["payment"].findings.append(rate_finding)

    red_flags = [flag for _, flag in flags]
    health_score = sum(analysis.score for analysis in analyses.values())

    result = ContractScanResult(
        health_score=health_score,
        health_level=get_health_level(health_score),
        categories=ContractCategories(**analyses),
        found_clauses=found,
        missing_clauses=missing,
        red_flags=red_flags,
        recommendations=build_recommendations(red_flags, missing),
        deal_context=_deal_context_lines(context),
    )
    result = result.model_copy(update={
        "change_request_template": generate_change_request(result, scan_input.creator_name),
    })

    logger.info(
        "Contract scan: health=%d (%s), red_flags=%d, missing=%d",
        health_score, result.health_level, len(red_flags), len(missing),
    )
    return result

"""
Brand vetting.

Signals are gathered first (async, may touch the network), then scored in
one synchronous pass. Four categories of 0-25 each: social presence, website,
collaboration history, and scam indicators. Scam indicators are inverse
scored, so every indicator found takes points away.
"""
import logging
from datetime import date, datetime, timezone
from typing import Optional

from data.brand_trust import (
    CATEGORY_MAX_SCORE, TRUST_LEVELS, TRUST_LEVEL_INFO, DEFAULT_RECOMMENDATIONS, NEUTRAL_SCORES,
    FOLLOWER_POINTS, ACCOUNT_AGE_POINTS, SOCIAL_ACTIVE_POINTS, SOCIAL_ENGAGEMENT_POINTS,
    SOCIAL_VERIFIED_POINTS, NO_SOCIAL_SCORE, WEBSITE_REAL_DOMAIN_POINTS, WEBSITE_HTTPS_POINTS,
    WEBSITE_CONTACT_POINTS, WEBSITE_ABOUT_POINTS, WEBSITE_DESIGN_POINTS, FREE_HOSTING_CAP,
    UNREACHABLE_CAP, NO_WEBSITE_SCORE, REAL_DOMAIN_QUALITIES, COLLAB_HISTORY_POINTS,
    COLLAB_AMBASSADOR_POINTS, COLLAB_TESTIMONIAL_POINTS, COLLAB_REPOST_POINTS, MAJOR_BRAND_FLOOR,
    NO_COLLABS_SCORE, SCAM_INDICATORS, SCAM_RECOMMENDATIONS, MAX_BRAND_RECOMMENDATIONS, SEVERITY_RANK,
)
from schemas.brand import (
    BrandVettingInput, BrandVettingResult, BrandVettingBreakdown, BrandSignals, SocialSignals,
    WebsiteSignals, CollaborationSignals, CategoryScore, BrandFinding, BrandRedFlag,
)
from services.brand_signals import BrandSignalSource, get_hostname
from services.errors import ExternalSignalError, ValidationError
from services.numbers import clamp
from services.validation import validate_vetting_input

logger = logging.getLogger(__name__)


def get_trust_level(score: float) -> str:
    for min_score, level in TRUST_LEVELS:
        if score >= min_score:
            return level
    return TRUST_LEVELS[-1][1]


def get_trust_level_info(level: str) -> dict:
    return dict(TRUST_LEVEL_INFO[level])


def is_valid_vetting_input(brand_input) -> bool:
    try:
        validate_vetting_input(brand_input)
    except ValidationError:
        return False
    return True


def create_cache_key(brand_input: BrandVettingInput, today: date = None) -> str:
    """
    brand:{name}:{YYYY-MM-DD}, plus handle and website host when given.
    Keyed by local date so entries line up with the cache's midnight expiry.
    """
    today = today or date.today()
    key = f"brand:{brand_input.brand_name.strip().lower()}:{today.isoformat()}"
    if brand_input.brand_handle and brand_input.brand_handle.strip():
        key += f":{brand_input.brand_handle.strip().lower().lstrip('@')}"
    if brand_input.brand_website and brand_input.brand_website.strip():
        key += f":{get_hostname(brand_input.brand_website)}"
    return key


def _confidence(known_fields: int, high_at: int, medium_at: int) -> str:
    if known_fields >= high_at:
        return "high"
    if known_fields >= medium_at:
        return "medium"
    return "low"


def _neutral(group: str) -> CategoryScore:
    score, detail = NEUTRAL_SCORES[group]
    return CategoryScore(score=score, confidence="low", details=[detail])


def _first_band(value: float, bands: list) -> int:
    for minimum, points in bands:
        if value >= minimum:
            return points
    return 0


def score_social_presence(social: Optional[SocialSignals]) -> tuple:
    """(CategoryScore, findings, red flags) for the brand's social account."""
    if social is None:
        return _neutral("social"), [], []

    known = sum(1 for v in (
        social.followers, social.account_age_years, social.posting_frequency,
        social.is_verified, social.real_engagement,
    ) if v is not None and v != "unknown")

    if known == 0:
        return (
            CategoryScore(score=NO_SOCIAL_SCORE, confidence="medium", details=["No social presence found"]),
            [BrandFinding(category="social", finding="No social presence found", sentiment="negative")],
            [BrandRedFlag(
                severity="low",
                flag="No social media presence",
                explanation="Brands that work with creators almost always have an active social account.",
                source="Social check",
            )],
        )

    score = 0
    details = []
    findings = []
    red_flags = []

    if social.followers is not None:
        score += _first_band(social.followers, FOLLOWER_POINTS)
        details.append(f"{social.followers:,} followers")
        findings.append(BrandFinding(
            category="social",
            finding=f"{social.followers:,} followers",
            sentiment="positive" if social.followers >= FOLLOWER_POINTS[1][0] else "neutral",
        ))

    if social.account_age_years is not None:
        score += _first_band(social.account_age_years, ACCOUNT_AGE_POINTS)
        details.append(f"Account age: {social.account_age_years:g} years")
        if social.account_age_years < 1:
            findings.append(BrandFinding(category="social", finding="Account is less than a year old", sentiment="negative"))

    if social.posting_frequency == "active":
        score += SOCIAL_ACTIVE_POINTS
        details.append("Posts actively")
    elif social.posting_frequency == "moderate":
        details.append("Posts occasionally")
    elif social.posting_frequency == "inactive":
        details.append("Account appears inactive")
        red_flags.append(BrandRedFlag(
            severity="low",
            flag="Inactive social account",
            explanation="An account that rarely posts may be abandoned or created only for outreach.",
            source="Social check",
        ))

    if social.real_engagement:
        score += SOCIAL_ENGAGEMENT_POINTS
        details.append("Engagement looks genuine")
    elif social.real_engagement is False:
        details.append("Engagement looks inauthentic")
        findings.append(BrandFinding(category="social", finding="Engagement looks inauthentic", sentiment="negative"))

    if social.is_verified:
        score += SOCIAL_VERIFIED_POINTS
        details.append("Verified account")
        findings.append(BrandFinding(category="social", finding="Verified account", sentiment="positive"))

    category = CategoryScore(
        score=clamp(score, 0, CATEGORY_MAX_SCORE),
        confidence=_confidence(known, 4, 2),
        details=details,
    )
    return category, findings, red_flags


def score_website(website: Optional[WebsiteSignals]) -> tuple:
    if website is None:
        return _neutral("website"), [], []

    if not website.has_website:
        return (
            CategoryScore(score=NO_WEBSITE_SCORE, confidence="medium", details=["No website provided"]),
            [BrandFinding(category="website", finding="No website provided", sentiment="neutral")],
            [BrandRedFlag(
                severity="low",
                flag="No website",
                explanation="Established brands almost always have a website. Not disqualifying, but worth asking about.",
                source="Website check",
            )],
        )

    score = 0
    details = []
    findings = []
    red_flags = []

    quality = website.domain_quality
    if quality in REAL_DOMAIN_QUALITIES:
        score += WEBSITE_REAL_DOMAIN_POINTS
        details.append("Uses its own domain")
    elif quality == "free_hosting":
        details.append("Hosted on a free website builder")
        findings.append(BrandFinding(category="website", finding="Website is on free hosting", sentiment="negative"))
    elif quality == "suspicious":
        details.append("Domain looks suspicious")

    if website.is_https:
        score += WEBSITE_HTTPS_POINTS
        details.append("Secured with HTTPS")
    elif website.is_https is False and website.reachable:
        details.append("Website does not use HTTPS")

    if website.has_contact_page:
        score += WEBSITE_CONTACT_POINTS
        details.append("Has a contact page")
    if website.has_about_page:
        score += WEBSITE_ABOUT_POINTS
        details.append("Has an about page")
    if website.professional_design:
        score += WEBSITE_DESIGN_POINTS
        details.append("Professional design")

    if quality == "free_hosting":
        score = min(score, FREE_HOSTING_CAP)

    if website.reachable is False:
        score = min(score, UNREACHABLE_CAP)
        details.append("Website could not be reached")
        red_flags.append(BrandRedFlag(
            severity="medium",
            flag="Website unreachable",
            explanation="The brand's website didn't respond. It may be new, down, or not a real business.",
            source="Website check",
        ))
    elif website.reachable:
        findings.append(BrandFinding(
            category="website",
            finding="Website is reachable",
            evidence="HTTPS" if website.is_https else "HTTP only",
            sentiment="positive" if website.is_https else "neutral",
        ))

    known = sum(1 for v in (
        None if quality in (None, "unknown") else quality, website.reachable, website.is_https,
        website.has_contact_page, website.has_about_page, website.professional_design,
    ) if v is not None)

    category = CategoryScore(
        score=clamp(score, 0, CATEGORY_MAX_SCORE),
        confidence=_confidence(known, 4, 2),
        details=details,
    )
    return category, findings, red_flags


def score_collaborations(collabs: Optional[CollaborationSignals]) -> tuple:
    if collabs is None:
        return _neutral("collaborations"), [], []

    known = sum(1 for v in (
        collabs.known_collabs, collabs.has_ambassador_program,
        collabs.creator_testimonials, collabs.reposts_creators,
    ) if v is not None)

    if known == 0 and not collabs.is_major_brand:
        return (
            CategoryScore(score=NO_COLLABS_SCORE, confidence="medium", details=["No evidence of past creator collaborations"]),
            [BrandFinding(category="collabs", finding="No evidence of past creator collaborations", sentiment="neutral")],
            [],
        )

    score = 0
    details = []
    findings = []

    if collabs.known_collabs:
        score += COLLAB_HISTORY_POINTS
        details.append(f"{collabs.known_collabs} known creator collaborations")
        findings.append(BrandFinding(
            category="collabs",
            finding="Has worked with creators before",
            evidence=f"{collabs.known_collabs} known collaborations",
            sentiment="positive",
        ))
    if collabs.has_ambassador_program:
        score += COLLAB_AMBASSADOR_POINTS
        details.append("Runs an ambassador program")
    if collabs.creator_testimonials:
        score += COLLAB_TESTIMONIAL_POINTS
        details.append("Creator testimonials available")
    if collabs.reposts_creators:
        score += COLLAB_REPOST_POINTS
        details.append("Reposts creator content")
    if collabs.is_major_brand:
        score = max(score, MAJOR_BRAND_FLOOR)
        details.append("Major brand with known campaigns")
        findings.append(BrandFinding(category="collabs", finding="Major brand with known campaigns", sentiment="positive"))

    category = CategoryScore(
        score=clamp(score, 0, CATEGORY_MAX_SCORE),
        confidence="high" if collabs.is_major_brand else _confidence(known, 3, 1),
        details=details,
    )
    return category, findings, []


def score_scam_indicators(indicators: Optional[list]) -> tuple:
    """Starts at 25 and loses each indicator's penalty. Unknown keys are ignored."""
    if indicators is None:
        return _neutral("scam"), [], []

    score = CATEGORY_MAX_SCORE
    details = []
    findings = []
    red_flags = []

    for key in dict.fromkeys(indicators):
        rule = SCAM_INDICATORS.get(key)
        if rule is None:
            logger.debug("Ignoring unknown scam indicator %r", key)
            continue
        score -= rule["penalty"]
        details.append(rule["flag"])
        findings.append(BrandFinding(category="scam_check", finding=rule["flag"], sentiment="negative"))
        red_flags.append(BrandRedFlag(
            severity=rule["severity"],
            flag=rule["flag"],
            explanation=rule["explanation"],
            source="Scam check",
        ))

    if not red_flags:
        details.append("No scam indicators detected")
        findings.append(BrandFinding(category="scam_check", finding="No scam indicators detected", sentiment="positive"))

    category = CategoryScore(
        score=clamp(score, 0, CATEGORY_MAX_SCORE),
        confidence="high" if red_flags else "medium",
        details=details,
    )
    return category, findings, red_flags


def _recommendations(level: str, signals: BrandSignals, breakdown: BrandVettingBreakdown) -> list:
    recommendations = [DEFAULT_RECOMMENDATIONS[level]]

    for key in signals.scam_indicators or []:
        if key in SCAM_RECOMMENDATIONS:
            recommendations.append(SCAM_RECOMMENDATIONS[key])

    if signals.website is not None and not signals.website.has_website:
        recommendations.append("Ask for the brand's website and business details before agreeing to anything.")
    if breakdown.collaboration_history.score < NEUTRAL_SCORES["collaborations"][0]:
        recommendations.append("Ask for examples of past creator partnerships.")
    if level in ("caution", "high_risk"):
        recommendations.append("Get payment terms in writing and consider requesting a deposit before creating content.")

    deduped = list(dict.fromkeys(recommendations))
    return deduped[:MAX_BRAND_RECOMMENDATIONS]


def score_brand_signals(signals: BrandSignals) -> BrandVettingResult:
    """Pure scoring step. Missing signal groups score neutral with low confidence."""
    social, social_findings, social_flags = score_social_presence(signals.social)
    website, website_findings, website_flags = score_website(signals.website)
    collabs, collab_findings, collab_flags = score_collaborations(signals.collaborations)
    scam, scam_findings, scam_flags = score_scam_indicators(signals.scam_indicators)

    breakdown = BrandVettingBreakdown(
        social_presence=social,
        website_verification=website,
        collaboration_history=collabs,
        scam_indicators=scam,
    )
    trust_score = clamp(social.score + website.score + collabs.score + scam.score, 0, 100)
    trust_level = get_trust_level(trust_score)

    red_flags = scam_flags + website_flags + social_flags + collab_flags
    red_flags.sort(key=lambda f: SEVERITY_RANK[f.severity])

    return BrandVettingResult(
        trust_score=trust_score,
        trust_level=trust_level,
        breakdown=breakdown,
        findings=social_findings + website_findings + collab_findings + scam_findings,
        red_flags=red_flags,
        recommendations=_recommendations(trust_level, signals, breakdown),
        checked_at=datetime.now(timezone.utc),
        data_sources=signals.data_sources or ["Brand details provided"],
        cached=False,
    )


async def vet_brand(
    brand_input: BrandVettingInput,
    signals: BrandSignals = None,
    source: BrandSignalSource = None,
) -> BrandVettingResult:
    """
    Vet a brand. When no signals are supplied they are gathered from the
    signal source first; a failed lookup is scored as missing rather than
    aborting the vetting.
    """
    validate_vetting_input(brand_input)

    if signals is None:
        source = source or BrandSignalSource()
        try:
            signals = await source.gather(brand_input)
        except ExternalSignalError as e:
            logger.warning("Brand signals unavailable for %s: %s", brand_input.brand_name, e)
            signals = BrandSignals()

    result = score_brand_signals(signals)
    logger.info(
        "Brand vetted: %s -> %d (%s)",
        brand_input.brand_name.strip(), result.trust_score, result.trust_level,
    )
    return result

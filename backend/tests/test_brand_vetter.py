from datetime import date

import pytest

from schemas.brand import (
    BrandVettingInput, BrandSignals, SocialSignals, WebsiteSignals, CollaborationSignals,
)
from services.brand_signals import BrandSignalSource, classify_domain, get_hostname, detect_domain_indicators
from services.brand_vetter import (
    vet_brand, score_brand_signals, score_website, score_collaborations, score_scam_indicators,
    get_trust_level, get_trust_level_info, create_cache_key, is_valid_vetting_input,
)
from services.errors import ExternalSignalError, ValidationError

GLOW = BrandVettingInput(brand_name="Glow Co", platform="instagram")

STRONG_SIGNALS = BrandSignals(
    social=SocialSignals(
        followers=250_000, account_age_years=3, posting_frequency="active",
        is_verified=True, real_engagement=True,
    ),
    website=WebsiteSignals(
        domain_quality="premium", reachable=True, is_https=True,
        has_contact_page=True, has_about_page=True, professional_design=True,
    ),
    collaborations=CollaborationSignals(
        known_collabs=12, has_ambassador_program=True, creator_testimonials=True, reposts_creators=True,
    ),
    scam_indicators=[],
)


class FailingSource(BrandSignalSource):
    async def gather(self, brand):
        raise ExternalSignalError("social", "lookup timed out")


class TestTrustLevels:
    @pytest.mark.parametrize("score,level", [
        (100, "verified"), (80, "verified"), (79, "likely_legit"), (60, "likely_legit"),
        (59, "caution"), (40, "caution"), (39, "high_risk"), (0, "high_risk"),
    ])
    def test_boundaries(self, score, level):
        assert get_trust_level(score) == level

    def test_level_info(self):
        assert get_trust_level_info("high_risk")["color"] == "red"


class TestSignalScoring:
    def test_no_signals_is_neutral(self):
        result = score_brand_signals(BrandSignals())
        assert result.trust_score == 50
        assert result.trust_level == "caution"
        assert result.breakdown.social_presence.confidence == "low"
        assert result.data_sources == ["Brand details provided"]

    def test_strong_brand(self):
        result = score_brand_signals(STRONG_SIGNALS)
        assert result.breakdown.social_presence.score == 25
        assert result.breakdown.website_verification.score == 25
        assert result.breakdown.collaboration_history.score == 23
        assert result.breakdown.scam_indicators.score == 25
        assert result.trust_score == 98
        assert result.trust_level == "verified"
        assert result.red_flags == []

    def test_scam_indicators_drain_score(self):
        scam, _, flags = score_scam_indicators(["pay_to_collab", "mlm"])
        assert scam.score == 0
        assert [flag.severity for flag in flags] == ["high", "high"]

    def test_duplicate_and_unknown_indicators(self):
        scam, _, flags = score_scam_indicators(["mlm", "mlm", "not_a_thing"])
        assert scam.score == 15
        assert len(flags) == 1

    def test_free_hosting_is_capped(self):
        website, _, _ = score_website(WebsiteSignals(
            domain_quality="free_hosting", is_https=True, has_contact_page=True,
            has_about_page=True, professional_design=True,
        ))
        assert website.score == 3

    def test_unreachable_site_is_capped(self):
        website, _, flags = score_website(WebsiteSignals(
            domain_quality="premium", reachable=False, is_https=True,
            has_contact_page=True, has_about_page=True, professional_design=True,
        ))
        assert website.score == 8
        assert flags[0].flag == "Website unreachable"

    def test_major_brand_floor(self):
        collabs, _, _ = score_collaborations(CollaborationSignals(is_major_brand=True))
        assert collabs.score == 18
        assert collabs.confidence == "high"

    def test_red_flags_sorted_by_severity(self):
        result = score_brand_signals(BrandSignals(
            website=WebsiteSignals(has_website=False),
            scam_indicators=["pressure_tactics", "pay_to_collab"],
        ))
        severities = [flag.severity for flag in result.red_flags]
        assert severities == sorted(severities, key=["high", "medium", "low"].index)
        assert len(result.recommendations) <= 5


class TestDomainSignals:
    def test_hostname_normalized(self):
        assert get_hostname("WWW.GlowCo.com/shop") == "glowco.com"

    @pytest.mark.parametrize("hostname,quality", [
        ("glowco.com", "premium"),
        ("glowco.shop", "standard"),
        ("glowco.xyz", "suspicious"),
        ("glow.wixsite.com", "free_hosting"),
        ("localhost", "unknown"),
    ])
    def test_classify_domain(self, hostname, quality):
        assert classify_domain(hostname) == quality

    def test_personal_mailbox_on_real_domain(self):
        brand = GLOW.model_copy(update={"brand_email": "glowco.team@gmail.com"})
        assert detect_domain_indicators(brand, "premium") == ["suspicious_domain"]


class TestCacheKey:
    def test_key_includes_handle_and_host(self):
        brand = BrandVettingInput(
            brand_name=" Glow Co ", brand_handle="@GlowCo",
            brand_website="https://www.glowco.com/about", platform="instagram",
        )
        assert create_cache_key(brand, today=date(2026, 3, 1)) == "brand:glow co:2026-03-01:glowco:glowco.com"

    def test_name_only_key(self):
        assert create_cache_key(GLOW, today=date(2026, 3, 1)) == "brand:glow co:2026-03-01"


class TestVetBrand:
    @pytest.mark.asyncio
    async def test_supplied_signals_skip_lookup(self):
        result = await vet_brand(GLOW, signals=STRONG_SIGNALS, source=FailingSource())
        assert result.trust_score == 98
        assert result.cached is False

    @pytest.mark.asyncio
    async def test_failed_lookup_scores_neutral(self):
        result = await vet_brand(GLOW, source=FailingSource())
        assert result.trust_score == 50
        assert result.trust_level == "caution"

    @pytest.mark.asyncio
    async def test_offline_domain_analysis(self):
        brand = GLOW.model_copy(update={"brand_website": "glowco.xyz"})
        result = await vet_brand(brand, source=BrandSignalSource(check_website=False))
        assert result.trust_score == 40
        assert result.trust_level == "caution"
        assert "Domain analysis" in result.data_sources
        assert result.red_flags[0].flag == "Suspicious domain or email"

    @pytest.mark.asyncio
    async def test_invalid_input_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 characters"):
            await vet_brand(BrandVettingInput(brand_name="G", platform="instagram"), signals=BrandSignals())

    def test_is_valid_vetting_input(self):
        assert is_valid_vetting_input(GLOW)
        assert not is_valid_vetting_input(GLOW.model_copy(update={"platform": "myspace"}))

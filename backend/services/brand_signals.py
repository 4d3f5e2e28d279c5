"""
Brand signal gathering. The only part of brand vetting that touches the
network: a reachability check on the brand's website plus offline domain
and email analysis. Social and collaboration signals have no lookup here and
come back empty unless the caller supplies them.
"""
import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from config import ENABLE_WEBSITE_CHECK, WEBSITE_CHECK_TIMEOUT_SECONDS
from data.brand_trust import FREE_HOSTING_DOMAINS, SUSPICIOUS_TLDS, PREMIUM_TLDS, FREE_EMAIL_DOMAINS
from schemas.brand import BrandVettingInput, BrandSignals, WebsiteSignals
from services.errors import ExternalSignalError

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> str:
    url = url.strip()
    if not url.startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


def get_hostname(url: str) -> str:
    hostname = urlparse(normalize_url(url)).hostname or ""
    return hostname.lower().removeprefix("www.")


def classify_domain(hostname: str) -> str:
    """premium, standard, free_hosting, suspicious or unknown."""
    if not hostname or "." not in hostname:
        return "unknown"
    if any(hostname == d or hostname.endswith(f".{d}") for d in FREE_HOSTING_DOMAINS):
        return "free_hosting"
    if any(hostname.endswith(tld) for tld in SUSPICIOUS_TLDS):
        return "suspicious"
    if any(hostname.endswith(tld) for tld in PREMIUM_TLDS):
        return "premium"
    return "standard"


def get_email_domain(email: Optional[str]) -> Optional[str]:
    if not email or "@" not in email:
        return None
    return email.rsplit("@", 1)[1].strip().lower() or None


def detect_domain_indicators(brand: BrandVettingInput, domain_quality: Optional[str]) -> list:
    """Scam indicator keys that can be read off the website and email alone."""
    indicators = []
    email_domain = get_email_domain(brand.brand_email)

    suspicious_email = email_domain is not None and any(email_domain.endswith(tld) for tld in SUSPICIOUS_TLDS)
    if domain_quality == "suspicious" or suspicious_email:
        indicators.append("suspicious_domain")
    elif email_domain in FREE_EMAIL_DOMAINS and domain_quality in ("premium", "standard"):
        # A brand with its own domain writing from a personal mailbox
        indicators.append("suspicious_domain")
    return indicators


class BrandSignalSource:
    """
    Collects BrandSignals for one brand. Swap in a richer source (social APIs,
    collaboration databases) by subclassing and overriding gather().
    """

    def __init__(self, timeout: float = WEBSITE_CHECK_TIMEOUT_SECONDS, check_website: bool = ENABLE_WEBSITE_CHECK):
        self.timeout = timeout
        self.check_website = check_website

    async def check_website_exists(self, url: str) -> tuple:
        """(reachable, is_https). Falls back to plain HTTP when HTTPS fails."""
        normalized = normalize_url(url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                try:
                    response = await client.head(normalized)
                    return response.status_code < 500, normalized.startswith("https://")
                except httpx.HTTPError as e:
                    if not normalized.startswith("https://"):
                        logger.warning("Website check failed for %s: %s", normalized, e)
                        return False, False
                    http_url = "http://" + normalized[len("https://"):]
                    try:
                        response = await client.head(http_url)
                        return response.status_code < 500, False
                    except httpx.HTTPError as e2:
                        logger.warning("Website check failed for %s: %s", http_url, e2)
                        return False, False
        except httpx.InvalidURL as e:
            raise ExternalSignalError("website", f"Invalid website URL: {url}") from e

    async def gather_website(self, brand: BrandVettingInput) -> Optional[WebsiteSignals]:
        if not brand.brand_website or not brand.brand_website.strip():
            return WebsiteSignals(has_website=False)

        domain_quality = classify_domain(get_hostname(brand.brand_website))
        signals = WebsiteSignals(has_website=True, domain_quality=domain_quality)
        if not self.check_website:
            return signals

        reachable, is_https = await self.check_website_exists(brand.brand_website)
        return signals.model_copy(update={"reachable": reachable, "is_https": is_https})

    async def gather(self, brand: BrandVettingInput) -> BrandSignals:
        data_sources = []
        website = None
        try:
            website = await self.gather_website(brand)
            if website is not None and website.has_website:
                data_sources.append("Domain analysis")
                if website.reachable is not None:
                    data_sources.append("Website check")
        except ExternalSignalError as e:
            logger.warning("Brand signal lookup failed: %s", e)

        # Nothing to analyze means no scam check happened, not a clean one
        scam_indicators = None
        domain_quality = website.domain_quality if website else None
        if domain_quality or brand.brand_email:
            scam_indicators = detect_domain_indicators(brand, domain_quality)
        if brand.brand_email:
            data_sources.append("Email domain analysis")

        return BrandSignals(
            website=website,
            scam_indicators=scam_indicators,
            data_sources=data_sources,
        )

CATEGORY_MAX_SCORE = 25

# Checked highest first
TRUST_LEVELS = [
    (80, "verified"),
    (60, "likely_legit"),
    (40, "caution"),
    (0, "high_risk"),
]

TRUST_LEVEL_INFO = {
    "verified": {
        "label": "Verified",
        "color": "green",
        "description": "Safe to proceed - this brand checks out",
    },
    "likely_legit": {
        "label": "Likely Legit",
        "color": "blue",
        "description": "Probably fine - do basic due diligence",
    },
    "caution": {
        "label": "Proceed with Caution",
        "color": "yellow",
        "description": "Proceed carefully - ask questions before committing",
    },
    "high_risk": {
        "label": "High Risk",
        "color": "red",
        "description": "Likely scam - consider avoiding",
    },
}

DEFAULT_RECOMMENDATIONS = {
    "verified": "This brand appears legitimate. Proceed with normal due diligence.",
    "likely_legit": "This brand looks okay. Verify payment terms and get everything in writing.",
    "caution": "Proceed carefully. Ask clarifying questions about compensation and expectations before committing.",
    "high_risk": "Multiple red flags detected. Consider declining or requesting significantly more information before proceeding.",
}

# Sub-score and detail used when a whole signal group could not be gathered
NEUTRAL_SCORES = {
    "social": (10, "Limited information available"),
    "website": (10, "Unable to verify website"),
    "collaborations": (10, "No collaboration history found"),
    "scam": (20, "No obvious red flags detected"),
}

# Social presence: (minimum followers, points). First match wins.
FOLLOWER_POINTS = [
    (100_000, 10),
    (10_000, 5),
    (0, 0),
]

# Account age: (minimum years, points). First match wins.
ACCOUNT_AGE_POINTS = [
    (2, 5),
    (1, 3),
    (0, 1),
]

SOCIAL_ACTIVE_POINTS = 5
SOCIAL_ENGAGEMENT_POINTS = 5
SOCIAL_VERIFIED_POINTS = 5
NO_SOCIAL_SCORE = 8

WEBSITE_REAL_DOMAIN_POINTS = 8
WEBSITE_HTTPS_POINTS = 5
WEBSITE_CONTACT_POINTS = 5
WEBSITE_ABOUT_POINTS = 4
WEBSITE_DESIGN_POINTS = 3
FREE_HOSTING_CAP = 3
UNREACHABLE_CAP = 8
NO_WEBSITE_SCORE = 10
REAL_DOMAIN_QUALITIES = ("premium", "standard")

COLLAB_HISTORY_POINTS = 10
COLLAB_AMBASSADOR_POINTS = 5
COLLAB_TESTIMONIAL_POINTS = 5
COLLAB_REPOST_POINTS = 3
MAJOR_BRAND_FLOOR = 18
NO_COLLABS_SCORE = 8

SCAM_INDICATORS = {
    "dropshipping": {
        "flag": "Dropshipping signals",
        "penalty": 5,
        "severity": "medium",
        "explanation": "Products look resold from bulk marketplaces. These brands rarely pay creators and often disappear quickly.",
    },
    "mlm": {
        "flag": "MLM/pyramid scheme indicators",
        "penalty": 10,
        "severity": "high",
        "explanation": "Multi-level marketing outreach is about recruiting you as a seller, not paying you as a creator.",
    },
    "pay_to_collab": {
        "flag": "\"Pay to collab\" language",
        "penalty": 15,
        "severity": "high",
        "explanation": "Legitimate brands pay creators. Any request for you to pay (shipping, fees, starter kits) is a scam pattern.",
    },
    "fake_followers": {
        "flag": "Fake follower patterns",
        "penalty": 5,
        "severity": "medium",
        "explanation": "A large following with almost no real engagement suggests bought followers.",
    },
    "too_good_to_be_true": {
        "flag": "Too-good-to-be-true offer",
        "penalty": 5,
        "severity": "medium",
        "explanation": "Offers far above market rate for little work are a common hook for phishing and payment scams.",
    },
    "pressure_tactics": {
        "flag": "Pressure tactics/urgency",
        "penalty": 3,
        "severity": "low",
        "explanation": "Real partnerships leave time to review terms. Artificial deadlines are meant to stop you asking questions.",
    },
    "no_payment_mentioned": {
        "flag": "No payment mentioned but expecting content",
        "penalty": 5,
        "severity": "medium",
        "explanation": "The outreach asks for deliverables without saying what you get in return.",
    },
    "new_account_mass_outreach": {
        "flag": "Brand new account mass outreaching",
        "penalty": 3,
        "severity": "low",
        "explanation": "New accounts messaging many creators at once are often fronts for product-for-post farms or scams.",
    },
    "suspicious_domain": {
        "flag": "Suspicious domain or email",
        "penalty": 5,
        "severity": "medium",
        "explanation": "The website or email domain doesn't look like an established business.",
    },
}

SCAM_RECOMMENDATIONS = {
    "pay_to_collab": "Never pay a brand to collaborate - legitimate brands pay creators, not the other way around.",
    "mlm": "Decline anything that asks you to buy inventory or recruit others.",
    "no_payment_mentioned": "Ask for compensation terms in writing before creating any content.",
    "pressure_tactics": "Take your time. Don't let urgency push you into signing or shipping anything.",
    "suspicious_domain": "Confirm the brand's identity through an official website or verified social account.",
}

MAX_BRAND_RECOMMENDATIONS = 5

SEVERITY_RANK = {"high": 0, "medium": 1, "low": 2}

# Domains that host free sites for anyone; a brand living here has no real domain
FREE_HOSTING_DOMAINS = [
    "wixsite.com",
    "blogspot.com",
    "wordpress.com",
    "weebly.com",
    "godaddysites.com",
    "square.site",
    "carrd.co",
    "webflow.io",
    "github.io",
    "netlify.app",
    "vercel.app",
    "linktr.ee",
]

SUSPICIOUS_TLDS = [".xyz", ".top", ".click", ".buzz", ".icu", ".tk", ".ml", ".ga", ".cf", ".gq", ".rest"]

PREMIUM_TLDS = [".com", ".co", ".io", ".org", ".net", ".co.uk"]

FREE_EMAIL_DOMAINS = [
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "aol.com",
    "icloud.com",
    "protonmail.com",
    "mail.com",
]

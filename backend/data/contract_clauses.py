"""
Clause and red-flag tables shared by the contract scanner and the
pre-signing checklist. Patterns are regexes matched case-insensitively
against one sentence at a time.
"""

CONTRACT_CATEGORIES = ["payment", "content_rights", "exclusivity", "legal"]

CATEGORY_MAX_SCORE = 25

# Points lost per missing clause / per red flag in the clause's category
MISSING_CLAUSE_PENALTIES = {
    "critical": 7,
    "important": 3,
    "optional": 1,
}

RED_FLAG_PENALTIES = {
    "high": 8,
    "medium": 4,
    "low": 2,
}

# Lower rank sorts first
SEVERITY_RANK = {"high": 0, "medium": 1, "low": 2}
IMPORTANCE_RANK = {"critical": 0, "important": 1, "optional": 2}

# Any of these in the contract means the exclusivity clauses are expected
EXCLUSIVITY_LANGUAGE = [
    r"(?<!non-)(?<!non)(?<!non )exclusiv",
    r"non-?compete",
    r"\bcompetitors?\b",
    r"competing (?:brands?|products?)",
]

CONTRACT_TERMS = {
    # Payment
    "payment-amount": {
        "category": "payment",
        "term": "Payment amount clearly stated",
        "item": "Payment amount",
        "explanation": "The exact payment amount should be written in the contract, not just discussed verbally.",
        "recommendation": "Exact dollar amount in writing",
        "priority": "critical",
        "patterns": [
            r"\$\s?\d",
            r"\b\d[\d,]*(?:\.\d{2})?\s?(?:usd|dollars)\b",
            r"\b(?:flat|total|campaign) fee\b",
        ],
        "good_patterns": [r"\$\s?\d", r"\b\d[\d,]*(?:\.\d{2})?\s?(?:usd|dollars)\b"],
        "neutral_note": "A fee is mentioned but no exact amount is written down",
    },
    "payment-timeline": {
        "category": "payment",
        "term": "Payment timeline specified",
        "item": "Payment timeline",
        "explanation": "Know when you'll get paid. Net-15 means 15 days after invoice, Net-30 means 30 days.",
        "recommendation": "Net-30 or better (Net-15 ideal)",
        "priority": "critical",
        "patterns": [
            r"\bnet[\s-]?\d+",
            r"within\s+\d+\s+(?:\(\d+\)\s+)?(?:business\s+)?days",
            r"payment (?:is |shall be )?due",
            r"upon (?:receipt|delivery|completion|signing)",
        ],
        "good_patterns": [
            r"\bnet[\s-]?(?:[0-9]|1[0-9]|2[0-9]|30)\b",
            r"within\s+(?:[0-9]|[12][0-9]|30)\s+(?:\(\d+\)\s+)?(?:business\s+)?days",
            r"upon (?:signing|delivery|completion)",
        ],
        "neutral_note": "Payment is due later than Net-30",
    },
    "late-payment-penalty": {
        "category": "payment",
        "term": "Late payment penalty clause",
        "item": "Late payment penalty",
        "explanation": "If the brand pays late, there should be consequences. This incentivizes timely payment.",
        "recommendation": "1.5% monthly interest or 10% penalty after 30 days",
        "priority": "important",
        "patterns": [r"late (?:payment|fee|charge)", r"\binterest (?:on|at|of)\b", r"\boverdue\b"],
    },
    "deposit-upfront": {
        "category": "payment",
        "term": "Deposit/upfront payment",
        "item": "Upfront deposit",
        "explanation": "Getting paid partially upfront protects you if the brand ghosts or cancels.",
        "recommendation": "50% upfront, 50% on delivery",
        "priority": "important",
        "patterns": [r"\bdeposit\b", r"\bup-?front\b", r"\bin advance\b", r"\d+%\s+(?:upon|on|at)\s+signing"],
    },
    "kill-fee": {
        "category": "payment",
        "term": "Kill fee if brand cancels",
        "item": "Kill fee",
        "explanation": "If the brand cancels after you've started work, you should still get compensated.",
        "recommendation": "25-50% kill fee for cancellation after contract signing",
        "priority": "important",
        "patterns": [
            r"kill fee",
            r"cancellation fee",
            r"(?:cancel|terminat)\w*.{0,80}\b(?:pay|compensat)\w*.{0,40}(?:%|percent|portion)",
        ],
    },
    # Content & rights
    "deliverables-defined": {
        "category": "content_rights",
        "term": "Deliverables clearly defined",
        "item": "Deliverables",
        "explanation": "Exactly what you're creating should be spelled out - number of posts, format, length, etc.",
        "recommendation": "Specific number, type, and duration of each deliverable",
        "priority": "critical",
        "patterns": [
            r"\bdeliverables?\b",
            r"\b(?:\d+|one|two|three|four|five)\s+(?:\(\d+\)\s+)?(?:\w+\s+)?(?:posts?|videos?|reels?|stories|tiktoks?|photos?|images?)\b",
        ],
        "good_patterns": [
            r"\b(?:\d+|one|two|three|four|five)\s+(?:\(\d+\)\s+)?(?:\w+\s+)?(?:posts?|videos?|reels?|stories|tiktoks?|photos?|images?)\b",
        ],
        "neutral_note": "Deliverables are mentioned but the count or format is vague",
    },
    "revision-rounds": {
        "category": "content_rights",
        "term": "Revision rounds limited",
        "item": "Revision limit",
        "explanation": "Unlimited revisions can turn a simple project into endless unpaid work.",
        "recommendation": "Maximum 2 rounds of revisions included",
        "priority": "critical",
        "patterns": [r"\brevisions?\b", r"rounds? of (?:changes|edits|feedback)"],
        "good_patterns": [
            r"\b(?:one|two|1|2)\s+(?:\(\d\)\s+)?(?:rounds?|revisions?)",
            r"(?:maximum|up to|no more than)\s+(?:of\s+)?(?:one|two|three|1|2|3)\s+(?:\(\d\)\s+)?(?:rounds?|revisions?)",
        ],
        "neutral_note": "Revisions are mentioned without a clear cap",
    },
    "usage-duration": {
        "category": "content_rights",
        "term": "Usage rights duration specified",
        "item": "Usage rights duration",
        "explanation": "How long can the brand use your content? This should be clearly limited.",
        "recommendation": "30-90 days standard; longer = higher rate",
        "priority": "critical",
        "patterns": [
            r"(?:usage|license|licen[cs]ed?|use|rights)\b.{0,80}?\b\d+\s*(?:\(\d+\)\s*)?(?:days?|months?|years?)\b",
            r"\b\d+\s*(?:\(\d+\)\s*)?(?:days?|months?|years?)\b.{0,40}?\b(?:usage|license|rights)\b",
            r"\bperpetu",
            r"\bin perpetuity\b",
        ],
        "good_patterns": [r"\b(?:30|60|90)\s*(?:\(\d+\)\s*)?days?\b", r"\b(?:1|2|3|one|two|three)\s*(?:\(\d\)\s*)?months?\b"],
        "neutral_note": "Usage period is longer than the 30-90 day standard",
    },
    "usage-channels": {
        "category": "content_rights",
        "term": "Usage channels specified",
        "item": "Usage channels",
        "explanation": "Where can the brand use your content? Organic social, paid ads, website, TV?",
        "recommendation": "List specific channels (organic only, or organic + paid, etc.)",
        "priority": "critical",
        "patterns": [
            r"\borganic\b",
            r"paid (?:social|media|ads|advertising)",
            r"\bwhitelist",
            r"\bchannels?\b",
            r"out[\s-]of[\s-]home|\booh\b",
            r"(?:brand's|its) (?:website|social media|owned)",
        ],
    },
    "usage-territory": {
        "category": "content_rights",
        "term": "Territory specified",
        "item": "Territory",
        "explanation": "Geographic scope of usage - domestic only or worldwide?",
        "recommendation": "Domestic (single country) standard; worldwide = premium",
        "priority": "important",
        "patterns": [
            r"\bterritor(?:y|ies)\b",
            r"\bworld-?wide\b|\bglobally\b",
            r"\bin the (?:united states|us|u\.s\.|uk|united kingdom|eu|european union)\b",
        ],
    },
    "raw-content-ownership": {
        "category": "content_rights",
        "term": "Creator retains ownership of raw content",
        "item": "Raw content ownership",
        "explanation": "You should own your original footage/photos. Brand gets license to use final content only.",
        "recommendation": "Creator owns all raw/unused content",
        "priority": "important",
        "patterns": [
            r"raw (?:footage|content|files|assets)",
            r"creator (?:shall |will )?(?:retains?|owns?|keeps?)",
            r"\bretains? (?:all )?(?:ownership|copyright|title)",
            r"(?:brand|company) (?:shall |will )?owns? all",
        ],
        "good_patterns": [r"creator (?:shall |will )?(?:retains?|owns?|keeps?)", r"\bretains? (?:all )?(?:ownership|copyright)"],
        "neutral_note": "Ownership of raw content is not clearly kept by the creator",
    },
    # Exclusivity
    "exclusivity-period": {
        "category": "exclusivity",
        "term": "Exclusivity period defined",
        "item": "Exclusivity period",
        "explanation": "If you can't work with competitors, know exactly how long that restriction lasts.",
        "recommendation": "Match campaign duration or maximum 30 days post",
        "priority": "critical",
        "patterns": [
            r"(?:exclusiv|non-?compete)\w*.{0,100}?\b\d+\s*(?:\(\d+\)\s*)?(?:days?|weeks?|months?|years?)\b",
            r"\b\d+\s*(?:\(\d+\)\s*)?(?:days?|weeks?|months?|years?)\b.{0,60}?exclusiv",
            r"exclusivity (?:period|term)",
        ],
        "good_patterns": [r"\b(?:\d|[12]\d|30)\s*(?:\(\d+\)\s*)?days?\b", r"\b(?:1|2|3|4|one|two|three|four)\s*(?:\(\d\)\s*)?weeks?\b"],
        "neutral_note": "Exclusivity runs longer than 30 days",
    },
    "exclusivity-scope": {
        "category": "exclusivity",
        "term": "Exclusivity scope defined",
        "item": "Exclusivity scope",
        "explanation": "Is it category exclusivity (no other beauty brands) or full exclusivity (no other brands at all)?",
        "recommendation": "Category exclusivity only; full exclusivity = major premium",
        "priority": "critical",
        "patterns": [
            r"(?:category|competitor|competing|similar|directly competitive) (?:brands?|products?|companies|exclusivity)",
            r"\bcompetitors?\b",
            r"any other (?:brand|company|sponsor)",
            r"full exclusivity",
        ],
        "good_patterns": [
            r"(?:category|competitor|competing|similar|directly competitive) (?:brands?|products?|companies|exclusivity)",
            r"\bcompetitors?\b",
        ],
        "neutral_note": "Exclusivity covers all brands, not just competitors",
    },
    "exclusivity-compensation": {
        "category": "exclusivity",
        "term": "Exclusivity compensated appropriately",
        "item": "Exclusivity compensation",
        "explanation": "Exclusivity costs you potential income. You should be paid extra for it.",
        "recommendation": "+50% for category exclusivity, +100% for full exclusivity",
        "priority": "critical",
        "patterns": [
            r"exclusivity (?:fee|premium|payment|bonus)",
            r"(?:in exchange|compensat\w*|additional fee|paid).{0,60}?exclusiv",
            r"exclusiv\w*.{0,60}?(?:compensat|additional fee|premium)",
        ],
    },
    # Legal
    "termination-clause": {
        "category": "legal",
        "term": "Termination clause exists",
        "item": "Termination clause",
        "explanation": "Both parties should be able to exit the contract under certain conditions.",
        "recommendation": "30-day notice for either party to terminate",
        "priority": "important",
        "patterns": [r"\bterminat", r"\bcancell?ation\b"],
        "good_patterns": [r"either party", r"\bnotice\b"],
        "neutral_note": "Termination terms may only favor the brand",
    },
    "dispute-resolution": {
        "category": "legal",
        "term": "Dispute resolution specified",
        "item": "Dispute resolution",
        "explanation": "If there's a disagreement, how will it be resolved? Avoid expensive litigation.",
        "recommendation": "Mediation first, then arbitration; jurisdiction in your state",
        "priority": "important",
        "patterns": [r"\barbitrat", r"\bmediat", r"\bdisputes?\b", r"\bjurisdiction\b|\bvenue\b"],
    },
    "liability-limits": {
        "category": "legal",
        "term": "No unreasonable liability on creator",
        "item": "Liability limits",
        "explanation": "You shouldn't be liable for things outside your control (brand's product issues, etc.).",
        "recommendation": "Liability limited to contract value; no indemnification for brand's products",
        "priority": "important",
        "patterns": [
            r"limitation of liability",
            r"liability (?:is |shall be |will be )?limited",
            r"\blimit(?:ed|s)? (?:its |their |the )?liability",
            r"\bindemnif",
        ],
        "good_patterns": [r"limitation of liability", r"liability (?:is |shall be |will be )?limited", r"\blimit(?:ed|s)? (?:its |their |the )?liability"],
        "neutral_note": "Indemnification language without a liability cap",
    },
    "ftc-compliance": {
        "category": "legal",
        "term": "FTC compliance language included",
        "item": "FTC disclosure",
        "explanation": "Contract should require both parties to comply with FTC disclosure rules.",
        "recommendation": "Mutual FTC compliance; brand cannot ask you to hide sponsorship",
        "priority": "important",
        "patterns": [r"\bftc\b", r"#ad\b|#sponsored\b", r"\bdisclos(?:e|ure)", r"endorsement guides"],
    },
    "governing-law": {
        "category": "legal",
        "term": "Governing law stated",
        "item": "Governing law",
        "explanation": "The contract should say which state's or country's laws apply if something goes wrong.",
        "recommendation": "Your home state or a neutral jurisdiction",
        "priority": "optional",
        "patterns": [r"governing law", r"governed by", r"laws of the state"],
    },
}

# A flag is cancelled by an "unless_sentence" match in the flagged sentence
# or an "unless_contract" match anywhere in the contract.
CONTRACT_RED_FLAGS = {
    "perpetual-rights": {
        "category": "content_rights",
        "flag": "Perpetual/unlimited usage rights without major premium",
        "clause": "Perpetual usage rights",
        "reason": "Giving away unlimited usage means the brand can use your content forever without additional payment. This is worth significant money.",
        "action": "Either remove perpetual rights or charge 3-5x the base rate",
        "severity": "high",
        "item": "usage-duration",
        "patterns": [r"\bperpetu", r"\bin perpetuity\b", r"\bforever\b", r"unlimited (?:usage|use|duration|time)"],
    },
    "unpaid-usage-rights": {
        "category": "content_rights",
        "flag": "No payment for usage rights",
        "clause": "Unpaid paid-media usage",
        "reason": "Usage rights (whitelisting, ads, etc.) have real value. You should be compensated for them.",
        "action": "Add usage rights fee: +50% for organic repost, +100% for paid ads, +200% for full media buy",
        "severity": "high",
        "item": "usage-channels",
        "patterns": [r"\bwhitelist", r"paid (?:social|media|ads|advertising)", r"\bboost(?:ed|ing)?\b", r"spark ads"],
        "unless_contract": [r"usage (?:rights )?fee", r"(?:additional|separate) (?:fee|compensation|payment)", r"licens\w* fee"],
    },
    "uncompensated-exclusivity": {
        "category": "exclusivity",
        "flag": "Exclusivity without compensation",
        "clause": "Uncompensated exclusivity",
        "reason": "Exclusivity prevents you from earning money with competitors. That opportunity cost should be paid.",
        "action": "Add exclusivity premium: +50% for category, +100% for full exclusivity",
        "severity": "high",
        "item": "exclusivity-compensation",
        "patterns": [r"(?<!non-)(?<!non)(?<!non )exclusiv", r"\bnon-?compete"],
        "unless_contract": [
            r"exclusivity (?:fee|premium|payment|bonus)",
            r"(?:in exchange|compensat\w*|additional fee).{0,60}?exclusiv",
            r"exclusiv\w*.{0,60}?(?:compensat|additional fee|premium)",
        ],
    },
    "long-payment-terms": {
        "category": "payment",
        "flag": "Payment terms beyond Net-60",
        "clause": "Long payment terms",
        "reason": "Net-90 or longer means waiting 3+ months for payment. That's too long and often a sign of cash flow problems.",
        "action": "Negotiate to Net-30 maximum, or require 50% upfront",
        "severity": "high",
        "item": "payment-timeline",
        "patterns": [
            r"\bnet[\s-]?(?:6[1-9]|[7-9]\d|[1-9]\d{2,})\b",
            r"within\s+(?:6[1-9]|[7-9]\d|[1-9]\d{2,})\s+(?:\(\d+\)\s+)?(?:business\s+)?days",
        ],
    },
    "unlimited-revisions": {
        "category": "content_rights",
        "flag": "Unlimited revisions",
        "clause": "Unlimited revisions",
        "reason": "This can trap you in endless revision cycles. Some brands abuse this to get extra content for free.",
        "action": "Cap at 2 revision rounds; additional revisions at hourly rate",
        "severity": "medium",
        "item": "revision-rounds",
        "patterns": [
            r"unlimited (?:revisions|rounds|changes|edits)",
            r"(?:revisions?|changes|edits).{0,60}?until (?:the )?(?:brand|company|client)\w*(?: is)? (?:fully |completely )?satisf",
            r"as many (?:revisions|rounds|changes|edits)",
        ],
    },
    "moral-rights-waiver": {
        "category": "content_rights",
        "flag": "Moral rights waiver",
        "clause": "Moral rights waiver",
        "reason": "Moral rights protect your reputation. Waiving them means the brand can modify your content in ways you might not approve.",
        "action": "Remove moral rights waiver or limit modifications to minor edits with your approval",
        "severity": "medium",
        "item": "raw-content-ownership",
        "patterns": [r"waive\w*\s+(?:all\s+|any\s+)?moral rights", r"moral rights.{0,60}?waive"],
    },
    "broad-non-disparagement": {
        "category": "legal",
        "flag": "Non-disparagement clause that's too broad",
        "clause": "Broad non-disparagement",
        "reason": "Overly broad non-disparagement can prevent you from honestly discussing your experience, even if the brand treats you poorly.",
        "action": "Limit to during the campaign period, or make it mutual",
        "severity": "medium",
        "item": "liability-limits",
        "patterns": [r"non-?disparage", r"\bdisparag"],
        "unless_sentence": [r"\bmutual(?:ly)?\b", r"\beach party\b", r"\bneither party\b"],
    },
    "no-kill-fee": {
        "category": "payment",
        "flag": "No kill fee for brand cancellation",
        "clause": "No kill fee",
        "reason": "If you've blocked your schedule and turned down other work, you deserve compensation if the brand cancels.",
        "action": "Add 25-50% kill fee clause for cancellation after signing",
        "severity": "medium",
        "item": "kill-fee",
        "patterns": [r"(?:brand|company|client) may (?:cancel|terminate)", r"cancel\w* (?:at any time|for any reason|without (?:cause|penalty))"],
        "unless_contract": [
            r"kill fee",
            r"cancellation fee",
            r"(?:cancel|terminat)\w*.{0,80}\b(?:pay|compensat)\w*.{0,40}(?:%|percent|portion)",
        ],
    },
    "work-for-hire": {
        "category": "content_rights",
        "flag": "Work for hire language (you lose all ownership)",
        "clause": "Work for hire",
        "reason": "Work for hire means the brand owns everything you create, including raw footage. You can't reuse any of it.",
        "action": "Change to license agreement where you retain ownership but grant usage rights",
        "severity": "medium",
        "item": "raw-content-ownership",
        "patterns": [r"works?[\s-]made[\s-]for[\s-]hire", r"work[\s-]for[\s-]hire", r"assigns? all (?:right|title|ownership)"],
    },
    "ai-training": {
        "category": "content_rights",
        "flag": "Rights to train AI on your likeness or content",
        "clause": "AI training rights",
        "reason": "Letting the brand train AI models on your face, voice or content can create a synthetic version of you they never have to pay again.",
        "action": "Strike AI training and synthetic likeness rights, or license them separately at a major premium",
        "severity": "high",
        "item": "usage-channels",
        "patterns": [
            r"\btrain\w*\b.{0,60}?\b(?:ai|artificial intelligence|machine learning|models?)\b",
            r"\b(?:ai|artificial intelligence|machine learning)\b.{0,60}?\btrain",
            r"digital (?:replica|likeness|twin)",
            r"synthetic (?:voice|media|likeness)",
        ],
    },
    "auto-renewal": {
        "category": "legal",
        "flag": "Auto-renewal without easy opt-out",
        "clause": "Auto-renewal",
        "reason": "Contracts that automatically renew can trap you in deals you no longer want.",
        "action": "Require written consent for renewal, not automatic",
        "severity": "low",
        "item": "termination-clause",
        "patterns": [r"auto(?:matically)?[\s-]?renew"],
        "unless_sentence": [r"opt[\s-]?out", r"written consent"],
    },
}

# Used when a scan turns up fewer than three specific recommendations
GENERAL_CONTRACT_RECOMMENDATIONS = [
    "Confirm every verbal agreement (rate, deliverables, deadlines) is written into the final contract",
    "Keep a signed copy of the final contract and all approval emails for your records",
    "Invoice promptly once deliverables are approved and track the payment due date",
]

MIN_RECOMMENDATIONS = 3
MAX_RECOMMENDATIONS = 5
MAX_QUOTE_LENGTH = 200

HEALTH_LEVELS = [
    (80, "excellent"),
    (60, "good"),
    (40, "fair"),
    (0, "poor"),
]

"""Ready-to-send replies for gift offers, one template per response type."""
from data.gifts import RESPONSE_TYPE_INFO
from schemas.gift import GiftEvaluation, GiftResponse, GiftResponseContext
from services.numbers import round_half_up

DEFAULT_CREATOR_RATE = 500


def _accept_with_hook(context: GiftResponseContext) -> GiftResponse:
    brand_name = context.brand_name or "there"
    product_name = context.product_name or "your product"

    message = (
        f"Hi {brand_name}! Thanks for reaching out - I'd love to try {product_name}!\n\n"
        "I'm happy to share my honest experience with my audience. If the content performs well, "
        "I'd love to discuss a paid partnership for future campaigns!\n\n"
        "Where should I send my shipping info?"
    )
    conversion_script = (
        f"Hi {brand_name}! Wanted to share - the {product_name} content performed great!\n\n"
        "Results:\n"
        "- [X] views\n"
        "- [Y] likes\n"
        "- [Z] saves\n\n"
        "My audience loved it! I'd love to discuss a paid partnership for future campaigns. "
        "Here's my rate card: [link]\n\n"
        "Let me know if you'd like to collaborate again!"
    )
    return GiftResponse(
        response_type="accept_with_hook",
        message=message,
        follow_up_reminder="Set a reminder for 2 weeks after posting to share performance metrics and pitch paid collaboration.",
        conversion_script=conversion_script,
    )


def _counter_hybrid(context: GiftResponseContext) -> GiftResponse:
    brand_name = context.brand_name or "there"
    product_name = context.product_name or "the product"
    full_rate = context.creator_rate if context.creator_rate is not None else DEFAULT_CREATOR_RATE
    hybrid_rate = context.hybrid_rate if context.hybrid_rate is not None else round_half_up(full_rate * 0.5)
    content_type = context.content_type or "dedicated content"

    message = (
        f"Hi {brand_name}! Thank you for thinking of me - {product_name} looks amazing!\n\n"
        f"For {content_type}, my rate is typically ${full_rate:,}. I'd be happy to do a hybrid collaboration:\n\n"
        f"→ Product gifted + ${hybrid_rate:,} = {content_type} with my authentic review\n\n"
        "This lets me create the high-quality content your brand deserves. Would that work with your budget?"
    )
    conversion_script = (
        f"Hi {brand_name}! The collaboration was so much fun, and my audience responded really well to {product_name}!\n\n"
        "For our next campaign, I'd love to do a fully paid partnership. Based on the results we got, "
        "I think we could create even more impactful content together.\n\n"
        "My rates are:\n"
        f"- Single post: ${full_rate:,}\n"
        f"- Multiple posts: ${round_half_up(full_rate * 1.8):,}\n"
        "- Full campaign: Let's chat!\n\n"
        "Would you be interested in discussing a paid partnership?"
    )
    return GiftResponse(
        response_type="counter_hybrid",
        message=message,
        follow_up_reminder="If they accept the hybrid deal, track in Gift Tracker and follow up after posting with performance metrics.",
        conversion_script=conversion_script,
    )


def _ask_budget_first(context: GiftResponseContext) -> GiftResponse:
    brand_name = context.brand_name or "there"
    message = (
        f"Hi {brand_name}! Thanks for reaching out!\n\n"
        "Before I confirm, I have a few quick questions:\n"
        "1. What's the retail value of the product?\n"
        "2. What deliverables are you hoping for?\n"
        "3. Is there a budget for this partnership, or is it product-only?\n\n"
        "Looking forward to hearing more!"
    )
    return GiftResponse(response_type="ask_budget_first", message=message)


def _decline_politely(context: GiftResponseContext) -> GiftResponse:
    message = (
        "Thanks so much for thinking of me!\n\n"
        "I'm currently focused on paid partnerships, but I appreciate you reaching out. "
        "If you have budget for a collaboration in the future, I'd love to chat!\n\n"
        "Best of luck with your campaign!"
    )
    return GiftResponse(response_type="decline_politely", message=message)


def _run_away(context: GiftResponseContext) -> GiftResponse:
    message = (
        "Thank you for reaching out, but I don't think this is the right fit for me at this time.\n\n"
        "Best of luck with your campaign!"
    )
    return GiftResponse(response_type="run_away", message=message)


RESPONSE_GENERATORS = {
    "accept_with_hook": _accept_with_hook,
    "counter_hybrid": _counter_hybrid,
    "ask_budget_first": _ask_budget_first,
    "decline_politely": _decline_politely,
    "run_away": _run_away,
}


def generate_response_by_type(response_type: str, context: GiftResponseContext) -> GiftResponse:
    """Render one template directly. Unknown types fall back to asking about budget."""
    generator = RESPONSE_GENERATORS.get(response_type, _ask_budget_first)
    return generator(context)


def generate_gift_response(evaluation: GiftEvaluation, context: GiftResponseContext = None) -> GiftResponse:
    """
    Render the reply for an evaluated gift offer.

    The hybrid add-on defaults to the evaluation's minimum acceptable add-on so
    the message and the displayed figure always agree.
    """
    context = context or GiftResponseContext()
    enriched = context.model_copy(update={
        "hybrid_rate": (
            context.hybrid_rate if context.hybrid_rate is not None else evaluation.minimum_acceptable_add_on
        ),
    })
    return generate_response_by_type(evaluation.response_type, enriched)


def get_response_type_description(response_type: str) -> dict:
    return dict(RESPONSE_TYPE_INFO.get(response_type, RESPONSE_TYPE_INFO["ask_budget_first"]))


def get_conversion_playbook_script(stage: str, context: GiftResponseContext) -> str:
    brand_name = context.brand_name or "there"
    product_name = context.product_name or "your product"

    if stage == "performance_share":
        return (
            f"Hi {brand_name}! Wanted to share - the {product_name} content performed great!\n\n"
            "📊 Results:\n"
            "• [X] views\n"
            "• [Y] likes\n"
            "• [Z] saves\n\n"
            "My audience loved it! I'd love to discuss a paid partnership for future campaigns. "
            "Here's my rate card: [link]"
        )
    if stage == "follow_up_30_day":
        return (
            f"Hi {brand_name}! I've been using {product_name} for a month now and still loving it!\n\n"
            "I noticed you have some exciting things coming up. I'd love to be part of your next campaign "
            "- I offer a 15% returning brand discount.\n\n"
            "Would you be interested in discussing a paid collaboration?"
        )
    if stage == "new_launch_pitch":
        return (
            f"Hi {brand_name}! I saw you're launching [new product] - congrats!\n\n"
            f"Since my audience responded so well to {product_name}, I think they'd love the new launch too. "
            "I'd be happy to create some content around it.\n\n"
            "For returning brands, I offer a 15% discount on my standard rates. Would you like to discuss?"
        )
    if stage == "returning_brand_offer":
        return (
            f"Hi {brand_name}! It's been great working with you, and I'd love to continue our partnership!\n\n"
            "For returning brands, I offer:\n"
            "• 15% discount on standard rates\n"
            "• Priority scheduling\n"
            "• Bundle discounts for multi-post campaigns\n\n"
            "Here's my updated rate card: [link]\n\n"
            "Let me know if you'd like to plan something for the upcoming season!"
        )
    return (
        f"Hi {brand_name}! I enjoyed working with your brand and would love to discuss future opportunities. "
        "Let me know if you have any upcoming campaigns!"
    )

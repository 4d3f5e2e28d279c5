DEFAULT_PLATFORM_MULTIPLIER = 1.0

PLATFORMS = {
    "instagram": {"name": "Instagram", "multiplier": 1.0},
    "tiktok": {"name": "TikTok", "multiplier": 0.9},
    "youtube": {"name": "YouTube", "multiplier": 1.4},
    "youtube_shorts": {"name": "YouTube Shorts", "multiplier": 0.7},
    "twitter": {"name": "Twitter/X", "multiplier": 0.7},
    "threads": {"name": "Threads", "multiplier": 0.6},
    "pinterest": {"name": "Pinterest", "multiplier": 0.8},
    "linkedin": {"name": "LinkedIn", "multiplier": 1.3},
    "bluesky": {"name": "Bluesky", "multiplier": 0.5},
    "lemon8": {"name": "Lemon8", "multiplier": 0.6},
    "snapchat": {"name": "Snapchat", "multiplier": 0.75},
    "twitch": {"name": "Twitch", "multiplier": 1.1},
}

CONTENT_FORMATS = {
    "static": {"name": "Static", "premium": 0.0, "complexity": "simple"},
    "carousel": {"name": "Carousel", "premium": 0.15, "complexity": "standard"},
    "story": {"name": "Story", "premium": -0.15, "complexity": "simple"},
    "reel": {"name": "Reel", "premium": 0.25, "complexity": "standard"},
    "video": {"name": "Video", "premium": 0.35, "complexity": "production"},
    "live": {"name": "Live", "premium": 0.40, "complexity": "complex"},
    "ugc": {"name": "Ugc", "premium": 0.0, "complexity": "simple"},
}

COMPLEXITY_PREMIUMS = {
    "simple": 0.0,
    "standard": 0.15,
    "complex": 0.30,
    "production": 0.50,
}

UGC_FORMATS = {
    "video": {"base_rate": 175, "complexity": "standard"},
    "photo": {"base_rate": 100, "complexity": "simple"},
}


def normalize_platform(platform: str) -> str:
    """"YouTube Shorts" -> "youtube_shorts"."""
    if not platform:
        return ""
    return "_".join(platform.strip().lower().split())

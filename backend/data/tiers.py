# Ordered follower breakpoints: (lower bound inclusive, tier). Scanned highest first.
TIER_BREAKPOINTS = [
    (1_000_000, "celebrity"),
    (500_000, "mega"),
    (250_000, "macro"),
    (100_000, "rising"),
    (50_000, "mid"),
    (10_000, "micro"),
    (0, "nano"),
]

TIER_ORDER = ["nano", "micro", "mid", "rising", "macro", "mega", "celebrity"]

# Upper edge used when placing a creator inside the open-ended top band
CELEBRITY_BAND_CEILING = 10_000_000

TIERS = {
    "nano": {"name": "Nano", "base_rate": 150, "hourly_rate": 30, "event_day_rate": 500},
    "micro": {"name": "Micro", "base_rate": 400, "hourly_rate": 50, "event_day_rate": 750},
    "mid": {"name": "Mid-Tier", "base_rate": 800, "hourly_rate": 75, "event_day_rate": 1000},
    "rising": {"name": "Rising", "base_rate": 1500, "hourly_rate": 100, "event_day_rate": 1250},
    "macro": {"name": "Macro", "base_rate": 3000, "hourly_rate": 125, "event_day_rate": 1500},
    "mega": {"name": "Mega", "base_rate": 6000, "hourly_rate": 150, "event_day_rate": 1750},
    "celebrity": {"name": "Celebrity", "base_rate": 12000, "hourly_rate": 200, "event_day_rate": 2000},
}

# Published per-post rate distribution for each tier (Instagram, lifestyle)
TIER_RATE_BENCHMARKS = {
    "nano": {"p25": 100, "p50": 150, "p75": 225, "p90": 350},
    "micro": {"p25": 275, "p50": 400, "p75": 550, "p90": 750},
    "mid": {"p25": 550, "p50": 800, "p75": 1100, "p90": 1500},
    "rising": {"p25": 1000, "p50": 1500, "p75": 2100, "p90": 3000},
    "macro": {"p25": 2000, "p50": 3000, "p75": 4500, "p90": 6500},
    "mega": {"p25": 4000, "p50": 6000, "p75": 9000, "p90": 14000},
    "celebrity": {"p25": 8000, "p50": 12000, "p75": 20000, "p90": 35000},
}

from typing import Optional, Tuple

# recommendation -> (badge colour, icon)
RATING_STYLES = {
    "strong buy": ("#16a34a", "📈"),
    "buy": ("#22c55e", "📈"),
    "neutral": ("#ca8a04", "➖"),
    "hold": ("#ca8a04", "➖"),
    "sell": ("#ea580c", "❌"),
    "strong sell": ("#dc2626", "❌"),
}
UNKNOWN_RATING = ("#9ca3af", "⚠️")


def rating_style(recommendation: Optional[str]) -> Tuple[str, str]:
    if not recommendation:
        return UNKNOWN_RATING
    return RATING_STYLES.get(recommendation.strip().lower(), UNKNOWN_RATING)


def section_title(key: str) -> str:
    """``competitive_positioning`` -> ``Competitive Positioning``."""
    return " ".join(word.capitalize() for word in key.split("_"))

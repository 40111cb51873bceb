"""
Domain reputation - static bonus for documentation hosts and well-known platforms.
"""

DOC_MARKERS = ("docs.", "developer.", "api.")

TOP_TIER_DOMAINS = [
    "vercel.com", "stripe.com", "github.com", "openai.com", "anthropic.com",
    "google.com", "microsoft.com", "apple.com", "aws.amazon.com",
    "cloud.google.com", "azure.microsoft.com", "react.dev", "nextjs.org",
    "tailwindcss.com",
]

SECOND_TIER_DOMAINS = [
    "netlify.com", "heroku.com", "digitalocean.com", "cloudflare.com",
    "twilio.com", "slack.com", "notion.so", "linear.app", "figma.com",
]

DOCS_BONUS = 20
TOP_TIER_BONUS = 18
SECOND_TIER_BONUS = 12


def _matches(hostname: str, domains: list[str]) -> bool:
    return any(hostname == d or hostname.endswith(f".{d}") for d in domains)


def reputation_bonus(hostname: str) -> int:
    """Bonus for a hostname; first matching tier wins."""
    host = (hostname or "").lower()
    if host.startswith("www."):
        host = host[4:]

    if any(marker in host for marker in DOC_MARKERS):
        return DOCS_BONUS
    if _matches(host, TOP_TIER_DOMAINS):
        return TOP_TIER_BONUS
    if _matches(host, SECOND_TIER_DOMAINS):
        return SECOND_TIER_BONUS
    return 0

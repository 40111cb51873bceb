"""
Fallback insights - fixed content returned whenever generation fails.
"""

from ai_ready.schemas.insight import Insight, InsightBundle


def fallback_bundle(url: str = "https://example.com") -> InsightBundle:
    """Canonical, always-valid InsightBundle for a URL."""
    insights = [
        Insight(
            id="content-quality",
            label="Content Quality for AI",
            score=75,
            status="warning",
            details="Content is generally well-structured.",
            recommendation="Keep content factual and specific so AI systems can quote it.",
            action_items=[
                "Open each page with a one-sentence summary of its purpose.",
                "Replace vague claims with concrete facts, figures and dates.",
                "Break long paragraphs into short, single-topic blocks.",
                "Define domain terms the first time they appear.",
                "Remove boilerplate text that repeats across pages.",
            ],
        ),
        Insight(
            id="info-architecture",
            label="Information Architecture",
            score=70,
            status="warning",
            details="Information is organized, but grouping could be clearer.",
            recommendation="Group related content and make the hierarchy explicit.",
            action_items=[
                "Use one H1 per page and nest H2/H3 headings logically.",
                "Add breadcrumb navigation that mirrors the URL structure.",
                "Link related pages from a clearly labeled section.",
                "Keep URL paths short and descriptive.",
                "List every important page in the XML sitemap.",
            ],
        ),
        Insight(
            id="semantic-structure",
            label="Semantic Structure",
            score=65,
            status="warning",
            details="Some semantic HTML is present.",
            recommendation="Describe page regions with semantic HTML5 elements.",
            action_items=[
                "Wrap the primary content in a <main> element.",
                "Use <article> for self-contained content and <section> for parts of it.",
                "Mark site navigation with <nav>.",
                "Use <header> and <footer> for page and article chrome.",
                "Add ARIA landmarks only where native elements do not apply.",
            ],
        ),
        Insight(
            id="ai-discovery",
            label="AI Discovery Value",
            score=60,
            status="warning",
            details="AI systems can find the page, but discovery files are incomplete.",
            recommendation="Publish the files AI crawlers look for first.",
            action_items=[
                "Add an llms.txt file describing the site and its key pages.",
                "Reference the sitemap from robots.txt.",
                "State AI crawler rules explicitly in robots.txt.",
                "Keep page titles and meta descriptions unique.",
                "Expose a plain-text or markdown version of key documentation.",
            ],
        ),
        Insight(
            id="knowledge-extraction",
            label="Knowledge Extraction",
            score=60,
            status="warning",
            details="Basic structured data present.",
            recommendation="Add JSON-LD structured data.",
            action_items=[
                f'<script type="application/ld+json">{{"@context":"https://schema.org","@type":"WebSite","url":"{url}"}}</script>',
                "Describe the publishing organization with Organization schema.",
                "Mark up articles with Article schema including author and dates.",
                "Use FAQPage schema for question-and-answer content.",
                "Present specifications and comparisons as HTML tables.",
            ],
        ),
        Insight(
            id="context-completeness",
            label="Context & Completeness",
            score=65,
            status="warning",
            details="Topics are introduced, but supporting context is thin in places.",
            recommendation="Give each page enough context to stand on its own.",
            action_items=[
                "State who the content is for near the top of the page.",
                "Add author and last-updated information.",
                "Link to primary sources for claims and data.",
                "Cover common follow-up questions on the same page.",
                "Summarize key takeaways at the end of long pages.",
            ],
        ),
        Insight(
            id="content-uniqueness",
            label="Content Uniqueness",
            score=70,
            status="warning",
            details="Content appears mostly original.",
            recommendation="Emphasize first-hand information that is not available elsewhere.",
            action_items=[
                "Add original data, examples or case studies.",
                "Consolidate near-duplicate pages into one canonical page.",
                "Set canonical URLs on pages reachable under several addresses.",
                "Avoid thin pages that only list links.",
                "Refresh outdated pages instead of publishing new copies.",
            ],
        ),
        Insight(
            id="machine-interpretability",
            label="Machine Interpretability",
            score=70,
            status="warning",
            details="Most content is readable without executing scripts.",
            recommendation="Make core content available in the initial HTML.",
            action_items=[
                "Server-render the main content instead of loading it client-side.",
                "Give every meaningful image descriptive alt text.",
                "Declare the page language with the lang attribute.",
                "Use descriptive link text instead of 'click here'.",
                "Keep critical text out of images and canvas elements.",
            ],
        ),
    ]

    return InsightBundle(
        insights=insights,
        overall_ai_readiness="Moderate AI readiness.",
        top_priorities=[
            "Implement structured data.",
            "Publish an llms.txt file.",
            "Fix heading hierarchy and semantic structure.",
        ],
    )

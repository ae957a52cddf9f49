from typing import Any, Dict, List, Optional
from pydantic import BaseModel

SITE_BASE_URL = "https://example.com"

class OpenGraphTags(BaseModel):
    og_title: str
    og_description: str
    og_type: str = "article"
    og_url: str

class TwitterTags(BaseModel):
    twitter_card: str = "summary_large_image"
    twitter_title: str
    twitter_description: str

class OptimizedMetaTags(BaseModel):
    title: str
    titleLength: int
    metaDescription: str
    descriptionLength: int
    keywords: str
    openGraphTags: OpenGraphTags
    twitterTags: TwitterTags
    canonicalUrl: str
    structuredData: Dict[str, Any]
    recommendations: List[str]

def optimize_meta_tags(
    title: str,
    description: str,
    keywords: List[str],
    url_slug: Optional[str] = None,
) -> OptimizedMetaTags:
    optimized_title = optimize_title(title, keywords)
    optimized_description = optimize_description(description, keywords)
    url = f"{SITE_BASE_URL}/{url_slug or 'page'}"

    return OptimizedMetaTags(
        title=optimized_title,
        titleLength=len(optimized_title),
        metaDescription=optimized_description,
        descriptionLength=len(optimized_description),
        keywords=", ".join(keywords[:5]),
        openGraphTags=OpenGraphTags(
            og_title=optimized_title,
            og_description=optimized_description,
            og_url=url,
        ),
        twitterTags=TwitterTags(
            twitter_title=optimized_title,
            twitter_description=optimized_description,
        ),
        canonicalUrl=url,
        structuredData={
            "@context": "https://schema.org",
            "@type": "Article",
            "name": optimized_title,
            "description": optimized_description,
        },
        recommendations=meta_recommendations(optimized_title, optimized_description, keywords),
    )

def optimize_title(title: str, keywords: List[str]) -> str:
    primary = keywords[0]
    optimized = title

    if primary.lower() not in optimized.lower() and len(optimized) < 55:
        optimized = f"{optimized} - {primary}"

    # Search results cut titles off around 60 characters
    if len(optimized) > 60:
        optimized = optimized[:57] + "..."

    if len(optimized) < 30:
        optimized = f"{optimized} | {primary}"

    return optimized

def optimize_description(description: str, keywords: List[str]) -> str:
    primary = keywords[0]
    optimized = description

    if primary.lower() not in optimized.lower():
        optimized = f"{optimized} Learn more about {primary}."

    if len(optimized) > 160:
        optimized = optimized[:157] + "..."
    elif len(optimized) < 120:
        secondary = keywords[1] if len(keywords) > 1 else primary
        optimized = f"{optimized} Discover tips and strategies for {secondary}."

    return optimized

def meta_recommendations(title: str, description: str, keywords: List[str]) -> List[str]:
    primary = keywords[0]
    recommendations = []

    if len(title) < 30:
        recommendations.append("Title is too short (< 30 chars) - expand to include more context")
    elif len(title) > 60:
        recommendations.append("Title may be truncated in search results - keep under 60 characters")
    else:
        recommendations.append("✓ Title length is optimal (30-60 characters)")

    if len(description) < 120:
        recommendations.append("Description is too short - expand to at least 120 characters")
    elif len(description) > 160:
        recommendations.append("Description may be truncated - keep under 160 characters")
    else:
        recommendations.append("✓ Description length is optimal (120-160 characters)")

    if primary.lower() not in title.lower():
        recommendations.append(f'Include primary keyword "{primary}" in the title')
    else:
        recommendations.append(f'✓ Primary keyword "{primary}" found in title')

    if primary.lower() not in description.lower():
        recommendations.append(f'Include primary keyword "{primary}" in meta description')
    else:
        recommendations.append(f'✓ Primary keyword "{primary}" found in description')

    recommendations.append("Add structured data markup for rich snippets in search results")
    recommendations.append("Set up Open Graph tags for better social media sharing")
    recommendations.append("Configure URL slug to be descriptive and keyword-rich")
    return recommendations

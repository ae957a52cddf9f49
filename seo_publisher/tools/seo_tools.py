import logging
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from seo_publisher.core.content_writer import write_content as generate_content
from seo_publisher.core.context import ToolContext
from seo_publisher.core.meta_optimizer import optimize_meta_tags as optimize_meta
from seo_publisher.core.seo_analyzer import analyze_keywords as analyze
from seo_publisher.tools.registry import registry

logger = logging.getLogger(__name__)

class AnalyzeKeywordsArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    keywords: List[str] = Field(min_length=1, description="List of keywords to analyze")
    language: str = Field("he", description="Language code (default: he)")
    region: str = Field("IL", description="Region code (default: IL)")

class WriteContentArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    topic: str = Field(description="The main topic for content")
    keywords: List[str] = Field(min_length=1, description="Primary keywords to target")
    contentType: Literal["blog", "product", "landing-page", "guide"]
    wordCount: int = Field(1000, gt=0, description="Target word count")
    tone: str = "professional"

class OptimizeMetaTagsArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(description="Current page title")
    description: str = Field(description="Current page description")
    keywords: List[str] = Field(min_length=1, description="Target keywords")
    urlSlug: Optional[str] = Field(None, description="URL slug for the page")

@registry.register(
    name="analyze_keywords",
    description="Analyze keywords for SEO potential, search volume, competition, and trends",
    arguments=AnalyzeKeywordsArgs,
)
def analyze_keywords(context: ToolContext, keywords, language="he", region="IL"):
    logger.info(f"Analyzing {len(keywords)} keywords ({language}/{region})")
    return [a.model_dump() for a in analyze(keywords, language, region, rng=context.rng)]

@registry.register(
    name="write_content",
    description="Generate SEO-optimized content based on keywords and topic",
    arguments=WriteContentArgs,
)
def write_content(context: ToolContext, topic, keywords, contentType, wordCount=1000, tone="professional"):
    logger.info(f"Writing {contentType} content on {topic!r}, target {wordCount} words")
    return generate_content(topic, keywords, contentType, wordCount, tone, rng=context.rng).model_dump()

@registry.register(
    name="optimize_meta_tags",
    description="Generate and optimize meta tags (title, description, etc.)",
    arguments=OptimizeMetaTagsArgs,
)
def optimize_meta_tags(context: ToolContext, title, description, keywords, urlSlug=None):
    return optimize_meta(title, description, keywords, urlSlug).model_dump()

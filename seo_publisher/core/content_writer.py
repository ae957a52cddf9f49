import math
import random
import re
from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel

class ContentGenerationResult(BaseModel):
    title: str
    content: str
    wordCount: int
    keywordDensity: Dict[str, float]
    readabilityScore: int
    seoScore: int
    suggestions: List[str]

def write_content(
    topic: str,
    keywords: List[str],
    content_type: str,
    word_count: int = 1000,
    tone: str = "professional",
    rng: Optional[random.Random] = None,
) -> ContentGenerationResult:
    rng = rng or random.Random()
    content = generate_body(topic, keywords, word_count, rng)
    return ContentGenerationResult(
        title=generate_title(topic, keywords, content_type, rng),
        content=content,
        wordCount=len(content.split()),
        keywordDensity=keyword_density(content, keywords),
        readabilityScore=readability_score(content),
        seoScore=seo_score(content, keywords),
        suggestions=content_suggestions(content, keywords),
    )

def generate_title(topic: str, keywords: List[str], content_type: str, rng: random.Random) -> str:
    year = date.today().year
    templates = {
        "blog": [
            f"Ultimate Guide to {topic}: Everything You Need to Know",
            f"{topic}: {keywords[0]} Tips & Strategies",
            f"How to {topic}: Complete {year} Guide",
        ],
        "product": [
            f"{topic}: Features, Benefits & Pricing Guide",
            f"Best {topic} Solutions: Compare & Choose",
            f"{topic} Review: Everything You Need to Know",
        ],
        "landing-page": [
            f"Professional {topic} Services | Get Started Today",
            f"{topic} Solutions - Trusted by Thousands",
            f"Transform Your {topic} Experience Now",
        ],
        "guide": [
            f"{topic} Guide: Step-by-Step Instructions",
            f"Beginner's Guide to {topic}",
            f"Complete {topic} Handbook for {year}",
        ],
    }
    return rng.choice(templates.get(content_type, templates["blog"]))

def generate_body(topic: str, keywords: List[str], word_count: int, rng: random.Random) -> str:
    # Section count follows the requested length, not the generated one
    sections = max(0, math.ceil(word_count / 200))
    secondary = keywords[1] if len(keywords) > 1 else keywords[0]

    parts = [
        "## Introduction\n\n"
        f"Welcome to our comprehensive guide on {topic}. This article covers everything you need "
        f"to know about {', '.join(keywords)}. Whether you're a beginner or an experienced "
        "professional, you'll find valuable insights and actionable strategies to help you succeed.\n\n"
    ]
    for i in range(1, sections + 1):
        parts.append(
            f"## Section {i}: Key Aspects of {topic}\n\n"
            f"When discussing {rng.choice(keywords)}, it's important to understand the foundational "
            f"concepts. This section explores the critical elements that make {topic} successful.\n\n"
            "Key points to consider:\n"
            f"- Understanding the basics of {keywords[0]}\n"
            f"- Implementing effective strategies for {secondary}\n"
            "- Measuring success with proper metrics\n"
            "- Optimizing performance continuously\n\n"
        )
    parts.append(
        "## Conclusion\n\n"
        f"{topic} is an essential aspect of modern business and personal development. By "
        f"implementing the strategies discussed in this guide and focusing on {keywords[0]}, you "
        "can achieve significant improvements in your results.\n\n"
        "Take action today and start applying these principles to see the difference they can "
        "make in your success journey.\n"
    )
    return "".join(parts)

def keyword_density(content: str, keywords: List[str]) -> Dict[str, float]:
    """Percentage of tokens containing each keyword, rounded to 2 decimals."""
    words = content.lower().split()
    total = len(words)
    density = {}
    for keyword in keywords:
        needle = keyword.lower()
        count = sum(1 for w in words if needle in w)
        density[keyword] = round(count / total * 100, 2) if total else 0.0
    return density

def estimate_syllables(text: str) -> int:
    syllables = 0
    for word in text.split():
        vowels = len(re.findall(r"[aeiouy]", word.lower()))
        syllables += vowels if vowels > 0 else 1
    return syllables

def readability_score(content: str) -> int:
    """Flesch reading ease, clamped to 0..100."""
    sentences = len(re.split(r"[.!?]+", content))
    words = len(content.split())
    if words == 0:
        return 0
    syllables = estimate_syllables(content)
    score = 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
    return max(0, min(100, math.floor(score + 0.5)))

def average_density(content: str, keywords: List[str]) -> float:
    words = len(content.split())
    if words == 0 or not keywords:
        return 0.0
    lowered = content.lower()
    total = sum(len(re.findall(re.escape(k.lower()), lowered)) / words for k in keywords)
    return total / len(keywords)

def seo_score(content: str, keywords: List[str]) -> int:
    score = 60
    density = average_density(content, keywords)
    if 0.01 <= density <= 0.03:
        score += 15
    elif density > 0:
        score += 8

    if 300 <= len(content.split()) <= 3000:
        score += 15

    if "##" in content:
        score += 10

    return min(100, score)

def content_suggestions(content: str, keywords: List[str]) -> List[str]:
    suggestions = []
    density = average_density(content, keywords)
    if density < 0.01:
        suggestions.append("Increase keyword frequency - aim for 1-3% keyword density")
    elif density > 0.03:
        suggestions.append("Keyword density is too high - avoid keyword stuffing for better user experience")

    if len(content.split()) < 300:
        suggestions.append("Content is too short - aim for at least 300 words")

    if "##" not in content:
        suggestions.append("Add subheadings (##) to improve content structure")

    if "- " not in content:
        suggestions.append("Use bullet points to break up content and improve readability")

    suggestions.append("Add internal links to related content")
    suggestions.append("Include a clear call-to-action at the end")
    return suggestions

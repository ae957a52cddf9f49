import random
from typing import List, Literal, Optional
from pydantic import BaseModel

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

RELATED_PREFIXES = ["best", "how to", "top", "create", "build"]
RELATED_SUFFIXES = ["for", "near me", "2024", "guide", "tips"]

class SeasonalTrend(BaseModel):
    month: str
    volume: int

class KeywordAnalysis(BaseModel):
    keyword: str
    searchVolume: int
    keywordDifficulty: int
    competitionLevel: Literal["low", "medium", "high"]
    cpcValue: float
    trends: str
    relatedKeywords: List[str]
    seasonalTrends: List[SeasonalTrend]
    recommendations: List[str]

def competition_level(difficulty: int) -> str:
    if difficulty < 30:
        return "low"
    if difficulty < 70:
        return "medium"
    return "high"

def analyze_keywords(
    keywords: List[str],
    language: str = "he",
    region: str = "IL",
    rng: Optional[random.Random] = None,
) -> List[KeywordAnalysis]:
    # language and region are accepted for interface parity; the mock data ignores them
    rng = rng or random.Random()
    results = []
    for keyword in keywords:
        search_volume = rng.randrange(100000) + 100
        difficulty = rng.randrange(100)
        level = competition_level(difficulty)
        results.append(KeywordAnalysis(
            keyword=keyword,
            searchVolume=search_volume,
            keywordDifficulty=difficulty,
            competitionLevel=level,
            cpcValue=round(rng.random() * 10, 2),
            trends="trending_up" if difficulty < 40 else "stable",
            relatedKeywords=related_keywords(keyword, rng),
            seasonalTrends=seasonal_trends(rng),
            recommendations=keyword_recommendations(keyword, search_volume, level),
        ))
    return results

def related_keywords(keyword: str, rng: random.Random) -> List[str]:
    related = [f"{rng.choice(RELATED_PREFIXES)} {keyword}" for _ in range(3)]
    related += [f"{keyword} {rng.choice(RELATED_SUFFIXES)}" for _ in range(2)]
    return related

def seasonal_trends(rng: random.Random) -> List[SeasonalTrend]:
    return [SeasonalTrend(month=month, volume=rng.randrange(100) + 50) for month in MONTHS]

def keyword_recommendations(keyword: str, search_volume: int, level: str) -> List[str]:
    recommendations = []
    if search_volume > 50000:
        recommendations.append("High search volume - good opportunity for traffic")

    if level == "low":
        recommendations.append("Low competition - easier to rank for this keyword")
    elif level == "high":
        recommendations.append("High competition - focus on long-tail variations or create unique content")

    recommendations.append(f'Create comprehensive content targeting "{keyword}" and related keywords')
    recommendations.append("Build quality backlinks to improve domain authority")
    return recommendations

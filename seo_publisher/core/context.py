import random
from dataclasses import dataclass, field
from typing import Optional

from seo_publisher.core.wordpress_client import PostStore

@dataclass
class ToolContext:
    """Process-lifetime dependencies handed to every tool invocation."""

    wordpress: Optional[PostStore] = None
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def seeded(cls, seed: Optional[int], wordpress: Optional[PostStore] = None) -> "ToolContext":
        return cls(wordpress=wordpress, rng=random.Random(seed))

from dataclasses import dataclass, field
from typing import List


@dataclass
class Repository:
    """A tracked code repository and its reactions"""
    id: str
    title: str
    url: str
    techs: List[str] = field(default_factory=list)
    likes: int = 0
    dislikes: int = 0

    def has_tech(self, tech: str) -> bool:
        """Case-insensitive exact match against any of the tags."""
        wanted = tech.lower()
        return any(t.lower() == wanted for t in self.techs)

    def title_contains(self, text: str) -> bool:
        return text.lower() in self.title.lower()

    def copy(self) -> "Repository":
        return Repository(
            id=self.id,
            title=self.title,
            url=self.url,
            techs=list(self.techs),
            likes=self.likes,
            dislikes=self.dislikes,
        )

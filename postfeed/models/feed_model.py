from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class PostModel:
    id: int
    author_name: str
    author_avatar: str | None
    likes_count: int
    comments_count: int
    text: str
    date: datetime
    images: list[str] = field(default_factory=list)


@dataclass
class PostWithDateModel:
    """One feed page; eldest_date is the cursor for the next page."""

    post_models: list[PostModel] = field(default_factory=list)
    eldest_date: datetime | None = None

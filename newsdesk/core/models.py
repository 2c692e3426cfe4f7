"""
News Models
===========

The news item record and the validated create form.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidInput


def utc_now():
    return datetime.now(timezone.utc)


def iso_timestamp(moment=None):
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T09:30:00.123Z"""
    moment = moment or utc_now()
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def today(moment=None):
    return (moment or utc_now()).astimezone(timezone.utc).strftime('%Y-%m-%d')


@dataclass
class NewsItem:
    id: int
    title: str
    content: str
    subtitle: str = ''
    date: str = field(default_factory=today)
    image: Optional[str] = None
    createdAt: str = field(default_factory=iso_timestamp)

    def to_dict(self) -> Dict[str, Any]:
        # Key order matches the persisted file
        return {
            'id': self.id,
            'title': self.title,
            'subtitle': self.subtitle,
            'date': self.date,
            'content': self.content,
            'image': self.image,
            'createdAt': self.createdAt,
        }


@dataclass
class NewsForm:
    """Fields accepted by POST /api/news, already trimmed and defaulted"""
    title: str
    content: str
    subtitle: str = ''
    date: Optional[str] = None

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> 'NewsForm':
        title = (form.get('title') or '').strip()
        content = (form.get('content') or '').strip()
        if not title or not content:
            raise InvalidInput('title & content required')

        return cls(
            title=title,
            content=content,
            subtitle=(form.get('subtitle') or '').strip(),
            date=(form.get('date') or '').strip() or None,
        )

    def build(self, news_id, image=None, now=None) -> NewsItem:
        now = now or utc_now()
        return NewsItem(
            id=news_id,
            title=self.title,
            content=self.content,
            subtitle=self.subtitle,
            date=self.date or today(now),
            image=image,
            createdAt=iso_timestamp(now),
        )


def with_absolute_image(item, base_url):
    """Copy of a stored record whose image path is prefixed with scheme://host"""
    result = dict(item)
    image = result.get('image')
    result['image'] = f"{base_url.rstrip('/')}{image}" if image else None
    return result

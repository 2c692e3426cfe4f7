"""
News Service
============

Read-modify-write operations over the news collection. Each call reads the
whole collection from the store; nothing is cached between calls.
"""

import logging
import re

from ...core.errors import NotFound, StorageError
from ...core.models import with_absolute_image

logger = logging.getLogger(__name__)

ASCII_DIGITS = re.compile(r'[0-9]+')


def parse_id(value):
    """Parse a path identifier; anything that is not a non-negative integer gives None"""
    text = str(value).strip() if value is not None else ''
    if not ASCII_DIGITS.fullmatch(text):
        return None
    return int(text)


def _find_index(items, news_id):
    if news_id is None:
        return -1
    for index, item in enumerate(items):
        if item.get('id') == news_id:
            return index
    return -1


def list_news(store, base_url):
    """All items, newest first, with absolute image URLs"""
    return [with_absolute_image(item, base_url) for item in store.read()]


def get_news(store, raw_id, base_url):
    items = store.read()
    index = _find_index(items, parse_id(raw_id))
    if index == -1:
        raise NotFound('Not found')
    return with_absolute_image(items[index], base_url)


def create_news(store, uploads, form, image_file=None):
    """Store a new item built from a validated NewsForm.

    The image (if any) is saved before the collection is touched; if the
    collection cannot be written the image is removed again.

    Returns:
        dict: the created item as persisted (image path left relative).
    """
    image = None
    if image_file is not None and image_file.filename:
        image = uploads.save(image_file)

    try:
        with store.lock:
            items = store.read()
            item = form.build(store.next_id(items), image=image).to_dict()
            items.insert(0, item)
            store.write(items)
    except StorageError:
        if image:
            uploads.delete(image)
        raise

    logger.info(f"Created news item {item['id']}: {item['title']}")
    return item


def delete_news(store, uploads, raw_id):
    """Remove an item and its image file"""
    with store.lock:
        items = store.read()
        index = _find_index(items, parse_id(raw_id))
        if index == -1:
            raise NotFound('Not found')

        removed = items.pop(index)
        if removed.get('image'):
            uploads.delete(removed['image'])
        store.write(items)

    logger.info(f"Deleted news item {removed['id']}")
    return removed

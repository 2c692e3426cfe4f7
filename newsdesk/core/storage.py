"""
Storage
=======

File-backed persistence: the news collection lives in one JSON file that is
rewritten in full on every change, and uploaded images live in one directory.
"""

import json
import logging
import os
import re
import tempfile
import threading
import time

from .errors import StorageError, UnsupportedMediaType, PayloadTooLarge

logger = logging.getLogger(__name__)

UNSAFE_FILENAME_CHARS = re.compile(r'[^a-zA-Z0-9.\-]')

UPLOAD_URL_PREFIX = '/uploads/'


def size_limit_message(max_size):
    return f"File > {max_size // (1024 * 1024)} MB"


class NewsStore:
    """Owner of the persisted news collection.

    Every request reads the whole collection, changes it and writes it back.
    ``lock`` serialises those cycles inside one process; separate processes
    sharing the file can still overwrite each other's changes.
    """

    def __init__(self, path):
        self.path = path
        self.lock = threading.Lock()

    def init(self):
        """Create an empty collection file if none exists"""
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        if not os.path.exists(self.path):
            self.write([])
            logger.info(f"Created news file at {self.path}")

    def read(self):
        """Return the stored items; a missing or corrupt file reads as empty"""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read news file {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"News file {self.path} does not hold a list, treating as empty")
            return []
        if not all(isinstance(item, dict) for item in data):
            logger.warning(f"News file {self.path} holds non-object entries, treating as empty")
            return []
        return data

    def write(self, items):
        """Replace the collection on disk with ``items``"""
        directory = os.path.dirname(self.path) or '.'
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=directory,
                                             prefix='.news-', suffix='.tmp',
                                             delete=False) as f:
                tmp_path = f.name
                json.dump(items, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error writing news file {self.path}: {e}")
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageError('write error') from e

    @staticmethod
    def next_id(items):
        ids = [item['id'] for item in items if isinstance(item.get('id'), int)]
        return max(ids) + 1 if ids else 1


class UploadStore:
    """Owner of the uploaded image directory"""

    def __init__(self, folder, max_size=5 * 1024 * 1024):
        self.folder = folder
        self.max_size = max_size

    def init(self):
        os.makedirs(self.folder, exist_ok=True)

    @staticmethod
    def make_filename(original_name, now=None):
        """Timestamped, sanitised filename: 1715000000000-my_photo.png"""
        millis = int((now if now is not None else time.time()) * 1000)
        safe = UNSAFE_FILENAME_CHARS.sub('_', original_name or '')
        return f"{millis}-{safe}"

    def path_for(self, image_path):
        """Filesystem path for an image path such as /uploads/123-a.png"""
        name = os.path.basename(image_path or '')
        if name in ('', '.', '..'):
            return None
        return os.path.join(self.folder, name)

    @staticmethod
    def _stream_size(file):
        stream = file.stream
        stream.seek(0, os.SEEK_END)
        size = stream.tell()
        stream.seek(0)
        return size

    def save(self, file, now=None):
        """Validate and store an uploaded image.

        Args:
            file: werkzeug FileStorage from request.files.
            now: Optional epoch seconds used for the filename.

        Returns:
            The image path to store on the news item, e.g. "/uploads/123-a.png".
        """
        if not (file.mimetype or '').startswith('image/'):
            raise UnsupportedMediaType('Only images!')

        if self._stream_size(file) > self.max_size:
            raise PayloadTooLarge(size_limit_message(self.max_size))

        self.init()
        filename = self.make_filename(file.filename, now)
        file.save(os.path.join(self.folder, filename))
        logger.info(f"Saved upload {filename}")
        return f"{UPLOAD_URL_PREFIX}{filename}"

    def delete(self, image_path):
        """Remove an uploaded image. Returns False if there was nothing to remove."""
        full_path = self.path_for(image_path)
        if not full_path or not os.path.isfile(full_path):
            return False
        os.unlink(full_path)
        logger.info(f"Deleted upload {os.path.basename(full_path)}")
        return True

"""
Corpus loading.

The site build exports the content collections (photos, albums, blog posts,
projects) as one JSON document with frontmatter merged with EXIF-derived
fields. This module validates that export into Corpus models.
"""

import json
import logging
import os

from pydantic import ValidationError

from catalog.models import Corpus

logger = logging.getLogger(__name__)


def load_corpus(path):
    """Load and validate a corpus export.

    Args:
        path: Path to the JSON export

    Returns:
        Corpus: Validated content

    Raises:
        FileNotFoundError: If the export doesn't exist
        ValueError: If the file is not valid JSON or fails validation
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Corpus export not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not parse corpus export {path}: {e}") from e

    return build_corpus(data, source=path)


def build_corpus(data, source='<memory>'):
    """Validate a corpus dict (same shape as the JSON export)."""
    data = dict(data or {})
    data['projects'] = [
        {'kind': 'project', **entry} for entry in data.get('projects', [])
    ]
    data['posts'] = [
        {'kind': 'blog', **entry} for entry in data.get('posts', [])
    ]

    try:
        corpus = Corpus.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid corpus export {source}: {e}") from e

    _warn_dangling_albums(corpus)
    logger.info("Loaded corpus from %s: %d photos, %d albums, %d posts, %d projects",
                source, len(corpus.photos), len(corpus.albums),
                len(corpus.posts), len(corpus.projects))
    return corpus


def _warn_dangling_albums(corpus):
    """Log photos whose album slug doesn't resolve. They stay in the corpus."""
    known = {album.slug for album in corpus.albums}
    dangling = sorted({photo.album for photo in corpus.photos if photo.album not in known})
    for slug in dangling:
        logger.warning("Photos reference unknown album '%s'; album title will be empty", slug)

"""
Lumen content catalog package.

Content models and the corpus loader.
"""

from catalog.models import Photo, Album, ContentEntry, Corpus, album_title_map
from catalog.loader import load_corpus, build_corpus

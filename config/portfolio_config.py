"""
Lumen Portfolio Configuration.

Contains the PortfolioConfig class and the built-in defaults it merges the
JSON config file over.
"""

import copy
import hashlib
import json
import logging
import os

logger = logging.getLogger(__name__)

VALID_DATE_DIRECTIONS = ('asc', 'desc')
VALID_TAG_LOGIC = ('and', 'or')

DEFAULT_CONFIG = {
    'content': {
        'corpus_path': 'content/corpus.json',
    },
    'listings': {
        'photos': {'date_direction': 'desc'},
        'album': {'date_direction': 'asc'},
        'tag': {'date_direction': 'desc'},
        'featured': {'date_direction': 'desc'},
    },
    'filters': {
        'default_tag_logic': 'or',
    },
    'search': {
        'snippet_length': 180,
        'excluded_slugs': ['about'],
    },
    'cdn': {
        'photo_cdn_url': '',
        'resize_width': 400,
        'resize_quality': 85,
    },
    'logging_level': 'INFO',
}


def _merge_configs(base, override):
    """Deep merge override into base config."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_configs(result[key], value)
        else:
            result[key] = value
    return result


class PortfolioConfig:
    """Loads portfolio_config.json and merges it over DEFAULT_CONFIG.

    A missing file means defaults only. A file that can't be parsed is logged
    and ignored so the site still serves with defaults.
    """

    def __init__(self, config_path=None, validate=True):
        self.config_path = config_path or os.environ.get('PORTFOLIO_CONFIG', 'portfolio_config.json')
        self.config = self._load_config()
        self.version_hash = self._compute_version_hash()
        if validate:
            self.validate()

    def _load_config(self):
        defaults = copy.deepcopy(DEFAULT_CONFIG)
        if not os.path.exists(self.config_path):
            return defaults
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f) or {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not load config from %s, using defaults: %s", self.config_path, e)
            return defaults
        if not isinstance(user_config, dict):
            logger.warning("Config %s is not a JSON object, using defaults", self.config_path)
            return defaults
        return _merge_configs(defaults, user_config)

    def _compute_version_hash(self):
        """Compute a hash of the config for tracking which version was used."""
        config_str = json.dumps(self.config, sort_keys=True)
        return hashlib.md5(config_str.encode()).hexdigest()[:12]

    def validate(self):
        """Check enumerated settings.

        Raises:
            ValueError: If a listing direction or the default tag logic is invalid
        """
        for name, listing in self.config.get('listings', {}).items():
            direction = str(listing.get('date_direction', 'desc')).lower()
            if direction not in VALID_DATE_DIRECTIONS:
                raise ValueError(
                    f"Listing '{name}' has invalid date_direction '{direction}' "
                    f"(expected one of {', '.join(VALID_DATE_DIRECTIONS)})"
                )
        logic = str(self.get('filters.default_tag_logic', 'or')).lower()
        if logic not in VALID_TAG_LOGIC:
            raise ValueError(f"Invalid filters.default_tag_logic '{logic}'")
        return True

    def get(self, key, default=None):
        """Return value for dotted ``key``, or ``default`` if not present."""
        node = self.config
        for part in key.split('.'):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def get_listing_direction(self, listing):
        """Date tie-break direction for a listing ('photos', 'album', 'tag', ...)."""
        return str(self.get(f'listings.{listing}.date_direction', 'desc')).lower()

    def get_search_settings(self):
        return dict(self.config.get('search', {}))

    def get_cdn_settings(self):
        """CDN settings; the PHOTO_CDN_URL environment variable wins over the file."""
        cdn = dict(self.config.get('cdn', {}))
        env_url = os.environ.get('PHOTO_CDN_URL')
        if env_url:
            cdn['photo_cdn_url'] = env_url
        return cdn

    def get_corpus_path(self):
        """Corpus export path, resolved against the config file's directory."""
        path = self.get('content.corpus_path', DEFAULT_CONFIG['content']['corpus_path'])
        if os.path.isabs(path):
            return path
        base = os.path.dirname(os.path.abspath(self.config_path))
        return os.path.join(base, path)

    @property
    def logging_level(self):
        return self.get('logging_level', 'INFO')

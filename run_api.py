"""
Run the Lumen portfolio API (photo listings, filter options, site search).

The corpus export and listing settings come from portfolio_config.json (or
the file named by PORTFOLIO_CONFIG); the log level comes from its
``logging_level`` key.

Usage:
    python run_api.py                     # Reloads on source changes
    python run_api.py --production --workers 4
"""

import os
import sys
import argparse
import logging

# Ensure the script's directory is in Python path for local imports
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

logger = logging.getLogger(__name__)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Lumen portfolio API')
    parser.add_argument('--port', type=int, default=int(os.environ.get('PORT', 5000)),
                        help='Port to listen on (default: $PORT or 5000)')
    parser.add_argument('--host', default='0.0.0.0', help='Host to bind to')
    parser.add_argument('--production', action='store_true',
                        help='Disable auto-reload and allow several workers')
    parser.add_argument('--workers', type=int, default=1, help='Worker processes (production only)')
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)

    from api.config import PORTFOLIO_CONFIG
    logging.basicConfig(
        level=str(PORTFOLIO_CONFIG.logging_level).upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    logger.info("Serving corpus %s (config %s)",
                PORTFOLIO_CONFIG.get_corpus_path(), PORTFOLIO_CONFIG.version_hash)

    import uvicorn

    options = {'host': args.host, 'port': args.port, 'factory': True}
    if args.production:
        options['workers'] = args.workers
    else:
        options.update(reload=True, reload_dirs=[_script_dir])
    uvicorn.run("api:create_app", **options)


if __name__ == '__main__':
    main()

"""
Search router — site search over one content space.

"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from api.config import get_config
from api.corpus import get_corpus
from api.models.gallery import SearchResponse
from search import PROFESSIONAL, SEARCH_SPACES, search

router = APIRouter(tags=["search"])


@router.get("/api/search", response_model=SearchResponse)
async def api_search(
    response: Response,
    q: str = Query(''),
    space: str = Query(PROFESSIONAL),
    corpus=Depends(get_corpus),
    config=Depends(get_config),
):
    """Search blog posts and projects, or albums and photos with ``space=photography``."""
    space = space.lower()
    if space not in SEARCH_SPACES:
        raise HTTPException(status_code=400, detail=f"Unknown search space: {space}")

    settings = config.get_search_settings()
    results = search(
        q, corpus, space=space,
        snippet_length=settings.get('snippet_length', 180),
        cdn_url=config.get_cdn_settings().get('photo_cdn_url'),
        excluded_slugs=tuple(settings.get('excluded_slugs', ())),
    )
    response.headers['Cache-Control'] = 'no-store'
    return {'results': results}

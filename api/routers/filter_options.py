"""
Filter options router — dropdown options and slider bounds.

"""

from fastapi import APIRouter, Depends, Request

from api.config import get_config
from api.corpus import get_corpus
from api.models.gallery import BoundsResponse, TagSummary
from api.routers.gallery import build_filter_state
from filtering import available_tags, compute_bounds, facet_counts
from utils import aggregate_tags

router = APIRouter(prefix="/api/filter_options", tags=["filter_options"])


@router.get("/tags")
async def tags(request: Request, corpus=Depends(get_corpus), config=Depends(get_config)):
    """Tag options with counts, flagged with availability for the current selection."""
    qp = dict(request.query_params)
    state = build_filter_state(qp, corpus.photos, config.get('filters.default_tag_logic', 'or'))
    available = available_tags(corpus.photos, state)
    return {
        'tags': [
            {'tag': tag, 'count': count, 'available': tag in available}
            for tag, count in facet_counts(corpus.photos)['tags']
        ],
        'tag_logic': state.tag_logic.value,
    }


@router.get("/albums")
async def albums(corpus=Depends(get_corpus)):
    """Album options with counts; titles resolved where the album exists."""
    titles = corpus.album_titles()
    return {
        'albums': [
            {'slug': slug, 'title': titles.get(slug, slug), 'count': count}
            for slug, count in facet_counts(corpus.photos)['albums']
        ],
    }


@router.get("/cameras")
async def cameras(corpus=Depends(get_corpus)):
    """Camera options with counts."""
    return {'cameras': facet_counts(corpus.photos)['cameras']}


@router.get("/bounds", response_model=BoundsResponse)
async def bounds(corpus=Depends(get_corpus)):
    """Slider bounds per range dimension; min/max are null when nothing has a value."""
    computed = compute_bounds(corpus.photos)
    response = {}
    for dim in ('date', 'aperture', 'shutter_speed', 'iso', 'focal_length'):
        rng = getattr(computed, dim)
        if rng is None:
            response[dim] = {'min': None, 'max': None}
        elif dim == 'date':
            response[dim] = {'min': rng.min.isoformat(), 'max': rng.max.isoformat()}
        else:
            response[dim] = {'min': rng.min, 'max': rng.max}
    return response


@router.get("/professional_tags", response_model=list[TagSummary])
async def professional_tags(corpus=Depends(get_corpus), config=Depends(get_config)):
    """Tag usage across visible blog posts and projects."""
    excluded = set(config.get_search_settings().get('excluded_slugs', []))
    posts = [p for p in corpus.posts if p.slug not in excluded]
    return aggregate_tags(posts + list(corpus.projects))

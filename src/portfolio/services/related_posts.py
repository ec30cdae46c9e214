"""Related-post ranking by shared tags with a recency fallback."""

from collections.abc import Sequence

from src.portfolio.schemas.content import BlogPost
from src.portfolio.services.content_ordering import normalize_tag, sort_posts_by_recency

DEFAULT_RELATED_LIMIT = 3


def shared_tag_count(reference_tags: set[str], post: BlogPost) -> int:
    """Number of the post's tags found in ``reference_tags`` (already normalized).

    Repeated tags on the post each count.
    """
    return sum(normalize_tag(tag) in reference_tags for tag in post.tags)


def rank_related_posts(
    posts: Sequence[BlogPost],
    slug: str,
    limit: int = DEFAULT_RELATED_LIMIT,
) -> list[BlogPost]:
    """Return up to ``limit`` posts topically related to the post ``slug``.

    Posts sharing more tags rank first, ties go to the more recent post.
    Posts sharing no tag only appear as recency filler when fewer than
    ``limit`` posts share a tag. The reference post is never included and an
    unknown slug yields an empty list.
    """
    if limit <= 0:
        return []

    reference = next((post for post in posts if post.slug == slug), None)
    if reference is None:
        return []

    by_recency = sort_posts_by_recency(post for post in posts if post.slug != slug)
    reference_tags = {normalize_tag(tag) for tag in reference.tags}
    if not reference_tags:
        return by_recency[:limit]

    scored = [(shared_tag_count(reference_tags, post), post) for post in by_recency]
    # by_recency is already newest first, so a stable sort on score keeps the
    # published-date tie-break
    ranked = sorted(
        ((score, post) for score, post in scored if score > 0),
        key=lambda pair: pair[0],
        reverse=True,
    )
    related = [post for _, post in ranked[:limit]]

    if len(related) < limit:
        selected = {post.slug for post in related}
        filler = [post for post in by_recency if post.slug not in selected]
        related.extend(filler[: limit - len(related)])

    return related

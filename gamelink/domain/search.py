"""Provider search helper.

Pure filtering over the catalog: no network access, no state.
"""

from collections.abc import Iterable

from gamelink.domain.entities import Provider


def search_providers(providers: Iterable[Provider], query: str) -> list[Provider]:
    """Filter providers by a free-text query.

    Case-insensitive substring match over display name, slug (or id) and
    vendor name. Input order is preserved; there is no relevance ranking.

    Args:
        providers: Providers in catalog order.
        query: Search text. Blank queries match everything.

    Returns:
        list[Provider]: Matching providers, in input order.

    Example:
        >>> [p.id for p in search_providers(catalog, "BUNG")]
        ['destiny-2']
    """
    needle = query.strip().lower()
    if not needle:
        return list(providers)

    return [
        provider
        for provider in providers
        if needle in provider.display_name.lower()
        or needle in provider.route_slug.lower()
        or needle in provider.id.lower()
        or needle in provider.vendor.lower()
    ]

"""Helpers for reading whole result sets through Protean querysets."""

PAGE_SIZE = 500


def fetch_all(queryset, page_size: int = PAGE_SIZE) -> list:
    """Drain a queryset page by page instead of relying on its default limit.

    Pages are taken in ``id`` order; offsets over an unordered query may skip
    or repeat rows on SQL providers.
    """
    ordered = queryset.order_by("id")
    items = []
    offset = 0
    while True:
        page = ordered.offset(offset).limit(page_size).all().items
        items.extend(page)
        if len(page) < page_size:
            return items
        offset += page_size

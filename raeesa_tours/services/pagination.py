import math

from sqlalchemy.orm import Query

from raeesa_tours.core.config import settings


def clamp_page(page: int | None, limit: int | None) -> tuple[int, int]:
    page = max(int(page or 1), 1)
    limit = int(limit or settings.DEFAULT_PAGE_SIZE)
    limit = max(1, min(limit, settings.MAX_PAGE_SIZE))
    return page, limit


def paginate(query: Query, page: int, limit: int, *order_by) -> tuple[list, dict]:
    """Run ``query`` for one page. Returns (rows, {"total", "page", "pages"})."""
    total = query.count()
    rows = query.order_by(*order_by).limit(limit).offset((page - 1) * limit).all()
    return rows, {"total": total, "page": page, "pages": math.ceil(total / limit)}

"""Log-based analytics adapter.

Implements AnalyticsPort by writing each page view to the application
log and keeping per-path counts for the lifetime of the process.
"""

import logging
from collections import Counter

from storefront.core.ports import AnalyticsPort

logger = logging.getLogger(__name__)


class LogPageViewTracker(AnalyticsPort):
    """Records page views in the log."""

    def __init__(self) -> None:
        self.views: Counter[str] = Counter()

    def track_page_view(self, path: str) -> None:
        self.views[path] += 1
        logger.info(
            f"Page view: {path}",
            extra={"path": path, "view_count": self.views[path]},
        )

    def get_view_count(self, path: str) -> int:
        return self.views[path]

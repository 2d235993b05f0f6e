# threadspire_api/services/analytics_service.py

from __future__ import annotations

from threadspire_api.schemas.analytics import UserAnalytics


class AnalyticsService:
    """
    Dashboard summary per user.

    Values are fixed placeholders with the final response shape; no
    aggregation over stored threads, bookmarks or reactions happens yet.
    """

    def get_user_analytics(self, user_id: int) -> UserAnalytics:
        return UserAnalytics(
            threads_created=5,
            bookmarks_received=12,
            reactions={"💡": 7, "🔥": 3},
            most_forked_thread="Thread ID 102",
            activity_graph=[2, 3, 5, 1, 0, 4],
        )

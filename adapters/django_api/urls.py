"""
EventLog Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("events", views.events_append_view),
    path("events/latest", views.events_latest_view),
    path("events/range", views.events_time_range_view),
    path("events/by-user", views.events_by_user_view),
    path("events/by-category", views.events_by_category_view),
    path("events/<int:event_id>", views.event_detail_view),
    path("events/<int:event_id>/active", views.event_active_view),
    path("events/<int:event_id>/toggle", views.event_toggle_view),
    path("stats", views.stats_view),
    path("counts/by-user", views.count_by_user_view),
    path("counts/by-category", views.count_by_category_view),
    path("owner/transfer", views.owner_transfer_view),
]

from django.urls import path

from .views import BracketListView, RecommendationView, SimulationView

urlpatterns = [
    path("brackets/", BracketListView.as_view(), name="bracket-list"),
    path("recommendations/<str:bracket_id>/", RecommendationView.as_view(), name="recommendation-detail"),
    path("simulations/", SimulationView.as_view(), name="simulation-create"),
]

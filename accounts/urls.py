from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from .views import (
    LoginView, MeView,
    UnitListCreateAPIView, UnitRetrieveUpdateDestroyAPIView,
    UserListCreateAPIView, UserRoleUpdateView, UserTeamsView,
    UserUnitsListView, UserUnitGrantView,
    TeamListCreateAPIView, TeamRetrieveUpdateDestroyAPIView,
)

urlpatterns = [
    # Auth
    path('auth/login', LoginView.as_view(), name='login'),
    path('auth/token/refresh', TokenRefreshView.as_view(), name='token_refresh'),
    path('auth/me', MeView.as_view(), name='me'),

    # Units
    path('units', UnitListCreateAPIView.as_view(), name='unit-list-create'),
    path('units/<uuid:pk>', UnitRetrieveUpdateDestroyAPIView.as_view(), name='unit-detail'),

    # Users
    path('users', UserListCreateAPIView.as_view(), name='user-list-create'),
    path('users/<uuid:pk>/role', UserRoleUpdateView.as_view(), name='user-role'),
    path('users/<uuid:pk>/teams', UserTeamsView.as_view(), name='user-teams'),

    # Direct unit grants
    path('admin/users/<uuid:pk>/units', UserUnitsListView.as_view(), name='user-units-list'),
    path('admin/user-units', UserUnitGrantView.as_view(), name='user-units-grant'),

    # Teams
    path('teams', TeamListCreateAPIView.as_view(), name='team-list-create'),
    path('teams/<uuid:pk>', TeamRetrieveUpdateDestroyAPIView.as_view(), name='team-detail'),
]

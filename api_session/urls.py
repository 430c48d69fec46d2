from django.urls import path

from .views import LoginView, RefreshTokenView, SignUpView

urlpatterns = [
    # User
    path("signup", SignUpView.as_view(), name="signup_user"),
    # Auth
    path("login", LoginView.as_view(), name="login_user"),
    path(
        "refresh_token",
        RefreshTokenView.as_view(),
        name="refresh_user_tokens",
    ),
]

"""Shared API dependencies."""

from fastapi import Request

from bootstrap_theme.services.theme_service import ThemeService


def get_theme_service(request: Request) -> ThemeService:
    """The process-wide theme service created at start-up."""
    return request.app.state.theme_service


__all__ = ["get_theme_service"]

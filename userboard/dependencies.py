"""
UserBoard Backend — FastAPI Dependencies
==========================================

What:  Dependency providers that hand route handlers their collaborators.
How:   create_app() stores the repository and the UserService built on it in
       app.state; the providers read them back from the current request.
       Tests swap storage by passing a repository to create_app().
"""

from fastapi import Request

from userboard.repositories.base import UserRepository
from userboard.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """UserService bound to the application's repository."""
    return request.app.state.user_service


def get_repository(request: Request) -> UserRepository:
    """The application's repository (health checks only)."""
    return request.app.state.repository

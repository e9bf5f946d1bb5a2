# booking_api/deps.py

from .errors import NotAuthorized


def require_provider(user: dict):
    if not user["provider"]:
        raise NotAuthorized("User is not a provider")

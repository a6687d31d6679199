from fastapi import Request
from services.registration_store import RegistrationStore


def get_store(request: Request) -> RegistrationStore:
    """Dependency для получения хранилища регистраций"""
    return request.app.state.store

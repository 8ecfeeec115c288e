from fastapi import Request

from src.services import ShortenerService


def get_service(request: Request) -> ShortenerService:
    return request.app.state.service

from fastapi import Request

from app.processors.base import BasePaymentProvider


def get_provider(request: Request) -> BasePaymentProvider:
    """The process-wide provider built in the app lifespan."""
    return request.app.state.provider

"""FastAPI dependencies backed by objects built once in create_app."""

from fastapi import Request

from app.core.config import Settings
from app.services import EarningsAggregator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_aggregator(request: Request) -> EarningsAggregator:
    return request.app.state.aggregator

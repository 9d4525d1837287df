"""Production container wiring."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from qeta.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container the API serves from, backed by PostgreSQL."""
    providers = [get_provider(base)() for base in PROVIDERS]
    logfire.info(
        "DI container created",
        providers=[type(p).__name__ for p in providers],
    )
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Let `FromDishka` route parameters resolve from `container`."""
    setup_dishka(container, app)

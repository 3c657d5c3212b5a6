"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from passage.util.di import PROVIDERS, Component, get_provider, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Container where every mockable component is mocked unless unmocked.

    Settings are loaded from environment variables. The FastapiProvider
    lets the same container back a TestClient.

    Args:
        unmock: Components to run against their production implementation

    Raises:
        ValueError: If `unmock` names a component without a mock

    Examples:
        # Unit and HTTP tests
        container = build_test_container()

        # Against live Redis and PostgreSQL
        container = build_test_container(unmock={"memory", "persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=base.__mock_component__ is not None
            and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())

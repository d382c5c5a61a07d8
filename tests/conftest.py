"""Shared pytest configuration for the bitbucket-cloud test suite."""

import pytest

from bitbucket_cloud.bitbucket import BitbucketConfig, BitbucketFetcher
from tests.utils.fake_bitbucket import FakeBitbucketSession
from tests.utils.sample_data import build_sample_account


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add the --integration command-line option."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Run integration tests against a live Bitbucket Cloud account",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip integration tests unless --integration is passed."""
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def sample_account():
    """A fresh fake Bitbucket account and the description of its content."""
    return build_sample_account()


@pytest.fixture
def fake_account(sample_account):
    account, _ = sample_account
    return account


@pytest.fixture
def samples(sample_account):
    _, repositories = sample_account
    return repositories


@pytest.fixture
def bitbucket_config():
    """Create a BitbucketConfig instance for tests."""
    return BitbucketConfig(
        auth_type="basic",
        username="test-runner",
        password="app-password",
        page_len=10,
    )


@pytest.fixture
def fake_session(fake_account):
    return FakeBitbucketSession(fake_account)


@pytest.fixture
def fetcher(bitbucket_config, fake_session):
    """A BitbucketFetcher talking to the fake account."""
    client = BitbucketFetcher(config=bitbucket_config, session=fake_session)
    yield client
    client.close()

"""Pytest fixtures for service layer unit tests."""

from __future__ import annotations

import pytest

from enlist.domain.model import User
from enlist.service_layer.registration import RegistrationWorkflow

from .doubles import (
    MOCK_EMAIL,
    MOCK_NAME,
    AppLoggerSpy,
    ErrorChannelSpy,
    FakeNewsletterService,
    UserRepositoryStub,
)

# pylint: disable=redefined-outer-name


@pytest.fixture
def mock_user() -> User:
    """The user a repository creates for MOCK_NAME/MOCK_EMAIL on its first call."""
    return User(id=1, name=MOCK_NAME, email=MOCK_EMAIL, role="user")


@pytest.fixture
def repository() -> UserRepositoryStub:
    return UserRepositoryStub()


@pytest.fixture
def newsletter() -> FakeNewsletterService:
    return FakeNewsletterService()


@pytest.fixture
def app_logger() -> AppLoggerSpy:
    return AppLoggerSpy()


@pytest.fixture
def errors() -> ErrorChannelSpy:
    return ErrorChannelSpy()


@pytest.fixture
def workflow(repository, newsletter, app_logger, errors) -> RegistrationWorkflow:
    """Registration workflow wired to the test doubles above."""
    return RegistrationWorkflow(
        repository, newsletter, app_logger=app_logger, errors=errors
    )

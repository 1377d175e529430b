"""Tests for the background retry task."""

import pytest

from notification_agent.repositories import NotificationsApiClient
from notification_agent.services import BackgroundRetryTask


@pytest.fixture
def task(api):
    return BackgroundRetryTask(api=api, sync_tag="background-sync")


@pytest.mark.asyncio
async def test_matching_tag_requests_retry(task, api_server):
    assert await task.handle("background-sync") is True

    assert api_server.paths() == [NotificationsApiClient.RETRY_FAILED_PATH]
    request = api_server.requests[0]
    assert request.method == "POST"
    assert request.content == b""


@pytest.mark.asyncio
async def test_other_tags_ignored(task, api_server):
    assert await task.handle("periodic-refresh") is False
    assert api_server.requests == []


@pytest.mark.asyncio
async def test_retry_failure_is_swallowed(task, api_server):
    api_server.offline.add(NotificationsApiClient.RETRY_FAILED_PATH)

    assert await task.handle("background-sync") is False


@pytest.mark.asyncio
async def test_each_trigger_issues_one_request(task, api_server):
    await task.handle("background-sync")
    await task.handle("background-sync")

    assert api_server.paths() == [NotificationsApiClient.RETRY_FAILED_PATH] * 2

"""Tests for the emails wrapper."""

import pytest

from keap_client.core.models import DecodeError, DomainValidationError
from keap_client.resources.emails import EmailRecord, Emails


@pytest.fixture
def emails(mock_engine):
    return Emails(mock_engine)


@pytest.mark.asyncio
async def test_list_emails(emails, mock_engine, make_page):
    mock_engine.get.return_value = make_page("emails", [{"id": 1, "subject": "Hello"}])

    result = await emails.list_emails({"contact_id": 4, "ordered": True, "limit": 1})

    mock_engine.get.assert_awaited_once_with("v1/emails?contact_id=4&ordered=true&limit=1")
    assert result.get_items() == [EmailRecord(id=1, subject="Hello")]


@pytest.mark.asyncio
async def test_send_email_validation(emails, mock_engine):
    with pytest.raises(DomainValidationError, match="recipient"):
        await emails.send_email({"subject": "Hi", "contacts": []})
    with pytest.raises(DomainValidationError, match="subject"):
        await emails.send_email({"contacts": [1]})

    mock_engine.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_send_email(emails, mock_engine):
    request = {"contacts": [1, 2], "subject": "Hi", "html_content": "PHA+SGk8L3A+"}

    await emails.send_email(request)

    mock_engine.post.assert_awaited_once_with("v1/emails/queue", request)


@pytest.mark.asyncio
async def test_create_emails(emails, mock_engine):
    mock_engine.post.return_value = {"emails": [{"id": 1}, {"id": 2}]}

    result = await emails.create_emails([EmailRecord(subject="a"), {"subject": "b"}])

    mock_engine.post.assert_awaited_once_with(
        "v1/emails/sync", [{"subject": "a"}, {"subject": "b"}]
    )
    assert [r.id for r in result] == [1, 2]


@pytest.mark.asyncio
async def test_create_emails_empty(emails, mock_engine):
    with pytest.raises(DomainValidationError, match="Emails array cannot be empty"):
        await emails.create_emails([])


@pytest.mark.asyncio
@pytest.mark.parametrize("response", [None, [], {"emails": None}])
async def test_create_emails_bad_response(emails, mock_engine, response):
    mock_engine.post.return_value = response

    with pytest.raises(DecodeError):
        await emails.create_emails([{"subject": "a"}])


@pytest.mark.asyncio
async def test_get_and_delete_email(emails, mock_engine):
    mock_engine.get.return_value = {"id": 3, "sent_to_address": "ada@example.com"}

    record = await emails.get_email(3)
    assert record.sent_to_address == "ada@example.com"

    assert await emails.delete_email(3) is True
    mock_engine.delete.assert_awaited_once_with("v1/emails/3", None)

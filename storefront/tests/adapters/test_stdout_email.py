"""Unit tests for StdoutEmailAdapter."""

import pytest

from storefront.adapters.email.stdout import StdoutEmailAdapter


@pytest.mark.asyncio
async def test_send_basic_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Test basic output formatting and structure."""
    adapter = StdoutEmailAdapter(sender="shop@example.com")

    await adapter.send_email("customer@example.com", "Welcome aboard!")
    output = capsys.readouterr().out

    assert "EMAIL" in output
    assert "From: shop@example.com" in output
    assert "To: customer@example.com" in output
    assert "Subject: Welcome aboard!" in output
    assert "Date:" not in output
    assert adapter.sent_count == 1


@pytest.mark.asyncio
async def test_verbose_output_includes_date(capsys: pytest.CaptureFixture[str]) -> None:
    adapter = StdoutEmailAdapter(verbose=True)

    await adapter.send_email("customer@example.com", "123456")
    output = capsys.readouterr().out

    assert "Date:" in output
    assert "Subject: 123456" in output


@pytest.mark.asyncio
async def test_each_send_prints_separately(capsys: pytest.CaptureFixture[str]) -> None:
    adapter = StdoutEmailAdapter()

    await adapter.send_email("a@example.com", "one")
    await adapter.send_email("b@example.com", "two")
    output = capsys.readouterr().out

    assert output.count("To: ") == 2
    assert adapter.sent_count == 2

"""Tests for structured logging."""

import json
from collections.abc import Generator
from io import StringIO

import pytest
import structlog

from rdapview.observability.logging import (
    PIIRedactor,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults so cached loggers do not leak between tests."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self) -> None:
        """Should configure JSON format for production."""
        setup_logging(level="INFO", format="json", redact_pii=False)
        logger = get_logger("test")
        # Should not raise
        logger.info("test_message")

    def test_setup_console_format(self) -> None:
        """Should configure console format for development."""
        setup_logging(level="DEBUG", format="console", redact_pii=False)
        logger = get_logger("test")
        # Should not raise
        logger.debug("test_message")

    def test_redactor_installed_when_enabled(self) -> None:
        """PII redaction sits before the renderer when enabled."""
        setup_logging(level="INFO", format="json", redact_pii=True)
        processors = structlog.get_config()["processors"]
        assert any(isinstance(processor, PIIRedactor) for processor in processors)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_redactor_absent_when_disabled(self) -> None:
        """No redactor when redaction is turned off."""
        setup_logging(level="INFO", format="json", redact_pii=False)
        processors = structlog.get_config()["processors"]
        assert not any(isinstance(processor, PIIRedactor) for processor in processors)


class TestPIIRedactor:
    """Tests for PII redaction."""

    @pytest.fixture
    def redactor(self) -> PIIRedactor:
        """Create a PIIRedactor instance."""
        return PIIRedactor()

    def test_redacts_email_by_key(self, redactor: PIIRedactor) -> None:
        """Should redact values for email-related keys."""
        event_dict = {"email_address": "jdoe@example.com", "other": "value"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["email_address"] == "[REDACTED]"
        assert result["other"] == "value"

    def test_redacts_contact_fields_by_key(self, redactor: PIIRedactor) -> None:
        """Should redact postal and phone fields of contacts."""
        event_dict = {
            "name": "John Doe",
            "street": ["123 Example Dr."],
            "voice_number": "+1.7035555555",
            "repo_id": "3-EXAMPLE",
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["name"] == "[REDACTED]"
        assert result["street"] == "[REDACTED]"
        assert result["voice_number"] == "[REDACTED]"
        assert result["repo_id"] == "3-EXAMPLE"

    def test_redacts_session_cookie_by_key(self, redactor: PIIRedactor) -> None:
        """Should redact MoSAPI session identifiers."""
        event_dict = {"session_id": "abc123", "cookie": "id=abc123"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["session_id"] == "[REDACTED]"
        assert result["cookie"] == "[REDACTED]"

    def test_key_match_is_case_insensitive(self, redactor: PIIRedactor) -> None:
        """Key matching ignores case."""
        result = redactor(None, None, {"Password": "x"})  # type: ignore
        assert result["Password"] == "[REDACTED]"

    def test_redacts_email_pattern_in_string_value(self, redactor: PIIRedactor) -> None:
        """Should redact email patterns found in string values."""
        event_dict = {"message": "Contact jdoe@example.com for help"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert "jdoe@example.com" not in result["message"]
        assert "[EMAIL]" in result["message"]

    def test_redacts_epp_phone_pattern_in_string_value(self, redactor: PIIRedactor) -> None:
        """Should redact EPP-style phone numbers found in string values."""
        event_dict = {"message": "Call +1.7035555555 please"}
        result = redactor(None, None, event_dict)  # type: ignore
        assert "+1.7035555555" not in result["message"]
        assert "[PHONE]" in result["message"]

    def test_handles_nested_dicts(self, redactor: PIIRedactor) -> None:
        """Should handle nested dictionaries."""
        event_dict = {
            "contact": {"email": "jdoe@example.com", "handle": "3-EXAMPLE"},
            "data": "ok",
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["contact"]["email"] == "[REDACTED]"
        assert result["contact"]["handle"] == "3-EXAMPLE"

    def test_scrubs_strings_inside_lists(self, redactor: PIIRedactor) -> None:
        """Should scrub patterns inside list values."""
        event_dict = {"recipients": ["a@example.com", "ops"]}
        result = redactor(None, None, event_dict)  # type: ignore
        assert result["recipients"] == ["[EMAIL]", "ops"]

    def test_preserves_non_pii_data(self, redactor: PIIRedactor) -> None:
        """Should preserve non-PII data."""
        event_dict = {
            "event": "rdap_base_urls_synced",
            "updated_count": 3,
            "client_id": "TheRegistrar",
            "success": True,
        }
        result = redactor(None, None, event_dict)  # type: ignore
        assert result == event_dict


class TestJSONLogging:
    """Tests for JSON log output format."""

    def test_json_output_is_valid_json(self) -> None:
        """Should produce valid JSON output with redaction applied."""
        output = StringIO()
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                PIIRedactor(),
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(0),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(output),
            cache_logger_on_first_use=False,
        )

        structlog.contextvars.bind_contextvars(request_id="req-1")
        logger = structlog.get_logger("test")
        logger.info("test_event", client_id="TheRegistrar", email="jdoe@example.com")

        parsed = json.loads(output.getvalue().strip())
        assert parsed["event"] == "test_event"
        assert parsed["client_id"] == "TheRegistrar"
        assert parsed["email"] == "[REDACTED]"
        assert parsed["request_id"] == "req-1"
        assert "timestamp" in parsed
        assert parsed["level"] == "info"

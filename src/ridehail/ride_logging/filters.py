"""Log filters for PII masking and correlation ID injection."""

import logging
import re


class PIIFilter(logging.Filter):
    """Masks emails and phone numbers in log messages.

    Rider notes are free text and often carry a contact number, and they
    usually reach the log through ``%s`` arguments rather than the format
    string, so the message is rendered before masking.
    """

    EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+")
    PHONE_PATTERN = re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")

    def filter(self, record: logging.LogRecord) -> bool:
        if not isinstance(record.msg, str):
            return True

        message = record.getMessage() if record.args else record.msg
        masked = self.mask(message)
        if masked != message or record.args:
            record.msg = masked
            record.args = None
        return True

    @classmethod
    def mask(cls, text: str) -> str:
        if "@" in text:
            text = cls.EMAIL_PATTERN.sub("[EMAIL]", text)
        if any(c.isdigit() for c in text):
            text = cls.PHONE_PATTERN.sub("[PHONE]", text)
        return text


class DefaultCorrelationFilter(logging.Filter):
    """Falls back to ``-`` when no ride context supplied a correlation_id."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "-"
        return True

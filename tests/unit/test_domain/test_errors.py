"""
test_errors.py - NobtError
"""

from src.domain.errors import ErrorCodes, NobtError


class TestNobtError:
    """NobtError tests."""

    def test_message_with_context(self):
        error = NobtError(ErrorCodes.MISSING_REQUIRED_FIELD, field="name")

        assert str(error) == "[MISSING_REQUIRED_FIELD] field='name'"

    def test_message_without_context(self):
        assert str(NobtError(ErrorCodes.INVALID_PORT)) == "[INVALID_PORT]"

    def test_to_dict(self):
        error = NobtError(ErrorCodes.INVALID_TOTAL, value="abc")

        assert error.to_dict() == {"code": "INVALID_TOTAL", "value": "abc"}

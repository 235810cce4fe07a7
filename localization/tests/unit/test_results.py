"""Tests for operation results and error kinds."""

from django.test import SimpleTestCase

from localization.exceptions import DefaultLanguageDeletionError, LocalizationStoreError, ResourceNotFoundError
from localization.results import ErrorKind, OperationResult


class ErrorKindTest(SimpleTestCase):
    """Test cases for ErrorKind."""

    def test_policy_violations(self):
        """Duplicate, not found and default language are expected failures."""
        self.assertTrue(ErrorKind.ALREADY_EXISTS.is_policy_violation)
        self.assertTrue(ErrorKind.NOT_FOUND.is_policy_violation)
        self.assertTrue(ErrorKind.DEFAULT_LANGUAGE.is_policy_violation)

    def test_store_error_is_not_policy_violation(self):
        """Store failures are unexpected faults."""
        self.assertFalse(ErrorKind.STORE_ERROR.is_policy_violation)


class OperationResultTest(SimpleTestCase):
    """Test cases for OperationResult."""

    def test_success(self):
        """A successful result carries its value."""
        result = OperationResult.success("value")

        self.assertTrue(result.ok)
        self.assertIsNone(result.error_kind)
        self.assertEqual(result.message, "")
        self.assertEqual(result.unwrap(), "value")
        self.assertEqual(result.to_dict(), {"status": "success"})

    def test_failure_exposes_kind_and_message(self):
        """A failed result exposes the kind of its error."""
        result = OperationResult.failure(DefaultLanguageDeletionError())

        self.assertFalse(result.ok)
        self.assertEqual(result.error_kind, ErrorKind.DEFAULT_LANGUAGE)
        self.assertEqual(result.message, "Deleting the default language is not allowed.")

    def test_failure_keeps_cause(self):
        """Wrapped store failures keep the original exception."""
        cause = RuntimeError("connection lost")
        result = OperationResult.failure(LocalizationStoreError("Unable to delete language: connection lost", cause=cause))

        self.assertEqual(result.error_kind, ErrorKind.STORE_ERROR)
        self.assertIs(result.cause, cause)

    def test_unwrap_raises_error(self):
        """Unwrapping a failure raises the carried error."""
        result = OperationResult.failure(ResourceNotFoundError("missing"))

        with self.assertRaises(ResourceNotFoundError):
            result.unwrap()

    def test_to_dict_failure(self):
        """Failures serialize their code and message."""
        result = OperationResult.failure(ResourceNotFoundError("missing", {"key": "Post.Quote"}))

        self.assertEqual(
            result.to_dict(),
            {"status": "error", "code": "NOT_FOUND", "message": "missing", "details": {"key": "Post.Quote"}},
        )

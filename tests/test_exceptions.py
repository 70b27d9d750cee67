"""Tests for custom exception hierarchy."""

from realty_crm.exceptions import (
    ConfigurationError,
    InvalidQueryError,
    InvalidRecordError,
    RealtyCRMError,
    RecordNotFoundError,
    StoreTimeoutError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_realty_crm_error_is_exception(self) -> None:
        assert isinstance(RealtyCRMError("test"), Exception)

    def test_record_not_found_is_realty_crm_error(self) -> None:
        assert isinstance(RecordNotFoundError("test"), RealtyCRMError)

    def test_invalid_record_is_realty_crm_error(self) -> None:
        assert isinstance(InvalidRecordError("test"), RealtyCRMError)

    def test_invalid_query_is_realty_crm_error(self) -> None:
        assert isinstance(InvalidQueryError("test"), RealtyCRMError)

    def test_store_timeout_is_realty_crm_error(self) -> None:
        assert isinstance(StoreTimeoutError("test"), RealtyCRMError)

    def test_configuration_error_is_realty_crm_error(self) -> None:
        assert isinstance(ConfigurationError("test"), RealtyCRMError)

    def test_exception_message(self) -> None:
        err = RecordNotFoundError("Customer nope not found")
        assert str(err) == "Customer nope not found"

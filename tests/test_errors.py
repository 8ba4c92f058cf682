"""Tests for errdetails.errors module."""

from errdetails.errors import (
    ErrdetailsError,
    ErrorCategory,
    InvalidKeyKindError,
    MisconfiguredFactoryError,
)


class TestErrdetailsError:
    def test_defaults(self):
        err = ErrdetailsError("Something failed")
        assert err.message == "Something failed"
        assert err.category == ErrorCategory.CONFIG
        assert err.context == {}

    def test_to_dict(self):
        err = ErrdetailsError("Failed", category=ErrorCategory.KEY, context={"key_type": "list"})
        assert err.to_dict() == {
            "error_type": "ErrdetailsError",
            "message": "Failed",
            "category": "KEY",
            "context": {"key_type": "list"},
        }

    def test_repr(self):
        assert repr(ErrdetailsError("Failed")) == "ErrdetailsError('Failed', category=CONFIG)"


class TestInvalidKeyKindError:
    def test_message_and_context(self):
        key = ["a"]
        err = InvalidKeyKindError(key)
        assert err.key is key
        assert err.category == ErrorCategory.KEY
        assert err.context == {"key_type": "list"}
        assert str(err) == "Detail key of type 'list' is not comparable: ['a']"

    def test_is_type_error(self):
        assert isinstance(InvalidKeyKindError({}), TypeError)
        assert isinstance(InvalidKeyKindError({}), ErrdetailsError)


class TestMisconfiguredFactoryError:
    def test_defaults(self):
        err = MisconfiguredFactoryError(None)
        assert err.store_factory is None
        assert err.category == ErrorCategory.CONFIG
        assert err.context == {"store_factory": "None"}
        assert isinstance(err, ValueError)

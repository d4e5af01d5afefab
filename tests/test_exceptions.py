from resultkit.exceptions import ConfigurationError, ResultError, UnwrapError


class TestResultError:
    def test_is_exception(self) -> None:
        assert issubclass(ResultError, Exception)

    def test_can_be_raised_and_caught(self) -> None:
        try:
            raise ResultError("test")
        except ResultError as e:
            assert str(e) == "test"


class TestExceptionInheritance:
    def test_unwrap_error_inherits_result_error(self) -> None:
        assert issubclass(UnwrapError, ResultError)

    def test_configuration_error_inherits_result_error(self) -> None:
        assert issubclass(ConfigurationError, ResultError)

    def test_unwrap_error_keeps_domain_error(self) -> None:
        error = {"code": 404}
        exc = UnwrapError("lookup failed", error)
        assert str(exc) == "lookup failed"
        assert exc.error is error

from auction_values.domain.errors import AuctionError, ConfigError
from auction_values.domain.result import Err, Ok, Result


def _half(n: int) -> Result[int, AuctionError]:
    if n % 2:
        return Err(AuctionError(message=f"{n} is odd"))
    return Ok(n // 2)


class TestResult:
    def test_ok_match(self) -> None:
        match _half(4):
            case Ok(value):
                assert value == 2
            case Err():
                raise AssertionError("expected Ok")

    def test_err_match(self) -> None:
        match _half(3):
            case Ok():
                raise AssertionError("expected Err")
            case Err(error):
                assert error.message == "3 is odd"


class TestErrors:
    def test_config_error_is_auction_error(self) -> None:
        error = ConfigError(message="bad", field="teams")
        assert isinstance(error, AuctionError)
        assert error.field == "teams"

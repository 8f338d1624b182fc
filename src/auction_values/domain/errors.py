from dataclasses import dataclass


@dataclass(frozen=True)
class AuctionError:
    message: str


@dataclass(frozen=True)
class ConfigError(AuctionError):
    field: str = ""

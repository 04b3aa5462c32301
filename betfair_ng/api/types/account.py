"""Request records for the Betfair accounts API."""

from dataclasses import dataclass
from typing import Optional, Union

from .betting import TimeRange, compact
from .enums import IncludeItem, Wallet


@dataclass
class CreateDeveloperAppKeysRequest:
    """Request for createDeveloperAppKeys."""

    app_name: str

    def to_dict(self) -> dict:
        return compact({"appName": self.app_name})


@dataclass
class GetAccountFundsRequest:
    wallet: Optional[Union[Wallet, str]] = None

    def to_dict(self) -> dict:
        return compact({"wallet": self.wallet})


@dataclass
class GetAccountStatementRequest:
    """Request for getAccountStatement. All fields optional."""

    locale: Optional[str] = None
    from_record: Optional[int] = None
    record_count: Optional[int] = None
    item_date_range: Optional[TimeRange] = None
    include_item: Optional[Union[IncludeItem, str]] = None
    wallet: Optional[Union[Wallet, str]] = None

    def to_dict(self) -> dict:
        return compact({
            "locale": self.locale,
            "fromRecord": self.from_record,
            "recordCount": self.record_count,
            "itemDateRange": self.item_date_range,
            "includeItem": self.include_item,
            "wallet": self.wallet,
        })


@dataclass
class ListCurrencyRatesRequest:
    from_currency: Optional[str] = None

    def to_dict(self) -> dict:
        return compact({"fromCurrency": self.from_currency})

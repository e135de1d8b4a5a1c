from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class RejectionReason(Enum):
    SEC_FETCH_SITE = "sec_fetch_site"
    OLD_BROWSER = "old_browser"


_MESSAGES = {
    RejectionReason.SEC_FETCH_SITE: "cross-origin request detected from Sec-Fetch-Site header",
    RejectionReason.OLD_BROWSER: (
        "cross-origin request detected, and/or browser is out of date: "
        "Sec-Fetch-Site is missing, and Origin does not match Host"
    ),
}


@dataclass(frozen=True, slots=True)
class CrossOriginRequestError:
    reason: RejectionReason
    message: str

    @classmethod
    def from_sec_fetch_site(cls) -> CrossOriginRequestError:
        return cls(RejectionReason.SEC_FETCH_SITE, _MESSAGES[RejectionReason.SEC_FETCH_SITE])

    @classmethod
    def from_old_browser(cls) -> CrossOriginRequestError:
        return cls(RejectionReason.OLD_BROWSER, _MESSAGES[RejectionReason.OLD_BROWSER])


@dataclass(frozen=True, slots=True)
class Allowed:
    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Denied:
    error: CrossOriginRequestError

    @property
    def allowed(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


ALLOWED = Allowed()

Verdict = Union[Allowed, Denied]

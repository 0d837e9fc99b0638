"""User-agent sniffing for device and in-app browser detection."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MOBILE = re.compile(r"AppleWebKit.*Mobile.*")
_IOS = re.compile(r"\(i[^;]+;( U;)? CPU.+Mac OS X")


@dataclass(frozen=True, slots=True)
class UserAgentInfo:
    user_agent: str
    mobile: bool = False
    ios: bool = False
    android: bool = False
    iphone: bool = False
    ipad: bool = False
    wechat: bool = False
    wechat_work: bool = False
    chrome: bool = False

    @classmethod
    def parse(cls, user_agent: str) -> "UserAgentInfo":
        in_wechat = "MicroMessenger" in user_agent
        work = "wxwork" in user_agent
        return cls(
            user_agent=user_agent,
            mobile=_MOBILE.search(user_agent) is not None,
            ios=_IOS.search(user_agent) is not None,
            # UC browser reports itself as Linux
            android="Android" in user_agent or "Linux" in user_agent,
            iphone="iPhone" in user_agent,
            ipad="iPad" in user_agent,
            wechat=in_wechat and not work,
            wechat_work=in_wechat and work,
            chrome="Chrome" in user_agent,
        )

    @property
    def is_mobile(self) -> bool:
        return self.mobile or self.ios or self.android or self.iphone or self.ipad

    def as_dict(self) -> dict[str, bool]:
        return {
            "mobile": self.is_mobile,
            "ios": self.ios,
            "android": self.android,
            "iphone": self.iphone,
            "ipad": self.ipad,
            "wechat": self.wechat,
            "wechat_work": self.wechat_work,
            "chrome": self.chrome,
        }


def is_mobile(user_agent: str) -> bool:
    return UserAgentInfo.parse(user_agent).is_mobile


def is_wechat(user_agent: str) -> bool:
    """WeChat built-in browser, excluding WeChat Work."""
    return UserAgentInfo.parse(user_agent).wechat


def is_wechat_work(user_agent: str) -> bool:
    return UserAgentInfo.parse(user_agent).wechat_work


def is_chrome(user_agent: str) -> bool:
    return UserAgentInfo.parse(user_agent).chrome


__all__ = ["UserAgentInfo", "is_chrome", "is_mobile", "is_wechat", "is_wechat_work"]

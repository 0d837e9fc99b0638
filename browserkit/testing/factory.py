"""Factories for tests and prototyping."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Any, Iterable

from faker import Faker


@dataclass(slots=True)
class PayloadFactory:
    """Build JSON-compatible values of the shapes usually kept in storage."""

    faker: Faker = field(default_factory=Faker)
    rng: Random = field(default_factory=Random)

    def build(self) -> dict[str, Any]:
        return {
            "id": self.faker.uuid4(),
            "name": self.faker.name(),
            "email": self.faker.email(),
            "age": self.rng.randint(1, 99),
            "active": self.rng.choice([True, False]),
            "tags": [self.faker.word() for _ in range(self.rng.randint(0, 3))],
        }

    def batch(self, count: int) -> Iterable[dict[str, Any]]:
        for _ in range(count):
            yield self.build()


@dataclass(slots=True)
class UserAgentFactory:
    faker: Faker = field(default_factory=Faker)

    def desktop_chrome(self) -> str:
        return self.faker.chrome(version_from=90, version_to=120)

    def iphone_safari(self) -> str:
        return (
            f"Mozilla/5.0 ({self.faker.ios_platform_token()}) AppleWebKit/605.1.15 "
            "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
        )

    def wechat(self, *, work: bool = False) -> str:
        suffix = " wxwork/4.1.0" if work else ""
        return f"{self.iphone_safari()} MicroMessenger/8.0.40(0x18002831) NetType/WIFI{suffix}"

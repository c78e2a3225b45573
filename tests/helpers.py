"""Config data types shared by the tests."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal


@dataclass
class QuickstartConfig:
    url: str | None = None
    comment: str | None = None


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass
class Credentials:
    user: str = ""
    token: str | None = None


@dataclass
class AppConfig:
    retries: int = 3
    timeout: float = 1.5
    verbose: bool = False
    theme: Theme = Theme.LIGHT
    credentials: Credentials = field(default_factory=Credentials)
    tags: set[str] = field(default_factory=set)
    window: tuple[int, int] = (800, 600)
    servers: dict[str, list[str]] = field(default_factory=dict)


@dataclass
class RequiredConfig:
    endpoint: str
    port: int = 443


@dataclass
class Counted:
    label: str = ""
    runs: int = field(default=0, init=False)


@dataclass
class Validated:
    port: int = 80

    def __post_init__(self):
        if not 0 < self.port < 65536:
            raise ValueError(f"bad port {self.port}")


class Size(Enum):
    SMALL = (640, 480)
    LARGE = (1920, 1080)


@dataclass
class Display:
    size: Size = Size.SMALL
    theme: Literal[Theme.LIGHT, Theme.DARK] = Theme.LIGHT
    ratio: float = 1.0

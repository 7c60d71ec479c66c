import os
from enum import Enum

PLATFORM_ENV_VAR = "PHOTO_EDITOR_PLATFORM"


class Platform(str, Enum):
    IOS = "ios"
    ANDROID = "android"


def parse_platform(name: str) -> Platform:
    normalized = name.strip().lower()
    try:
        return Platform(normalized)
    except ValueError:
        supported = sorted(p.value for p in Platform)
        raise ValueError(f"Unsupported platform '{name}'. Supported: {supported}") from None


def get_platform() -> Platform:
    return parse_platform(os.getenv(PLATFORM_ENV_VAR, Platform.IOS.value))

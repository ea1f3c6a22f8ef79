"""심각도별 색상/아바타 조회."""

from types import MappingProxyType

DEFAULT_AVATAR_BASE_URL = "https://raw.githubusercontent.com/margatampu/laravel-teams-logging/master/assets/img"
DEFAULT_COLOUR = "808080"

COLOURS = MappingProxyType(
    {
        "DEBUG": "D6D8D9",
        "INFO": "BEE5EB",
        "NOTICE": "B8DAFF",
        "WARNING": "FFEEBA",
        "ERROR": "FF8000",
        "CRITICAL": "FF0000",
        "ALERT": "AF2432",
        "EMERGENCY": "721C24",
    }
)

# 이미지 파일명 (avatar_base_url 기준)
AVATARS = MappingProxyType({name: f"{name.lower()}.png" for name in COLOURS})


def _normalize(severity: object) -> str:
    name = getattr(severity, "name", severity)
    return str(name).strip().upper()


def colour_for(severity: object) -> str:
    """심각도 이름 -> 6자리 hex 색상. 모르는 이름은 DEFAULT_COLOUR."""
    return COLOURS.get(_normalize(severity), DEFAULT_COLOUR)


def avatar_for(severity: object, base_url: str = DEFAULT_AVATAR_BASE_URL) -> str | None:
    filename = AVATARS.get(_normalize(severity))
    if filename is None:
        return None
    return f"{base_url.rstrip('/')}/{filename}"

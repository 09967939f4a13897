"""User-Agent classification into browser / device / os buckets."""

from dataclasses import dataclass

DEFAULT_DEVICE = "desktop"

# Order matters: Chromium-based browsers also advertise "chrome" and "safari".
_BROWSERS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Edge", ("edg/", "edge/", "edga/", "edgios/")),
    ("Opera", ("opr/", "opera")),
    ("Samsung Browser", ("samsungbrowser/",)),
    ("Firefox", ("firefox/", "fxios/")),
    ("Chrome", ("chrome/", "crios/")),
)

_OPERATING_SYSTEMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Windows", ("windows",)),
    ("iOS", ("iphone", "ipad", "ipod")),
    ("Mac OS", ("macintosh", "mac os x")),
    ("Android", ("android",)),
    ("Chromium OS", ("cros ",)),
    ("Linux", ("linux", "x11")),
)


@dataclass(frozen=True)
class UserAgentInfo:
    browser: str | None
    device: str
    os: str | None


def _match(ua: str, table: tuple[tuple[str, tuple[str, ...]], ...]) -> str | None:
    for name, tokens in table:
        if any(token in ua for token in tokens):
            return name
    return None


def _device(ua: str) -> str:
    if "ipad" in ua or "tablet" in ua or ("android" in ua and "mobile" not in ua):
        return "tablet"
    if "mobi" in ua or "iphone" in ua or "ipod" in ua:
        return "mobile"
    if "smart-tv" in ua or "smarttv" in ua or "googletv" in ua or "appletv" in ua:
        return "smarttv"
    if "playstation" in ua or "xbox" in ua or "nintendo" in ua:
        return "console"
    if "watch" in ua:
        return "wearable"
    return DEFAULT_DEVICE


def classify_user_agent(user_agent: str | None) -> UserAgentInfo:
    """Classify a raw User-Agent header. Unknown values map to None, device to desktop."""
    if not user_agent:
        return UserAgentInfo(browser=None, device=DEFAULT_DEVICE, os=None)

    ua = user_agent.lower()
    browser = _match(ua, _BROWSERS)
    if browser is None and "safari/" in ua:
        browser = "Mobile Safari" if "mobile" in ua else "Safari"

    return UserAgentInfo(browser=browser, device=_device(ua), os=_match(ua, _OPERATING_SYSTEMS))

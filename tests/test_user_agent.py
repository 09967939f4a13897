"""User-Agent classification tests."""

import pytest

from tests.helpers import CHROME_WINDOWS_UA, SAFARI_IPHONE_UA
from tracker.services.user_agent import UserAgentInfo, classify_user_agent

ANDROID_CHROME_UA = (
    "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
)
IPAD_UA = (
    "Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1"
)
EDGE_UA = CHROME_WINDOWS_UA + " Edg/120.0.2210.91"
FIREFOX_MAC_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:121.0) Gecko/20100101 Firefox/121.0"
)
SAFARI_MAC_UA = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.1 Safari/605.1.15"
)
FIREFOX_LINUX_UA = "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0"


@pytest.mark.parametrize(
    ("ua", "expected"),
    [
        (CHROME_WINDOWS_UA, UserAgentInfo("Chrome", "desktop", "Windows")),
        (EDGE_UA, UserAgentInfo("Edge", "desktop", "Windows")),
        (SAFARI_IPHONE_UA, UserAgentInfo("Mobile Safari", "mobile", "iOS")),
        (IPAD_UA, UserAgentInfo("Mobile Safari", "tablet", "iOS")),
        (ANDROID_CHROME_UA, UserAgentInfo("Chrome", "mobile", "Android")),
        (FIREFOX_MAC_UA, UserAgentInfo("Firefox", "desktop", "Mac OS")),
        (SAFARI_MAC_UA, UserAgentInfo("Safari", "desktop", "Mac OS")),
        (FIREFOX_LINUX_UA, UserAgentInfo("Firefox", "desktop", "Linux")),
    ],
)
def test_classify_known_agents(ua: str, expected: UserAgentInfo):
    assert classify_user_agent(ua) == expected


@pytest.mark.parametrize("ua", [None, ""])
def test_missing_user_agent_defaults_to_desktop(ua):
    assert classify_user_agent(ua) == UserAgentInfo(browser=None, device="desktop", os=None)


def test_unparseable_user_agent_defaults_to_desktop():
    info = classify_user_agent("curl/8.4.0")
    assert info.browser is None
    assert info.os is None
    assert info.device == "desktop"

# ABOUTME: Probing of conventional icon locations in a server's root.
# ABOUTME: Checks /favicon.ico and /apple-touch-icon.png and keeps the ones that exist.

from favfinder.discovery.http import HttpClient, IconFetchError
from favfinder.discovery.types import Icon, SourceResult
from favfinder.discovery.urls import site_root

# Common names of icon files hosted in server roots.
WELL_KNOWN_NAMES: tuple[str, ...] = (
    "favicon.ico",
    "apple-touch-icon.png",
)


def find_well_known_icons(http_client: HttpClient, base_url: str | None) -> SourceResult:
    """Probe each well-known path under the site root of base_url.

    A path counts as present when it can be retrieved with a 2xx status.
    Failed probes are recorded in the result's errors and otherwise ignored.
    Nothing is probed without a base URL that has a scheme and host.
    """
    root = site_root(base_url)
    if root is None:
        return SourceResult()

    result = SourceResult()
    for name in WELL_KNOWN_NAMES:
        url = root + name
        try:
            http_client.get(url)
        except IconFetchError as exc:
            result.errors.append(f"well-known: {exc}")
            continue
        except Exception as exc:
            result.errors.append(f"well-known: {type(exc).__name__}: {exc}: {url}")
            continue
        result.icons.append(Icon(url=url))
    return result

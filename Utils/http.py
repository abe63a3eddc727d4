import requests
from typing import Optional

from app.core.config import settings
from Exceptions.hiscores_errors import RequestFailed


def _raw_get(url: str, timeout: float):
    """
    Perform a single HTTP GET call.

    Responsibility here:
      • call requests
      • classify response
      • raise RequestFailed for anything that is not 2xx
    """

    resp = requests.get(url, timeout=timeout)

    if not 200 <= resp.status_code < 300:
        raise RequestFailed(
            f"Unexpected status {resp.status_code} while requesting {url}",
            url=url,
            status_code=resp.status_code,
        )

    return resp


def safe_get(url: str, timeout: Optional[float] = None):
    """
    Public-facing HTTP GET wrapper.

    One attempt only. Transport errors from requests are wrapped in
    RequestFailed with the original exception kept as the cause.
    """

    if timeout is None:
        timeout = settings.HISCORES_TIMEOUT

    try:
        return _raw_get(url, timeout)

    except requests.ConnectionError as e:
        raise RequestFailed(f"Network failure for {url}: {e}", url=url, cause=e) from e

    except requests.Timeout as e:
        raise RequestFailed(f"Timeout fetching {url}: {e}", url=url, cause=e) from e

    except requests.RequestException as e:
        raise RequestFailed(f"Request failed for {url}: {e}", url=url, cause=e) from e

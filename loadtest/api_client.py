"""
Module for making authenticated requests against the subscription API.

This module provides a blocking HTTP client used by the load-test steps.
It records every request it makes and tallies named checks, so a run can
be summarized once all steps are done.
"""
import logging
import httpx
import time
from typing import Callable, Dict, List, Optional
from datetime import datetime

from loadtest.config import API_TIMEOUT

logger = logging.getLogger(__name__)


class APIClient:
    """
    HTTP client for authenticated JSON requests with check tracking.

    This client handles:
    - Authorization header passed verbatim on every request
    - Request/response logging
    - Named pass/fail checks on responses
    - Transport errors reported as a missing response instead of raising
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str,
        timeout: float = API_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url (str): Base URL of the API (e.g., "http://localhost:8081")
            auth_token (str): Value of the Authorization header (e.g., "Bearer ...")
            timeout (float): Request timeout in seconds
            transport (httpx.BaseTransport, optional): Transport override, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self.timeout = timeout
        self.request_count = 0
        self.requests_log: List[dict] = []
        self.checks: Dict[str, Dict[str, int]] = {}
        self.start_time = datetime.now()
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self._client.close()

    @property
    def headers(self) -> Dict[str, str]:
        return self.build_headers(self.auth_token)

    @staticmethod
    def build_headers(auth_token: str) -> Dict[str, str]:
        return {
            "Authorization": auth_token,
            "accept": "application/json",
            "content-type": "application/json",
        }

    def post_json(
        self,
        endpoint: str,
        payload: dict,
        base_url: Optional[str] = None,
        auth_token: Optional[str] = None
    ) -> Optional[httpx.Response]:
        """
        Make an authenticated POST request with a JSON body.

        Args:
            endpoint (str): API endpoint path (e.g., "/api/v1/subscriptions/")
            payload (dict): JSON body data
            base_url (str, optional): Base URL for this request only
            auth_token (str, optional): Authorization value for this request only

        Returns:
            httpx.Response | None: The response, or None if the request
            could not be completed (connection error, timeout, invalid
            URL or header value, ...)
        """
        base_url = self.base_url if base_url is None else base_url.rstrip("/")
        headers = self.headers if auth_token is None else self.build_headers(auth_token)
        url = f"{base_url}{endpoint}"

        request_log = {
            "timestamp": datetime.now(),
            "method": "POST",
            "endpoint": endpoint,
            "status_code": None,
            "elapsed_ms": None,
            "error": None
        }

        started = time.perf_counter()
        try:
            response = self._client.post(url, headers=headers, json=payload)
        except httpx.TimeoutException:
            request_log["error"] = f"Request timeout after {self.timeout}s"
            logger.error(f"[HTTP] POST {url} - {request_log['error']}")
            return None
        except httpx.HTTPError as e:
            request_log["error"] = f"Request failed: {str(e)}"
            logger.error(f"[HTTP] POST {url} - {request_log['error']}")
            return None
        except (httpx.InvalidURL, UnicodeEncodeError, TypeError) as e:
            # Raised while building the request from caller input
            request_log["error"] = f"Invalid request: {str(e)}"
            logger.error(f"[HTTP] POST {url} - {request_log['error']}")
            return None
        finally:
            request_log["elapsed_ms"] = round((time.perf_counter() - started) * 1000, 2)
            self.request_count += 1
            self.requests_log.append(request_log)

        request_log["status_code"] = response.status_code
        if response.status_code >= 400:
            request_log["error"] = f"HTTP {response.status_code}"

        logger.info(
            f"[HTTP] POST {endpoint} -> {response.status_code} "
            f"({request_log['elapsed_ms']}ms)"
        )
        return response

    def check(
        self,
        response: Optional[httpx.Response],
        name: str,
        predicate: Callable[[httpx.Response], bool]
    ) -> bool:
        """
        Evaluate a named check on a response and record the outcome.

        A missing response always fails the check.

        Returns:
            bool: True if the check passed
        """
        passed = response is not None and bool(predicate(response))

        tally = self.checks.setdefault(name, {"passes": 0, "fails": 0})
        tally["passes" if passed else "fails"] += 1

        if passed:
            logger.debug(f"[CHECK] '{name}' passed")
        else:
            status = response.status_code if response is not None else "no response"
            logger.warning(f"[CHECK] '{name}' failed (status: {status})")
        return passed

    def get_summary(self) -> dict:
        """
        Get a summary of the API client's activity.

        Returns:
            dict: Summary statistics
        """
        elapsed = (datetime.now() - self.start_time).total_seconds()

        successful = sum(1 for r in self.requests_log if r["error"] is None)
        failed = len(self.requests_log) - successful

        return {
            "total_requests": self.request_count,
            "successful_requests": successful,
            "failed_requests": failed,
            "elapsed_time_seconds": round(elapsed, 2),
            "checks": {name: dict(tally) for name, tally in self.checks.items()},
        }

    def print_summary(self):
        """Print a formatted summary of API activity."""
        summary = self.get_summary()

        print("\n" + "="*60)
        print("API CLIENT SUMMARY")
        print("="*60)
        print(f"Total Requests:       {summary['total_requests']}")
        print(f"Successful:           {summary['successful_requests']}")
        print(f"Failed:               {summary['failed_requests']}")
        print(f"Elapsed Time:         {summary['elapsed_time_seconds']}s")
        for name, tally in summary["checks"].items():
            total = tally["passes"] + tally["fails"]
            mark = "✓" if tally["fails"] == 0 else "✗"
            print(f"{mark} {name}: {tally['passes']}/{total} passed")
        print("="*60 + "\n")

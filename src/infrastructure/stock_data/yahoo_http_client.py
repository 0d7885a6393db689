"""
Infrastructure adapter: direct JSON access to Yahoo Finance endpoints over httpx.

Used for the endpoints yfinance does not expose (quoteSummary modules,
recommendationsbysymbol, trending, options, insights, localized news search)
and for the predefined screener fallback.  Each call opens its own AsyncClient;
endpoints that need a crumb bootstrap the consent cookie and crumb inside that
same client, so no session state outlives a call.
"""

from calendar import timegm
from datetime import date
from typing import Any, Optional

import httpx

from src.domain.errors import UpstreamResponseError
from src.infrastructure.config.settings import DEFAULT_USER_AGENT

QUERY1_URL = "https://query1.finance.yahoo.com"
QUERY2_URL = "https://query2.finance.yahoo.com"
COOKIE_URL = "https://fc.yahoo.com"
CRUMB_URL = f"{QUERY2_URL}/v1/test/getcrumb"


class YahooHttpClient:
    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            timeout:    Per-request timeout in seconds.
            user_agent: Browser User-Agent; Yahoo rejects library defaults.
            transport:  Optional httpx transport (tests pass httpx.MockTransport).
        """
        self._timeout = timeout
        self._headers = {
            "User-Agent": user_agent,
            "Accept": "application/json,text/plain,*/*",
            "Accept-Language": "en-US,en;q=0.9",
        }
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            headers=self._headers,
            follow_redirects=True,
            transport=self._transport,
        )

    async def get_json(
        self, url: str, params: Optional[dict[str, Any]] = None, *, crumb: bool = False
    ) -> Any:
        """GET *url* and decode the JSON body.

        Raises:
            UpstreamResponseError: on any non-2xx status.
            httpx.HTTPError:       on transport failures (timeouts, DNS, ...).
        """
        async with self._client() as client:
            query = dict(params or {})
            if crumb:
                query["crumb"] = await self._fetch_crumb(client)
            response = await client.get(url, params=query)
            _raise_for_status(response)
            return response.json()

    async def _fetch_crumb(self, client: httpx.AsyncClient) -> str:
        # fc.yahoo.com answers 404 but sets the consent cookie the crumb endpoint needs.
        await client.get(COOKIE_URL)
        response = await client.get(CRUMB_URL)
        _raise_for_status(response)
        crumb = response.text.strip()
        if not crumb or "<" in crumb:
            raise UpstreamResponseError(response.status_code, CRUMB_URL, "empty or invalid crumb")
        return crumb

    async def quote_summary(self, symbol: str, modules: list[str]) -> dict[str, Any]:
        payload = await self.get_json(
            f"{QUERY2_URL}/v10/finance/quoteSummary/{symbol}",
            {"modules": ",".join(modules), "formatted": "false"},
            crumb=True,
        )
        return _first_result(payload, "quoteSummary", f"No quote summary for {symbol}")

    async def recommendations_by_symbol(self, symbol: str) -> dict[str, Any]:
        payload = await self.get_json(f"{QUERY2_URL}/v6/finance/recommendationsbysymbol/{symbol}")
        return _first_result(payload, "finance", f"No recommendations for {symbol}")

    async def trending_symbols(self, region: str, count: int) -> dict[str, Any]:
        payload = await self.get_json(
            f"{QUERY1_URL}/v1/finance/trending/{region}", {"count": count}
        )
        results = (payload.get("finance") or {}).get("result") or []
        return results[0] if results else {"count": 0, "quotes": []}

    async def options(
        self, symbol: str, expiration: Optional[date], formatted: bool
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"formatted": str(formatted).lower()}
        if expiration is not None:
            params["date"] = timegm(expiration.timetuple())
        payload = await self.get_json(
            f"{QUERY2_URL}/v7/finance/options/{symbol}", params, crumb=True
        )
        return _first_result(payload, "optionChain", f"No option chain for {symbol}")

    async def insights(
        self, symbol: str, reports_count: int, region: str, lang: str
    ) -> dict[str, Any]:
        payload = await self.get_json(
            f"{QUERY2_URL}/ws/insights/v2/finance/insights",
            {"symbol": symbol, "reportsCount": reports_count, "region": region, "lang": lang},
            crumb=True,
        )
        result = (payload.get("finance") or {}).get("result")
        if not result:
            raise ValueError(f"No insights for {symbol}")
        return result

    async def news(self, query: str, news_count: int, region: str, lang: str) -> list[dict[str, Any]]:
        payload = await self.get_json(
            f"{QUERY2_URL}/v1/finance/search",
            {
                "q": query,
                "quotesCount": 0,
                "newsCount": news_count,
                "enableFuzzyQuery": "false",
                "region": region,
                "lang": lang,
            },
        )
        return list(payload.get("news") or [])

    async def screener(self, scr_id: str, count: int, lang: str, region: str) -> dict[str, Any]:
        """Predefined screen via the public endpoint.  A missing result is an empty dict."""
        payload = await self.get_json(
            f"{QUERY1_URL}/v1/finance/screener/predefined/saved",
            {
                "scrIds": scr_id,
                "count": count,
                "lang": lang,
                "region": region,
                "formatted": "false",
            },
        )
        results = (payload.get("finance") or {}).get("result") or []
        return results[0] if results and results[0] else {}


def _raise_for_status(response: httpx.Response) -> None:
    if not response.is_success:
        raise UpstreamResponseError(
            response.status_code, str(response.request.url), response.text[:500]
        )


def _first_result(payload: dict[str, Any], root: str, missing: str) -> dict[str, Any]:
    envelope = payload.get(root) or {}
    results = envelope.get("result") or []
    if not results:
        error = envelope.get("error") or {}
        raise ValueError(error.get("description") or missing)
    return results[0]

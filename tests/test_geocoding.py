"""
Tests for the Google geocoding client.
"""

import httpx
import pytest

from geocoding.client import Coordinates, GoogleGeocoder
from models.errors import GeocodeError


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
class TestGoogleGeocoder:
    async def test_first_result_wins(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["address"] = request.url.params["address"]
            seen["key"] = request.url.params["key"]
            return httpx.Response(200, json={
                "status": "OK",
                "results": [
                    {"geometry": {"location": {"lat": 25.49, "lng": 51.45}}},
                    {"geometry": {"location": {"lat": 0.0, "lng": 0.0}}},
                ],
            })

        async with _client(handler) as client:
            geocoder = GoogleGeocoder(api_key="test-key", client=client)
            coords = await geocoder.resolve("Lusail International Circuit, QATAR")

        assert coords == Coordinates(25.49, 51.45)
        assert seen == {"address": "Lusail International Circuit, QATAR", "key": "test-key"}

    async def test_zero_results_raise(self):
        def handler(request):
            return httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []})

        async with _client(handler) as client:
            with pytest.raises(GeocodeError, match="No geocoding results"):
                await GoogleGeocoder(api_key="k", client=client).resolve("Nowhere")

    async def test_denied_key_raises(self):
        def handler(request):
            return httpx.Response(200, json={
                "status": "REQUEST_DENIED",
                "error_message": "The provided API key is invalid.",
                "results": [],
            })

        async with _client(handler) as client:
            with pytest.raises(GeocodeError, match="REQUEST_DENIED"):
                await GoogleGeocoder(api_key=None, client=client).resolve("Mugello")

    async def test_malformed_result_raises(self):
        def handler(request):
            return httpx.Response(200, json={"status": "OK", "results": [{"geometry": {}}]})

        async with _client(handler) as client:
            with pytest.raises(GeocodeError, match="Malformed"):
                await GoogleGeocoder(api_key="k", client=client).resolve("Mugello")

    async def test_http_error_raises(self):
        def handler(request):
            return httpx.Response(503)

        async with _client(handler) as client:
            with pytest.raises(GeocodeError) as exc_info:
                await GoogleGeocoder(api_key="k", client=client).resolve("Mugello")
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    async def test_does_not_close_injected_client(self):
        async with _client(lambda r: httpx.Response(200, json={})) as client:
            async with GoogleGeocoder(api_key="k", client=client):
                pass
            assert not client.is_closed

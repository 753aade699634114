import httpx
import pytest

from youtube_mcp.client import YouTubeClient
from youtube_mcp.errors import MalformedResponseError, NotFoundError, UpstreamError


async def test_get_sends_key_and_drops_unset_params(youtube_api, sent_requests):
    client = YouTubeClient("secret", transport=youtube_api({"videos": (200, {"items": []})}))

    await client.get("videos", {"part": "snippet", "id": "abc123", "pageToken": None})

    url = sent_requests[0].url
    assert url.path == "/youtube/v3/videos"
    assert url.params["key"] == "secret"
    assert url.params["part"] == "snippet"
    assert url.params["id"] == "abc123"
    assert "pageToken" not in url.params
    await client.aclose()


async def test_error_status_uses_google_message(youtube_api):
    payload = {"error": {"code": 403, "message": "The request cannot be completed because you have exceeded your quota."}}
    client = YouTubeClient("secret", transport=youtube_api({"search": (403, payload)}))

    with pytest.raises(UpstreamError) as excinfo:
        await client.get("search", {"q": "cats"})

    assert excinfo.value.status_code == 403
    assert "403" in str(excinfo.value)
    assert "exceeded your quota" in str(excinfo.value)


async def test_error_status_without_json_body(youtube_api):
    client = YouTubeClient("secret", transport=youtube_api({"search": (500, "backend error")}))

    with pytest.raises(UpstreamError, match="backend error"):
        await client.get("search", {"q": "cats"})


async def test_404_is_not_found(youtube_api):
    payload = {"error": {"code": 404, "message": "Requested entity was not found."}}
    client = YouTubeClient("secret", transport=youtube_api({"playlists": (404, payload)}))

    with pytest.raises(NotFoundError, match="Requested entity was not found"):
        await client.get("playlists", {"id": "nope"})


async def test_transport_failure_is_upstream_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = YouTubeClient("secret", transport=httpx.MockTransport(handler))

    with pytest.raises(UpstreamError, match="connection refused"):
        await client.get("videos", {"id": "abc123"})


async def test_invalid_json_is_malformed(youtube_api):
    client = YouTubeClient("secret", transport=youtube_api({"videos": (200, "<html>")}))

    with pytest.raises(MalformedResponseError):
        await client.get("videos", {"id": "abc123"})


async def test_non_object_payload_is_malformed(youtube_api):
    client = YouTubeClient("secret", transport=youtube_api({"videos": (200, [1, 2])}))

    with pytest.raises(MalformedResponseError):
        await client.get("videos", {"id": "abc123"})


async def test_list_items_rejects_non_list_items(youtube_api):
    client = YouTubeClient("secret", transport=youtube_api({"videos": (200, {"items": {"id": "x"}})}))

    with pytest.raises(MalformedResponseError):
        await client.list_items("videos", {"id": "abc123"})


async def test_list_items_without_items_key_is_empty(youtube_api):
    client = YouTubeClient("secret", transport=youtube_api({"search": (200, {"kind": "youtube#searchListResponse"})}))

    assert await client.list_items("search", {"q": "cats"}) == []


async def test_get_item_raises_not_found_on_empty_page(youtube_api):
    client = YouTubeClient("secret", transport=youtube_api({"channels": (200, {"items": []})}))

    with pytest.raises(NotFoundError, match="Channel not found: UCmissing"):
        await client.get_item("channels", {"id": "UCmissing"}, label="Channel")

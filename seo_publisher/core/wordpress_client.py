import logging
from typing import Any, Dict, List, Optional, Protocol
from urllib.parse import urlparse

import httpx

from seo_publisher.config import WordPressConfig
from seo_publisher.core.errors import UpstreamError, UpstreamTimeout

logger = logging.getLogger(__name__)

class PostStore(Protocol):
    """The capabilities the WordPress tools need from a site."""

    async def get_posts(self, search: Optional[str] = None, limit: int = 10,
                        status: str = "publish") -> List[Dict[str, Any]]: ...

    async def create_post(self, post_data: Dict[str, Any],
                          featured_image_url: Optional[str] = None) -> Dict[str, Any]: ...

    async def update_post(self, post_id: int, update_data: Dict[str, Any]) -> Dict[str, Any]: ...

    async def delete_post(self, post_id: int, force: bool = False) -> Dict[str, Any]: ...

def _decode_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None

class WordPressClient:
    """
    Thin async client for the WordPress REST API (wp/v2).

    Every failed call raises UpstreamError, or UpstreamTimeout when the
    configured timeout elapses.
    """

    def __init__(self, config: WordPressConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.api_base,
            auth=httpx.BasicAuth(config.username, config.app_password),
            headers={"Content-Type": "application/json"},
            timeout=config.timeout,
            transport=transport,
        )
        # Featured images live on arbitrary hosts; do not send site credentials there
        self._downloader = httpx.AsyncClient(timeout=config.timeout, transport=transport,
                                             follow_redirects=True)

    async def __aenter__(self) -> "WordPressClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()
        await self._downloader.aclose()

    async def _send(self, client: httpx.AsyncClient, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            response = await client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise UpstreamTimeout(f"WordPress request timed out after {self.config.timeout}s: {method} {url}") from e
        except httpx.HTTPStatusError as e:
            payload = _decode_json(e.response)
            message = f"HTTP {e.response.status_code} from {method} {url}"
            if isinstance(payload, dict) and payload.get("message"):
                message = str(payload["message"])
            raise UpstreamError(message, status_code=e.response.status_code, payload=payload) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"{method} {url} failed: {e}") from e
        return response

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._send(self._client, method, path, **kwargs)
        return _decode_json(response)

    async def get_posts(self, search: Optional[str] = None, limit: int = 10,
                        status: str = "publish") -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {"per_page": limit, "status": status}
        if search:
            params["search"] = search
        logger.info(f"Fetching WordPress posts: {params}")
        return await self._request("GET", "/posts", params=params)

    async def create_post(self, post_data: Dict[str, Any],
                          featured_image_url: Optional[str] = None) -> Dict[str, Any]:
        logger.info(f"Creating WordPress post: {post_data.get('title')!r}")
        created = await self._request("POST", "/posts", json=post_data)

        if featured_image_url and isinstance(created, dict) and created.get("id") is not None:
            media_id = await self.set_featured_image(created["id"], featured_image_url)
            if media_id is not None:
                created["featured_media"] = media_id
        return created

    async def update_post(self, post_id: int, update_data: Dict[str, Any]) -> Dict[str, Any]:
        logger.info(f"Updating WordPress post {post_id}: fields {sorted(update_data)}")
        return await self._request("POST", f"/posts/{post_id}", json=update_data)

    async def delete_post(self, post_id: int, force: bool = False) -> Dict[str, Any]:
        logger.info(f"Deleting WordPress post {post_id} (force={force})")
        return await self._request("DELETE", f"/posts/{post_id}", params={"force": force})

    async def set_featured_image(self, post_id: int, image_url: str) -> Optional[int]:
        """
        Download image_url, upload it to the media library and attach it to the post.

        Returns the media id, or None if any step failed. Failures are logged only.
        """
        try:
            image = await self._send(self._downloader, "GET", image_url)
            file_name = urlparse(image_url).path.rsplit("/", 1)[-1] or "featured-image.jpg"
            media = await self._request(
                "POST",
                "/media",
                content=image.content,
                headers={
                    "Content-Type": image.headers.get("content-type", "application/octet-stream"),
                    "Content-Disposition": f'attachment; filename="{file_name}"',
                },
            )
            media_id = media["id"]
            await self._request("POST", f"/posts/{post_id}", json={"featured_media": media_id})
            return media_id
        except Exception as e:
            logger.error(f"Error setting featured image for post {post_id}: {e}")
            return None

import asyncio
import base64
import json

import httpx

from conftest import call_line, make_dispatcher, make_wordpress


def run_tool(handler, name, arguments) -> dict:
    async def go():
        async with make_wordpress(handler) as wordpress:
            dispatcher = make_dispatcher(wordpress=wordpress)
            return (await dispatcher.handle_line(call_line(name, arguments))).to_wire()

    return asyncio.run(go())


def test_delete_post_messages_depend_on_force():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"deleted": True, "previous": {"id": 42}})

    forced = run_tool(handler, "delete_wordpress_post", {"post_id": 42, "force": True})
    trashed = run_tool(handler, "delete_wordpress_post", {"post_id": 42})

    assert forced["result"]["success"] is True
    assert forced["result"]["message"] == "Post permanently deleted"
    assert trashed["result"]["message"] == "Post moved to trash"
    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/wp-json/wp/v2/posts/42"
    assert seen[0].url.params["force"] == "true"
    assert seen[1].url.params["force"] == "false"


def test_requests_use_basic_auth():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    run_tool(handler, "get_wordpress_posts", {})

    expected = "Basic " + base64.b64encode(b"editor:abcd efgh").decode("ascii")
    assert seen[0].headers["Authorization"] == expected


def test_get_posts_forwards_filters():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[{"id": 1, "title": {"rendered": "Hello"}}])

    wire = run_tool(handler, "get_wordpress_posts", {"search": "coffee", "limit": 3, "status": "draft"})

    assert wire["result"] == {
        "success": True,
        "message": "Posts retrieved successfully",
        "data": [{"id": 1, "title": {"rendered": "Hello"}}],
    }
    params = seen[0].url.params
    assert params["per_page"] == "3"
    assert params["status"] == "draft"
    assert params["search"] == "coffee"


def test_get_posts_defaults_omit_search():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    run_tool(handler, "get_wordpress_posts", {})

    params = seen[0].url.params
    assert params["per_page"] == "10"
    assert params["status"] == "publish"
    assert "search" not in params


def test_create_post_sends_yoast_meta_and_defaults():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(201, json={"id": 7, "status": "draft"})

    wire = run_tool(
        handler,
        "create_wordpress_post",
        {"title": "Hello", "content": "<p>Body</p>", "seo_description": "About hello", "tags": ["a"]},
    )

    assert wire["result"]["success"] is True
    assert wire["result"]["message"] == "Post created successfully"
    assert wire["result"]["data"]["id"] == 7
    assert bodies[0] == {
        "title": "Hello",
        "content": "<p>Body</p>",
        "status": "draft",
        "excerpt": "",
        "tags": ["a"],
        "meta": {"_yoast_wpseo_title": "Hello", "_yoast_wpseo_metadesc": "About hello"},
    }


def test_create_post_upstream_error_becomes_unsuccessful_result():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"code": "rest_cannot_create", "message": "Sorry, you are not allowed."})

    wire = run_tool(handler, "create_wordpress_post", {"title": "Hello", "content": "Body"})

    assert "error" not in wire
    assert wire["result"]["success"] is False
    assert wire["result"]["message"] == "Sorry, you are not allowed."
    assert wire["result"]["data"]["code"] == "rest_cannot_create"


def test_upstream_error_without_json_uses_default_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad gateway")

    wire = run_tool(handler, "update_wordpress_post", {"post_id": 5, "title": "New"})

    assert wire["result"] == {"success": False, "message": "Failed to update post"}


def test_timeout_is_reported_as_unsuccessful_result():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    wire = run_tool(handler, "delete_wordpress_post", {"post_id": 5})

    assert wire["result"]["success"] is False
    assert wire["result"]["message"].startswith("Failed to delete post: WordPress request timed out")


def test_update_post_sends_only_provided_fields():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": 5})

    wire = run_tool(handler, "update_wordpress_post", {"post_id": 5, "status": "publish", "seo_title": "T"})

    assert wire["result"]["message"] == "Post updated successfully"
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/wp-json/wp/v2/posts/5"
    assert json.loads(seen[0].content) == {"status": "publish", "meta": {"_yoast_wpseo_title": "T"}}


def test_featured_image_is_uploaded_and_attached():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.host == "images.example.net":
            return httpx.Response(200, content=b"\x89PNG", headers={"content-type": "image/png"})
        if request.url.path.endswith("/media"):
            return httpx.Response(201, json={"id": 99})
        return httpx.Response(201, json={"id": 7})

    wire = run_tool(
        handler,
        "create_wordpress_post",
        {"title": "Hi", "content": "Body", "featured_image_url": "https://images.example.net/a/cup.png"},
    )

    assert wire["result"]["success"] is True
    assert wire["result"]["data"]["featured_media"] == 99
    download, upload, attach = seen[1], seen[2], seen[3]
    assert "Authorization" not in download.headers
    assert upload.headers["Content-Disposition"] == 'attachment; filename="cup.png"'
    assert upload.headers["Content-Type"] == "image/png"
    assert upload.content == b"\x89PNG"
    assert json.loads(attach.content) == {"featured_media": 99}


def test_featured_image_failure_does_not_fail_create():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "images.example.net":
            return httpx.Response(404)
        return httpx.Response(201, json={"id": 7})

    wire = run_tool(
        handler,
        "create_wordpress_post",
        {"title": "Hi", "content": "Body", "featured_image_url": "https://images.example.net/missing.jpg"},
    )

    assert wire["result"]["success"] is True
    assert wire["result"]["data"] == {"id": 7}


def test_malformed_featured_image_url_does_not_fail_create():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": 7})

    wire = run_tool(
        handler,
        "create_wordpress_post",
        {"title": "Hi", "content": "B", "featured_image_url": "http://[bad"},
    )

    assert "error" not in wire
    assert wire["result"]["success"] is True
    assert wire["result"]["data"] == {"id": 7}
    assert len(seen) == 1

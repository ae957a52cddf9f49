import logging
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from seo_publisher.core.context import ToolContext
from seo_publisher.core.errors import UpstreamError
from seo_publisher.core.wordpress_client import PostStore
from seo_publisher.tools.registry import registry

logger = logging.getLogger(__name__)

PostStatus = Literal["publish", "draft", "pending"]

class WordPressResult(BaseModel):
    success: bool
    message: str
    data: Optional[Any] = None

    def to_result(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

class GetPostsArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    search: Optional[str] = Field(None, description="Search term")
    limit: int = Field(10, ge=1, description="Number of posts to fetch")
    status: Literal["publish", "draft", "pending", "all"] = "publish"

class CreatePostArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(description="Post title")
    content: str = Field(description="Post content")
    excerpt: Optional[str] = Field(None, description="Short excerpt")
    tags: Optional[List[str]] = Field(None, description="Tags for the post")
    categories: Optional[List[str]] = Field(None, description="Categories for the post")
    status: PostStatus = "draft"
    featured_image_url: Optional[str] = Field(None, description="Featured image URL")
    seo_title: Optional[str] = Field(None, description="SEO title")
    seo_description: Optional[str] = Field(None, description="SEO meta description")

class UpdatePostArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    post_id: int = Field(description="WordPress post ID")
    title: Optional[str] = Field(None, description="New post title")
    content: Optional[str] = Field(None, description="New post content")
    status: Optional[PostStatus] = Field(None, description="New status")
    seo_title: Optional[str] = Field(None, description="Updated SEO title")
    seo_description: Optional[str] = Field(None, description="Updated SEO description")

class DeletePostArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    post_id: int = Field(description="WordPress post ID")
    force: bool = Field(False, description="Force delete (skip trash)")

def _site(context: ToolContext) -> PostStore:
    if context.wordpress is None:
        raise RuntimeError("WordPress client is not configured")
    return context.wordpress

def _failure(e: UpstreamError, default_message: str) -> Dict[str, Any]:
    message = default_message
    if isinstance(e.payload, dict) and e.payload.get("message"):
        message = str(e.payload["message"])
    elif e.payload is None and e.status_code is None:
        # Transport-level failure (timeout, connection refused); keep the reason
        message = f"{default_message}: {e.message}"
    return WordPressResult(success=False, message=message, data=e.payload).to_result()

@registry.register(
    name="get_wordpress_posts",
    description="Fetch posts from connected WordPress site",
    arguments=GetPostsArgs,
)
async def get_wordpress_posts(context: ToolContext, search=None, limit=10, status="publish"):
    try:
        posts = await _site(context).get_posts(search, limit, status)
    except UpstreamError as e:
        logger.error(f"Error fetching posts: {e}")
        return _failure(e, "Failed to fetch posts")
    return WordPressResult(success=True, message="Posts retrieved successfully", data=posts).to_result()

@registry.register(
    name="create_wordpress_post",
    description="Create a new post on WordPress site",
    arguments=CreatePostArgs,
)
async def create_wordpress_post(context: ToolContext, title, content, excerpt=None, tags=None,
                                categories=None, status="draft", featured_image_url=None,
                                seo_title=None, seo_description=None):
    post_data: Dict[str, Any] = {
        "title": title,
        "content": content,
        "status": status,
        "excerpt": excerpt or "",
    }
    if categories:
        post_data["categories"] = categories
    if tags:
        post_data["tags"] = tags

    # Yoast SEO metadata
    if seo_title or seo_description:
        post_data["meta"] = {
            "_yoast_wpseo_title": seo_title or title,
            "_yoast_wpseo_metadesc": seo_description or excerpt or "",
        }

    try:
        created = await _site(context).create_post(post_data, featured_image_url)
    except UpstreamError as e:
        logger.error(f"Error creating post: {e.payload or e}")
        return _failure(e, "Failed to create post")
    return WordPressResult(success=True, message="Post created successfully", data=created).to_result()

@registry.register(
    name="update_wordpress_post",
    description="Update an existing WordPress post",
    arguments=UpdatePostArgs,
)
async def update_wordpress_post(context: ToolContext, post_id, title=None, content=None, status=None,
                                seo_title=None, seo_description=None):
    update_data: Dict[str, Any] = {}
    if title:
        update_data["title"] = title
    if content:
        update_data["content"] = content
    if status:
        update_data["status"] = status

    if seo_title or seo_description:
        meta = {}
        if seo_title:
            meta["_yoast_wpseo_title"] = seo_title
        if seo_description:
            meta["_yoast_wpseo_metadesc"] = seo_description
        update_data["meta"] = meta

    try:
        updated = await _site(context).update_post(post_id, update_data)
    except UpstreamError as e:
        logger.error(f"Error updating post {post_id}: {e.payload or e}")
        return _failure(e, "Failed to update post")
    return WordPressResult(success=True, message="Post updated successfully", data=updated).to_result()

@registry.register(
    name="delete_wordpress_post",
    description="Delete a WordPress post",
    arguments=DeletePostArgs,
)
async def delete_wordpress_post(context: ToolContext, post_id, force=False):
    try:
        deleted = await _site(context).delete_post(post_id, force)
    except UpstreamError as e:
        logger.error(f"Error deleting post {post_id}: {e.payload or e}")
        return _failure(e, "Failed to delete post")
    message = "Post permanently deleted" if force else "Post moved to trash"
    return WordPressResult(success=True, message=message, data=deleted).to_result()

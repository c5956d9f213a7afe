"""
JSONPlaceholder API client.

Endpoint methods return ``ApiResponse`` with the decoded JSON body. Every
method forwards ``**options`` (headers, timeout, ``fail_on_status_code``,
auth) to ``BaseApiClient.request``.
"""

from __future__ import annotations

from typing import Any

from storefront_qa.api.base_client import BaseApiClient
from storefront_qa.api.types import ApiResponse


class ApiClient(BaseApiClient):
    """Client for the users, posts, comments, todos, albums and photos resources."""

    # ==================== User Endpoints ====================

    def get_users(self, **options: Any) -> ApiResponse:
        return self.get("/users", **options)

    def get_user(self, user_id: int, **options: Any) -> ApiResponse:
        return self.get(f"/users/{user_id}", **options)

    def create_user(self, user_data: dict[str, Any], **options: Any) -> ApiResponse:
        return self.post("/users", user_data, **options)

    def update_user(self, user_id: int, user_data: dict[str, Any], **options: Any) -> ApiResponse:
        """Full update (PUT)."""
        return self.put(f"/users/{user_id}", user_data, **options)

    def patch_user(self, user_id: int, user_data: dict[str, Any], **options: Any) -> ApiResponse:
        """Partial update (PATCH)."""
        return self.patch(f"/users/{user_id}", user_data, **options)

    def delete_user(self, user_id: int, **options: Any) -> ApiResponse:
        return self.delete(f"/users/{user_id}", **options)

    # ==================== Post Endpoints ====================

    def get_posts(self, **options: Any) -> ApiResponse:
        return self.get("/posts", **options)

    def get_post(self, post_id: int, **options: Any) -> ApiResponse:
        return self.get(f"/posts/{post_id}", **options)

    def get_posts_by_user(self, user_id: int, **options: Any) -> ApiResponse:
        return self.get("/posts", params={"userId": user_id}, **options)

    def create_post(self, post_data: dict[str, Any], **options: Any) -> ApiResponse:
        return self.post("/posts", post_data, **options)

    def update_post(self, post_id: int, post_data: dict[str, Any], **options: Any) -> ApiResponse:
        return self.put(f"/posts/{post_id}", post_data, **options)

    def delete_post(self, post_id: int, **options: Any) -> ApiResponse:
        return self.delete(f"/posts/{post_id}", **options)

    # ==================== Comment Endpoints ====================

    def get_comments(self, **options: Any) -> ApiResponse:
        return self.get("/comments", **options)

    def get_comments_by_post(self, post_id: int, **options: Any) -> ApiResponse:
        return self.get(f"/posts/{post_id}/comments", **options)

    def create_comment(self, comment_data: dict[str, Any], **options: Any) -> ApiResponse:
        return self.post("/comments", comment_data, **options)

    # ==================== Todo Endpoints ====================

    def get_todos(self, **options: Any) -> ApiResponse:
        return self.get("/todos", **options)

    def get_todo(self, todo_id: int, **options: Any) -> ApiResponse:
        return self.get(f"/todos/{todo_id}", **options)

    def get_todos_by_user(self, user_id: int, **options: Any) -> ApiResponse:
        return self.get("/todos", params={"userId": user_id}, **options)

    def create_todo(self, todo_data: dict[str, Any], **options: Any) -> ApiResponse:
        return self.post("/todos", todo_data, **options)

    def update_todo(self, todo_id: int, todo_data: dict[str, Any], **options: Any) -> ApiResponse:
        return self.put(f"/todos/{todo_id}", todo_data, **options)

    def delete_todo(self, todo_id: int, **options: Any) -> ApiResponse:
        return self.delete(f"/todos/{todo_id}", **options)

    # ==================== Album Endpoints ====================

    def get_albums(self, **options: Any) -> ApiResponse:
        return self.get("/albums", **options)

    def get_album(self, album_id: int, **options: Any) -> ApiResponse:
        return self.get(f"/albums/{album_id}", **options)

    def get_photos_by_album(self, album_id: int, **options: Any) -> ApiResponse:
        return self.get(f"/albums/{album_id}/photos", **options)

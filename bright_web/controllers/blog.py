from __future__ import annotations

from typing import Any, Optional

from bright_web.controllers.site import SiteController
from bright_web.core.model import Model

BLOG_KEY = "blog"


class BlogModel(Model):
    def get_posts(self) -> dict[str, Any]:
        return self.get_data_from_storage(BLOG_KEY).get("posts") or {}

    def get_post(self, slug: str) -> Optional[dict[str, Any]]:
        return self.get_posts().get(slug)


class BlogController(SiteController):
    """
    /blog                      -> list of posts
    /blog/view/<slug>          -> one post
    /blog/view/<slug>/comments -> one post with its comments
    """

    _model: BlogModel

    def index(self, parameters: list[str]) -> str:
        page_name = parameters[0]
        self._build_common(page_name)
        self._set_view_property("posts", self._model.get_posts())
        return self.render(page_name)

    def view(self, parameters: list[str]) -> str:
        slug = parameters[0] if parameters else ""
        section = parameters[1] if len(parameters) > 1 else ""

        self._build_common("blog_post")
        post = self._model.get_post(slug)
        comments = (post or {}).get("comments") or []
        if isinstance(comments, dict):
            # XML: <comments><comment>...</comment></comments>
            comments = comments.get("comment") or []
        if isinstance(comments, str):
            comments = [comments]

        self._set_view_property("slug", slug)
        self._set_view_property("post", post)
        self._set_view_property("show_comments", section == "comments")
        self._set_view_property("comments", comments)
        return self.render("blog_post")

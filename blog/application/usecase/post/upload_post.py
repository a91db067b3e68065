"""Upload post use case."""

import re
from typing import Any, Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, CamelModel
from blog.config import ContentSettings
from blog.domain.error import ValidationError
from blog.domain.service import PostService
from blog.domain.value import PostCategory, split_sub_category
from blog.util import frontmatter
from blog.util.clock import Clock
from blog.util.slug import generate_slug

MAX_AUTO_TAGS = 5
EXCERPT_LENGTH = 100

# Tag -> lowercase keywords that trigger it (substring match on title + body)
AUTO_TAG_KEYWORDS: dict[str, tuple[str, ...]] = {
    "React": ("react", "jsx", "hooks", "usestate", "useeffect"),
    "Vue": ("vue", "vuex", "pinia", "composition api"),
    "Next.js": ("next.js", "nextjs", "next", "getserversideprops", "getstaticprops"),
    "TypeScript": ("typescript", "ts", "interface", "type "),
    "JavaScript": ("javascript", "js", "es6", "promise", "async"),
    "Node.js": ("node.js", "nodejs", "express", "koa", "npm"),
    "Python": ("python", "django", "flask", "pip"),
    "CSS": ("css", "tailwind", "sass", "scss", "styled"),
    "HTML": ("html", "dom", "html5"),
    "Git": ("git", "github", "gitlab", "commit"),
    "Docker": ("docker", "container", "dockerfile"),
    "数据库": ("mysql", "mongodb", "redis", "postgresql", "sql"),
    "API": ("api", "rest", "graphql", "fetch"),
    "AI": ("ai", "gpt", "chatgpt", "openai", "机器学习", "深度学习"),
    "前端": ("前端", "frontend", "组件", "页面"),
    "后端": ("后端", "backend", "服务器", "server"),
    "教程": ("教程", "tutorial", "入门", "学习"),
    "实战": ("实战", "项目", "project", "案例"),
}


def generate_tags(title: str, content: str) -> list[str]:
    """Pick up to five tags whose keywords occur in the title or body."""
    text = f"{title} {content}".lower()
    tags = [
        tag
        for tag, keywords in AUTO_TAG_KEYWORDS.items()
        if any(keyword in text for keyword in keywords)
    ]
    return tags[:MAX_AUTO_TAGS]


def default_excerpt(content: str) -> str:
    """First characters of the body with headings markers and line breaks blanked."""
    return re.sub(r"[#\n]", " ", content[:EXCERPT_LENGTH]).strip()


def _resolve_tags(
    custom_tags: Optional[str], meta: dict[str, Any], title: str, body: str
) -> list[str]:
    if custom_tags:
        return [t.strip() for t in custom_tags.split(",") if t.strip()]
    if isinstance(meta.get("tags"), list):
        return [str(t) for t in meta["tags"]]
    return generate_tags(title, body)


class UploadPostRequest(BaseModel):
    """Upload post request."""

    filename: str
    data: bytes
    category: Optional[str] = None
    sub_category: Optional[str] = None
    tags: Optional[str] = None


class UploadPostResponse(CamelModel):
    """Upload post response."""

    slug: str
    original_file_name: str
    category: PostCategory
    sub_category: Optional[str] = None
    tags: list[str]


class UploadPostUseCase(BaseUseCase):
    """Use case for publishing an uploaded Markdown file."""

    def __init__(
        self,
        post_service: PostService,
        content_settings: ContentSettings,
        clock: Clock,
    ) -> None:
        """Initialize upload post use case.

        Args:
            post_service: Post domain service
            content_settings: Upload limits
            clock: Time source for the default date
        """
        self.post_service = post_service
        self.content_settings = content_settings
        self.clock = clock

    async def execute(self, request: UploadPostRequest) -> UploadPostResponse:
        """Validate, complete the metadata and store the file as a new post.

        Title, excerpt, date and tags are taken from the file's frontmatter
        when present. The slug comes from the file name.

        Raises:
            ValidationError: For a non-.md file, an oversized file, an
                invalid category or sub-category, or non-UTF-8 content
            ConflictError: If the slug is already taken
        """
        with logfire.span(
            "upload_post.execute",
            filename=request.filename,
            size=len(request.data),
            category=request.category,
        ):
            category, sub_category = self._validate(request)

            try:
                text = request.data.decode("utf-8")
            except UnicodeDecodeError:
                raise ValidationError("File must be UTF-8 encoded")

            meta, body = frontmatter.split(text)
            original_name = re.sub(r"\.md$", "", request.filename)
            title = str(meta.get("title") or original_name)
            tags = _resolve_tags(request.tags, meta, title, body)

            post = await self.post_service.create_post(
                title=title,
                content=body,
                category=category,
                sub_category=sub_category,
                excerpt=str(meta.get("excerpt") or default_excerpt(body)),
                tags=tags,
                date=frontmatter.as_iso_date(meta.get("date"), self.clock.today()),
                slug_source=original_name,
            )

            logfire.info("Post uploaded", slug=post.slug, tags=post.tags)
            return UploadPostResponse(
                slug=post.slug,
                original_file_name=original_name,
                category=post.category,
                sub_category=post.sub_category,
                tags=post.tags,
            )

    def _validate(
        self, request: UploadPostRequest
    ) -> tuple[PostCategory, Optional[str]]:
        if not request.filename.endswith(".md"):
            raise ValidationError("Only .md files are supported")

        if len(request.data) > self.content_settings.max_upload_bytes:
            limit_mb = self.content_settings.max_upload_bytes // (1024 * 1024)
            raise ValidationError(f"File must not exceed {limit_mb}MB")

        try:
            category = PostCategory(request.category)
        except ValueError:
            raise ValidationError("Please choose a valid category")

        sub_category = request.sub_category or None
        if sub_category is not None:
            try:
                split_sub_category(sub_category)
            except ValueError as e:
                raise ValidationError(str(e))

        return category, sub_category

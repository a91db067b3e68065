"""File-system post repository.

Posts are Markdown files under the content root::

    content/
        tech/<sub-category>/[<child>/]<slug>.md
        life/<slug>.md
        tools/<slug>.md
"""

import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, NamedTuple, Optional
from urllib.parse import unquote

from pydantic import ValidationError as PydanticValidationError

from blog.domain.error import (
    ConflictError,
    ContentPathError,
    NotFoundError,
    PostRelocationError,
)
from blog.domain.model.category import SubCategory
from blog.domain.model.post import Post, PostMeta, PostPatch
from blog.domain.repository import PostRepository, relative_directory
from blog.domain.value import PostCategory
from blog.persistence.files import write_text_atomic
from blog.persistence.mappers import document_to_post, post_to_frontmatter
from blog.util import frontmatter

logger = logging.getLogger(__name__)

SCAN_ORDER = (PostCategory.TECH, PostCategory.LIFE, PostCategory.TOOLS)


class _IndexEntry(NamedTuple):
    path: Path
    meta: PostMeta


class FileSystemPostRepository(PostRepository):
    """PostRepository backed by Markdown files.

    Keeps an index of slug -> (path, metadata). Listings rescan the
    directories but only re-parse files whose size or mtime changed, so
    edits made outside the API are picked up.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self._index: Optional[dict[str, _IndexEntry]] = None
        self._parsed: dict[Path, tuple[tuple[int, int], PostMeta]] = {}
        self._reported_duplicates: set[Path] = set()

    def resolve_directory(
        self, category: PostCategory, sub_category: Optional[str]
    ) -> Path:
        try:
            relative = relative_directory(category, sub_category)
        except ValueError as e:
            raise ContentPathError(str(e)) from e

        directory = self.root / relative
        if not directory.resolve().is_relative_to(self.root.resolve()):
            raise ContentPathError(f"Directory outside content root: {relative}")
        return directory

    async def reindex(self) -> None:
        self._parsed.clear()
        self._reported_duplicates.clear()
        self._scan()

    async def locate(self, slug: str) -> Optional[Path]:
        entry = self._lookup(slug)
        if entry is None:
            # Files may have been added outside the API since the last scan
            self._scan()
            entry = self._lookup(slug)
        return entry.path if entry else None

    async def find_by_slug(self, slug: str) -> Optional[Post]:
        path = await self.locate(slug)
        if path is None:
            return None

        try:
            return self._read_post(path)
        except FileNotFoundError:
            logger.info("Post file disappeared: %s", path)
            self._index.pop(path.stem, None)
            return None

    async def find_all(self) -> list[PostMeta]:
        index = self._scan()
        # sort is stable, so equal dates keep scan order
        return sorted(
            (entry.meta for entry in index.values()),
            key=lambda meta: meta.date,
            reverse=True,
        )

    async def create(self, post: Post) -> Path:
        directory = self.resolve_directory(post.category, post.sub_category)
        path = self._post_path(directory, post.slug)

        if self._lookup(post.slug) is not None or path.exists():
            raise ConflictError("Post", post.slug)

        directory.mkdir(parents=True, exist_ok=True)
        text = frontmatter.dump(post_to_frontmatter(post), post.content)
        write_text_atomic(path, text)

        self._ensure_index()[post.slug] = _IndexEntry(path, post.meta())
        logger.info("Created post %s at %s", post.slug, path)
        return path

    async def update(self, slug: str, patch: PostPatch) -> Post:
        path = await self.locate(slug)
        if path is None:
            raise NotFoundError("Post", slug)

        current = self._read_post(path)
        updated = current.apply(patch)
        text = frontmatter.dump(post_to_frontmatter(updated), updated.content)

        new_path = path
        if (updated.category, updated.sub_category) != (
            current.category,
            current.sub_category,
        ):
            directory = self.resolve_directory(updated.category, updated.sub_category)
            new_path = self._post_path(directory, updated.slug)

        if new_path == path:
            write_text_atomic(path, text)
        else:
            self._relocate(updated.slug, path, new_path, text)

        self._parsed.pop(path, None)
        self._ensure_index()[updated.slug] = _IndexEntry(new_path, updated.meta())
        return updated

    async def delete(self, slug: str) -> None:
        path = await self.locate(slug)
        if path is None:
            raise NotFoundError("Post", slug)

        path.unlink()
        self._parsed.pop(path, None)
        self._ensure_index().pop(path.stem, None)
        logger.info("Deleted post %s at %s", path.stem, path)

    async def count_posts(
        self, category: PostCategory, sub_category: Optional[str]
    ) -> int:
        directory = self.resolve_directory(category, sub_category)
        if not directory.is_dir():
            return 0
        return sum(1 for p in directory.rglob("*.md") if p.is_file())

    async def ensure_directories(self, sub_categories: Iterable[SubCategory]) -> None:
        directories = [
            self.resolve_directory(PostCategory.LIFE, None),
            self.resolve_directory(PostCategory.TOOLS, None),
        ]
        for entry in sub_categories:
            directories.append(self.resolve_directory(PostCategory.TECH, entry.value))
            for child in entry.children:
                directories.append(
                    self.resolve_directory(
                        PostCategory.TECH, f"{entry.value}/{child.value}"
                    )
                )

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    async def remove_directory(self, category: PostCategory, sub_category: str) -> None:
        directory = self.resolve_directory(category, sub_category)
        if directory.is_dir():
            shutil.rmtree(directory)
            logger.info("Removed directory %s", directory)

    def _relocate(self, slug: str, old_path: Path, new_path: Path, text: str) -> None:
        """Move a post: write it to the new directory, verify, drop the old file."""
        if new_path.exists():
            raise ConflictError("Post", slug)

        new_path.parent.mkdir(parents=True, exist_ok=True)
        write_text_atomic(new_path, text)

        if new_path.read_text(encoding="utf-8") != text:
            new_path.unlink(missing_ok=True)
            raise OSError(f"Verification of relocated post failed: {new_path}")

        try:
            old_path.unlink()
        except OSError as e:
            logger.error(
                "Relocated post %s but could not remove %s",
                slug,
                old_path,
                exc_info=True,
            )
            self._parsed.pop(old_path, None)
            self._ensure_index()[slug] = _IndexEntry(
                new_path, self._read_post(new_path).meta()
            )
            raise PostRelocationError(slug, str(old_path), str(new_path)) from e

        logger.info("Moved post %s from %s to %s", slug, old_path, new_path)

    def _post_path(self, directory: Path, slug: str) -> Path:
        if not slug or slug.startswith(".") or any(c in slug for c in "/\\\x00"):
            raise ContentPathError(f"Invalid slug for a file name: {slug!r}")
        return directory / f"{slug}.md"

    def _lookup(self, slug: str) -> Optional[_IndexEntry]:
        index = self._ensure_index()
        for candidate in (slug, unquote(slug)):
            entry = index.get(candidate)
            if entry is not None:
                return entry
        return None

    def _ensure_index(self) -> dict[str, _IndexEntry]:
        if self._index is None:
            self._scan()
        return self._index

    def _scan(self) -> dict[str, _IndexEntry]:
        """Rebuild the index from disk, reusing metadata of unchanged files."""
        index: dict[str, _IndexEntry] = {}
        seen: set[Path] = set()

        for category in SCAN_ORDER:
            for path in _markdown_files(self.root / category.value):
                seen.add(path)
                meta = self._meta_for(path)
                if meta is None:
                    continue

                existing = index.get(meta.slug)
                if existing is not None:
                    if path not in self._reported_duplicates:
                        self._reported_duplicates.add(path)
                        logger.warning(
                            "Duplicate slug %s: using %s, ignoring %s",
                            meta.slug,
                            existing.path,
                            path,
                        )
                    continue

                index[meta.slug] = _IndexEntry(path, meta)

        for stale in set(self._parsed) - seen:
            del self._parsed[stale]

        self._index = index
        return index

    def _meta_for(self, path: Path) -> Optional[PostMeta]:
        try:
            stat = path.stat()
            fingerprint = (stat.st_mtime_ns, stat.st_size)
            cached = self._parsed.get(path)
            if cached is not None and cached[0] == fingerprint:
                return cached[1]

            meta = self._read_post(path).meta()
        except (OSError, UnicodeDecodeError, PydanticValidationError):
            logger.warning("Failed to read post file: %s", path, exc_info=True)
            return None

        self._parsed[path] = (fingerprint, meta)
        return meta

    def _read_post(self, path: Path) -> Post:
        text = path.read_text(encoding="utf-8")
        meta, body = frontmatter.split(text)
        modified = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc).date()
        return document_to_post(meta, body, path.relative_to(self.root), modified)


def _markdown_files(directory: Path) -> list[Path]:
    """All .md files below a directory: sorted files first, then subdirectories."""
    if not directory.is_dir():
        return []

    files: list[Path] = []
    subdirectories: list[Path] = []
    for item in sorted(directory.iterdir()):
        if item.name.startswith("."):
            continue
        if item.is_dir():
            subdirectories.append(item)
        elif item.suffix == ".md" and item.is_file():
            files.append(item)

    for subdirectory in subdirectories:
        files.extend(_markdown_files(subdirectory))
    return files

"""Sub-category taxonomy for tech posts."""

from pydantic import Field, field_validator

from blog.domain.model.common import DomainModel

DEFAULT_ICON = "📁"

PROTECTED_SUB_CATEGORIES = ("frontend", "backend", "ai", "other")


class SubCategory(DomainModel):
    """A node in the tech sub-category tree.

    Top-level entries may have children; children may not.
    """

    value: str = Field(min_length=1, max_length=50, pattern=r"^[a-z0-9-]+$")
    label: str = Field(min_length=1, max_length=50)
    icon: str = Field(default=DEFAULT_ICON, min_length=1, max_length=10)
    children: list["SubCategory"] = Field(default_factory=list)

    @field_validator("children")
    @classmethod
    def validate_single_nesting(cls, v: list["SubCategory"]) -> list["SubCategory"]:
        """Children cannot have children of their own."""
        if any(child.children for child in v):
            raise ValueError("Sub-categories support one level of nesting only")
        return v

    def find_child(self, value: str) -> "SubCategory | None":
        return next((c for c in self.children if c.value == value), None)


DEFAULT_SUB_CATEGORIES: tuple[SubCategory, ...] = (
    SubCategory(value="frontend", label="前端开发", icon="🎨"),
    SubCategory(value="backend", label="后端开发", icon="⚙️"),
    SubCategory(value="ai", label="AI / 机器学习", icon="🤖"),
    SubCategory(value="other", label="其他技术", icon="📚"),
)


def find_entry(tree: list[SubCategory], value: str) -> SubCategory | None:
    """Find a top-level entry by value."""
    return next((entry for entry in tree if entry.value == value), None)

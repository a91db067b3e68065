"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with swappable implementations (production vs in-memory)
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base for the blog's providers.

    A provider that has subclasses is a mockable component: its subclasses
    are the implementations, told apart by ``__is_mock__``.

    Attributes:
        __mock_component__: Name used to unmock the component in tests
        __is_mock__: True for the in-memory implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

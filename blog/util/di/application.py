"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.auth import LoginUseCase, VerifySessionUseCase
from blog.application.usecase.category import (
    AddCategoryUseCase,
    DeleteCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from blog.application.usecase.feed import BuildFeedUseCase, BuildSitemapUseCase
from blog.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
    UploadPostUseCase,
)
from blog.config import ContentSettings, SiteSettings
from blog.domain.service import (
    AuthService,
    CategoryService,
    PostService,
    TokenService,
)
from blog.util.clock import Clock
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self, auth_service: AuthService, token_service: TokenService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, token_service=token_service)

    @provide
    def get_verify_session_use_case(
        self, token_service: TokenService
    ) -> VerifySessionUseCase:
        """Provide verify session use case."""
        return VerifySessionUseCase(token_service=token_service)

    # Post use cases
    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_upload_post_use_case(
        self,
        post_service: PostService,
        content_settings: ContentSettings,
        clock: Clock,
    ) -> UploadPostUseCase:
        """Provide upload post use case."""
        return UploadPostUseCase(
            post_service=post_service,
            content_settings=content_settings,
            clock=clock,
        )

    # Category use cases
    @provide
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    @provide
    def get_add_category_use_case(
        self, category_service: CategoryService
    ) -> AddCategoryUseCase:
        """Provide add category use case."""
        return AddCategoryUseCase(category_service=category_service)

    @provide
    def get_update_category_use_case(
        self, category_service: CategoryService
    ) -> UpdateCategoryUseCase:
        """Provide update category use case."""
        return UpdateCategoryUseCase(category_service=category_service)

    @provide
    def get_delete_category_use_case(
        self, category_service: CategoryService
    ) -> DeleteCategoryUseCase:
        """Provide delete category use case."""
        return DeleteCategoryUseCase(category_service=category_service)

    # Feed use cases
    @provide
    def get_build_feed_use_case(
        self, post_service: PostService, site_settings: SiteSettings, clock: Clock
    ) -> BuildFeedUseCase:
        """Provide RSS feed use case."""
        return BuildFeedUseCase(
            post_service=post_service, site_settings=site_settings, clock=clock
        )

    @provide
    def get_build_sitemap_use_case(
        self, post_service: PostService, site_settings: SiteSettings, clock: Clock
    ) -> BuildSitemapUseCase:
        """Provide sitemap use case."""
        return BuildSitemapUseCase(
            post_service=post_service, site_settings=site_settings, clock=clock
        )

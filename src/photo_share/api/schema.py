"""GraphQL schema: types, queries and mutations."""

import strawberry
from strawberry.types import Info

from photo_share.api.context import GraphQLContext
from photo_share.domain.models import (
    AuthResult,
    NewPhoto,
    PhotoCategory,
    PhotoRecord,
    UserRecord,
)
from photo_share.services.photos import photo_url

strawberry.enum(PhotoCategory)


@strawberry.type(name="User")
class UserType:
    """A GitHub user who can post photos."""

    github_login: strawberry.ID
    name: str
    avatar: str

    @strawberry.field
    def posted_photos(
        self, info: Info[GraphQLContext, None]
    ) -> "list[PhotoType]":
        records = info.context.photo_service.photos_posted_by(self.github_login)
        return [PhotoType.from_record(record) for record in records]

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserType":
        return cls(
            github_login=strawberry.ID(record.github_login),
            name=record.name,
            avatar=record.avatar,
        )


@strawberry.type(name="Photo")
class PhotoType:
    """A posted photo; `url` and `postedBy` are derived on demand."""

    id: strawberry.ID
    name: str
    description: str | None
    category: PhotoCategory
    user_id: strawberry.Private[str]

    @strawberry.field
    def url(self) -> str:
        return photo_url(self.id)

    @strawberry.field
    def posted_by(self, info: Info[GraphQLContext, None]) -> UserType:
        user = info.context.user_service.require_user(self.user_id)
        return UserType.from_record(user)

    @classmethod
    def from_record(cls, record: PhotoRecord) -> "PhotoType":
        return cls(
            id=strawberry.ID(str(record.id)),
            name=record.name,
            description=record.description,
            category=record.category,
            user_id=record.user_id,
        )


@strawberry.type
class AuthPayload:
    """Session token and user returned by `githubAuth`."""

    token: str
    user: UserType

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthPayload":
        return cls(token=result.token, user=UserType.from_record(result.user))


@strawberry.input
class PostPhotoInput:
    name: str
    description: str | None = None
    category: PhotoCategory = PhotoCategory.PORTRAIT

    def to_new_photo(self) -> NewPhoto:
        return NewPhoto(
            name=self.name,
            description=self.description,
            category=self.category,
        )


@strawberry.type
class Query:
    @strawberry.field
    def total_photos(self, info: Info[GraphQLContext, None]) -> int:
        return info.context.photo_service.total_photos()

    @strawberry.field
    def all_photos(self, info: Info[GraphQLContext, None]) -> list[PhotoType]:
        return [
            PhotoType.from_record(record)
            for record in info.context.photo_service.all_photos()
        ]

    @strawberry.field(name="Photo")
    def photo(
        self, info: Info[GraphQLContext, None], id: strawberry.ID  # noqa: A002
    ) -> PhotoType:
        return PhotoType.from_record(info.context.photo_service.get_photo(id))

    @strawberry.field
    def total_users(self, info: Info[GraphQLContext, None]) -> int:
        return info.context.user_service.total_users()

    @strawberry.field
    def all_users(self, info: Info[GraphQLContext, None]) -> list[UserType]:
        return [
            UserType.from_record(record)
            for record in info.context.user_service.all_users()
        ]

    @strawberry.field(name="User")
    def user(
        self, info: Info[GraphQLContext, None], github_login: strawberry.ID
    ) -> UserType | None:
        record = info.context.user_service.get_user(github_login)
        if record is None:
            return None
        return UserType.from_record(record)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def post_photo(
        self, info: Info[GraphQLContext, None], input: PostPhotoInput  # noqa: A002
    ) -> PhotoType:
        """Post a photo as the authenticated user."""
        context = info.context
        record = context.photo_service.post_photo(
            context.current_user, input.to_new_photo()
        )
        return PhotoType.from_record(record)

    @strawberry.mutation
    async def github_auth(
        self, info: Info[GraphQLContext, None], code: str
    ) -> AuthPayload:
        """Log in with a GitHub authorization code."""
        result = await info.context.auth_service.authenticate(code)
        return AuthPayload.from_result(result)


schema = strawberry.Schema(query=Query, mutation=Mutation)

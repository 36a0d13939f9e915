"""Controller classes used across the autoroute tests."""

from autoroute.context import Request


class User:
    pass


class Post:
    pass


class BaseController:
    def getMiddleware(self) -> list[str]:
        return []

    def helper(self) -> None:
        pass


class UserController(BaseController):
    def getIndex(self) -> str:
        return "index"

    def getUsers(self) -> str:
        return "users"

    def getShow(self, id: int) -> str:
        return f"user {id}"

    def postUpdate(self, user: User, force=None) -> str:
        return "updated"

    def deleteDestroy(self, request: Request, id: int) -> str:
        return "deleted"

    def anyThing(self) -> str:
        return "anything"

    def postpone(self) -> str:
        return "later"

    def render(self) -> str:
        return "not a route"

    def _getPrivate(self) -> str:
        return "private"


class SnakeController:
    def get_index(self) -> str:
        return "index"

    def get_user_profile(self, post: Post | None = None) -> str:
        return "profile"

    def put_settings(self, request: Request, theme: str = "light") -> str:
        return "settings"

    def get_middleware(self) -> list[str]:
        return []

    @classmethod
    def get_by_class(cls, slug: str) -> str:
        return slug

    @staticmethod
    def patch_static(key) -> str:
        return key

    def get_variadic(self, id: int, *args, **kwargs) -> str:
        return "variadic"


class ShadowController:
    def getMe(self) -> str:
        return "me"

    def getIndex(self, id) -> str:
        return "index"

    def postShow(self, id) -> str:
        return "post show"


class EmptyController:
    def helper(self) -> None:
        pass

from chronosclient.models.auth import AuthSession, AuthUser
from chronosclient.parsers.game import decode_model
from chronosclient.services.request_executor import RequestExecutor


class AuthService:
    """Client for /auth endpoints. Holds no credential itself."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def register(self, username: str, password: str) -> AuthSession:
        return await self._credentials("/auth/register", username, password)

    async def login(self, username: str, password: str) -> AuthSession:
        """
        Exchange credentials for a bearer token.

        Raises:
            HttpError: On rejected credentials (typically 401)
        """
        return await self._credentials("/auth/login", username, password)

    async def me(self, token: str) -> AuthUser:
        payload = await self._executor.request("/auth/me", token=token)
        return decode_model(AuthUser, payload, "GET", "/auth/me")

    async def _credentials(self, path: str, username: str, password: str) -> AuthSession:
        payload = await self._executor.request(
            path,
            method="POST",
            body={"username": username, "password": password},
        )
        return decode_model(AuthSession, payload, "POST", path)

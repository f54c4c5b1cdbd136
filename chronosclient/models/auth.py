from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AuthUser(BaseModel):
    """Account returned by login, register and /auth/me."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    id: str
    username: str
    role: str | None = None


class AuthSession(BaseModel):
    """Bearer credential plus the account it belongs to."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    access_token: str
    user: AuthUser

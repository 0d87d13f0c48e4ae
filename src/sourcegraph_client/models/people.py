"""People payloads: users, settings, emails and usage records."""

from __future__ import annotations

from pydantic import Field

from sourcegraph_client.models.base import APIModel
from sourcegraph_client.specs import PersonSpec

__all__ = [
    "AugmentedPersonUsageByClient",
    "AugmentedPersonUsageOfAuthor",
    "EmailAddr",
    "Person",
    "PersonSettings",
    "PersonUsageByClient",
    "PersonUsageOfAuthor",
    "PlanSettings",
    "User",
]


class User(APIModel):
    """A registered or inferred user account."""

    uid: int = Field(default=0, alias="UID")
    login: str = ""
    name: str = ""
    avatar_url: str = Field(default="", alias="AvatarURL")
    location: str = ""
    company: str = ""
    homepage_url: str = Field(default="", alias="HomepageURL")
    is_organization: bool = False
    registered_at: str | None = None

    def spec(self) -> PersonSpec:
        return PersonSpec(login=self.login, uid=self.uid)


class Person(User):
    """A user with optional statistics (filled when requested with ``stats``)."""

    stat: dict[str, int] = Field(default_factory=dict)


class EmailAddr(APIModel):
    """An email address associated with a person.

    Attributes
    ----------
    email : str
        The address; compared case-insensitively by the server.
    verified : bool
        Whether the address has been verified.
    primary : bool
        Whether this is the primary address (at most one per user).
    guessed : bool
        Whether the server inferred the address from public data.
    blacklisted : bool
        Whether the address must never be associated with the user.
    """

    email: str = ""
    verified: bool = False
    primary: bool = False
    guessed: bool = False
    blacklisted: bool = False


class PlanSettings(APIModel):
    """The pricing plan a person or org has selected."""

    plan_id: str | None = Field(default=None, alias="PlanID")


class PersonSettings(PlanSettings):
    """A person's configuration settings.

    Unset fields are omitted from update requests, so an update only changes
    the fields that are set.
    """

    requested_upgrade_at: str | None = None
    build_emails: bool | None = None
    pull_request_srcbot_notification: bool | None = None


class PersonUsageByClient(APIModel):
    author_uid: int | None = Field(default=None, alias="AuthorUID")
    author_email: str | None = None
    ref_count: int = 0


class AugmentedPersonUsageByClient(PersonUsageByClient):
    """An author whose code a person uses, with the author's user record."""

    author: User | None = None


class PersonUsageOfAuthor(APIModel):
    client_uid: int | None = Field(default=None, alias="ClientUID")
    client_email: str | None = None
    ref_count: int = 0


class AugmentedPersonUsageOfAuthor(PersonUsageOfAuthor):
    """A client using a person's code, with the client's user record."""

    client: User | None = None

"""Website profiles and their tabular display."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from molliecli.formatting import (
    Displayable,
    PaginationLinks,
    fallback_safe_date,
    fallback_safe_mode,
)

_PROFILE_COLS = (
    "RESOURCE",
    "ID",
    "MODE",
    "NAME",
    "WEBSITE",
    "EMAIL",
    "PHONE",
    "CATEGORY_CODE",
    "STATUS",
    "REVIEW",
    "CREATED_AT",
)

_PROFILE_COL_MAP = {
    "RESOURCE": "the resource name",
    "ID": "the resource id",
    "MODE": "the profile mode (live/test)",
    "NAME": "the profile name",
    "WEBSITE": "the profile website",
    "EMAIL": "the profile registered email",
    "PHONE": "the profile registered phone number",
    "CATEGORY_CODE": "the profile category code (see mollie categories)",
    "STATUS": "the profile status",
    "REVIEW": "the profile review status",
    "CREATED_AT": "the profile creation date",
}


@dataclass
class ProfileReview:
    """The review state of a profile."""

    status: Any = ""


@dataclass
class Profile:
    """A website profile used to process payments."""

    resource: str = ""
    id: str = ""
    mode: Any = ""
    name: str = ""
    website: str = ""
    email: str = ""
    phone: str = ""
    category_code: int = 0
    status: Any = ""
    review: ProfileReview = field(default_factory=ProfileReview)
    created_at: datetime | None = None


@dataclass
class ProfileList:
    """A page of profiles."""

    count: int = 0
    profiles: list[Profile] = field(default_factory=list)
    links: PaginationLinks = field(default_factory=PaginationLinks)


def build_profile_row(profile: Profile) -> dict[str, Any]:
    """The display row for one profile."""
    return {
        "RESOURCE": profile.resource,
        "ID": profile.id,
        "MODE": fallback_safe_mode(profile.mode),
        "NAME": profile.name,
        "WEBSITE": profile.website,
        "EMAIL": profile.email,
        "PHONE": profile.phone,
        "CATEGORY_CODE": profile.category_code,
        "STATUS": profile.status,
        "REVIEW": profile.review.status,
        "CREATED_AT": fallback_safe_date(profile.created_at),
    }


@dataclass
class MollieProfile(Displayable):
    """Displays a single profile."""

    profile: Profile

    def kv(self) -> list[dict[str, Any]]:
        return [build_profile_row(self.profile)]

    def cols(self) -> list[str]:
        return list(_PROFILE_COLS)

    def col_map(self) -> dict[str, str]:
        return dict(_PROFILE_COL_MAP)


@dataclass
class MollieProfileList:
    """Rows for a list of profiles."""

    profile_list: ProfileList

    def kv(self) -> list[dict[str, Any]]:
        """Return one row per profile."""
        return [build_profile_row(p) for p in self.profile_list.profiles]
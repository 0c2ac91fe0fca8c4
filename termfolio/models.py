"""Typed records for the portfolio configuration and the remote profile data."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_U16_MAX = 0xFFFF


def _require_mapping(data: Any, what: str) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return data


def _value(data: Mapping, key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _str(data: Mapping, key: str) -> str:
    value = _value(data, key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _opt_str(data: Mapping, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string or null")
    return value


def _str_list(data: Mapping, key: str) -> list[str]:
    value = _value(data, key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"field {key!r} must be a list of strings")
    return list(value)


def _u16(data: Mapping, key: str) -> int:
    value = _value(data, key)
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U16_MAX:
        raise ValueError(f"field {key!r} must be an integer in 0..{_U16_MAX}")
    return value


def _object_list(data: Mapping, key: str) -> list:
    value = _value(data, key)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    return value


@dataclass(frozen=True)
class Experience:
    title: str
    description: list[str]

    @classmethod
    def from_dict(cls, data: Any) -> Experience:
        data = _require_mapping(data, "experience")
        return cls(title=_str(data, "title"), description=_str_list(data, "description"))


@dataclass(frozen=True)
class Education:
    institute: str
    course: str
    duration: str

    @classmethod
    def from_dict(cls, data: Any) -> Education:
        data = _require_mapping(data, "education")
        return cls(
            institute=_str(data, "institute"),
            course=_str(data, "course"),
            duration=_str(data, "duration"),
        )


@dataclass(frozen=True)
class About:
    name: str
    intro: str
    interests: list[str]
    langs: list[str]
    experience: list[Experience]
    education: list[Education]

    @classmethod
    def from_dict(cls, data: Any) -> About:
        data = _require_mapping(data, "about")
        return cls(
            name=_str(data, "name"),
            intro=_str(data, "intro"),
            interests=_str_list(data, "interests"),
            langs=_str_list(data, "langs"),
            experience=[Experience.from_dict(item) for item in _object_list(data, "experience")],
            education=[Education.from_dict(item) for item in _object_list(data, "education")],
        )


@dataclass(frozen=True)
class Links:
    github: str
    email: str | None = None
    linkedin: str | None = None
    twitter: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Links:
        data = _require_mapping(data, "links")
        return cls(
            github=_str(data, "github"),
            email=_opt_str(data, "email"),
            linkedin=_opt_str(data, "linkedin"),
            twitter=_opt_str(data, "twitter"),
        )


@dataclass(frozen=True)
class Config:
    github: str
    about: About
    links: Links

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        data = _require_mapping(data, "config")
        return cls(
            github=_str(data, "github"),
            about=About.from_dict(_value(data, "about")),
            links=Links.from_dict(_value(data, "links")),
        )


@dataclass(frozen=True)
class UserInfo:
    name: str | None
    bio: str | None
    public_repos: int
    company: str | None
    location: str | None
    followers: int
    following: int
    created_at: str

    @classmethod
    def from_dict(cls, data: Any) -> UserInfo:
        data = _require_mapping(data, "user info")
        return cls(
            name=_opt_str(data, "name"),
            bio=_opt_str(data, "bio"),
            public_repos=_u16(data, "public_repos"),
            company=_opt_str(data, "company"),
            location=_opt_str(data, "location"),
            followers=_u16(data, "followers"),
            following=_u16(data, "following"),
            created_at=_str(data, "created_at"),
        )


@dataclass(frozen=True)
class UserStats:
    stars: int
    forks: int

    @classmethod
    def from_dict(cls, data: Any) -> UserStats:
        data = _require_mapping(data, "user stats")
        return cls(stars=_u16(data, "stars"), forks=_u16(data, "forks"))


@dataclass(frozen=True)
class Profile:
    username: str
    langs: list[str]
    info: UserInfo
    stats: UserStats


@dataclass(frozen=True)
class Repository:
    author: str
    name: str
    description: str
    stars: int
    forks: int
    language: str

    @classmethod
    def from_dict(cls, data: Any) -> Repository:
        data = _require_mapping(data, "repository")
        return cls(
            author=_str(data, "author"),
            name=_str(data, "name"),
            description=_str(data, "description"),
            stars=_u16(data, "stars"),
            forks=_u16(data, "forks"),
            language=_str(data, "language"),
        )


def parse_config(text: str) -> Config:
    """Parse a JSON configuration document; raise ValueError if it is invalid."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    return Config.from_dict(data)
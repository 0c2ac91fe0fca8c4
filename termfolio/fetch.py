"""Portfolio data: the local configuration and cached remote profile lookups."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

import requests

from .formats import Artwork, format_about, format_links, format_profile, format_repos
from .models import Config, Profile, Repository, UserInfo, UserStats, parse_config
from .texts import FETCH_GITHUB_ERROR, READ_JSON_ERROR

INFO_URL = "https://api.github.com/users/{user}"
STATS_URL = "https://api.github-star-counter.workers.dev/user/{user}"
REPOS_URL = "https://pinned.berrysauce.dev/get/{user}"


def _is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


@dataclass
class Portfolio:
    """Answers the portfolio commands; remote results are fetched once and kept."""

    config: Config | None
    artwork: Artwork
    info_url: str = INFO_URL
    stats_url: str = STATS_URL
    repos_url: str = REPOS_URL
    timeout: float = 10.0
    _github: str | None = field(default=None, init=False, repr=False)
    _repos: str | None = field(default=None, init=False, repr=False)
    _contacts: str | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_file(cls, path: str | Path, artwork: Artwork) -> Portfolio:
        """Load the configuration file; an unparsable one leaves the config unset."""
        text = Path(path).read_text(encoding="utf-8")
        try:
            config = parse_config(text)
        except ValueError:
            config = None
        return cls(config=config, artwork=artwork)

    def prompt(self) -> str:
        if self.config is None:
            return "user@termfolio~$ "
        return f"{self.config.github}@termfolio~$ "

    def about(self) -> str:
        if self.config is None:
            return READ_JSON_ERROR
        return format_about(self.config.about)

    def contacts(self) -> str:
        if self._contacts is None:
            self._contacts = (
                READ_JSON_ERROR if self.config is None else format_links(self.config.links)
            )
        return self._contacts

    def github(self) -> str:
        if self._github is None:
            self._github = self._fetch_github()
        return self._github

    def repos(self) -> str:
        if self._repos is None:
            self._repos = self._fetch_repos()
        return self._repos

    def _get(self, url: str) -> requests.Response:
        return requests.get(url, timeout=self.timeout)

    def _fetch_github(self) -> str:
        config = self.config
        if config is None:
            return READ_JSON_ERROR
        user = config.github
        urls = (self.info_url.format(user=user), self.stats_url.format(user=user))
        try:
            with ThreadPoolExecutor(max_workers=2) as pool:
                info_response, stats_response = pool.map(self._get, urls)
        except requests.RequestException:
            return FETCH_GITHUB_ERROR
        if not (_is_success(info_response) and _is_success(stats_response)):
            return FETCH_GITHUB_ERROR
        try:
            profile = Profile(
                username=user,
                langs=list(config.about.langs),
                info=UserInfo.from_dict(info_response.json()),
                stats=UserStats.from_dict(stats_response.json()),
            )
        except ValueError:
            return FETCH_GITHUB_ERROR
        return format_profile(profile, self.artwork)

    def _fetch_repos(self) -> str:
        config = self.config
        if config is None:
            return READ_JSON_ERROR
        try:
            response = self._get(self.repos_url.format(user=config.github))
            data = response.json()
            if not isinstance(data, list):
                return FETCH_GITHUB_ERROR
            repos = [Repository.from_dict(item) for item in data]
        except (requests.RequestException, ValueError):
            return FETCH_GITHUB_ERROR
        return format_repos(repos, self.artwork)
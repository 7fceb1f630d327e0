"""Program context and the options of the resolve and bruteforce commands."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

from puredns import app
from puredns.fileoperation import file_exists


class ResolveMode(enum.IntEnum):
    """What the resolve service does with its input."""

    RESOLVE = 0
    BRUTEFORCE = 1


class OptionsError(ValueError):
    """The options given are not usable."""


class NoDomainError(OptionsError):
    """No domain was specified."""

    def __init__(self) -> None:
        super().__init__("no domain specified")


class NoWordlistError(OptionsError):
    """No wordlist was specified."""

    def __init__(self) -> None:
        super().__init__("no wordlist specified")


def _default_trusted_resolvers() -> list[str]:
    return ["8.8.8.8", "8.8.4.4"]


@dataclass
class GlobalOptions:
    """Options shared by every command."""

    trusted_resolvers: list[str] = field(default_factory=_default_trusted_resolvers)
    quiet: bool = False
    debug: bool = False


@dataclass
class ResolveOptions:
    """Options of a resolve or bruteforce run."""

    bin_path: str = "massdns"

    resolver_file: str = "resolvers.txt"
    resolver_trusted_file: str = ""
    trusted_only: bool = False

    rate_limit: int = 0
    rate_limit_trusted: int = 500

    wildcard_threads: int = 100
    wildcard_tests: int = 3
    wildcard_batch_size: int = 0

    skip_sanitize: bool = False
    skip_wildcard: bool = False
    skip_validation: bool = False

    write_domains_file: str = ""
    write_massdns_file: str = ""
    write_wildcards_file: str = ""

    mode: ResolveMode = ResolveMode.RESOLVE
    domain: str = ""
    wordlist: str = ""
    domain_file: str = ""

    def validate(self, stdin_available: bool | None = None) -> None:
        """Check the options, raising OptionsError if they cannot be used.

        Setting trusted_only also turns on skip_validation. When stdin_available
        is None, standard input is inspected to see whether it is a pipe.
        """
        if self.trusted_only:
            self.skip_validation = True

        if self.mode == ResolveMode.BRUTEFORCE:
            if not self.domain and not self.domain_file:
                raise NoDomainError()

            if stdin_available is None:
                stdin_available = app.has_stdin()

            if not self.wordlist and not stdin_available:
                raise NoWordlistError()


def default_resolve_options() -> ResolveOptions:
    """Return resolve options with resolver files looked up on disk.

    resolvers.txt in the current directory is used if present; otherwise the
    files under ~/.config/puredns are used.
    """
    resolvers_path = "resolvers.txt"
    trusted_path = ""

    if not file_exists(resolvers_path):
        try:
            home = Path.home()
        except (RuntimeError, KeyError):
            home = None

        if home is not None:
            config_dir = home / ".config" / "puredns"
            resolvers_path = os.fspath(config_dir / "resolvers.txt")
            trusted_path = os.fspath(config_dir / "resolvers-trusted.txt")
            if not file_exists(trusted_path):
                trusted_path = ""

    return ResolveOptions(resolver_file=resolvers_path, resolver_trusted_file=trusted_path)


@dataclass
class Context:
    """Everything a command needs to know about the running program."""

    program_name: str = app.APP_NAME
    program_version: str = app.APP_VERSION
    program_tagline: str = app.APP_DESC
    git_branch: str = app.GIT_BRANCH
    git_revision: str = app.GIT_REVISION

    options: GlobalOptions = field(default_factory=GlobalOptions)
    stdin: IO[str] | None = None
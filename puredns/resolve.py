"""The resolve service: resolving, wildcard filtering and validation of domains."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import IO, Any, Protocol

from puredns.cachereader import CacheReader
from puredns.console import COLOR_BRIGHT_GREEN, COLOR_BRIGHT_WHITE, COLOR_RESET, Console
from puredns.domainreader import DomainReader
from puredns.fileoperation import cat, copy_file, count_lines, read_lines, write_lines
from puredns.options import Context, ResolveMode, ResolveOptions
from puredns.requirements import RequirementChecker
from puredns.resolverloader import ResolverLoader
from puredns.resultsaver import ResultFileSaver
from puredns.sanitizer import default_sanitizer
from puredns.workfiles import WorkfileCreator, Workfiles


class ResolveError(RuntimeError):
    """A step of the resolve process failed."""


@dataclass
class WildcardFilterOptions:
    """Input, output and tuning parameters for wildcard filtering."""

    cache_filename: str = ""
    domain_output_filename: str = ""
    root_output_filename: str = ""
    resolvers: list[str] = field(default_factory=list)
    queries_per_second: int = 0
    thread_count: int = 0
    resolve_test_count: int = 0
    batch_size: int = 0


class _MassResolver(Protocol):
    def resolve(
        self, reader: Any, output: str, total: int, resolvers_filename: str, qps: int
    ) -> None: ...


class _WildcardFilter(Protocol):
    def filter(
        self, opts: WildcardFilterOptions, total_count: int
    ) -> tuple[int, list[str]]: ...


def qps_per_resolver(resolver_count: int, global_qps: int) -> int:
    """Turn a global queries-per-second limit into a per-resolver limit of at least 1."""
    if resolver_count == 0:
        return 0
    return global_qps // resolver_count or 1


def _open_text(filename: str, mode: str = "r") -> IO[str]:
    return open(filename, mode, encoding="utf-8", errors="surrogateescape", newline="\n")


class Service:
    """Resolves domains, filters wildcards and validates the results."""

    def __init__(
        self,
        context: Context,
        options: ResolveOptions,
        *,
        mass_resolver: _MassResolver,
        wildcard_filter: _WildcardFilter,
        requirement_checker: Any = None,
        resolver_loader: Any = None,
        workfile_creator: Any = None,
        result_saver: Any = None,
        console: Console | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        self.context = context
        self.options = options
        self.mass_resolver = mass_resolver
        self.wildcard_filter = wildcard_filter
        self.requirement_checker = requirement_checker or RequirementChecker()
        self.resolver_loader = resolver_loader or ResolverLoader()
        self.workfile_creator = workfile_creator or WorkfileCreator()
        self.result_saver = result_saver or ResultFileSaver()
        self.console = console if console is not None else Console()
        self._stdout = stdout

        self.workfiles: Workfiles | None = None
        self.domain_count = 0

    def __enter__(self) -> Service:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close(self.context.options.debug)

    def initialize(self) -> None:
        """Check requirements, create the work files and prepare the resolvers."""
        self.requirement_checker.check(self.options)
        self.workfiles = self.workfile_creator.create()
        self._prepare_resolvers()

    def resolve(self) -> None:
        """Resolve the domains and write the results to stdout and to files."""
        reader = self._create_domain_reader()
        self._resolve_public(reader)
        self._filter_wildcards()
        self._resolve_trusted()
        self._write_results()

    def close(self, debug: bool = False) -> None:
        """Remove the work files, or report where they are kept when debugging."""
        if self.workfiles is None:
            return
        if debug:
            self.console.printf(f"\nDebug files kept in: {self.workfiles.temp_directory}\n")
        else:
            self.workfiles.close()

    def _files(self) -> Workfiles:
        if self.workfiles is None:
            raise ResolveError("service is not initialized")
        return self.workfiles

    def _prepare_resolvers(self) -> None:
        files = self._files()

        # Copy the public resolvers so that they cannot change during the run.
        if not self.options.trusted_only:
            try:
                copy_file(self.options.resolver_file, files.public_resolvers)
            except OSError as exc:
                raise ResolveError(f"unable to load public resolvers: {exc}") from exc

        try:
            self.resolver_loader.load(self.context, self.options.resolver_trusted_file)
        except OSError as exc:
            raise ResolveError(f"unable to load trusted resolvers: {exc}") from exc

        try:
            write_lines(self.context.options.trusted_resolvers, files.trusted_resolvers)
        except OSError as exc:
            raise ResolveError(
                f"unable to write trusted resolvers to temporary directory: {exc}"
            ) from exc

    def _create_domain_reader(self) -> DomainReader:
        source = self._open_source()

        domains = None
        if self.options.mode == ResolveMode.BRUTEFORCE:
            try:
                domains = self._domain_list()
            except OSError:
                source.close()
                raise

        sanitizer = None if self.options.skip_sanitize else default_sanitizer
        return DomainReader(source, domains, sanitizer)

    def _open_source(self) -> IO[str]:
        if self.context.stdin is not None:
            return self.context.stdin

        if self.options.mode == ResolveMode.RESOLVE:
            filename = self.options.domain_file
        else:
            filename = self.options.wordlist

        count = count_lines(filename)
        source = _open_text(filename)
        self.domain_count = count
        return source

    def _domain_list(self) -> list[str]:
        if self.options.domain_file:
            domains = read_lines(self.options.domain_file)
        else:
            domains = [self.options.domain]

        self.domain_count *= len(domains)
        return domains

    def _mass_resolve(self, reader: Any, output: str, resolvers: str, qps: int) -> None:
        try:
            self.mass_resolver.resolve(reader, output, self.domain_count, resolvers, qps)
        except Exception as exc:
            raise ResolveError(f"error resolving domains: {exc}") from exc

    def _resolve_public(self, reader: DomainReader) -> None:
        files = self._files()
        if self.options.trusted_only:
            resolvers, rate, kind = (
                files.trusted_resolvers,
                self.options.rate_limit_trusted,
                "trusted",
            )
        else:
            resolvers, rate, kind = files.public_resolvers, self.options.rate_limit, "public"

        self.console.printf(
            f"{COLOR_BRIGHT_WHITE}Resolving domains with {kind} resolvers{COLOR_RESET}\n"
        )
        self._mass_resolve(reader, files.massdns_public, resolvers, rate)
        self.console.printf("\n")

    def _filter_wildcards(self) -> None:
        files = self._files()

        # Without filtering, the valid domains are still needed for validation.
        if self.options.skip_wildcard:
            self._parse_cache(files.massdns_public, files.domains)
            return

        self._parse_cache(files.massdns_public)

        self.console.printf(
            f"{COLOR_BRIGHT_WHITE}Detecting wildcard root subdomains{COLOR_RESET}\n"
        )

        opts = WildcardFilterOptions(
            cache_filename=files.massdns_public,
            domain_output_filename=files.domains,
            root_output_filename=files.wildcard_roots,
            resolvers=list(self.context.options.trusted_resolvers),
            queries_per_second=self.options.rate_limit_trusted,
            thread_count=self.options.wildcard_threads,
            resolve_test_count=self.options.wildcard_tests,
            batch_size=self.options.wildcard_batch_size,
        )

        try:
            found, roots = self.wildcard_filter.filter(opts, self.domain_count)
        except Exception as exc:
            raise ResolveError(f"unable to filter wildcard domains: {exc}") from exc

        if roots:
            self.console.printf(
                f"\n{COLOR_BRIGHT_WHITE}Found {COLOR_BRIGHT_GREEN}{len(roots)}"
                f"{COLOR_BRIGHT_WHITE} wildcard roots:{COLOR_RESET}\n"
            )
            for root in roots:
                self.console.printf(f"*.{root}\n")

        self.domain_count = found
        self.console.printf("\n")

    def _parse_cache(self, cache_filename: str, domain_filename: str | None = None) -> None:
        """Count the valid domains in a cache, saving them if domain_filename is given."""
        with _open_text(cache_filename) as cache_file:
            reader = CacheReader(cache_file)
            if domain_filename:
                with _open_text(domain_filename, "w") as domain_file:
                    self.domain_count = reader.read(domain_file)
            else:
                self.domain_count = reader.read()

    def _resolve_trusted(self) -> None:
        if self.options.skip_validation:
            return

        files = self._files()
        try:
            domain_file = _open_text(files.domains)
        except OSError:
            return

        with domain_file:
            self.console.printf(
                f"{COLOR_BRIGHT_WHITE}Validating domains against trusted resolvers"
                f"{COLOR_RESET}\n"
            )
            self._mass_resolve(
                domain_file,
                files.massdns_trusted,
                files.trusted_resolvers,
                self.options.rate_limit_trusted,
            )

        self.console.printf("\n")
        self._parse_cache(files.massdns_trusted, files.domains)

    def _write_results(self) -> None:
        files = self._files()

        if self.domain_count > 0:
            self.console.printf(
                f"{COLOR_BRIGHT_WHITE}Found {COLOR_BRIGHT_GREEN}{self.domain_count}"
                f"{COLOR_BRIGHT_WHITE} valid domains:{COLOR_RESET}\n"
            )
        else:
            self.console.printf(
                f"\n{COLOR_BRIGHT_WHITE}No valid domains remaining.{COLOR_RESET}\n"
            )

        stdout = self._stdout if self._stdout is not None else sys.stdout
        try:
            cat([files.domains], stdout)
        except OSError as exc:
            raise ResolveError(f"unable to read domain file: {exc}") from exc

        try:
            self.result_saver.save(files, self.options)
        except OSError as exc:
            raise ResolveError(f"unable to save results: {exc}") from exc
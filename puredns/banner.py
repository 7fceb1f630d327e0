"""Program logo and a summary of the options chosen for a resolve run."""

from __future__ import annotations

from puredns.console import (
    COLOR_BRIGHT_BLUE,
    COLOR_BRIGHT_CYAN,
    COLOR_BRIGHT_GREEN,
    COLOR_BRIGHT_WHITE,
    COLOR_BRIGHT_YELLOW,
    COLOR_RESET,
    COLOR_WHITE,
    Console,
)
from puredns.options import Context, ResolveMode, ResolveOptions, default_resolve_options

_LOGO = (
    "                          _           \n",
    "                         | |          \n",
    " _ __  _   _ _ __ ___  __| |_ __  ___ \n",
    "| '_ \\| | | | '__/ _ \\/ _` | '_ \\/ __|\n",
    "| |_) | |_| | | |  __/ (_| | | | \\__ \\\n",
    "| .__/ \\__,_|_|  \\___|\\__,_|_| |_|___/\n",
    "| |                                   \n",
)

_RULE = COLOR_BRIGHT_WHITE + "-" * 60 + "\n" + COLOR_RESET

_LABEL = COLOR_BRIGHT_WHITE
_SKIP_LABEL = COLOR_BRIGHT_YELLOW
_VALUE = COLOR_WHITE
_TICK = f"{_LABEL}[{COLOR_BRIGHT_BLUE}+{_LABEL}]"
_TICK_WRITE = f"{_LABEL}[{COLOR_BRIGHT_GREEN}+{_LABEL}]"


class Banner:
    """Prints the program banner and version number to a console."""

    def __init__(self, context: Context, console: Console | None = None) -> None:
        self.context = context
        self.console = console if console is not None else Console()

    def print_banner(self) -> None:
        """Print the logo along with the program name, tagline and version."""
        ctx = self.context
        version = ctx.program_version
        if ctx.git_branch:
            version = f"{ctx.git_branch}-{ctx.git_revision}"

        padding = " " * (34 - len(version) - len(ctx.program_name))

        out = self.console.printf
        out(COLOR_BRIGHT_BLUE)
        for line in _LOGO:
            out(line)
        out(
            f"|_|{padding}{COLOR_BRIGHT_CYAN}{ctx.program_name} "
            f"{COLOR_BRIGHT_BLUE}{version}\n"
        )
        out("\n")
        out(f"{COLOR_BRIGHT_WHITE}Fast and accurate DNS resolving and bruteforcing\n")
        out(COLOR_RESET + "\n")

    def print_with_resolve_options(self, opts: ResolveOptions) -> None:
        """Print the banner followed by the options selected for a resolve run."""
        self.print_banner()
        out = self.console.printf
        out(_RULE)

        defaults = default_resolve_options()
        bruteforce = opts.mode == ResolveMode.BRUTEFORCE

        if self.context.stdin is not None:
            source = "stdin"
        elif bruteforce:
            source = opts.wordlist
        else:
            source = opts.domain_file

        def option(label: str, value: object, tick: str = _TICK) -> None:
            out(f"{tick} {label:<21}:{_VALUE} {value}\n")

        if bruteforce:
            option("Mode", "bruteforce")
            if opts.domain_file:
                option("Domains", opts.domain_file)
            else:
                option("Domain", opts.domain)
            option("Wordlist", source)
        else:
            option("Mode", "resolve")
            option("File", source)

        if opts.trusted_only:
            option("Trusted Only", "true")
        else:
            option("Resolvers", opts.resolver_file)

        if opts.resolver_trusted_file:
            option("Trusted Resolvers", opts.resolver_trusted_file)

        if not opts.trusted_only:
            rate = f"{opts.rate_limit} qps" if opts.rate_limit != 0 else "unlimited"
            option("Rate Limit", rate)

        option("Rate Limit (Trusted)", f"{opts.rate_limit_trusted} qps")
        option("Wildcard Threads", opts.wildcard_threads)
        option("Wildcard Tests", opts.wildcard_tests)

        if opts.wildcard_batch_size != defaults.wildcard_batch_size:
            option("Wildcard Batch Size", opts.wildcard_batch_size)

        if opts.write_domains_file:
            option("Write Domains", opts.write_domains_file, _TICK_WRITE)
        if opts.write_massdns_file:
            option("Write Massdns", opts.write_massdns_file, _TICK_WRITE)
        if opts.write_wildcards_file:
            option("Write Wildcards", opts.write_wildcards_file, _TICK_WRITE)

        if opts.skip_sanitize:
            out(f"{_SKIP_LABEL}[+] Skip Sanitize\n")
        if opts.skip_wildcard:
            out(f"{_SKIP_LABEL}[+] Skip Wildcard Detection\n")
        if not opts.trusted_only and opts.skip_validation:
            out(f"{_SKIP_LABEL}[+] Skip Validation\n")

        out(_RULE)
        out("\n")
# puredns

Building blocks for fast and accurate DNS resolving and subdomain
bruteforcing with massdns.

The package takes a list of domains, or a wordlist combined with one or more
root domains, hands them to a mass resolver for a first pass with public
resolvers, passes the answers to a wildcard filter, and validates what
remains with trusted resolvers to weed out DNS poisoning.

## Requirements

Python 3.10 or later. The package has no third-party dependencies.

## What the package does not do

- There is no command-line program. Everything is used from Python.
- It does not run massdns itself and contains no wildcard detection
  algorithm. `puredns.resolve.Service` must be given a `mass_resolver` and a
  `wildcard_filter` object that do this work (see below).
- `puredns.requirements.RequirementChecker` only checks, by default, that the
  configured binary can be found on the `PATH`; it does not run it.

## Modules

### `puredns.sanitizer`

`default_sanitizer(domain)` lower-cases a domain, strips a leading `*.` and
returns an empty string if anything other than `a-z`, `0-9`, `-`, `_` and `.`
remains.

```python
from puredns.sanitizer import default_sanitizer

default_sanitizer("EXAMPLE.COM")     # "example.com"
default_sanitizer("*.example.com")   # "example.com"
default_sanitizer("example+.com")    # ""
```

### `puredns.fileoperation`

Line-oriented helpers for text files:

```python
from puredns import fileoperation

fileoperation.write_lines(["example.com", "example.org"], "domains.txt")
fileoperation.append_lines(["example.net"], "domains.txt")
fileoperation.read_lines("domains.txt")   # ["example.com", "example.org", "example.net"]
fileoperation.count_lines("domains.txt")  # 3 (counts newline characters)
fileoperation.file_exists("domains.txt")  # True
```

Also available: `append_word(src, dest, sep, word)`, `cat(filenames, writer)`,
`copy_file(src, dest)` and the stream versions `append_word_io`, `cat_io`,
`copy_stream`, `count_newlines` and `write_lines_io`. Errors from the file
system are raised as `OSError`.

### `puredns.domainreader`

`DomainReader(source, domains=None, sanitizer=None)` turns a text stream into
newline-terminated domains. Without `domains`, every line of the source is a
domain. With `domains`, every line is a word that is prefixed to each domain,
or substituted for every `*` in it. A domain rejected by the sanitizer still
yields an empty line. The source is closed once exhausted. The reader offers
`read(size)` and iteration line by line.

```python
import io
from puredns.domainreader import DomainReader
from puredns.sanitizer import default_sanitizer

reader = DomainReader(io.StringIO("www\nmail\n"), ["example.com"], default_sanitizer)
list(reader)  # ["www.example.com\n", "mail.example.com\n"]
```

### `puredns.cachereader`

`CacheReader` reads a massdns answer file written in the `-o Snl` format.
`read(writer=None, cache=None, max_count=0)` returns the number of valid
domains, writes each one once to `writer`, and adds its `A`, `AAAA` and
`CNAME` answers to a `DNSCache`. A positive `max_count` stops after that many
domains; the next call resumes where the last one stopped.

```python
import io
from puredns.cachereader import CacheReader, DNSCache

data = "www.example.com. CNAME example.com.\nexample.com. A 127.0.0.1\n"
cache, out = DNSCache(), io.StringIO()
CacheReader(io.StringIO(data)).read(out, cache)   # 1
out.getvalue()                                    # "www.example.com\n"
cache.find("www.example.com")
# [DNSAnswer(type=RRType.CNAME, answer='example.com'),
#  DNSAnswer(type=RRType.A, answer='127.0.0.1')]
```

### `puredns.options`

`default_resolve_options()` returns a `ResolveOptions` using `resolvers.txt`
in the current directory, or else `~/.config/puredns/resolvers.txt` (and
`resolvers-trusted.txt` there if it exists), a trusted rate limit of 500
queries per second, 100 wildcard threads and 3 wildcard tests.
`ResolveOptions.validate(stdin_available=None)` turns on `skip_validation`
when `trusted_only` is set and, in `ResolveMode.BRUTEFORCE`, raises
`NoDomainError` or `NoWordlistError` (both `OptionsError`). `Context` holds the
program name, version and tagline, `GlobalOptions` (trusted resolvers,
`quiet`, `debug`) and an optional stdin stream.

### `puredns.console` and `puredns.banner`

`Console` writes coloured `message`, `success`, `warning` and `error` lines,
raw text with `printf`, and `fatal` text before calling its exit handler with
`-1`; `silence()` discards further output. Output goes to standard error
unless another stream is given. `Banner(context, console)` prints the logo
with `print_banner()` and a summary of a run with
`print_with_resolve_options(opts)`.

### Resolvers, work files and results

- `puredns.resolverloader`: `load_resolvers(reader)` returns the non-blank,
  stripped lines; `ResolverLoader.load(context, filename)` replaces the
  context's trusted resolvers with them.
- `puredns.workfiles`: `WorkfileCreator.create()` makes a temporary
  directory of empty work files and returns a `Workfiles`; `close()` removes
  it.
- `puredns.resultsaver`: `ResultFileSaver.save(workfiles, opts)` copies the
  domains, the public massdns cache and the wildcard roots to the output
  files named in the options.

### `puredns.resolve`

`qps_per_resolver(resolver_count, global_qps)` shares a global rate between
resolvers, never below one:

```python
from puredns.resolve import qps_per_resolver

qps_per_resolver(2, 10)   # 5
qps_per_resolver(10, 1)   # 1
qps_per_resolver(0, 10)   # 0
```

`Service(context, options, *, mass_resolver, wildcard_filter, ...)` runs the
pipeline. The `mass_resolver` needs a method
`resolve(reader, output, total, resolvers_filename, qps)` that writes massdns
`-o Snl` output to the file `output`; the `wildcard_filter` needs
`filter(opts, total_count)` taking a `WildcardFilterOptions` and returning
`(found, roots)`. `initialize()` checks requirements, creates the work files
and prepares the resolver lists; `resolve()` runs the public pass, wildcard
filtering, trusted validation and prints the valid domains to standard
output; `close(debug)` removes the work files unless `debug` is true. A
failed step raises `ResolveError`. The service is also a context manager.

### `puredns.sponsors` and `puredns.app`

`show_sponsors(url, out=None)` downloads a text file and writes it, followed
by a newline, to `out` (standard output by default). `app.has_stdin()`
reports whether standard input is a pipe.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.
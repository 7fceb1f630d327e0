"""Building blocks for DNS resolving and subdomain bruteforcing with wildcard filtering."""

__version__ = "2.1.2"
"""Entrypoints (inbound adapters) for PKGCFG.

Expose the library to the outside world through the ``pkgcfg`` command line:
parse inputs into `Uri` values, call the domain functions, and present
results.

Dependency rule: may import `pkgcfg.domain` and `pkgcfg.adapters`.
"""

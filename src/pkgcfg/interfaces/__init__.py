"""Interfaces (application boundary) for PKGCFG.

Defines framework-free contracts (ABCs) for collaborators that touch the
outside world, such as loading configuration bytes for a URI.

Dependency rule: may import value types from `pkgcfg.domain`, nothing else
from `pkgcfg.*`. It may be imported by `pkgcfg.adapters` and
`pkgcfg.entrypoints`.
"""

"""Adapters (infrastructure) for PKGCFG.

Provide concrete implementations of the interfaces in `pkgcfg.interfaces`
(e.g., loading bytes from the local filesystem or over HTTP).

Dependency rule: may import `pkgcfg.domain`; the domain must not import this
package.
"""

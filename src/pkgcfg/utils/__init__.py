"""Support namespace for cross-cutting, dependency-light helpers.

Scope:
- Small, stateless helpers with minimal dependencies (e.g., path string
  utilities).
- No business rules and no I/O beyond reading configuration from the
  environment through `pkgcfg.config`.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""

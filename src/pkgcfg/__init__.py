"""PKGCFG

Text and URI primitives for package-resolution configuration files:
package-name validation, `package:` URI validation, and relativization of
one URI against a base URI.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

"""The ``pkgcfg`` command line interface."""

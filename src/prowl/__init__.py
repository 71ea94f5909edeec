"""Prowl — navigation-graph validation for declared site routes.

Given the pages of an application and the links declared between them,
Prowl builds a directed graph and reports pages unreachable from the root
(orphans), pages with no way out (dead-ends), navigation cycles, and pages
nested too deeply, summarized as a 0–10 health score.

Quick start::

    import prowl

    result = prowl.validate([
        {"path": "/", "exitPoints": ["/about"]},
        {"path": "/about", "exitPoints": ["/"]},
    ])
    result.health_score       # 10.0

Project mode (reads routes.yaml and prowl.yaml from a directory)::

    prowl.check("my-site/")   # Validate and print a summary
    prowl.watch("my-site/")   # Re-validate on every change

The engine is pure: the same route set always produces a byte-identical
report, and no I/O happens outside ``prowl.app``.

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ProwlConfig",
    "ProwlError",
    "ValidationResult",
    "__version__",
    "check",
    "validate",
    "watch",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import prowl`` fast while providing a clean top-level API.
    """
    if name == "ProwlConfig":
        from prowl.config import ProwlConfig

        return ProwlConfig

    if name == "ProwlError":
        from prowl._errors import ProwlError

        return ProwlError

    if name == "ValidationResult":
        from prowl.report.result import ValidationResult

        return ValidationResult

    if name == "validate":
        from prowl.report.reporter import validate

        return validate

    if name == "check":
        from prowl.app import check

        return check

    if name == "watch":
        from prowl.app import watch

        return watch

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

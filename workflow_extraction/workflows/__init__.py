from .extraction_pipeline import run, run_sync  # noqa: F401

__all__ = ["run", "run_sync"]

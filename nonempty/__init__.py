__version__ = "0.1.0"

from nonempty.models.non_empty_sequence import NonEmptySequence  # noqa: E402

__all__ = ["NonEmptySequence", "__version__"]

"""canhas — write-once and URL validation rules for ORM-backed records."""

from canhas.domain.errors import ErrorCollection, RecordInvalid, ValidationFailure
from canhas.domain.record import TrackedRecord
from canhas.domain.types import ErrorKind
from canhas.validators.url import UrlValidator
from canhas.validators.validations import Validations
from canhas.validators.write_once import WriteOnceValidator

__version__ = "0.3.0"

__all__ = [
    "ErrorCollection",
    "ErrorKind",
    "RecordInvalid",
    "TrackedRecord",
    "UrlValidator",
    "ValidationFailure",
    "Validations",
    "WriteOnceValidator",
    "__version__",
]

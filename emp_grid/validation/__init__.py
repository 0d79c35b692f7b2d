from .errors import ValidationIssue, ValidationError
from .dataset_validation import validate_dataset, warn_on_invalid_dataset

__all__ = ["ValidationIssue", "ValidationError", "validate_dataset", "warn_on_invalid_dataset"]

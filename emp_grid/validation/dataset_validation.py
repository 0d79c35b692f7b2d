from __future__ import annotations

import logging
from collections import Counter
from numbers import Real

from emp_grid.core.dataset import EmployeeDataset
from emp_grid.validation.errors import ValidationIssue, ValidationError

RATING_MIN = 0.0
RATING_MAX = 5.0


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_dataset(ds: EmployeeDataset) -> None:
    """
    Data-quality checks on the snapshot.

    None of these stop the grid from rendering (the renderers cope with bad
    values); they exist so problems in the dataset file show up in the logs.
    """
    issues: list[ValidationIssue] = []

    if len(ds) == 0:
        issues.append(ValidationIssue("DATASET_EMPTY", "Dataset has no employee records."))

    # duplicate ids break row identity in the grid (selection, getRowId)
    id_counts = Counter(r.id for r in ds)
    for rec_id, count in sorted(id_counts.items(), key=lambda kv: str(kv[0])):
        if count > 1:
            issues.append(ValidationIssue("RECORD_DUPLICATE_ID", f"appears {count} times.", rec_id))

    known_names = ds.names()
    for r in ds:
        if not _is_number(r.salary) or r.salary < 0:
            issues.append(ValidationIssue("RECORD_SALARY", f"salary {r.salary!r} is not a non-negative number.", r.id))

        if not _is_number(r.performance_rating) or not RATING_MIN <= r.performance_rating <= RATING_MAX:
            issues.append(
                ValidationIssue(
                    "RECORD_RATING",
                    f"performanceRating {r.performance_rating!r} outside [{RATING_MIN}, {RATING_MAX}].",
                    r.id,
                )
            )

        if not isinstance(r.skills, tuple):
            issues.append(ValidationIssue("RECORD_SKILLS", "skills is not a list.", r.id))

        if r.manager is not None and r.manager not in known_names:
            issues.append(ValidationIssue("RECORD_MANAGER", f"manager {r.manager!r} is not a known employee.", r.id))

    if issues:
        raise ValidationError(issues)


def warn_on_invalid_dataset(ds: EmployeeDataset, logger: logging.Logger) -> bool:
    """
    Validate the dataset and log one warning per issue.

    Warn-only: the app still runs. Returns True when the dataset is clean.
    """
    try:
        validate_dataset(ds)
    except ValidationError as e:
        for issue in e.issues:
            logger.warning(
                "Dataset %r validation issue %s",
                ds.name,
                issue,
                extra={"code": issue.code, "record_id": issue.record_id},
            )
        return False
    return True

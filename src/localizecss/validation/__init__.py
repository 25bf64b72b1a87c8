from localizecss.validation.completeness import (
    check_completeness,
    find_missing,
    report_missing,
)

__all__ = ["check_completeness", "find_missing", "report_missing"]

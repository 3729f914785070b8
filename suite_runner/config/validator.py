"""Run configuration validator.

Validates parsed RunConfig objects against business rules.
"""

from .schema import RunConfig, ValidationError, ValidationResult, VALID_REPORTERS


def validate_config(config: RunConfig) -> ValidationResult:
    """Validate a parsed RunConfig object.

    Checks:
    - Reporter name
    - Module identifiers are non-empty
    - Report options are consistent

    Args:
        config: Parsed RunConfig to validate.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    if config.reporter not in VALID_REPORTERS:
        errors.append(ValidationError(
            path="reporter",
            message=f"Invalid reporter '{config.reporter}'. Must be one of: {', '.join(sorted(VALID_REPORTERS))}",
        ))

    for i, module in enumerate(config.modules):
        if not module.strip():
            errors.append(ValidationError(
                path=f"modules[{i}]",
                message="Module identifier must not be empty.",
            ))

    seen = set()
    for i, module in enumerate(config.modules):
        if module in seen:
            warnings.append(ValidationError(
                path=f"modules[{i}]",
                message=f"Module '{module}' is listed more than once.",
                severity="warning",
            ))
        seen.add(module)

    if config.report_dir and not config.save_report:
        warnings.append(ValidationError(
            path="report_dir",
            message="'report_dir' has no effect unless 'save_report' is true.",
            severity="warning",
        ))

    if not config.modules:
        warnings.append(ValidationError(
            path="modules",
            message="No modules configured. Nothing will run.",
            severity="warning",
        ))

    return ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )

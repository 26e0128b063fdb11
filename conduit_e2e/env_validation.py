"""Validation of the environment variables the suite depends on.

Local runs must provide real credentials:
- USER_EMAIL: a syntactically valid email address
- USER_PASSWORD: at least 6 characters

CI runs (CI set to any non-empty value) skip the checks; secrets may be
injected differently or the pipeline may run without live credentials.
Missing values become "".

An optional .env file next to the working directory is read first; variables
already present in the process environment take precedence over it.

Nothing in here terminates the process. ``validate_env`` raises
``MissingOrInvalidEnvironment`` and the entry point (``main`` or the pytest
session setup) decides what to do about it.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, TextIO

from dotenv import dotenv_values
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from conduit_e2e.errors import MissingOrInvalidEnvironment, ValidationIssue

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"
MIN_ENV_PASSWORD_LENGTH = 6
REMEDIATION_HINT = "💡 Check your .env file and ensure all required variables are set."


@dataclass(frozen=True)
class EnvironmentConfig:
    """Validated environment, immutable for the lifetime of the run."""

    user_email: str
    user_password: str
    is_ci: bool = False
    junit_report_path: Optional[str] = None


class _EnvironmentSchema(BaseModel):
    """Rule set per variable; each field reports its first failing rule."""

    model_config = ConfigDict(extra="ignore")

    USER_EMAIL: str = Field(default="", validate_default=True)
    USER_PASSWORD: str = Field(default="", validate_default=True)
    JUNIT_FILE: Optional[str] = None

    @field_validator("USER_EMAIL")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("required", "USER_EMAIL is required in .env file")
        try:
            validate_email(value, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError:
            raise PydanticCustomError("email", "USER_EMAIL must be a valid email address")
        return value

    @field_validator("USER_PASSWORD")
    @classmethod
    def _check_password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("required", "USER_PASSWORD is required in .env file")
        if len(value) < MIN_ENV_PASSWORD_LENGTH:
            raise PydanticCustomError(
                "too_short",
                "USER_PASSWORD must be at least {min_length} characters long",
                {"min_length": MIN_ENV_PASSWORD_LENGTH},
            )
        return value


def read_environment(env_file: Optional[str] = DEFAULT_ENV_FILE) -> Dict[str, str]:
    """Return the process environment layered over the optional .env file."""
    merged: Dict[str, str] = {}
    if env_file and os.path.exists(env_file):
        merged.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
        logger.debug("Loaded %d values from %s", len(merged), env_file)
    merged.update(os.environ)
    return merged


def is_ci_environment(environ: Mapping[str, str]) -> bool:
    """Any non-empty CI value selects CI mode, whatever it says."""
    return bool(environ.get("CI"))


def validate_env(environ: Optional[Mapping[str, str]] = None) -> EnvironmentConfig:
    """Validate the environment and return an immutable configuration.

    Args:
        environ: Variables to validate (default: ``read_environment()``)

    Returns:
        EnvironmentConfig whose fields match the input exactly

    Raises:
        MissingOrInvalidEnvironment: listing every failing variable
            (local mode only)
    """
    if environ is None:
        environ = read_environment()

    if is_ci_environment(environ):
        logger.info("CI environment detected, skipping credential validation")
        return EnvironmentConfig(
            user_email=environ.get("USER_EMAIL") or "",
            user_password=environ.get("USER_PASSWORD") or "",
            is_ci=True,
            junit_report_path=environ.get("JUNIT_FILE"),
        )

    try:
        parsed = _EnvironmentSchema.model_validate(dict(environ))
    except ValidationError as exc:
        raise MissingOrInvalidEnvironment(
            ValidationIssue(field=".".join(str(part) for part in error["loc"]), message=error["msg"])
            for error in exc.errors()
        ) from None

    return EnvironmentConfig(
        user_email=parsed.USER_EMAIL,
        user_password=parsed.USER_PASSWORD,
        is_ci=False,
        junit_report_path=parsed.JUNIT_FILE,
    )


def format_environment_failure(error: MissingOrInvalidEnvironment) -> str:
    """Human readable report: one line per failing variable plus a hint."""
    lines = ["", "❌ Environment variable validation failed:", ""]
    lines.extend(f"  • {issue.field}: {issue.message}" for issue in error.issues)
    lines.extend(["", REMEDIATION_HINT, ""])
    return "\n".join(lines)


def report_environment_failure(error: MissingOrInvalidEnvironment, stream: TextIO = sys.stderr) -> None:
    print(format_environment_failure(error), file=stream)


def main(argv: Optional[list[str]] = None) -> int:
    """Check the environment before a run; exit status 1 on failure."""
    parser = argparse.ArgumentParser(
        prog="conduit-check-env",
        description="Validate the environment variables required by the conduit test suite.",
    )
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help="Path to the .env file to read (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = validate_env(read_environment(args.env_file))
    except MissingOrInvalidEnvironment as exc:
        report_environment_failure(exc)
        return 1

    logger.info(
        "Environment OK (user=%s, ci=%s, junit=%s)",
        config.user_email or "<unset>",
        config.is_ci,
        config.junit_report_path or "<none>",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Report Validation Module

Validates serialized analysis reports against the report JSON Schema, so that
the field names and shapes consumed by downstream collaborators stay stable.
"""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from tablequality.models.report import AnalysisFailure, AnalysisReport


class ReportValidationError(Exception):
    """Custom exception for report validation errors."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class ReportValidator:
    """Validates report payloads against the JSON Schema."""

    def __init__(self, schema_path: Path | None = None) -> None:
        """Initialize validator with schema.

        Args:
        ----
            schema_path: Path to report JSON Schema file. If None, uses default.

        """
        self.logger = logging.getLogger(self.__class__.__name__)

        if schema_path is None:
            schema_path = Path(__file__).parent / "schemas" / "analysis_report.schema.json"

        if not schema_path.exists():
            msg = f"Report schema file not found: {schema_path}"
            raise FileNotFoundError(msg)

        with schema_path.open(encoding="utf-8") as f:
            self.schema = json.load(f)

        self.validator = jsonschema.Draft7Validator(self.schema)

        self.logger.debug(f"Report validator initialized with schema: {schema_path}")

    def validate_report(
        self,
        report: AnalysisReport | AnalysisFailure,
        raise_on_error: bool = True,
    ) -> bool:
        """Validate a report model by serializing it first.

        Args:
        ----
            report: Result of an analysis
            raise_on_error: Whether to raise exception on validation errors

        Returns:
        -------
            True if valid, False if invalid (when raise_on_error=False)

        """
        return self.validate_payload(
            report.to_payload(), raise_on_error, source_name=report.file_name
        )

    def validate_payload(
        self,
        payload: dict[str, Any],
        raise_on_error: bool = True,
        source_name: str = "report payload",
    ) -> bool:
        """Validate a report payload dictionary.

        Args:
        ----
            payload: Report as a JSON-compatible dictionary
            raise_on_error: Whether to raise exception on validation errors
            source_name: Name/path for error messages

        Returns:
        -------
            True if valid, False if invalid (when raise_on_error=False)

        Raises:
        ------
            ReportValidationError: If validation fails and raise_on_error=True

        """
        try:
            self.validator.validate(payload)
            self._validate_consistency(payload)

            self.logger.debug(f"Report validation passed for {source_name}")
            return True

        except ValidationError as e:
            error_msg = f"Schema validation failed for {source_name}: {e.message}"
            if e.absolute_path:
                error_msg += f" at path: {'.'.join(str(p) for p in e.absolute_path)}"

            if raise_on_error:
                raise ReportValidationError(error_msg, [error_msg]) from e
            self.logger.error(error_msg)
            return False

        except ValueError as e:
            error_msg = f"Consistency check failed for {source_name}: {e}"
            if raise_on_error:
                raise ReportValidationError(error_msg, [error_msg]) from e
            self.logger.error(error_msg)
            return False

    def validate_file(self, report_path: Path, raise_on_error: bool = True) -> bool:
        """Validate a report stored as JSON.

        Args:
        ----
            report_path: Path to the report JSON file
            raise_on_error: Whether to raise exception on validation errors

        Returns:
        -------
            True if valid, False if invalid (when raise_on_error=False)

        Raises:
        ------
            ReportValidationError: If validation fails and raise_on_error=True
            FileNotFoundError: If file doesn't exist

        """
        if not report_path.exists():
            msg = f"Report file not found: {report_path}"
            raise FileNotFoundError(msg)

        try:
            with report_path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except json.JSONDecodeError as e:
            error_msg = f"Invalid JSON in {report_path}: {e}"
            if raise_on_error:
                raise ReportValidationError(error_msg) from e
            self.logger.error(error_msg)
            return False

        return self.validate_payload(payload, raise_on_error, str(report_path))

    def get_validation_errors(self, payload: dict[str, Any]) -> list[str]:
        """Get list of validation errors without raising exceptions.

        Args:
        ----
            payload: Report as a JSON-compatible dictionary

        Returns:
        -------
            List of error messages (empty if valid)

        """
        errors = []

        for error in self.validator.iter_errors(payload):
            error_msg = f"Schema error: {error.message}"
            if error.absolute_path:
                error_msg += (
                    f" at path: {'.'.join(str(p) for p in error.absolute_path)}"
                )
            errors.append(error_msg)

        if not errors:
            try:
                self._validate_consistency(payload)
            except ValueError as e:
                errors.append(f"Consistency error: {e}")

        return errors

    def _validate_consistency(self, payload: dict[str, Any]) -> None:
        """Check cross-field rules JSON Schema cannot express.

        Raises:
        ------
            ValueError: If counts or column listings disagree

        """
        if "error" in payload:
            return

        columns = payload["columns"]
        if payload["columnCount"] != len(columns):
            msg = f"columnCount {payload['columnCount']} != {len(columns)} columns"
            raise ValueError(msg)

        if list(payload["columnAnalysis"]) != columns:
            msg = "columnAnalysis keys must match columns in order"
            raise ValueError(msg)

        for name, profile in payload["columnAnalysis"].items():
            if profile["totalCount"] != payload["rowCount"]:
                msg = f"Column '{name}' totalCount does not match rowCount"
                raise ValueError(msg)
            if profile["uniqueCount"] > profile["totalCount"] - profile["nullCount"]:
                msg = f"Column '{name}' has more unique values than non-null values"
                raise ValueError(msg)


def validate_report_file(file_path: str | Path, schema_path: Path | None = None) -> bool:
    """Validate a single report JSON file.

    Args:
    ----
        file_path: Path to report file
        schema_path: Optional path to schema file

    Returns:
    -------
        True if valid, False otherwise

    """
    validator = ReportValidator(schema_path)
    return validator.validate_file(Path(file_path), raise_on_error=False)

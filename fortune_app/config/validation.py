"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

OUTPUT_FORMATS = ("pretty", "json")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_seasonal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate seasonal adjustment parameters."""
        errors = []

        if "enabled" in params and not isinstance(params["enabled"], bool):
            errors.append(ValidationError(
                field="seasonal.enabled",
                message="Must be a boolean",
                value=params["enabled"]
            ))

        for key in ("early_year_start_month", "early_year_end_month"):
            if key in params:
                value = params[key]
                if not _is_int(value) or not 1 <= value <= 12:
                    errors.append(ValidationError(
                        field=f"seasonal.{key}",
                        message="Must be an integer month between 1 and 12",
                        value=value
                    ))

        start = params.get("early_year_start_month")
        end = params.get("early_year_end_month")
        if _is_int(start) and _is_int(end) and start > end:
            errors.append(ValidationError(
                field="seasonal.early_year_end_month",
                message="Must not be before early_year_start_month",
                value=end
            ))

        return errors

    @staticmethod
    def validate_message_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate message assembly parameters."""
        errors = []

        for key in ("separator", "absent_placeholder"):
            if key in params and not isinstance(params[key], str):
                errors.append(ValidationError(
                    field=f"message.{key}",
                    message="Must be a string",
                    value=params[key]
                ))

        if "collapse_empty_fragments" in params and not isinstance(params["collapse_empty_fragments"], bool):
            errors.append(ValidationError(
                field="message.collapse_empty_fragments",
                message="Must be a boolean",
                value=params["collapse_empty_fragments"]
            ))

        return errors

    @staticmethod
    def validate_trait_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trait lookup parameters."""
        errors = []

        if "fallback_key" in params:
            value = params["fallback_key"]
            if not _is_int(value) or not 1 <= value <= 9:
                errors.append(ValidationError(
                    field="traits.fallback_key",
                    message="Must be an integer between 1 and 9",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_seed_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rolling hash parameters."""
        errors = []

        if "multiplier" in params:
            value = params["multiplier"]
            if not _is_int(value) or value <= 1:
                errors.append(ValidationError(
                    field="seed.multiplier",
                    message="Must be an integer greater than 1",
                    value=value
                ))

        if "modulus_bits" in params:
            value = params["modulus_bits"]
            if not _is_int(value) or not 8 <= value <= 64:
                errors.append(ValidationError(
                    field="seed.modulus_bits",
                    message="Must be an integer between 8 and 64",
                    value=value
                ))

        for key in ("signed", "utf16_code_units"):
            if key in params and not isinstance(params[key], bool):
                errors.append(ValidationError(
                    field=f"seed.{key}",
                    message="Must be a boolean",
                    value=params[key]
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rendering parameters."""
        errors = []

        if "format" in params and params["format"] not in OUTPUT_FORMATS:
            errors.append(ValidationError(
                field="output.format",
                message=f"Must be one of {', '.join(OUTPUT_FORMATS)}",
                value=params["format"]
            ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        section_validators = {
            "seasonal": cls.validate_seasonal_params,
            "message": cls.validate_message_params,
            "traits": cls.validate_trait_params,
            "seed": cls.validate_seed_params,
            "output": cls.validate_output_params,
        }

        for section, validator in section_validators.items():
            params = config.get(section, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validator(params))

        return errors

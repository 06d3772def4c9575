"""Settings for the step.

Nothing needs to be configured for the step to run. Settings are read from ROS_*
environment variables, overridden by anything given on the command line, and
validated against SETTINGS_SCHEMA, which also supplies the defaults.
"""

from collections.abc import Mapping

from jsonschema import Draft202012Validator, validators
from jsonschema.exceptions import ValidationError

import randomoutputpy.steplogging
from randomoutputpy.exceptions import InvalidConfigError

logger = randomoutputpy.steplogging.init_logging(__name__)

RUNNERS = ["auto", "file", "command"]
LOG_LEVELS = ["DEBUG", "VERBOSE2", "VERBOSE1", "INFO", "WARNING", "ERROR", "CRITICAL"]

SETTINGS_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "seed": {"type": ["integer", "null"], "default": None},
        "runner": {"type": "string", "enum": RUNNERS, "default": "auto"},
        "log_json": {"type": "boolean", "default": False},
        "log_level": {"type": "string", "enum": LOG_LEVELS, "default": "INFO"},
    },
    "additionalProperties": False,
}


def _extend_with_default(validator_class):  # type: ignore[no-untyped-def]
    validate_properties = validator_class.VALIDATORS["properties"]

    def set_defaults(validator, properties, instance, schema):  # type: ignore[no-untyped-def]
        for _property, subschema in properties.items():
            if "default" in subschema:
                instance.setdefault(_property, subschema["default"])

        yield from validate_properties(
            validator,
            properties,
            instance,
            schema,
        )

    return validators.extend(
        validator_class,
        {"properties": set_defaults},
    )


DefaultValidatingValidator = _extend_with_default(Draft202012Validator)  # type: ignore[no-untyped-call]


def _settings_from_environment(environ: Mapping[str, str]) -> dict:
    settings: dict = {}

    if seed := environ.get("ROS_SEED"):
        try:
            settings["seed"] = int(seed)
        except ValueError as ex:
            raise InvalidConfigError(
                f"ROS_SEED must be an integer, got '{seed}'"
            ) from ex

    if runner := environ.get("ROS_RUNNER"):
        settings["runner"] = runner.lower()

    if environ.get("ROS_LOG_JSON"):
        settings["log_json"] = environ["ROS_LOG_JSON"] == "1"

    if log_level := environ.get("ROS_LOG_LEVEL"):
        settings["log_level"] = log_level.upper()

    return settings


def load_settings(environ: Mapping[str, str], overrides: dict | None = None) -> dict:
    """Build and validate the step settings.

    Args:
        environ (Mapping[str, str]): The environment to read ROS_* variables from
        overrides (dict, optional): Values from the command line. Entries that are
            None are ignored.

    Raises:
        InvalidConfigError: Raised if a setting is not valid

    Returns:
        dict: The settings, with defaults filled in
    """
    settings = _settings_from_environment(environ)

    if overrides:
        settings.update(
            {key: value for key, value in overrides.items() if value is not None}
        )

    try:
        DefaultValidatingValidator(SETTINGS_SCHEMA).validate(settings)
    except ValidationError as ex:
        path = ".".join(str(part) for part in ex.absolute_path)
        raise InvalidConfigError(
            f"Invalid setting{f' {path}' if path else ''}: {ex.message}"
        ) from ex

    logger.log(11, f"Loaded settings: {settings}")
    return settings

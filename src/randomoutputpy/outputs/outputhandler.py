"""Abstract class for output handlers, and selection of the default ones."""

import sys
from abc import ABC, abstractmethod
from collections.abc import Mapping
from importlib import import_module
from typing import NamedTuple, TextIO

from randomoutputpy.exceptions import InvalidConfigError, OutputRegistrationError


class DefaultHandlerCharacteristics(NamedTuple):
    """Class defining the configuration for default output handlers."""

    module: str
    class_: str


DEFAULT_HANDLER_MAP = {
    "file": DefaultHandlerCharacteristics(
        "randomoutputpy.outputs.filecommand", "FileCommandOutput"
    ),
    "command": DefaultHandlerCharacteristics(
        "randomoutputpy.outputs.workflowcommand", "WorkflowCommandOutput"
    ),
}


def escape_data(value: str) -> str:
    """Escape the data part of a workflow command."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a property value of a workflow command."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(
    command: str, message: str, properties: dict[str, str] | None = None
) -> str:
    """Build a workflow command line.

    Args:
        command (str): The command name, e.g. error or set-output
        message (str): The command data
        properties (dict[str, str], optional): Properties to add to the command

    Returns:
        str: The command, e.g. ::set-output name=random-number::42
    """
    command_string = f"::{command}"
    property_list = [
        f"{key}={escape_property(str(value))}"
        for key, value in (properties or {}).items()
        if value
    ]
    if property_list:
        command_string += " " + ",".join(property_list)
    return f"{command_string}::{escape_data(message)}"


class OutputHandler(ABC):
    """Parent class for output handlers.

    An output handler is the step's view of the pipeline runner. It registers
    named outputs for later steps and reports a failed step.
    """

    def __init__(self, environ: Mapping[str, str], stream: TextIO | None = None):
        """Initialise the handler.

        Args:
            environ (Mapping[str, str]): The environment provided by the runner.
            stream (TextIO, optional): Where workflow commands are written.
                Defaults to sys.stdout at the time of writing.
        """
        self.environ = environ
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Return the stream workflow commands are written to."""
        return self._stream if self._stream is not None else sys.stdout

    def issue_command(
        self, command: str, message: str, properties: dict[str, str] | None = None
    ) -> None:
        """Write a workflow command to the stream."""
        self.stream.write(format_command(command, message, properties) + "\n")
        self.stream.flush()

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """Register a named output.

        Args:
            name (str): The output name that later steps reference.
            value (str): The value of the output.
        """

    def set_failed(self, message: str) -> None:
        """Report the step as failed.

        Args:
            message (str): The reason the step failed.
        """
        self.issue_command("error", message)


def get_output_handler(
    runner: str, environ: Mapping[str, str], stream: TextIO | None = None
) -> OutputHandler:
    """Create the output handler for the given runner setting.

    Args:
        runner (str): One of auto, file or command. auto uses the file command
            when GITHUB_OUTPUT is available, and the workflow command otherwise.
        environ (Mapping[str, str]): The environment provided by the runner.
        stream (TextIO, optional): Where workflow commands are written.

    Raises:
        InvalidConfigError: Raised if the runner is not known.
        OutputRegistrationError: Raised if the file command is requested but the
            runner has not provided GITHUB_OUTPUT.

    Returns:
        OutputHandler: The handler to use.
    """
    if runner == "auto":
        runner = "file" if environ.get("GITHUB_OUTPUT") else "command"

    if runner not in DEFAULT_HANDLER_MAP:
        raise InvalidConfigError(f"Unknown runner {runner}")

    if runner == "file" and not environ.get("GITHUB_OUTPUT"):
        raise OutputRegistrationError(
            "Unable to find environment variable for file command GITHUB_OUTPUT"
        )

    module_name = DEFAULT_HANDLER_MAP[runner].module
    if module_name not in sys.modules:
        import_module(module_name)

    handler_class = getattr(sys.modules[module_name], DEFAULT_HANDLER_MAP[runner].class_)
    return handler_class(environ, stream)  # type: ignore[no-any-return]

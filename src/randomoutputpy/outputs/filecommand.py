"""File command output handler.

Registers outputs by appending to the file the runner names in GITHUB_OUTPUT.
"""

import os
import uuid

import randomoutputpy.steplogging
from randomoutputpy.exceptions import OutputRegistrationError
from randomoutputpy.outputs.outputhandler import OutputHandler

logger = randomoutputpy.steplogging.init_logging(__name__)

DELIMITER_PREFIX = "ghadelimiter_"


def prepare_key_value_message(name: str, value: str) -> str:
    """Build a heredoc style entry for a file command.

    Args:
        name (str): The output name
        value (str): The output value

    Raises:
        OutputRegistrationError: Raised if the name or value contains the
            delimiter, as the runner would then misread the entry.

    Returns:
        str: The entry, terminated with a newline
    """
    delimiter = f"{DELIMITER_PREFIX}{uuid.uuid4()}"

    if delimiter in name:
        raise OutputRegistrationError(
            f"Unexpected input: name should not contain the delimiter \"{delimiter}\""
        )
    if delimiter in value:
        raise OutputRegistrationError(
            f"Unexpected input: value should not contain the delimiter \"{delimiter}\""
        )

    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class FileCommandOutput(OutputHandler):
    """Output handler writing to the GITHUB_OUTPUT file."""

    @property
    def file_path(self) -> str:
        """Return the path of the output file provided by the runner."""
        return self.environ.get("GITHUB_OUTPUT", "")

    def set_output(self, name: str, value: str) -> None:
        """Append the output to the runner's output file.

        The entry is written with a single call, so a failure never leaves half
        an entry behind.

        Args:
            name (str): The output name that later steps reference.
            value (str): The value of the output.

        Raises:
            OutputRegistrationError: Raised if the output file is not available.
        """
        file_path = self.file_path
        if not file_path:
            raise OutputRegistrationError(
                "Unable to find environment variable for file command GITHUB_OUTPUT"
            )
        if not os.path.exists(file_path):
            raise OutputRegistrationError(f"Missing file at path: {file_path}")

        entry = prepare_key_value_message(name, value)
        with open(file_path, "a", encoding="utf-8") as file_:
            file_.write(entry)

        logger.log(12, f"Wrote output '{name}' to {file_path}")

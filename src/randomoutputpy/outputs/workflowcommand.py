"""Workflow command output handler.

Used when the runner does not provide an output file. Outputs are registered
with the set-output command on stdout.
"""

from randomoutputpy.outputs.outputhandler import OutputHandler


class WorkflowCommandOutput(OutputHandler):
    """Output handler using stdout workflow commands."""

    def set_output(self, name: str, value: str) -> None:
        """Issue a set-output command.

        Args:
            name (str): The output name that later steps reference.
            value (str): The value of the output.
        """
        # The command has to start on its own line
        self.stream.write("\n")
        self.issue_command("set-output", value, {"name": name})

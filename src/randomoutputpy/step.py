"""Random output step."""

import random
from dataclasses import dataclass

import randomoutputpy.steplogging
from randomoutputpy.generator import format_value, generate_random_number
from randomoutputpy.outputs.outputhandler import OutputHandler

OUTPUT_NAME = "random-number"


@dataclass(frozen=True)
class Success:
    """The step completed and the output was registered."""

    value: str


@dataclass(frozen=True)
class Failure:
    """The step failed. Nothing was registered."""

    message: str


StepResult = Success | Failure


class RandomOutputStep:
    """Generate a random number and expose it as the random-number output."""

    def __init__(
        self, output_handler: OutputHandler, rng: random.Random | None = None
    ) -> None:
        """Initialise the step.

        Args:
            output_handler (OutputHandler): The runner's output mechanism.
            rng (random.Random, optional): The generator to draw from. Defaults to
                the random module's shared generator.
        """
        self.output_handler = output_handler
        self.rng = rng
        self.logger = randomoutputpy.steplogging.init_logging(__name__)

    def run(self) -> StepResult:
        """Run the step.

        Returns:
            StepResult: Success with the registered value, or Failure with the
            message of the error that stopped the step.
        """
        try:
            number = generate_random_number(self.rng)
            value = format_value(number)
            self.output_handler.set_output(OUTPUT_NAME, value)
            self.logger.info(f"Generated random number: {number}")
        except Exception as ex:  # pylint: disable=broad-exception-caught
            return self.return_failure(ex)

        return Success(value)

    def return_failure(self, exception: Exception) -> Failure:
        """Report the exception to the runner and return the failure.

        Args:
            exception (Exception): The error that stopped the step.

        Returns:
            Failure: The failure carrying the exception's message.
        """
        message = str(exception) or exception.__class__.__name__
        self.logger.error(f"Step failed: {message}")
        self.logger.debug("Step failure details", exc_info=exception)

        try:
            self.output_handler.set_failed(message)
        except Exception as ex:  # pylint: disable=broad-exception-caught
            self.logger.error(f"Unable to report failure to the runner: {ex}")

        return Failure(message)

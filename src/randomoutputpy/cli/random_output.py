#!/bin/env python3
"""CLI script wrapper for handling env vars and triggering the RandomOutputStep class."""

import argparse
import logging
import os
import random
import sys
from textwrap import dedent

from randomoutputpy import steplogging
from randomoutputpy.config.settings import RUNNERS, load_settings
from randomoutputpy.exceptions import InvalidConfigError, OutputRegistrationError
from randomoutputpy.outputs.outputhandler import get_output_handler
from randomoutputpy.outputs.workflowcommand import WorkflowCommandOutput
from randomoutputpy.step import Failure, RandomOutputStep


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "Generate a random number between 0 and 99 and register it as the"
            " 'random-number' step output"
        ),
        epilog=dedent(
            """\
                Environment Variables:

                There are several environment variables that can be used to impact the behaviour:

                    ROS_SEED - Equivalent to using --seed argument
                    ROS_RUNNER - Equivalent to using --runner argument
                    ROS_LOG_JSON - Change the log output format to structured JSON format
                    ROS_LOG_LEVEL - Equivalent to using -v, e.g. DEBUG

                Set by the runner:

                    GITHUB_OUTPUT - File that step outputs are appended to
                    GITHUB_RUN_ID - Included in JSON log output
                """
        ),
    )

    parser.add_argument(
        "--seed",
        help="Seed the generator so the output is reproducible",
        type=int,
        required=False,
    )
    parser.add_argument(
        "--runner",
        help=(
            "How outputs are reported. auto uses GITHUB_OUTPUT when it is set, and"
            " the set-output workflow command otherwise"
        ),
        choices=RUNNERS,
        type=str,
        required=False,
    )
    parser.add_argument(
        "-v",
        "--verbosity",
        help="Increase verbosity:\n3 - DEBUG\n2 - VERBOSE2\n1 - VERBOSE1",
        type=int,
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Parse args and run the step."""
    args = _parse_args(argv)

    log_level = None
    if args.verbosity:
        log_level = logging.getLevelName(steplogging.verbosity_to_level(args.verbosity))

    steplogging.configure_root_logger(log_level or logging.INFO)
    logger = steplogging.init_logging(__name__)

    try:
        settings = load_settings(
            os.environ,
            {"seed": args.seed, "runner": args.runner, "log_level": log_level},
        )
        steplogging.configure_root_logger(settings["log_level"], settings["log_json"])
        logger = steplogging.init_logging(__name__)
        logger.log(11, f"Log verbosity: {args.verbosity}")

        output_handler = get_output_handler(settings["runner"], os.environ)
    except (InvalidConfigError, OutputRegistrationError) as ex:
        logger.error(f"Error setting up step: {ex}")
        WorkflowCommandOutput(os.environ).set_failed(str(ex))
        sys.exit(1)

    rng = None
    if settings["seed"] is not None:
        rng = random.Random(settings["seed"])

    result = RandomOutputStep(output_handler, rng).run()

    if isinstance(result, Failure):
        sys.exit(1)


if __name__ == "__main__":
    main()

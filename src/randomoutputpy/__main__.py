"""Allow the step to be run with python -m randomoutputpy."""

from randomoutputpy.cli.random_output import main

main()

# pylint: skip-file
# ruff: noqa
import logging

import pytest

RUNNER_ENV_VARS = [
    "GITHUB_OUTPUT",
    "GITHUB_RUN_ID",
    "ROS_SEED",
    "ROS_RUNNER",
    "ROS_LOG_JSON",
    "ROS_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def env_vars(monkeypatch):
    # Tests may themselves be running inside a pipeline, so make sure nothing
    # from the real runner leaks in
    for env_var in RUNNER_ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)

    yield

    # Drop any stdout handlers the CLI added, they point at a captured stream
    root_logger = logging.getLogger()
    for handler in [
        h for h in root_logger.handlers if getattr(h, "_step_handler", False)
    ]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)
    for name, logger_ in list(logging.Logger.manager.loggerDict.items()):
        if isinstance(logger_, logging.Logger) and name.startswith("randomoutputpy"):
            logger_.setLevel(logging.INFO)

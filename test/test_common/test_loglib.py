## tests for itersort.common.loglib

from assertpy import assert_that
import logging
from pytest import fixture, mark

import itersort.common.loglib as subject


@fixture
def logger_name(request) -> str:
    return "itersort.test." + request.node.name


@mark.dependency()
def test_ensure_log_levels():
    subject.ensure_log_levels()
    assert_that(logging.getLevelName(subject.LogLevel.TRACE)).is_equal_to("TRACE")
    assert_that(int(subject.LogLevel.TRACE)).is_equal_to(5)


def test_bound_levels():
    assert_that(subject.TRACE).is_equal_to(subject.LogLevel.TRACE.value)
    assert_that(subject.WARNING).is_equal_to(logging.WARNING)


def test_default_level(monkeypatch):
    monkeypatch.delenv(subject.VERBOSE_ENV, raising=False)
    assert_that(subject.default_level()).is_equal_to(subject.LogLevel.WARNING)
    monkeypatch.setenv(subject.VERBOSE_ENV, "1")
    assert_that(subject.default_level()).is_equal_to(subject.LogLevel.TRACE)


def test_create_logging_config():
    config = subject.create_logging_config(
        "a.logger", level=subject.LogLevel.DEBUG,
        handler_class="logging.StreamHandler",
        root={"level": logging.ERROR}
    )
    assert_that(config["version"]).is_equal_to(1)
    assert_that(config["loggers"]["a.logger"]).is_equal_to(
        {"level": subject.LogLevel.DEBUG, "handlers": ["consoleHandler"]}
    )
    assert_that(config["handlers"]["consoleHandler"]["class"]).is_equal_to(
        "logging.StreamHandler"
    )
    ## kwargs are merged onto the config
    assert_that(config["root"]).is_equal_to({"level": logging.ERROR})


def test_create_logging_config_merge():
    ## nested kwargs are merged into the generated sections
    config = subject.create_logging_config(
        "c.logger", level=subject.LogLevel.INFO, handler=None,
        loggers={"c.logger": {"propagate": False}, "d.logger": {"level": logging.ERROR}}
    )
    assert_that(config["loggers"]).is_equal_to({
        "c.logger": {"level": subject.LogLevel.INFO, "propagate": False},
        "d.logger": {"level": logging.ERROR},
    })


def test_create_logging_config_no_handler():
    config = subject.create_logging_config("b.logger", handler=None)
    assert_that(config).does_not_contain_key("handlers")
    assert_that(config["loggers"]["b.logger"]).does_not_contain_key("handlers")


@mark.dependency(depends=["test_ensure_log_levels"])
def test_get_logger(logger_name):
    logger = subject.get_logger(logger_name, level=subject.LogLevel.TRACE)
    assert_that(logger.name).is_equal_to(logger_name)
    assert_that(logger.level).is_equal_to(subject.LogLevel.TRACE)
    assert_that(logger.isEnabledFor(subject.LogLevel.TRACE)).is_true()
    assert_that(logger.handlers).is_length(1)


def test_get_logger_for_class():
    class Sample:
        pass

    logger = subject.get_logger(Sample, handler=None)
    assert_that(logger.name).is_equal_to(__name__ + ".Sample")

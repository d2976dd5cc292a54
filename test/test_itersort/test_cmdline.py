## tests for itersort.cmdline

from assertpy import assert_that
import logging

from itersort.cmdline import ArgparseAction, Cmdline
from itersort.common.loglib import LogLevel


class SampleCmdline(Cmdline):

    def configure_argparser(self, parser):
        parser.add_argument("--flag", action=ArgparseAction.STORE_TRUE)

    def main(self, args):
        restargs, _ = self.consume_args(args)
        return 0 if self.option_namespace.flag and not restargs else 1


def test_program_name():
    assert_that(SampleCmdline().program_name).is_equal_to("samplecmdline")


def test_consume_args():
    cmd = SampleCmdline()
    restargs, parser = cmd.consume_args(["--flag", "other"])
    assert_that(restargs).is_equal_to(["other"])
    assert_that(cmd.option_namespace.flag).is_true()
    assert_that(parser.prog).is_equal_to("samplecmdline")


def test_main():
    assert_that(SampleCmdline().main(["--flag"])).is_equal_to(0)
    assert_that(SampleCmdline().main([])).is_equal_to(1)


def test_option_namespace():
    ## one namespace per instance, empty until consume_args()
    first, second = SampleCmdline(), SampleCmdline()
    assert_that(vars(first.option_namespace)).is_empty()
    first.consume_args(["--flag"])
    assert_that(first.option_namespace.flag).is_true()
    assert_that(second.option_namespace).is_not_same_as(first.option_namespace)
    assert_that(hasattr(second.option_namespace, "flag")).is_false()


def test_logger():
    cmd = SampleCmdline()
    logger = cmd.logger
    assert_that(logger).is_same_as(cmd.logger)
    assert_that(logger.name).is_equal_to(__name__ + ".SampleCmdline")
    assert_that(logger.level).is_equal_to(LogLevel.INFO)
    assert_that(logger.handlers[-1]).is_instance_of(logging.StreamHandler)

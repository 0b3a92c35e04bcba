from furysim.logger import CombatLogger
from furysim.timekeeper import TimeKeeper


def _enabled_logger(time=0):
    keeper = TimeKeeper()
    keeper.prepare(time)
    return CombatLogger(keeper), keeper


def test_disabled_logger_records_nothing():
    logger = CombatLogger()
    logger.log("hello", 3)
    assert not logger.is_enabled()
    assert logger.debug_topic() == ""


def test_enabled_logger_line_format():
    logger, _ = _enabled_logger()
    logger.log("hello")
    topic = logger.debug_topic()
    assert logger.is_enabled()
    assert topic.startswith("Time: ")
    assert topic.endswith("hello<br>")


def test_time_is_written_in_seconds():
    logger, _ = _enabled_logger(1500)
    logger.log("x")
    assert logger.debug_topic().startswith("Time: 1.5s. ")


def test_int_and_string_arguments_are_joined():
    logger, _ = _enabled_logger()
    logger.log("procs ", 3, " times")
    assert "procs 3 times<br>" in logger.debug_topic()


def test_lines_accumulate_and_follow_clock():
    logger, keeper = _enabled_logger()
    logger.log("first")
    keeper.increment(2000)
    logger.log("second")
    topic = logger.debug_topic()
    assert topic.count("<br>") == 2
    assert topic.index("first") < topic.index("second")
    assert "Time: 2s. second" in topic


def test_reset_clears_log():
    logger, _ = _enabled_logger()
    logger.log("something")
    logger.reset()
    assert logger.debug_topic() == ""
    logger.log("again")
    assert logger.debug_topic().count("<br>") == 1
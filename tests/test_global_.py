import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from yala.entry import Entry, Field, Level
from yala.global_ import Global

MESSAGE = "message"
CTX = None
ERR_SOME = RuntimeError("some error")
ERR_ANOTHER = RuntimeError("another error")
NOTICE = "Please configure the global logger."
FIELD1 = Field("field1_name", "field1_value")
FIELD2 = Field("field2_name", "field2_value")

LEVEL_METHODS = {
    Level.DEBUG: Global.debug,
    Level.INFO: Global.info,
    Level.WARN: Global.warn,
    Level.ERROR: Global.error,
}

FIELDS_METHODS = {
    Level.DEBUG: Global.debug_fields,
    Level.INFO: Global.info_fields,
    Level.WARN: Global.warn_fields,
    Level.ERROR: Global.error_fields,
}


class Collector:
    def __init__(self):
        self._lock = threading.Lock()
        self.entries = []

    def log(self, ctx, entry):
        with self._lock:
            self.entries.append(entry)


def entry_at(level, **kwargs):
    return Entry(level=level, message=MESSAGE, skipped_caller_frames=2, **kwargs)


def configured_root(adapter, derive=lambda g: g):
    root = Global()
    root.set_adapter(adapter)
    return derive(root)


def configured_child(adapter, derive):
    child = derive(Global())
    child.set_adapter(adapter)
    return child


def configured_later(adapter, derive):
    root = Global()
    child = derive(root)
    root.set_adapter(adapter)
    return child


SETUPS = [configured_root, configured_child, configured_later]


def test_passing_none_adapter_disables_logger(capsys):
    collector = Collector()
    log = configured_root(collector)
    log.set_adapter(None)
    log.info(CTX, MESSAGE)
    log.warn(CTX, MESSAGE)
    assert collector.entries == []
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "derive",
    [
        lambda g: g,
        lambda g: g.with_field("k", "v"),
        lambda g: g.with_error(ERR_SOME),
    ],
)
def test_warns_once_that_adapter_was_not_set(capsys, derive):
    log = derive(Global())
    log.warn(CTX, MESSAGE)
    log.error(CTX, MESSAGE)
    out = capsys.readouterr().out
    assert out.count(NOTICE) == 1
    assert "cannot log message with level WARN." in out
    assert "test_global_.py:" in out


def test_unconfigured_logger_is_silent_for_info(capsys):
    log = Global()
    log.debug(CTX, MESSAGE)
    log.info(CTX, MESSAGE)
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("level", list(LEVEL_METHODS))
def test_logs_message_using_adapter(level):
    collector = Collector()
    LEVEL_METHODS[level](configured_root(collector), CTX, MESSAGE)
    assert collector.entries == [entry_at(level)]


@pytest.mark.parametrize("level", list(FIELDS_METHODS))
@pytest.mark.parametrize(
    "logger_fields, fields, expected_fields",
    [
        (None, {}, ()),
        (None, None, ()),
        (None, {"k": "v"}, (Field("k", "v"),)),
        (None, {"k1": "v1", "k2": "v2"}, (Field("k1", "v1"), Field("k2", "v2"))),
        (
            {"k1": "v1", "k2": "v2"},
            {"k3": "v3", "k4": "v4"},
            (Field("k1", "v1"), Field("k2", "v2"), Field("k3", "v3"), Field("k4", "v4")),
        ),
    ],
)
def test_log_fields(level, logger_fields, fields, expected_fields):
    collector = Collector()
    log = configured_root(collector, lambda g: g.with_fields(logger_fields))
    FIELDS_METHODS[level](log, CTX, MESSAGE, fields)
    assert collector.entries == [entry_at(level, fields=expected_fields)]


def test_log_cause_and_field():
    collector = Collector()
    log = configured_root(collector, lambda g: g.with_error(None))
    log.error_cause_fields(CTX, MESSAGE, ERR_SOME, {"k": "v"})
    assert collector.entries == [
        entry_at(Level.ERROR, fields=(Field("k", "v"),), error=ERR_SOME)
    ]


@pytest.mark.parametrize(
    "run",
    [
        lambda log, cause: log.error_cause_fields(CTX, MESSAGE, cause, {}),
        lambda log, cause: log.error_cause(CTX, MESSAGE, cause),
    ],
)
@pytest.mark.parametrize(
    "original, cause",
    [(None, ERR_SOME), (ERR_SOME, ERR_ANOTHER), (ERR_SOME, None)],
)
def test_cause_overrides_logger_error(run, original, cause):
    collector = Collector()
    run(configured_root(collector, lambda g: g.with_error(original)), cause)
    assert [e.error for e in collector.entries] == [cause]


ADD_FIELD = [
    lambda log, field: log.with_field(field.key, field.value),
    lambda log, field: log.with_fields({field.key: field.value}),
]


@pytest.mark.parametrize("setup", SETUPS)
@pytest.mark.parametrize("add_field", ADD_FIELD)
@pytest.mark.parametrize("level", list(LEVEL_METHODS))
def test_child_loggers_carry_fields(setup, add_field, level):
    collector = Collector()
    with_field1 = setup(collector, lambda g: g.with_field(FIELD1.key, FIELD1.value))
    with_both = add_field(with_field1, FIELD2)
    for log in (with_field1, with_both, with_field1):
        LEVEL_METHODS[level](log, CTX, MESSAGE)
    assert [e.fields for e in collector.entries] == [(FIELD1,), (FIELD1, FIELD2), (FIELD1,)]


def test_with_fields_creates_logger_with_fields():
    collector = Collector()
    configured_root(collector).with_fields({"k1": "v1", "k2": "v2"}).info(CTX, MESSAGE)
    assert set(collector.entries[0].fields) == {Field("k1", "v1"), Field("k2", "v2")}


@pytest.mark.parametrize("setup", SETUPS)
@pytest.mark.parametrize("level", list(LEVEL_METHODS))
def test_child_loggers_carry_error(setup, level):
    collector = Collector()
    with_some = setup(collector, lambda g: g.with_error(ERR_SOME))
    with_another = with_some.with_error(ERR_ANOTHER)
    for log in (with_some, with_another):
        LEVEL_METHODS[level](log, CTX, MESSAGE)
    assert collector.entries[0] == entry_at(level, error=ERR_SOME)
    assert collector.entries[0].error is ERR_SOME
    assert collector.entries[1].error is ERR_ANOTHER


@pytest.mark.parametrize("skips, frames", [(1, 3), (2, 4)])
def test_skip_caller_frames(skips, frames):
    collector = Collector()
    log = configured_root(collector)
    for _ in range(skips):
        log = log.with_skipped_caller_frame()
    log.info(CTX, MESSAGE)
    assert [e.skipped_caller_frames for e in collector.entries] == [frames]


def test_each_skipping_logger_is_a_copy():
    collector = Collector()
    log1 = configured_root(collector).with_skipped_caller_frame()
    log2 = log1.with_skipped_caller_frame()
    log1.info(CTX, MESSAGE)
    log2.info(CTX, MESSAGE)
    assert [e.skipped_caller_frames for e in collector.entries] == [3, 4]


def _concurrently(times, code):
    with ThreadPoolExecutor(max_workers=32) as pool:
        for future in [pool.submit(code) for _ in range(times)]:
            future.result()


def test_concurrent_logging_counts_every_entry():
    collector = Collector()
    log = configured_root(collector)

    def code():
        for method in LEVEL_METHODS.values():
            method(log, CTX, MESSAGE)
        log.with_field("k", "v").info(CTX, MESSAGE)
        log.with_error(ERR_SOME).error(CTX, MESSAGE)

    _concurrently(1000, code)
    assert len(collector.entries) == 6000


@pytest.mark.parametrize("number_of_fields", [0, 1, 5, 15])
def test_concurrent_with_keeps_fields_intact(number_of_fields):
    collector = Collector()
    log = configured_root(collector)
    for _ in range(number_of_fields):
        log = log.with_field("k", "v")

    _concurrently(200, lambda: log.with_field("k", "v").info(CTX, MESSAGE))
    expected_fields = (Field("k", "v"),) * (number_of_fields + 1)
    assert len(collector.entries) == 200
    assert {e.fields for e in collector.entries} == {expected_fields}

    log.info(CTX, MESSAGE)
    assert collector.entries[-1].fields == (Field("k", "v"),) * number_of_fields
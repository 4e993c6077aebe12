import logging

from picup.api.notify.RecordingNotifier import RecordingNotifier


def test_records_per_level_and_logs(caplog):
    notifier = RecordingNotifier()
    with caplog.at_level(logging.INFO, logger="picup"):
        notifier.info("done")
        notifier.warning("careful")
        notifier.error("broken")

    assert notifier.messages == ["done"]
    assert notifier.warnings == ["careful"]
    assert notifier.errors == ["broken"]
    assert [r.levelname for r in caplog.records] == ["INFO", "WARNING", "ERROR"]

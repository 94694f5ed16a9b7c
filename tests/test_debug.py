"""Tests for debug output helpers."""

from surfacecheck.utils.debug import debug_print, debug_probe, is_debug_enabled, set_debug_enabled


class TestDebug:
    def test_disabled_by_default_prints_nothing(self, capsys):
        set_debug_enabled(False)
        debug_print("probe", "hidden")
        assert not is_debug_enabled()
        assert capsys.readouterr().err == ""

    def test_enabled_prints_to_stderr(self, capsys):
        set_debug_enabled(True)
        try:
            debug_probe("https://api.example.com", "200", 0.25)
            debug_print("hibp", "2 breaches", Breaches=["Adobe", "LinkedIn"])
        finally:
            set_debug_enabled(False)

        err = capsys.readouterr().err
        assert "[DEBUG:probe] GET https://api.example.com -> 200 +0.25s" in err
        assert "Adobe, LinkedIn" in err

    def test_long_values_truncated_and_none_skipped(self, capsys):
        set_debug_enabled(True)
        try:
            debug_print("hibp", "detail", Description="x" * 150, Domain=None)
        finally:
            set_debug_enabled(False)

        err = capsys.readouterr().err
        assert "(150 chars)" in err
        assert "Domain" not in err

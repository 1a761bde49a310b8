"""Tests for the four phase modules and their registry."""

import pytest

from flashctl.patterns import get_pattern, get_title, list_patterns, run_pattern


class TestRegistry:

    def test_execution_order(self):
        assert list(list_patterns()) == ["continuous", "strobe", "sos", "brightness"]

    def test_unknown_pattern(self):
        with pytest.raises(ValueError):
            get_pattern("disco")

    def test_titles(self):
        assert [get_title(n) for n in list_patterns()] == [
            "Continuous Illumination Mode",
            "Strobe Light Pattern",
            "Emergency Signal Pattern",
            "Brightness Level Demonstration",
        ]


class TestContinuous:

    def test_three_one_second_steps(self, plain_console, stream, sleep):
        run_pattern("continuous", console=plain_console, sleep=sleep)
        assert sleep.calls == [1.0, 1.0, 1.0]
        out = stream.getvalue()
        for step in (1, 2, 3):
            assert f"Illumination Active - Duration: {step}/3 seconds" in out
        assert out.count("[LIGHT] " + "█" * 60 + " [100%]") == 3
        assert out.endswith("Continuous illumination mode completed.\n")

    def test_off_after_loop(self, console, stream, sleep):
        run_pattern("continuous", console=console, sleep=sleep)
        out = stream.getvalue()
        assert out.rindex(" " * 80 + "\r") > out.rindex("3/3 seconds")


class TestStrobe:

    def test_flash_then_pause_eight_times(self, plain_console, stream, sleep):
        run_pattern("strobe", console=plain_console, sleep=sleep)
        assert sleep.calls == [0.2, 0.5] * 8
        out = stream.getvalue()
        assert out.count("Flash interval pause...") == 8
        assert "FLASH 8/8 - HIGH INTENSITY" in out
        assert out.count("▓" * 60) == 8

    def test_last_flash_keeps_its_pause(self, plain_console, sleep):
        run_pattern("strobe", console=plain_console, sleep=sleep)
        assert sleep.calls[-1] == 0.5


class TestSos:

    def test_timing_table(self, plain_console, sleep):
        run_pattern("sos", console=plain_console, sleep=sleep)
        flashes = sleep.calls[0::2]
        pauses = sleep.calls[1::2]
        assert flashes == pytest.approx([0.3] * 3 + [0.8] * 3 + [0.3] * 3)
        assert pauses == pytest.approx([0.2] * 9)

    def test_unit_lines_in_order(self, plain_console, stream, sleep):
        run_pattern("sos", console=plain_console, sleep=sleep)
        units = [
            line.split(": ")[1].split()[0]
            for line in stream.getvalue().splitlines()
            if line.startswith("SOS SIGNAL:")
        ]
        assert units == ["SHORT"] * 3 + ["LONG"] * 3 + ["SHORT"] * 3

    def test_uses_emergency_glyph(self, plain_console, stream, sleep):
        run_pattern("sos", console=plain_console, sleep=sleep)
        assert stream.getvalue().count("▒" * 60) == 9


class TestBrightness:

    def test_ascending_steps(self, plain_console, stream, sleep):
        run_pattern("brightness", console=plain_console, sleep=sleep)
        assert sleep.calls == [1.5] * 4
        lines = [l for l in stream.getvalue().splitlines() if l.startswith("Brightness Level:")]
        assert lines == [
            "Brightness Level: LOW (25%)",
            "Brightness Level: MEDIUM (50%)",
            "Brightness Level: HIGH (75%)",
            "Brightness Level: MAXIMUM (100%)",
        ]

    def test_bar_widths_follow_steps(self, plain_console, stream, sleep):
        run_pattern("brightness", console=plain_console, sleep=sleep)
        bars = [l for l in stream.getvalue().splitlines() if l.startswith("[LIGHT]")]
        assert [b.count("█") for b in bars] == [15, 30, 45, 60]

    def test_banners(self, plain_console, stream, sleep):
        run_pattern("brightness", console=plain_console, sleep=sleep)
        out = stream.getvalue()
        assert "OPERATIONAL MODE: BRIGHTNESS LEVEL CONTROL\nPower Level: 0%" in out
        assert "OPERATIONAL MODE: BRIGHTNESS: HIGH\nPower Level: 75%" in out
        assert out.count("Status: ACTIVE") == 5

"""Tests for the command-line interface.

WHY: The CLI is how the tool is used in batch scripts, so exit codes,
file handling and the "no file on failure" rule need to hold.

HOW: main() is called with explicit argv; SystemExit carries the exit
code. Files live in pytest's tmp_path.
"""

import json

import pytest

from bilingual_srt.cli import build_parser, main, resolve_tuning

BILINGUAL = "1\n00:00:01,000 --> 00:00:02,000\n看来我错了\nMy mistake.\n"
LONG_CUE = "1\r\n00:00:01,000 --> 00:00:04,000\r\n我们今天一起去公园散步吧 然后再去商场买一些好东西吃\r\n"


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestMain:

    def test_swap_to_file(self, tmp_path, capsys):
        src = tmp_path / "in.srt"
        dst = tmp_path / "out.srt"
        src.write_text(BILINGUAL, encoding="utf-8")

        assert _run(["swap", str(src), "-o", str(dst)]) == 0
        assert dst.read_text(encoding="utf-8") == (
            "1\n00:00:01,000 --> 00:00:02,000\nMy mistake.\n看来我错了\n"
        )
        assert "Swap: 1 cues read" in capsys.readouterr().err

    def test_filter_to_stdout(self, tmp_path, capsys):
        src = tmp_path / "in.srt"
        src.write_text(BILINGUAL, encoding="utf-8")

        assert _run(["filter", str(src)]) == 0
        assert capsys.readouterr().out == "1\n00:00:01,000 --> 00:00:02,000\n看来我错了\n"

    def test_reflow_keeps_crlf_bytes(self, tmp_path):
        src = tmp_path / "in.srt"
        dst = tmp_path / "out.srt"
        src.write_bytes(LONG_CUE.encode("utf-8"))

        assert _run(["reflow", str(src), "-o", str(dst), "--threshold", "20",
                     "--bracket-factor", "0.5"]) == 0
        assert dst.read_bytes() == (
            "1\r\n00:00:01,000 --> 00:00:04,000\r\n"
            "我们今天一起去公园散步吧\r\n然后再去商场买一些好东西吃\r\n"
        ).encode("utf-8")

    def test_high_threshold_leaves_line_alone(self, tmp_path):
        src = tmp_path / "in.srt"
        dst = tmp_path / "out.srt"
        src.write_bytes(LONG_CUE.encode("utf-8"))

        assert _run(["reflow", str(src), "-o", str(dst), "--threshold", "40"]) == 0
        assert dst.read_bytes() == LONG_CUE.encode("utf-8")

    def test_invalid_stream_writes_nothing(self, tmp_path, capsys):
        src = tmp_path / "in.srt"
        dst = tmp_path / "out.srt"
        src.write_text("no cues here\n", encoding="utf-8")

        assert _run(["swap", str(src), "-o", str(dst)]) == 1
        assert not dst.exists()
        assert "Error: No subtitle cues found" in capsys.readouterr().err

    def test_missing_input(self, tmp_path, capsys):
        assert _run(["swap", str(tmp_path / "missing.srt")]) == 1
        assert "Error: Cannot open" in capsys.readouterr().err

    def test_unknown_preset(self, tmp_path, capsys):
        src = tmp_path / "in.srt"
        src.write_text(BILINGUAL, encoding="utf-8")

        assert _run(["reflow", str(src), "--preset", "nope"]) == 1
        assert "Unknown preset" in capsys.readouterr().err

    def test_unknown_mode_is_a_usage_error(self, tmp_path):
        assert _run(["shuffle", str(tmp_path / "in.srt")]) == 2


class TestResolveTuning:
    """Explicit flags > preset file > preset > environment defaults."""

    def _args(self, *argv):
        return build_parser().parse_args(["reflow", "in.srt"] + list(argv))

    def test_preset(self):
        assert resolve_tuning(self._args("--preset", "tight")) == {
            "threshold": 14, "bracket_factor": 0.4,
        }

    def test_flags_override_preset(self):
        tuning = resolve_tuning(self._args("--preset", "tight", "--threshold", "30"))
        assert tuning == {"threshold": 30, "bracket_factor": 0.4}

    def test_preset_file_overrides_preset(self, tmp_path):
        path = tmp_path / "p.json"
        path.write_text(json.dumps({"threshold": 25, "bracket_factor": 0.7}), encoding="utf-8")
        tuning = resolve_tuning(self._args("--preset", "tight", "--preset-file", str(path)))
        assert tuning == {"threshold": 25, "bracket_factor": 0.7}

    def test_invalid_flag_value(self):
        from bilingual_srt.errors import PresetError

        with pytest.raises(PresetError):
            resolve_tuning(self._args("--threshold", "0"))

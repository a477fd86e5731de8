import pytest

import sadness_lines
from sadlines.config import WIDTH, HEIGHT, LINE_COUNT, FRAMERATE


def test_defaults():
    args = sadness_lines.parse_args([])
    assert (args.width, args.height) == (WIDTH, HEIGHT)
    assert args.lines == LINE_COUNT
    assert args.fps == FRAMERATE
    assert not args.record
    assert not args.no_webcam


def test_overrides():
    args = sadness_lines.parse_args(["--width", "640", "--lines", "20", "--no-webcam", "--seed", "7"])
    assert args.width == 640
    assert args.lines == 20
    assert args.no_webcam
    assert args.seed == 7


@pytest.mark.parametrize("argv", [
    ["--width", "0"],
    ["--lines", "-3"],
    ["--fps", "abc"],
    ["--record-seconds", "-1"],
])
def test_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        sadness_lines.parse_args(argv)


def test_record_help_mentions_memory():
    help_text = sadness_lines.build_parser().format_help()
    assert "in memory" in help_text
    assert "--record-seconds" in help_text


def test_pygame_quits_even_if_saving_fails(monkeypatch):
    quits = []

    def broken_save(self):
        raise RuntimeError("disk full")

    monkeypatch.setattr(sadness_lines.InteractionController, "drain", lambda self: False)
    monkeypatch.setattr(sadness_lines.Recorder, "save", broken_save)
    monkeypatch.setattr(sadness_lines.pygame, "quit", lambda: quits.append(True))

    with pytest.raises(RuntimeError):
        sadness_lines.main(["--no-webcam", "--record", "--width", "64", "--height", "48", "--lines", "3"])
    assert quits == [True]

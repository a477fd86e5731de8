import os

import pygame

from sadlines import recording
from sadlines.recording import Recorder, save_screenshot


def test_capture_is_height_major():
    rec = Recorder(fps=30)
    rec.capture(pygame.Surface((40, 30)))
    assert rec.frames[0].shape == (30, 40, 3)


def test_capture_stops_at_limit():
    rec = Recorder(fps=10, max_seconds=0.2)
    for _ in range(5):
        rec.capture(pygame.Surface((4, 3)))
    assert len(rec.frames) == 2
    assert rec.full


def test_save_without_frames(tmp_path):
    assert Recorder(fps=30, output_folder=str(tmp_path)).save() is None


def test_save_writes_video(monkeypatch, tmp_path):
    written = []

    class FakeClip:
        def __init__(self, frames, fps):
            self.frames = frames
            self.fps = fps

        def write_videofile(self, filename, codec=None):
            written.append((filename, codec, len(self.frames), self.fps))

    monkeypatch.setattr(recording, "ImageSequenceClip", FakeClip)
    rec = Recorder(fps=24, output_folder=str(tmp_path / "vid"))
    rec.capture(pygame.Surface((4, 3)))
    filename = rec.save()

    assert written == [(filename, "libx264", 1, 24)]
    assert os.path.basename(filename).startswith("sadness_lines_")
    assert filename.endswith(".mp4")
    assert rec.frames == []


def test_screenshot(tmp_path):
    filename = save_screenshot(pygame.Surface((8, 8)), str(tmp_path))
    assert os.path.exists(filename)


def test_frames_keep_first_size_across_resize():
    rec = Recorder(fps=10)
    for size in [(40, 30)] * 3 + [(60, 30)] * 3:
        rec.capture(pygame.Surface(size))
    assert {frame.shape for frame in rec.frames} == {(30, 40, 3)}

    clip = recording.ImageSequenceClip(rec.frames, fps=10)
    assert tuple(clip.size) == (40, 30)

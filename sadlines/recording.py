import os
from datetime import datetime

import pygame
from moviepy import ImageSequenceClip

OUTPUT_FOLDER = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "vid")


class Recorder:
    def __init__(self, fps, max_seconds=None, output_folder=OUTPUT_FOLDER):
        self.fps = fps
        self.max_frames = int(max_seconds * fps) if max_seconds else None
        self.output_folder = output_folder
        self.frames = []
        # Every frame of a clip must share one size; the first capture sets it
        self.size = None

    @property
    def full(self):
        return self.max_frames is not None and len(self.frames) >= self.max_frames

    def capture(self, screen):
        if self.full:
            return
        if self.size is None:
            self.size = screen.get_size()
        elif screen.get_size() != self.size:
            screen = pygame.transform.scale(screen, self.size)
        frame = pygame.surfarray.array3d(screen)
        self.frames.append(frame.swapaxes(0, 1))  # (height, width, channels)

    def save(self):
        if not self.frames:
            print("No frames recorded. Skipping video creation.")
            return None
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        os.makedirs(self.output_folder, exist_ok=True)
        filename = os.path.join(self.output_folder, f"sadness_lines_{timestamp}.mp4")

        clip = ImageSequenceClip(self.frames, fps=self.fps)
        clip.write_videofile(filename, codec="libx264")
        print(f"Recording saved as {filename}")
        self.frames = []
        self.size = None
        return filename


def save_screenshot(screen, output_folder=OUTPUT_FOLDER):
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    os.makedirs(output_folder, exist_ok=True)
    filename = os.path.join(output_folder, f"sadness_lines_{timestamp}.png")
    pygame.image.save(screen, filename)
    print(f"Screenshot saved as {filename}")
    return filename

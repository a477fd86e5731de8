import argparse
import random
import sys

import pygame

from sadlines.config import FRAMERATE, WIDTH, HEIGHT, LINE_COUNT
from sadlines.info_box import InfoBox
from sadlines.interaction import InteractionController
from sadlines.recording import Recorder, save_screenshot
from sadlines.renderer import Renderer
from sadlines.simulation import Simulation


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="Sadness lines drooping into a rising puddle.")
    parser.add_argument("--width", type=positive_int, default=WIDTH, help="Window width")
    parser.add_argument("--height", type=positive_int, default=HEIGHT, help="Window height")
    parser.add_argument("--lines", type=positive_int, default=LINE_COUNT, help="Number of lines")
    parser.add_argument("--fps", type=positive_int, default=FRAMERATE, help="Frame rate")
    parser.add_argument("--camera", type=int, default=0, help="Webcam index")
    parser.add_argument("--no-webcam", action="store_true", help="Disable the webcam preview")
    parser.add_argument("--record", action="store_true",
                        help="Save an mp4 of the session on exit. Frames are kept in memory "
                             "until then (about 2.7 MB per frame at 1280x720), "
                             "so pair long sessions with --record-seconds")
    parser.add_argument("--record-seconds", type=float, default=None,
                        help="Stop capturing after this many seconds")
    parser.add_argument("--seed", type=int, default=None, help="Seed for repeatable runs")
    parser.add_argument("--fullscreen", action="store_true", help="Use the whole screen")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.record_seconds is not None and args.record_seconds <= 0:
        parser.error("--record-seconds must be positive")
    return args


def open_window(width, height, fullscreen=False):
    flags = pygame.FULLSCREEN if fullscreen else pygame.RESIZABLE
    size = (0, 0) if fullscreen else (width, height)
    return pygame.display.set_mode(size, flags)


def open_webcam(index):
    # cv2 is only needed when the preview is on
    from sadlines.webcam import WebcamPreview
    return WebcamPreview(index)


def main(argv=None):
    args = parse_args(argv)
    if args.seed is not None:
        random.seed(args.seed)

    # --- Setup ---
    pygame.init()
    screen = open_window(args.width, args.height, args.fullscreen)
    pygame.display.set_caption("Sadness Lines")
    clock = pygame.time.Clock()

    width, height = screen.get_size()
    sim = Simulation(width, height, args.lines)
    renderer = Renderer(screen)
    info_box = InfoBox()
    webcam = None if args.no_webcam else open_webcam(args.camera)
    recorder = Recorder(args.fps, args.record_seconds) if args.record else None

    def handle_resize(w, h):
        renderer.resize(open_window(w, h, args.fullscreen))

    controller = InteractionController(
        sim, info_box,
        on_resize=handle_resize,
        on_screenshot=lambda: save_screenshot(renderer.screen),
    )

    # --- Main Loop ---
    try:
        while True:
            clock.tick(args.fps)
            controller.pump()
            if not controller.drain():
                break

            renderer.draw_frame(sim, webcam, info_box)
            pygame.display.flip()

            if recorder is not None:
                recorder.capture(renderer.screen)
    finally:
        try:
            if webcam is not None:
                webcam.close()
            if recorder is not None:
                recorder.save()
        finally:
            pygame.quit()


if __name__ == '__main__':
    sys.exit(main())

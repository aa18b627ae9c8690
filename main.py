# main.py
"""
Main script to preview the procedural body shaders.
Sets up the figure, widgets and animation loop, or renders a single frame to a file.

To run:  python main.py [--body rocky] [--output frame.png]
Keys:    1-5 select body, arrows pan, +/- zoom, r resets the view.
"""
import argparse
import logging

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import RadioButtons, Slider

import config as cfg
from canvas import BodyCanvas, render_body
from logging_config import setup_logging
from shading import BodyKind

logger = logging.getLogger(__name__)

background_color, line_color = '#1c1c1c', '#f0f0f0'

BODY_KEYS = {
    '1': BodyKind.ROCKY,
    '2': BodyKind.GAS_GIANT,
    '3': BodyKind.ICE,
    '4': BodyKind.ACCRETION_DISK,
    '5': BodyKind.BLACK_HOLE,
}
PAN_KEYS = {'left': (-1, 0), 'right': (1, 0), 'up': (0, 1), 'down': (0, -1)}


class ShaderViewer:
    """Holds the mutable viewer state; every frame builds fresh shading contexts from it."""

    def __init__(self, params, body=BodyKind.ROCKY, width=cfg.WIDTH, height=cfg.HEIGHT, t=0.0, zoom=1.0):
        self.params = params
        self.body = body
        self.width, self.height = width, height
        self.t = t
        self.center = [0.0, 0.0]
        self.zoom = zoom
        self.paused = False

    def select(self, body):
        if body is not self.body:
            logger.info("Switching to %s", body.value)
        self.body = body

    def pan(self, dx, dy):
        step = cfg.PAN_STEP / self.zoom
        self.center[0] += dx * step
        self.center[1] -= dy * step

    def zoom_by(self, factor):
        self.zoom = min(max(self.zoom * factor, cfg.ZOOM_MIN), cfg.ZOOM_MAX)

    def reset(self):
        self.center = [0.0, 0.0]
        self.zoom = 1.0

    def handle_key(self, key):
        """Apply a key binding. Returns True when the key was recognised."""
        if key in BODY_KEYS:
            self.select(BODY_KEYS[key])
        elif key in PAN_KEYS:
            self.pan(*PAN_KEYS[key])
        elif key in ('+', '='):
            self.zoom_by(cfg.ZOOM_STEP)
        elif key == '-':
            self.zoom_by(1.0 / cfg.ZOOM_STEP)
        elif key == 'r':
            self.reset()
        elif key == ' ':
            self.paused = not self.paused
        else:
            return False
        return True

    def advance(self):
        if not self.paused:
            self.t += cfg.TIME_STEP

    def render(self):
        return render_body(self.body, self.params, self.width, self.height,
                           t=self.t, center=tuple(self.center), zoom=self.zoom)


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Preview procedural celestial body shaders.")
    parser.add_argument('--body', choices=[b.value for b in BodyKind], default=BodyKind.ROCKY.value)
    parser.add_argument('--width', type=positive_int, default=cfg.WIDTH)
    parser.add_argument('--height', type=positive_int, default=cfg.HEIGHT)
    parser.add_argument('--time', type=float, default=0.0, help="Shading time of the first frame")
    parser.add_argument('--zoom', type=float, default=1.0)
    parser.add_argument('--output', help="Render one frame to this image file and exit")
    parser.add_argument('--log-level', default=None)
    return parser.parse_args(argv)


def save_frame(viewer, path):
    image = viewer.render()
    plt.imsave(path, image)
    logger.info("Saved %s frame (t=%.2f) to %s", viewer.body.value, viewer.t, path)


def run_interactive(viewer):
    # Arrow keys and 'r' belong to the viewer, not to the toolbar navigation
    for keymap in ('keymap.back', 'keymap.forward', 'keymap.home'):
        plt.rcParams[keymap] = []

    # --- Setup Window ---
    fig = plt.figure(figsize=(9, 7))
    fig.canvas.manager.set_window_title('Celestial Body Shaders')
    fig.set_facecolor(background_color)
    ax = fig.add_axes([0.25, 0.2, 0.7, 0.75])
    body_canvas = BodyCanvas(ax, background_color, line_color)

    # --- Widgets ---
    radio_ax = fig.add_axes([0.02, 0.55, 0.18, 0.3], facecolor=background_color)
    labels = [b.value for b in BODY_KEYS.values()]
    radio = RadioButtons(radio_ax, labels, active=labels.index(viewer.body.value))
    for label in radio.labels:
        label.set_color(line_color)
    radio.on_clicked(lambda label: viewer.select(BodyKind(label)))

    sliders_def = [
        ('Time', [0.25, 0.09, 0.6, 0.025], {'valmin': 0.0, 'valmax': 100.0, 'valinit': viewer.t}),
        ('Zoom', [0.25, 0.05, 0.6, 0.025], {'valmin': cfg.ZOOM_MIN, 'valmax': cfg.ZOOM_MAX, 'valinit': viewer.zoom}),
    ]
    sliders = {}
    for label, position, params in sliders_def:
        slider_ax = fig.add_axes(position)
        sliders[label] = Slider(ax=slider_ax, label=label, **params, color='#444444')
        sliders[label].label.set_color(line_color)

    def on_time(val):
        viewer.t = val

    def on_zoom(val):
        viewer.zoom = val

    sliders['Time'].on_changed(on_time)
    sliders['Zoom'].on_changed(on_zoom)

    def on_key(event):
        if event.key is not None and viewer.handle_key(event.key):
            if viewer.zoom != sliders['Zoom'].val:
                sliders['Zoom'].set_val(viewer.zoom)

    fig.canvas.mpl_connect('key_press_event', on_key)

    # --- Define the Update Function ---
    def update(frame):
        body_canvas.update(viewer.render(), viewer.body, viewer.t)
        viewer.advance()
        return [body_canvas.image_artist]

    update(0)
    anim = FuncAnimation(fig, update, interval=1000 // max(cfg.FPS, 1), cache_frame_data=False)
    plt.show()
    return anim


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    viewer = ShaderViewer(cfg.default_params(), body=BodyKind(args.body),
                          width=args.width, height=args.height, t=args.time, zoom=args.zoom)
    if args.output:
        save_frame(viewer, args.output)
    else:
        run_interactive(viewer)


if __name__ == '__main__':
    main()

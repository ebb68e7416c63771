"""A window that runs the demo scenes at a fixed frame rate."""

from __future__ import annotations

import argparse
import random
import sys

from skirmish.cannon import Controls
from skirmish.geometry import WIN_HEIGHT, WIN_WIDTH, Color, Vector
from skirmish.scenes import DEFAULT_SCENE, SCENE_NAMES, Program

TITLE = "Skirmish"
TICK_MS = 10
PEN_WIDTH = 3
WINDOW_OFFSET = (300, 300)

_KEY_BINDINGS = {
    "a": "left",
    "d": "right",
    "w": "up",
    "s": "down",
    "space": "fire",
}


class TkCanvas:
    """Draws shapes onto a tkinter canvas widget with a thick pen and white fill."""

    def __init__(self, widget):
        self.widget = widget

    def ellipse(self, left, top, right, bottom, color):
        self.widget.create_oval(
            left, top, right, bottom,
            outline=color.hex, fill=Color.WHITE.hex, width=PEN_WIDTH,
        )

    def rectangle(self, left, top, right, bottom, color):
        self.widget.create_rectangle(
            left, top, right, bottom,
            outline=color.hex, fill=Color.WHITE.hex, width=PEN_WIDTH,
        )

    def line(self, x1, y1, x2, y2, color):
        self.widget.create_line(x1, y1, x2, y2, fill=color.hex, width=PEN_WIDTH)


def key_symbol(keysym):
    """The :class:`Controls` field a key drives, or None for other keys."""
    return _KEY_BINDINGS.get(keysym.lower())


def main(argv=None):
    import tkinter as tk
    from tkinter import messagebox

    parser = argparse.ArgumentParser(description="Show the interactive demo scenes.")
    parser.add_argument("--scene", choices=SCENE_NAMES, default=DEFAULT_SCENE)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    program = Program(random.Random(args.seed))
    program.set_scene(args.scene)
    controls = Controls()

    root = tk.Tk()
    root.title(TITLE)
    root.geometry(f"{WIN_WIDTH}x{WIN_HEIGHT}+{WINDOW_OFFSET[0]}+{WINDOW_OFFSET[1]}")

    menubar = tk.Menu(root)
    file_menu = tk.Menu(menubar, tearoff=False)
    file_menu.add_command(label="Exit", command=root.destroy)
    menubar.add_cascade(label="File", menu=file_menu)
    help_menu = tk.Menu(menubar, tearoff=False)
    help_menu.add_command(
        label="About", command=lambda: messagebox.showinfo("About", TITLE, parent=root)
    )
    menubar.add_cascade(label="Help", menu=help_menu)
    root.config(menu=menubar)

    widget = tk.Canvas(
        root, width=WIN_WIDTH, height=WIN_HEIGHT,
        background=Color.WHITE.hex, highlightthickness=0,
    )
    widget.pack(fill="both", expand=True)
    canvas = TkCanvas(widget)

    def on_motion(event):
        controls.mouse = Vector(float(event.x), float(event.y))

    def on_key(event, pressed):
        name = key_symbol(event.keysym)
        if name is not None:
            setattr(controls, name, pressed)

    widget.bind("<Motion>", on_motion)
    root.bind("<KeyPress>", lambda event: on_key(event, True))
    root.bind("<KeyRelease>", lambda event: on_key(event, False))

    def tick():
        program.update(controls)
        widget.delete("all")
        program.render(canvas)
        root.after(TICK_MS, tick)

    root.after(TICK_MS, tick)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())

import sys
import argparse
import logging
from PyQt6.QtWidgets import QApplication, QGraphicsScene, QGraphicsView
from PyQt6.QtGui import QPainter
from config import DEFAULT_TONIC, START_MIDI, NUM_KEYS, VIEW_MARGIN
from model.key_state import KeyVisualState, Viewpoint, FormFactor
from model.theme import get_theme
from ui.keyboard import build_symmetric_keyboard, build_row_keyboard

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Interval-aware keyboard viewer")
    ap.add_argument("--form-factor", choices=[f.value for f in FormFactor], default=FormFactor.SYMMETRIC.value,
                    help="Keyboard layout to draw.")
    ap.add_argument("--viewpoint", choices=[v.value for v in Viewpoint], default=Viewpoint.INTERVALLIC.value,
                    help="Color keys by note spelling (diatonic) or by interval from the tonic.")
    ap.add_argument("--tonic", type=int, default=DEFAULT_TONIC, help="Tonic as a MIDI note number.")
    ap.add_argument("--theme", default="homey", help="Named palette (homey, pastel, mono).")
    ap.add_argument("--octaves", type=int, default=2, help="Octaves to tile (symmetric only).")
    ap.add_argument("--subtle", action="store_true", help="Swap key/symbol colors on press.")
    ap.add_argument("--log-level", default="WARNING")
    return ap.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        theme = get_theme(args.theme)
    except KeyError as e:
        print(e.args[0])
        sys.exit(2)
    if args.octaves < 1:
        print("--octaves must be at least 1")
        sys.exit(2)

    app = QApplication(sys.argv[:1])
    scene = QGraphicsScene()
    template = KeyVisualState(pitch=args.tonic, tonic=args.tonic,
                              viewpoint=Viewpoint(args.viewpoint), theme=theme, subtle=args.subtle)

    form = FormFactor(args.form_factor)
    if form == FormFactor.SYMMETRIC:
        # tile from the tonic's octave so P1 sits on the tonic
        build_symmetric_keyboard(scene, template, args.tonic, args.octaves)
    else:
        start = START_MIDI + (args.tonic - START_MIDI) % 12
        build_row_keyboard(scene, template, start, NUM_KEYS, form_factor=form)

    view = QGraphicsView(scene)
    view.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    r = scene.itemsBoundingRect()
    view.resize(int(r.width()) + 2 * VIEW_MARGIN, int(r.height()) + 2 * VIEW_MARGIN)
    view.setWindowTitle(f"Keyboard: {form.value}, {args.viewpoint}")
    view.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()

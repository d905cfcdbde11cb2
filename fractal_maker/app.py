import logging
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QLabel, QPushButton

from fractal_maker.config import load_config
from fractal_maker.core.random_source import RandomSource
from fractal_maker.core.selector import Selector
from fractal_maker.core.ui import SimpleApp, PixelView, stack
from fractal_maker.core.utils import alloc_pixels


logger = logging.getLogger(__name__)


class FractalMaker(SimpleApp):

    def __init__(self, cfg):
        super().__init__(cfg.title)

        self.cfg = cfg
        self.image_shape = cfg.image_shape
        self.pixels = alloc_pixels(cfg.image_shape)

        self.selector = Selector(rng=RandomSource(cfg.seed), index=cfg.formula, workers=cfg.workers)

        self.image_wgt = PixelView(cfg.image_shape, useAlpha=cfg.use_alpha)
        self.formula_label = QLabel()
        self.formula_label.setAlignment(Qt.AlignCenter)

        self.prev_btn = QPushButton("<")
        self.next_btn = QPushButton(">")
        # arrow keys are handled by the window itself
        for btn in (self.prev_btn, self.next_btn):
            btn.setFocusPolicy(Qt.NoFocus)
        self.setFocusPolicy(Qt.StrongFocus)

        self.setup_layout()
        self.connect_everything()
        self.draw()

    def setup_layout(self):
        controls = stack(self.prev_btn, self.formula_label, self.next_btn, kind="h", sp=4)
        self.setLayout(stack(self.image_wgt, controls, cm=(4, 4, 4, 4), sp=4))

    def connect_everything(self):
        self.prev_btn.clicked.connect(self.previous_formula)
        self.next_btn.clicked.connect(self.next_formula)

    def previous_formula(self, *_):
        self.selector.retreat()
        self.draw()

    def next_formula(self, *_):
        self.selector.advance()
        self.draw()

    def draw(self):
        width, height = self.image_shape
        self.selector.recompute(self.pixels, width, height)
        self.image_wgt.setPixels(self.pixels)
        self.formula_label.setText(self.selector.label())

    def keyPressEvent(self, event):
        key = event.key()
        if key == Qt.Key_Left:
            self.previous_formula()
        elif key == Qt.Key_Right:
            self.next_formula()
        elif key == Qt.Key_Escape:
            self.close()
        else:
            super().keyPressEvent(event)


def main():
    config_file = sys.argv[1] if len(sys.argv) > 1 else None
    cfg = load_config(config_file)
    logging.basicConfig(level=cfg.log_level, format='%(message)s')
    if config_file is not None:
        logger.info("Loaded configuration from file: %s", config_file)
    logger.info("Image %dx%d, starting with formula %d", *cfg.image_shape, cfg.formula)
    FractalMaker(cfg).run()


if __name__ == '__main__':
    main()

import sys

import numpy
from PyQt5.Qt import QApplication, QDesktopWidget
from PyQt5.Qt import QImage, QPixmap
from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QHBoxLayout, QVBoxLayout, QLayout, QLabel
from PyQt5.QtWidgets import QWidget

from .utils import check_pixels


def to_pixmap(pixels: numpy.ndarray, width: int, height: int, use_alpha: bool = False):
    check_pixels(pixels, width, height)
    # RGB32 ignores the top byte of every pixel, ARGB32 shows it as alpha
    fmt = QImage.Format_ARGB32 if use_alpha else QImage.Format_RGB32
    image = QImage(pixels.data, width, height, width * pixels.itemsize, fmt)
    pixmap = QPixmap()
    # noinspection PyArgumentList
    pixmap.convertFromImage(image)
    return pixmap


_LAYOUTS = {"v": QVBoxLayout, "h": QHBoxLayout}


def stack(*items, kind="v", cm=(0, 0, 0, 0), sp=0):
    """
    Lay out widgets and nested layouts in a row ("h") or a column ("v").
    """
    if kind not in _LAYOUTS:
        raise ValueError("Unknown kind of stack: \"{}\"".format(kind))
    layout = _LAYOUTS[kind]()
    layout.setContentsMargins(*cm)
    layout.setSpacing(sp)
    for item in items:
        if isinstance(item, QLayout):
            layout.addLayout(item)
        else:
            layout.addWidget(item)
    return layout


class PixelView(QLabel):

    def __init__(self, imageShape: tuple, useAlpha: bool = False):
        super().__init__()
        self._imageShape = imageShape
        self._useAlpha = useAlpha
        self._pixelsReference = None
        self.setFixedSize(*imageShape)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)

    def imageShape(self) -> tuple:
        return self._imageShape

    def useAlpha(self) -> bool:
        return self._useAlpha

    def setPixels(self, pixels: numpy.ndarray) -> None:
        self._pixelsReference = pixels
        self.setPixmap(to_pixmap(pixels, *self._imageShape, use_alpha=self._useAlpha))


class SimpleApp(QWidget):

    def __init__(self, title):
        self.app = QApplication.instance() or QApplication(sys.argv)
        # noinspection PyArgumentList
        super().__init__(parent=None)
        self.setWindowTitle(title)

    def run(self):
        screen = QDesktopWidget().screenGeometry()
        self.show()
        x = ((screen.width() - self.width()) // 2) if screen.width() > self.width() else 0
        y = ((screen.height() - self.height()) // 2) if screen.height() > self.height() else 0
        self.move(x, y)
        sys.exit(self.app.exec_())

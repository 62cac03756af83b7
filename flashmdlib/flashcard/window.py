import logging
from collections.abc import Callable, Iterable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from ..config import Config

logger = logging.getLogger("flashmd")


def resolve_keys(names: Iterable[str]) -> set[int]:
    """ Map Qt key names such as 'Return' or 'Key_Escape' onto Qt.Key values. Unknown names are logged and skipped """
    keys = set()
    for name in names:
        attr = name if name.startswith("Key_") else f"Key_{name}"
        key = getattr(Qt.Key, attr, None)
        if key is None:
            logger.warning(f"Unknown key name in config: {name}")
            continue
        keys.add(key.value)
    return keys


class FlashcardWindow(QWidget):
    """ Undecorated fixed size window showing one card. Emits primary/cancel for the configured keys """
    primary = pyqtSignal()
    cancel = pyqtSignal()

    def __init__(self, config: Config):
        super().__init__()
        self.config = config
        self.close_callback = None
        self._advance_keys = resolve_keys(config.advance_keys)
        self._quit_keys = resolve_keys(config.quit_keys)
        self.initUi()

    def initUi(self):
        self.setObjectName("flashmd-main")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        flags = Qt.WindowType.FramelessWindowHint
        if self.config.always_on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        self.setWindowFlags(flags)
        self.setFixedSize(self.config.width, self.config.height)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        # Create widgets
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.viewport = QWidget(self)
        self.viewport_layout = QVBoxLayout(self.viewport)
        self.title_label = QLabel(self.viewport)
        self.body_label = QLabel(self.viewport)

        # Configure widgets
        text_format = Qt.TextFormat.RichText if self.config.rich_text else Qt.TextFormat.PlainText
        self.viewport.setObjectName("viewport")
        self.viewport.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.viewport_layout.setSpacing(10)
        self.title_label.setObjectName("title")
        self.title_label.setTextFormat(text_format)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignHCenter)
        self.body_label.setObjectName("body")
        self.body_label.setTextFormat(text_format)
        self.body_label.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.body_label.setWordWrap(True)

        # Add widgets
        self.viewport_layout.addWidget(self.title_label)
        self.viewport_layout.addWidget(self.body_label, 1)
        self.main_layout.addWidget(self.viewport)

    def keyPressEvent(self, a0):
        key = a0.key()
        if key in self._quit_keys:
            self.cancel.emit()
            a0.accept()
        elif key in self._advance_keys:
            self.primary.emit()
            a0.accept()
        else:
            super().keyPressEvent(a0)

    def closeEvent(self, a0):
        if self.close_callback:
            self.close_callback()
        a0.accept()

    def showEvent(self, a0):
        super().showEvent(a0)
        self.activateWindow()
        self.setFocus()

    def setCloseCallback(self, callback: Callable[[], None]):
        self.close_callback = callback

    def bind_primary(self, callback: Callable[[], None]):
        """ bind advance/flip key with callback function """
        self.primary.connect(callback)

    def bind_cancel(self, callback: Callable[[], None]):
        """ bind quit key with callback function """
        self.cancel.connect(callback)

    def set_title(self, text: str):
        self.title_label.setText(text)

    def set_body(self, text: str):
        self.body_label.setText(text)

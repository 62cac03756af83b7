# #1E1E2E is a dark blue-grey
# #CDD6F4 is a light grey
# #89B4FA is a soft blue

MAIN_WINDOW_CSS = """
QWidget#flashmd-main {
    background-color: #1E1E2E;
    border: 2px solid #89B4FA;
    border-radius: 8px;
    }
"""

VIEWPORT_CSS = """
QWidget#viewport {
    background: transparent;
    padding: 12px;
    }
"""

TITLE_CSS = """
QLabel#title {
    color: #89B4FA;
    font-size: 22px;
    font-weight: bold;
    }
"""

BODY_CSS = """
QLabel#body {
    color: #CDD6F4;
    font-size: 15px;
    }
"""

DEFAULT_CSS = MAIN_WINDOW_CSS + VIEWPORT_CSS + TITLE_CSS + BODY_CSS

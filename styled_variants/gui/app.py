"""Preview GUI application entry point."""

import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication

from styled_variants.gui.preview_window import PreviewWindow


def main():
    """Launch the Styled Variants preview application."""
    # Enable high DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Styled Variants")
    app.setOrganizationName("StyledVariants")

    window = PreviewWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

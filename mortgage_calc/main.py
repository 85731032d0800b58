"""Main application window for the Mortgage Calculator."""
import sys
import os

from PyQt6.QtWidgets import QApplication, QMainWindow
from PyQt6.QtGui import QIcon, QAction, QKeySequence

from mortgage_calc import config
from mortgage_calc.calculator_controller import CalculatorController
from mortgage_calc.services import ComparisonStore
from .theme import ThemeManager
from .views.calculator import CalculatorView


def resource_path(*parts):
    """Path to a bundled resource, next to the executable when frozen."""
    if getattr(sys, 'frozen', False):
        base_path = os.path.dirname(sys.executable)
    else:
        base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_path, "resources", *parts)


class MainApp(QMainWindow):
    """Main application window."""

    def __init__(self, store: ComparisonStore = None):
        super().__init__()
        self.setWindowTitle(config.APP_NAME)
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        icon_path = resource_path("icon.png")
        if os.path.exists(icon_path):
            icon = QIcon(icon_path)
            if icon.isNull():
                print(f"Warning: Could not load icon: {icon_path}")
            else:
                self.setWindowIcon(icon)

        self.theme_manager = ThemeManager()
        self.controller = CalculatorController(store=store if store is not None else ComparisonStore())
        self.calculator_view = CalculatorView(self, self.controller, self.theme_manager)
        self.setCentralWidget(self.calculator_view)

        self.create_menus()

    def create_menus(self):
        """Create application menus."""
        menubar = self.menuBar()
        view_menu = menubar.addMenu("View")

        theme_action = QAction("Toggle Dark Mode", self)
        theme_action.setShortcut(QKeySequence("Ctrl+D"))
        theme_action.setStatusTip("Switch between light and dark colors")
        theme_action.triggered.connect(self.toggle_theme)
        view_menu.addAction(theme_action)

    def toggle_theme(self):
        self.theme_manager.toggle_theme()
        self.calculator_view.apply_theme()


def main():
    """Entry point for the application."""
    app = QApplication(sys.argv)
    app.setApplicationName(config.APP_NAME)

    window = MainApp()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

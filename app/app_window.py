# app_window.py
"""
Main application window for the logic circuit editor.

Hosts the IO canvas and exposes the editor commands through the Edit menu.
"""

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PySide6.QtGui import QAction, QKeySequence
from ui.io_canvas import IOCanvas


class AppWindow(QMainWindow):
    """
    The main entry point window for the logic circuit editor.
    Ctrl+Z / Ctrl+Y undo and redo, R rotates the selection.
    """

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Logic Circuit Editor")
        self.resize(900, 600)

        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)

        # The Canvas
        self.canvas = IOCanvas()
        main_layout.addWidget(self.canvas, stretch=1)

        self.hint_label = QLabel("Drag to move  |  R: rotate  |  Ctrl+Z / Ctrl+Y: undo / redo")
        self.hint_label.setContentsMargins(5, 2, 5, 2)
        main_layout.addWidget(self.hint_label)

        self.init_menu()

    def init_menu(self) -> None:
        edit_menu = self.menuBar().addMenu("Edit")

        self.undo_action = QAction("Undo", self)
        self.undo_action.setShortcut(QKeySequence.Undo)
        self.undo_action.triggered.connect(self.canvas.undo)
        edit_menu.addAction(self.undo_action)

        # Ctrl+Y alongside the platform redo key
        self.redo_action = QAction("Redo", self)
        self.redo_action.setShortcuts([QKeySequence(QKeySequence.Redo), QKeySequence("Ctrl+Y")])
        self.redo_action.triggered.connect(self.canvas.redo)
        edit_menu.addAction(self.redo_action)

        edit_menu.addSeparator()

        self.rotate_action = QAction("Rotate", self)
        self.rotate_action.setShortcut(QKeySequence("R"))
        self.rotate_action.triggered.connect(self.canvas.rotate_selection)
        edit_menu.addAction(self.rotate_action)

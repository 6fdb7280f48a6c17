"""Load/reset buttons controlling the session and updating views."""
from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QWidget, QPushButton, QHBoxLayout, QLabel
from PySide6.QtCore import Slot

class ControlPanel(QWidget):
    def __init__(self, session, console, register_panel):
        super().__init__()
        self.session = session
        self.console = console
        self.register_panel = register_panel

        self.btn_load = QPushButton("Load script")
        self.btn_reset = QPushButton("Reset")
        self.status = QLabel("Ready")

        layout = QHBoxLayout(self)
        for w in (self.btn_load, self.btn_reset, self.status):
            layout.addWidget(w)
        self.setLayout(layout)

        # connections
        self.btn_load.clicked.connect(self.load)
        self.btn_reset.clicked.connect(self.reset)
        self.console.executed.connect(self.on_executed)

    @Slot(str)
    def on_executed(self, status):
        self.register_panel.refresh()
        self.status.setText(status)

    @Slot()
    def load(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load script", "",
                                              "Assembly (*.s *.asm *.txt);;All files (*)")
        if not path:
            return
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            self.status.setText(f"Cannot open {path}: {e.strerror}")
            return
        self.console.run_script(text)

    @Slot()
    def reset(self):
        self.session.reset()
        self.console.clear()
        self.register_panel.refresh()
        self.status.setText("Reset done")

from PySide6.QtWidgets import QMainWindow, QDockWidget, QApplication
from PySide6.QtCore import Qt
from .register_panel import RegisterPanel
from .console_panel import ConsolePanel
from .control_panel import ControlPanel
from regmachine.session import BANNER, Session
import sys

class MainWindow(QMainWindow):
    def __init__(self, signed=True):
        super().__init__()
        self.session = Session(signed=signed)
        self.setWindowTitle("Register Machine Interpreter")

        # central widget: console
        self.console = ConsolePanel(self.session)
        self.console.transcript.appendPlainText(BANNER)
        self.setCentralWidget(self.console)

        # dock 1: registers
        self.register_panel = RegisterPanel(self.session)
        reg_dock = QDockWidget("Registers", self)
        reg_dock.setWidget(self.register_panel)
        self.addDockWidget(Qt.LeftDockWidgetArea, reg_dock)

        # dock 2: controls
        ctrl_dock = QDockWidget("Control", self)
        ctrl_dock.setWidget(ControlPanel(self.session, self.console, self.register_panel))
        self.addDockWidget(Qt.BottomDockWidgetArea, ctrl_dock)


def run(signed=True, script=None):
    app = QApplication(sys.argv[:1])
    mw = MainWindow(signed=signed)
    mw.resize(960, 640)
    mw.show()
    if script:
        mw.console.run_script(script)
    return app.exec()

if __name__ == "__main__":
    sys.exit(run())

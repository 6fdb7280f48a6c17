"""Central widget: a read-only transcript above a one-line instruction entry.
Each submitted line goes through `Session.feed`."""
from PySide6.QtWidgets import QLineEdit, QPlainTextEdit, QVBoxLayout, QWidget
from PySide6.QtCore import Signal, Slot
from PySide6.QtGui import QFontDatabase

from regmachine.decoder import DecodeError
from regmachine.engine import Output, Terminate
from regmachine.session import PROMPT, format_output

class ConsolePanel(QWidget):
    # emitted after every line with a short status text
    executed = Signal(str)

    def __init__(self, session):
        super().__init__()
        self.session = session
        mono = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)

        self.transcript = QPlainTextEdit()
        self.transcript.setReadOnly(True)
        self.transcript.setFont(mono)
        self.entry = QLineEdit()
        self.entry.setFont(mono)
        self.entry.setPlaceholderText("MOV r1, #5")
        self.entry.returnPressed.connect(self.submit)

        layout = QVBoxLayout(self)
        layout.addWidget(self.transcript)
        layout.addWidget(self.entry)
        self.setLayout(layout)

    @Slot()
    def submit(self):
        line = self.entry.text()
        self.entry.clear()
        self.run_line(line)

    def run_line(self, line: str) -> bool:
        """Execute one line; returns False if it failed to decode."""
        self.transcript.appendPlainText(PROMPT + line)
        try:
            result = self.session.feed(line)
        except DecodeError as e:
            self.transcript.appendPlainText(str(e))
            self.executed.emit(str(e))
            return False
        if isinstance(result, Output):
            self.transcript.appendPlainText(format_output(result))
        elif isinstance(result, Terminate):
            self.transcript.appendPlainText("Program terminated. Press Reset to continue.")
            self.entry.setEnabled(False)
        self.executed.emit("Terminated" if self.session.terminated else "OK")
        return True

    def run_script(self, text: str):
        for line in text.splitlines():
            if self.session.terminated or not self.run_line(line):
                break

    def clear(self):
        self.transcript.clear()
        self.entry.setEnabled(True)
        self.entry.setFocus()

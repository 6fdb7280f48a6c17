"""Widget that shows the 16 general-purpose registers in a compact table,
as hex words and as signed decimals. Updates are pulled from the session's
register bank via the `refresh()` slot, which the console triggers after
each executed line."""
from PySide6.QtWidgets import QWidget, QTableWidget, QTableWidgetItem, QVBoxLayout
from PySide6.QtCore import Slot

from regmachine.registers import GENERAL_REGS, reg_name

class RegisterPanel(QWidget):
    HEADERS = [reg_name(i) for i in range(GENERAL_REGS)]

    def __init__(self, session):
        super().__init__()
        self.session = session
        self.table = QTableWidget(len(self.HEADERS), 3)
        self.table.setHorizontalHeaderLabels(["Reg", "Value (hex)", "Value (dec)"])
        for row, name in enumerate(self.HEADERS):
            self.table.setItem(row, 0, QTableWidgetItem(name))
            self.table.setItem(row, 1, QTableWidgetItem("0x00000000"))
            self.table.setItem(row, 2, QTableWidgetItem("0"))
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)

        layout = QVBoxLayout(self)
        layout.addWidget(self.table)
        self.setLayout(layout)
        self.refresh()

    @Slot()
    def refresh(self):
        """Update table values from the register bank."""
        bank = self.session.bank
        for i in range(GENERAL_REGS):
            val = bank[i]
            dec = bank.signed(i) if self.session.signed else val
            self.table.item(i, 1).setText(f"0x{val:08X}")
            self.table.item(i, 2).setText(str(dec))

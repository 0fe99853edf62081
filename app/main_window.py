from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QSettings, Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from core.events import label_for_key
from core.importer import FileImportError, read_export_text
from core.selection import RELAY_CLASSES, RELAY_TYPES, available_ages, filter_swimmers, required_event_keys
from core.service import ValidationResult, validate

FIXED_COLUMNS = ["Välj", "Namn", "Kön", "Ålder"]


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Simvaliderare – lagkapp")
        self.resize(1100, 700)

        self.raw_text = ""
        self.result: ValidationResult | None = None
        self.selected_names: set[str] = set()

        self.file_label = QLabel("Ingen fil vald")
        open_btn = QPushButton("Öppna fil")
        open_btn.clicked.connect(self.open_file)
        self.validate_btn = QPushButton("Validera fil")
        self.validate_btn.setEnabled(False)
        self.validate_btn.clicked.connect(self.run_validation)

        self.summary_label = QLabel("")

        self.relay_type = QComboBox()
        self.relay_type.addItem("Välj typ…", "")
        for relay in RELAY_TYPES:
            self.relay_type.addItem(relay, relay)
        self.relay_type.currentIndexChanged.connect(lambda _i: self._update_show_button())

        self.relay_class = QComboBox()
        self.relay_class.addItem("Välj klass…", "")
        for relay_class in RELAY_CLASSES:
            self.relay_class.addItem(relay_class, relay_class)

        self.ages_list = QListWidget()
        self.ages_list.setSelectionMode(QAbstractItemView.SelectionMode.MultiSelection)
        self.ages_list.setMaximumHeight(110)

        self.show_btn = QPushButton("Visa alla simmare")
        self.show_btn.setEnabled(False)
        self.show_btn.clicked.connect(self.load_swimmers)
        self.keys_label = QLabel("")

        self.table = QTableWidget(0, len(FIXED_COLUMNS))
        self.table.setHorizontalHeaderLabels(FIXED_COLUMNS)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.itemChanged.connect(self._on_item_changed)
        self.selected_label = QLabel("Valda simmare: 0")

        file_row = QHBoxLayout()
        file_row.addWidget(open_btn)
        file_row.addWidget(self.validate_btn)
        file_row.addWidget(self.file_label, 1)

        filters = QHBoxLayout()
        for caption, widget in (
            ("Lagkapp", self.relay_type),
            ("Klass", self.relay_class),
            ("Åldersklasser", self.ages_list),
        ):
            column = QVBoxLayout()
            column.addWidget(QLabel(caption))
            column.addWidget(widget)
            filters.addLayout(column)

        actions = QHBoxLayout()
        actions.addWidget(self.show_btn)
        actions.addWidget(self.keys_label, 1)

        root_layout = QVBoxLayout()
        root_layout.addLayout(file_row)
        root_layout.addWidget(self.summary_label)
        root_layout.addLayout(filters)
        root_layout.addLayout(actions)
        root_layout.addWidget(self.table, 1)
        root_layout.addWidget(self.selected_label)
        wrapper = QWidget(); wrapper.setLayout(root_layout)
        self.setCentralWidget(wrapper)

    def reset_state(self) -> None:
        self.result = None
        self.selected_names.clear()
        self.summary_label.setText("")
        self.keys_label.setText("")
        self.ages_list.clear()
        self.relay_type.setCurrentIndex(0)
        self.relay_class.setCurrentIndex(0)
        self.table.setRowCount(0)
        self._update_selected_label()
        self._update_show_button()

    def open_file(self) -> None:
        settings = QSettings("RelayPicker", "Simvaliderare")
        last_file = settings.value("last_opened_file", "", type=str)
        default_directory = str(Path(last_file).parent) if last_file else str(Path.home())

        path, _ = QFileDialog.getOpenFileName(
            self,
            "Välj statistikrapport",
            default_directory,
            "Resultatexport (*.csv *.txt *.xlsx *.xlsm)",
        )
        self.reset_state()
        if not path:
            return

        selected_path = Path(path)
        settings.setValue("last_opened_file", str(selected_path))
        try:
            self.raw_text = read_export_text(selected_path)
        except FileImportError as exc:
            self.raw_text = ""
            QMessageBox.warning(self, "Fel vid inläsning", str(exc))
        self.file_label.setText(selected_path.name if self.raw_text else "Ingen fil vald")
        self.validate_btn.setEnabled(bool(self.raw_text))

    def run_validation(self) -> None:
        self.reset_state()
        result = validate(self.raw_text)
        if not result.ok:
            QMessageBox.warning(self, "Fel", "\n".join(result.errors))
            return

        self.result = result
        summary = result.summary
        self.summary_label.setText(f"OK – Simmare: {summary.count}, Dam: {summary.dam}, Herr: {summary.herr}")
        for age in available_ages(result.swimmers):
            item = QListWidgetItem(f"{age} år")
            item.setData(Qt.ItemDataRole.UserRole, age)
            self.ages_list.addItem(item)
        self._update_show_button()

    def selected_ages(self) -> list[int]:
        return [int(item.data(Qt.ItemDataRole.UserRole)) for item in self.ages_list.selectedItems()]

    def _update_show_button(self) -> None:
        relay = self.relay_type.currentData() or ""
        self.show_btn.setEnabled(self.result is not None and bool(relay))
        keys = required_event_keys(relay)
        self.keys_label.setText(f"Visar kolumner: {', '.join(label_for_key(k) for k in keys)}" if keys else "")

    def load_swimmers(self) -> None:
        if self.result is None:
            return
        relay = self.relay_type.currentData() or ""
        keys = required_event_keys(relay)
        entries = filter_swimmers(
            self.result.swimmers,
            relay_class=self.relay_class.currentData() or "",
            ages=self.selected_ages(),
            relay_type=relay,
        )

        self.table.blockSignals(True)
        self.table.setColumnCount(len(FIXED_COLUMNS) + len(keys))
        self.table.setHorizontalHeaderLabels(FIXED_COLUMNS + [label_for_key(k) for k in keys])
        self.table.setRowCount(len(entries))
        for row_idx, entry in enumerate(entries):
            check = QTableWidgetItem()
            check.setFlags(Qt.ItemFlag.ItemIsUserCheckable | Qt.ItemFlag.ItemIsEnabled)
            check.setCheckState(
                Qt.CheckState.Checked if entry.name in self.selected_names else Qt.CheckState.Unchecked
            )
            check.setData(Qt.ItemDataRole.UserRole, entry.name)
            self.table.setItem(row_idx, 0, check)
            values = [entry.name, entry.gender, "" if entry.age is None else str(entry.age)]
            values += [entry.times[k] for k in keys]
            for col_idx, val in enumerate(values, start=1):
                self.table.setItem(row_idx, col_idx, QTableWidgetItem(val))
        self.table.blockSignals(False)
        self.table.resizeColumnsToContents()

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        if item.column() != 0:
            return
        name = item.data(Qt.ItemDataRole.UserRole)
        if item.checkState() == Qt.CheckState.Checked:
            self.selected_names.add(name)
        else:
            self.selected_names.discard(name)
        self._update_selected_label()

    def _update_selected_label(self) -> None:
        self.selected_label.setText(f"Valda simmare: {len(self.selected_names)}")


def run_app() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication([])
    window = MainWindow()
    window.show()
    app.exec()

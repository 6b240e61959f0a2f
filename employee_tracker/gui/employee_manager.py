# gui/employee_manager.py
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QTableWidget, QTableWidgetItem, QMessageBox, QCheckBox, QDoubleSpinBox,
    QDateEdit, QGridLayout, QFileDialog, QApplication
)
from PySide6.QtCore import Qt, QDate
from PySide6.QtWidgets import QAbstractItemView

from employee_tracker.cli.table import HEADERS
from employee_tracker.config import DEFAULT_DATA_FILE
from employee_tracker.data.employee_store import EmployeeStore
from employee_tracker.exceptions import StoreIOError
from employee_tracker.utils.date_helper import format_date
from employee_tracker.utils.parse_utils import FIELD_SEPARATOR, format_bool

SALARY_MAX = 1_000_000_000.0
TEXT_FIELDS = ("name", "position", "department")


class EmployeeManagerDialog(QDialog):
    """
    직원 추가/수정/삭제 다이얼로그.
    좌측: 직원 테이블
    우측: 편집 패널(이름/직책/급여/입사일/부서/재직)
    모든 변경은 EmployeeStore 를 거친다. 파일 반영은 [파일 저장] 시에만.
    """
    def __init__(self, store: EmployeeStore, data_file: str = DEFAULT_DATA_FILE, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Employee Tracker")
        self.resize(980, 620)

        self.store = store
        self.data_file = data_file
        self._editing_id = None
        self._bound_values = None     # 선택 직후의 폼 값
        self._build_ui()
        self._load_table()

        self.changed = False

    # ---------- UI ----------
    def _build_ui(self):
        root = QHBoxLayout(self)

        # 좌: 직원 표
        left = QVBoxLayout()
        left.addWidget(QLabel("Employees"))

        self.table = QTableWidget(0, len(HEADERS))
        self.table.setHorizontalHeaderLabels(HEADERS)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        left.addWidget(self.table)

        btn_row = QHBoxLayout()
        self.btn_add = QPushButton("+ New")
        self.btn_del = QPushButton("Delete")
        self.btn_report = QPushButton("Tenure report")
        btn_row.addWidget(self.btn_add)
        btn_row.addWidget(self.btn_del)
        btn_row.addStretch(1)
        btn_row.addWidget(self.btn_report)
        left.addLayout(btn_row)

        file_row = QHBoxLayout()
        self.btn_load = QPushButton("Load file...")
        self.btn_save_file = QPushButton("Save file...")
        file_row.addWidget(self.btn_load)
        file_row.addWidget(self.btn_save_file)
        file_row.addStretch(1)
        left.addLayout(file_row)

        # 우: 편집 패널
        right = QVBoxLayout()
        right.addWidget(QLabel("Edit"))

        form = QGridLayout()
        r = 0

        form.addWidget(QLabel("ID"), r, 0)
        self.txt_id = QLineEdit()
        self.txt_id.setReadOnly(True)
        self.txt_id.setPlaceholderText("assigned automatically")
        form.addWidget(self.txt_id, r, 1); r += 1

        form.addWidget(QLabel("Name*"), r, 0)
        self.txt_name = QLineEdit()
        form.addWidget(self.txt_name, r, 1); r += 1

        form.addWidget(QLabel("Position*"), r, 0)
        self.txt_position = QLineEdit()
        form.addWidget(self.txt_position, r, 1); r += 1

        form.addWidget(QLabel("Salary"), r, 0)
        self.spin_salary = QDoubleSpinBox()
        self.spin_salary.setDecimals(2)
        self.spin_salary.setRange(0.0, SALARY_MAX)   # 음수 불가
        form.addWidget(self.spin_salary, r, 1); r += 1

        form.addWidget(QLabel("Hire date"), r, 0)
        date_row = QHBoxLayout()
        self.date_hire = QDateEdit()
        self.date_hire.setDisplayFormat("yyyy-MM-dd")
        self.date_hire.setCalendarPopup(True)
        self.date_hire.setDate(QDate.currentDate())
        self.chk_no_date = QCheckBox("no hire date")
        date_row.addWidget(self.date_hire)
        date_row.addWidget(self.chk_no_date)
        form.addLayout(date_row, r, 1); r += 1

        form.addWidget(QLabel("Department*"), r, 0)
        self.txt_department = QLineEdit()
        form.addWidget(self.txt_department, r, 1); r += 1

        self.chk_active = QCheckBox("Active")
        self.chk_active.setChecked(True)
        form.addWidget(self.chk_active, r, 1); r += 1

        right.addLayout(form)
        right.addStretch(1)

        # 저장/초기화/닫기
        action_row = QHBoxLayout()
        self.btn_new = QPushButton("Clear")
        self.btn_save = QPushButton("Apply")
        self.btn_close = QPushButton("Close")
        action_row.addWidget(self.btn_new)
        action_row.addWidget(self.btn_save)
        action_row.addStretch(1)
        action_row.addWidget(self.btn_close)
        right.addLayout(action_row)

        # 레이아웃 합치기
        root.addLayout(left, 6)
        root.addLayout(right, 4)

        # 시그널
        self.table.itemSelectionChanged.connect(self._on_selection_changed)
        self.chk_no_date.toggled.connect(lambda on: self.date_hire.setEnabled(not on))
        self.btn_add.clicked.connect(self._on_new_clicked)
        self.btn_del.clicked.connect(self._on_delete_clicked)
        self.btn_report.clicked.connect(self._on_report_clicked)
        self.btn_load.clicked.connect(self._on_load_clicked)
        self.btn_save_file.clicked.connect(self._on_save_file_clicked)
        self.btn_new.clicked.connect(self._clear_form)
        self.btn_save.clicked.connect(self._on_save_clicked)
        self.btn_close.clicked.connect(self.accept)

    # ---------- 데이터 로드/표시 ----------
    def _load_table(self):
        self.table.setRowCount(0)
        for e in self.store.list_all():
            r = self.table.rowCount()
            self.table.insertRow(r)
            cells = [
                str(e.id), e.name, e.position, f"{e.salary:.2f}",
                format_date(e.hire_date, "N/A"), e.department, format_bool(e.active),
            ]
            for c, text in enumerate(cells):
                item = QTableWidgetItem(text)
                if c in (0, 3):
                    item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
                self.table.setItem(r, c, item)

        self.table.resizeColumnsToContents()

    def _on_selection_changed(self):
        row = self.table.currentRow()
        # clearSelection() 도 이 시그널을 보냄 -> 선택이 없으면 무시
        if row < 0 or not self.table.selectedItems():
            return
        self._bind_form_from_row(row)

    def _bind_form_from_row(self, row: int):
        e = self.store.find(int(self.table.item(row, 0).text()))
        if not e:
            return
        self._editing_id = e.id
        self.txt_id.setText(str(e.id))
        self.txt_name.setText(e.name)
        self.txt_position.setText(e.position)
        self.spin_salary.setValue(max(0.0, e.salary))
        if e.hire_date is None:
            self.chk_no_date.setChecked(True)
        else:
            self.chk_no_date.setChecked(False)
            self.date_hire.setDate(QDate(e.hire_date.year, e.hire_date.month, e.hire_date.day))
        self.txt_department.setText(e.department)
        self.chk_active.setChecked(bool(e.active))
        self._bound_values = self._read_form()

    def _clear_form(self):
        self._editing_id = None
        self._bound_values = None
        self.txt_id.clear()
        self.txt_name.clear()
        self.txt_position.clear()
        self.spin_salary.setValue(0.0)
        self.chk_no_date.setChecked(False)
        self.date_hire.setDate(QDate.currentDate())
        self.txt_department.clear()
        self.chk_active.setChecked(True)
        self.table.clearSelection()

    def _read_form(self):
        """폼 -> update 키별 값."""
        return {
            "name": self.txt_name.text().strip(),
            "position": self.txt_position.text().strip(),
            "salary": float(self.spin_salary.value()),
            "hiredate": None if self.chk_no_date.isChecked() else self.date_hire.date().toPython(),
            "department": self.txt_department.text().strip(),
            "active": self.chk_active.isChecked(),
        }

    def _check_form(self, values) -> str | None:
        """입력 오류 메시지. 문제 없으면 None."""
        texts = [values[k] for k in TEXT_FIELDS]
        if not all(texts):
            return "Name, position and department are required."
        if any(FIELD_SEPARATOR in t for t in texts):
            return "Commas are not supported."
        return None

    # ---------- 버튼 동작 ----------
    def _on_new_clicked(self):
        self._clear_form()
        self.txt_name.setFocus()

    def _on_delete_clicked(self):
        row = self.table.currentRow()
        if row < 0:
            QMessageBox.information(self, "Notice", "Select an employee to delete.")
            return
        eid = int(self.table.item(row, 0).text())
        name = self.table.item(row, 1).text()
        if QMessageBox.question(self, "Confirm", f"Delete employee [{name}]?") != QMessageBox.Yes:
            return
        self.store.remove(eid)
        self._load_table()
        self._clear_form()
        self.changed = True

    def _on_save_clicked(self):
        values = self._read_form()
        problem = self._check_form(values)
        if problem:
            QMessageBox.warning(self, "Check", problem)
            self.txt_name.setFocus()
            return

        # 새로 추가 or 수정
        if self._editing_id is None:
            emp = self.store.add(values["name"], values["position"], values["salary"],
                                 values["hiredate"], values["department"], values["active"])
            self._editing_id = emp.id
            msg = f"Added employee #{emp.id}."
        else:
            if self.store.find(self._editing_id) is None:
                QMessageBox.warning(self, "Error", "The selected employee no longer exists.")
                return
            # 폼에서 바뀐 필드만 반영 (위젯 범위에 맞춰 잘린 급여/입사일 보존)
            bound = self._bound_values or {}
            for key, value in values.items():
                if bound.get(key, object()) != value:
                    self.store.update(self._editing_id, key, value)
            msg = "Employee updated."

        self._bound_values = values
        self._load_table()
        self.changed = True
        QMessageBox.information(self, "Done", msg)

    def _on_load_clicked(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load employees", self.data_file,
                                              "Text files (*.txt);;All files (*)")
        if not path:
            return
        if self.store.list_all():
            # 불러오기는 현재 목록을 먼저 비운다 (실패해도 복구 안 됨)
            if QMessageBox.question(self, "Confirm",
                                    "Loading replaces all employees in memory. Continue?") != QMessageBox.Yes:
                return
        try:
            count = self.store.load(path)
        except StoreIOError as e:
            QMessageBox.warning(self, "Load failed", str(e))
            count = None
        else:
            self.data_file = path
        self._load_table()
        self._clear_form()
        if count is not None:
            QMessageBox.information(self, "Done", f"Loaded {count} employee(s).")

    def _on_save_file_clicked(self):
        path, _ = QFileDialog.getSaveFileName(self, "Save employees", self.data_file,
                                              "Text files (*.txt);;All files (*)")
        if not path:
            return
        try:
            count = self.store.save(path)
        except StoreIOError as e:
            QMessageBox.warning(self, "Save failed", str(e))
            return
        self.data_file = path
        QMessageBox.information(self, "Done", f"Saved {count} employee(s).")

    def _on_report_clicked(self):
        QMessageBox.information(self, "Tenure report", format_report(self.store))


def format_report(store: EmployeeStore) -> str:
    lines = []
    for category, employees in store.tenure_report().items():
        lines.append(f"{category} ({len(employees)})")
        if not employees:
            lines.append("  No employees.")
        for e in employees:
            lines.append(f"  #{e.id} {e.name} ({e.position})")
    return "\n".join(lines)


def open_employee_manager(store: EmployeeStore, data_file: str = DEFAULT_DATA_FILE) -> int:
    app = QApplication.instance() or QApplication([])
    dlg = EmployeeManagerDialog(store, data_file)
    dlg.show()
    return app.exec()

"""Calculator view for the Mortgage Calculator."""
from PyQt6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QLabel,
                             QPushButton, QLineEdit, QFormLayout, QFrame,
                             QTableWidget, QTableWidgetItem, QHeaderView,
                             QAbstractItemView, QScrollArea)
from PyQt6.QtGui import QColor
from PyQt6.QtCore import Qt

from mortgage_calc import config
from mortgage_calc.calculator_controller import CalculatorController
from mortgage_calc.formatting import (format_number_with_commas, adjust_cursor,
                                      format_currency, format_rate, format_years,
                                      format_comparison_count)
from ..theme import ThemeManager


COMPARISON_HEADERS = ["Interest Rate", "Loan Amount", "Duration", "Monthly Payment",
                      "Total Interest", "Total Amount", ""]


class CalculatorView(QWidget):
    """Single-screen calculator: input form, results panel and comparison table."""

    def __init__(self, parent=None, controller: CalculatorController = None,
                 theme_manager: ThemeManager = None):
        super().__init__(parent)
        self.theme_manager = theme_manager or ThemeManager()
        self.controller = controller or CalculatorController()
        self.controller.on_result = self.show_results
        self.controller.on_error = self.show_error
        self.controller.on_comparison_changed = lambda store: self.refresh_comparison()

        self.init_ui()
        self.apply_theme()

    def init_ui(self):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        outer.addWidget(scroll)

        content = QWidget()
        scroll.setWidget(content)
        layout = QVBoxLayout(content)
        layout.setContentsMargins(30, 20, 30, 20)
        layout.setSpacing(16)

        self.title_label = QLabel(config.APP_NAME)
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)

        # Input form
        self.form_frame = QFrame()
        form = QFormLayout(self.form_frame)
        form.setSpacing(10)

        self.rate_input = QLineEdit()
        self.rate_input.setPlaceholderText(config.PLACEHOLDER_INTEREST_RATE)
        self.amount_input = QLineEdit()
        self.amount_input.setPlaceholderText(config.PLACEHOLDER_LOAN_AMOUNT)
        self.amount_input.textEdited.connect(self.on_amount_edited)
        self.duration_input = QLineEdit()
        self.duration_input.setPlaceholderText(config.PLACEHOLDER_LOAN_DURATION)
        self.fees_input = QLineEdit()
        self.fees_input.setPlaceholderText(config.PLACEHOLDER_LOT_FEES)

        form.addRow("Interest Rate (%)", self.rate_input)
        form.addRow("Loan Amount ($)", self.amount_input)
        form.addRow("Loan Duration (years)", self.duration_input)
        form.addRow("Lot Fees ($/month)", self.fees_input)

        # Enter in any field calculates
        for field in self._fields():
            field.returnPressed.connect(self.calculate)

        self.calculate_btn = QPushButton("Calculate")
        self.calculate_btn.setMinimumHeight(40)
        self.calculate_btn.clicked.connect(self.calculate)
        form.addRow(self.calculate_btn)
        layout.addWidget(self.form_frame)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        # Results
        self.results_frame = QFrame()
        results_layout = QVBoxLayout(self.results_frame)
        self.monthly_label = QLabel()
        self.fees_note_label = QLabel()
        self.interest_label = QLabel()
        self.total_label = QLabel()

        monthly_row = QHBoxLayout()
        monthly_row.addWidget(QLabel("Monthly Payment:"))
        monthly_row.addStretch()
        monthly_row.addWidget(self.monthly_label)
        monthly_row.addWidget(self.fees_note_label)
        results_layout.addLayout(monthly_row)

        for caption, value_label in (("Total Interest:", self.interest_label),
                                     ("Total Amount:", self.total_label)):
            row = QHBoxLayout()
            row.addWidget(QLabel(caption))
            row.addStretch()
            row.addWidget(value_label)
            results_layout.addLayout(row)

        self.add_comparison_btn = QPushButton("Add to Comparison")
        self.add_comparison_btn.clicked.connect(self.add_to_comparison)
        results_layout.addWidget(self.add_comparison_btn)
        self.results_frame.setVisible(False)
        layout.addWidget(self.results_frame)

        # Comparison
        self.comparison_frame = QFrame()
        comparison_layout = QVBoxLayout(self.comparison_frame)
        header = QHBoxLayout()
        self.comparison_title = QLabel("Mortgage Comparison")
        self.comparison_count = QLabel()
        header.addWidget(self.comparison_title)
        header.addStretch()
        header.addWidget(self.comparison_count)
        comparison_layout.addLayout(header)

        self.comparison_table = QTableWidget(0, len(COMPARISON_HEADERS))
        self.comparison_table.setHorizontalHeaderLabels(COMPARISON_HEADERS)
        self.comparison_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.comparison_table.verticalHeader().setVisible(False)
        self.comparison_table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.comparison_table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        comparison_layout.addWidget(self.comparison_table)
        layout.addWidget(self.comparison_frame)

        layout.addStretch()

    def _fields(self):
        return [self.rate_input, self.amount_input, self.duration_input, self.fees_input]

    def _field_inputs(self):
        """Input widget for each LoanInputs field name."""
        return {
            "interest_rate": self.rate_input,
            "principal": self.amount_input,
            "term_years": self.duration_input,
            "fees": self.fees_input,
        }

    def apply_theme(self):
        t = self.theme_manager
        self.setStyleSheet(f"""
            QWidget {{ background-color: {t.get_color('bg_primary')}; color: {t.get_color('text_primary')}; }}
            QLineEdit {{
                background-color: {t.get_color('input_bg')};
                border: 1px solid {t.get_color('border')};
                border-radius: 6px;
                padding: 6px;
            }}
            QPushButton {{
                background-color: {t.get_color('accent')};
                color: white;
                border-radius: 6px;
                padding: 6px 14px;
                font-weight: 600;
            }}
            QPushButton:hover {{ background-color: {t.get_color('accent_hover')}; }}
        """)
        self.title_label.setStyleSheet(f"font-size: 22px; font-weight: bold; color: {t.get_color('accent')};")
        self.error_label.setStyleSheet(f"""
            background-color: {t.get_color('danger_bg')};
            color: {t.get_color('danger')};
            border: 1px solid {t.get_color('danger_border')};
            border-radius: 6px;
            padding: 8px;
        """)
        panel = f"background-color: {t.get_color('bg_secondary')}; border-radius: 8px;"
        self.results_frame.setStyleSheet(panel)
        self.comparison_frame.setStyleSheet(panel)
        self.monthly_label.setStyleSheet(f"font-size: 18px; font-weight: bold; color: {t.get_color('highlight')};")
        self.fees_note_label.setStyleSheet(f"font-size: 11px; color: {t.get_color('text_secondary')};")
        self.comparison_title.setStyleSheet("font-size: 16px; font-weight: 600;")
        self.comparison_count.setStyleSheet(f"color: {t.get_color('text_secondary')};")
        self.refresh_comparison()

    def on_amount_edited(self, text):
        """Re-group the loan amount with commas while the user types."""
        formatted = format_number_with_commas(text)
        if formatted == text:
            return
        cursor = self.amount_input.cursorPosition()
        self.amount_input.setText(formatted)
        self.amount_input.setCursorPosition(adjust_cursor(text, formatted, cursor))

    def calculate(self):
        self.controller.calculate(
            self.rate_input.text(),
            self.amount_input.text(),
            self.duration_input.text(),
            self.fees_input.text(),
        )

    def add_to_comparison(self):
        result = self.controller.add_to_comparison()
        if result:
            self.hide_error()

    def show_results(self, inputs, result):
        self.hide_error()
        self.monthly_label.setText(format_currency(result.monthly_payment))
        self.fees_note_label.setText("(includes fees)" if self.controller.state.shows_fees_note() else "")
        self.interest_label.setText(format_currency(result.total_interest))
        self.total_label.setText(format_currency(result.total_amount))
        self.results_frame.setVisible(True)

    def show_error(self, message, field=None):
        self.error_label.setText(message)
        self.error_label.setVisible(True)
        self.results_frame.setVisible(False)

        field_input = self._field_inputs().get(field)
        if field_input is not None:
            field_input.setFocus()
            field_input.selectAll()

    def hide_error(self):
        self.error_label.clear()
        self.error_label.setVisible(False)

    def refresh_comparison(self):
        """Redraw the comparison table from the store."""
        if not self.controller.comparison_visible():
            self.comparison_frame.setVisible(False)
            self.comparison_table.setRowCount(0)
            return

        frame = self.controller.store.to_frame()
        self.comparison_frame.setVisible(True)
        self.comparison_count.setText(format_comparison_count(len(frame)))
        self.comparison_table.setRowCount(len(frame))

        t = self.theme_manager
        for row, entry in enumerate(frame.itertuples(index=False)):
            cells = [
                (format_rate(entry.interest_rate), None),
                (format_currency(entry.principal), None),
                (format_years(entry.term_years), None),
                (format_currency(entry.monthly_payment), t.get_color('highlight')),
                (format_currency(entry.total_interest), t.get_color('highlight')),
                (format_currency(entry.total_amount), t.get_color('total')),
            ]
            for col, (text, color) in enumerate(cells):
                item = QTableWidgetItem(text)
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                if color:
                    item.setForeground(QColor(color))
                self.comparison_table.setItem(row, col, item)

            remove_btn = QPushButton("Remove")
            remove_btn.setStyleSheet(f"background-color: {t.get_color('danger')}; color: white;")
            entry_id = int(entry.id)
            remove_btn.clicked.connect(lambda checked=False, eid=entry_id: self.controller.remove_from_comparison(eid))
            self.comparison_table.setCellWidget(row, len(cells), remove_btn)

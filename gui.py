"""
Main file that controls GUI
"""
import os
import sys

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QApplication,
    QCheckBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from file_analysis import analyze_file
from huffman_errors import HuffmanError
from HUF_compressor import HUFCompressor

BUTTON_STYLE = """
    font-size: 15px;
    color: white;
    font-weight: 500;
    background-color: {color};
    border-radius: 10px;
    """
LABEL_STYLE = """
    font-size: 15px;
    color: black;
    font-weight: 500;
    """


def free_output_path(path: str) -> str:
    """Appends .out until the path does not name an existing file."""
    while os.path.exists(path):
        path += ".out"
    return path


class MainWindow(QMainWindow):
    """
    class controls main window
    """

    def __init__(self):
        super().__init__()
        self.setFixedSize(QSize(800, 750))
        self.setWindowTitle("Huffman File Compressor")

        self.central_widget = QWidget()
        self.layout = QVBoxLayout()
        self.layout.setContentsMargins(40, 30, 40, 30)
        self.central_widget.setStyleSheet(
            """
            background-color: #E8EEF2;
            """
        )

        self.name = QLabel("Huffman compressor")
        self.name.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.name.setStyleSheet(
            """
            font-size: 35px;
            color: #0E103D;
            font-weight: 700;
        """
        )
        self.layout.addWidget(self.name)

        self.caption = QLabel("Choose a file to compress or a .huf file to restore:")
        self.caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.caption.setStyleSheet(
            """
            font-size: 20px;
            color: black;
            font-weight: 600;
            """
        )
        self.layout.addWidget(self.caption)

        self.pick_button = self._add_button("Pick a file", "#0E103D", QSize(400, 60))
        self.pick_button.clicked.connect(self.pick_file)

        self.selected_file = None
        self.file_label = QLabel("No file selected")
        self.file_label.setStyleSheet(LABEL_STYLE)
        self.file_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.layout.addWidget(self.file_label)

        self.progress_box = QCheckBox("Show progress in console")
        self.progress_box.setChecked(True)
        self.layout.addWidget(self.progress_box)

        self.compress_button = self._add_button("Compress", "#0E103D", QSize(200, 60))
        self.compress_button.clicked.connect(self.compress_file)

        self.decompress_button = self._add_button("Decompress", "#3590F3", QSize(200, 60))
        self.decompress_button.clicked.connect(self.decompress_file)

        self.analyze_button = self._add_button("Analyze", "#3590F3", QSize(200, 60))
        self.analyze_button.clicked.connect(self.analyze_file)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet(LABEL_STYLE)
        self.status_label.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.status_label.setWordWrap(True)
        self.layout.addWidget(self.status_label)

        self.central_widget.setLayout(self.layout)
        self.setCentralWidget(self.central_widget)

    def _add_button(self, text: str, color: str, size: QSize) -> QPushButton:
        button = QPushButton(text)
        button.setStyleSheet(BUTTON_STYLE.format(color=color))
        button.setFixedSize(size)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        button_layout.addWidget(button)
        button_layout.addStretch()
        self.layout.addLayout(button_layout)
        return button

    def _compressor(self) -> HUFCompressor:
        return HUFCompressor(show_progress=self.progress_box.isChecked())

    def pick_file(self):
        """
        function handles picking files
        """
        dialog = QFileDialog()
        dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        if dialog.exec():
            files = dialog.selectedFiles()
            self.selected_file = files[0]
            self.file_label.setText(f"Selected: {os.path.basename(self.selected_file)}")
            self.status_label.setText("")

    def compress_file(self):
        """
        function handles file compression, output is <file>.huf
        """
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file to compress, select it first")
            return

        output_file = self.selected_file + ".huf"
        try:
            stats = self._compressor().compress_file(self.selected_file, output_file)
        except OSError as e:
            QMessageBox.warning(self, "Error", str(e))
            return
        self.status_label.setText(f"Saved as {output_file}\n{stats.summary()}")

    def decompress_file(self):
        """
        function handles file decompression of a .huf file
        """
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file to decompress, select it first")
            return

        base, ext = os.path.splitext(self.selected_file)
        output_file = base if ext == ".huf" else self.selected_file + ".out"
        output_file = free_output_path(output_file)
        try:
            restored = self._compressor().decompress_file(self.selected_file, output_file)
        except (HuffmanError, OSError) as e:
            QMessageBox.warning(self, "Error", f"Cannot decompress: {e}")
            return
        self.status_label.setText(f"Restored {restored} bytes to {output_file}")

    def analyze_file(self):
        """
        function shows the analysis report of the selected file
        """
        if not self.selected_file:
            QMessageBox.warning(self, "Error", "No file to analyze, select it first")
            return
        try:
            report = analyze_file(self.selected_file)
        except OSError as e:
            QMessageBox.warning(self, "Error", str(e))
            return
        self.status_label.setText(report.report())


if __name__ == "__main__":
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())

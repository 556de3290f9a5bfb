"""
Main entry point for the text-diff application.

This module handles:
- Command line argument parsing
- Logging configuration
- Headless comparison and export
- Theme and style setup
- Main window creation
- Exception handling
"""

from __future__ import annotations

import argparse
import faulthandler
import logging
import os
import signal
import sys
import traceback
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, List, TYPE_CHECKING

from textdiff import __version__
from textdiff.core.diff.line_set_diff import LineSetDiffEngine
from textdiff.core.models import ExportFormat, TextDiffError
from textdiff.services.exporter import ResultExporter
from textdiff.services.file_io import FileIOService
from textdiff.services.settings import SettingsManager, Theme

if TYPE_CHECKING:
    from PyQt6.QtGui import QPalette
    from PyQt6.QtWidgets import QApplication


# =============================================================================
# Constants
# =============================================================================

APP_NAME = "text-diff"
APP_VERSION = __version__
APP_ORGANIZATION = "TextDiff"

LOGS_DIR = Path(
    os.environ.get('XDG_STATE_HOME', os.path.expanduser('~/.local/state'))
) / 'textdiff' / 'logs'


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class CommandLineArgs:
    """Parsed command line arguments."""
    left_path: Optional[str] = None
    right_path: Optional[str] = None
    output_path: Optional[str] = None
    export_format: Optional[ExportFormat] = None
    no_gui: bool = False
    theme: Optional[Theme] = None
    config_file: Optional[str] = None
    log_level: str = "INFO"
    reset_settings: bool = False
    debug: bool = False

    @property
    def headless(self) -> bool:
        return self.no_gui or self.output_path is not None


# =============================================================================
# Logging Setup
# =============================================================================

class LogFormatter(logging.Formatter):
    """Custom log formatter with colors for console."""

    COLORS = {
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        if self.use_colors:
            color = self.COLORS.get(record.levelno, '')
            return f"{color}{formatted}{self.RESET}"

        return formatted


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    stream=None
) -> logging.Logger:
    """
    Configure application logging.

    Args:
        level: Log level string
        log_file: Optional file path for logging
        stream: Console stream (stdout by default)

    Returns:
        Root logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    console_stream = stream or sys.stdout
    console_handler = logging.StreamHandler(console_stream)
    console_handler.setLevel(numeric_level)
    # Colors only when the handler's own stream is a terminal
    is_terminal = hasattr(console_stream, 'isatty') and console_stream.isatty()
    console_handler.setFormatter(LogFormatter(use_colors=is_terminal))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(LogFormatter(use_colors=False))
        root_logger.addHandler(file_handler)

    return root_logger


# =============================================================================
# Exception Handling
# =============================================================================

class ExceptionHandler:
    """
    Global exception handler for unhandled exceptions.

    Logs the exception and shows an error dialog when the GUI is running.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self._app: Optional[QApplication] = None

    def set_application(self, app: QApplication) -> None:
        """Set the application instance for error dialogs."""
        self._app = app

    def handle_exception(
        self,
        exc_type: type,
        exc_value: BaseException,
        exc_tb
    ) -> None:
        """Handle an unhandled exception."""
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_tb)
            return

        self.logger.critical(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_tb)
        )

        if self._app is not None:
            tb_text = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
            self._show_error_dialog(exc_type, exc_value, tb_text)

    def _show_error_dialog(
        self,
        exc_type: type,
        exc_value: BaseException,
        traceback_text: str
    ) -> None:
        """Show error dialog to user."""
        from PyQt6.QtWidgets import QMessageBox

        dialog = QMessageBox()
        dialog.setIcon(QMessageBox.Icon.Critical)
        dialog.setWindowTitle("Application Error")
        dialog.setText(f"An unexpected error occurred:\n\n{exc_type.__name__}: {exc_value}")
        dialog.setDetailedText(traceback_text)
        dialog.setStandardButtons(QMessageBox.StandardButton.Ok)
        dialog.exec()


# =============================================================================
# Command Line Parsing
# =============================================================================

def parse_arguments(args: Optional[List[str]] = None) -> CommandLineArgs:
    """
    Parse command line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Show the lines that appear in only one of two text files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                               Open the window
  %(prog)s a.txt b.txt                   Compare two files in the window
  %(prog)s a.txt b.txt --no-gui          Print the differing lines
  %(prog)s a.txt b.txt -o diff.json      Export the differing lines as JSON
        """
    )

    parser.add_argument('left', nargs='?', help='First file to compare')
    parser.add_argument('right', nargs='?', help='Second file to compare')

    # Headless operation
    parser.add_argument(
        '-o', '--output',
        help='Export the differences to this file without opening the window'
    )
    parser.add_argument(
        '-f', '--format',
        choices=['text', 'csv', 'json'],
        default=None,
        help='Export format (default: inferred from the output extension)'
    )
    parser.add_argument(
        '--no-gui',
        action='store_true',
        help='Print the differences to stdout instead of opening the window'
    )

    # Display options
    parser.add_argument(
        '--theme',
        choices=[theme.value for theme in Theme],
        default=None,
        help='Application theme'
    )

    # Configuration
    parser.add_argument('-c', '--config', help='Settings file path')
    parser.add_argument(
        '--reset-settings',
        action='store_true',
        help='Reset all settings to defaults'
    )

    # Logging
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help='Log level'
    )

    parser.add_argument('--version', action='version', version=f'{APP_NAME} {APP_VERSION}')

    parsed = parser.parse_args(args)

    if (parsed.output or parsed.no_gui) and not (parsed.left and parsed.right):
        parser.error("two files are required with --output or --no-gui")

    result = CommandLineArgs()
    result.left_path = parsed.left
    result.right_path = parsed.right
    result.output_path = parsed.output
    result.no_gui = parsed.no_gui
    result.config_file = parsed.config
    result.reset_settings = parsed.reset_settings
    result.debug = parsed.debug

    if parsed.format:
        result.export_format = ExportFormat.from_string(parsed.format)

    if parsed.theme:
        result.theme = Theme.from_string(parsed.theme)

    if parsed.debug or parsed.verbose:
        result.log_level = 'DEBUG'
    else:
        result.log_level = parsed.log_level

    return result


# =============================================================================
# Headless Mode
# =============================================================================

def run_headless(args: CommandLineArgs, out=None, err=None) -> int:
    """
    Compare two files without a window.

    Prints the differing lines, or exports them when an output path is given.

    Returns:
        Exit code (0 for success, 1 on read or export failure)
    """
    out = out or sys.stdout
    err = err or sys.stderr

    file_io = FileIOService()
    try:
        left_lines = file_io.read_lines(args.left_path)
        right_lines = file_io.read_lines(args.right_path)
    except TextDiffError as e:
        logging.error(f"Reading failed: {e}")
        print(f"Error while reading file!\n{e}", file=err)
        return 1

    result = LineSetDiffEngine().compare(left_lines, right_lines)
    logging.info(result.summary())

    if args.output_path is None:
        for line in result.lines:
            print(line, file=out)
        return 0

    try:
        ResultExporter(file_io).export(result.lines, args.export_format, args.output_path)
    except TextDiffError as e:
        logging.error(f"Export failed: {e}")
        print(f"Error while exporting!\n{e}", file=err)
        return 1

    return 0


# =============================================================================
# Application Setup
# =============================================================================

def setup_application(args: CommandLineArgs) -> QApplication:
    """
    Create and configure the QApplication.

    Args:
        args: Parsed command line arguments

    Returns:
        Configured QApplication instance
    """
    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv)

    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setQuitOnLastWindowClosed(True)

    return app


def setup_settings(args: CommandLineArgs) -> SettingsManager:
    """
    Set up application settings.

    Args:
        args: Parsed command line arguments

    Returns:
        Settings manager for the chosen settings file
    """
    manager = SettingsManager(Path(args.config_file) if args.config_file else None)

    if args.reset_settings:
        logging.info("Resetting settings to defaults")
        manager.reset()

    if args.theme is not None:
        manager.settings.ui.theme = args.theme

    return manager


# RGB values per palette slot for the Fusion style
THEME_COLORS = {
    Theme.DARK: {
        'window': (45, 45, 45),
        'base': (35, 35, 35),
        'tooltip_base': (45, 45, 45),
        'text': (212, 212, 212),
        'highlight': (42, 130, 218),
        'highlighted_text': (0, 0, 0),
        'disabled': (127, 127, 127),
    },
    Theme.LIGHT: {
        'window': (240, 240, 240),
        'base': (255, 255, 255),
        'tooltip_base': (255, 255, 255),
        'text': (0, 0, 0),
        'highlight': (0, 120, 215),
        'highlighted_text': (255, 255, 255),
        'disabled': (160, 160, 160),
    },
}


def setup_theme(app: QApplication, theme: Theme) -> None:
    """
    Set up application theme.

    Args:
        app: QApplication instance
        theme: Theme to apply
    """
    from PyQt6.QtWidgets import QStyleFactory

    logging.info(f"Setting up theme: {theme}")

    app.setStyle(QStyleFactory.create("Fusion"))

    if theme in THEME_COLORS:
        app.setPalette(build_palette(THEME_COLORS[theme]))
    else:
        app.setPalette(app.style().standardPalette())


def build_palette(colors: dict) -> QPalette:
    """Build a palette from a THEME_COLORS entry."""
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QColor, QPalette

    window = QColor(*colors['window'])
    text = QColor(*colors['text'])
    highlight = QColor(*colors['highlight'])
    disabled = QColor(*colors['disabled'])

    palette = QPalette()
    roles = {
        QPalette.ColorRole.Window: window,
        QPalette.ColorRole.WindowText: text,
        QPalette.ColorRole.Base: QColor(*colors['base']),
        QPalette.ColorRole.AlternateBase: window,
        QPalette.ColorRole.ToolTipBase: QColor(*colors['tooltip_base']),
        QPalette.ColorRole.ToolTipText: text,
        QPalette.ColorRole.Text: text,
        QPalette.ColorRole.Button: window,
        QPalette.ColorRole.ButtonText: text,
        QPalette.ColorRole.BrightText: QColor(Qt.GlobalColor.red),
        QPalette.ColorRole.Link: highlight,
        QPalette.ColorRole.Highlight: highlight,
        QPalette.ColorRole.HighlightedText: QColor(*colors['highlighted_text']),
    }
    for role, color in roles.items():
        palette.setColor(role, color)

    for role in (QPalette.ColorRole.WindowText, QPalette.ColorRole.Text, QPalette.ColorRole.ButtonText):
        palette.setColor(QPalette.ColorGroup.Disabled, role, disabled)

    return palette


# =============================================================================
# Main Window Creation
# =============================================================================

def create_main_window(args: CommandLineArgs, settings_manager: SettingsManager):
    """
    Create and configure the main window.

    Args:
        args: Parsed command line arguments
        settings_manager: Settings shared with the window

    Returns:
        MainWindow instance
    """
    from textdiff.ui.main_window import MainWindow

    window = MainWindow(settings_manager)

    if args.left_path and args.right_path:
        window.compare_files(args.left_path, args.right_path)

    return window


# =============================================================================
# Signal Handlers
# =============================================================================

def setup_signal_handlers():
    """
    Set up Unix signal handlers.

    Returns:
        The timer that lets Python handle signals while Qt runs (keep a reference)
    """
    if sys.platform == 'win32':
        return None

    from PyQt6.QtCore import QTimer

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    timer = QTimer()
    timer.timeout.connect(lambda: None)
    timer.start(500)
    return timer


def _signal_handler(signum, frame) -> None:
    """Handle Unix signals."""
    from PyQt6.QtWidgets import QApplication

    logging.info(f"Received signal {signum}, shutting down...")
    QApplication.quit()


# =============================================================================
# Main Function
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """
    Application main entry point.

    Returns:
        Exit code (0 for success)
    """
    faulthandler.enable()

    args = parse_arguments(argv)

    log_file = LOGS_DIR / f"{APP_NAME}_{datetime.now():%Y%m%d}.log" if args.debug else None
    # Keep stdout clean for printed differences
    logger = setup_logging(args.log_level, log_file, sys.stderr if args.headless else None)
    logger.info(f"Starting {APP_NAME} v{APP_VERSION}")

    if args.headless:
        return run_headless(args)

    from PyQt6.QtWidgets import QApplication, QMessageBox

    exception_handler = ExceptionHandler(logger)
    sys.excepthook = exception_handler.handle_exception

    try:
        app = setup_application(args)
        exception_handler.set_application(app)

        settings_manager = setup_settings(args)
        setup_theme(app, settings_manager.settings.ui.theme)
        signal_timer = setup_signal_handlers()

        main_window = create_main_window(args, settings_manager)
        main_window.show()

        logger.info("Application started successfully")

        exit_code = app.exec()

        if signal_timer is not None:
            signal_timer.stop()

        logger.info(f"Application exiting with code {exit_code}")
        return exit_code

    except Exception as e:
        logger.critical(f"Fatal error during startup: {e}", exc_info=True)

        if QApplication.instance():
            QMessageBox.critical(
                None,
                "Fatal Error",
                f"The application failed to start:\n\n{e}\n\n"
                "Please check the logs for more information."
            )
        return 1


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == '__main__':
    sys.exit(main())

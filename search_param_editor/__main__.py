"""
Entry point for the Search Parameter Editor.

Usage:
    python -m search_param_editor [TOOL] [--view-only]
    python -m search_param_editor --list
"""

import argparse
import dataclasses
import sys
import traceback


def _check_dependencies():
    """Verify required packages are installed."""
    missing = []
    try:
        import PySide6  # noqa: F401
    except ImportError:
        missing.append("PySide6")

    if missing:
        print(
            f"Missing required packages: {', '.join(missing)}\n"
            f"Install with: pip install {' '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)


def _exception_hook(exc_type, exc_value, exc_tb):
    """Global exception handler to prevent silent crashes."""
    msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
    print(f"Unhandled exception:\n{msg}", file=sys.stderr)

    # Try to show a dialog if Qt is available
    try:
        from PySide6.QtWidgets import QMessageBox, QApplication
        app = QApplication.instance()
        if app is not None:
            QMessageBox.critical(
                None, "Unhandled Error",
                f"An unexpected error occurred:\n\n"
                f"{exc_type.__name__}: {exc_value}\n\n"
                f"See console for full traceback.",
            )
    except Exception as hook_exc:
        print(f"Could not show the error dialog: {hook_exc}", file=sys.stderr)


def _parse_args(argv):
    from . import APP_NAME, APP_VERSION
    from .tool_registry import available_tools

    parser = argparse.ArgumentParser(
        prog="search_param_editor",
        description=f"{APP_NAME} v{APP_VERSION}: edit the tool-specific "
                    f"settings of a search engine.",
    )
    parser.add_argument(
        "tool", nargs="?", default="Comet",
        help=f"search engine to edit ({', '.join(available_tools())}); "
             f"default: Comet",
    )
    parser.add_argument(
        "--view-only", action="store_true",
        help="show the settings without allowing changes",
    )
    parser.add_argument(
        "--list", action="store_true",
        help="list the available search engines and exit",
    )
    return parser.parse_args(argv)


def format_parameters(parameters) -> str:
    """One ``name = value`` line per attribute of a parameter object."""
    lines = [type(parameters).__name__]
    for f in dataclasses.fields(parameters):
        lines.append(f"  {f.name} = {getattr(parameters, f.name)}")
    return "\n".join(lines)


def main(argv=None):
    """Open the parameter dialog of one search engine."""
    _check_dependencies()

    # Set exception hook before anything else
    sys.excepthook = _exception_hook

    from .tool_registry import available_tools, get_schema

    args = _parse_args(sys.argv[1:] if argv is None else argv)
    if args.list:
        print("\n".join(available_tools()))
        return 0
    try:
        schema = get_schema(args.tool)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        return 2

    from PySide6.QtWidgets import QApplication
    from PySide6.QtGui import QFont, QFontDatabase

    from .constants import FONT_FAMILIES
    from .theme import get_dark_stylesheet
    from .gui_parameters_dialog import AlgorithmParametersDialog

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setStyle("Fusion")

    # Set font: first installed family of the fallback chain
    font = QFont()
    for family in FONT_FAMILIES:
        if QFontDatabase.hasFamily(family):
            font.setFamily(family)
            break
    font.setPointSize(10)
    app.setFont(font)

    # Apply dark stylesheet
    app.setStyleSheet(get_dark_stylesheet())

    dialog = AlgorithmParametersDialog(schema, editable=not args.view_only)
    dialog.exec()

    if dialog.is_cancelled():
        print("Cancelled, no parameters saved.", file=sys.stderr)
        return 1
    print(format_parameters(dialog.get_parameters()))
    return 0


if __name__ == "__main__":
    sys.exit(main())

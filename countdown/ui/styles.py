from __future__ import annotations

from PyQt6.QtWidgets import QApplication


LIGHT_PALETTE = {
    "window": "#f4f1ee",
    "text": "#2f2a26",
    "muted": "#867b71",
    "chip": "#e6dfd8",
    "chip_hover": "#dcd2c9",
    "chip_selected": "#f5e9de",
    "accent": "#eb8f60",
    "accent_hover": "#de8050",
    "accent_pressed": "#cb6f40",
    "accent_disabled": "#efc2aa",
    "header": "#eb8f60",
}

DARK_PALETTE = {
    "window": "#1f1c1a",
    "text": "#f1ebe5",
    "muted": "#9c9188",
    "chip": "#3a3430",
    "chip_hover": "#463f3a",
    "chip_selected": "#5a4d44",
    "accent": "#eb8f60",
    "accent_hover": "#de8050",
    "accent_pressed": "#cb6f40",
    "accent_disabled": "#6b4a39",
    "header": "#2c2724",
}

THEME_TEMPLATE = """
QWidget {{
    background: {window};
    color: {text};
    font-size: 13px;
}}

QMainWindow {{
    background: {window};
}}

QLabel {{
    background: transparent;
}}

QLabel#Heading {{
    background: {header};
    color: #ffffff;
    font-size: 18px;
    font-weight: 700;
    padding: 16px;
}}

QLabel#MutedText {{
    color: {muted};
}}

QPushButton#PrimaryButton {{
    background: {accent};
    color: #ffffff;
    border: none;
    border-radius: 22px;
    padding: 10px 24px;
    min-height: 24px;
    font-size: 14px;
    font-weight: 600;
}}

QPushButton#PrimaryButton:hover {{
    background: {accent_hover};
}}

QPushButton#PrimaryButton:pressed {{
    background: {accent_pressed};
}}

QPushButton#PrimaryButton:disabled {{
    background: {accent_disabled};
}}

QListWidget {{
    background: transparent;
    border: none;
}}

QListWidget::item {{
    background: {chip};
    border-radius: 4px;
    padding: 8px;
    margin-right: 8px;
}}

QListWidget::item:hover {{
    background: {chip_hover};
}}

QListWidget::item:selected {{
    background: {chip_selected};
    color: {text};
}}

QListWidget:disabled {{
    color: {muted};
}}
"""

PALETTES = {"light": LIGHT_PALETTE, "dark": DARK_PALETTE}


def stylesheet(theme: str) -> str:
    return THEME_TEMPLATE.format(**PALETTES[theme])


def apply_theme(app: QApplication, theme: str = "light") -> None:
    app.setStyleSheet(stylesheet(theme))

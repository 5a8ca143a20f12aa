"""
Centralized Textual CSS for the terminal UI.
"""

from videoconv.tui.theme import (
    BLACK,
    CHARCOAL_GRAY,
    CORAL_PINK,
    DARK_GRAY,
    MUTED_WHITE,
    OFF_WHITE,
    SLATE,
    TEAL_GREEN,
)


APP_CSS = """
Screen {
    background: %(BLACK)s;
    color: %(OFF_WHITE)s;
}
#root {
    height: 1fr;
    layout: vertical;
    background: %(DARK_GRAY)s;
}
#actions {
    height: auto;
    border: heavy %(SLATE)s;
    margin: 1 1 0 1;
    padding: 1;
    background: %(CHARCOAL_GRAY)s;
}
#panes {
    height: 1fr;
    margin: 0 1 1 1;
}
#drop-pane, #request-pane, #progress-pane, #log-pane {
    border: solid %(SLATE)s;
    background: %(CHARCOAL_GRAY)s;
    padding: 1;
    margin-right: 1;
}
#drop-pane {
    width: 34;
    border: dashed %(MUTED_WHITE)s;
}
#request-pane {
    width: 32;
}
#progress-pane {
    width: 24;
}
#log-pane {
    margin-right: 0;
    width: 1fr;
}
#drop-help, #format-badges {
    color: %(MUTED_WHITE)s;
    margin-bottom: 1;
}
#banner {
    height: auto;
    margin-top: 1;
}
#banner.-error {
    color: %(CORAL_PINK)s;
    text-style: bold;
}
#banner.-success {
    color: %(TEAL_GREEN)s;
    text-style: bold;
}
#target-select {
    margin: 1 0;
}
#progress-text, #state-text {
    color: %(TEAL_GREEN)s;
}
.label {
    color: %(OFF_WHITE)s;
    text-style: bold;
}
Button {
    background: %(BLACK)s;
    color: %(OFF_WHITE)s;
    border: solid %(SLATE)s;
    margin-right: 1;
}
Button.-primary {
    color: %(BLACK)s;
    background: %(OFF_WHITE)s;
}
Button#reset {
    border: solid %(CORAL_PINK)s;
    color: %(CORAL_PINK)s;
}
""" % {
    "BLACK": BLACK,
    "DARK_GRAY": DARK_GRAY,
    "CHARCOAL_GRAY": CHARCOAL_GRAY,
    "SLATE": SLATE,
    "MUTED_WHITE": MUTED_WHITE,
    "TEAL_GREEN": TEAL_GREEN,
    "CORAL_PINK": CORAL_PINK,
    "OFF_WHITE": OFF_WHITE,
}


PICK_MODAL_CSS = """
FilePickModal {
    align: center middle;
    background: %(BLACK)s;
}
#modal-root {
    width: 96;
    height: 90%%;
    border: heavy %(SLATE)s;
    background: %(CHARCOAL_GRAY)s;
    padding: 1 2;
    layout: vertical;
}
#modal-title {
    color: %(OFF_WHITE)s;
    text-style: bold;
    margin-bottom: 1;
}
#modal-help {
    color: %(MUTED_WHITE)s;
    margin-bottom: 1;
}
#source-tree {
    height: 1fr;
    border: round %(SLATE)s;
    margin-bottom: 1;
}
.field {
    margin-bottom: 1;
}
#modal-error {
    color: %(CORAL_PINK)s;
    height: 2;
}
#modal-actions {
    dock: bottom;
    height: auto;
}
Button {
    margin-right: 1;
    color: %(OFF_WHITE)s;
    border: solid %(SLATE)s;
    background: %(BLACK)s;
}
Button.-primary {
    color: %(BLACK)s;
    background: %(OFF_WHITE)s;
}
""" % {
    "BLACK": BLACK,
    "CHARCOAL_GRAY": CHARCOAL_GRAY,
    "CORAL_PINK": CORAL_PINK,
    "MUTED_WHITE": MUTED_WHITE,
    "OFF_WHITE": OFF_WHITE,
    "SLATE": SLATE,
}

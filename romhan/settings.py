#!/usr/bin/env python3
import gi
import logging
import os
import signal

gi.require_version("Gtk", "3.0")
from gi.repository import Gtk, Gdk

from romhan import __version__
from romhan.config import (
    CONFIG_FILE, USER_DICT_FILE, Config, ToggleKey,
    load_config, save_config,
)
from romhan.keys import keyval_to_key_name
from romhan.user_dict import write_template

logger = logging.getLogger(__name__)

LANGUAGE_LABELS = [
    ("korean", "Korean keyboard profile (romhan-ko)"),
    ("japanese", "Japanese keyboard profile (romhan-ja)"),
]

STANDALONE_MODIFIERS = frozenset([
    Gdk.KEY_Shift_L, Gdk.KEY_Shift_R,
    Gdk.KEY_Control_L, Gdk.KEY_Control_R,
    Gdk.KEY_Alt_L, Gdk.KEY_Alt_R,
    Gdk.KEY_Meta_L, Gdk.KEY_Meta_R,
    Gdk.KEY_Super_L, Gdk.KEY_Super_R,
    Gdk.KEY_Caps_Lock, Gdk.KEY_ISO_Level3_Shift,
])


def toggle_key_from_event(event):
    """ToggleKey for a Gdk key press, or None when the key cannot be configured."""
    key_name = keyval_to_key_name(event.keyval)
    if key_name is None:
        return None
    return ToggleKey(
        key_name,
        shift=bool(event.state & Gdk.ModifierType.SHIFT_MASK),
        ctrl=bool(event.state & Gdk.ModifierType.CONTROL_MASK),
        alt=bool(event.state & Gdk.ModifierType.MOD1_MASK),
    )


def framed(title, child):
    frame = Gtk.Frame(label=title)
    child.set_border_width(8)
    frame.add(child)
    return frame


class KeyCaptureDialog(Gtk.Dialog):
    def __init__(self, parent):
        super().__init__(title="Toggle Key", transient_for=parent, modal=True)
        self.add_button("Cancel", Gtk.ResponseType.CANCEL)
        self.set_default_size(320, 140)
        self.captured = None

        self.prompt = Gtk.Label(label="Press the new toggle key with its modifiers.\n"
                                      "Allowed keys: A-Z, 0-9, Space, Hangul")
        self.prompt.set_justify(Gtk.Justification.CENTER)
        self.get_content_area().pack_start(self.prompt, True, True, 12)

        self.connect("key-press-event", self.on_key_press)
        self.show_all()

    def on_key_press(self, widget, event):
        if event.keyval in STANDALONE_MODIFIERS:
            return False

        toggle_key = toggle_key_from_event(event)
        if toggle_key is None:
            self.prompt.set_text(f"'{Gdk.keyval_name(event.keyval)}' cannot be used.\n"
                                 "Allowed keys: A-Z, 0-9, Space, Hangul")
            return True

        self.captured = toggle_key
        self.response(Gtk.ResponseType.OK)
        return True


class SettingsWindow(Gtk.Window):
    def __init__(self, config_path=CONFIG_FILE):
        super().__init__(title="Romhan Settings")
        self.set_default_size(480, 0)
        self.set_border_width(12)
        self.set_resizable(False)

        self.config_path = config_path
        self.toggle_key = ToggleKey()

        grid = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        grid.pack_start(framed("Hangul Toggle Key", self.build_toggle_row()), False, False, 0)
        grid.pack_start(framed("Keyboard Profiles", self.build_language_list()), False, False, 0)
        grid.pack_start(framed("User Dictionary", self.build_dict_row()), False, False, 0)
        grid.pack_end(self.build_action_row(), False, False, 0)
        self.add(grid)

        self.load_config()

    def build_toggle_row(self):
        row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=8)
        self.toggle_label = Gtk.Label(xalign=0)
        row.pack_start(self.toggle_label, True, True, 0)

        change = Gtk.Button(label="Change...")
        change.connect("clicked", self.on_change_key)
        row.pack_end(change, False, False, 0)
        return row

    def build_language_list(self):
        column = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        self.language_checks = {}
        for name, label in LANGUAGE_LABELS:
            self.language_checks[name] = Gtk.CheckButton(label=label)
            column.pack_start(self.language_checks[name], False, False, 0)
        return column

    def build_dict_row(self):
        row = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=4)
        self.dict_entry = Gtk.Entry(placeholder_text=USER_DICT_FILE)
        row.pack_start(self.dict_entry, True, True, 0)

        for label, handler in [("Browse...", self.on_browse), ("Create", self.on_create_dict)]:
            button = Gtk.Button(label=label)
            button.connect("clicked", handler)
            row.pack_start(button, False, False, 0)
        return row

    def build_action_row(self):
        row = Gtk.ButtonBox(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        row.set_layout(Gtk.ButtonBoxStyle.END)

        about = Gtk.Button(label="About")
        about.connect("clicked", self.on_about)
        row.add(about)
        row.set_child_secondary(about, True)

        for label, handler in [
            ("Cancel", lambda w: self.destroy()),
            ("Apply", lambda w: self.save_to_config()),
            ("OK", self.on_ok),
        ]:
            button = Gtk.Button(label=label)
            button.connect("clicked", handler)
            row.add(button)
        return row

    def load_config(self):
        config = load_config(self.config_path)
        self.set_toggle_key(config.toggle_key)
        for name, check in self.language_checks.items():
            check.set_active(config.languages.get(name, False))
        self.dict_entry.set_text(config.user_dict_path or "")

    def set_toggle_key(self, toggle_key):
        self.toggle_key = toggle_key
        self.toggle_label.set_markup(f"<b>{toggle_key.label()}</b>")

    def current_config(self):
        return Config(
            toggle_key=self.toggle_key,
            languages={name: check.get_active() for name, check in self.language_checks.items()},
            user_dict_path=self.dict_entry.get_text().strip() or None,
        )

    def save_to_config(self):
        try:
            save_config(self.current_config(), self.config_path)
        except OSError as e:
            logger.error("Could not save %s: %s", self.config_path, e)
            self.show_message(Gtk.MessageType.ERROR, "Settings were not saved", str(e))
            return False
        logger.info("Saved settings to %s", self.config_path)
        return True

    def on_change_key(self, widget):
        dialog = KeyCaptureDialog(self)
        if dialog.run() == Gtk.ResponseType.OK and dialog.captured is not None:
            self.set_toggle_key(dialog.captured)
        dialog.destroy()

    def on_browse(self, widget):
        chooser = Gtk.FileChooserDialog(
            title="User Dictionary", transient_for=self, action=Gtk.FileChooserAction.OPEN
        )
        chooser.add_buttons("Cancel", Gtk.ResponseType.CANCEL, "Open", Gtk.ResponseType.OK)
        json_filter = Gtk.FileFilter()
        json_filter.set_name("JSON files")
        json_filter.add_pattern("*.json")
        chooser.add_filter(json_filter)
        if chooser.run() == Gtk.ResponseType.OK:
            self.dict_entry.set_text(chooser.get_filename())
        chooser.destroy()

    def on_create_dict(self, widget):
        path = os.path.expanduser(self.dict_entry.get_text().strip() or USER_DICT_FILE)
        try:
            created = write_template(path)
        except OSError as e:
            self.show_message(Gtk.MessageType.ERROR, "Dictionary was not created", str(e))
            return
        title = "Dictionary created" if created else "Dictionary already exists"
        self.show_message(Gtk.MessageType.INFO, title, path)

    def on_ok(self, widget):
        if self.save_to_config():
            self.destroy()

    def show_message(self, message_type, text, secondary):
        dialog = Gtk.MessageDialog(
            transient_for=self,
            message_type=message_type,
            buttons=Gtk.ButtonsType.OK,
            text=text,
        )
        dialog.format_secondary_text(secondary)
        dialog.run()
        dialog.destroy()

    def on_about(self, widget):
        about = Gtk.AboutDialog(transient_for=self, modal=True)
        about.set_program_name("Romhan")
        about.set_version(__version__)
        about.set_comments("Romanized Korean input for IBus.\n"
                           "After saving, choose 'Reload settings' from the input menu.")
        about.run()
        about.destroy()


def main():
    win = SettingsWindow()
    win.connect("destroy", Gtk.main_quit)
    win.show_all()

    # Ctrl+C
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    Gtk.main()


if __name__ == "__main__":
    main()
